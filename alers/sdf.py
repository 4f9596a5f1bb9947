"""Signed distance fields sampled from triangle meshes, and rays to march through them."""

from __future__ import annotations

import itertools
import math
import sys
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

import numpy as np

from alers.mesh import Mesh, Tri

Vec3 = Tuple[float, float, float]

F32_MAX = 3.4028234663852886e38


def _add(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _sub(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _scale(a: Sequence[float], s: float) -> Vec3:
    return (a[0] * s, a[1] * s, a[2] * s)


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _distance(a: Sequence[float], b: Sequence[float]) -> float:
    return math.sqrt(_dot(_sub(a, b), _sub(a, b)))


def _normalize(v: Sequence[float]) -> Vec3:
    length = math.sqrt(_dot(v, v))
    if length == 0.0:
        return (math.nan, math.nan, math.nan)
    return (v[0] / length, v[1] / length, v[2] / length)


def _div(a: float, b: float) -> float:
    """IEEE-style division: a zero divisor gives an infinity or NaN."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


@dataclass
class Ray:
    """A half-line from an origin along a direction, limited to [t_min, t_max]."""

    origin: Vec3
    direction: Vec3
    t_min: float = 0.0
    t_max: float = F32_MAX

    def position_at(self, t: float) -> Vec3:
        """Point on the ray at parameter t, with t clamped to the ray's range."""
        clamped = min(max(t, self.t_min), self.t_max)
        return _add(self.origin, _scale(self.direction, clamped))


@dataclass
class MeshSDF:
    """Distances sampled on a regular grid around a mesh's bounding box."""

    dist: List[List[List[float]]]
    mesh_bounding_box: Tuple[Vec3, Vec3]
    initial: Vec3
    step: Vec3
    points: List[Tuple[Vec3, Vec3, float]] = field(default_factory=list)


def sign(x: float) -> float:
    """Return -1.0, 0.0 or 1.0 according to the sign of x; NaN is rejected."""
    if math.isnan(x):
        raise ValueError("sign of NaN is undefined")
    if x == 0.0:
        return 0.0
    return 1.0 if x > 0.0 else -1.0


def closest_point_on_triangle(triangle: Tri, point: Sequence[float]) -> Vec3:
    """Point of the triangle nearest to the given point."""
    p0, p1, p2 = triangle.position
    diff = _sub(point, p0)
    edge0 = _sub(p1, p0)
    edge1 = _sub(p2, p0)
    a00 = _dot(edge0, edge0)
    a01 = _dot(edge0, edge1)
    a11 = _dot(edge1, edge1)
    b0 = -_dot(diff, edge0)
    b1 = -_dot(diff, edge1)
    det = a00 * a11 - a01 * a01
    t0 = a01 * b1 - a11 * b0
    t1 = a01 * b0 - a00 * b1

    if t0 + t1 <= det:
        if t0 < 0.0:
            if t1 < 0.0:  # region 4
                if b0 < 0.0:
                    t1 = 0.0
                    t0 = 1.0 if -b0 >= a00 else _div(-b0, a00)
                else:
                    t0 = 0.0
                    if b1 >= 0.0:
                        t1 = 0.0
                    elif -b1 >= a11:
                        t1 = 1.0
                    else:
                        t1 = _div(-b1, a11)
            else:  # region 3
                t0 = 0.0
                if b1 >= 0.0:
                    t1 = 0.0
                elif -b1 >= a11:
                    t1 = 1.0
                else:
                    t1 = _div(-b1, a11)
        elif t1 < 0.0:  # region 5
            t1 = 0.0
            if b0 >= 0.0:
                t0 = 0.0
            elif -b0 >= a00:
                t0 = 1.0
            else:
                t0 = _div(-b0, a00)
        else:  # region 0, interior
            inv_det = _div(1.0, det)
            t0 *= inv_det
            t1 *= inv_det
    else:
        if t0 < 0.0:  # region 2
            tmp0 = a01 + b0
            tmp1 = a11 + b1
            if tmp1 > tmp0:
                numer = tmp1 - tmp0
                denom = a00 - 2.0 * a01 + a11
                if numer >= denom:
                    t0, t1 = 1.0, 0.0
                else:
                    t0 = _div(numer, denom)
                    t1 = 1.0 - t0
            else:
                t0 = 0.0
                if tmp1 <= 0.0:
                    t1 = 1.0
                elif b1 >= 0.0:
                    t1 = 0.0
                else:
                    t1 = _div(-b1, a11)
        elif t1 < 0.0:  # region 6
            tmp0 = a01 + b1
            tmp1 = a00 + b0
            if tmp1 > tmp0:
                numer = tmp1 - tmp0
                denom = a00 - 2.0 * a01 + a11
                if numer >= denom:
                    t1, t0 = 1.0, 0.0
                else:
                    t1 = _div(numer, denom)
                    t0 = 1.0 - t1
            else:
                t1 = 0.0
                if tmp1 <= 0.0:
                    t0 = 1.0
                elif b0 >= 0.0:
                    t0 = 0.0
                else:
                    t0 = _div(-b0, a00)
        else:  # region 1
            numer = a11 + b1 - a01 - b0
            if numer <= 0.0:
                t0, t1 = 0.0, 1.0
            else:
                denom = a00 - 2.0 * a01 + a11
                if numer >= denom:
                    t0, t1 = 1.0, 0.0
                else:
                    t0 = _div(numer, denom)
                    t1 = 1.0 - t0

    return _add(_add(p0, _scale(edge0, t0)), _scale(edge1, t1))


def build_mesh_sdf(mesh: Mesh, resolution: int) -> MeshSDF:
    """Sample the mesh's distance field on a resolution^3 grid.

    The grid covers the bounding box enlarged by a fifth of its size on every
    side; samples sit at cell centres.
    """
    if resolution < 1:
        raise ValueError(f"resolution must be at least 1, got {resolution}")
    low, high = mesh.bounding_box
    size = _sub(high, low)
    sdf_size = _add(size, _scale(size, 0.4))
    step = tuple(c / resolution for c in sdf_size)
    initial = _add(_sub(low, _scale(size, 0.2)), _scale(step, 0.5))

    triangles = [mesh.tri_get(n) for n in range(mesh.tri_len())]
    dist = [[[0.0] * resolution for _ in range(resolution)] for _ in range(resolution)]
    points: List[Tuple[Vec3, Vec3, float]] = []

    for i, j, k in itertools.product(range(resolution), repeat=3):
        xyz = (
            initial[0] + step[0] * i,
            initial[1] + step[1] * j,
            initial[2] + step[2] * k,
        )
        min_dist = F32_MAX
        should_flip = False
        min_point: Vec3 = (0.0, 0.0, 0.0)
        for tri in triangles:
            point = closest_point_on_triangle(tri, xyz)
            d = _distance(point, xyz)
            if min_dist > d:
                min_dist = d
                should_flip = _dot(_normalize(_sub(point, xyz)), tri.tri_normal) < 0.0
                min_point = point
        if should_flip:
            min_dist = -min_dist
        dist[i][j][k] = min_dist
        points.append((xyz, min_point, min_dist))

    return MeshSDF(
        dist=dist,
        mesh_bounding_box=mesh.bounding_box,
        initial=initial,
        step=step,
        points=points,
    )


def _to_index(value: float) -> int:
    if math.isnan(value) or value <= 0.0:
        return 0
    if math.isinf(value):
        return sys.maxsize
    return int(value)


def find_quadrant(sdf: MeshSDF, point: Sequence[float]) -> Tuple[int, int, int]:
    """Grid cell holding the point; coordinates below the grid saturate at 0."""
    offset = _sub(point, sdf.initial)
    return (
        _to_index(offset[0] / sdf.step[0]),
        _to_index(offset[1] / sdf.step[1]),
        _to_index(offset[2] / sdf.step[2]),
    )


def sdf_distance(sdf: MeshSDF, point: Sequence[float], transform) -> float:
    """Approximate distance from a point to the mesh placed by a 4x4 transform."""
    low, high = sdf.mesh_bounding_box
    point_in_sdf = tuple(min(max(point[n], low[n]), high[n]) for n in range(3))
    i, j, k = find_quadrant(sdf, point_in_sdf)
    matrix = np.asarray(transform, dtype=float)
    transformed = matrix[:3, :3] @ np.array(point_in_sdf, dtype=float)
    dori = _distance(point, tuple(float(c) for c in transformed))
    dsdf = -sdf.dist[i][j][k]
    return dori + dsdf