import math
import random

import numpy as np
import pytest

from alers.mesh import Mesh, Tri
from alers.sdf import (
    MeshSDF,
    Ray,
    build_mesh_sdf,
    closest_point_on_triangle,
    find_quadrant,
    sdf_distance,
    sign,
)


def _triangle():
    return Tri(
        position=((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)),
        normal=((0.0, 0.0, 1.0),) * 3,
        tri_normal=(0.0, 0.0, 1.0),
        uv=((0.0, 0.0),) * 3,
    )


def test_sign_values():
    assert sign(2.5) == 1.0
    assert sign(-3.0) == -1.0
    assert sign(0.0) == 0.0


def test_sign_rejects_nan():
    with pytest.raises(ValueError):
        sign(math.nan)


def test_ray_position_scales_direction():
    ray = Ray((1.0, 2.0, 3.0), (0.0, 1.0, 0.0))
    assert ray.position_at(2.0) == (1.0, 4.0, 3.0)


def test_ray_position_clamps_negative_parameter():
    ray = Ray((1.0, 2.0, 3.0), (0.0, 1.0, 0.0))
    assert ray.position_at(-5.0) == (1.0, 2.0, 3.0)


def test_ray_position_clamps_to_max():
    ray = Ray((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), t_max=2.0)
    assert ray.position_at(10.0) == (2.0, 0.0, 0.0)


def test_closest_point_interior_projects_onto_plane():
    result = closest_point_on_triangle(_triangle(), (0.25, 0.25, 5.0))
    assert tuple(result) == pytest.approx((0.25, 0.25, 0.0), abs=1e-9)


@pytest.mark.parametrize(
    "point, expected",
    [
        ((-3.0, -3.0, 0.0), (0.0, 0.0, 0.0)),
        ((5.0, -1.0, 0.0), (1.0, 0.0, 0.0)),
        ((-1.0, 5.0, 2.0), (0.0, 1.0, 0.0)),
        ((0.5, -2.0, 0.0), (0.5, 0.0, 0.0)),
        ((-2.0, 0.5, 1.0), (0.0, 0.5, 0.0)),
    ],
)
def test_closest_point_vertices_and_edges(point, expected):
    result = closest_point_on_triangle(_triangle(), point)
    assert tuple(result) == pytest.approx(expected, abs=1e-9)


def test_closest_point_hypotenuse():
    result = closest_point_on_triangle(_triangle(), (2.0, 2.0, 0.0))
    assert tuple(result) == pytest.approx((0.5, 0.5, 0.0), abs=1e-9)


def test_closest_point_is_never_farther_than_any_vertex():
    rng = random.Random(7)
    tri = _triangle()
    for _ in range(200):
        point = tuple(rng.uniform(-3.0, 3.0) for _ in range(3))
        closest = closest_point_on_triangle(tri, point)
        d = math.dist(point, closest)
        for vertex in tri.position:
            assert d <= math.dist(point, vertex) + 1e-9
        assert closest[2] == pytest.approx(0.0)
        assert closest[0] >= -1e-9 and closest[1] >= -1e-9
        assert closest[0] + closest[1] <= 1.0 + 1e-9


def test_build_cube_sdf_shape_and_points():
    sdf = build_mesh_sdf(Mesh.new_cube(), 2)
    assert len(sdf.dist) == 2
    assert all(len(plane) == 2 and all(len(row) == 2 for row in plane) for plane in sdf.dist)
    assert len(sdf.points) == 8
    assert sdf.mesh_bounding_box == Mesh.new_cube().bounding_box


def test_build_cube_sdf_distances_match_points():
    sdf = build_mesh_sdf(Mesh.new_cube(), 2)
    magnitudes = []
    for (sample, nearest, d) in sdf.points:
        assert abs(d) == pytest.approx(math.dist(sample, nearest))
        magnitudes.append(abs(d))
    assert max(magnitudes) == pytest.approx(min(magnitudes))
    flat = [v for plane in sdf.dist for row in plane for v in row]
    assert flat == [p[2] for p in sdf.points]


def test_build_rejects_zero_resolution():
    with pytest.raises(ValueError):
        build_mesh_sdf(Mesh.new_cube(), 0)


def test_find_quadrant_cells():
    sdf = build_mesh_sdf(Mesh.new_cube(), 3)
    assert find_quadrant(sdf, sdf.initial) == (0, 0, 0)
    point = tuple(sdf.initial[n] + sdf.step[n] * f for n, f in enumerate((1.5, 0.5, 2.5)))
    assert find_quadrant(sdf, point) == (1, 0, 2)


def test_find_quadrant_saturates_below_grid():
    sdf = MeshSDF(
        dist=[[[0.0]]],
        mesh_bounding_box=((0.0, 0.0, 0.0), (1.0, 1.0, 1.0)),
        initial=(0.0, 0.0, 0.0),
        step=(1.0, 1.0, 1.0),
    )
    assert find_quadrant(sdf, (-4.0, -0.5, -9.0)) == (0, 0, 0)


def test_sdf_distance_with_identity_inside_box():
    sdf = build_mesh_sdf(Mesh.new_cube(), 2)
    sample = sdf.points[0][0]
    assert sdf_distance(sdf, sample, np.identity(4)) == pytest.approx(-sdf.dist[0][0][0])


def test_sdf_distance_ignores_translation():
    sdf = build_mesh_sdf(Mesh.new_cube(), 2)
    sample = sdf.points[0][0]
    moved = np.identity(4)
    moved[:3, 3] = (10.0, 20.0, 30.0)
    assert sdf_distance(sdf, sample, moved) == pytest.approx(sdf_distance(sdf, sample, np.identity(4)))