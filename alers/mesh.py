"""Interleaved vertex buffers, meshes and triangle access."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

import numpy as np

from alers.ids import next_id

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]

VERTEX = "position"
NORMAL = "normal"
UV = "uv"
BARYCENTRIC = "barycentric"


class VertexBuffer:
    """Flat data laid out as rows of named, fixed-width attributes."""

    def __init__(self, data, attributes):
        self.attributes: Tuple[Tuple[str, int], ...] = tuple(
            (str(name), int(size)) for name, size in attributes
        )
        if not self.attributes:
            raise ValueError("a buffer needs at least one attribute")
        for name, size in self.attributes:
            if size <= 0:
                raise ValueError(f"attribute {name!r} has non-positive size {size}")
        self.data = tuple(data)
        if len(self.data) % self.column_len() != 0:
            raise ValueError(
                f"data length {len(self.data)} is not a multiple of row width {self.column_len()}"
            )

    def offset(self, name: str) -> Optional[int]:
        """Offset of the named attribute inside a row, or None if absent."""
        position = 0
        for attr_name, size in self.attributes:
            if attr_name == name:
                return position
            position += size
        return None

    def column_len(self) -> int:
        """Width of one row (sum of all attribute sizes)."""
        return sum(size for _, size in self.attributes)

    def row_len(self) -> int:
        """Number of rows held."""
        return len(self.data) // self.column_len()

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index):
        return self.data[index]

    def __repr__(self) -> str:
        return f"VertexBuffer(len={len(self.data)}, attributes={self.attributes!r})"


@dataclass(frozen=True)
class Tri:
    """One triangle with per-vertex attributes and its face normal."""

    position: Tuple[Vec3, Vec3, Vec3]
    normal: Tuple[Vec3, Vec3, Vec3]
    tri_normal: Vec3
    uv: Tuple[Vec2, Vec2, Vec2]


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(v: Vec3) -> Vec3:
    length = math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])
    if length == 0.0:
        return (math.nan, math.nan, math.nan)
    return (v[0] / length, v[1] / length, v[2] / length)


class Mesh:
    """Geometry with an optional index buffer and an axis-aligned bounding box."""

    def __init__(self, vertices, indices=None, bounding_box=((0.0, 0.0, 0.0), (0.0, 0.0, 0.0)), load_transform=None):
        self.id = next_id()
        self.vertices: VertexBuffer = vertices
        self.indices = indices
        self.bounding_box: Tuple[Vec3, Vec3] = (
            tuple(float(c) for c in bounding_box[0]),
            tuple(float(c) for c in bounding_box[1]),
        )
        self.position_offset = vertices.offset(VERTEX)
        self.uv_offset = vertices.offset(UV)
        self.normal_offset = vertices.offset(NORMAL)
        self.load_transform = np.identity(4) if load_transform is None else load_transform

    @classmethod
    def new_cube(cls) -> "Mesh":
        vertices = VertexBuffer(_CUBE, [(VERTEX, 3), (NORMAL, 3), (UV, 2)])
        return cls(vertices, None, ((-1.0, -1.0, -1.0), (1.0, 1.0, 1.0)))

    @classmethod
    def new_plane(cls) -> "Mesh":
        data = (0.0, 1.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0, 0.0)
        vertices = VertexBuffer(data, [(VERTEX, 2)])
        return cls(vertices, None, ((0.0, 0.0, 0.0), (1.0, 1.0, 0.0)))

    @classmethod
    def new_ndc_plane(cls) -> "Mesh":
        data = (
            -1.0, 1.0, 0.0, 1.0, -1.0, -1.0, 0.0, 0.0, 1.0, -1.0, 1.0, 0.0,
            -1.0, 1.0, 0.0, 1.0, 1.0, -1.0, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0,
        )
        vertices = VertexBuffer(data, [(VERTEX, 2), ("texcoords", 2)])
        return cls(vertices, None, ((-1.0, -1.0, 0.0), (1.0, 1.0, 0.0)))

    @classmethod
    def new_bounding_box(cls) -> "Mesh":
        vertices = VertexBuffer(_BOUNDING_BOX, [(VERTEX, 3), (BARYCENTRIC, 3)])
        return cls(vertices, None, ((-1.0, -1.0, -1.0), (1.0, 1.0, 1.0)))

    @property
    def uid(self) -> int:
        return self.id

    def bounding_box_matrix(self) -> np.ndarray:
        """Matrix mapping the unit cube [-1, 1]^3 onto the bounding box."""
        low, high = (np.array(v, dtype=float) for v in self.bounding_box)
        size = (high - low) / 2.0
        center = (high + low) / 2.0
        matrix = np.diag([size[0], size[1], size[2], 1.0])
        matrix[:3, 3] = center
        return matrix

    def tri_len(self) -> int:
        if self.indices is None:
            return self.vertices.row_len() // 3
        return len(self.indices) // 3

    def tri_get(self, i: int) -> Optional[Tri]:
        """Triangle number i, or None when i lies past the end."""
        column_len = self.vertices.column_len()
        if i < 0 or i > self.tri_len():
            return None
        if self.position_offset is None:
            raise ValueError("This mesh doesn't have positions")
        if self.uv_offset is None:
            raise ValueError("This mesh doesn't have UVs")
        if self.normal_offset is None:
            raise ValueError("This mesh doesn't have normal")

        if self.indices is None:
            starts = [(i * 3 + n) * column_len for n in range(3)]
        else:
            starts = [int(self.indices[i * 3 + n]) * column_len for n in range(3)]

        vert = self.vertices

        def vec3(offset: int) -> Tuple[Vec3, Vec3, Vec3]:
            return tuple(
                (vert[s + offset], vert[s + offset + 1], vert[s + offset + 2]) for s in starts
            )

        position = vec3(self.position_offset)
        normal = vec3(self.normal_offset)
        uv = tuple((vert[s + self.uv_offset], vert[s + self.uv_offset + 1]) for s in starts)
        tri_normal = _normalize(
            _cross(_sub(position[1], position[0]), _sub(position[2], position[0]))
        )
        return Tri(position=position, normal=normal, tri_normal=tri_normal, uv=uv)


def mesh_triangle_iter(mesh: Mesh) -> Iterator[Tuple[Vec3, Vec3, Vec3]]:
    """Yield triples of points read straight from the vertex data.

    Without indices, nine consecutive values form one triangle. With indices,
    each index points directly at the first of three consecutive values.
    """
    vert = mesh.vertices
    if mesh.indices is None:
        c = 0
        while c + 8 < len(vert):
            yield (
                (vert[c], vert[c + 1], vert[c + 2]),
                (vert[c + 3], vert[c + 4], vert[c + 5]),
                (vert[c + 6], vert[c + 7], vert[c + 8]),
            )
            c += 9
    else:
        ind = mesh.indices
        c = 0
        while c + 2 < len(ind):
            points = []
            for n in range(3):
                index = int(ind[c + n])
                points.append((vert[index], vert[index + 1], vert[index + 2]))
            yield tuple(points)
            c += 3


_CUBE = (
    # back face
    -1.0, -1.0, -1.0, 0.0, 0.0, -1.0, 0.0, 0.0,
    1.0, 1.0, -1.0, 0.0, 0.0, -1.0, 1.0, 1.0,
    1.0, -1.0, -1.0, 0.0, 0.0, -1.0, 1.0, 0.0,
    1.0, 1.0, -1.0, 0.0, 0.0, -1.0, 1.0, 1.0,
    -1.0, -1.0, -1.0, 0.0, 0.0, -1.0, 0.0, 0.0,
    -1.0, 1.0, -1.0, 0.0, 0.0, -1.0, 0.0, 1.0,
    # front face
    -1.0, -1.0, 1.0, 0.0, 0.0, 1.0, 0.0, 0.0,
    1.0, -1.0, 1.0, 0.0, 0.0, 1.0, 1.0, 0.0,
    1.0, 1.0, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0,
    1.0, 1.0, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0,
    -1.0, 1.0, 1.0, 0.0, 0.0, 1.0, 0.0, 1.0,
    -1.0, -1.0, 1.0, 0.0, 0.0, 1.0, 0.0, 0.0,
    # left face
    -1.0, 1.0, 1.0, -1.0, 0.0, 0.0, 1.0, 0.0,
    -1.0, 1.0, -1.0, -1.0, 0.0, 0.0, 1.0, 1.0,
    -1.0, -1.0, -1.0, -1.0, 0.0, 0.0, 0.0, 1.0,
    -1.0, -1.0, -1.0, -1.0, 0.0, 0.0, 0.0, 1.0,
    -1.0, -1.0, 1.0, -1.0, 0.0, 0.0, 0.0, 0.0,
    -1.0, 1.0, 1.0, -1.0, 0.0, 0.0, 1.0, 0.0,
    # right face
    1.0, 1.0, 1.0, 1.0, 0.0, 0.0, 1.0, 0.0,
    1.0, -1.0, -1.0, 1.0, 0.0, 0.0, 0.0, 1.0,
    1.0, 1.0, -1.0, 1.0, 0.0, 0.0, 1.0, 1.0,
    1.0, -1.0, -1.0, 1.0, 0.0, 0.0, 0.0, 1.0,
    1.0, 1.0, 1.0, 1.0, 0.0, 0.0, 1.0, 0.0,
    1.0, -1.0, 1.0, 1.0, 0.0, 0.0, 0.0, 0.0,
    # bottom face
    -1.0, -1.0, -1.0, 0.0, -1.0, 0.0, 0.0, 1.0,
    1.0, -1.0, -1.0, 0.0, -1.0, 0.0, 1.0, 1.0,
    1.0, -1.0, 1.0, 0.0, -1.0, 0.0, 1.0, 0.0,
    1.0, -1.0, 1.0, 0.0, -1.0, 0.0, 1.0, 0.0,
    -1.0, -1.0, 1.0, 0.0, -1.0, 0.0, 0.0, 0.0,
    -1.0, -1.0, -1.0, 0.0, -1.0, 0.0, 0.0, 1.0,
    # top face
    -1.0, 1.0, -1.0, 0.0, 1.0, 0.0, 0.0, 1.0,
    1.0, 1.0, 1.0, 0.0, 1.0, 0.0, 1.0, 0.0,
    1.0, 1.0, -1.0, 0.0, 1.0, 0.0, 1.0, 1.0,
    1.0, 1.0, 1.0, 0.0, 1.0, 0.0, 1.0, 0.0,
    -1.0, 1.0, -1.0, 0.0, 1.0, 0.0, 0.0, 1.0,
    -1.0, 1.0, 1.0, 0.0, 1.0, 0.0, 0.0, 0.0,
)

_BOUNDING_BOX = (
    # back face
    -1.0, -1.0, -1.0, 1.0, 0.0, 0.0,
    1.0, 1.0, -1.0, 0.0, 1.0, 0.0,
    1.0, -1.0, -1.0, 0.0, 0.0, 1.0,
    1.0, 1.0, -1.0, 1.0, 0.0, 0.0,
    -1.0, -1.0, -1.0, 0.0, 1.0, 0.0,
    -1.0, 1.0, -1.0, 0.0, 0.0, 1.0,
    # front face
    -1.0, -1.0, 1.0, 1.0, 0.0, 0.0,
    1.0, -1.0, 1.0, 0.0, 1.0, 0.0,
    1.0, 1.0, 1.0, 0.0, 0.0, 1.0,
    1.0, 1.0, 1.0, 1.0, 0.0, 0.0,
    -1.0, 1.0, 1.0, 0.0, 1.0, 0.0,
    -1.0, -1.0, 1.0, 0.0, 0.0, 1.0,
    # left face
    -1.0, 1.0, 1.0, 1.0, 0.0, 0.0,
    -1.0, 1.0, -1.0, 0.0, 1.0, 0.0,
    -1.0, -1.0, -1.0, 0.0, 0.0, 1.0,
    -1.0, -1.0, -1.0, 1.0, 0.0, 0.0,
    -1.0, -1.0, 1.0, 0.0, 1.0, 0.0,
    -1.0, 1.0, 1.0, 0.0, 0.0, 1.0,
    # right face
    1.0, 1.0, 1.0, 1.0, 0.0, 0.0,
    1.0, -1.0, -1.0, 0.0, 1.0, 0.0,
    1.0, 1.0, -1.0, 0.0, 0.0, 1.0,
    1.0, -1.0, -1.0, 1.0, 0.0, 0.0,
    1.0, 1.0, 1.0, 0.0, 1.0, 0.0,
    1.0, -1.0, 1.0, 0.0, 0.0, 1.0,
    # bottom face
    -1.0, -1.0, -1.0, 1.0, 0.0, 0.0,
    1.0, -1.0, -1.0, 0.0, 1.0, 0.0,
    1.0, -1.0, 1.0, 0.0, 0.0, 1.0,
    1.0, -1.0, 1.0, 1.0, 0.0, 0.0,
    -1.0, -1.0, 1.0, 0.0, 1.0, 0.0,
    -1.0, -1.0, -1.0, 0.0, 0.0, 1.0,
    # top face
    -1.0, 1.0, -1.0, 1.0, 0.0, 0.0,
    1.0, 1.0, 1.0, 0.0, 1.0, 0.0,
    1.0, 1.0, -1.0, 0.0, 0.0, 1.0,
    1.0, 1.0, 1.0, 1.0, 0.0, 0.0,
    -1.0, 1.0, -1.0, 0.0, 1.0, 0.0,
    -1.0, 1.0, 1.0, 0.0, 0.0, 1.0,
)