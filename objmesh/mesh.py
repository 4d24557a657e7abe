# objmesh/mesh.py
"""
Immutable triangle mesh produced by the OBJ importer.

A Mesh holds three aligned sequences:

    vertices   ordered positions, one Vec3 per declared vertex
    triangles  flat vertex indices, 3 per triangle
    normals    one face normal per triangle (unit length, or the zero vector
               for degenerate triangles)

Positions and normals are single precision values stored as Python floats, so
as_arrays() hands them to a navmesh builder without loss.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

import numpy as np

Vec3 = Tuple[float, float, float]
Tri = Tuple[int, int, int]


# -----------------------------
# Small vector utilities
# -----------------------------

def v_sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def v_cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def v_len(a: Vec3) -> float:
    return math.sqrt(a[0] * a[0] + a[1] * a[1] + a[2] * a[2])


# ------------------
# Face normals
# ------------------

def face_normals(vertices: Sequence[Vec3], triangles: Sequence[int]) -> np.ndarray:
    """
    One normal per triangle, computed in single precision.

    n = cross(v[b] - v[a], v[c] - v[a]); unit length when |n| > 0, otherwise
    the (zero) cross product is kept as is so a degenerate triangle never fails.
    Returns a (T, 3) float32 array.
    """
    tris = np.asarray(triangles, dtype=np.int32).reshape(-1, 3)
    if len(tris) == 0:
        return np.zeros((0, 3), dtype=np.float32)
    verts = np.asarray(vertices, dtype=np.float32).reshape(-1, 3)

    # inf/nan coordinates propagate into the normal instead of warning
    with np.errstate(over="ignore", invalid="ignore"):
        v0 = verts[tris[:, 0]]
        e0 = verts[tris[:, 1]] - v0
        e1 = verts[tris[:, 2]] - v0
        n = np.cross(e0, e1).astype(np.float32)

        d = np.sqrt(np.einsum("ij,ij->i", n, n))
        ok = d > 0
        n[ok] /= d[ok][:, None]
    return n


# --------------
# Mesh container
# --------------

@dataclass(frozen=True)
class Mesh:
    vertices: Tuple[Vec3, ...] = ()
    triangles: Tuple[int, ...] = ()
    normals: Tuple[Vec3, ...] = ()  # aligned 1:1 with triangles, not vertices
    name: str = "mesh"

    def __post_init__(self) -> None:
        if len(self.triangles) % 3 != 0:
            raise ValueError(f"triangles must hold 3 indices per triangle (got {len(self.triangles)})")
        if len(self.normals) * 3 != len(self.triangles):
            raise ValueError(
                f"expected {len(self.triangles) // 3} normals, got {len(self.normals)}"
            )

    @classmethod
    def empty(cls, name: str = "mesh") -> "Mesh":
        return cls(name=name)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles) // 3

    def iter_triangles(self) -> Iterator[Tri]:
        t = self.triangles
        for i in range(0, len(t), 3):
            yield (t[i], t[i + 1], t[i + 2])

    # ---- analysis ----
    def bounds(self) -> Tuple[Vec3, Vec3]:
        if not self.vertices:
            raise ValueError("bounds of a mesh without vertices")
        xs = [v[0] for v in self.vertices]
        ys = [v[1] for v in self.vertices]
        zs = [v[2] for v in self.vertices]
        return (min(xs), min(ys), min(zs)), (max(xs), max(ys), max(zs))

    def triangle_area(self, index: int) -> float:
        if not 0 <= index < self.triangle_count:
            raise IndexError(f"triangle index {index} out of range (0..{self.triangle_count - 1})")
        a, b, c = (self.vertices[i] for i in self.triangles[3 * index:3 * index + 3])
        return 0.5 * v_len(v_cross(v_sub(b, a), v_sub(c, a)))

    def degenerate_count(self) -> int:
        """Number of triangles whose normal is the zero vector."""
        return sum(1 for n in self.normals if n == (0.0, 0.0, 0.0))

    # ---- hand-off ----
    def as_arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Contiguous buffers for a navmesh builder:
        vertices (V, 3) float32, triangles (3T,) int32, normals (T, 3) float32.
        The arrays are read-only.
        """
        verts = np.array(self.vertices, dtype=np.float32).reshape(-1, 3)
        tris = np.array(self.triangles, dtype=np.int32)
        norms = np.array(self.normals, dtype=np.float32).reshape(-1, 3)
        for arr in (verts, tris, norms):
            arr.flags.writeable = False
        return verts, tris, norms
