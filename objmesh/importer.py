# objmesh/importer.py
"""
Minimal Wavefront OBJ importer.

Only vertex positions ("v") and polygonal faces ("f") carry geometry. Faces are
fan-triangulated from their first vertex and one normal is derived per triangle.

Parsing is lenient:

- a coordinate that is not a number reads as 0.0
- a face index that is not an integer reads as 0
- a triangle referencing a vertex that does not exist (yet) is dropped
- faces with fewer than 3 references are skipped
- comments, mtllib/usemtl and o/g lines are ignored; any other line is logged
  and ignored unless strict=True

The only fatal error in lenient mode is a "v" line with fewer than three
coordinates (InvalidFormat).

Example:
    mesh = import_obj("v 0 0 0\\nv 1 0 0\\nv 0 1 0\\nf 1 2 3\\n")
    mesh.triangles  # (0, 1, 2)
    mesh.normals    # ((0.0, 0.0, 1.0),)
"""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, List, Sequence, Union

import numpy as np

from .errors import InvalidFormat, UnsupportedFeature
from .mesh import Mesh, Tri, Vec3, face_normals

logger = logging.getLogger(__name__)

_INT32_MIN = -(2 ** 31)
_INT32_MAX = 2 ** 31 - 1

_IGNORED_PREFIXES = ("mtllib", "usemtl")
_IGNORED_HEADS = ("o", "g")


# ASCII numerals only: no underscores, no surrounding whitespace
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
_INT_RE = re.compile(r"[+-]?[0-9]+")


# -------------------------
# Token helpers
# -------------------------

def _parse_coord(token: str) -> float:
    if not _FLOAT_RE.fullmatch(token):
        return 0.0
    return float(token)


def _parse_index(token: str) -> int:
    # "7/3/2" -> 7; texture and normal indices are not tracked
    head = token.split("/", 1)[0]
    if not _INT_RE.fullmatch(head):
        return 0
    value = int(head)
    if value < _INT32_MIN or value > _INT32_MAX:
        return 0
    return value


def _resolve_index(value: int, vertex_count: int, relative: bool) -> int:
    if value >= 0:
        return value - 1
    if relative:
        return vertex_count + value
    # negative references collapse onto one past the last vertex
    return vertex_count


def triangulate_fan(face: Sequence[int]) -> List[Tri]:
    """
    Fan triangulation from the first index: (f0, f[i-1], f[i]) for i in 2..n-1.
    Only correct for convex, planar polygons; no winding or planarity checks.
    """
    if len(face) < 3:
        return []
    a = face[0]
    return [(a, face[i - 1], face[i]) for i in range(2, len(face))]


# -------------------------
# Importer
# -------------------------

def import_obj(
    text: str,
    *,
    strict: bool = False,
    relative_indices: bool = False,
    name: str = "mesh",
) -> Mesh:
    """
    Parse OBJ text into a Mesh.

    strict: raise UnsupportedFeature for lines that are not comments, vertex
        or face lines, mtllib, usemtl, o or g instead of ignoring them. Other
        "v" directives (vt, vn, vp) are always skipped. The whole offending
        line is reported as the feature.
    relative_indices: resolve negative face indices relative to the last
        declared vertex (-1 is the previous vertex). By default a negative
        index resolves past the end and its triangles are dropped.

    Raises InvalidFormat when a vertex line has fewer than 3 coordinates.
    """
    vertices: List[Vec3] = []
    triangles: List[int] = []
    dropped = 0

    for line_number, line in enumerate(text.replace("\r", "").split("\n"), 1):
        if not line:
            continue
        head = line[0]

        if head == "#":
            continue

        if head == "v":
            if line.startswith("v "):
                p = [t for t in line.split(" ") if t]
                if len(p) < 4:
                    raise InvalidFormat(line_number=line_number, line=line)
                vertices.append((_parse_coord(p[1]), _parse_coord(p[2]), _parse_coord(p[3])))
            # vt, vn and vp carry nothing we track
            continue

        if head == "f":
            vertex_count = len(vertices)
            face = [
                _resolve_index(_parse_index(t), vertex_count, relative_indices)
                for t in line.split()[1:]
            ]
            for tri in triangulate_fan(face):
                if all(0 <= i < vertex_count for i in tri):
                    triangles.extend(tri)
                else:
                    dropped += 1
            continue

        if line.startswith(_IGNORED_PREFIXES) or head in _IGNORED_HEADS:
            continue

        if strict and line.strip():
            raise UnsupportedFeature(line, line_number=line_number)
        logger.debug("Ignoring line %d: %s", line_number, line)

    # coordinates outside the float32 range become +/-inf
    with np.errstate(over="ignore"):
        verts32 = np.asarray(vertices, dtype=np.float32).reshape(-1, 3)
    normals = face_normals(verts32, triangles)

    logger.debug(
        "Imported %s: %d vertices, %d triangles, %d dropped",
        name, len(verts32), len(triangles) // 3, dropped,
    )
    return Mesh(
        vertices=tuple(tuple(v) for v in verts32.tolist()),
        triangles=tuple(triangles),
        normals=tuple(tuple(n) for n in normals.tolist()),
        name=name,
    )


def load_obj(path: Union[str, Path], *, encoding: str = "utf-8", **options: Any) -> Mesh:
    """Read an OBJ file and import it; the mesh is named after the file stem."""
    path = Path(path)
    # newline="" keeps carriage returns for import_obj to strip
    with open(path, "r", encoding=encoding, newline="") as f:
        text = f.read()
    options.setdefault("name", path.stem)
    return import_obj(text, **options)
