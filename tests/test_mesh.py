from __future__ import annotations

import numpy as np
import pytest

from objmesh import Mesh, face_normals, import_obj


def test_mesh_is_frozen():
    mesh = import_obj("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n")
    with pytest.raises(AttributeError):
        mesh.triangles = ()


def test_mesh_rejects_partial_triangle():
    with pytest.raises(ValueError):
        Mesh(vertices=((0.0, 0.0, 0.0),) * 3, triangles=(0, 1), normals=())


def test_mesh_rejects_misaligned_normals():
    with pytest.raises(ValueError):
        Mesh(vertices=((0.0, 0.0, 0.0),) * 3, triangles=(0, 1, 2), normals=())


def test_empty_mesh():
    mesh = Mesh.empty("nothing")
    assert mesh.name == "nothing"
    assert mesh.triangle_count == 0
    assert list(mesh.iter_triangles()) == []
    with pytest.raises(ValueError):
        mesh.bounds()


def test_iter_triangles_and_bounds():
    mesh = import_obj("v 0 0 0\nv 2 0 -1\nv 2 3 0\nv 0 3 4\nf 1 2 3 4\n")
    assert list(mesh.iter_triangles()) == [(0, 1, 2), (0, 2, 3)]
    assert mesh.bounds() == ((0.0, 0.0, -1.0), (2.0, 3.0, 4.0))


def test_triangle_area_and_degenerate_count():
    mesh = import_obj("v 0 0 0\nv 2 0 0\nv 0 2 0\nv 4 0 0\nf 1 2 3\nf 1 2 4\n")
    assert mesh.triangle_area(0) == pytest.approx(2.0)
    assert mesh.triangle_area(1) == pytest.approx(0.0)
    assert mesh.degenerate_count() == 1


def test_as_arrays_dtypes_and_shapes():
    mesh = import_obj("v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\nf 1 2 3 4\n")
    verts, tris, norms = mesh.as_arrays()
    assert verts.dtype == np.float32 and verts.shape == (4, 3)
    assert tris.dtype == np.int32 and tris.shape == (6,)
    assert norms.dtype == np.float32 and norms.shape == (2, 3)
    assert tris.tolist() == [0, 1, 2, 0, 2, 3]
    with pytest.raises(ValueError):
        verts[0, 0] = 5.0


def test_as_arrays_on_empty_mesh():
    verts, tris, norms = Mesh.empty().as_arrays()
    assert verts.shape == (0, 3)
    assert tris.shape == (0,)
    assert norms.shape == (0, 3)


def test_face_normals_matches_cross_product():
    verts = [(0.0, 0.0, 0.0), (0.0, 2.0, 0.0), (0.0, 0.0, 3.0), (1.0, 1.0, 1.0)]
    normals = face_normals(verts, [0, 1, 2, 0, 0, 3])
    assert normals.dtype == np.float32
    np.testing.assert_allclose(normals[0], [1.0, 0.0, 0.0], atol=1e-6)
    np.testing.assert_array_equal(normals[1], [0.0, 0.0, 0.0])


def test_face_normals_without_triangles():
    assert face_normals([], []).shape == (0, 3)


def test_triangle_area_rejects_bad_index():
    mesh = import_obj("v 0 0 0\nv 2 0 0\nv 0 2 0\nf 1 2 3\n")
    with pytest.raises(IndexError):
        mesh.triangle_area(1)
    with pytest.raises(IndexError):
        mesh.triangle_area(-1)
