"""
objmesh: load Wavefront OBJ text into an immutable triangle mesh for navmesh
construction.
"""
from .errors import InvalidFormat, MeshImportError, UnsupportedFeature
from .importer import import_obj, load_obj, triangulate_fan
from .logging_config import setup_logging
from .mesh import Mesh, Tri, Vec3, face_normals
from .rng import SteppingRandom

__version__ = "0.1.0"

__all__ = [
    "InvalidFormat",
    "Mesh",
    "MeshImportError",
    "SteppingRandom",
    "Tri",
    "UnsupportedFeature",
    "Vec3",
    "face_normals",
    "import_obj",
    "load_obj",
    "setup_logging",
    "triangulate_fan",
]
