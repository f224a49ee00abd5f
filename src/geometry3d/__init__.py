"""
Affine geometry in 3-space: points (locations) and vectors (offsets).

The two classes follow Chapter 3 of "Coordinate-Free Geometric Programming"
(UW-CSE TR-89-09-16) by Tony DeRose.
"""

from .bounds import bounding_box
from .constants import EPSILON3D
from .point3d import ORIGIN3D, Point3d
from .rendering import NULL_HOOKS, RenderHooks, VertexRecorder, current_hooks, install_hooks, using_hooks
from .vector3d import X_VECTOR3D, Y_VECTOR3D, Z_VECTOR3D, Vector3d

__version__ = "0.1.0"

__all__ = [
    "EPSILON3D",
    "NULL_HOOKS",
    "ORIGIN3D",
    "X_VECTOR3D",
    "Y_VECTOR3D",
    "Z_VECTOR3D",
    "Point3d",
    "RenderHooks",
    "Vector3d",
    "VertexRecorder",
    "bounding_box",
    "current_hooks",
    "install_hooks",
    "using_hooks",
    "__version__",
]
