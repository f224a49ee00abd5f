"""
Render hooks backed by PyOpenGL immediate mode calls.

A current OpenGL context (compatibility profile) must exist when the hooks
are invoked, e.g. inside a QOpenGLWindow's paintGL.
"""

import OpenGL.GL as gl

from .rendering import RenderHooks


def _vertex(x: float, y: float, z: float) -> None:
    gl.glVertex3f(x, y, z)


def _normal(dx: float, dy: float, dz: float) -> None:
    gl.glNormal3f(dx, dy, dz)


def opengl_hooks() -> RenderHooks:
    """Hooks forwarding to glVertex3f and glNormal3f."""
    return RenderHooks(vertex=_vertex, normal=_normal)
