"""
Hooks that connect points and vectors to a rendering pipeline.

The geometry types never talk to a graphics library directly. A point's
gl_vertex() and a vector's gl_normal() forward their three numbers to a
RenderHooks instance, either passed in explicitly or the default
installed here for the current thread or task (no-ops until an
application installs something else).
"""

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Callable, Iterator

import numpy as np

logger = logging.getLogger(__name__)

EmitFunc = Callable[[float, float, float], None]


def _ignore(_x: float, _y: float, _z: float) -> None:
    pass


@dataclass(frozen=True)
class RenderHooks:
    """The pair of callbacks a rendering pipeline supplies."""

    vertex: EmitFunc = _ignore
    normal: EmitFunc = _ignore


NULL_HOOKS = RenderHooks()

# per thread and per async task, new threads start from NULL_HOOKS
_installed: ContextVar[RenderHooks] = ContextVar("geometry3d_render_hooks", default=NULL_HOOKS)


def current_hooks() -> RenderHooks:
    """Return the hooks used when none are passed explicitly."""
    return _installed.get()


def install_hooks(hooks: RenderHooks) -> RenderHooks:
    """
    Make hooks the default for the current context.

    Args:
        hooks: The hooks to install.

    Returns:
        RenderHooks: The hooks that were installed before.

    Raises:
        TypeError: If hooks is not a RenderHooks.
    """
    if not isinstance(hooks, RenderHooks):
        raise TypeError("hooks must be a RenderHooks")
    previous = _installed.get()
    _installed.set(hooks)
    logger.debug("installed render hooks %r (was %r)", hooks, previous)
    return previous


@contextmanager
def using_hooks(hooks: RenderHooks) -> Iterator[RenderHooks]:
    """Install hooks for the duration of a with block."""
    if not isinstance(hooks, RenderHooks):
        raise TypeError("hooks must be a RenderHooks")
    token = _installed.set(hooks)
    logger.debug("using render hooks %r", hooks)
    try:
        yield hooks
    finally:
        _installed.reset(token)


# same interleaved layout as a position + normal vertex buffer
VERTEX_DTYPE = np.dtype([
    ("x", np.float32),
    ("y", np.float32),
    ("z", np.float32),
    ("nx", np.float32),
    ("ny", np.float32),
    ("nz", np.float32),
])


class VertexRecorder:
    """
    Records emitted vertices and normals so they can be uploaded as buffers.

    Use recorder.hooks wherever RenderHooks are expected. Every vertex is
    paired with the normal emitted most recently before it, which mirrors
    the way immediate mode OpenGL keeps a current normal.
    """

    def __init__(self) -> None:
        self._vertices: list[tuple[float, float, float]] = []
        self._normals: list[tuple[float, float, float]] = []
        self._vertex_normals: list[tuple[float, float, float]] = []
        self._current_normal = (0.0, 0.0, 0.0)
        self._hooks = RenderHooks(vertex=self._record_vertex, normal=self._record_normal)

    def _record_vertex(self, x: float, y: float, z: float) -> None:
        self._vertices.append((x, y, z))
        self._vertex_normals.append(self._current_normal)

    def _record_normal(self, dx: float, dy: float, dz: float) -> None:
        self._current_normal = (dx, dy, dz)
        self._normals.append(self._current_normal)

    @property
    def hooks(self) -> RenderHooks:
        return self._hooks

    @property
    def vertices(self) -> np.ndarray:
        """All emitted vertices as an (n, 3) float32 array."""
        return np.array(self._vertices, dtype=np.float32).reshape(-1, 3)

    @property
    def normals(self) -> np.ndarray:
        """All emitted normals as an (n, 3) float32 array."""
        return np.array(self._normals, dtype=np.float32).reshape(-1, 3)

    def interleaved(self) -> np.ndarray:
        """
        Build a vertex buffer of the recorded data.

        Returns:
            np.ndarray: One VERTEX_DTYPE record per vertex, holding its
            position and the normal that was current when it was emitted.
        """
        vertex_data = np.empty(len(self._vertices), dtype=VERTEX_DTYPE)
        if len(self._vertices):
            positions = np.array(self._vertices, dtype=np.float32)
            normals = np.array(self._vertex_normals, dtype=np.float32)
            vertex_data["x"] = positions[:, 0]
            vertex_data["y"] = positions[:, 1]
            vertex_data["z"] = positions[:, 2]
            vertex_data["nx"] = normals[:, 0]
            vertex_data["ny"] = normals[:, 1]
            vertex_data["nz"] = normals[:, 2]
        return vertex_data

    def clear(self) -> None:
        self._vertices.clear()
        self._normals.clear()
        self._vertex_normals.clear()
        self._current_normal = (0.0, 0.0, 0.0)

    def __len__(self) -> int:
        return len(self._vertices)
