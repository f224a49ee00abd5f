import math
import random
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

import numpy as np

from .constants import ABS_TOL, EPSILON3D, REL_TOL
from .rendering import RenderHooks, current_hooks
from .sampling import random_unit_components, thread_rng


@dataclass(frozen=True, eq=False)
class Vector3d:
    """
    An offset between two points in 3-space.

    Vectors are immutable, every operation returns a new instance.
    """

    dx: float
    dy: float
    dz: float

    @classmethod
    def with_components(cls, cs: Sequence[float]) -> "Vector3d":
        """
        Construct a vector from the first three elements of a sequence.

        Args:
            cs: Anything indexable holding at least three numbers (list, tuple, numpy array).

        Returns:
            Vector3d: The vector (cs[0], cs[1], cs[2]).

        Raises:
            ValueError: If fewer than three elements are supplied.
        """
        if len(cs) < 3:
            raise ValueError(f"Vector3d needs 3 components, got {len(cs)}")
        return cls(float(cs[0]), float(cs[1]), float(cs[2]))

    @classmethod
    def random_unit(cls, rng: Optional[random.Random] = None) -> "Vector3d":
        """
        A direction drawn uniformly from the unit sphere.

        Args:
            rng: Random source to draw from, defaults to the calling thread's own generator.
        """
        return cls(*random_unit_components(rng if rng is not None else thread_rng()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3d):
            return NotImplemented
        return (
            math.isclose(self.dx, other.dx, rel_tol=REL_TOL, abs_tol=ABS_TOL)
            and math.isclose(self.dy, other.dy, rel_tol=REL_TOL, abs_tol=ABS_TOL)
            and math.isclose(self.dz, other.dz, rel_tol=REL_TOL, abs_tol=ABS_TOL)
        )

    __hash__ = None

    def __iter__(self) -> Iterator[float]:
        return iter((self.dx, self.dy, self.dz))

    def components(self) -> list[float]:
        """This vector's components as a list."""
        return [self.dx, self.dy, self.dz]

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.dx, self.dy, self.dz)

    def gl_normal(self, hooks: Optional[RenderHooks] = None) -> None:
        """
        Issue a normal call with the components of this vector.

        Args:
            hooks: The hooks to emit through, defaults to the installed ones.
        """
        (hooks or current_hooks()).normal(self.dx, self.dy, self.dz)

    def plus(self, other: "Vector3d") -> "Vector3d":
        """Sum of this and other."""
        return Vector3d(self.dx + other.dx, self.dy + other.dy, self.dz + other.dz)

    def minus(self, other: "Vector3d") -> "Vector3d":
        """Vector that results from subtracting other from this."""
        return self.plus(other.neg())

    def times(self, scalar: float) -> "Vector3d":
        """Same vector as this, but scaled by the given value."""
        return Vector3d(scalar * self.dx, scalar * self.dy, scalar * self.dz)

    def neg(self) -> "Vector3d":
        return self.times(-1.0)

    def div(self, scalar: float) -> "Vector3d":
        """
        Defines v / a as v * 1/a.

        A zero divisor is not guarded: it yields infinities (or NaN for zero
        components) the way IEEE floating point division does.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            inverse = float(np.divide(1.0, scalar, dtype=np.float64))
        return self.times(inverse)

    def dot(self, other: "Vector3d") -> float:
        return self.dx * other.dx + self.dy * other.dy + self.dz * other.dz

    def cross(self, other: "Vector3d") -> "Vector3d":
        """Right-handed cross product of this with other."""
        return Vector3d(
            self.dy * other.dz - self.dz * other.dy,
            self.dz * other.dx - self.dx * other.dz,
            self.dx * other.dy - self.dy * other.dx,
        )

    def norm2(self) -> float:
        """Length of this, squared."""
        return self.dot(self)

    def norm(self) -> float:
        return math.sqrt(self.norm2())

    def unit(self) -> "Vector3d":
        """
        Unit vector in the same direction as this.

        Vectors shorter than EPSILON3D have no usable direction, for those
        the x axis (1, 0, 0) is returned instead.
        """
        n = self.norm()
        if n < EPSILON3D:
            return Vector3d(1.0, 0.0, 0.0)
        return self.times(1.0 / n)

    def __add__(self, other: "Vector3d") -> "Vector3d":
        if not isinstance(other, Vector3d):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: "Vector3d") -> "Vector3d":
        if not isinstance(other, Vector3d):
            return NotImplemented
        return self.minus(other)

    def __neg__(self) -> "Vector3d":
        return self.neg()

    def __mul__(self, scalar: float) -> "Vector3d":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.times(scalar)

    def __rmul__(self, scalar: float) -> "Vector3d":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector3d":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.div(scalar)


X_VECTOR3D = Vector3d(1.0, 0.0, 0.0)
Y_VECTOR3D = Vector3d(0.0, 1.0, 0.0)
Z_VECTOR3D = Vector3d(0.0, 0.0, 1.0)
