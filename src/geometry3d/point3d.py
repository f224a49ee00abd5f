import math
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Union

from .constants import ABS_TOL, REL_TOL
from .rendering import RenderHooks, current_hooks
from .vector3d import Vector3d


@dataclass(frozen=True, eq=False)
class Point3d:
    """
    A location in 3-space.

    Points and vectors are kept apart: the difference of two points is a
    Vector3d, and a point moved by a vector is a Point3d. Points are
    immutable, every operation returns a new instance.
    """

    x: float
    y: float
    z: float

    @classmethod
    def with_components(cls, cs: Sequence[float]) -> "Point3d":
        """
        Construct a point from the first three elements of a sequence.

        Args:
            cs: Anything indexable holding at least three numbers (list, tuple, numpy array).

        Returns:
            Point3d: The point (cs[0], cs[1], cs[2]).

        Raises:
            ValueError: If fewer than three elements are supplied.
        """
        if len(cs) < 3:
            raise ValueError(f"Point3d needs 3 components, got {len(cs)}")
        return cls(float(cs[0]), float(cs[1]), float(cs[2]))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point3d):
            return NotImplemented
        return (
            math.isclose(self.x, other.x, rel_tol=REL_TOL, abs_tol=ABS_TOL)
            and math.isclose(self.y, other.y, rel_tol=REL_TOL, abs_tol=ABS_TOL)
            and math.isclose(self.z, other.z, rel_tol=REL_TOL, abs_tol=ABS_TOL)
        )

    __hash__ = None

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def components(self) -> list[float]:
        """Return the coordinates as a list."""
        return [self.x, self.y, self.z]

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def gl_vertex(self, hooks: Optional[RenderHooks] = None) -> None:
        """
        Issue a vertex call with the coordinates of this point.

        Args:
            hooks: The hooks to emit through, defaults to the installed ones.
        """
        (hooks or current_hooks()).vertex(self.x, self.y, self.z)

    def plus(self, offset: Vector3d) -> "Point3d":
        """Point-vector sum, yielding a new point."""
        return Point3d(self.x + offset.dx, self.y + offset.dy, self.z + offset.dz)

    def minus_point(self, other: "Point3d") -> Vector3d:
        """Point-point difference, the offset that carries other to this."""
        return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def minus_vector(self, offset: Vector3d) -> "Point3d":
        """Point-vector difference, undoing a displacement."""
        return Point3d(self.x - offset.dx, self.y - offset.dy, self.z - offset.dz)

    def minus(self, other: Union["Point3d", Vector3d]) -> Union[Vector3d, "Point3d"]:
        """
        Subtract a point or a vector from this point.

        Args:
            other: A Point3d or a Vector3d.

        Returns:
            Vector3d when other is a point, Point3d when other is a vector.

        Raises:
            TypeError: If other is neither.
        """
        if isinstance(other, Point3d):
            return self.minus_point(other)
        elif isinstance(other, Vector3d):
            return self.minus_vector(other)
        else:
            raise TypeError("unsupported operand type(s) for minus: 'Point3d' and '{}'".format(type(other).__name__))

    def dist2(self, other: "Point3d") -> float:
        """Squared distance between this and other."""
        return self.minus_point(other).norm2()

    def dist(self, other: "Point3d") -> float:
        return self.minus_point(other).norm()

    def combo(self, scalar: float, other: "Point3d") -> "Point3d":
        """
        Affine combination of this with other,

            (1-scalar)*this + scalar*other

        computed as this + scalar*(other - this). Scalars outside [0, 1]
        extrapolate along the line through both points.
        """
        return self.plus(other.minus_point(self).times(scalar))

    def combos(self, scalars: Sequence[float], others: Sequence["Point3d"]) -> "Point3d":
        """
        Fold combo over paired scalars and points, starting from this.

        Each step moves the running point toward the next point by its
        scalar. Only min(len(scalars), len(others)) pairs are used.
        """
        p = self
        for scalar, other in zip(scalars, others):
            p = p.combo(scalar, other)
        return p

    def max(self, other: "Point3d") -> "Point3d":
        """Componentwise maximum of two points' coordinates."""
        return Point3d(max(self.x, other.x), max(self.y, other.y), max(self.z, other.z))

    def min(self, other: "Point3d") -> "Point3d":
        """Componentwise minimum of two points' coordinates."""
        return Point3d(min(self.x, other.x), min(self.y, other.y), min(self.z, other.z))

    def __add__(self, offset: Vector3d) -> "Point3d":
        if not isinstance(offset, Vector3d):
            return NotImplemented
        return self.plus(offset)

    def __sub__(self, other: Union["Point3d", Vector3d]) -> Union[Vector3d, "Point3d"]:
        if not isinstance(other, (Point3d, Vector3d)):
            return NotImplemented
        return self.minus(other)


ORIGIN3D = Point3d(0.0, 0.0, 0.0)
