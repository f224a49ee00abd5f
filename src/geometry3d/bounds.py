from typing import Iterable

from .point3d import Point3d


def bounding_box(points: Iterable[Point3d]) -> tuple[Point3d, Point3d]:
    """
    Axis aligned bounding box of some points.

    Args:
        points: Any iterable of Point3d.

    Returns:
        tuple[Point3d, Point3d]: The minimum and maximum corners.

    Raises:
        ValueError: If points is empty.
    """
    it = iter(points)
    try:
        first = next(it)
    except StopIteration:
        raise ValueError("bounding_box of an empty set of points") from None
    lo = hi = first
    for p in it:
        lo = lo.min(p)
        hi = hi.max(p)
    return lo, hi
