"""Core geometric types for contour representation.

This module defines the fundamental value types the kernel works on:
- Point: A 2D point in object or screen space
- Segment: An ordered pair of points, possibly degenerate
- Contour: A closed ring of points (the last-to-first edge is implied)
- Inclusion: Tri-state result of a containment query
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Inclusion(Enum):
    """Containment classification of a point against a contour or polygon.

    OUTSIDE and INSIDE double as the parity bits used when contours are
    composed with the even-odd rule. BOUNDARY is never composed; it wins.
    """

    BOUNDARY = -1
    OUTSIDE = 0
    INSIDE = 1

    def __xor__(self, other: "Inclusion") -> "Inclusion":
        if self is Inclusion.BOUNDARY or other is Inclusion.BOUNDARY:
            return Inclusion.BOUNDARY
        return Inclusion(self.value ^ other.value)

    @property
    def is_hit(self) -> bool:
        """True for INSIDE and BOUNDARY."""
        return self is not Inclusion.OUTSIDE


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True, slots=True)
class Segment:
    """A line segment between two points.

    Attributes:
        a: Start point
        b: End point
    """

    a: Point
    b: Point

    @property
    def is_degenerate(self) -> bool:
        """True when both endpoints coincide."""
        return self.a == self.b


@dataclass(frozen=True)
class Contour:
    """A closed ring of points.

    The edge from the last point back to the first is always part of the
    contour. Zero, one and two points are valid degenerate forms (empty,
    point, line). Points are kept in insertion order without deduplication.

    Attributes:
        points: Points forming the ring
    """

    points: tuple[Point, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.points, tuple):
            object.__setattr__(self, "points", tuple(self.points))

    @classmethod
    def from_tuples(cls, coords: Iterable[Sequence[float]]) -> "Contour":
        """Build a contour from (x, y) pairs."""
        return cls(points=tuple(Point(float(x), float(y)) for x, y in coords))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def edges(self) -> Iterator[tuple[int, int, Segment]]:
        """Iterate the closed ring's edges.

        The walk starts with the wrap edge (last -> first) and then proceeds
        in order, so for n points the index pairs are (n-1, 0), (0, 1), ...,
        (n-2, n-1).

        Yields:
            Tuples of (start_index, end_index, segment)
        """
        n = len(self.points)
        previous = n - 1
        for current in range(n):
            yield previous, current, Segment(self.points[previous], self.points[current])
            previous = current

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the contour.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y); all zeros for an empty contour
        """
        if not self.points:
            return (0.0, 0.0, 0.0, 0.0)

        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the shape kind and a list of [x, y] pairs
        """
        return {"kind": "contour", "points": [list(p.to_tuple()) for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contour":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with a "points" list of [x, y] pairs

        Returns:
            Contour instance
        """
        return cls.from_tuples(data["points"])
