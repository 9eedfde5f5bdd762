"""Distance primitives for hit-testing.

This module provides the point and segment distance queries an editor uses
to decide whether the cursor is over a vertex or an edge:
- Euclidean and squared distance between points
- Nearest point on a segment and the (squared) distance to it

All functions are pure and stateless. The squared variants never take a
square root and are meant for threshold comparisons.
"""

import math

from polyhit.domain import Point, Segment


def distance(p1: Point, p2: Point) -> float:
    """Calculate the Euclidean distance between two points.

    Args:
        p1: First point
        p2: Second point

    Returns:
        Distance between the points

    Examples:
        >>> distance(Point(0.0, 0.0), Point(3.0, 4.0))
        5.0
    """
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return math.sqrt(dx * dx + dy * dy)


def distance_squared(p1: Point, p2: Point) -> float:
    """Calculate the squared Euclidean distance between two points.

    Args:
        p1: First point
        p2: Second point

    Returns:
        Squared distance between the points

    Examples:
        >>> distance_squared(Point(0.0, 0.0), Point(3.0, 4.0))
        25.0
    """
    dx = p1.x - p2.x
    dy = p1.y - p2.y
    return dx * dx + dy * dy


def _nearest_on_segment(point: Point, seg_start: Point, seg_end: Point) -> tuple[float, float, Point]:
    """Return (dx, dy, nearest) from the nearest point on the segment to ``point``."""
    sx = seg_end.x - seg_start.x
    sy = seg_end.y - seg_start.y

    # Zero-length segment is a point; so is one whose squared length underflows
    length_squared = sx * sx + sy * sy
    if length_squared == 0.0:
        return point.x - seg_start.x, point.y - seg_start.y, seg_start

    # t = dot(point - start, end - start) / |end - start|^2
    t = ((point.x - seg_start.x) * sx + (point.y - seg_start.y) * sy) / length_squared

    if t < 0.0:
        nearest = seg_start
    elif t > 1.0:
        nearest = seg_end
    else:
        nearest = Point(seg_start.x + t * sx, seg_start.y + t * sy)

    return point.x - nearest.x, point.y - nearest.y, nearest


def distance_to_segment(point: Point, seg_start: Point, seg_end: Point) -> tuple[float, Point]:
    """Find the distance from a point to a line segment.

    Projects the point onto the segment's line and clamps the projection to
    the segment endpoints. A segment whose endpoints coincide is treated as
    a point.

    Args:
        point: The query point
        seg_start: Start point of the segment
        seg_end: End point of the segment

    Returns:
        Tuple of (distance, nearest_point)

    Examples:
        >>> distance_to_segment(Point(1.0, 1.0), Point(0.0, 0.0), Point(2.0, 0.0))
        (1.0, Point(x=1.0, y=0.0))
    """
    dx, dy, nearest = _nearest_on_segment(point, seg_start, seg_end)
    return math.sqrt(dx * dx + dy * dy), nearest


def distance_to_segment_squared(
    point: Point, seg_start: Point, seg_end: Point
) -> tuple[float, Point]:
    """Find the squared distance from a point to a line segment.

    Same projection as ``distance_to_segment`` without the square root.

    Args:
        point: The query point
        seg_start: Start point of the segment
        seg_end: End point of the segment

    Returns:
        Tuple of (squared_distance, nearest_point)
    """
    dx, dy, nearest = _nearest_on_segment(point, seg_start, seg_end)
    return dx * dx + dy * dy, nearest


def nearest_point_on_segment(point: Point, segment: Segment) -> tuple[Point, float]:
    """Find the closest point on a segment to a given point.

    Args:
        point: The point to project
        segment: The segment to project onto

    Returns:
        Tuple of (nearest_point, distance)
    """
    dist, nearest = distance_to_segment(point, segment.a, segment.b)
    return nearest, dist
