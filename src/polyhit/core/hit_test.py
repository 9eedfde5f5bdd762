"""Hit-testing queries over a shape tree.

Given a point in object space, these queries report what an editor cursor
is over: a vertex (corner), an edge, or the body of a contour. Results are
plain values carrying the hit contour and indices; the caller owns any
mutation that follows.

Visiting order mirrors drawing order:
- corners are searched front to back (first match in document order)
- edges and bodies are searched back to front so the topmost shape wins
"""

import logging
from dataclasses import dataclass
from enum import Enum

from polyhit.core.containment import EPSILON, contour_contains_point
from polyhit.core.geometry import distance_squared, distance_to_segment_squared
from polyhit.domain import Contour, Group, Point, Polygon, Shape

logger = logging.getLogger(__name__)

DEFAULT_HANDLE_RADIUS = 3.0


class HitTarget(Enum):
    """What the cursor is over, in order of precedence."""

    CORNER = "corner"
    EDGE = "edge"
    BODY = "body"
    EMPTY = "empty"


@dataclass(frozen=True)
class CornerHit:
    """Result of a corner search.

    Attributes:
        success: Whether a vertex was within reach
        contour: Contour owning the vertex
        index: Index of the vertex in the contour, -1 on a miss
    """

    success: bool = False
    contour: Contour | None = None
    index: int = -1


@dataclass(frozen=True)
class EdgeHit:
    """Result of an edge search.

    Attributes:
        success: Whether an edge was within reach
        contour: Contour owning the edge
        start_index: Index of the edge's first vertex, -1 on a miss
        end_index: Index of the edge's second vertex, -1 on a miss
        nearest: Nearest point on the edge to the query point
    """

    success: bool = False
    contour: Contour | None = None
    start_index: int = -1
    end_index: int = -1
    nearest: Point = Point(0.0, 0.0)

    @property
    def insert_index(self) -> int:
        """Index at which a vertex splitting this edge would be inserted.

        Always one past the start vertex, so splitting the wrap edge appends
        to the contour and leaves existing vertex indices unchanged.
        """
        return self.start_index + 1


@dataclass(frozen=True)
class BodyHit:
    """Result of a body search.

    Attributes:
        success: Whether the point is inside or on a contour
        contour: The topmost contour containing the point
    """

    success: bool = False
    contour: Contour | None = None


def _corner_in_contour(point: Point, contour: Contour, reach_squared: float) -> CornerHit:
    for index, vertex in enumerate(contour):
        if distance_squared(vertex, point) < reach_squared:
            return CornerHit(True, contour, index)
    return CornerHit()


def find_corner(point: Point, shape: Shape, radius: float = DEFAULT_HANDLE_RADIUS) -> CornerHit:
    """Find the first vertex within reach of a point.

    A vertex is in reach when its squared distance to the point is below
    twice the squared handle radius, which covers the square handle drawn
    around it.

    Args:
        point: Query point in object space
        shape: Shape tree to search
        radius: Handle radius in object units

    Returns:
        CornerHit describing the vertex, or a miss
    """
    reach_squared = 2.0 * radius * radius
    match shape:
        case Contour():
            return _corner_in_contour(point, shape, reach_squared)
        case Polygon(contours=contours):
            for contour in contours:
                hit = _corner_in_contour(point, contour, reach_squared)
                if hit.success:
                    return hit
        case Group(children=children):
            for child in children:
                hit = find_corner(point, child, radius)
                if hit.success:
                    return hit
    return CornerHit()


def _edge_in_contour(point: Point, contour: Contour, reach_squared: float) -> EdgeHit:
    for start, end, segment in contour.edges():
        dist_squared, nearest = distance_to_segment_squared(point, segment.a, segment.b)
        if dist_squared < reach_squared:
            return EdgeHit(True, contour, start, end, nearest)
    return EdgeHit()


def find_edge(point: Point, shape: Shape, radius: float = DEFAULT_HANDLE_RADIUS) -> EdgeHit:
    """Find the topmost edge within reach of a point.

    Args:
        point: Query point in object space
        shape: Shape tree to search
        radius: Reach in object units

    Returns:
        EdgeHit with the edge's vertex indices and the nearest point on it
    """
    reach_squared = radius * radius
    match shape:
        case Contour():
            return _edge_in_contour(point, shape, reach_squared)
        case Polygon(contours=contours):
            for contour in reversed(contours):
                hit = _edge_in_contour(point, contour, reach_squared)
                if hit.success:
                    return hit
        case Group(children=children):
            for child in reversed(children):
                hit = find_edge(point, child, radius)
                if hit.success:
                    return hit
    return EdgeHit()


def find_body(point: Point, shape: Shape, epsilon: float = EPSILON) -> BodyHit:
    """Find the topmost contour whose body contains a point.

    Each contour is tested on its own, so a point in a hole still selects
    the hole's ring.

    Args:
        point: Query point in object space
        shape: Shape tree to search
        epsilon: Edge tolerance for the containment test

    Returns:
        BodyHit with the containing contour, or a miss
    """
    match shape:
        case Contour():
            if contour_contains_point(shape, point, epsilon).is_hit:
                return BodyHit(True, shape)
        case Polygon(contours=contours):
            for contour in reversed(contours):
                if contour_contains_point(contour, point, epsilon).is_hit:
                    return BodyHit(True, contour)
        case Group(children=children):
            for child in reversed(children):
                hit = find_body(point, child, epsilon)
                if hit.success:
                    return hit
    return BodyHit()


def classify_target(
    point: Point,
    shape: Shape,
    radius: float = DEFAULT_HANDLE_RADIUS,
    epsilon: float = EPSILON,
) -> HitTarget:
    """Decide what the cursor is over, with corner > edge > body precedence."""
    if find_corner(point, shape, radius).success:
        target = HitTarget.CORNER
    elif find_edge(point, shape, radius).success:
        target = HitTarget.EDGE
    elif find_body(point, shape, epsilon).success:
        target = HitTarget.BODY
    else:
        target = HitTarget.EMPTY

    logger.debug("Hit target at (%s, %s): %s", point.x, point.y, target.value)
    return target
