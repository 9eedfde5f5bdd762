"""Point containment for contours, polygons and shape trees.

Classification is three-valued (see ``Inclusion``). A single contour is
classified with the Hormann-Agathos crossing test, which reports points
lying exactly on an edge or vertex as BOUNDARY instead of leaving them to
the rounding of a plain crossing count. Several contours are composed with
the even-odd rule so that nested rings act as holes.

Reference:
    K. Hormann, A. Agathos, "The point in polygon problem for arbitrary
    polygons", Computational Geometry 20 (2001) 131-144.
"""

import math
from collections.abc import Iterable, Sequence

from polyhit.domain import Contour, Group, Inclusion, Point, Polygon, Shape
from polyhit.exceptions import ContourError

# Smallest positive float. As a tolerance it behaves as exact comparison.
EPSILON = math.ulp(0.0)


def _classify_degenerate(points: Sequence[Point], point: Point) -> Inclusion:
    """Classify against an empty, single-point or two-point contour."""
    n = len(points)
    if n == 0:
        return Inclusion.OUTSIDE

    first = points[0]
    if n == 1:
        return Inclusion.BOUNDARY if point == first else Inclusion.OUTSIDE

    # Two points form a line, which has no interior
    second = points[1]
    if point == first or point == second:
        return Inclusion.BOUNDARY

    between_x = (point.x > first.x) == (point.x < second.x)
    between_y = (point.y > first.y) == (point.y < second.y)
    collinear = (point.x - first.x) * (second.y - first.y) == (point.y - first.y) * (
        second.x - first.x
    )
    if between_x and between_y and collinear:
        return Inclusion.BOUNDARY
    return Inclusion.OUTSIDE


def contour_contains_point(
    contour: Contour | Sequence[Point], point: Point, epsilon: float = EPSILON
) -> Inclusion:
    """Classify a point against a single closed contour.

    The last-to-first edge is always tested. Contours of fewer than three
    points have no interior and can only return OUTSIDE or BOUNDARY.

    Args:
        contour: Contour or sequence of points forming a closed ring
        point: The query point
        epsilon: Absolute tolerance on the edge determinant below which the
            point counts as lying on the edge

    Returns:
        Inclusion of the point

    Raises:
        ContourError: If contour is None

    Examples:
        >>> square = Contour.from_tuples([(0, 0), (10, 0), (10, 10), (0, 10)])
        >>> contour_contains_point(square, Point(5, 5))
        <Inclusion.INSIDE: 1>
        >>> contour_contains_point(square, Point(5, 0))
        <Inclusion.BOUNDARY: -1>
    """
    if contour is None:
        raise ContourError("A contour is required for containment tests")

    n = len(contour)
    if n < 3:
        return _classify_degenerate(contour, point)

    px, py = point.x, point.y
    parity = 0

    current = contour[0]
    for i in range(1, n + 1):
        following = contour[0] if i == n else contour[i]

        # On a vertex, or on a horizontal edge through the point
        if current.y == py and (
            current.x == px
            or (following.y == py and (current.x > px) == (following.x < px))
        ):
            return Inclusion.BOUNDARY

        # Edge straddles the horizontal line through the point
        if (following.y < py) != (current.y < py):
            if following.x >= px and current.x > px:
                # Wholly to the right: a certain crossing
                parity = 1 - parity
            elif following.x >= px or current.x > px:
                determinant = (following.x - px) * (current.y - py) - (current.x - px) * (
                    following.y - py
                )
                if abs(determinant) < epsilon:
                    return Inclusion.BOUNDARY
                if (determinant > 0) == (current.y > following.y):
                    parity = 1 - parity

        current = following

    return Inclusion(parity)


def contours_contain_point(
    contours: Iterable[Contour | Sequence[Point]], point: Point, epsilon: float = EPSILON
) -> Inclusion:
    """Classify a point against several contours with the even-odd rule.

    Contours are visited in the given order. The first contour reporting
    BOUNDARY ends the walk; otherwise per-contour results are XOR-ed, so a
    point inside an odd number of rings is INSIDE and inside an even number
    (for example inside an outer ring and its hole) is OUTSIDE.

    Args:
        contours: Contours to compose, e.g. an outer ring followed by holes
        point: The query point
        epsilon: Edge tolerance passed to each contour test

    Returns:
        Composite inclusion of the point

    Raises:
        ContourError: If contours, or any contour in it, is None
    """
    if contours is None:
        raise ContourError("Contours are required for containment tests")

    result = Inclusion.OUTSIDE
    for contour in contours:
        inclusion = contour_contains_point(contour, point, epsilon)
        if inclusion is Inclusion.BOUNDARY:
            return Inclusion.BOUNDARY
        result ^= inclusion

    return result


def polygon_contains_point(polygon: Polygon, point: Point, epsilon: float = EPSILON) -> Inclusion:
    """Classify a point against a polygon's rings with the even-odd rule."""
    if polygon is None:
        raise ContourError("A polygon is required for containment tests")
    return contours_contain_point(polygon.contours, point, epsilon)


def shape_contains_point(shape: Shape, point: Point, epsilon: float = EPSILON) -> Inclusion:
    """Classify a point against any shape.

    A group is the union of its children: BOUNDARY if any child reports it,
    otherwise INSIDE if any child contains the point.

    Args:
        shape: Contour, polygon or group
        point: The query point
        epsilon: Edge tolerance

    Returns:
        Inclusion of the point
    """
    match shape:
        case Contour():
            return contour_contains_point(shape, point, epsilon)
        case Polygon():
            return polygon_contains_point(shape, point, epsilon)
        case Group(children=children):
            result = Inclusion.OUTSIDE
            for child in children:
                inclusion = shape_contains_point(child, point, epsilon)
                if inclusion is Inclusion.BOUNDARY:
                    return Inclusion.BOUNDARY
                if inclusion is Inclusion.INSIDE:
                    result = Inclusion.INSIDE
            return result
        case None:
            raise ContourError("A shape is required for containment tests")
        case _:
            raise TypeError(f"Unsupported shape type: {type(shape).__name__}")
