"""Polyhit - planar geometry kernel for interactive polygon editors.

Polyhit provides the pure, stateless computations an editor canvas needs for
hit-testing and navigation: point containment for contours and polygons with
holes, nearest-point distance queries against segments, and screen/object
coordinate transforms including cursor-anchored zoom.

Example:
    >>> from polyhit.core import contour_contains_point
    >>> from polyhit.domain import Contour, Inclusion, Point
    >>> square = Contour.from_tuples([(0, 0), (10, 0), (10, 10), (0, 10)])
    >>> contour_contains_point(square, Point(5, 5)) is Inclusion.INSIDE
    True
"""

__version__ = "0.1.0"
__author__ = "Polyhit contributors"

__all__ = ["__author__", "__version__"]
