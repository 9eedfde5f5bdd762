"""Domain models for polyhit.

This module contains the value types the geometry kernel operates on. All
models are:

- Immutable (frozen dataclasses)
- Constructed per call; the kernel keeps no state between queries
- Independent of any UI toolkit

Key classes:
- Point: A 2D point
- Segment: A pair of points
- Contour: A closed ring of points
- Polygon: Rings composed by even-odd parity
- Group: A collection of shapes
- Inclusion: Outside / inside / boundary classification
- Viewport: Scale and pan offset of a canvas
"""

from polyhit.domain.contour import Contour, Inclusion, Point, Segment
from polyhit.domain.shape import Group, Polygon, Shape, iter_contours, shape_from_dict
from polyhit.domain.viewport import TransformConvention, Viewport

__all__: list[str] = [
    # Enums
    "Inclusion",
    "TransformConvention",
    # Core types
    "Point",
    "Segment",
    "Contour",
    "Polygon",
    "Group",
    "Shape",
    "Viewport",
    # Helpers
    "iter_contours",
    "shape_from_dict",
]
