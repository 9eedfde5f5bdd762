"""Core geometry kernel for polyhit.

This module contains the pure, stateless computations behind an editor
canvas:

- Distance primitives (point-point, point-segment, squared variants)
- Containment classification (single contour, even-odd composition)
- Coordinate transforms (direct and transposed, wheel zoom, cursor anchoring)
- Hit-testing (corner, edge and body queries over a shape tree)

Every function is safe to call concurrently; none keeps state between calls.
"""

from polyhit.core.containment import (
    EPSILON,
    contour_contains_point,
    contours_contain_point,
    polygon_contains_point,
    shape_contains_point,
)
from polyhit.core.geometry import (
    distance,
    distance_squared,
    distance_to_segment,
    distance_to_segment_squared,
    nearest_point_on_segment,
)
from polyhit.core.hit_test import (
    DEFAULT_HANDLE_RADIUS,
    BodyHit,
    CornerHit,
    EdgeHit,
    HitTarget,
    classify_target,
    find_body,
    find_corner,
    find_edge,
)
from polyhit.core.transform import (
    MIN_SCALE,
    SCALE_PER_DELTA,
    mouse_wheel_scale_factor,
    object_to_screen,
    object_to_screen_offset,
    object_to_screen_transposed,
    screen_to_object,
    screen_to_object_offset,
    screen_to_object_transposed,
    to_object,
    to_screen,
    wheel_zoom,
    zoom_at,
    zoom_at_transposed,
)

__all__ = [
    # Constants
    "DEFAULT_HANDLE_RADIUS",
    "EPSILON",
    "MIN_SCALE",
    "SCALE_PER_DELTA",
    # Hit results
    "BodyHit",
    "CornerHit",
    "EdgeHit",
    "HitTarget",
    # Functions
    "classify_target",
    "contour_contains_point",
    "contours_contain_point",
    "distance",
    "distance_squared",
    "distance_to_segment",
    "distance_to_segment_squared",
    "find_body",
    "find_corner",
    "find_edge",
    "mouse_wheel_scale_factor",
    "nearest_point_on_segment",
    "object_to_screen",
    "object_to_screen_offset",
    "object_to_screen_transposed",
    "polygon_contains_point",
    "screen_to_object",
    "screen_to_object_offset",
    "screen_to_object_transposed",
    "shape_contains_point",
    "to_object",
    "to_screen",
    "wheel_zoom",
    "zoom_at",
    "zoom_at_transposed",
]
