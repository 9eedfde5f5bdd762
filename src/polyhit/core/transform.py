"""Screen/object coordinate transforms for a pan-and-zoom canvas.

Two conventions are supported for combining a uniform scale with a pan
offset (see ``TransformConvention``):

- direct: screen = offset + object * scale
- transposed: screen = (offset + object) * scale

Each forward function has an inverse, and each convention has its own
cursor-anchored zoom. All functions are pure and total for scale > 0.
"""

from polyhit.core.containment import EPSILON
from polyhit.domain import Point, TransformConvention, Viewport

# One standard wheel notch (120 units) changes the scale by 0.1.
SCALE_PER_DELTA = 0.1 / 120.0

# Scale returned when a wheel step would reach zero or below.
MIN_SCALE = 2.0 * EPSILON


def object_to_screen(point: Point, scale: float) -> Point:
    """Scale an object-space point into screen space."""
    return Point(point.x * scale, point.y * scale)


def screen_to_object(point: Point, scale: float) -> Point:
    """Scale a screen-space point back into object space."""
    return Point(point.x / scale, point.y / scale)


def object_to_screen_offset(offset: Point, point: Point, scale: float) -> Point:
    """Map object space to screen space, offset applied in screen space."""
    return Point(offset.x + point.x * scale, offset.y + point.y * scale)


def screen_to_object_offset(offset: Point, point: Point, scale: float) -> Point:
    """Inverse of ``object_to_screen_offset``."""
    return Point((point.x - offset.x) / scale, (point.y - offset.y) / scale)


def object_to_screen_transposed(offset: Point, point: Point, scale: float) -> Point:
    """Map object space to screen space, offset applied in object space."""
    return Point((offset.x + point.x) * scale, (offset.y + point.y) * scale)


def screen_to_object_transposed(offset: Point, point: Point, scale: float) -> Point:
    """Inverse of ``object_to_screen_transposed``."""
    return Point(point.x / scale - offset.x, point.y / scale - offset.y)


def mouse_wheel_scale_factor(
    scale: float, delta: float, scale_per_delta: float = SCALE_PER_DELTA
) -> float:
    """Step a scale by a mouse wheel delta.

    Args:
        scale: Current scale
        delta: Wheel delta (120 per notch on most devices, negative to zoom out)
        scale_per_delta: Scale change per unit of delta

    Returns:
        The new scale, never zero or negative

    Examples:
        >>> round(mouse_wheel_scale_factor(1.0, 120), 6)
        1.1
    """
    scale += delta * scale_per_delta
    return MIN_SCALE if scale <= 0.0 else scale


def zoom_at(offset: Point, cursor: Point, previous_scale: float, scale: float) -> Point:
    """Compute the offset that keeps the point under the cursor fixed.

    For the direct convention the offset lives in screen units, so the
    residual between the cursor and where the anchored object point lands
    at the new scale is added unscaled.

    Args:
        offset: Current pan offset
        cursor: Cursor position in screen space
        previous_scale: Scale before the zoom step
        scale: Scale after the zoom step

    Returns:
        New pan offset
    """
    anchor = screen_to_object_offset(offset, cursor, previous_scale)
    landed = object_to_screen_offset(offset, anchor, scale)
    return Point(offset.x + (cursor.x - landed.x), offset.y + (cursor.y - landed.y))


def zoom_at_transposed(
    offset: Point, cursor: Point, previous_scale: float, scale: float
) -> Point:
    """Compute the transposed-convention offset that keeps the cursor point fixed.

    The residual screen displacement is divided by the new scale because
    the offset is expressed in object units.

    Args:
        offset: Current pan offset
        cursor: Cursor position in screen space
        previous_scale: Scale before the zoom step
        scale: Scale after the zoom step

    Returns:
        New pan offset
    """
    anchor = screen_to_object_transposed(offset, cursor, previous_scale)
    landed = object_to_screen_transposed(offset, anchor, scale)
    return Point(
        offset.x + (cursor.x - landed.x) / scale,
        offset.y + (cursor.y - landed.y) / scale,
    )


def to_screen(viewport: Viewport, point: Point) -> Point:
    """Map an object-space point to screen space through a viewport."""
    if viewport.convention is TransformConvention.DIRECT:
        return object_to_screen_offset(viewport.offset, point, viewport.scale)
    return object_to_screen_transposed(viewport.offset, point, viewport.scale)


def to_object(viewport: Viewport, point: Point) -> Point:
    """Map a screen-space point to object space through a viewport."""
    if viewport.convention is TransformConvention.DIRECT:
        return screen_to_object_offset(viewport.offset, point, viewport.scale)
    return screen_to_object_transposed(viewport.offset, point, viewport.scale)


def wheel_zoom(
    viewport: Viewport,
    delta: float,
    cursor: Point,
    scale_per_delta: float = SCALE_PER_DELTA,
) -> Viewport:
    """Apply a mouse wheel step anchored at the cursor.

    Args:
        viewport: Current viewport
        delta: Wheel delta
        cursor: Cursor position in screen space
        scale_per_delta: Scale change per unit of delta

    Returns:
        A new viewport with the stepped scale and re-anchored offset
    """
    scale = mouse_wheel_scale_factor(viewport.scale, delta, scale_per_delta)
    if viewport.convention is TransformConvention.DIRECT:
        offset = zoom_at(viewport.offset, cursor, viewport.scale, scale)
    else:
        offset = zoom_at_transposed(viewport.offset, cursor, viewport.scale, scale)
    return Viewport(scale=scale, offset=offset, convention=viewport.convention)
