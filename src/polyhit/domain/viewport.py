"""Pan/zoom state of an editor canvas."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from polyhit.domain.contour import Point
from polyhit.exceptions import ScaleError


class TransformConvention(str, Enum):
    """How scale and offset compose when mapping object space to screen.

    - DIRECT: screen = offset + object * scale (offset is in screen units)
    - TRANSPOSED: screen = (offset + object) * scale (offset is in object units)

    Hit-testing must invert with the convention the renderer draws with;
    mixing them yields coordinates that are silently wrong.
    """

    DIRECT = "direct"
    TRANSPOSED = "transposed"


@dataclass(frozen=True)
class Viewport:
    """A uniform zoom factor plus a pan translation.

    Attributes:
        scale: Zoom factor, always greater than zero
        offset: Pan translation, interpreted according to ``convention``
        convention: Composition order of scale and offset
    """

    scale: float = 1.0
    offset: Point = field(default_factory=lambda: Point(0.0, 0.0))
    convention: TransformConvention = TransformConvention.TRANSPOSED

    def __post_init__(self) -> None:
        if not self.scale > 0:
            raise ScaleError(self.scale)

    def to_dict(self) -> dict[str, Any]:
        return {
            "scale": self.scale,
            "offset": self.offset.to_dict(),
            "convention": self.convention.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Viewport":
        return cls(
            scale=float(data["scale"]),
            offset=Point.from_dict(data["offset"]),
            convention=TransformConvention(data["convention"]),
        )
