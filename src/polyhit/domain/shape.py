"""Composite shapes built from contours.

A scene is a tree of shapes. The tree is a closed variant with three kinds:

- Contour: a single closed ring (defined in ``polyhit.domain.contour``)
- Polygon: several rings composed by even-odd parity (outer ring plus holes)
- Group: an ordered collection of child shapes, which may nest

Traversals match on these three kinds and nothing else.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from polyhit.domain.contour import Contour
from polyhit.exceptions import ShapeError


@dataclass(frozen=True)
class Polygon:
    """One or more contours composed with the even-odd rule.

    No parent/child relationship between rings is stored; a ring nested in
    another acts as a hole purely through parity.

    Attributes:
        contours: Rings of the polygon in drawing order
    """

    contours: tuple[Contour, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.contours, tuple):
            object.__setattr__(self, "contours", tuple(self.contours))

    def __len__(self) -> int:
        return len(self.contours)

    def __iter__(self) -> Iterator[Contour]:
        return iter(self.contours)

    def __getitem__(self, index: int) -> Contour:
        return self.contours[index]

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "polygon", "contours": [c.to_dict() for c in self.contours]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        return cls(contours=tuple(Contour.from_dict(c) for c in data["contours"]))


@dataclass(frozen=True)
class Group:
    """An ordered collection of shapes.

    Later children are drawn on top of earlier ones.

    Attributes:
        children: Child shapes in drawing order
    """

    children: tuple["Shape", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator["Shape"]:
        return iter(self.children)

    def __getitem__(self, index: int) -> "Shape":
        return self.children[index]

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "group", "children": [c.to_dict() for c in self.children]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Group":
        return cls(children=tuple(shape_from_dict(c) for c in data["children"]))


Shape: TypeAlias = Group | Polygon | Contour


def shape_from_dict(data: dict[str, Any]) -> Shape:
    """Deserialize any shape from its dictionary form.

    Args:
        data: Dictionary carrying a "kind" of "group", "polygon" or "contour"

    Returns:
        The matching shape instance

    Raises:
        ShapeError: If the kind is missing or unknown
    """
    match data:
        case {"kind": "group"}:
            return Group.from_dict(data)
        case {"kind": "polygon"}:
            return Polygon.from_dict(data)
        case {"kind": "contour"}:
            return Contour.from_dict(data)
        case {"kind": kind}:
            raise ShapeError(kind)
        case _:
            raise ShapeError(None)


def iter_contours(shape: Shape) -> Iterator[Contour]:
    """Yield every contour in the shape tree in drawing order."""
    match shape:
        case Contour():
            yield shape
        case Polygon(contours=contours):
            yield from contours
        case Group(children=children):
            for child in children:
                yield from iter_contours(child)
