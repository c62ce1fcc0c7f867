"""Board element types.

A puzzle board holds three kinds of elements, all sharing an id namespace:
- Dot: circular target the line must touch
- Shape: polygon the line must enter exactly once
- RedArea: forbidden polygon the line must never cross or end inside
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from oneline.domain.point import Point


class ElementType(str, Enum):
    """Discriminator used in puzzle documents."""

    DOT = "dot"
    SHAPE = "shape"
    RED_AREA = "red-area"


@dataclass(frozen=True, slots=True)
class Dot:
    """A circular touch target.

    Once any segment of the line comes within ``radius`` of ``position`` the
    dot counts as visited for the rest of the stroke.

    Attributes:
        id: Element id, unique within the puzzle
        position: Center of the dot
        radius: Touch radius in board units (always > 0)
    """

    id: int
    position: Point
    radius: float

    @property
    def element_type(self) -> ElementType:
        return ElementType.DOT

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the puzzle document form."""
        return {
            "id": self.id,
            "type": self.element_type.value,
            "position": self.position.to_dict(),
            "radius": self.radius,
        }


@dataclass(frozen=True, slots=True)
class Shape:
    """A polygon the line must pass through exactly once.

    Attributes:
        id: Element id, unique within the puzzle
        position: Anchor point used by renderers for labels
        vertices: Closed simple polygon, at least 3 points
    """

    id: int
    position: Point
    vertices: tuple[Point, ...]

    @property
    def element_type(self) -> ElementType:
        return ElementType.SHAPE

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the puzzle document form."""
        return {
            "id": self.id,
            "type": self.element_type.value,
            "position": self.position.to_dict(),
            "vertices": [v.to_dict() for v in self.vertices],
        }


@dataclass(frozen=True, slots=True)
class RedArea:
    """A forbidden polygon.

    Attributes:
        id: Element id, unique within the puzzle
        position: Anchor point used by renderers
        vertices: Closed polygon, at least 3 points
    """

    id: int
    position: Point
    vertices: tuple[Point, ...]

    @property
    def element_type(self) -> ElementType:
        return ElementType.RED_AREA

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the puzzle document form."""
        return {
            "id": self.id,
            "type": self.element_type.value,
            "position": self.position.to_dict(),
            "vertices": [v.to_dict() for v in self.vertices],
        }


BoardElement = Dot | Shape | RedArea
