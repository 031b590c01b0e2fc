"""Shared dataclasses for the shape pipeline (avoids circular imports)."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class ShapeKind(Enum):
    """The four shapes the robot knows, with their descriptor prefix."""
    SQUARE = ("S", "Square", 4)
    TRIANGLE = ("T", "Triangle", 3)
    PENTAGON = ("P", "Pentagon", 5)
    HEXAGON = ("H", "Hexagon", 6)

    def __init__(self, prefix, label, side_count):
        self.prefix = prefix
        self.label = label
        self.side_count = side_count

    @property
    def is_regular(self) -> bool:
        return self is not ShapeKind.TRIANGLE

    @classmethod
    def from_prefix(cls, prefix: str) -> Optional["ShapeKind"]:
        for kind in cls:
            if kind.prefix == prefix:
                return kind
        return None


@dataclass(frozen=True)
class ShapeSpec:
    """A validated shape request.

    Regular polygons carry one side length, triangles carry the three sides
    in the order they were written in the descriptor.
    """
    kind: ShapeKind
    sides: Tuple[int, ...]

    @classmethod
    def regular(cls, kind: ShapeKind, side_cm: int) -> "ShapeSpec":
        return cls(kind, (side_cm,))

    @classmethod
    def triangle(cls, a: int, b: int, c: int) -> "ShapeSpec":
        return cls(ShapeKind.TRIANGLE, (a, b, c))

    def describe(self) -> str:
        return "{}: {}".format(self.kind.label, ", ".join(str(s) for s in self.sides))


@dataclass(frozen=True)
class SideSegment:
    """One side of a shape: drive distance_cm, then turn turn_deg in place."""
    distance_cm: int
    turn_deg: float
