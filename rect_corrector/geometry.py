from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class IntRect:
    """Absolute pixel rect in (x, y, width, height) form."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def contains_rect(self, other: IntRect) -> bool:
        """True when `other` lies fully inside this rect (edges inclusive)."""
        return (
            self.x <= other.x
            and other.right <= self.right
            and self.y <= other.y
            and other.bottom <= self.bottom
        )


@dataclass(frozen=True, slots=True)
class NormRect:
    """Normalized rect (0..1) in (left, top, right, bottom) form."""

    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def to_int_rect(self, bound: IntRect) -> IntRect:
        """Project into `bound`, rounding each edge to the nearest pixel."""
        left = bound.x + int(round(self.left * bound.width))
        top = bound.y + int(round(self.top * bound.height))
        right = bound.x + int(round(self.right * bound.width))
        bottom = bound.y + int(round(self.bottom * bound.height))
        return IntRect(left, top, right - left, bottom - top)
