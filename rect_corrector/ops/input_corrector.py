"""Correction of user edits to a single rect field.

Each function takes the rect before the edit, the edited field and the
requested value, and returns the nearest rect that satisfies the bound and
minimum-size rules together with a `ChangeResult` telling the caller which
fields ended up different from what was asked.

Two representations are covered:
- `IntRect` clipping regions, bounded by an absolute window rect.
- `NormRect` layout regions, bounded by the unit square.

Rules shared by all functions:
- The edited field ("target") is kept at the requested value whenever the
  rules allow it; its paired field ("dependent") absorbs the rest.
- Position edits keep the position and shrink the size on overflow; size
  edits keep the size and move the position. Whichever field the user is
  dragging wins.
- All functions are total for finite input. Pass only the axis enum the
  function is typed for.
"""

from __future__ import annotations

import math
from enum import Enum, Flag

from ..geometry import IntRect, NormRect


class ChangeResult(Flag):
    """Which side of an edit had to be corrected."""

    NONE = 0
    TARGET_CHANGED = 1
    DEPENDENT_CHANGED = 2
    BOTH_CHANGED = TARGET_CHANGED | DEPENDENT_CHANGED


class PositionAxis(Enum):
    X = "x"
    Y = "y"


class SizeAxis(Enum):
    WIDTH = "width"
    HEIGHT = "height"


class LowEdge(Enum):
    LEFT = "left"
    TOP = "top"


class HighEdge(Enum):
    RIGHT = "right"
    BOTTOM = "bottom"


Axis = PositionAxis | SizeAxis | LowEdge | HighEdge

_DEPENDENT: dict[Axis, Axis] = {
    PositionAxis.X: SizeAxis.WIDTH,
    PositionAxis.Y: SizeAxis.HEIGHT,
    SizeAxis.WIDTH: PositionAxis.X,
    SizeAxis.HEIGHT: PositionAxis.Y,
    LowEdge.LEFT: HighEdge.RIGHT,
    LowEdge.TOP: HighEdge.BOTTOM,
    HighEdge.RIGHT: LowEdge.LEFT,
    HighEdge.BOTTOM: LowEdge.TOP,
}


def dependent_axis(axis: Axis) -> Axis:
    """Return the field that moves together with `axis`."""
    return _DEPENDENT[axis]


def changed_axes(target: Axis, result: ChangeResult) -> tuple[Axis, ...]:
    """Fields a UI has to re-sync after a correction, target first."""
    axes: list[Axis] = []
    if ChangeResult.TARGET_CHANGED in result:
        axes.append(target)
    if ChangeResult.DEPENDENT_CHANGED in result:
        axes.append(dependent_axis(target))
    return tuple(axes)


def correct_absolute_position(
    original: IntRect,
    axis: PositionAxis,
    value: int,
    bound: IntRect,
    min_size: int,
) -> tuple[IntRect, ChangeResult]:
    """Correct an edit of X or Y against `bound`.

    Overflow past the far edge is resolved by shrinking the size; the
    position the user typed is kept.
    """
    on_x = axis is PositionAxis.X
    position = value
    size = original.width if on_x else original.height
    lower = bound.x if on_x else bound.y
    upper = bound.right if on_x else bound.bottom
    result = ChangeResult.NONE

    if position < lower:
        # Keep the size, pull the position back in.
        position = lower
        result |= ChangeResult.TARGET_CHANGED
    elif upper < position:
        # Past the far edge: pin to it at minimum size.
        position = upper - min_size
        size = min_size
        result |= ChangeResult.BOTH_CHANGED

    if size < min_size:
        size = min_size
        result |= ChangeResult.DEPENDENT_CHANGED

    if upper < position + size:
        size = upper - position
        result |= ChangeResult.DEPENDENT_CHANGED

    if on_x:
        return IntRect(position, original.y, size, original.height), result
    return IntRect(original.x, position, original.width, size), result


def correct_absolute_size(
    original: IntRect,
    axis: SizeAxis,
    value: int,
    bound: IntRect,
    min_size: int,
) -> tuple[IntRect, ChangeResult]:
    """Correct an edit of Width or Height against `bound`.

    Overflow past the far edge is resolved by moving the position; the size
    the user typed is kept.
    """
    on_x = axis is SizeAxis.WIDTH
    position = original.x if on_x else original.y
    size = value
    lower = bound.x if on_x else bound.y
    upper = bound.right if on_x else bound.bottom
    size_upper = bound.width if on_x else bound.height
    result = ChangeResult.NONE

    if size < min_size:
        size = min_size
        result |= ChangeResult.TARGET_CHANGED
    elif size_upper < size:
        # Too large: fit to the bound.
        position = lower
        size = size_upper
        result |= ChangeResult.BOTH_CHANGED

    if position < lower:
        position = lower
        result |= ChangeResult.DEPENDENT_CHANGED
    elif upper < position:
        position = upper - min_size
        size = min_size
        result |= ChangeResult.BOTH_CHANGED

    if upper < position + size:
        position = upper - size
        result |= ChangeResult.DEPENDENT_CHANGED

    if on_x:
        return IntRect(position, original.y, size, original.height), result
    return IntRect(original.x, position, original.width, size), result


def correct_relative_low(
    original: NormRect,
    axis: LowEdge,
    value: float,
    min_size: float,
) -> tuple[NormRect, ChangeResult]:
    """Correct an edit of Left or Top within the unit square."""
    on_x = axis is LowEdge.LEFT
    low = value
    high = original.right if on_x else original.bottom
    result = ChangeResult.NONE

    if high < min_size:
        high = min_size
        result |= ChangeResult.DEPENDENT_CHANGED
    elif 1.0 < high:
        high = 1.0
        result |= ChangeResult.DEPENDENT_CHANGED

    if low < 0.0:
        low = 0.0
        result |= ChangeResult.TARGET_CHANGED
    elif 1.0 < low + min_size:
        low = 1.0 - min_size
        result |= ChangeResult.TARGET_CHANGED

    # Push the far edge out to keep the minimum extent.
    if high < low + min_size:
        high = low + min_size
        result |= ChangeResult.DEPENDENT_CHANGED

    if on_x:
        return NormRect(low, original.top, high, original.bottom), result
    return NormRect(original.left, low, original.right, high), result


def correct_relative_high(
    original: NormRect,
    axis: HighEdge,
    value: float,
    min_size: float,
) -> tuple[NormRect, ChangeResult]:
    """Correct an edit of Right or Bottom within the unit square."""
    on_x = axis is HighEdge.RIGHT
    low = original.left if on_x else original.top
    high = value
    result = ChangeResult.NONE

    if low < 0.0:
        low = 0.0
        result |= ChangeResult.DEPENDENT_CHANGED
    elif 1.0 < low + min_size:
        low = 1.0 - min_size
        result |= ChangeResult.DEPENDENT_CHANGED

    if high < min_size:
        high = min_size
        result |= ChangeResult.TARGET_CHANGED
    elif 1.0 < high:
        high = 1.0
        result |= ChangeResult.TARGET_CHANGED

    # Pull the near edge in to keep the minimum extent.
    if high < low + min_size:
        low = high - min_size
        # The subtraction can round up by an ulp; step down until the extent holds.
        while high < low + min_size or high - low < min_size:
            low = math.nextafter(low, -math.inf)
        result |= ChangeResult.DEPENDENT_CHANGED

    if on_x:
        return NormRect(low, original.top, high, original.bottom), result
    return NormRect(original.left, low, original.right, high), result
