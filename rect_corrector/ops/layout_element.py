"""Element-level entry points for field edits.

A layout element carries both rects the user can edit: the clipping region
inside the captured window, and the bound-relative region on the output.
These helpers look up the bound and minimum size for the element and
forward to the matching corrector in `input_corrector`.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from ..geometry import IntRect, NormRect
from ..logger import get_logger
from ..settings_manager import SettingsManager
from .input_corrector import (
    ChangeResult,
    HighEdge,
    LowEdge,
    PositionAxis,
    SizeAxis,
    correct_absolute_position,
    correct_absolute_size,
    correct_relative_high,
    correct_relative_low,
)

_logger = get_logger("layout")


class LayoutElementError(ValueError):
    """Element state does not allow the requested edit."""


@dataclass(frozen=True, slots=True)
class LayoutElement:
    index: int
    window: IntRect | None
    clipping: IntRect
    bound_relative: NormRect
    fit: bool = False

    @property
    def is_window_valid(self) -> bool:
        return self.window is not None and self.window.width > 0 and self.window.height > 0


def _defaults(settings: SettingsManager | None) -> tuple[int, float]:
    if settings is None:
        return (
            int(SettingsManager.DEFAULTS["clipping_size_lower_bound"]),
            float(SettingsManager.DEFAULTS["minimum_bound_relative_size"]),
        )
    return settings.clipping_size_lower_bound, settings.minimum_bound_relative_size


def try_change_clipping_rect_without_fit(
    element: LayoutElement,
    target: PositionAxis | SizeAxis,
    value: int,
    settings: SettingsManager | None = None,
) -> tuple[IntRect, ChangeResult]:
    """Correct an edit of the element's clipping rect against its window.

    Raises:
        LayoutElementError: the window is invalid or the element is in fit mode
            (the clipping rect then follows the window and is not editable).
        TypeError: `target` is not a clipping axis.
    """
    if not element.is_window_valid:
        _logger.error("element %d: clipping edit with invalid window %s", element.index, element.window)
        raise LayoutElementError(f"element {element.index} has no valid window")
    assert element.window is not None
    if element.fit:
        _logger.error("element %d: clipping edit while fit is enabled", element.index)
        raise LayoutElementError(f"element {element.index} is in fit mode")

    min_size, _ = _defaults(settings)
    if isinstance(target, PositionAxis):
        changed, result = correct_absolute_position(element.clipping, target, value, element.window, min_size)
    elif isinstance(target, SizeAxis):
        changed, result = correct_absolute_size(element.clipping, target, value, element.window, min_size)
    else:
        raise TypeError(f"not a clipping axis: {target!r}")

    if result:
        _logger.debug(
            "element %d: clipping %s=%s corrected to %s (%s)",
            element.index,
            target.value,
            value,
            changed,
            result.name,
        )
    return changed, result


def try_change_bound_relative(
    element: LayoutElement,
    target: LowEdge | HighEdge,
    value: float,
    settings: SettingsManager | None = None,
) -> tuple[NormRect, ChangeResult]:
    """Correct an edit of the element's bound-relative rect.

    Raises:
        TypeError: `target` is not a bound-relative edge.
    """
    _, min_size = _defaults(settings)
    if isinstance(target, LowEdge):
        changed, result = correct_relative_low(element.bound_relative, target, value, min_size)
    elif isinstance(target, HighEdge):
        changed, result = correct_relative_high(element.bound_relative, target, value, min_size)
    else:
        raise TypeError(f"not a bound-relative edge: {target!r}")

    if result:
        _logger.debug(
            "element %d: bound %s=%.4f corrected to %s (%s)",
            element.index,
            target.value,
            value,
            changed,
            result.name,
        )
    return changed, result


def with_clipping(element: LayoutElement, rect: IntRect) -> LayoutElement:
    return dataclasses.replace(element, clipping=rect)


def with_bound_relative(element: LayoutElement, rect: NormRect) -> LayoutElement:
    return dataclasses.replace(element, bound_relative=rect)
