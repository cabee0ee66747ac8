"""Correction operations.

`input_corrector` holds the pure per-field correctors; `layout_element`
binds them to a layout element's window bound and configured minimums.
"""

from .input_corrector import (
    ChangeResult,
    HighEdge,
    LowEdge,
    PositionAxis,
    SizeAxis,
    changed_axes,
    correct_absolute_position,
    correct_absolute_size,
    correct_relative_high,
    correct_relative_low,
    dependent_axis,
)

__all__ = [
    "ChangeResult",
    "HighEdge",
    "LowEdge",
    "PositionAxis",
    "SizeAxis",
    "changed_axes",
    "correct_absolute_position",
    "correct_absolute_size",
    "correct_relative_high",
    "correct_relative_low",
    "dependent_axis",
]
