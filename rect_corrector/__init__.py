"""Rect field correction for clipping and layout editors.

Keep this module free of Qt imports; `rect_corrector.qt_geometry` is imported
explicitly by callers that need it.
"""

from .geometry import IntRect, NormRect
from .ops.input_corrector import (
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
    "IntRect",
    "LowEdge",
    "NormRect",
    "PositionAxis",
    "SizeAxis",
    "changed_axes",
    "correct_absolute_position",
    "correct_absolute_size",
    "correct_relative_high",
    "correct_relative_low",
    "dependent_axis",
]
