"""Conversions between the rect value types and Qt geometry.

Only QtCore is used; no QApplication is needed.
"""

from __future__ import annotations

from PySide6.QtCore import QRect, QRectF

from .geometry import IntRect, NormRect


def int_rect_from_qrect(rect: QRect) -> IntRect:
    return IntRect(rect.x(), rect.y(), rect.width(), rect.height())


def int_rect_to_qrect(rect: IntRect) -> QRect:
    return QRect(rect.x, rect.y, rect.width, rect.height)


def norm_rect_from_qrectf(rect: QRectF) -> NormRect:
    # QRectF.right() is x + width, unlike QRect.right().
    return NormRect(rect.left(), rect.top(), rect.right(), rect.bottom())


def norm_rect_to_qrectf(rect: NormRect) -> QRectF:
    return QRectF(rect.left, rect.top, rect.width, rect.height)


def preview_rect(rect: NormRect, preview: QRectF) -> QRectF:
    """Map a normalized rect into the `preview` area."""
    return QRectF(
        preview.x() + rect.left * preview.width(),
        preview.y() + rect.top * preview.height(),
        rect.width * preview.width(),
        rect.height * preview.height(),
    )
