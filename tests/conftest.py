"""Pytest configuration.

Shared fixtures mirror the reference layout used throughout the tests: a
640x360 window with a 200x100 clipping region, and a layout element placed
in the upper-left quarter of the output.
"""

from __future__ import annotations

import pytest

from rect_corrector.geometry import IntRect, NormRect


@pytest.fixture
def window() -> IntRect:
    return IntRect(0, 0, 640, 360)


@pytest.fixture
def clipping() -> IntRect:
    return IntRect(100, 50, 200, 100)


@pytest.fixture
def layout() -> NormRect:
    return NormRect(0.2, 0.1, 0.5, 0.4)


@pytest.fixture(autouse=True)
def _clear_log_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep user-level logging overrides out of the test session."""
    monkeypatch.delenv("RECT_CORRECTOR_LOG_LEVEL", raising=False)
    monkeypatch.delenv("RECT_CORRECTOR_LOG_CATS", raising=False)
