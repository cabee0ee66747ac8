from __future__ import annotations

import dataclasses

import pytest

from rect_corrector.geometry import IntRect, NormRect


def test_int_rect_edges() -> None:
    r = IntRect(10, 20, 30, 40)

    assert r.right == 40
    assert r.bottom == 60


def test_contains_rect_is_edge_inclusive(window: IntRect) -> None:
    assert window.contains_rect(window)
    assert window.contains_rect(IntRect(640, 360, 0, 0))
    assert not window.contains_rect(IntRect(600, 0, 41, 10))
    assert not window.contains_rect(IntRect(-1, 0, 10, 10))


def test_rects_are_immutable(clipping: IntRect, layout: NormRect) -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        clipping.x = 0  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        layout.left = 0.0  # type: ignore[misc]


def test_norm_rect_extent(layout: NormRect) -> None:
    assert layout.width == pytest.approx(0.3)
    assert layout.height == pytest.approx(0.3)


def test_norm_rect_projects_into_bound() -> None:
    bound = IntRect(100, 0, 640, 360)
    r = NormRect(0.25, 0.5, 0.75, 1.0)

    assert r.to_int_rect(bound) == IntRect(260, 180, 320, 180)


def test_adjacent_norm_rects_stay_adjacent_after_projection() -> None:
    bound = IntRect(0, 0, 101, 101)
    a = NormRect(0.0, 0.0, 1 / 3, 1.0).to_int_rect(bound)
    b = NormRect(1 / 3, 0.0, 1.0, 1.0).to_int_rect(bound)

    assert a.right == b.x
    assert b.right == bound.right
