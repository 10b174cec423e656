from __future__ import annotations

from effects.displacement import ScrollingDisplacement


def test_scroll_wraps_after_exceeding_width() -> None:
    d = ScrollingDisplacement(pattern_width=500, offset=499)
    assert d.scroll() == 500
    assert d.scroll() == 0
    assert d.scroll() == 1


def test_scroll_is_monotonic_until_wrap() -> None:
    d = ScrollingDisplacement(pattern_width=10)
    seen = [d.scroll() for _ in range(12)]
    assert seen == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 0, 1]


def test_map_size_defaults_to_square() -> None:
    assert ScrollingDisplacement(pattern_width=64).map_size == (64.0, 64.0)
    assert ScrollingDisplacement(pattern_width=64, pattern_height=32).map_size == (64.0, 32.0)
