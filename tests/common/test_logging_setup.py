from __future__ import annotations

import logging

import pytest

from common.logging import resolve_level, setup_default_logging


@pytest.mark.parametrize(
    "value,expected",
    [("debug", logging.DEBUG), (" WARNING ", logging.WARNING), (10, 10), (None, logging.INFO)],
)
def test_resolve_level(value: object, expected: int) -> None:
    assert resolve_level(value) == expected  # type: ignore[arg-type]


def test_resolve_unknown_name_uses_default() -> None:
    assert resolve_level("LOUD", default=logging.ERROR) == logging.ERROR


def test_setup_respects_existing_handlers() -> None:
    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    before = (list(root.handlers), root.level)
    try:
        setup_default_logging("DEBUG")
        assert (list(root.handlers), root.level) == before
    finally:
        root.removeHandler(handler)
