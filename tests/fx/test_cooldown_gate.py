from __future__ import annotations

from engine.fx.trigger import CooldownGate


def test_gate_starts_open() -> None:
    gate = CooldownGate(1000)
    assert gate.last_fire_ms is None
    assert gate.is_open(0.0)
    assert gate.is_open(-5.0)


def test_gate_closes_after_mark_and_reopens_strictly_after_delay() -> None:
    gate = CooldownGate(1000)
    gate.mark(2000)
    assert not gate.is_open(2000)
    assert not gate.is_open(3000)
    assert gate.is_open(3001)


def test_zero_delay_still_rejects_same_timestamp() -> None:
    gate = CooldownGate(0)
    gate.mark(10)
    assert not gate.is_open(10)
    assert gate.is_open(10.001)
