from __future__ import annotations

import pytest

from effects.shockwave import EffectState, Shockwave
from engine.fx.config import MotionTriggerConfig
from engine.fx.trigger import AutoRespawnTrigger, ClickTrigger, MotionTrigger, fire, random_point


class _SequenceRandom:
    def __init__(self, values: list[float]):
        self._values = list(values)

    def random(self) -> float:
        return self._values.pop(0)

    def uniform(self, a: float, b: float) -> float:
        return a


def test_fire_resets_fully_regardless_of_prior_state(wave: Shockwave) -> None:
    assert wave.is_dormant
    fire(wave, (3.0, 4.0))
    assert wave.clock == 0.0
    assert wave.origin == (3.0, 4.0)
    assert wave.state is EffectState.ACTIVE


def test_fire_mid_animation_interrupts_and_restarts() -> None:
    w = Shockwave("primary", clock=1.2, origin=(0.0, 0.0))
    fire(w, (50.0, 60.0))
    assert w.clock == 0.0
    assert w.origin == (50.0, 60.0)


def test_fire_does_not_touch_other_effects() -> None:
    a = Shockwave("a", clock=1.0, origin=(1.0, 1.0))
    b = Shockwave("b", clock=2.0, origin=(2.0, 2.0))
    fire(a, (9.0, 9.0))
    assert (b.clock, b.origin) == (2.0, (2.0, 2.0))


def test_click_fires_every_time_without_debounce(wave: Shockwave) -> None:
    click = ClickTrigger(wave)
    click.on_click(10, 10)
    wave.clock = 0.7
    click.on_click(20, 30)
    assert wave.clock == 0.0
    assert wave.origin == (20.0, 30.0)


def test_motion_cooldown_sequence(wave: Shockwave, always_pass, fake_clock) -> None:  # noqa: ANN001
    trig = MotionTrigger(
        wave, MotionTriggerConfig(chance=0.2, min_delay_ms=1000), rng=always_pass, now_ms=fake_clock
    )
    fake_clock.set(0)
    assert trig.on_move(1, 1) is True
    fake_clock.set(500)
    wave.clock = 0.3
    assert trig.on_move(2, 2) is False
    assert wave.clock == 0.3
    assert wave.origin == (1.0, 1.0)
    fake_clock.set(1200)
    assert trig.on_move(3, 3) is True
    assert wave.origin == (3.0, 3.0)
    assert trig.gate.last_fire_ms == 1200


def test_motion_cooldown_boundary_is_strict(wave: Shockwave, always_pass, fake_clock) -> None:  # noqa: ANN001
    trig = MotionTrigger(wave, MotionTriggerConfig(min_delay_ms=1000), rng=always_pass, now_ms=fake_clock)
    fake_clock.set(100)
    assert trig.on_move(0, 0)
    fake_clock.set(1100)  # ちょうど 1000ms → まだ閉
    assert not trig.on_move(0, 0)
    fake_clock.set(1100.5)
    assert trig.on_move(0, 0)


def test_motion_probability_gate_blocks(wave: Shockwave, never_pass, fake_clock) -> None:  # noqa: ANN001
    trig = MotionTrigger(wave, rng=never_pass, now_ms=fake_clock)
    before = (wave.clock, wave.origin)
    for t in range(0, 10_000, 1500):
        fake_clock.set(t)
        assert trig.on_move(5, 5) is False
    assert (wave.clock, wave.origin) == before
    assert trig.gate.last_fire_ms is None


def test_rejected_draw_does_not_consume_cooldown(wave: Shockwave, fake_clock) -> None:  # noqa: ANN001
    rng = _SequenceRandom([0.9, 0.0])
    trig = MotionTrigger(wave, rng=rng, now_ms=fake_clock)
    fake_clock.set(0)
    assert not trig.on_move(1, 1)
    fake_clock.set(10)
    assert trig.on_move(2, 2)
    assert trig.gate.last_fire_ms == 10


def test_random_draw_consumed_once_per_event(wave: Shockwave, always_pass, fake_clock) -> None:  # noqa: ANN001
    trig = MotionTrigger(wave, rng=always_pass, now_ms=fake_clock)
    for t in (0, 10, 20):
        fake_clock.set(t)
        trig.on_move(0, 0)
    assert always_pass.calls == 3


def test_cooldown_gates_are_independent_per_trigger(always_pass, fake_clock) -> None:  # noqa: ANN001
    a = Shockwave("a")
    b = Shockwave("b")
    ta = MotionTrigger(a, rng=always_pass, now_ms=fake_clock)
    tb = MotionTrigger(b, rng=always_pass, now_ms=fake_clock)
    fake_clock.set(0)
    assert ta.on_move(1, 1)
    assert tb.on_move(2, 2)
    assert ta.gate is not tb.gate


def test_motion_with_seeded_rng_fires_at_most_once_per_cooldown(rng, fake_clock) -> None:  # noqa: ANN001
    w = Shockwave("secondary")
    trig = MotionTrigger(w, MotionTriggerConfig(chance=0.2, min_delay_ms=1000), rng=rng, now_ms=fake_clock)
    fired_at: list[float] = []
    for t in range(0, 10_000, 5):  # 5ms 毎の高頻度移動
        fake_clock.set(t)
        if trig.on_move(t % 300, t % 200):
            fired_at.append(t)
    assert fired_at
    gaps = [b - a for a, b in zip(fired_at, fired_at[1:])]
    assert all(g > 1000 for g in gaps)


def test_autoplay_respawns_only_when_dormant(always_pass) -> None:  # noqa: ANN001
    w = Shockwave("primary", clock=1.0, origin=(5.0, 5.0))
    auto = AutoRespawnTrigger(w, lambda: (800, 600), rng=always_pass)
    auto.tick(1 / 60)
    assert (w.clock, w.origin) == (1.0, (5.0, 5.0))
    w.clock = w.inactivity_threshold + 0.1
    auto.tick(1 / 60)
    assert w.clock == 0.0
    assert w.origin == (0.0, 0.0)


def test_random_point_within_viewport(rng) -> None:  # noqa: ANN001
    for _ in range(200):
        x, y = random_point(rng, (640, 480))
        assert 0.0 <= x <= 640.0
        assert 0.0 <= y <= 480.0


@pytest.mark.parametrize("chance", [0.0, -1.0])
def test_zero_or_negative_chance_never_fires(chance: float, wave: Shockwave, always_pass, fake_clock) -> None:  # noqa: ANN001,E501
    trig = MotionTrigger(wave, MotionTriggerConfig(chance=chance), rng=always_pass, now_ms=fake_clock)
    assert trig.on_move(0, 0) is False
