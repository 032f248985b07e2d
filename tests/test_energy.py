from __future__ import annotations

from core.energy import CombatMomentum, LightEnergy


def test_try_spend_is_all_or_nothing() -> None:
    energy = LightEnergy(current=12, maximum=100, regen=0.5)
    assert energy.try_spend(10)
    assert energy.current == 2
    assert not energy.try_spend(10)
    assert energy.current == 2


def test_regenerate_clamps_at_maximum() -> None:
    energy = LightEnergy(current=99.8, maximum=100, regen=0.5)
    energy.regenerate()
    assert energy.current == 100
    energy.regenerate()
    assert energy.current == 100


def test_refill_and_fraction() -> None:
    energy = LightEnergy(current=25, maximum=100)
    assert energy.fraction == 0.25
    energy.refill()
    assert energy.fraction == 1.0


def test_momentum_expires() -> None:
    momentum = CombatMomentum(duration=3, boost=1.5)
    assert momentum.speed_cap(4.0) == 4.0
    momentum.refresh()
    assert momentum.speed_cap(4.0) == 6.0
    for _ in range(3):
        momentum.tick()
    assert not momentum.active
    assert momentum.speed_cap(4.0) == 4.0
