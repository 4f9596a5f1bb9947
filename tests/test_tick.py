import pytest

from alers.tick import FixedStep


def make_clock(*times):
    values = iter(times)
    return lambda: next(values)


def test_nothing_to_tick_before_prepare():
    step = FixedStep(0.1, make_clock(0.0))
    assert step.should_tick() is False
    assert step.delta_time() == 0.0


def test_prepare_sets_delta_to_elapsed():
    step = FixedStep(0.1, make_clock(1.0, 1.25))
    step.prepare_tick()
    assert step.delta_time() == pytest.approx(0.25)
    assert step.should_tick() is True


def test_ticks_consume_all_elapsed_time():
    step = FixedStep(0.1, make_clock(0.0, 0.25))
    step.prepare_tick()
    deltas = []
    while step.should_tick():
        step.tick()
        deltas.append(step.delta_time())
    assert sum(deltas) == pytest.approx(0.25)
    assert all(d <= 0.1 + 1e-12 for d in deltas)
    assert deltas[0] == pytest.approx(0.1)
    assert len(deltas) == 3


def test_remainder_smaller_than_step_goes_in_one_tick():
    step = FixedStep(0.5, make_clock(0.0, 0.2))
    step.prepare_tick()
    step.tick()
    assert step.delta_time() == pytest.approx(0.2)
    assert step.should_tick() is False


def test_tiny_elapsed_time_does_not_tick():
    step = FixedStep(0.1, make_clock(0.0, 5e-7))
    step.prepare_tick()
    assert step.should_tick() is False


def test_prepare_measures_from_previous_prepare():
    step = FixedStep(1.0, make_clock(0.0, 2.0, 2.5))
    step.prepare_tick()
    step.prepare_tick()
    assert step.delta_time() == pytest.approx(0.5)