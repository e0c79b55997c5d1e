import pytest

from lcbasetools.timer import TimeObj


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def test_ding_after_duration(clock):
    timer = TimeObj(10, clock=clock)
    clock.now = 10_000
    assert timer.ding() is False
    clock.now = 10_001
    assert timer.ding() is True
    clock.now = 0
    assert timer.ding() is True


def test_not_started_never_dings(clock):
    timer = TimeObj(10, start_now=False, clock=clock)
    clock.now = 1_000_000
    assert timer.ding() is False
    assert timer.fraction() == 1.0


def test_duration_in_ms(clock):
    assert TimeObj(10, clock=clock).duration() == 10.0
    assert TimeObj(5_000_000, clock=clock).duration() == 5_000_000.0
    assert TimeObj(-3, clock=clock).duration() == 0.0


def test_fraction_progresses(clock):
    timer = TimeObj(10, clock=clock)
    assert timer.fraction() == 1.0
    clock.now = 5_000
    assert timer.fraction() == pytest.approx(0.5)
    clock.now = 20_000
    timer.ding()
    assert timer.fraction() == 0.0


def test_step_time_keeps_phase(clock):
    timer = TimeObj(10, clock=clock)
    clock.now = 10_500
    assert timer.ding() is True
    timer.step_time()
    clock.now = 19_999
    assert timer.ding() is False
    clock.now = 20_001
    assert timer.ding() is True


def test_step_time_before_start_starts(clock):
    timer = TimeObj(10, start_now=False, clock=clock)
    clock.now = 1_000
    timer.step_time()
    clock.now = 11_000
    assert timer.ding() is False
    clock.now = 11_001
    assert timer.ding() is True


def test_reset_stops_ding(clock):
    timer = TimeObj(10, clock=clock)
    clock.now = 50_000
    assert timer.ding() is True
    timer.reset()
    assert timer.ding() is False
    timer.start()
    assert timer.ding() is False


def test_rollover(clock):
    clock.now = 2**32 - 100
    timer = TimeObj(1, clock=clock)
    clock.now += 500
    assert timer.ding() is False
    clock.now += 600
    assert timer.ding() is True


def test_millisecond_mode(clock):
    timer = TimeObj(5_000_000, clock=clock)
    clock.now = 5_000_000 * 1000
    assert timer.ding() is False
    clock.now += 1000
    assert timer.ding() is True


def test_set_time_without_start(clock):
    timer = TimeObj(10, clock=clock)
    timer.set_time(20, start_now=False)
    clock.now = 100_000
    assert timer.ding() is False
    assert timer.duration() == 20.0


def test_zero_time_steps_back_to_prestart(clock):
    timer = TimeObj(0, clock=clock)
    clock.now = 1
    assert timer.ding() is True
    timer.step_time()
    assert timer.ding() is False