from qsnake.timer import MoveTimer


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def test_update_false_before_interval():
    clock = FakeClock(100.0)
    timer = MoveTimer(interval=0.5, clock=clock)
    clock.now = 100.25
    assert timer.update() is False


def test_update_true_at_interval_and_restarts():
    clock = FakeClock(100.0)
    timer = MoveTimer(interval=0.5, clock=clock)
    clock.now = 100.5
    assert timer.update() is True
    assert timer.update() is False
    clock.now = 101.0
    assert timer.update() is True


def test_total_time_counts_from_creation():
    clock = FakeClock(10.0)
    timer = MoveTimer(interval=0.5, clock=clock)
    clock.now = 13.0
    timer.update()
    assert timer.total_time() == 3.0


def test_default_interval_is_thirty_milliseconds():
    clock = FakeClock(0.0)
    timer = MoveTimer(clock=clock)
    clock.now = 0.029
    assert timer.update() is False
    clock.now = 0.031
    assert timer.update() is True


def test_real_clock_total_time_non_negative():
    timer = MoveTimer()
    assert timer.total_time() >= 0.0