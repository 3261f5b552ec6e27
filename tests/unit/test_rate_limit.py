from app.infrastructure.security.rate_limit import SlidingWindowLimiter


class Clock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_limit_per_key_within_window():
    clock = Clock()
    limiter = SlidingWindowLimiter(2, 60, clock=clock)

    assert limiter.hit("1.1.1.1")
    assert limiter.hit("1.1.1.1")
    assert not limiter.hit("1.1.1.1")
    assert limiter.hit("2.2.2.2")


def test_window_slides():
    clock = Clock()
    limiter = SlidingWindowLimiter(1, 60, clock=clock)

    assert limiter.hit("k")
    clock.now += 59
    assert not limiter.hit("k")
    clock.now += 1
    assert limiter.hit("k")


def test_reset_clears_counters():
    limiter = SlidingWindowLimiter(1, 60)
    assert limiter.hit("k")
    limiter.reset()
    assert limiter.hit("k")


def test_idle_keys_are_swept():
    clock = Clock()
    limiter = SlidingWindowLimiter(5, 60, clock=clock)

    for i in range(3):
        assert limiter.hit(f"10.0.0.{i}")
    assert len(limiter) == 3

    clock.now += 61
    assert limiter.hit("10.0.0.99")
    assert len(limiter) == 1


def test_active_keys_survive_sweep():
    clock = Clock()
    limiter = SlidingWindowLimiter(1, 60, clock=clock)

    assert limiter.hit("old")
    clock.now += 30
    assert limiter.hit("recent")
    clock.now += 31
    assert limiter.hit("other")
    # "recent" is still inside its window
    assert not limiter.hit("recent")
    assert len(limiter) == 2
