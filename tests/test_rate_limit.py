from api.rate_limit import SlidingWindowRateLimiter


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def test_allows_up_to_limit_then_blocks():
    limiter = SlidingWindowRateLimiter(max_requests=3, window_seconds=60, clock=FakeClock())
    assert [limiter.hit("1.2.3.4") for _ in range(4)] == [True, True, True, False]


def test_keys_are_independent():
    limiter = SlidingWindowRateLimiter(max_requests=1, window_seconds=60, clock=FakeClock())
    assert limiter.hit("a")
    assert limiter.hit("b")
    assert not limiter.hit("a")


def test_window_slides():
    clock = FakeClock()
    limiter = SlidingWindowRateLimiter(max_requests=2, window_seconds=60, clock=clock)
    limiter.hit("a")
    clock.now = 30
    limiter.hit("a")
    assert not limiter.hit("a")

    clock.now = 60.5  # first hit has aged out, second has not
    assert limiter.hit("a")
    assert not limiter.hit("a")


def test_blocked_requests_do_not_extend_the_window():
    clock = FakeClock()
    limiter = SlidingWindowRateLimiter(max_requests=1, window_seconds=10, clock=clock)
    limiter.hit("a")
    clock.now = 5
    assert not limiter.hit("a")
    clock.now = 10.1
    assert limiter.hit("a")


def test_sweep_drops_idle_keys():
    clock = FakeClock()
    limiter = SlidingWindowRateLimiter(max_requests=5, window_seconds=10, clock=clock)
    limiter.hit("a")
    limiter.hit("b")
    assert len(limiter) == 2

    clock.now = 11
    limiter.sweep()
    assert len(limiter) == 0
