from cmadness.webserver.rate import RATE_LIMIT, TIME_WINDOW, RateLimiter


class _Clock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_default_limit():
    clock = _Clock()
    limiter = RateLimiter(clock=clock)
    results = [limiter.check("10.0.0.1") for _ in range(RATE_LIMIT)]
    assert all(results)
    assert limiter.check("10.0.0.1") is False


def test_addresses_are_independent():
    limiter = RateLimiter(limit=1, clock=_Clock())
    assert limiter.check("10.0.0.1") is True
    assert limiter.check("10.0.0.1") is False
    assert limiter.check("10.0.0.2") is True


def test_window_resets():
    clock = _Clock()
    limiter = RateLimiter(limit=2, clock=clock)
    assert [limiter.check("a") for _ in range(3)] == [True, True, False]
    clock.now = TIME_WINDOW
    assert limiter.check("a") is False
    clock.now = TIME_WINDOW + 1
    assert limiter.check("a") is True


def test_cleanup_forgets_expired():
    clock = _Clock()
    limiter = RateLimiter(clock=clock)
    limiter.check("a")
    clock.now = TIME_WINDOW / 2
    limiter.check("b")
    clock.now = TIME_WINDOW + 1
    limiter.cleanup()
    assert len(limiter) == 1
    clock.now = TIME_WINDOW * 3
    limiter.cleanup()
    assert len(limiter) == 0