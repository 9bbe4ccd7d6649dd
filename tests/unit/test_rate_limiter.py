from storefront.api.middleware import RateLimiter


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_blocks_after_limit_until_window_rolls():
    clock = FakeClock()
    limiter = RateLimiter(max_requests=2, window_seconds=60, clock=clock)

    assert limiter.hit("a") == (True, 1, 0)
    clock.now += 10
    assert limiter.hit("a") == (True, 0, 0)

    allowed, remaining, retry_after = limiter.hit("a")
    assert (allowed, remaining) == (False, 0)
    assert retry_after == 51

    clock.now += 50
    assert limiter.hit("a")[0] is True


def test_clients_are_counted_separately():
    limiter = RateLimiter(max_requests=1, window_seconds=60, clock=FakeClock())

    assert limiter.hit("a")[0] is True
    assert limiter.hit("b")[0] is True
    assert limiter.hit("a")[0] is False


def test_idle_clients_are_forgotten_once_the_window_passes():
    clock = FakeClock()
    limiter = RateLimiter(max_requests=5, window_seconds=60, clock=clock)
    for n in range(1000):
        limiter.hit(f"10.0.{n // 256}.{n % 256}")
    assert len(limiter) == 1000

    clock.now += 61
    assert limiter.hit("late") == (True, 4, 0)

    assert len(limiter) == 1


def test_active_clients_survive_a_sweep():
    clock = FakeClock()
    limiter = RateLimiter(max_requests=2, window_seconds=60, clock=clock)
    limiter.hit("idle")
    clock.now += 30
    limiter.hit("busy")

    clock.now += 31
    limiter.hit("other")

    assert len(limiter) == 2
    assert limiter.hit("busy") == (True, 0, 0)
