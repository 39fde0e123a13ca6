from duewise.infrastructure.locks import SweepLock


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_second_holder_is_rejected_until_release():
    lock = SweepLock("sweep", clock=FakeClock())

    token = lock.acquire(60)
    assert token is not None
    assert lock.acquire(60) is None
    assert lock.release(token) is True
    assert lock.acquire(60) is not None


def test_stale_lock_expires():
    clock = FakeClock()
    lock = SweepLock("sweep", clock=clock)
    lock.acquire(60)

    clock.now += 61

    assert lock.held is False
    assert lock.acquire(60) is not None


def test_each_acquisition_gets_a_new_token():
    clock = FakeClock()
    lock = SweepLock("sweep", clock=clock)
    first = lock.acquire(60)
    clock.now += 61

    second = lock.acquire(60)

    assert second is not None
    assert second != first


def test_expired_holder_cannot_release_its_successor():
    clock = FakeClock()
    lock = SweepLock("sweep", clock=clock)
    first = lock.acquire(60)
    clock.now += 61
    second = lock.acquire(60)

    assert lock.release(first) is False
    assert lock.held is True
    assert lock.release(second) is True
    assert lock.held is False


def test_overrunning_hold_leaves_the_next_run_locked():
    clock = FakeClock()
    lock = SweepLock("sweep", clock=clock)

    with lock.hold(60) as acquired:
        assert acquired is True
        clock.now += 61
        assert lock.acquire(60) is not None

    assert lock.held is True
    assert lock.acquire(60) is None


def test_hold_releases_on_error():
    lock = SweepLock("sweep", clock=FakeClock())

    try:
        with lock.hold(60) as acquired:
            assert acquired is True
            raise RuntimeError("boom")
    except RuntimeError:
        pass

    assert lock.held is False


def test_hold_does_not_release_foreign_lock():
    lock = SweepLock("sweep", clock=FakeClock())
    lock.acquire(60)

    with lock.hold(60) as acquired:
        assert acquired is False

    assert lock.held is True
