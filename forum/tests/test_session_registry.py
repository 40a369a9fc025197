from __future__ import annotations

import threading
from datetime import timedelta

from forum.domain.users.entities import Session
from forum.infrastructure.sessions import InMemorySessionRegistry
from forum.tests.support import FakeClock


def _session(
    clock: FakeClock, token: str, *, user_id: int = 1, ttl: timedelta = timedelta(hours=2)
) -> Session:
    return Session(token=token, user_id=user_id, expires_at=clock.now + ttl)


def test_lookup_returns_registered_session(clock: FakeClock) -> None:
    registry = InMemorySessionRegistry(clock=clock)
    session = _session(clock, "t1")
    registry.add(session)

    assert registry.lookup("t1") == session
    assert registry.lookup("missing") is None
    assert registry.lookup("") is None


def test_expiry_is_exclusive_of_the_expiry_instant(clock: FakeClock) -> None:
    registry = InMemorySessionRegistry(clock=clock)
    session = _session(clock, "t1", ttl=timedelta(minutes=5))
    registry.add(session)

    clock.now = session.expires_at - timedelta(microseconds=1)
    assert registry.lookup("t1") is not None

    clock.now = session.expires_at
    assert registry.lookup("t1") is None


def test_expired_lookup_removes_entry(clock: FakeClock) -> None:
    registry = InMemorySessionRegistry(clock=clock)
    registry.add(_session(clock, "t1", ttl=timedelta(seconds=1)))

    clock.advance(seconds=2)
    assert registry.lookup("t1") is None
    assert len(registry) == 0

    # Rewinding time must not resurrect the dropped session.
    clock.advance(seconds=-2)
    assert registry.lookup("t1") is None


def test_delete_is_idempotent(clock: FakeClock) -> None:
    registry = InMemorySessionRegistry(clock=clock)
    registry.add(_session(clock, "t1"))

    registry.delete("t1")
    registry.delete("t1")

    assert registry.lookup("t1") is None


def test_sweep_removes_only_expired(clock: FakeClock) -> None:
    registry = InMemorySessionRegistry(clock=clock)
    registry.add(_session(clock, "short", ttl=timedelta(minutes=1)))
    registry.add(_session(clock, "long", ttl=timedelta(hours=1)))

    clock.advance(minutes=2)

    assert registry.sweep() == 1
    assert len(registry) == 1
    assert registry.lookup("long") is not None


def test_add_sweeps_at_most_once_per_interval(clock: FakeClock) -> None:
    registry = InMemorySessionRegistry(clock=clock, sweep_interval=timedelta(minutes=10))
    registry.add(_session(clock, "a", ttl=timedelta(minutes=1)))

    clock.advance(minutes=5)
    registry.add(_session(clock, "b"))
    assert len(registry) == 2

    clock.advance(minutes=5)
    registry.add(_session(clock, "c"))
    assert len(registry) == 2
    assert registry.lookup("b") is not None
    assert registry.lookup("c") is not None


def test_concurrent_add_lookup_delete(clock: FakeClock) -> None:
    registry = InMemorySessionRegistry(clock=clock)
    errors: list[BaseException] = []

    def worker(worker_id: int) -> None:
        try:
            for i in range(200):
                token = f"{worker_id}-{i}"
                registry.add(_session(clock, token, user_id=worker_id))
                found = registry.lookup(token)
                assert found is not None and found.user_id == worker_id
                registry.delete(token)
        except BaseException as exc:  # noqa: BLE001
            errors.append(exc)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert len(registry) == 0
