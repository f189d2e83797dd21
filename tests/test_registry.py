from __future__ import annotations

import threading

from taskpulse.realtime.registry import ConnectionRegistry


class _Connection:
    def write(self, frame: bytes) -> None:
        pass


def test_register_is_idempotent() -> None:
    registry = ConnectionRegistry()
    conn = _Connection()

    registry.register(conn)
    registry.register(conn)

    assert len(registry) == 1
    assert conn in registry


def test_unregister_absent_connection_is_noop() -> None:
    registry = ConnectionRegistry()
    present = _Connection()
    registry.register(present)

    assert registry.unregister(_Connection()) is False
    assert len(registry) == 1

    assert registry.unregister(present) is True
    assert registry.unregister(present) is False
    assert len(registry) == 0


def test_snapshot_is_a_copy() -> None:
    registry = ConnectionRegistry()
    a, b = _Connection(), _Connection()
    registry.register(a)
    registry.register(b)

    snapshot = registry.snapshot()
    registry.unregister(a)

    assert set(snapshot) == {a, b}
    assert registry.snapshot() == [b]


def test_concurrent_register_and_unregister() -> None:
    registry = ConnectionRegistry()
    keep = [_Connection() for _ in range(50)]
    churn = [_Connection() for _ in range(50)]

    def _add_keep() -> None:
        for conn in keep:
            registry.register(conn)

    def _churn() -> None:
        for conn in churn:
            registry.register(conn)
            registry.snapshot()
            registry.unregister(conn)

    threads = [threading.Thread(target=_add_keep)] + [threading.Thread(target=_churn) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(registry) == len(keep)
    assert set(registry.snapshot()) == set(keep)
