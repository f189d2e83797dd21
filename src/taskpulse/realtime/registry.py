"""In-memory registry of open stream channels for a single process."""

from __future__ import annotations

import threading
from typing import Protocol


class Connection(Protocol):
    """Anything that accepts encoded frames, e.g. `OutputChannel`."""

    def write(self, frame: bytes) -> None: ...


class ConnectionRegistry:
    """Membership set of open channels, unique by identity."""

    def __init__(self) -> None:
        self._connections: set[Connection] = set()
        self._lock = threading.Lock()

    def register(self, connection: Connection) -> None:
        with self._lock:
            self._connections.add(connection)

    def unregister(self, connection: Connection) -> bool:
        """Remove `connection`. Returns False when it was not a member."""
        with self._lock:
            if connection not in self._connections:
                return False
            self._connections.discard(connection)
            return True

    def snapshot(self) -> list[Connection]:
        with self._lock:
            return list(self._connections)

    def __len__(self) -> int:
        with self._lock:
            return len(self._connections)

    def __contains__(self, connection: object) -> bool:
        with self._lock:
            return connection in self._connections
