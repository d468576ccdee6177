from __future__ import annotations

from typing import Callable, Generic, TypeVar

from box_joints.config import HISTORY_LIMIT

T = TypeVar("T")


class History(Generic[T]):
    """Undo/redo over immutable snapshots.

    Snapshots live in an append-only list with a cursor on the current one.
    Pushing after an undo drops the redo tail; going over ``limit`` evicts
    the oldest snapshot and moves the cursor back with it.
    """

    def __init__(self, initial: T, limit: int = HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        self.limit = limit
        self._snapshots: list[T] = [initial]
        self._cursor = 0
        self._listeners: list[Callable[[T], None]] = []

    @property
    def current(self) -> T:
        return self._snapshots[self._cursor]

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    def push(self, snapshot: T) -> T:
        del self._snapshots[self._cursor + 1:]
        self._snapshots.append(snapshot)
        self._cursor = len(self._snapshots) - 1

        if len(self._snapshots) > self.limit:
            self._snapshots.pop(0)
            self._cursor -= 1

        self._notify()
        return snapshot

    def undo(self) -> T | None:
        if not self.can_undo:
            return None
        self._cursor -= 1
        self._notify()
        return self.current

    def redo(self) -> T | None:
        if not self.can_redo:
            return None
        self._cursor += 1
        self._notify()
        return self.current

    def reset(self, snapshot: T) -> None:
        """Start over from ``snapshot``, e.g. after loading a project."""
        self._snapshots = [snapshot]
        self._cursor = 0
        self._notify()

    def subscribe(self, listener: Callable[[T], None]) -> None:
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self.current)

    def __len__(self) -> int:
        return len(self._snapshots)

    def __repr__(self) -> str:
        return f"History(cursor={self._cursor}, snapshots={len(self._snapshots)}, limit={self.limit})"
