"""Undo/redo history over immutable snapshots.

``History`` is generic over the snapshot type. It keeps three pieces of
state: ``past`` (oldest first), ``present`` and ``future`` (the next value to
redo first). Every value stored is treated as immutable; the history never
copies or mutates snapshots, it only moves references between the stacks.

Invariants:
    - A :meth:`History.set` whose candidate structurally equals ``present``
      leaves all three pieces of state untouched.
    - ``undo()`` followed by ``redo()`` restores the exact prior ``present``.
    - ``set`` after ``undo`` discards the old future for good.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from resume_studio.utils.equality import structurally_equal

logger = logging.getLogger(__name__)

__all__ = ["History", "HistorySnapshot"]

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class HistorySnapshot(Generic[T]):
    """Read-only view of a history at one point in time.

    Attributes:
        past: Earlier values, oldest first.
        present: Current value.
        future: Undone values, next redo first.
    """

    past: tuple[T, ...]
    present: T
    future: tuple[T, ...]


class History(Generic[T]):
    """Linear undo/redo stack with no-op suppression.

    Args:
        initial: The first ``present`` value.
        equals: Value-equality used to detect no-op updates. Defaults to
            :func:`structurally_equal`.
        limit: Maximum length of ``past``; the oldest entries are dropped once
            it is exceeded. ``None`` keeps everything.
    """

    def __init__(
        self,
        initial: T,
        *,
        equals: Callable[[T, T], bool] | None = None,
        limit: int | None = None,
    ) -> None:
        if limit is not None and limit < 1:
            raise ValueError("limit must be a positive integer or None")
        self._equals = equals or structurally_equal
        self._limit = limit
        self._past: deque[T] = deque()
        self._present = initial
        self._future: deque[T] = deque()

    @property
    def present(self) -> T:
        return self._present

    @property
    def past(self) -> tuple[T, ...]:
        return tuple(self._past)

    @property
    def future(self) -> tuple[T, ...]:
        return tuple(self._future)

    @property
    def can_undo(self) -> bool:
        return bool(self._past)

    @property
    def can_redo(self) -> bool:
        return bool(self._future)

    def snapshot(self) -> HistorySnapshot[T]:
        return HistorySnapshot(past=self.past, present=self._present, future=self.future)

    def set(self, value: T | Callable[[T], T]) -> bool:
        """Install a new present value.

        *value* is either the replacement value or a function computing it
        from the current present. Functions always receive the latest
        present, so several updates in a row compose in submission order.

        Returns:
            True when a history entry was recorded, False when the candidate
            equals the current present and nothing changed.
        """
        candidate = value(self._present) if callable(value) else value
        if self._equals(candidate, self._present):
            return False

        self._past.append(self._present)
        if self._limit is not None and len(self._past) > self._limit:
            self._past.popleft()
        self._present = candidate
        if self._future:
            logger.debug("Discarding %d redo entries", len(self._future))
        self._future.clear()
        return True

    def undo(self) -> bool:
        """Step back one value. Returns False when there is nothing to undo."""
        if not self._past:
            return False
        previous = self._past.pop()
        self._future.appendleft(self._present)
        self._present = previous
        return True

    def redo(self) -> bool:
        """Step forward one value. Returns False when there is nothing to redo."""
        if not self._future:
            return False
        following = self._future.popleft()
        self._past.append(self._present)
        self._present = following
        return True

    def reset(self, value: T) -> None:
        """Replace the present and forget all undo/redo entries."""
        self._past.clear()
        self._future.clear()
        self._present = value
