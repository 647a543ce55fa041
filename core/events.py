"""core/events.py — Game events and the ordered event stream.

Two sources feed the game: the tick clock and the input mapper.  Both
push onto one ``EventStream``; the session drains it strictly in
arrival order, one event at a time::

    from core.events import EventStream, Tick, MoveHorizontal
    stream = EventStream()
    stream.emit(Tick(0))
    stream.emit(MoveHorizontal(-33))
    stream.drain(session.feed)

Design rules:
  - Events are plain frozen dataclasses — no behaviour.
  - ``emit()`` is O(1) (just appends).
  - ``drain()`` processes queued events in FIFO order.
  - Handlers may emit new events; those are processed in the same drain.
  - ``close()`` is the only teardown path.  A closed stream drops new
    events and stops a drain in progress.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Union
from collections import defaultdict


# ═══════════════════════════════════════════════════════════════════
#  Event definitions
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Tick:
    """The clock fired.  *elapsed* is the timer's running counter."""
    elapsed: float


@dataclass(frozen=True)
class MoveHorizontal:
    """Hop the frog sideways by *dx* pixels (negative = left)."""
    dx: float


@dataclass(frozen=True)
class MoveVertical:
    """Hop the frog by *dy* pixels (negative = up)."""
    dy: float


GameEvent = Union[Tick, MoveHorizontal, MoveVertical]


class StreamClosed(RuntimeError):
    """Raised when an event is fed to a session that already ended."""


# ═══════════════════════════════════════════════════════════════════
#  Event Stream
# ═══════════════════════════════════════════════════════════════════

class EventStream:
    """Single ordered queue merging ticks and move commands."""

    def __init__(self):
        self._queue: list[GameEvent] = []
        self._stats: dict[str, int] = defaultdict(int)
        self._closed = False

    # ── Public API ───────────────────────────────────────────────────

    @property
    def closed(self) -> bool:
        return self._closed

    def emit(self, event: GameEvent) -> None:
        """Queue an event for the next ``drain()``.  Dropped once closed."""
        if self._closed:
            return
        self._queue.append(event)

    def drain(self, handler: Callable[[GameEvent], object]) -> int:
        """Hand every queued event to *handler*, oldest first.

        Returns the number of events processed.  Stops early if the
        stream is closed partway (by the handler or anyone else).
        """
        processed = 0
        while self._queue and not self._closed:
            event = self._queue.pop(0)
            self._stats[type(event).__name__] += 1
            handler(event)
            processed += 1
        return processed

    def close(self) -> None:
        """Tear the stream down: discard pending events, accept no more."""
        self._closed = True
        self._queue.clear()

    def stats(self) -> dict[str, int]:
        """Return cumulative processed-event counts by type."""
        return dict(self._stats)

    def pending_count(self) -> int:
        """Number of events waiting to be drained."""
        return len(self._queue)

    def __repr__(self) -> str:
        return f"EventStream(pending={len(self._queue)}, closed={self._closed})"
