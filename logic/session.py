"""logic/session.py — Session driver: clock, stream, and the fold.

The session is the single writer of ``WorldState``.  Ticks from the
clock and commands from the input mapper are emitted onto one
``EventStream``; ``pump()`` drains it through ``reduce_state`` and hands
each new state to every subscribed sink.  The moment a state comes out
with ``game_over`` set, the stream is closed and nothing else runs.

Usage::

    session = Session(cfg)
    session.subscribe(sink.update)
    for t in clock.advance(dt_ms):
        session.emit(t)
    session.pump()
"""

from __future__ import annotations
from typing import Callable, Iterable

from core.events import EventStream, GameEvent, StreamClosed, Tick
from core.tuning import GameConfig
from components.dev_log import DevLog
from components.entities import WorldState
from logic.entity_factory import initial_state
from logic.tick import reduce_state

StateSink = Callable[[WorldState], object]


class TickClock:
    """Turns real elapsed milliseconds into ``Tick`` events.

    One tick per whole period; the counter starts at 0 and only goes up.
    """

    def __init__(self, period_ms: float):
        self.period_ms = period_ms
        self._acc = 0.0
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def advance(self, dt_ms: float) -> list[Tick]:
        self._acc += dt_ms
        out: list[Tick] = []
        while self._acc >= self.period_ms:
            self._acc -= self.period_ms
            out.append(Tick(self._count))
            self._count += 1
        return out


class Session:
    def __init__(self, cfg: GameConfig, state: WorldState | None = None,
                 log: DevLog | None = None):
        self.cfg = cfg
        self.state = state if state is not None else initial_state(cfg)
        self.stream = EventStream()
        self.log = log if log is not None else DevLog()
        self._sinks: list[StateSink] = []

    # ── wiring ──────────────────────────────────────────────────

    def subscribe(self, sink: StateSink) -> None:
        self._sinks.append(sink)

    @property
    def closed(self) -> bool:
        return self.stream.closed

    # ── driving ─────────────────────────────────────────────────

    def emit(self, event: GameEvent) -> None:
        self.stream.emit(event)

    def pump(self) -> int:
        """Process everything queued so far.  Returns events handled."""
        return self.stream.drain(self.feed)

    def feed(self, event: GameEvent) -> WorldState:
        """Reduce one event, publish the result, close on game over."""
        if self.stream.closed:
            raise StreamClosed(f"session over, cannot accept {event!r}")
        prev = self.state
        self.state = reduce_state(prev, event, self.cfg)
        self._note(prev, self.state)
        for sink in self._sinks:
            sink(self.state)
        if self.state.game_over:
            self.stream.close()
            self._record("stream", "closed")
        return self.state

    def run(self, events: Iterable[GameEvent]) -> WorldState:
        """Feed *events* in order until they run out or the game ends."""
        for event in events:
            if self.stream.closed:
                break
            self.feed(event)
        return self.state

    # ── transition log ──────────────────────────────────────────

    def _note(self, prev: WorldState, cur: WorldState) -> None:
        if len(cur.goals) < len(prev.goals):
            claimed = {g.id for g in prev.goals} - {g.id for g in cur.goals}
            self._record("goal", f"claimed {', '.join(sorted(claimed))}",
                         details={"score": cur.score, "multiplier": cur.multiplier})
            if not cur.goals:
                self._record("win", "all goal slots claimed")
        if cur.frog_lives < prev.frog_lives:
            self._record("life", f"life lost, {cur.frog_lives} left",
                         details={"x": prev.frog.position.x,
                                  "y": prev.frog.position.y})
        if cur.game_over and not prev.game_over:
            self._record("over", f"game over, score {cur.score}",
                         details={"score": cur.score})

    def _record(self, cat: str, msg: str, details: dict | None = None) -> None:
        self.log.record(cat, msg, t=self.state.tick, details=details)
        print(f"[FROG] t={self.state.tick:g} {msg}")
