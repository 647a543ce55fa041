"""logic/tick.py — State-transition reducer.

``reduce_state`` is the entire game rule surface: a pure function from
(previous state, one event) to the next state.

    from logic.tick import reduce_state
    s = reduce_state(s, Tick(12), cfg)
    s = reduce_state(s, MoveVertical(-66), cfg)

Move commands only shift the frog.  No wrap, no collision check; the
next tick sorts that out.
"""

from __future__ import annotations
from dataclasses import replace

from core.events import Tick, MoveHorizontal, MoveVertical, GameEvent
from core.tuning import GameConfig
from components.entities import WorldState
from logic.movement import move_body, move_lanes
from logic.collision import handle_collisions


def tick(s: WorldState, elapsed: float, cfg: GameConfig) -> WorldState:
    """Move everything one step, stamp the time, then resolve contacts."""
    size = cfg.canvas_size
    moved = replace(
        s,
        frog=move_body(s.frog, size),
        cars=move_lanes(s.cars, size),
        logs=move_lanes(s.logs, size),
        tick=elapsed,
    )
    return handle_collisions(moved, cfg)


def reduce_state(s: WorldState, e: GameEvent, cfg: GameConfig) -> WorldState:
    if isinstance(e, MoveHorizontal):
        return replace(s, frog=replace(s.frog, position=s.frog.position.move_x(e.dx)))
    if isinstance(e, MoveVertical):
        return replace(s, frog=replace(s.frog, position=s.frog.position.move_y(e.dy)))
    if isinstance(e, Tick):
        return tick(s, e.elapsed, cfg)
    raise TypeError(f"unknown event {e!r}")
