"""logic/movement.py — Motion step.

Moves a body by one tick of its velocity and wraps each axis back
onto the board (torus topology): whatever leaves one edge comes back
in at the opposite one.  Velocity is never touched here.
"""

from __future__ import annotations
from dataclasses import replace

from core.vec import Vec
from components.entities import Entity


def wrap(v: float, size: float) -> float:
    """Single-step modular wrap into the board.

    Only one canvas width is added or removed, which is enough because
    no body moves further than that in a single tick.  A value sitting
    exactly on the far edge wraps to 0 so results stay in ``[0, size)``.
    """
    if v < 0:
        v += size
        # a tiny negative plus size can round up to exactly size
        return 0.0 if v >= size else v
    if v >= size:
        return v - size
    return v


def torus_wrap(p: Vec, size: float) -> Vec:
    return Vec(wrap(p.x, size), wrap(p.y, size))


def move_body(body: Entity, size: float) -> Entity:
    """Advance *body* by its velocity, wrapping at the board edges."""
    return replace(body, position=torus_wrap(body.position.add(body.velocity), size))


def move_lanes(lanes: tuple[tuple[Entity, ...], ...],
               size: float) -> tuple[tuple[Entity, ...], ...]:
    return tuple(tuple(move_body(b, size) for b in lane) for lane in lanes)
