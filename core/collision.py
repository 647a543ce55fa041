"""core/collision.py — Rectangle overlap primitives for the frog.

Every predicate compares the frog (``a``) against one other body
(``b``).  All comparisons are strict, so touching edges never count.

These live in ``core/`` (not ``logic/``) because the resolver and the
tests both need them without pulling in the reducer.

Note the vertical band check uses the frog's *width* as its offset.
Frog width and the lane pitch happen to line up so that the frog's
"feet" land inside exactly one lane band per row.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from components.entities import Entity


def level_check(a: Entity, b: Entity) -> bool:
    """True if the frog's lower reference (y - width) is inside b's rows."""
    ref = a.position.y - a.width
    return b.position.y < ref < b.position.y + b.height


def left_edge_overlap(a: Entity, b: Entity) -> bool:
    ref = a.position.x - a.width
    return b.position.x < ref < b.position.x + b.width


def right_edge_overlap(a: Entity, b: Entity) -> bool:
    ref = a.position.x + a.width
    return b.position.x < ref < b.position.x + b.width


def center_overlap(a: Entity, b: Entity) -> bool:
    """True if the frog's raw x sits inside b's span (standing on it)."""
    return b.position.x < a.position.x < b.position.x + b.width


def river_exposed(a: Entity, b: Entity) -> bool:
    """In b's row but not standing on b."""
    return level_check(a, b) and not center_overlap(a, b)


def bodies_collided(a: Entity, b: Entity) -> bool:
    """Car hit: same row and either frog edge inside the car."""
    return level_check(a, b) and (left_edge_overlap(a, b) or right_edge_overlap(a, b))


def landed_on(a: Entity, b: Entity) -> bool:
    """Same row and frog centre inside b (logs and goal slots)."""
    return level_check(a, b) and center_overlap(a, b)
