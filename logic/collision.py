"""logic/collision.py — Per-tick collision & scoring resolution.

Runs once per tick, after every body has moved.  Works out whether the
frog was hit by a car, fell in the river, rode a log, or reached a
goal slot, then builds the next ``WorldState``.

Order of resolution
-------------------
1. Predicates are evaluated with the post-motion frog against the
   car / log / goal sets of the incoming state.
2. ``back_to_start`` — hit or drowned, and not riding any log.
3. ``end_game``      — hit, drowned, or no goals left, and not riding.
4. Frog velocity     — speed of the log lane it rides (A, B, C), else 0.
5. Frog position     — reset home on goal entry or ``back_to_start``.
6. ``game_over``     — only when lives were *already* 0 going in.
7. Lives             — minus one whenever ``end_game`` holds.
8. Goals             — any slot the frog entered is removed.
9. Score             — goal entry bumps the multiplier, then adds
                       ``base_score * multiplier``.

Step 6 reads the lives count from *before* step 7, so the game only
ends on the strike that arrives once lives are already 0.
"""

from __future__ import annotations
from dataclasses import dataclass, replace

from core.collision import bodies_collided, landed_on, river_exposed
from core.tuning import GameConfig
from core.vec import Vec
from components.entities import Entity, WorldState


@dataclass(frozen=True)
class Contact:
    """Everything the frog touched this tick."""
    car_hit: bool
    landed: tuple[bool, ...]      # one flag per log lane group
    in_river: bool
    goal_entered: bool
    goals_left: tuple[Entity, ...]
    all_goals_claimed: bool

    @property
    def on_log(self) -> bool:
        return any(self.landed)

    @property
    def back_to_start(self) -> bool:
        return (self.car_hit or self.in_river) and not self.on_log

    @property
    def end_game(self) -> bool:
        return ((self.car_hit or self.in_river or self.all_goals_claimed)
                and not self.on_log)


def sense(s: WorldState) -> Contact:
    """Evaluate every predicate for the frog in *s*."""
    frog = s.frog
    car_hit = any(bodies_collided(frog, c) for c in s.all_cars)
    landed = tuple(any(landed_on(frog, lg) for lg in lane) for lane in s.logs)
    in_river = any(river_exposed(frog, lg) for lg in s.all_logs)
    goals_left = tuple(g for g in s.goals if not landed_on(frog, g))
    return Contact(
        car_hit=car_hit,
        landed=landed,
        in_river=in_river,
        goal_entered=len(goals_left) < len(s.goals),
        goals_left=goals_left,
        all_goals_claimed=len(s.goals) == 0,
    )


def riding_velocity(c: Contact, cfg: GameConfig) -> Vec:
    """Velocity of the first log lane the frog stands on, else zero."""
    for hit, lane in zip(c.landed, cfg.log_lanes):
        if hit:
            return Vec(lane.speed, 0)
    return Vec.ZERO


def handle_collisions(s: WorldState, cfg: GameConfig) -> WorldState:
    """Resolve contacts for the (already moved) state *s*."""
    c = sense(s)

    frog_pos = cfg.frog_start if (c.goal_entered or c.back_to_start) else s.frog.position
    multiplier = s.multiplier + 1 if c.goal_entered else s.multiplier
    score = s.score + cfg.base_score * multiplier if c.goal_entered else s.score

    return replace(
        s,
        frog=replace(s.frog, velocity=riding_velocity(c, cfg), position=frog_pos),
        game_over=c.end_game if s.frog_lives == 0 else False,
        goals=c.goals_left,
        multiplier=multiplier,
        score=score,
        frog_lives=s.frog_lives - 1 if c.end_game else s.frog_lives,
    )
