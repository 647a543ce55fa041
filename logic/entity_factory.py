"""logic/entity_factory.py — Table-driven board construction.

Builds every body on the board exactly once, from the lane tables in
``GameConfig``.  Nothing is spawned or destroyed after this except
goal slots being claimed.

Ids are ``<style class><index>`` (``car10``, ``log21``, ``exit4``),
which keeps them unique across categories and stable for the session.
"""

from __future__ import annotations

from core.tuning import GameConfig, LaneSpec
from core.vec import Vec
from components.entities import (
    Category, Entity, WorldState, CAR_CATEGORIES, LOG_CATEGORIES,
)


def create_rect(category: Category, index: int, pos: Vec, width: float,
                vel: Vec, cfg: GameConfig) -> Entity:
    """Create a non-frog body.  All of them share ``object_height``."""
    return Entity(
        id=f"{category.value}{index}",
        category=category,
        position=pos,
        width=width,
        height=cfg.object_height,
        velocity=vel,
        created_at=cfg.start_time,
    )


def create_frog(cfg: GameConfig) -> Entity:
    return Entity(
        id="frog",
        category=Category.FROG,
        position=cfg.frog_start,
        width=cfg.frog_width,
        height=cfg.frog_height,
        velocity=Vec.ZERO,
        created_at=cfg.start_time,
    )


def create_lane(category: Category, lane: LaneSpec,
                cfg: GameConfig) -> tuple[Entity, ...]:
    vel = Vec(lane.speed, 0)
    return tuple(
        create_rect(category, i, Vec(x, lane.y), lane.width, vel, cfg)
        for i, x in enumerate(lane.positions)
    )


def create_goals(cfg: GameConfig) -> tuple[Entity, ...]:
    return tuple(
        create_rect(Category.GOAL, i, Vec(x, cfg.goal_y), cfg.goal_width,
                    Vec.ZERO, cfg)
        for i, x in enumerate(cfg.goal_positions)
    )


def initial_state(cfg: GameConfig) -> WorldState:
    """The board at session start: frog home, every lane populated."""
    cars = tuple(create_lane(cat, lane, cfg)
                 for cat, lane in zip(CAR_CATEGORIES, cfg.car_lanes))
    logs = tuple(create_lane(cat, lane, cfg)
                 for cat, lane in zip(LOG_CATEGORIES, cfg.log_lanes))
    goals = create_goals(cfg)
    obj_count = (sum(len(lane) for lane in cars)
                 + sum(len(lane) for lane in logs)
                 + len(goals))
    return WorldState(
        tick=cfg.start_time,
        frog=create_frog(cfg),
        cars=cars,
        logs=logs,
        goals=goals,
        game_over=False,
        score=0,
        multiplier=1,
        frog_lives=cfg.start_lives,
        obj_count=obj_count,
    )
