"""components.entities — Immutable bodies and the aggregate world state.

Every rectangle on the board (frog, cars, logs, goal slots) is an
``Entity``.  The whole board is a ``WorldState``.  Both are frozen:
a tick never edits them, it builds replacements with
``dataclasses.replace``.

Coordinates are canvas pixels; ``position`` is the top-left corner.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from core.vec import Vec


class Category(Enum):
    """What kind of body this is.  The value doubles as the style class."""
    FROG   = "frog"
    CAR_A  = "car1"
    CAR_B  = "car2"
    CAR_C  = "car3"
    LOG_A  = "log1"
    LOG_B  = "log2"
    LOG_C  = "log3"
    GOAL   = "exit"


CAR_CATEGORIES = (Category.CAR_A, Category.CAR_B, Category.CAR_C)
LOG_CATEGORIES = (Category.LOG_A, Category.LOG_B, Category.LOG_C)


@dataclass(frozen=True)
class Entity:
    id: str                    # unique within the board, stable for life
    category: Category
    position: Vec
    width: float
    height: float
    velocity: Vec = Vec.ZERO   # px per tick
    created_at: float = 0.0    # tick index at creation


@dataclass(frozen=True)
class WorldState:
    """One snapshot of the game.  Replaced wholesale on every event.

    ``cars`` and ``logs`` each hold three lane groups, ordered A, B, C.
    ``goals`` only ever shrinks; a claimed slot is gone for good.
    """
    tick: float
    frog: Entity
    cars: tuple[tuple[Entity, ...], ...]
    logs: tuple[tuple[Entity, ...], ...]
    goals: tuple[Entity, ...]
    game_over: bool = False
    score: int = 0
    multiplier: int = 1
    frog_lives: int = 3
    obj_count: int = 0

    @property
    def all_cars(self) -> list[Entity]:
        return [c for lane in self.cars for c in lane]

    @property
    def all_logs(self) -> list[Entity]:
        return [lg for lane in self.logs for lg in lane]

    def bodies(self) -> list[Entity]:
        """Every non-frog entity, in draw order (cars, logs, goals)."""
        return self.all_cars + self.all_logs + list(self.goals)
