"""core/vec.py — Immutable 2-D vector.

Used for every position and velocity in the simulation.  All
operations return a new ``Vec``; nothing mutates in place.

    p = Vec(300, 565)
    p.move_x(-33)          # Vec(267, 565)
    p.add(Vec(2, 0))       # Vec(302, 565)
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Vec:
    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar["Vec"]

    def add(self, other: Vec) -> Vec:
        return Vec(self.x + other.x, self.y + other.y)

    def sub(self, other: Vec) -> Vec:
        return self.add(other.scale(-1))

    def scale(self, s: float) -> Vec:
        return Vec(self.x * s, self.y * s)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def move_x(self, dx: float) -> Vec:
        """Translate along x only."""
        return Vec(self.x + dx, self.y)

    def move_y(self, dy: float) -> Vec:
        """Translate along y only."""
        return Vec(self.x, self.y + dy)


Vec.ZERO = Vec()
