"""components.rendering — Visual records kept by the render sink."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class RectView:
    """One on-screen rectangle, keyed by the entity id it shows.

    Size and style are fixed when the view is created; only ``x``/``y``
    change afterwards.
    """
    id: str
    style: str                 # style class, e.g. "car1", "exit"
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass
class TextView:
    text: str = ""
    x: float = 0.0
    y: float = 0.0
    style: str = "gameover"
