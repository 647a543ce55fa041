"""logic/input_manager.py — Key presses → move commands.

Sits between raw pygame events and the event stream.  The scene feeds
in raw events; the manager maps each *fresh* key press on a bound key
to exactly one command:

    A / ←   MoveHorizontal(-33)
    D / →   MoveHorizontal(+33)
    W / ↑   MoveVertical(-66)
    S / ↓   MoveVertical(+66)

Holding a key does nothing extra.  Auto-repeat KEYDOWNs (either
flagged ``repeat`` or arriving while the key is still held) are
dropped.  KEYUP only clears the held flag; it never emits anything.

Usage (in FrogScene):

    self.input = InputManager(cfg.step_x, cfg.step_y)
    for event in events:
        for cmd in self.input.feed(event):
            session.emit(cmd)
"""

from __future__ import annotations
from enum import Enum, auto
import pygame

from core.constants import STEP_X, STEP_Y
from core.events import MoveHorizontal, MoveVertical


# ── Input contexts ──────────────────────────────────────────────────

class InputContext(Enum):
    """Determines whether key presses are turned into commands."""
    GAMEPLAY = auto()   # frog is alive, moves are live
    FROZEN   = auto()   # game over, everything ignored


# ── Default key bindings ────────────────────────────────────────────

_GAMEPLAY_BINDS: dict[str, list[int]] = {
    "move_left":  [pygame.K_a, pygame.K_LEFT],
    "move_right": [pygame.K_d, pygame.K_RIGHT],
    "move_up":    [pygame.K_w, pygame.K_UP],
    "move_down":  [pygame.K_s, pygame.K_DOWN],
}


# ── InputManager ────────────────────────────────────────────────────

class InputManager:
    """Press-edge key mapper with repeat suppression."""

    def __init__(self, step_x: float = STEP_X, step_y: float = STEP_Y):
        self.context: InputContext = InputContext.GAMEPLAY
        self.step_x = step_x
        self.step_y = step_y
        # Keys currently held down (KEYDOWN seen, KEYUP not yet)
        self._held: set[int] = set()
        self._key_to_intent: dict[int, str] = {
            key: intent
            for intent, keys in _GAMEPLAY_BINDS.items()
            for key in keys
        }

    def feed(self, event: pygame.event.Event) -> list[MoveHorizontal | MoveVertical]:
        """Feed a raw pygame event.  Returns the commands it produced."""
        if event.type == pygame.KEYUP:
            self._held.discard(event.key)
            return []

        if event.type != pygame.KEYDOWN:
            return []

        if getattr(event, "repeat", False) or event.key in self._held:
            return []
        self._held.add(event.key)

        if self.context != InputContext.GAMEPLAY:
            return []

        intent = self._key_to_intent.get(event.key)
        if intent is None:
            return []
        return [self.command_for(intent)]

    def command_for(self, intent: str) -> MoveHorizontal | MoveVertical:
        if intent == "move_left":
            return MoveHorizontal(-self.step_x)
        if intent == "move_right":
            return MoveHorizontal(self.step_x)
        if intent == "move_up":
            return MoveVertical(-self.step_y)
        if intent == "move_down":
            return MoveVertical(self.step_y)
        raise KeyError(f"unbound intent {intent!r}")

    def held(self, key: int) -> bool:
        """True if *key* is currently held down."""
        return key in self._held

    def reset(self) -> None:
        """Forget held keys (e.g. after the window loses focus)."""
        self._held.clear()
