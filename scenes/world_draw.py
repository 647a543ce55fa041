"""scenes/world_draw.py — Render sink for the frog board.

``SceneGraph`` is the only impure consumer of ``WorldState``.  It keeps
a keyed set of ``RectView`` records (create on first sight, then only
move), a translation for the frog, and the game-over text.  ``draw()``
paints that graph onto a pygame surface.

The graph never feeds anything back into the simulation.
"""

from __future__ import annotations
import pygame

from core.constants import STYLE_COLORS, BAND_COLORS, C_TEXT, C_HUD_BG
from components.entities import Entity, WorldState
from components.rendering import RectView, TextView


class SceneGraph:
    def __init__(self, canvas_size: float):
        self.canvas_size = canvas_size
        self._views: dict[str, RectView] = {}
        self.frog_transform: tuple[float, float] = (0.0, 0.0)
        self.frog_size: tuple[float, float] = (0.0, 0.0)
        self.terminal_text: TextView | None = None
        self.hud: str = ""
        self.done = False

    # ── keyed upsert ────────────────────────────────────────────

    def upsert(self, body: Entity) -> RectView:
        """Create the view for *body* if new, then move it into place."""
        v = self._views.get(body.id)
        if v is None:
            v = RectView(id=body.id, style=body.category.value,
                         width=body.width, height=body.height)
            self._views[body.id] = v
        v.x = body.position.x
        v.y = body.position.y
        return v

    def remove_missing(self, live_ids: set[str]) -> list[str]:
        """Drop views whose entity is gone.  Returns the removed ids."""
        gone = [vid for vid in self._views if vid not in live_ids]
        for vid in gone:
            del self._views[vid]
        return gone

    def get(self, view_id: str) -> RectView | None:
        return self._views.get(view_id)

    def views(self) -> list[RectView]:
        return list(self._views.values())

    # ── state sink ──────────────────────────────────────────────

    def update(self, s: WorldState) -> None:
        """Sync the graph to *s*.  Subscribed to the session."""
        if self.done:
            return
        self.frog_transform = (s.frog.position.x, s.frog.position.y)
        self.frog_size = (s.frog.width, s.frog.height)
        bodies = s.bodies()
        for b in bodies:
            self.upsert(b)
        self.remove_missing({b.id for b in bodies})
        self.hud = f"Score {s.score}   x{s.multiplier}   Lives {max(s.frog_lives, 0)}"

        if s.game_over:
            self.terminal_text = TextView(
                text=f"Game Over. Score: {s.score}",
                x=self.canvas_size / 6,
                y=self.canvas_size / 2,
            )
            self.done = True

    # ── drawing ─────────────────────────────────────────────────

    def draw(self, surface: pygame.Surface, font: pygame.font.Font,
             big_font: pygame.font.Font | None = None) -> None:
        w = int(self.canvas_size)
        for y, h, color in BAND_COLORS:
            pygame.draw.rect(surface, color, (0, y, w, h))

        for v in self._views.values():
            color = STYLE_COLORS.get(v.style, (255, 0, 255))
            pygame.draw.rect(surface, color,
                             pygame.Rect(int(v.x), int(v.y), int(v.width), int(v.height)))

        fx, fy = self.frog_transform
        fw, fh = self.frog_size
        pygame.draw.rect(surface, STYLE_COLORS["frog"],
                         pygame.Rect(int(fx), int(fy), int(fw), int(fh)))

        if self.hud:
            img = font.render(self.hud, True, C_TEXT)
            bw, bh = img.get_size()
            bg = pygame.Surface((bw + 4, bh + 4), pygame.SRCALPHA)
            bg.fill(C_HUD_BG)
            surface.blit(bg, (4, w - bh - 8))
            surface.blit(img, (6, w - bh - 6))

        if self.terminal_text is not None:
            t = self.terminal_text
            img = (big_font or font).render(t.text, True, C_TEXT)
            surface.blit(img, (int(t.x), int(t.y)))
