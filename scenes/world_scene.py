"""
scenes/world_scene.py — The frog board

Wires the pieces together for one play session:

    keys  → InputManager → ┐
                           ├→ Session (EventStream + reduce_state) → SceneGraph
    frame dt → TickClock → ┘

WASD or arrow keys hop the frog.  When the game ends the session
closes its stream, the scene stops making ticks, and the final score
stays on screen.  Press R afterwards to start a fresh session.
"""

from __future__ import annotations
import pygame

from core.scene import Scene
from core.app import App
from core.tuning import GameConfig
from logic.input_manager import InputManager, InputContext
from logic.session import Session, TickClock
from scenes.world_draw import SceneGraph


class WorldScene(Scene):
    def __init__(self, cfg: GameConfig):
        self.cfg = cfg
        self._new_session()

    def _new_session(self):
        self.session = Session(self.cfg)
        self.clock = TickClock(self.cfg.tick_period_ms)
        self.input = InputManager(self.cfg.step_x, self.cfg.step_y)
        self.graph = SceneGraph(self.cfg.canvas_size)
        self.session.subscribe(self.graph.update)
        self.graph.update(self.session.state)

    def on_enter(self, app: App):
        print(f"[MAIN] Board ready — {self.session.state.obj_count} bodies, "
              f"{len(self.session.state.goals)} goal slots")

    def handle_event(self, event: pygame.event.Event, app: App):
        if self.session.closed:
            if event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                print("[MAIN] Restarting session")
                self._new_session()
            return
        if event.type == pygame.WINDOWFOCUSLOST:
            self.input.reset()
            return
        for cmd in self.input.feed(event):
            self.session.emit(cmd)

    def update(self, dt: float, app: App):
        if self.session.closed:
            return
        for t in self.clock.advance(dt * 1000.0):
            self.session.emit(t)
        self.session.pump()
        if self.session.closed:
            self.input.context = InputContext.FROZEN

    def draw(self, surface: pygame.Surface, app: App):
        self.graph.draw(surface, app.font, app.font_lg)
