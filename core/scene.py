"""
core/scene.py — Scene interface

Every screen in the game is a Scene.  The app holds a stack of them.
Only the top scene gets event/update/draw calls.

To make a new scene:

    class MyScene(Scene):
        def handle_event(self, event, app):
            # raw pygame event
            pass

        def update(self, dt, app):
            # dt is seconds since last frame
            pass

        def draw(self, surface, app):
            pass
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    def on_enter(self, app: App):
        """Called when this scene becomes active."""
        pass

    def on_exit(self, app: App):
        """Called when this scene is removed or covered."""
        pass

    def handle_event(self, event: pygame.event.Event, app: App):
        pass

    def update(self, dt: float, app: App):
        """Advance the scene.  dt is seconds."""
        pass

    def draw(self, surface: pygame.Surface, app: App):
        pass
