"""scenes — Pygame scenes and the render sink."""
