"""
main.py — Bootstrap

1. Load tuning (board layout, speeds, scoring)
2. Create the app
3. Push the board scene
4. Run
"""

from core.app import App
from core import tuning
from scenes.world_scene import WorldScene


def main():
    cfg = tuning.load()
    app = App(title="Frog Crossing", size=int(cfg.canvas_size))
    print(f"[MAIN] Canvas {int(cfg.canvas_size)}px, tick every {cfg.tick_period_ms} ms")
    app.push_scene(WorldScene(cfg))
    app.run()


if __name__ == "__main__":
    main()
