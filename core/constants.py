"""core/constants.py — Shared constants used across the codebase.

Centralises magic numbers that are *not* gameplay tuning (those live
in ``data/tuning.toml``, see ``core/tuning.py``).

Units
-----
Everything is in canvas pixels.  The canvas is square; the origin is
the top-left corner and y grows downward, so "up" is negative y.

Time is measured in ticks.  One tick fires every ``TICK_PERIOD_MS``
real milliseconds, and the tick counter is the elapsed value carried
by each ``Tick`` event.
"""

# ── Timing ──────────────────────────────────────────────────────────
TICK_PERIOD_MS = 10
FPS = 60

# ── Input magnitudes (px per key press) ─────────────────────────────
STEP_X = 33
STEP_Y = 66

# ── Render palette: style class → colour ────────────────────────────
STYLE_COLORS = {
    "frog":  (60, 200, 60),
    "car1":  (220, 70, 70),
    "car2":  (240, 160, 40),
    "car3":  (170, 80, 230),
    "log1":  (130, 90, 50),
    "log2":  (115, 80, 45),
    "log3":  (145, 100, 60),
    "exit":  (230, 230, 120),
}

# Background bands, top to bottom:  (y, height, colour)
BAND_COLORS = [
    (0,   76,  (20, 60, 30)),     # goal row
    (76,  200, (30, 60, 120)),    # river
    (276, 62,  (60, 60, 70)),     # safe strip
    (338, 187, (35, 35, 40)),     # road
    (525, 75,  (60, 60, 70)),     # start verge
]

C_TEXT = (255, 255, 255)
C_HUD_BG = (0, 0, 0, 160)
