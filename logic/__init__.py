"""logic — Game rules package.

Top-level modules
-----------------
movement        — motion step with torus wrap
collision       — per-tick collision & scoring resolution
tick            — the state-transition reducer
entity_factory  — board construction from tuning
input_manager   — raw key presses → move commands
session         — tick clock, event stream fold, teardown
"""
