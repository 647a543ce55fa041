"""test_interfaces.py — Input mapper and render sink (pygame side).

Runs headless with the SDL dummy video driver.

Run:  python test_interfaces.py      (or collect with pytest)
"""
from __future__ import annotations
import os, sys, traceback
from dataclasses import replace

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
import pygame

from core.events import MoveHorizontal, MoveVertical, Tick
from core.tuning import DEFAULTS
from core.vec import Vec
from logic.entity_factory import initial_state
from logic.input_manager import InputManager, InputContext
from logic.session import Session
from logic.tick import reduce_state
from scenes.world_draw import SceneGraph


# ── Test harness ─────────────────────────────────────────────────────

_passed = 0
_failed = 0

def ok(label: str):
    global _passed
    _passed += 1
    print(f"  [PASS] {label}")

def fail(label: str, detail: str = ""):
    global _failed
    _failed += 1
    msg = f"  [FAIL] {label}"
    if detail:
        msg += f" — {detail}"
    print(msg)


def _down(key: int, **kw) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key, **kw)


def _up(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYUP, key=key)


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 1:  INPUT MAPPER
# ═══════════════════════════════════════════════════════════════════════

def test_bound_keys_map_to_commands():
    im = InputManager()
    expected = {
        pygame.K_a: MoveHorizontal(-33), pygame.K_LEFT: MoveHorizontal(-33),
        pygame.K_d: MoveHorizontal(33),  pygame.K_RIGHT: MoveHorizontal(33),
        pygame.K_w: MoveVertical(-66),   pygame.K_UP: MoveVertical(-66),
        pygame.K_s: MoveVertical(66),    pygame.K_DOWN: MoveVertical(66),
    }
    for key, cmd in expected.items():
        assert im.feed(_down(key)) == [cmd], key
        assert im.feed(_up(key)) == []


def test_held_key_emits_once():
    im = InputManager()
    assert im.feed(_down(pygame.K_w)) == [MoveVertical(-66)]
    assert im.held(pygame.K_w)
    assert im.feed(_down(pygame.K_w)) == []
    assert im.feed(_down(pygame.K_w)) == []
    im.feed(_up(pygame.K_w))
    assert not im.held(pygame.K_w)
    assert im.feed(_down(pygame.K_w)) == [MoveVertical(-66)]


def test_repeat_flag_suppressed():
    im = InputManager()
    assert im.feed(_down(pygame.K_d, repeat=True)) == []


def test_other_events_ignored():
    im = InputManager()
    assert im.feed(_down(pygame.K_q)) == []
    assert im.feed(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0))) == []


def test_frozen_context_ignores_presses():
    im = InputManager()
    im.context = InputContext.FROZEN
    assert im.feed(_down(pygame.K_a)) == []


def test_custom_step_sizes():
    im = InputManager(step_x=10, step_y=20)
    assert im.feed(_down(pygame.K_LEFT)) == [MoveHorizontal(-10)]
    assert im.feed(_down(pygame.K_DOWN)) == [MoveVertical(20)]


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 2:  RENDER SINK
# ═══════════════════════════════════════════════════════════════════════

def test_graph_creates_one_view_per_body():
    s = initial_state(DEFAULTS)
    g = SceneGraph(DEFAULTS.canvas_size)
    g.update(s)
    assert len(g.views()) == s.obj_count
    v = g.get("car10")
    assert (v.x, v.y, v.width, v.height, v.style) == (30, 470, 70, 55, "car1")
    assert g.frog_transform == (300, 565)
    assert g.terminal_text is None and not g.done


def test_graph_updates_in_place():
    s = initial_state(DEFAULTS)
    g = SceneGraph(DEFAULTS.canvas_size)
    g.update(s)
    before = g.get("log10")
    g.update(reduce_state(s, Tick(0), DEFAULTS))
    assert g.get("log10") is before
    assert before.x == 70.5


def test_graph_size_fixed_after_creation():
    s = initial_state(DEFAULTS)
    g = SceneGraph(DEFAULTS.canvas_size)
    car = s.cars[0][0]
    g.upsert(car)
    g.upsert(replace(car, width=999, position=Vec(5, 470)))
    v = g.get(car.id)
    assert v.width == 70 and v.x == 5


def test_claimed_goal_view_removed():
    s = initial_state(DEFAULTS)
    s = replace(s, frog=replace(s.frog, position=Vec(160, 37)))
    g = SceneGraph(DEFAULTS.canvas_size)
    g.update(s)
    g.update(reduce_state(s, Tick(1), DEFAULTS))
    assert g.get("exit0") is None
    assert len(g.views()) == s.obj_count - 1


def test_game_over_text_and_stop():
    s = initial_state(DEFAULTS)
    over = replace(s, game_over=True, score=300)
    g = SceneGraph(DEFAULTS.canvas_size)
    g.update(over)
    assert g.done
    assert g.terminal_text.text == "Game Over. Score: 300"
    assert (g.terminal_text.x, g.terminal_text.y) == (100, 300)
    g.update(replace(s, frog=replace(s.frog, position=Vec(1, 1))))
    assert g.frog_transform == (300, 565)


def test_graph_as_session_sink():
    session = Session(DEFAULTS)
    g = SceneGraph(DEFAULTS.canvas_size)
    session.subscribe(g.update)
    session.run([MoveHorizontal(33), Tick(0)])
    assert g.frog_transform == (333, 565)
    assert "Lives 3" in g.hud


def test_draw_smoke():
    pygame.font.init()
    try:
        surf = pygame.Surface((600, 600))
        g = SceneGraph(600)
        g.update(replace(initial_state(DEFAULTS), game_over=True))
        font = pygame.font.Font(None, 14)
        g.draw(surf, font)
        assert tuple(surf.get_at((0, 300)))[:3] != (0, 0, 0)
    finally:
        pygame.font.quit()


# ═══════════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    tests = [(name, fn) for name, fn in sorted(globals().items())
             if name.startswith("test_") and callable(fn)]

    print("\n=== Input mapper / render sink ===")
    for name, fn in tests:
        try:
            fn()
            ok(name)
        except Exception:
            fail(name, traceback.format_exc().strip().splitlines()[-1])

    total = _passed + _failed
    print(f"\n{'=' * 60}")
    print(f"  Interface Tests: {_passed} passed, {_failed} failed  "
          f"(total {total})")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
