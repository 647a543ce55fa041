"""test_session.py — Tuning, event stream, and session driver.

Tests four things:
1. Tuning loads from TOML, falls back to defaults, rejects bad values
2. The event stream drains in order and tears down on close
3. The tick clock emits one Tick per whole period
4. A session folds events, publishes states, and closes on game over

Run:  python test_session.py      (or collect with pytest)
"""
from __future__ import annotations
import sys, tempfile, traceback
from dataclasses import replace
from pathlib import Path

from core import tuning
from core.events import (
    EventStream, StreamClosed, Tick, MoveHorizontal, MoveVertical,
)
from core.tuning import DEFAULTS, LaneSpec, TuningError
from core.vec import Vec
from components.dev_log import DevLog
from logic.session import Session, TickClock


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


def _write_toml(text: str) -> Path:
    fd = tempfile.NamedTemporaryFile("w", suffix=".toml", delete=False)
    with fd:
        fd.write(text)
    return Path(fd.name)


# A board whose bottom car lane is one wide, parked car: every hop up
# from the start lands the frog on it.
_DEATH_LANE = (LaneSpec(470, 599, 0.0, (0,)), LaneSpec(405, 120, -1.0, ()),
               LaneSpec(338, 50, 3.0, ()))
KILLER = replace(DEFAULTS, car_lanes=_DEATH_LANE)


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 1:  TUNING
# ═══════════════════════════════════════════════════════════════════════

def test_shipped_tuning_matches_defaults():
    cfg = tuning.load()
    assert cfg == DEFAULTS


def test_missing_file_uses_defaults():
    cfg = tuning.load("does/not/exist.toml")
    assert cfg is DEFAULTS
    assert cfg.frog_start == Vec(300, 565)
    assert [l.speed for l in cfg.car_lanes + cfg.log_lanes] == \
           [2, -1, 3, 0.5, -1.5, -2.2]
    assert cfg.base_score == 100 and cfg.start_lives == 3


def test_partial_override():
    p = _write_toml("[scoring]\nbase = 250\n\n[logs.b]\nspeed = 4\n"
                    "positions = []\n")
    cfg = tuning.load(p)
    assert cfg.base_score == 250
    assert cfg.log_lanes[1].speed == 4
    assert cfg.log_lanes[1].positions == ()
    assert cfg.log_lanes[1].width == 90          # untouched default
    assert cfg.car_lanes == DEFAULTS.car_lanes


def test_bad_value_raises():
    p = _write_toml('[frog]\nx = "left"\n')
    try:
        tuning.load(p)
    except TuningError as ex:
        assert "frog" in str(ex) and "x" in str(ex)
        return
    raise AssertionError("expected TuningError")


def test_dotted_get():
    data = {"cars": {"a": {"speed": 2}}}
    assert tuning.get(data, "cars.a", "speed", 0) == 2
    assert tuning.get(data, "cars.z", "speed", 9) == 9
    assert tuning.get(data, "cars.a.speed", "x", 7) == 7


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 2:  EVENT STREAM
# ═══════════════════════════════════════════════════════════════════════

def test_stream_fifo_and_stats():
    stream = EventStream()
    seen = []
    for e in (Tick(0), MoveHorizontal(33), Tick(1), MoveVertical(-66)):
        stream.emit(e)
    assert stream.pending_count() == 4
    n = stream.drain(seen.append)
    assert n == 4
    assert seen == [Tick(0), MoveHorizontal(33), Tick(1), MoveVertical(-66)]
    assert stream.stats() == {"Tick": 2, "MoveHorizontal": 1, "MoveVertical": 1}


def test_stream_close_stops_drain():
    stream = EventStream()
    seen = []

    def handler(e):
        seen.append(e)
        if e == Tick(1):
            stream.close()

    for t in range(5):
        stream.emit(Tick(t))
    stream.drain(handler)
    assert seen == [Tick(0), Tick(1)]
    assert stream.closed and stream.pending_count() == 0
    stream.emit(Tick(9))
    assert stream.pending_count() == 0


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 3:  TICK CLOCK
# ═══════════════════════════════════════════════════════════════════════

def test_tick_clock():
    clock = TickClock(10)
    assert clock.advance(9) == []
    assert clock.advance(1) == [Tick(0)]
    assert clock.advance(25) == [Tick(1), Tick(2)]
    assert clock.advance(5) == [Tick(3)]
    assert clock.count == 4


# ═══════════════════════════════════════════════════════════════════════
#  SECTION 4:  SESSION
# ═══════════════════════════════════════════════════════════════════════

def test_session_publishes_every_state():
    session = Session(DEFAULTS)
    published = []
    session.subscribe(published.append)
    session.emit(MoveHorizontal(-33))
    session.emit(Tick(0))
    assert session.pump() == 2
    assert len(published) == 2
    assert published[0].frog.position == Vec(267, 565)
    assert published[1].tick == 0
    assert published[-1] is session.state


def test_four_strikes_end_the_game():
    session = Session(KILLER)
    hop = [MoveVertical(-66), Tick(0)]
    final = session.run(hop * 10)
    assert final.game_over
    assert final.frog_lives == -1
    assert session.closed
    assert len(session.log.for_cat("life")) == 4
    assert len(session.log.for_cat("over")) == 1
    assert session.log.for_cat("stream")[0]["msg"] == "closed"


def test_closed_session_rejects_events():
    session = Session(KILLER, state=replace(Session(KILLER).state, frog_lives=0))
    session.run([MoveVertical(-66), Tick(3)])
    assert session.closed
    try:
        session.feed(Tick(4))
    except StreamClosed:
        pass
    else:
        raise AssertionError("expected StreamClosed")
    session.emit(Tick(5))
    assert session.pump() == 0


def test_goal_claim_logged():
    log = DevLog()
    start = Session(DEFAULTS).state
    state = replace(start, frog=replace(start.frog, position=Vec(160, 37)))
    session = Session(DEFAULTS, state=state, log=log)
    session.feed(Tick(12))
    entry = log.for_cat("goal")[0]
    assert entry["msg"] == "claimed exit0"
    assert entry["t"] == 12
    assert entry["details"] == {"score": 200, "multiplier": 2}


def test_dev_log_ring_buffer():
    log = DevLog(max_entries=3)
    for i in range(5):
        log.record("life", f"m{i}", t=i)
    assert [e["msg"] for e in log.recent()] == ["m2", "m3", "m4"]
    log.pause()
    log.record("life", "ignored")
    log.resume()
    log.cat_filter = {"goal"}
    log.record("life", "filtered")
    assert len(log.entries) == 3
    log.clear()
    assert log.recent() == []


# ═══════════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    tests = [(name, fn) for name, fn in sorted(globals().items())
             if name.startswith("test_") and callable(fn)]

    print("\n=== Tuning / stream / session ===")
    for name, fn in tests:
        try:
            fn()
            ok(name)
        except Exception:
            fail(name, traceback.format_exc().strip().splitlines()[-1])

    total = _passed + _failed
    print(f"\n{'=' * 60}")
    print(f"  Session Tests: {_passed} passed, {_failed} failed  "
          f"(total {total})")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
