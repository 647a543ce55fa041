"""core/tuning.py — Data-driven board layout and gameplay constants.

All gameplay numbers live in ``data/tuning.toml`` and are loaded once
at startup into a frozen ``GameConfig``::

    from core.tuning import load
    cfg = load()                     # data/tuning.toml, or defaults
    cfg.frog_start                   # Vec(300, 565)

The config is handed explicitly to whoever needs it.  Nothing in the
simulation reads a module-level global.

Missing keys fall back to the defaults below, which reproduce the
classic board.  A missing file is fine too (everything defaults).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path

try:
    import tomllib                         # Python 3.11+
except ModuleNotFoundError:  # Python < 3.11
    import tomli as tomllib                # pip install tomli

from core.constants import TICK_PERIOD_MS, STEP_X, STEP_Y
from core.vec import Vec


class TuningError(ValueError):
    """A tuning value has the wrong type."""


@dataclass(frozen=True)
class LaneSpec:
    """One lane group: a row of same-width, same-speed bodies."""
    y: float
    width: float
    speed: float
    positions: tuple[float, ...] = ()


# ── Defaults (the classic board) ────────────────────────────────────

_DEFAULT_CARS = (
    LaneSpec(y=470, width=70,  speed=2.0,  positions=(30, 120)),
    LaneSpec(y=405, width=120, speed=-1.0, positions=(400,)),
    LaneSpec(y=338, width=50,  speed=3.0,  positions=(50, 300, 380)),
)

_DEFAULT_LOGS = (
    LaneSpec(y=207, width=200, speed=0.5,  positions=(70,)),
    LaneSpec(y=142, width=90,  speed=-1.5, positions=(50, 170, 500)),
    LaneSpec(y=76,  width=100, speed=-2.2, positions=(200, 480)),
)

_LANE_KEYS = ("a", "b", "c")


@dataclass(frozen=True)
class GameConfig:
    canvas_size: float = 600
    frog_start: Vec = Vec(300, 565)
    frog_width: float = 20
    frog_height: float = 20
    start_lives: int = 3
    object_height: float = 55
    car_lanes: tuple[LaneSpec, ...] = _DEFAULT_CARS
    log_lanes: tuple[LaneSpec, ...] = _DEFAULT_LOGS
    goal_y: float = 10
    goal_width: float = 55
    goal_positions: tuple[float, ...] = (142, 275, 408, 10, 538)
    base_score: int = 100
    start_time: float = 0
    tick_period_ms: int = TICK_PERIOD_MS
    step_x: float = STEP_X
    step_y: float = STEP_Y
    source: str = field(default="<defaults>", compare=False)


DEFAULTS = GameConfig()


def default_path() -> Path:
    """``data/tuning.toml`` relative to the project root."""
    return Path(__file__).resolve().parent.parent / "data" / "tuning.toml"


def load(path: str | Path | None = None) -> GameConfig:
    """Load tuning constants from *path* and return a ``GameConfig``.

    If *path* is ``None``, default to ``data/tuning.toml`` relative to
    the project root (one level above ``core/``).
    """
    path = default_path() if path is None else Path(path)

    if not path.exists():
        print(f"[TUNING] {path} not found — using defaults")
        return DEFAULTS

    with open(path, "rb") as f:
        data = tomllib.load(f)

    cfg = from_dict(data, source=str(path))
    print(f"[TUNING] Loaded {_count_leaves(data)} values from {path}")
    return cfg


def from_dict(data: dict, source: str = "<dict>") -> GameConfig:
    """Build a ``GameConfig`` from an already-parsed TOML tree."""
    d = DEFAULTS
    fx = _num(data, "frog", "x", d.frog_start.x)
    fy = _num(data, "frog", "y", d.frog_start.y)
    return GameConfig(
        canvas_size=_num(data, "canvas", "size", d.canvas_size),
        frog_start=Vec(fx, fy),
        frog_width=_num(data, "frog", "width", d.frog_width),
        frog_height=_num(data, "frog", "height", d.frog_height),
        start_lives=int(_num(data, "frog", "lives", d.start_lives)),
        object_height=_num(data, "bodies", "height", d.object_height),
        car_lanes=_lanes(data, "cars", d.car_lanes),
        log_lanes=_lanes(data, "logs", d.log_lanes),
        goal_y=_num(data, "goals", "y", d.goal_y),
        goal_width=_num(data, "goals", "width", d.goal_width),
        goal_positions=_nums(data, "goals", "positions", d.goal_positions),
        base_score=int(_num(data, "scoring", "base", d.base_score)),
        start_time=_num(data, "timing", "start_time", d.start_time),
        tick_period_ms=int(_num(data, "timing", "tick_period_ms", d.tick_period_ms)),
        step_x=_num(data, "input", "step_x", d.step_x),
        step_y=_num(data, "input", "step_y", d.step_y),
        source=source,
    )


# ── Lookup helpers ──────────────────────────────────────────────────

def get(data: dict, section: str, key: str, default=None):
    """Read a value from a parsed tuning tree.

    *section* uses dot-notation to traverse nested tables, e.g.
    ``"cars.a"`` looks up ``[cars.a]``.

    >>> get({"cars": {"a": {"speed": 2}}}, "cars.a", "speed", 0)
    2
    """
    node = data
    for part in section.split("."):
        if isinstance(node, dict):
            node = node.get(part)
        else:
            return default
        if node is None:
            return default
    if isinstance(node, dict):
        return node.get(key, default)
    return default


def _num(data: dict, section: str, key: str, default: float):
    v = get(data, section, key, default)
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise TuningError(f"[{section}] {key} must be a number, got {v!r}")
    return v


def _nums(data: dict, section: str, key: str,
          default: tuple[float, ...]) -> tuple[float, ...]:
    v = get(data, section, key, default)
    if not isinstance(v, (list, tuple)):
        raise TuningError(f"[{section}] {key} must be a list, got {v!r}")
    for item in v:
        if isinstance(item, bool) or not isinstance(item, (int, float)):
            raise TuningError(f"[{section}] {key} must hold numbers, got {item!r}")
    return tuple(v)


def _lanes(data: dict, group: str,
           defaults: tuple[LaneSpec, ...]) -> tuple[LaneSpec, ...]:
    lanes = []
    for key, dflt in zip(_LANE_KEYS, defaults):
        sec = f"{group}.{key}"
        lanes.append(LaneSpec(
            y=_num(data, sec, "y", dflt.y),
            width=_num(data, sec, "width", dflt.width),
            speed=_num(data, sec, "speed", dflt.speed),
            positions=_nums(data, sec, "positions", dflt.positions),
        ))
    return tuple(lanes)


def _count_leaves(d: dict, _n: int = 0) -> int:
    for v in d.values():
        if isinstance(v, dict):
            _n = _count_leaves(v, _n)
        else:
            _n += 1
    return _n
