"""core/constants.py — Shared constants used across the codebase.

Centralises magic numbers so there's exactly one place to change them.
Most of these are the *defaults* behind ``data/tuning.toml``; systems
read the tuned value with ``core.tuning.get`` and fall back to these.

Unit System
-----------
Sizes and capacities are stored on a **log10 scale**:

    exponent e   ->   10^e metres

so ``-3`` is 1 mm, ``0`` is 1 m and ``+inf`` is "no limit".  Comparisons
and clamps work on the exponent directly, never on the magnitude.

Standard units used throughout the codebase:

    Size / capacity     e       (log10 metres)
    Water quality       —       (fraction, 0.0 dirty … 1.0 clean)
    Time (real)         s       (seconds)
    Timestamps          ticks   (100 ns units since 0001-01-01, local time)
    Screen              px      (renderer only)
"""

# ── Timestamps ──────────────────────────────────────────────────────
TICKS_PER_SECOND = 10_000_000          # 100 ns per tick

# ── Habitat ─────────────────────────────────────────────────────────
WATER_LIFETIME: float = 86400.0 * 4.2  # s from clean (1.0) to empty (0.0)
CLEAN_THRESHOLD = 0.99                 # water above this is "already clean"
CLEAN_ANIM_LENGTH = 3.0                # s

# ── Organism ────────────────────────────────────────────────────────
GROWTH_RATE_PER_SEC: float = 1.2 / 86400.0   # e per second at full water
UPGRADE_ANIM_LENGTH = 2.0              # s
MIN_DRAW_SCALE = 0.005                 # smallest fraction of the habitat drawn
MAX_DRAW_SIZE = 960.0                  # px, unbounded tier
DRIFT_SMOOTH_TIME = 5.0                # s, motion toward the cursor
DRIFT_MAX_SPEED = 100.0                # px/s
SINK_PER_FRAME = 5.0                   # px pulled down each update

# ── Save record defaults ────────────────────────────────────────────
DEFAULT_ORGANISM_NAME = "Marimo-san"
DEFAULT_SIZE_EXPONENT = -3.0           # 1 mm
DEFAULT_WATER = 0.5
DEFAULT_TIER_INDEX = 0

# ── Persistence ─────────────────────────────────────────────────────
SAVE_WAIT_LENGTH = 1.0                 # s of dirty time before a write
DEFAULT_SAVE_PATH = "saves/marimo.dat"

# ── Window ──────────────────────────────────────────────────────────
WINDOW_WIDTH = 480
WINDOW_HEIGHT = 640
FPS = 30

# Colours (RGBA for the water, RGB for the rest)
WATER_DIRTY = (128, 128, 51, 51)
WATER_CLEAN = (26, 128, 179, 51)
MARIMO_COLOR = (102, 153, 51)
BACKGROUND = (24, 28, 32)
