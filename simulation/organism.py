"""simulation/organism.py — The marimo itself.

``size_exponent`` is the organism's diameter as log10 metres.  Growth is
clamped to the current habitat's capacity; the habitat is never shrunk
to fit.

Everything past ``grow()`` is presentation: a draw radius derived from
how full the habitat is, an elastic "pop" after an upgrade, and a lazy
drift toward the cursor that stays inside the visible water.
"""

from __future__ import annotations
import math

from core.constants import (
    GROWTH_RATE_PER_SEC, UPGRADE_ANIM_LENGTH, MIN_DRAW_SCALE, MAX_DRAW_SIZE,
    DRIFT_SMOOTH_TIME, DRIFT_MAX_SPEED, SINK_PER_FRAME,
)
from core.record import SaveRecord
from core.tuning import get as _tun
from simulation.easing import ease_out_elastic, smooth_damp
from simulation.habitat import Habitat


class Organism:
    def __init__(self, habitat: Habitat,
                 growth_rate: float | None = None) -> None:
        self.habitat = habitat
        self._rate_override = growth_rate
        self.retune()

        self.size_exponent: float = 0.0
        self.name: str = ""

        w, h = habitat.rect_size
        self.pos: tuple[float, float] = (w / 2, h / 2)
        self.target: tuple[float, float] = self.pos
        self.draw_size: float = 0.0
        self._speed = 0.0

        self._upgrade_time = self.upgrade_anim_length
        self._draw_size_old = 0.0

    def retune(self) -> None:
        rate = self._rate_override
        if rate is None:
            rate = _tun("organism", "growth_rate_per_sec", GROWTH_RATE_PER_SEC)
        self.growth_rate = float(rate)
        self.upgrade_anim_length = _tun("organism", "upgrade_anim_length",
                                        UPGRADE_ANIM_LENGTH)
        self.smooth_time = _tun("organism", "drift_smooth_time",
                                DRIFT_SMOOTH_TIME)
        self.max_speed = _tun("organism", "drift_max_speed", DRIFT_MAX_SPEED)

    # ── Growth ───────────────────────────────────────────────────────

    def grow(self, impetus: float, duration: float) -> None:
        """Grow for *duration* seconds at *impetus* (average water quality)."""
        grown = self.size_exponent + self.growth_rate * duration * impetus
        self.size_exponent = min(grown, self.habitat.capacity_exponent)

    @property
    def size_metres(self) -> float:
        """Diameter in metres; ``inf`` once it no longer fits a float."""
        try:
            return 10.0 ** self.size_exponent
        except OverflowError:
            return math.inf

    # ── Animation ────────────────────────────────────────────────────

    def start_upgrade_animation(self) -> None:
        self._upgrade_time = 0.0
        self._draw_size_old = self.draw_size

    def _target_draw_size(self) -> float:
        cap = self.habitat.capacity_exponent
        if math.isinf(cap):
            return min(self.size_exponent, MAX_DRAW_SIZE)
        fill = max(10.0 ** min(self.size_exponent - cap, 0.0), MIN_DRAW_SCALE)
        return fill * (100.0 + max(40.0 * cap, 0.0))

    def update(self, dt: float) -> None:
        self.draw_size = self._target_draw_size()

        if self._upgrade_time < self.upgrade_anim_length:
            self._upgrade_time += dt
            t = ease_out_elastic(self._upgrade_time / self.upgrade_anim_length)
            # elastic overshoot is the point, so no clamp here
            self.draw_size = self._draw_size_old + (
                self.draw_size - self._draw_size_old) * t

        self._drift(dt)
        self._clamp_to_walls()

    def _drift(self, dt: float) -> None:
        px, py = self.pos
        tx, ty = self.target
        dist = math.hypot(tx - px, ty - py)
        dist, self._speed = smooth_damp(dist, 0.0, self._speed,
                                        self.smooth_time, self.max_speed, dt)
        if dist > 0.0:
            ux, uy = _normalized(tx - px, ty - py)
            px, py = tx - ux * dist, ty - uy * dist
        else:
            px, py = tx, ty
        # pygame's y axis points down; the marimo sinks a little each frame
        self.pos = (px, py + SINK_PER_FRAME)

    def _clamp_to_walls(self) -> None:
        w, h = self.habitat.rect_size
        r = self.draw_size
        x, y = self.pos
        if w <= r * 2:
            x = w / 2
        else:
            x = min(max(x, r), w - r)
        if h <= r * 2:
            y = h / 2
        else:
            # surface follows the visible water column
            top = r + (1.0 - self.habitat.water_amount) * (h - r * 2)
            y = min(max(y, top), h - r)
        self.pos = (x, y)

    # ── Persistence ──────────────────────────────────────────────────

    def load(self, record: SaveRecord) -> None:
        self.size_exponent = min(float(record.size_exponent),
                                 self.habitat.capacity_exponent)
        self.name = record.name

    def save(self, record: SaveRecord) -> None:
        record.size_exponent = self.size_exponent
        record.name = self.name


def _normalized(x: float, y: float) -> tuple[float, float]:
    n = math.hypot(x, y)
    if n < 1e-5:
        return 0.0, 0.0
    return x / n, y / n
