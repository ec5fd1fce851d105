"""simulation/habitat.py — The container the organism lives in.

Two pieces of state matter:

- ``water`` — quality in [0, 1].  It falls linearly, reaching zero
  ``water_lifetime`` seconds after a full clean, and is reset to 1.0 by
  ``try_clean_water()``.
- ``tier_index`` — position on the capacity ladder (``simulation.tiers``).
  It only ever goes up, one step per successful ``try_upgrade()``.

The clean animation (``update``/``water_amount``/``water_display``) is
display-only: the old water drains out of view, then the new water
fills back in.
"""

from __future__ import annotations

from core.constants import WATER_LIFETIME, CLEAN_THRESHOLD, CLEAN_ANIM_LENGTH
from core.record import SaveRecord
from core.tuning import get as _tun
from simulation.easing import ease_out_quart
from simulation.tiers import TIERS, Tier


class Habitat:
    def __init__(self, tiers: tuple[Tier, ...] = TIERS,
                 water_lifetime: float | None = None) -> None:
        if not tiers:
            raise ValueError("habitat needs at least one tier")
        self.tiers = tiers
        self._lifetime_override = water_lifetime
        self.retune()

        self.water: float = 0.0
        self.tier_index: int = 0
        self.rect_size: tuple[float, float] = (0.0, 0.0)

        # Clean animation; starts finished
        self._clean_time = self.clean_anim_length
        self._water_old = 0.0
        self.water_display: float = 0.0
        self.water_amount: float = 1.0

    def retune(self) -> None:
        """Re-read tuned values; a lifetime passed to the constructor wins."""
        lifetime = self._lifetime_override
        if lifetime is None:
            lifetime = _tun("habitat", "water_lifetime", WATER_LIFETIME)
        self.water_lifetime = float(lifetime)
        self.clean_threshold = _tun("habitat", "clean_threshold", CLEAN_THRESHOLD)
        self.clean_anim_length = _tun("habitat", "clean_anim_length",
                                      CLEAN_ANIM_LENGTH)

    # ── Tier ─────────────────────────────────────────────────────────

    @property
    def tier(self) -> Tier:
        return self.tiers[self.tier_index]

    @property
    def display_name(self) -> str:
        return self.tier.display_name

    @property
    def capacity_exponent(self) -> float:
        return self.tier.capacity_exponent

    @property
    def is_last_tier(self) -> bool:
        return self.tier_index >= len(self.tiers) - 1

    def can_upgrade(self, size_exponent: float) -> bool:
        return size_exponent >= self.capacity_exponent and not self.is_last_tier

    def try_upgrade(self, size_exponent: float) -> bool:
        """Move up one tier if the organism has filled this one."""
        if not self.can_upgrade(size_exponent):
            return False
        self.tier_index += 1
        return True

    # ── Water ────────────────────────────────────────────────────────

    @property
    def water_budget(self) -> float:
        """Seconds until the water hits zero at the current rate."""
        return self.water * self.water_lifetime

    @property
    def can_clean(self) -> bool:
        return self.water <= self.clean_threshold

    def decay(self, elapsed: float) -> None:
        self.water = max(self.water - elapsed / self.water_lifetime, 0.0)

    def try_clean_water(self) -> bool:
        """Replace the water.  False if it's already (nearly) clean."""
        if not self.can_clean:
            return False
        self._water_old = self.water
        self._clean_time = 0.0
        self.water = 1.0
        return True

    @property
    def cleaning(self) -> bool:
        return self._clean_time < self.clean_anim_length

    # ── Per-frame ────────────────────────────────────────────────────

    def update(self, dt: float) -> None:
        if self._clean_time <= self.clean_anim_length:
            self._clean_time += dt
            t = min(self._clean_time / self.clean_anim_length, 1.0)
            if t < 0.5:
                # old water drains out
                self.water_amount = 1.0 - ease_out_quart(t * 2.0)
                self.water_display = self._water_old
            else:
                self.water_amount = ease_out_quart((t - 0.5) * 2.0)
                self.water_display = self.water
        else:
            self.water_amount = 1.0
            self.water_display = self.water

    # ── Persistence ──────────────────────────────────────────────────

    def load(self, record: SaveRecord) -> None:
        self.tier_index = min(max(int(record.tier_index), 0), len(self.tiers) - 1)
        self.water = min(max(float(record.water), 0.0), 1.0)
        self.water_display = self.water

    def save(self, record: SaveRecord) -> None:
        record.tier_index = self.tier_index
        record.water = self.water
