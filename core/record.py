"""core/record.py — The persisted projection of the simulation.

A ``SaveRecord`` is the only thing written to disk.  The habitat and
organism copy their state into one at save time and out of one at load
time; neither keeps a reference to it.
"""

from __future__ import annotations
from dataclasses import dataclass

from core.constants import (
    DEFAULT_ORGANISM_NAME, DEFAULT_SIZE_EXPONENT, DEFAULT_WATER,
    DEFAULT_TIER_INDEX,
)
from core.tuning import get as _tun


@dataclass
class SaveRecord:
    name: str = ""
    size_exponent: float = DEFAULT_SIZE_EXPONENT
    water: float = DEFAULT_WATER
    tier_index: int = DEFAULT_TIER_INDEX
    session_start: int = 0        # ticks, when the organism was first created
    last_tick: int = 0            # ticks, last simulated frame

    @classmethod
    def fresh(cls, now: int) -> SaveRecord:
        """A brand-new organism: 1 mm, half-clean water, smallest habitat."""
        return cls(
            name=_tun("organism", "default_name", DEFAULT_ORGANISM_NAME),
            size_exponent=DEFAULT_SIZE_EXPONENT,
            water=DEFAULT_WATER,
            tier_index=DEFAULT_TIER_INDEX,
            session_start=now,
            last_tick=now,
        )
