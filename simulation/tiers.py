"""simulation/tiers.py — The habitat capacity ladder.

Each tier caps how big the organism may grow, as a log10 exponent in
metres.  The last tier is unbounded.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Tier:
    display_name: str
    capacity_exponent: float


TIERS: tuple[Tier, ...] = (
    Tier("Test tube (1 cm)",              -2.0),
    Tier("Bottle (10 cm)",                -1.0),
    Tier("Bathtub (1 m)",                  0.0),
    Tier("Aquarium (100 m)",               2.0),
    Tier("Lake (10 km)",                   4.0),
    Tier("Sea (1,000 km)",                 6.0),
    Tier("Earth (10,000 km)",              7.0),
    Tier("Sun (1,000,000 km)",             9.0),
    Tier("Solar system (10^10 km)",       13.0),
    Tier("Star cluster (10^14 km)",       17.0),
    Tier("Galaxy cluster (10^20 km)",     23.0),
    Tier("Universe (10^24 km)",           27.0),
    Tier("???",                 float("inf")),
)

LAST_TIER = len(TIERS) - 1
