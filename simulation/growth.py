"""simulation/growth.py — Catch-up of water decay and growth.

Growth speed is proportional to water quality, and water quality falls
linearly while time passes.  A frame may cover 30 ms or, after the app
was closed for a week, several days, so each frame is reconciled as
one interval:

- Water lasts the whole interval: decay it, then grow for the full
  interval at the *average* of the before/after water.
- Water runs out part-way: grow only for the ``budget`` seconds it
  lasted, at half the starting water (the average of start and zero),
  then decay for the full interval.  Water bottoms out at 0.

Either way growth is clamped by the habitat capacity inside
``Organism.grow``.
"""

from __future__ import annotations

from simulation.habitat import Habitat
from simulation.organism import Organism


def reconcile(habitat: Habitat, organism: Organism, elapsed: float) -> None:
    """Advance water and growth by *elapsed* seconds."""
    if elapsed <= 0.0:
        return
    before = habitat.water
    budget = habitat.water_budget
    if budget >= elapsed:
        habitat.decay(elapsed)
        organism.grow((before + habitat.water) / 2.0, elapsed)
    else:
        organism.grow(before / 2.0, budget)
        habitat.decay(elapsed)
