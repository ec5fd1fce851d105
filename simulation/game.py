"""simulation/game.py — One marimo, its habitat, and its save file.

``MarimoGame`` is the single state object the host owns.  It is
constructed explicitly with its save path and (optionally) a clock
function, so tests can run it without a window or a real clock::

    game = MarimoGame("saves/marimo.dat")
    game.start()                    # load + catch up on time away
    ...
    game.update()                   # once per host frame
    snap = game.snapshot()          # everything the renderer needs
    ...
    game.shutdown()                 # final save, exactly once
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from core import tuning
from core.clock import SimulationClock, system_ticks, ticks_to_seconds
from core.save import SaveController
from simulation.growth import reconcile
from simulation.habitat import Habitat
from simulation.organism import Organism


@dataclass(frozen=True)
class RenderSnapshot:
    """Read-only view pulled by the renderer once per frame."""
    name: str
    size_exponent: float
    water: float                   # true water quality, 0..1
    water_amount: float            # visible water column, 0..1 (clean animation)
    water_display: float           # water level used for colouring
    habitat_name: str
    elapsed_session: float         # s since the organism was created
    position: tuple[float, float]
    draw_size: float
    can_upgrade: bool
    can_clean: bool


class MarimoGame:
    def __init__(self, save_path: str | Path,
                 now: Callable[[], int] = system_ticks,
                 water_lifetime: float | None = None,
                 growth_rate: float | None = None,
                 save_wait: float | None = None) -> None:
        self.clock = SimulationClock(now)
        self.habitat = Habitat(water_lifetime=water_lifetime)
        self.organism = Organism(self.habitat, growth_rate=growth_rate)
        self.saves = SaveController(save_path, now=now, wait_length=save_wait)
        self._started = False
        self._shut_down = False

    # ── Lifecycle ────────────────────────────────────────────────────

    def start(self) -> float:
        """Load the save and catch up.  Returns the seconds caught up."""
        record = self.saves.load()
        self.clock.reset(record.last_tick)

        # habitat first: the organism clamps to its capacity
        self.habitat.load(record)
        self.organism.load(record)
        self.saves.attach(self.habitat, self.organism, self.clock)

        away = self.clock.advance()
        reconcile(self.habitat, self.organism, away)
        self._started = True
        if away > 60.0:
            print(f"[GAME] Caught up {away:.0f} s since last run")
        return away

    def update(self) -> float:
        """One host frame.  Returns the elapsed seconds."""
        dt = self.clock.advance()
        reconcile(self.habitat, self.organism, dt)
        self.habitat.update(dt)
        self.organism.update(dt)
        self.saves.tick(dt)
        return dt

    def shutdown(self) -> None:
        """Flush the save.  Safe to call more than once."""
        if self._shut_down or not self._started:
            return
        self._shut_down = True
        self.saves.flush_on_shutdown()

    def reload_tuning(self) -> None:
        """Re-read ``data/tuning.toml`` and push the new values into live objects."""
        tuning.reload()
        self.habitat.retune()
        self.organism.retune()
        self.saves.retune()

    # ── Actions ──────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self.organism.name

    @name.setter
    def name(self, value: str) -> None:
        if value != self.organism.name:
            self.organism.name = value
            self.saves.request_save()

    def clean_water(self) -> bool:
        if not self.habitat.try_clean_water():
            return False
        self.saves.request_save()
        return True

    def upgrade_habitat(self) -> bool:
        if not self.habitat.try_upgrade(self.organism.size_exponent):
            return False
        self.saves.request_save()
        self.organism.start_upgrade_animation()
        return True

    def set_target(self, x: float, y: float) -> None:
        self.organism.target = (float(x), float(y))

    def set_rect_size(self, w: float, h: float) -> None:
        self.habitat.rect_size = (float(w), float(h))

    # ── Queries ──────────────────────────────────────────────────────

    @property
    def can_upgrade(self) -> bool:
        return self.habitat.can_upgrade(self.organism.size_exponent)

    @property
    def can_clean(self) -> bool:
        return self.habitat.can_clean

    @property
    def size_exponent(self) -> float:
        return self.organism.size_exponent

    @property
    def size_metres(self) -> float:
        return self.organism.size_metres

    @property
    def water(self) -> float:
        return self.habitat.water

    @property
    def habitat_name(self) -> str:
        return self.habitat.display_name

    @property
    def elapsed_session(self) -> float:
        """Seconds since this organism's save was first created."""
        return max(ticks_to_seconds(self.clock.last_tick - self.saves.session_start), 0.0)

    def snapshot(self) -> RenderSnapshot:
        return RenderSnapshot(
            name=self.organism.name,
            size_exponent=self.organism.size_exponent,
            water=self.habitat.water,
            water_amount=self.habitat.water_amount,
            water_display=self.habitat.water_display,
            habitat_name=self.habitat.display_name,
            elapsed_session=self.elapsed_session,
            position=self.organism.pos,
            draw_size=self.organism.draw_size,
            can_upgrade=self.can_upgrade,
            can_clean=self.can_clean,
        )
