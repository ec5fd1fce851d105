"""core/save.py — Save-file orchestration.

The ``SaveController`` owns the single save file at ``path``:

- ``load()`` at startup returns the stored record, or a fresh default
  one if the file is missing or can't be trusted.  A bad save file never
  blocks the player; they just start over.
- State changes call ``request_save()``.  Nothing is written yet.
- Every frame ``tick(dt)`` adds *dirty* time to a wait timer.  Once it
  reaches ``wait_length`` (1 s by default) one write happens, so a burst
  of renames/cleans/upgrades costs a single encode + hash + encrypt.
- ``flush_on_shutdown()`` writes immediately, whatever the timer says.

Write failures are logged and the record stays dirty, so the next
debounce window tries again.
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, Callable

from core.cipher import read_record, write_record
from core.clock import system_ticks
from core.codec import RecordError
from core.constants import SAVE_WAIT_LENGTH
from core.record import SaveRecord
from core.tuning import get as _tun


class SaveController:
    def __init__(self, path: str | Path,
                 now: Callable[[], int] = system_ticks,
                 wait_length: float | None = None) -> None:
        self.path = Path(path)
        self._now = now
        self._wait_override = wait_length
        self.retune()

        self.session_start: int = 0
        self.dirty = False
        self._wait_time = 0.0
        self._flushed = False

        # Live state sources, set by attach()
        self._habitat: Any = None
        self._organism: Any = None
        self._clock: Any = None

        # Stats
        self.saves_written = 0
        self.failed_saves = 0

    def retune(self) -> None:
        wait = self._wait_override
        if wait is None:
            wait = _tun("save", "wait_length", SAVE_WAIT_LENGTH)
        self.wait_length = float(wait)

    # ── Loading ──────────────────────────────────────────────────────

    def load(self) -> SaveRecord:
        """Return the saved record, or defaults if there isn't a usable one."""
        try:
            record = read_record(self.path)
        except RecordError as ex:
            print(f"[SAVE] Ignoring save file {self.path}: {ex}, starting fresh")
            record = None

        if record is None:
            record = SaveRecord.fresh(self._now())
        self.session_start = record.session_start
        return record

    def attach(self, habitat: Any, organism: Any, clock: Any) -> None:
        """Register the objects a save snapshots."""
        self._habitat = habitat
        self._organism = organism
        self._clock = clock

    # ── Debounce ─────────────────────────────────────────────────────

    def request_save(self) -> None:
        """Mark state as changed; the write happens after the wait."""
        self.dirty = True

    def tick(self, dt: float) -> bool:
        """Advance the wait timer.  Returns True if a write happened."""
        if not self.dirty:
            return False
        self._wait_time += dt
        if self._wait_time < self.wait_length:
            return False
        return self.save()

    # ── Writing ──────────────────────────────────────────────────────

    def build_record(self) -> SaveRecord:
        """Snapshot the attached habitat/organism into a new record."""
        record = SaveRecord(session_start=self.session_start)
        if self._habitat is not None:
            self._habitat.save(record)
        if self._organism is not None:
            self._organism.save(record)
        record.last_tick = (self._clock.last_tick if self._clock is not None
                            else self._now())
        return record

    def save(self) -> bool:
        """Write now.  Returns False (and stays dirty) on I/O failure."""
        record = self.build_record()
        self._wait_time = 0.0
        try:
            write_record(self.path, record)
        except OSError as ex:
            self.failed_saves += 1
            print(f"[SAVE] Could not write {self.path}: {ex}, will retry")
            return False
        self.dirty = False
        self.saves_written += 1
        return True

    def flush_on_shutdown(self) -> bool:
        """Final write when the host closes.  Only the first call writes."""
        if self._flushed:
            return False
        self._flushed = True
        return self.save()
