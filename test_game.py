"""test_game.py — MarimoGame end to end, without a window.

Tests:
1. Fresh start and the render snapshot
2. Actions (rename, clean, upgrade) persist across restarts
3. Catching up on time away, including a clock that went backwards
4. Bad save files and shutdown

Run: python test_game.py
"""
from __future__ import annotations
import math, sys, tempfile, traceback
from pathlib import Path

from core import tuning
from core.cipher import read_record, write_record
from core.clock import seconds_to_ticks
from core.constants import DEFAULT_ORGANISM_NAME, GROWTH_RATE_PER_SEC
from core.record import SaveRecord
from simulation.game import MarimoGame, RenderSnapshot
from simulation.tiers import TIERS
from ui.format import size_string

DAY = 86400.0


class FakeClock:
    """Wall clock that only moves when told to."""

    def __init__(self, seconds: float = 1e9):
        self.ticks = seconds_to_ticks(seconds)

    def __call__(self) -> int:
        return self.ticks

    def advance(self, seconds: float) -> None:
        self.ticks += seconds_to_ticks(seconds)


def _game(path: Path, clock: FakeClock) -> MarimoGame:
    game = MarimoGame(path, now=clock, save_wait=1.0)
    game.set_rect_size(480, 640)
    return game


# ════════════════════════════════════════════════════════════════════════
#  TEST 1 — Fresh start
# ════════════════════════════════════════════════════════════════════════

def test_fresh_start():
    with tempfile.TemporaryDirectory() as tmp:
        clock = FakeClock()
        game = _game(Path(tmp) / "marimo.dat", clock)
        assert game.start() == 0.0
        assert game.name == DEFAULT_ORGANISM_NAME
        assert game.size_exponent == -3.0
        assert math.isclose(game.size_metres, 0.001)
        assert game.water == 0.5
        assert game.habitat_name == TIERS[0].display_name
        assert game.can_clean and not game.can_upgrade
        assert game.elapsed_session == 0.0


def test_snapshot_fields():
    with tempfile.TemporaryDirectory() as tmp:
        clock = FakeClock()
        game = _game(Path(tmp) / "marimo.dat", clock)
        game.start()
        clock.advance(100.0)
        assert math.isclose(game.update(), 100.0)

        snap = game.snapshot()
        assert isinstance(snap, RenderSnapshot)
        assert snap.name == game.name
        assert snap.size_exponent == game.size_exponent > -3.0
        assert snap.water == game.water < 0.5
        assert snap.water_amount == 1.0
        assert snap.habitat_name == TIERS[0].display_name
        assert math.isclose(snap.elapsed_session, 100.0)
        assert snap.can_clean and not snap.can_upgrade
        assert snap.draw_size > 0.0
        x, y = snap.position
        assert 0.0 <= x <= 480.0 and 0.0 <= y <= 640.0


# ════════════════════════════════════════════════════════════════════════
#  TEST 2 — Actions persist
# ════════════════════════════════════════════════════════════════════════

def test_rename_and_upgrade_persist():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "marimo.dat"
        clock = FakeClock()
        write_record(path, SaveRecord(name="Mo", size_exponent=-2.0, water=1.0,
                                      tier_index=0, session_start=clock(),
                                      last_tick=clock()))
        game = _game(path, clock)
        game.start()
        assert game.can_upgrade
        assert game.upgrade_habitat()
        assert game.habitat_name == TIERS[1].display_name
        assert not game.upgrade_habitat(), "one tier per upgrade"
        game.name = "Momo"
        assert game.saves.dirty

        clock.advance(1.5)
        game.update()
        assert game.saves.saves_written == 1 and not game.saves.dirty

        again = _game(path, clock)
        again.start()
        assert again.name == "Momo"
        assert again.habitat_name == TIERS[1].display_name


def test_same_name_does_not_dirty():
    with tempfile.TemporaryDirectory() as tmp:
        game = _game(Path(tmp) / "marimo.dat", FakeClock())
        game.start()
        game.name = game.name
        assert not game.saves.dirty


def test_huge_marimo_in_last_habitat():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "marimo.dat"
        clock = FakeClock()
        write_record(path, SaveRecord(name="Mo", size_exponent=400.0, water=1.0,
                                      tier_index=len(TIERS) - 1,
                                      session_start=clock(), last_tick=clock()))
        game = _game(path, clock)
        game.start()
        clock.advance(60.0)
        game.update()
        assert game.size_exponent > 400.0
        assert game.size_metres == math.inf
        assert not game.can_upgrade
        assert game.snapshot().habitat_name == TIERS[-1].display_name
        assert size_string(game.size_exponent).endswith(" km")


def test_reload_tuning_reaches_live_objects():
    with tempfile.TemporaryDirectory() as tmp:
        toml = Path(tmp) / "tuning.toml"
        toml.write_text("[habitat]\nwater_lifetime = 1000.0\n")
        try:
            tuning.load(toml)
            game = MarimoGame(Path(tmp) / "marimo.dat", now=FakeClock())
            pinned = MarimoGame(Path(tmp) / "other.dat", now=FakeClock(),
                                water_lifetime=50.0, save_wait=2.0)
            assert game.habitat.water_lifetime == 1000.0

            toml.write_text("[habitat]\nwater_lifetime = 200.0\nclean_threshold = 0.5\n"
                            "[organism]\ngrowth_rate_per_sec = 0.001\n"
                            "[save]\nwait_length = 0.25\n")
            game.reload_tuning()
            assert game.habitat.water_lifetime == 200.0
            assert game.habitat.clean_threshold == 0.5
            assert game.organism.growth_rate == 0.001
            assert game.saves.wait_length == 0.25

            pinned.reload_tuning()
            assert pinned.habitat.water_lifetime == 50.0, "constructor value wins"
            assert pinned.saves.wait_length == 2.0
            assert pinned.organism.growth_rate == 0.001
        finally:
            tuning.load(Path(tmp) / "missing.toml")
        assert tuning.get("habitat", "water_lifetime") is None


def test_clean_water_requests_save():
    with tempfile.TemporaryDirectory() as tmp:
        clock = FakeClock()
        game = _game(Path(tmp) / "marimo.dat", clock)
        game.start()
        assert game.clean_water()
        assert game.water == 1.0 and game.saves.dirty
        assert not game.clean_water()
        assert not game.can_clean


# ════════════════════════════════════════════════════════════════════════
#  TEST 3 — Time away
# ════════════════════════════════════════════════════════════════════════

def test_ten_days_away():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "marimo.dat"
        clock = FakeClock()
        write_record(path, SaveRecord(name="Mo", size_exponent=-3.0, water=0.1,
                                      session_start=clock(), last_tick=clock()))
        clock.advance(10 * DAY)
        game = _game(path, clock)
        assert math.isclose(game.start(), 10 * DAY)
        assert game.water == 0.0
        expected = -3.0 + GROWTH_RATE_PER_SEC * 36288.0 * 0.05
        assert math.isclose(game.size_exponent, expected, rel_tol=1e-9)
        assert math.isclose(game.elapsed_session, 10 * DAY)


def test_clock_went_backwards():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "marimo.dat"
        clock = FakeClock()
        write_record(path, SaveRecord(name="Mo", size_exponent=-2.5, water=0.7,
                                      session_start=clock(),
                                      last_tick=clock() + seconds_to_ticks(DAY)))
        game = _game(path, clock)
        assert game.start() == 0.0
        assert game.size_exponent == -2.5 and game.water == 0.7

        clock.advance(10.0)
        assert math.isclose(game.update(), 10.0)


# ════════════════════════════════════════════════════════════════════════
#  TEST 4 — Bad saves and shutdown
# ════════════════════════════════════════════════════════════════════════

def test_corrupt_save_starts_fresh():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "marimo.dat"
        path.write_bytes(b"not a save")
        game = _game(path, FakeClock())
        assert game.start() == 0.0
        assert game.name == DEFAULT_ORGANISM_NAME
        assert game.size_exponent == -3.0


def test_shutdown_writes_once():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "marimo.dat"
        clock = FakeClock()
        game = _game(path, clock)
        game.start()
        clock.advance(30.0)
        game.update()
        game.shutdown()
        game.shutdown()
        assert game.saves.saves_written == 1
        rec = read_record(path)
        assert rec.last_tick == clock()
        assert rec.session_start == clock() - seconds_to_ticks(30.0)


def test_shutdown_before_start_writes_nothing():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "marimo.dat"
        game = _game(path, FakeClock())
        game.shutdown()
        assert not path.exists()


# ════════════════════════════════════════════════════════════════════════
#  MAIN
# ════════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    tests = [(name, fn) for name, fn in sorted(globals().items())
             if name.startswith("test_") and callable(fn)]
    passed = failed = 0
    for name, fn in tests:
        try:
            fn()
            passed += 1
            print(f"  [PASS] {name}")
        except Exception:
            failed += 1
            print(f"  [FAIL] {name}")
            traceback.print_exc()
    print(f"\n{'=' * 50}\n  Results: {passed} passed, {failed} failed\n{'=' * 50}")
    sys.exit(1 if failed else 0)
