"""ui.format — Human-readable sizes, percentages and durations."""

from __future__ import annotations
import math

_YEAR = 31556952      # s, mean Gregorian year
_DAY = 86400


def size_string(size_exponent: float) -> str:
    """Format a log10-metre size.

    Small sizes show three sub-units (mm, μm, nm); as the organism grows
    the finer units drop off, and past 10^18 m it switches to scientific
    notation in km.
    """
    if size_exponent >= 18:
        mantissa = 10.0 ** (size_exponent % 1.0)
        return f"{mantissa:.6f} x 10^{math.floor(size_exponent - 3):,} km"

    size = 10.0 ** size_exponent
    nm = int(size * 1_000_000_000 % 1000)
    um = int(size * 1_000_000 % 1000)
    mm = int(size * 1000 % 10)
    if size_exponent < -2:
        return f"{mm}mm{um}μm{nm}nm"

    cm = int(size * 100 % 100)
    if size_exponent < 0:
        return f"{cm}cm{mm}mm{um}μm"

    m = int(size % 1000)
    if size_exponent < 3:
        return f"{m}m{cm}cm{mm}mm"

    km = f"{size / 1000:,.0f}"
    if size_exponent < 9:
        return f"{km}km{m}m{cm}cm{mm}mm"
    if size_exponent < 12:
        return f"{km}km{m}m{cm}cm"
    if size_exponent < 15:
        return f"{km}km{m}m"
    return f"{km}km"


def percent_string(fraction: float) -> str:
    """Whole percent, rounded up so any water left never shows as 0%."""
    return f"{int(math.ceil(fraction * 100))}%"


def duration_string(seconds: float) -> str:
    """Coarse elapsed time: two most significant units."""
    sec = int(max(seconds, 0))

    s = sec % 60
    if sec < 60:
        return f"{s} s"

    m = sec // 60 % 60
    if sec < 3600:
        return f"{m} min {s} s"

    h = sec // 3600 % 24
    if sec < _DAY:
        return f"{h} h {m} min"

    d = sec % _YEAR // _DAY
    if sec < 10 * _DAY:
        return f"{d} d {h} h"
    if sec < _YEAR:
        return f"{d} d"

    y = sec // _YEAR
    return f"{y} y {d} d"
