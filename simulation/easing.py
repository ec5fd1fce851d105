"""simulation/easing.py — Easing curves and smoothing for animations.

Purely cosmetic; nothing here touches persisted state.
"""

from __future__ import annotations
import math


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation with *t* clamped to [0, 1]."""
    t = min(max(t, 0.0), 1.0)
    return a + (b - a) * t


def ease_out_quart(t: float) -> float:
    t -= 1.0
    return 1.0 - t * t * t * t


def ease_out_elastic(t: float) -> float:
    """Overshoots past 1 and settles, like a spring."""
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    c4 = (2.0 * math.pi) / 3.0
    return 2.0 ** (-10.0 * t) * math.sin((t * 10.0 - 0.75) * c4) + 1.0


def smooth_damp(current: float, target: float, velocity: float,
                smooth_time: float, max_speed: float,
                dt: float) -> tuple[float, float]:
    """Critically damped spring toward *target*.

    Returns ``(new_value, new_velocity)``.  Speed is capped at
    *max_speed* and the result never overshoots *target*.
    """
    smooth_time = max(0.0001, smooth_time)
    omega = 2.0 / smooth_time
    x = omega * dt
    exp = 1.0 / (1.0 + x + 0.48 * x * x + 0.235 * x * x * x)

    change = current - target
    original_target = target
    max_change = max_speed * smooth_time
    change = min(max(change, -max_change), max_change)
    target = current - change

    temp = (velocity + omega * change) * dt
    velocity = (velocity - omega * temp) * exp
    result = target + (change + temp) * exp

    if (original_target - current > 0.0) == (result > original_target):
        result = original_target
        velocity = 0.0
    return result, velocity
