"""
Easing catalog.

Closed set of monotonic [0, 1] -> [0, 1] shaping functions, looked up by
name. Names follow the usual Penner naming (easeInSine, easeOutCubic, ...).
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Dict

logger = logging.getLogger(__name__)

EasingFn = Callable[[float], float]


def linear(t: float) -> float:
    return t


# ------------------------------------------------------------
# Sine
# ------------------------------------------------------------


def ease_in_sine(t: float) -> float:
    return 1 - math.cos((t * math.pi) / 2)


def ease_out_sine(t: float) -> float:
    return math.sin((t * math.pi) / 2)


def ease_in_out_sine(t: float) -> float:
    return -(math.cos(math.pi * t) - 1) / 2


# ------------------------------------------------------------
# Power families (quad, cubic, quart, quint)
# ------------------------------------------------------------


def _power_in(p: int) -> EasingFn:
    def f(t: float) -> float:
        return t**p

    return f


def _power_out(p: int) -> EasingFn:
    def f(t: float) -> float:
        return 1 - (1 - t) ** p

    return f


def _power_in_out(p: int) -> EasingFn:
    scale = 2 ** (p - 1)

    def f(t: float) -> float:
        if t < 0.5:
            return scale * t**p
        return 1 - (-2 * t + 2) ** p / 2

    return f


# ------------------------------------------------------------
# Expo
# ------------------------------------------------------------


def ease_in_expo(t: float) -> float:
    return 0.0 if t == 0 else 2 ** (10 * (t - 1))


def ease_out_expo(t: float) -> float:
    return 1.0 if t == 1 else 1 - 2 ** (-10 * t)


def ease_in_out_expo(t: float) -> float:
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    if t < 0.5:
        return 2 ** (20 * t - 10) / 2
    return (2 - 2 ** (-20 * t + 10)) / 2


EASINGS: Dict[str, EasingFn] = {
    "linear": linear,
    "easeInSine": ease_in_sine,
    "easeOutSine": ease_out_sine,
    "easeInOutSine": ease_in_out_sine,
    "easeInExpo": ease_in_expo,
    "easeOutExpo": ease_out_expo,
    "easeInOutExpo": ease_in_out_expo,
}

for _family, _power in (("Quad", 2), ("Cubic", 3), ("Quart", 4), ("Quint", 5)):
    EASINGS[f"easeIn{_family}"] = _power_in(_power)
    EASINGS[f"easeOut{_family}"] = _power_out(_power)
    EASINGS[f"easeInOut{_family}"] = _power_in_out(_power)


def is_known(name: str) -> bool:
    return name in EASINGS


def ease(t: float, name: str = "linear") -> float:
    fn = EASINGS.get(name)
    if fn is None:
        logger.warning("Unknown easing type %r, falling back to linear", name)
        fn = linear
    # pin the endpoints; cos(pi / 2) is not exactly 0
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    return fn(t)


def lerp(a: float, b: float, t: float) -> float:
    if t == 1.0:
        return b
    return a + (b - a) * t
