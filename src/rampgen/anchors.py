"""
Anchor interpolation (label-based).

Sparse ``step -> value`` control points are interpolated linearly by the
numeric distance between step labels, so 700 -> 800 covers twice the
distance of 800 -> 850.

Units of the progression maps:
  hue         degrees added to the base hue
  saturation  percent of the base saturation
  lightness   percent of the tint range (start_l -> base) or
              shade range (base -> end_l)
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping, Optional, Tuple

from .steps import FIRST_STEP, LAST_STEP, PIVOT, SHADE_STEPS, TINT_STEPS

logger = logging.getLogger(__name__)

ControlPoints = Dict[int, float]


def map_values_to_steps(
    values: Optional[Mapping], available_steps: Iterable[int]
) -> ControlPoints:
    """Keep entries whose key is one of ``available_steps``; warn about the rest."""
    if not values:
        return {}

    available = tuple(available_steps)
    mapping: ControlPoints = {}
    for key, value in values.items():
        try:
            step = int(key)
        except (TypeError, ValueError):
            step = None
        if step is None or step not in available:
            logger.warning(
                "Invalid step %r for available steps %s",
                key,
                ", ".join(str(s) for s in available),
            )
            continue
        mapping[step] = float(value)
    return mapping


def interpolate_anchor(step: int, control_points: Mapping[int, float]) -> float:
    if step in control_points:
        return control_points[step]

    labels = sorted(control_points)
    if not labels:
        raise ValueError("No control points to interpolate")

    for lower, upper in zip(labels, labels[1:]):
        if lower <= step <= upper:
            t = (step - lower) / (upper - lower)
            v0 = control_points[lower]
            v1 = control_points[upper]
            return v0 + (v1 - v0) * t

    # outside the defined labels: clamp
    if step < labels[0]:
        return control_points[labels[0]]
    return control_points[labels[-1]]


# ============================================================
# Control point builders
# ============================================================


def split_progression(values: Optional[Mapping]) -> Tuple[ControlPoints, ControlPoints]:
    """Split a flat progression map into (tint entries, shade entries)."""
    entries = map_values_to_steps(values, TINT_STEPS + SHADE_STEPS)
    tint = {step: v for step, v in entries.items() if step < PIVOT}
    shade = {step: v for step, v in entries.items() if step > PIVOT}
    return tint, shade


def hue_controls(values: Optional[Mapping]) -> ControlPoints:
    tint, shade = split_progression(values)
    return {**tint, PIVOT: 0.0, **shade}


def saturation_controls(base_s: float, values: Optional[Mapping]) -> ControlPoints:
    """Percent-of-base entries converted to absolute saturation."""
    tint, shade = split_progression(values)
    return {
        **{step: base_s * (pct / 100) for step, pct in tint.items()},
        PIVOT: base_s,
        **{step: base_s * (pct / 100) for step, pct in shade.items()},
    }


def lightness_controls(
    base_l: float, start_l: float, end_l: float, values: Optional[Mapping]
) -> ControlPoints:
    """Percent-of-range entries converted to absolute lightness."""
    tint, shade = split_progression(values)
    tint_range = base_l - start_l
    shade_range = end_l - base_l

    controls = {
        **{step: start_l + (pct / 100) * tint_range for step, pct in tint.items()},
        PIVOT: base_l,
        **{step: base_l + (pct / 100) * shade_range for step, pct in shade.items()},
    }
    # endpoints are absolute, never percentages
    controls[FIRST_STEP] = start_l
    controls[LAST_STEP] = end_l
    return controls
