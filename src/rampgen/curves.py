"""
Piecewise curves (index-based interpolation).

A curve is written as a flat list alternating easing specs and boundaries:

    ["easeInSine:0.4", 200, "easeOutSine:0.6", 500]

Each easing spec is ``name`` or ``name:rate``. Each boundary is a step label
(50..950) or a step index (0..12) and closes the segment opened by the spec
before it. Rates weight how much of the total change a segment covers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from .easing import ease, is_known, lerp
from .steps import LAST_INDEX, PIVOT_INDEX, SHADE_RANGE, STEPS, TINT_RANGE, step_index

logger = logging.getLogger(__name__)

CurveSpec = Sequence[Union[str, int, float]]


# ============================================================
# Model
# ============================================================


@dataclass(frozen=True)
class EasingSpec:
    name: str = "linear"
    rate: float = 1.0

    @classmethod
    def parse(cls, text: str) -> "EasingSpec":
        text = str(text).strip()
        if ":" not in text:
            return cls(text, 1.0)

        name, raw_rate = text.split(":", 1)
        try:
            rate = float(raw_rate)
        except ValueError:
            logger.warning("Unparsable rate in %r, using 1.0", text)
            return cls(name, 1.0)
        if not rate > 0:
            logger.warning("Non-positive rate in %r, using 1.0", text)
            return cls(name, 1.0)
        return cls(name, rate)


@dataclass(frozen=True)
class CurveSegment:
    start_index: int
    end_index: int
    easing: EasingSpec

    @property
    def span(self) -> int:
        return self.end_index - self.start_index


@dataclass(frozen=True)
class CurveDefinition:
    segments: Tuple[CurveSegment, ...]
    start_index: int
    end_index: int

    @property
    def total_rate(self) -> float:
        return sum(seg.easing.rate for seg in self.segments)

    def is_empty(self) -> bool:
        return not self.segments


# ============================================================
# Parsing
# ============================================================


def _resolve_boundary(value, half: Tuple[int, int]) -> Optional[int]:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not number.is_integer():
        return None
    number = int(number)

    idx = step_index(number)
    if idx is None and 0 <= number <= LAST_INDEX:
        idx = number
    if idx is None or not half[0] <= idx <= half[1]:
        return None
    return idx


def parse_curve(spec: Optional[CurveSpec], half: Tuple[int, int]) -> CurveDefinition:
    """
    Turn a flat curve spec into contiguous segments covering ``half``.

    A missing trailing boundary closes the last segment at the half's end.
    Boundaries that are not a step of this half are dropped with their
    segment.
    """
    start, end = half
    segments = []
    current = start

    items = list(spec or [])
    for i in range(0, len(items), 2):
        easing = EasingSpec.parse(items[i])
        if not is_known(easing.name):
            logger.warning("Unknown easing %r in curve, will evaluate as linear", easing.name)

        if i + 1 < len(items):
            boundary = _resolve_boundary(items[i + 1], half)
            if boundary is None:
                logger.warning(
                    "Invalid curve boundary %r for steps %s..%s, discarding segment",
                    items[i + 1],
                    STEPS[start],
                    STEPS[end],
                )
                continue
        else:
            boundary = end

        if boundary < current:
            logger.warning(
                "Curve boundary %s runs backwards from %s, discarding segment",
                STEPS[boundary],
                STEPS[current],
            )
            continue

        segments.append(CurveSegment(current, boundary, easing))
        current = boundary

    if segments and current != end:
        logger.debug("Curve stops at index %d before half end %d", current, end)

    return CurveDefinition(tuple(segments), start, end)


def parse_tint_curve(spec: Optional[CurveSpec]) -> CurveDefinition:
    return parse_curve(spec, TINT_RANGE)


def parse_shade_curve(spec: Optional[CurveSpec]) -> CurveDefinition:
    return parse_curve(spec, SHADE_RANGE)


# ============================================================
# Evaluation
# ============================================================


def evaluate_curve(
    index: int, curve: CurveDefinition, start_value: float, end_value: float
) -> float:
    """
    Value at ``index`` for a curve running from start_value to end_value.

    progress = (rates of earlier segments + rate * eased local t) / total rate
    """
    if curve.is_empty():
        t = (index - curve.start_index) / (curve.end_index - curve.start_index)
        return lerp(start_value, end_value, t)

    total_rate = curve.total_rate
    accumulated = 0.0
    for seg in curve.segments:
        if seg.start_index <= index <= seg.end_index:
            local_t = 0.0 if seg.span == 0 else (index - seg.start_index) / seg.span
            eased_t = ease(local_t, seg.easing.name)
            progress = (accumulated + seg.easing.rate * eased_t) / total_rate
            return lerp(start_value, end_value, progress)
        accumulated += seg.easing.rate

    return end_value


def evaluate_piecewise(
    step: int,
    tint_curve: CurveDefinition,
    shade_curve: CurveDefinition,
    start_value: float,
    base_value: float,
    end_value: float,
) -> float:
    """Evaluate one channel at a step label: tints start..base, shades base..end."""
    index = step_index(step)
    if index is None:
        logger.warning("Step %r not found in step table", step)
        return base_value

    if index == PIVOT_INDEX:
        return base_value
    if index < PIVOT_INDEX:
        return evaluate_curve(index, tint_curve, start_value, base_value)
    return evaluate_curve(index, shade_curve, base_value, end_value)
