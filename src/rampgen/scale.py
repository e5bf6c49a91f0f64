"""
Ramp generation.

Two strategies share the step table:

- ``generate_curve_scale``: piecewise eased curves parametrized by step
  *index*, with an optional shade peak boost.
- ``generate_anchor_scale``: sparse control points interpolated by step
  *label* distance.

Both return 13 ColorSample objects. Step 500 is always the unmodified base.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence, Tuple

from . import anchors
from .curves import CurveSpec, evaluate_piecewise, parse_shade_curve, parse_tint_curve
from .gamut import is_achromatic, okhsl_to_oklch, oklch_to_hex, safe_chroma, wrap_hue
from .peak import PeakBoost
from .steps import PIVOT, STEPS

# ============================================================
# Samples
# ============================================================


@dataclass(frozen=True)
class ColorSample:
    step: int
    lightness: float
    chroma: float
    hue: float
    saturation: float
    # OKLCH L when it differs from the working lightness (anchor ramps)
    oklch_lightness: Optional[float] = None

    @property
    def oklch(self) -> Tuple[float, float, float]:
        L = self.lightness if self.oklch_lightness is None else self.oklch_lightness
        return L, self.chroma, self.hue

    def to_hex(self) -> str:
        return oklch_to_hex(*self.oklch)


def ramp_to_hex(samples: Sequence[ColorSample]) -> List[str]:
    return [s.to_hex() for s in samples]


# ============================================================
# Curve-based scale (index parametrization)
# ============================================================


@dataclass(frozen=True)
class CurveScaleConfig:
    base_hue: float
    base_saturation: float
    base_lightness: float
    start_l: float
    end_l: float
    start_s: float
    end_s: float
    start_hue_shift: float = 0.0
    end_hue_shift: float = 0.0
    tint_lightness_curve: Optional[CurveSpec] = None
    tint_saturation_curve: Optional[CurveSpec] = None
    tint_hue_curve: Optional[CurveSpec] = None
    shade_lightness_curve: Optional[CurveSpec] = None
    shade_saturation_curve: Optional[CurveSpec] = None
    shade_hue_curve: Optional[CurveSpec] = None
    peak_step: Optional[int] = None
    peak_boost: Optional[float] = None


def generate_curve_scale(cfg: CurveScaleConfig) -> List[ColorSample]:
    tint_l = parse_tint_curve(cfg.tint_lightness_curve)
    tint_s = parse_tint_curve(cfg.tint_saturation_curve)
    tint_h = parse_tint_curve(cfg.tint_hue_curve)
    shade_l = parse_shade_curve(cfg.shade_lightness_curve)
    shade_s = parse_shade_curve(cfg.shade_saturation_curve)
    shade_h = parse_shade_curve(cfg.shade_hue_curve)
    peak = PeakBoost.from_config(cfg.peak_step, cfg.peak_boost)

    base_s = cfg.base_saturation
    scale = []
    for step in STEPS:
        if step == PIVOT:
            scale.append(_base_sample(cfg.base_hue, base_s, cfg.base_lightness))
            continue

        L = evaluate_piecewise(step, tint_l, shade_l, cfg.start_l, cfg.base_lightness, cfg.end_l)

        if peak is not None and step > PIVOT:
            S, hue_shift = peak.apply(
                step, base_s, cfg.end_s, cfg.start_hue_shift, cfg.end_hue_shift
            )
        else:
            S = evaluate_piecewise(step, tint_s, shade_s, cfg.start_s, base_s, cfg.end_s)
            hue_shift = evaluate_piecewise(
                step, tint_h, shade_h, cfg.start_hue_shift, 0.0, cfg.end_hue_shift
            )

        H = wrap_hue(cfg.base_hue + hue_shift)
        # chroma is resolved at the base lightness
        C = safe_chroma(H, S, cfg.base_lightness)
        scale.append(ColorSample(step, L, C, H, S))

    return scale


# ============================================================
# Anchor-based scale (label parametrization)
# ============================================================


@dataclass(frozen=True)
class AnchorScaleConfig:
    base_hue: float
    base_saturation: float
    base_lightness: float
    start_l: float = 98.0
    end_l: float = 9.5
    # sparse step -> value maps covering tint and shade steps
    hue_progression: Mapping = field(default_factory=dict)
    saturation_progression: Mapping = field(default_factory=dict)
    lightness_progression: Mapping = field(default_factory=dict)


def generate_anchor_scale(cfg: AnchorScaleConfig) -> List[ColorSample]:
    hue_cp = anchors.hue_controls(cfg.hue_progression)
    sat_cp = anchors.saturation_controls(cfg.base_saturation, cfg.saturation_progression)
    light_cp = anchors.lightness_controls(
        cfg.base_lightness, cfg.start_l, cfg.end_l, cfg.lightness_progression
    )

    scale = []
    for step in STEPS:
        if step == PIVOT:
            scale.append(
                _okhsl_sample(PIVOT, cfg.base_hue, cfg.base_saturation, cfg.base_lightness)
            )
            continue

        H = wrap_hue(cfg.base_hue + anchors.interpolate_anchor(step, hue_cp))
        S = anchors.interpolate_anchor(step, sat_cp)
        L = anchors.interpolate_anchor(step, light_cp)
        scale.append(_okhsl_sample(step, H, S, L))

    return scale


def _okhsl_sample(step: int, hue: float, saturation: float, lightness: float) -> ColorSample:
    """Whole OKhsl triple converted; the OKhsl lightness is kept alongside."""
    achromatic = is_achromatic(saturation)
    L, C, _ = okhsl_to_oklch(hue, 0.0 if achromatic else saturation, lightness)
    if achromatic or math.isnan(C):
        C = 0.0
    return ColorSample(step, lightness, C, hue, saturation, L)


def _base_sample(hue: float, saturation: float, lightness: float) -> ColorSample:
    return ColorSample(
        PIVOT, lightness, safe_chroma(hue, saturation, lightness), hue, saturation
    )
