"""
Palette configuration.

Two built-in palettes ship with the package, one per generation mode:

- ``curves``: piecewise eased curves per channel (CURVE_DEFAULTS / CURVE_COLORS)
- ``anchors``: sparse progressions per channel (ANCHOR_DEFAULTS / ANCHOR_COLORS)

A JSON file with the same shape can replace them:

    {
      "mode": "anchors",
      "defaults": {"start_l": 98, "end_l": 9.8, "hue_progression": {"50": -10}},
      "colors": [{"name": "red-500", "base_hue": 20.06, ...}]
    }

Family entries merge over the defaults field by field. Scalars fall back to
the default only when missing; curve lists replace the default list; anchor
maps merge per step, the family value winning at the same step.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .errors import ConfigError
from .scale import AnchorScaleConfig, CurveScaleConfig

logger = logging.getLogger(__name__)

MODES = ("curves", "anchors")

CURVE_FIELDS = (
    "tint_lightness_curve",
    "tint_saturation_curve",
    "tint_hue_curve",
    "shade_lightness_curve",
    "shade_saturation_curve",
    "shade_hue_curve",
)
CURVE_SCALARS = (
    "start_l",
    "end_l",
    "start_s",
    "end_s",
    "start_hue_shift",
    "end_hue_shift",
    "peak_step",
    "peak_boost",
)
PROGRESSION_FIELDS = (
    "hue_progression",
    "saturation_progression",
    "lightness_progression",
)
BASE_FIELDS = ("base_hue", "base_saturation", "base_lightness")

# camelCase keys from older palette files
KEY_ALIASES = {
    "shadePeakStep": "peak_step",
    "shadeBoost": "peak_boost",
    "startL": "start_l",
    "endL": "end_l",
    "startS": "start_s",
    "endS": "end_s",
}

# ============================================================
# Built-in palette: curves
# ============================================================

CURVE_DEFAULTS: Dict[str, Any] = {
    "start_l": 98.0,
    "end_l": 19.5,
    # None: derived from the base saturation
    "start_s": None,
    "end_s": None,
    "start_hue_shift": 0.0,
    "end_hue_shift": 0.0,
    "tint_lightness_curve": ["easeInSine:0.4", 200, "easeOutSine:0.6", 500],
    "tint_saturation_curve": ["easeInSine:0.4", 200, "easeOutSine:0.6", 500],
    "tint_hue_curve": ["linear", 500],
    "shade_lightness_curve": ["easeInSine:0.6", 800, "linear:0.4", 950],
    "shade_saturation_curve": ["easeInSine:0.6", 800, "linear:0.4", 950],
    "shade_hue_curve": ["linear", 950],
    "peak_step": None,
    "peak_boost": None,
}


def _cc(name, h, s, l, start_shift, end_shift, **extra) -> Dict[str, Any]:
    return {
        "name": name,
        "base_hue": h,
        "base_saturation": s,
        "base_lightness": l,
        "start_hue_shift": start_shift,
        "end_hue_shift": end_shift,
        **extra,
    }


_MUTED = {"start_l": 98.2, "end_l": 21.5}

CURVE_COLORS: List[Dict[str, Any]] = [
    _cc("red-500", 23.5, 90, 57, -8.0, -5),
    _cc("orange-500", 49.1, 94, 67, 26, -20),
    _cc("amber-500", 72.4, 99, 74, 20, -25),
    _cc("yellow-500", 82.8, 99, 80, 15, -30),
    _cc("olive-500", 107.6, 90, 75, 0, -5),
    _cc("lime-500", 124.2, 85, 73, -10, 5),
    _cc("green-500", 150.3, 92, 65, -10, 12),
    _cc("emerald-500", 160.2, 93, 65, 0, 12),
    _cc("teal-500", 182.5, 94, 65, -5, 5.0),
    _cc("cyan-500", 217.9, 96, 66, -5, -2),
    _cc("sky-500", 240.4, 97, 64, -5, 0),
    _cc("blue-500", 259.2, 95, 58, -5, 5),
    _cc("indigo-500", 273.1, 94, 52, -5, 0),
    _cc("iris-500", 283.6, 97.9, 49.2, -5, 7),
    _cc("violet-500", 293.9, 96, 53, -5.0, 5.0),
    _cc("purple-500", 305.4, 97, 55, 4.5, -1.2),
    _cc("fuchsia-500", 322.2, 92, 56, -2.5, 3.5),
    _cc("pink-500", 351.0, 91, 57, -5, 3),
    _cc("rose-500", 16.8, 90, 57, -4.0, -12),
    _cc("sand-500", 25.3, 37.7, 45, 10.0, -20.0, start_l=98.2, end_l=20, start_s=2, end_s=4),
    _cc("slate-500", 256.8, 20, 42, -8.0, 8.0, start_s=2, end_s=4, **_MUTED),
    _cc("grey-500", 265.6, 13.4, 42, -10, -5, start_s=2, end_s=2, **_MUTED),
    _cc("zinc-500", 285.9, 6.7, 42, 0.0, 0.0, start_s=2, end_s=2, **_MUTED),
    _cc("neutral-500", 89.9, 0, 42, 0.0, 0.0, start_s=0, end_s=0, **_MUTED),
]

# ============================================================
# Built-in palette: anchors
# ============================================================

ANCHOR_DEFAULTS: Dict[str, Any] = {
    "start_l": 98.0,
    "end_l": 9.8,
    # degrees, positive = warmer
    "hue_progression": {50: -10, 950: -10},
    # percent of base saturation
    "saturation_progression": {50: 60, 950: 90},
    # percent of the tint / shade lightness range
    "lightness_progression": {100: 5, 150: 20, 200: 40, 400: 85, 600: 8, 850: 75, 900: 90},
}


def _ac(name, h, s, l, hue=None, **extra) -> Dict[str, Any]:
    entry = {"name": name, "base_hue": h, "base_saturation": s, "base_lightness": l}
    if hue is not None:
        entry["hue_progression"] = hue
    entry.update(extra)
    return entry


ANCHOR_COLORS: List[Dict[str, Any]] = [
    _ac("red-500", 20.06, 92.91, 57.25, {50: -8, 950: -5}),
    _ac("orange-500", 55.72, 99.12, 71.32, {50: 30, 950: -20}),
    _ac("yellow-500", 82.72, 98.95, 79.85, {50: 10, 950: -35}),
    _ac("green-500", 156.79, 81.95, 76.10, {50: 15, 950: 10}),
    _ac("teal-500", 181.55, 98.8, 76.09, {50: -5, 950: -5}),
    _ac("cyan-500", 212.74, 100, 75.96, {50: -5, 950: 0}),
    _ac("blue-500", 253.75, 100.00, 53.2, {50: -5, 950: 5}),
    _ac("iris-500", 283.66, 97.88, 49.21, {50: -5, 950: 7}),
    _ac("magenta-500", 335.21, 91.50, 58.02, {50: -5, 950: 5}),
    _ac("rose-500", 358.96, 94.88, 57.46, {50: -4, 950: -12}),
    _ac(
        "slate-500",
        256.10,
        19.73,
        41.96,
        {50: -10, 950: 0},
        saturation_progression={50: 20, 200: 50, 800: 100, 950: 20},
    ),
    _ac(
        "neutral-500",
        0,
        0,
        42.08,
        {50: 0, 950: 0},
        saturation_progression={50: 0, 950: 0},
    ),
]


# ============================================================
# Palette model
# ============================================================


@dataclass
class PaletteConfig:
    mode: str
    defaults: Dict[str, Any] = field(default_factory=dict)
    colors: List[Dict[str, Any]] = field(default_factory=list)

    def __post_init__(self):
        if self.mode not in MODES:
            raise ConfigError(f"Unknown mode {self.mode!r} (expected one of {', '.join(MODES)})")


def builtin_palette(mode: str = "anchors") -> PaletteConfig:
    if mode == "curves":
        return PaletteConfig("curves", dict(CURVE_DEFAULTS), list(CURVE_COLORS))
    if mode == "anchors":
        return PaletteConfig("anchors", dict(ANCHOR_DEFAULTS), list(ANCHOR_COLORS))
    raise ConfigError(f"Unknown mode {mode!r} (expected one of {', '.join(MODES)})")


def _snake(key: str) -> str:
    if key in KEY_ALIASES:
        return KEY_ALIASES[key]
    return re.sub(r"(?<!^)([A-Z])", r"_\1", key).lower()


def normalize_keys(entry: Mapping[str, Any]) -> Dict[str, Any]:
    return {_snake(k): v for k, v in entry.items()}


def load_palette_config(path: Union[str, Path], mode: Optional[str] = None) -> PaletteConfig:
    """
    Read a JSON palette file. ``mode`` overrides the file's own "mode"; a file
    without either uses the built-in defaults of that mode underneath its own.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read palette config {path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("colors"), list):
        raise ConfigError(f"{path}: expected an object with a 'colors' list")

    mode = mode or data.get("mode") or "anchors"
    base = builtin_palette(mode)
    defaults = {**base.defaults, **normalize_keys(data.get("defaults") or {})}
    colors = [normalize_keys(c) for c in data["colors"]]
    logger.debug("Loaded %d colors (%s mode) from %s", len(colors), mode, path)
    return PaletteConfig(mode, defaults, colors)


# ============================================================
# Merging
# ============================================================


def family_name(name: str) -> str:
    return str(name).split("-")[0]


def calculate_saturation_range(base_s: float) -> Tuple[float, float]:
    """
    Saturation endpoints derived from the base: 10% of base at step 50
    (at least 5) and 25% of base at step 950 (at most 25). An achromatic
    base stays achromatic.
    """
    if base_s == 0:
        return 0.0, 0.0
    return max(5.0, base_s * 0.10), min(25.0, base_s * 0.25)


def _fallback(entry: Mapping, defaults: Mapping, key: str):
    value = entry.get(key)
    return defaults.get(key) if value is None else value


def _number(name: str, key: str, value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name}: {key} must be a number, got {value!r}") from e


def _step(name: str, key: str, value) -> Optional[int]:
    if value is None:
        return None
    number = _number(name, key, value)
    if not number.is_integer():
        raise ConfigError(f"{name}: {key} must be a step label, got {value!r}")
    return int(number)


def _progression(name: str, key: str, default, override) -> Dict[Any, float]:
    for mapping in (default, override):
        if mapping is not None and not isinstance(mapping, Mapping):
            raise ConfigError(f"{name}: {key} must be a step -> value object")
    merged = merge_progression(default, override)
    return {step: _number(name, f"{key}[{step}]", v) for step, v in merged.items()}


def _curve(name: str, key: str, value):
    if value is not None and not isinstance(value, (list, tuple)):
        raise ConfigError(f"{name}: {key} must be a list of easings and steps")
    return value


def _normalize_steps(mapping: Optional[Mapping]) -> Dict[Any, float]:
    # JSON keys arrive as strings; unparsable keys are kept so they get reported later
    out: Dict[Any, float] = {}
    for k, v in (mapping or {}).items():
        try:
            out[int(k)] = v
        except (TypeError, ValueError):
            out[k] = v
    return out


def merge_progression(default: Optional[Mapping], override: Optional[Mapping]) -> Dict[Any, float]:
    return {**_normalize_steps(default), **_normalize_steps(override)}


def _require_base(entry: Mapping) -> Tuple[str, float, float, float]:
    name = entry.get("name")
    if not name:
        raise ConfigError(f"Color entry without a name: {dict(entry)}")
    missing = [k for k in BASE_FIELDS if entry.get(k) is None]
    if missing:
        raise ConfigError(f"{name}: missing {', '.join(missing)}")
    try:
        h, s, l = (float(entry[k]) for k in BASE_FIELDS)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name}: base values must be numbers") from e
    return str(name), h, s, l


def resolve_curve_config(entry: Mapping, defaults: Mapping) -> Tuple[str, CurveScaleConfig]:
    entry = normalize_keys(entry)
    name, h, s, l = _require_base(entry)

    scalars = {k: _fallback(entry, defaults, k) for k in CURVE_SCALARS}
    if scalars["start_s"] is None or scalars["end_s"] is None:
        derived_start, derived_end = calculate_saturation_range(s)
        if scalars["start_s"] is None:
            scalars["start_s"] = derived_start
        if scalars["end_s"] is None:
            scalars["end_s"] = derived_end

    curves = {
        k: _curve(name, k, entry[k] if k in entry else defaults.get(k)) for k in CURVE_FIELDS
    }

    cfg = CurveScaleConfig(
        base_hue=h,
        base_saturation=s,
        base_lightness=l,
        start_l=_number(name, "start_l", scalars["start_l"]),
        end_l=_number(name, "end_l", scalars["end_l"]),
        start_s=_number(name, "start_s", scalars["start_s"]),
        end_s=_number(name, "end_s", scalars["end_s"]),
        start_hue_shift=_number(name, "start_hue_shift", scalars["start_hue_shift"] or 0.0),
        end_hue_shift=_number(name, "end_hue_shift", scalars["end_hue_shift"] or 0.0),
        peak_step=_step(name, "peak_step", scalars["peak_step"]),
        peak_boost=(
            None
            if scalars["peak_boost"] is None
            else _number(name, "peak_boost", scalars["peak_boost"])
        ),
        **curves,
    )
    return family_name(name), cfg


def resolve_anchor_config(entry: Mapping, defaults: Mapping) -> Tuple[str, AnchorScaleConfig]:
    entry = normalize_keys(entry)
    name, h, s, l = _require_base(entry)

    cfg = AnchorScaleConfig(
        base_hue=h,
        base_saturation=s,
        base_lightness=l,
        start_l=_number(name, "start_l", _fallback(entry, defaults, "start_l")),
        end_l=_number(name, "end_l", _fallback(entry, defaults, "end_l")),
        **{
            k: _progression(name, k, defaults.get(k), entry.get(k))
            for k in PROGRESSION_FIELDS
        },
    )
    return family_name(name), cfg


def resolve_palette(
    palette: PaletteConfig,
) -> List[Tuple[str, Union[CurveScaleConfig, AnchorScaleConfig]]]:
    resolve = resolve_curve_config if palette.mode == "curves" else resolve_anchor_config
    return [resolve(entry, palette.defaults) for entry in palette.colors]
