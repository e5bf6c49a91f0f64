"""
Generate every family of a palette and write the results out.

Token file shape (all 13 steps, ascending):

    {"red": {"50": "#fff5f4", ..., "950": "#2a0703"}, ...}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List

import pandas as pd

from .config import PaletteConfig, resolve_palette
from .contrast import ContrastSettings, representative_step
from .gamut import hex_to_lab
from .scale import (
    AnchorScaleConfig,
    ColorSample,
    generate_anchor_scale,
    generate_curve_scale,
    ramp_to_hex,
)
from .steps import STEPS

Ramps = Dict[str, List[ColorSample]]


def generate_ramps(palette: PaletteConfig) -> Ramps:
    ramps: Ramps = {}
    for family, cfg in resolve_palette(palette):
        if isinstance(cfg, AnchorScaleConfig):
            ramps[family] = generate_anchor_scale(cfg)
        else:
            ramps[family] = generate_curve_scale(cfg)
    return ramps


def ramps_to_tokens(ramps: Ramps) -> Dict[str, Dict[str, str]]:
    tokens = {}
    for family, samples in ramps.items():
        hexes = ramp_to_hex(samples)
        tokens[family] = {str(step): h for step, h in zip(STEPS, hexes)}
    return tokens


def write_tokens(tokens: Dict[str, Dict[str, str]], out_json: Path):
    out_json.write_text(json.dumps(tokens, indent=2) + "\n")


def ramp_report(ramps: Ramps, settings: ContrastSettings) -> pd.DataFrame:
    """
    One row per family/step:
    [family, step, hex, L, C, H, S, lab_L, lab_a, lab_b,
     contrast_white, contrast_black, representative]
    """
    on_white = settings.query("white", "background")
    on_black = settings.query("black", "background")

    rows = []
    for family, samples in ramps.items():
        hexes = ramp_to_hex(samples)
        marked = representative_step(hexes, on_white)
        for i, (sample, h) in enumerate(zip(samples, hexes)):
            lab = hex_to_lab(h)
            rows.append(
                {
                    "family": family,
                    "step": sample.step,
                    "hex": h,
                    "L": sample.oklch[0],
                    "C": sample.chroma,
                    "H": sample.hue,
                    "S": sample.saturation,
                    "lab_L": float(lab[0]),
                    "lab_a": float(lab[1]),
                    "lab_b": float(lab[2]),
                    "contrast_white": on_white.measure(h),
                    "contrast_black": on_black.measure(h),
                    "representative": i == marked,
                }
            )
    return pd.DataFrame(rows)
