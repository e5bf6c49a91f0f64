from __future__ import annotations

import math
import re
from typing import Tuple

import colour
import numpy as np
from coloraide import Color as _BaseColor
from coloraide.spaces.okhsl import Okhsl

from .errors import ColorFormatError


class Color(_BaseColor):
    """Project-local Color class with Okhsl support."""


Color.register(Okhsl(), silent=True)

HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# below this OKLCH chroma a parsed color is treated as gray
ACHROMATIC_CHROMA = 0.0001

# ============================================================
# Hue / chroma guards
# ============================================================


def wrap_hue(h: float) -> float:
    h = ((h % 360.0) + 360.0) % 360.0
    # tiny negatives round up to exactly 360.0
    return 0.0 if h >= 360.0 else h


def is_achromatic(saturation: float) -> bool:
    return saturation == 0 or math.isnan(saturation)


def safe_chroma(hue: float, saturation: float, lightness: float) -> float:
    """
    OKLCH chroma for an OKhsl color, forced to exactly 0 when the saturation
    is 0/NaN or the conversion comes back NaN.
    """
    if is_achromatic(saturation):
        return 0.0
    _, C, _ = okhsl_to_oklch(hue, saturation, lightness)
    if math.isnan(C):
        return 0.0
    return C


# ============================================================
# Conversions (OKhsl <-> OKLCH <-> sRGB hex)
# ============================================================


def okhsl_to_oklch(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """OKhsl (deg, %, %) -> OKLCH (L in 0-100, C, H deg)."""
    c = Color("okhsl", [h, s / 100.0, l / 100.0]).convert("oklch")
    L, C, H = c.coords()
    return float(L) * 100.0, float(C), float(H)


def oklch_to_hex(L: float, C: float, H: float) -> str:
    """
    OKLCH (L in 0-100) -> #rrggbb. Out-of-gamut colors are gamut mapped into
    sRGB rather than rejected.
    """
    return Color("oklch", [L / 100.0, C, H]).convert("srgb").to_string(hex=True)


def parse_hex(text: str) -> str:
    """Normalize ``#rgb`` / ``rrggbb`` / ``#rrggbb`` to lowercase ``#rrggbb``."""
    if not isinstance(text, str):
        raise ColorFormatError(f"invalid hex: {text!r}")
    m = HEX_RE.match(text.strip())
    if not m:
        raise ColorFormatError(f"invalid hex: {text!r}")
    raw = m.group(1)
    if len(raw) == 3:
        raw = "".join(ch * 2 for ch in raw)
    return "#" + raw.lower()


def hex_to_rgb(hex_color: str) -> np.ndarray:
    """#rrggbb -> sRGB floats in [0, 1]."""
    h = parse_hex(hex_color)
    return (
        np.array([int(h[1:3], 16), int(h[3:5], 16), int(h[5:7], 16)], dtype=float)
        / 255.0
    )


def hex_to_lab(hex_color: str) -> np.ndarray:
    """
    Convert hex color to CIELAB (L*, a*, b*)
    """
    xyz = colour.sRGB_to_XYZ(hex_to_rgb(hex_color))
    return colour.XYZ_to_Lab(xyz)


def hex_to_oklch(hex_color: str) -> Tuple[float, float, float]:
    """#rrggbb -> OKLCH (L 0-100, C, H). Grays come back as C = 0, H = 0."""
    L, C, H = Color(parse_hex(hex_color)).convert("oklch").coords()
    if C < ACHROMATIC_CHROMA or math.isnan(H):
        return float(L) * 100.0, 0.0, 0.0
    return float(L) * 100.0, float(C), float(H)


def hex_to_okhsl(hex_color: str) -> Tuple[float, float, float]:
    """#rrggbb -> OKhsl (deg, %, %). Grays come back with hue and saturation 0."""
    L, C, H = hex_to_oklch(hex_color)
    h, s, l = Color("oklch", [L / 100.0, C, H]).convert("okhsl").coords()
    if C == 0.0:
        return 0.0, 0.0, float(l) * 100.0
    return float(h), float(s) * 100.0, float(l) * 100.0


# ============================================================
# Display strings
# ============================================================


def format_oklch(hex_color: str) -> str:
    L, C, H = hex_to_oklch(hex_color)
    return f"oklch({L:.1f}% {C:.3f} {H:.1f})"


def format_okhsl(hex_color: str) -> str:
    h, s, l = hex_to_okhsl(hex_color)
    return f"okhsl({h:.1f}, {s:.1f}%, {l:.1f}%)"
