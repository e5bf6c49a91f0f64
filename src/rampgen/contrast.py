"""
Contrast classification of ramp entries against white/black.

Metrics take ``(text_hex, background_hex)`` and return a number whose
magnitude is compared against the query threshold:

  wcag21  luminance ratio, 1..21, symmetric in its arguments (coloraide)
  apca    APCA lightness contrast Lc, signed by polarity
          (positive: dark text on light background)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np

from .errors import ConfigError
from .gamut import Color, hex_to_rgb, parse_hex
from .steps import PIVOT_INDEX

Metric = Callable[[str, str], float]

REFERENCES: Dict[str, str] = {"white": "#ffffff", "black": "#000000"}

# "background": the ramp color is the background, the reference is the text
# "text": the reference is the background, the ramp color is the text
DIRECTIONS = ("background", "text")

# ============================================================
# WCAG 2.1
# ============================================================


def wcag_contrast(text_hex: str, background_hex: str) -> float:
    text = Color(parse_hex(text_hex))
    return float(text.contrast(parse_hex(background_hex), method="wcag21"))


# ============================================================
# APCA (APCA-W3 0.0.98G-4g constants)
# ============================================================

APCA_MAIN_TRC = 2.4
APCA_COEFFS = np.array([0.2126729, 0.7151522, 0.0721750])

NORM_BG = 0.56
NORM_TXT = 0.57
REV_TXT = 0.62
REV_BG = 0.65

BLK_THRS = 0.022
BLK_CLMP = 1.414
SCALE_BOW = 1.14
SCALE_WOB = 1.14
LO_BOW_OFFSET = 0.027
LO_WOB_OFFSET = 0.027
DELTA_Y_MIN = 0.0005
LO_CLIP = 0.1


def _apca_y(hex_color: str) -> float:
    y = float(np.dot(hex_to_rgb(hex_color) ** APCA_MAIN_TRC, APCA_COEFFS))
    # soft clamp near black
    if y < BLK_THRS:
        y += (BLK_THRS - y) ** BLK_CLMP
    return y


def apca_contrast(text_hex: str, background_hex: str) -> float:
    y_txt = _apca_y(text_hex)
    y_bg = _apca_y(background_hex)

    if abs(y_bg - y_txt) < DELTA_Y_MIN:
        return 0.0

    if y_bg > y_txt:
        sapc = (y_bg**NORM_BG - y_txt**NORM_TXT) * SCALE_BOW
        out = 0.0 if sapc < LO_CLIP else sapc - LO_BOW_OFFSET
    else:
        sapc = (y_bg**REV_BG - y_txt**REV_TXT) * SCALE_WOB
        out = 0.0 if sapc > -LO_CLIP else sapc + LO_WOB_OFFSET

    return out * 100.0


METRICS: Dict[str, Metric] = {
    "apca": apca_contrast,
    "wcag21": wcag_contrast,
}

DEFAULT_TARGETS: Dict[str, float] = {"apca": 60.0, "wcag21": 4.5}


# ============================================================
# Queries
# ============================================================


@dataclass(frozen=True)
class ContrastQuery:
    metric: str = "apca"
    threshold: float = 60.0
    reference: str = "white"
    direction: str = "background"

    def __post_init__(self):
        if self.metric not in METRICS:
            raise ConfigError(
                f"Unknown contrast metric {self.metric!r} (expected one of {', '.join(METRICS)})"
            )
        if self.reference not in REFERENCES:
            raise ConfigError(f"Unknown contrast reference {self.reference!r}")
        if self.direction not in DIRECTIONS:
            raise ConfigError(f"Unknown contrast direction {self.direction!r}")

    def measure(self, color_hex: str) -> float:
        fn = METRICS[self.metric]
        ref = REFERENCES[self.reference]
        if self.direction == "background":
            return abs(fn(ref, color_hex))
        return abs(fn(color_hex, ref))

    def passes(self, color_hex: str) -> bool:
        return self.measure(color_hex) >= self.threshold


@dataclass(frozen=True)
class ContrastSettings:
    """Externally selected metric + target (e.g. apca / Lc 60)."""

    metric: str = "apca"
    target: float = 60.0

    def query(self, reference: str = "white", direction: str = "background") -> ContrastQuery:
        return ContrastQuery(self.metric, self.target, reference, direction)


def contrast_value(color_hex: str, query: ContrastQuery) -> float:
    return query.measure(color_hex)


def first_meeting_threshold(colors: Sequence[str], query: ContrastQuery) -> Optional[int]:
    """Index of the first color meeting the query, or None."""
    for i, c in enumerate(colors):
        if query.passes(c):
            return i
    return None


def threshold_masks(
    colors: Sequence[str], queries: Sequence[ContrastQuery]
) -> List[List[bool]]:
    return [[q.passes(c) for c in colors] for q in queries]


def representative_step(colors: Sequence[str], query: ContrastQuery) -> Optional[int]:
    """
    The step to mark for a contrast target: the pivot when it qualifies on
    its own, otherwise the first qualifying index.
    """
    if len(colors) > PIVOT_INDEX and query.passes(colors[PIVOT_INDEX]):
        return PIVOT_INDEX
    return first_meeting_threshold(colors, query)


def contrast_dot_color(color_hex: str, settings: ContrastSettings) -> str:
    """White when white text meets the target on this color, otherwise black."""
    if settings.query("white", "background").passes(color_hex):
        return REFERENCES["white"]
    return REFERENCES["black"]
