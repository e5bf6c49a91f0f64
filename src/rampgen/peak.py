"""
Shade peak boost.

Replaces the shade-half saturation and hue-shift curves with a bump that
rises from the pivot to ``peak_step`` (easeOutSine) and falls to the last
step (easeInSine). Used to keep dark shades of vivid hues from going dull
once sRGB clips them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .easing import ease, lerp
from .steps import LAST_STEP, PIVOT, SHADE_STEPS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PeakBoost:
    step: int
    boost: float

    @classmethod
    def from_config(
        cls, step: Optional[int], boost: Optional[float]
    ) -> Optional["PeakBoost"]:
        """None unless both values are set and the step is a shade step."""
        if not step or not boost:
            return None
        if int(step) not in SHADE_STEPS:
            logger.warning("Peak step %r is not a shade step, ignoring peak boost", step)
            return None
        return cls(int(step), float(boost))

    def peak_values(
        self, base_s: float, start_shift: float, end_shift: float
    ) -> Tuple[float, float]:
        peak_s = base_s * self.boost
        progress = (self.step - PIVOT) / (LAST_STEP - PIVOT)
        peak_shift = self.boost * (start_shift + (end_shift - start_shift) * progress)
        return peak_s, peak_shift

    def apply(
        self,
        step: int,
        base_s: float,
        end_s: float,
        start_shift: float,
        end_shift: float,
    ) -> Tuple[float, float]:
        """(saturation, hue_shift) at a shade step."""
        peak_s, peak_shift = self.peak_values(base_s, start_shift, end_shift)

        if step == self.step:
            return peak_s, peak_shift

        if step < self.step:
            eased = ease((step - PIVOT) / (self.step - PIVOT), "easeOutSine")
            return lerp(base_s, peak_s, eased), peak_shift * eased

        eased = ease((step - self.step) / (LAST_STEP - self.step), "easeInSine")
        return lerp(peak_s, end_s, eased), lerp(peak_shift, end_shift, eased)
