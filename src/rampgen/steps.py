from __future__ import annotations

from typing import Optional, Tuple

# ============================================================
# Step table (fixed 13-step ramp)
# ============================================================

STEPS: Tuple[int, ...] = (50, 100, 150, 200, 300, 400, 500, 600, 700, 800, 850, 900, 950)

PIVOT = 500
PIVOT_INDEX = STEPS.index(PIVOT)
FIRST_STEP = STEPS[0]
LAST_STEP = STEPS[-1]
LAST_INDEX = len(STEPS) - 1

TINT_STEPS: Tuple[int, ...] = STEPS[:PIVOT_INDEX]
SHADE_STEPS: Tuple[int, ...] = STEPS[PIVOT_INDEX + 1 :]

# (start_index, end_index) of each half; both include the pivot
TINT_RANGE = (0, PIVOT_INDEX)
SHADE_RANGE = (PIVOT_INDEX, LAST_INDEX)


def step_index(step: int) -> Optional[int]:
    """Index of a step label, or None when the label is not in the table."""
    try:
        return STEPS.index(int(step))
    except (ValueError, TypeError):
        return None


def is_tint(step: int) -> bool:
    return step in TINT_STEPS


def is_shade(step: int) -> bool:
    return step in SHADE_STEPS
