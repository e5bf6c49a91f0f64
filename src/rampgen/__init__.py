from .contrast import (
    ContrastQuery,
    ContrastSettings,
    first_meeting_threshold,
    representative_step,
    threshold_masks,
)
from .errors import ColorFormatError, ConfigError
from .scale import (
    AnchorScaleConfig,
    ColorSample,
    CurveScaleConfig,
    generate_anchor_scale,
    generate_curve_scale,
)
from .steps import STEPS

__version__ = "0.3.0"
