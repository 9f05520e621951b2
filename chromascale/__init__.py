"""Chromascale: value-to-color gradient scales for heatmaps and legends."""

from .colors.rgb import ColorRGB, as_color
from .gradients import (
    GradientEvaluator,
    EvaluatorState,
    ChannelRounding,
    interpolate,
    np_interpolate,
)
from .errors import GradientError, InvalidConfiguration, NotInitialized

__version__ = "1.0.0"

__all__ = [
    # colors
    "ColorRGB",
    "as_color",
    # gradients
    "GradientEvaluator",
    "EvaluatorState",
    "ChannelRounding",
    "interpolate",
    "np_interpolate",
    # errors
    "GradientError",
    "InvalidConfiguration",
    "NotInitialized",
    "__version__",
]
