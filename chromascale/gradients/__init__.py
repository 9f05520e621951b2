"""
Gradient scales mapping numeric values onto colors.
"""

from .evaluator import GradientEvaluator, EvaluatorState
from .interpolation import ChannelRounding, interpolate, np_interpolate

__all__ = [
    "GradientEvaluator",
    "EvaluatorState",
    "ChannelRounding",
    "interpolate",
    "np_interpolate",
]
