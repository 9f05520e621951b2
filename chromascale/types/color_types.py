from __future__ import annotations
from typing import Sequence, Tuple, Union, TYPE_CHECKING
from numpy import ndarray

if TYPE_CHECKING:
    from ..colors.rgb import ColorRGB

Scalar = int | float
RGBTuple = Tuple[int, int, int]
ColorLike = Union["ColorRGB", Sequence[int], ndarray]

CHANNEL_MAX = 255
NUM_CHANNELS = 3
