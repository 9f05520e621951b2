"""
Channel blending between two gradient stops.

The blend of channel values ``a`` and ``b`` at weight ``t`` is
``(1 - t) * a + t * b``. How that real value becomes an 8-bit channel is
controlled by :class:`ChannelRounding`:

- ``TRUNCATE``: drop the fractional part (default).
- ``NEAREST``: round half up. Differs from ``TRUNCATE`` by at most one unit.

Weights at or beyond the endpoints return the endpoint color itself, so no
rounding error is introduced at stops.
"""

from __future__ import annotations
from enum import Enum
from typing import Union
import math
import numpy as np
from numpy import ndarray

from ..colors.rgb import ColorRGB


class ChannelRounding(str, Enum):
    TRUNCATE = "truncate"
    NEAREST = "nearest"


RoundingLike = Union[ChannelRounding, str]


def _round_channel(blend: float, rounding: ChannelRounding) -> int:
    if rounding is ChannelRounding.NEAREST:
        return math.floor(blend + 0.5)
    return int(blend)


def interpolate(
    color_a: ColorRGB,
    color_b: ColorRGB,
    t: float,
    rounding: RoundingLike = ChannelRounding.TRUNCATE,
) -> ColorRGB:
    """
    Blend two colors channel by channel.

    Args:
        color_a: Color at ``t = 0``
        color_b: Color at ``t = 1``
        t: Normalized position between the two colors
        rounding: Channel rounding policy

    Returns:
        ``color_a`` for ``t <= 0``, ``color_b`` for ``t >= 1``, otherwise the
        blended color.
    """
    if t <= 0.0:
        return color_a
    if t >= 1.0:
        return color_b

    rounding = ChannelRounding(rounding)
    return ColorRGB(tuple(
        _round_channel((1.0 - t) * a + t * b, rounding)
        for a, b in zip(color_a.value, color_b.value)
    ))


def np_interpolate(
    starts: ndarray,
    ends: ndarray,
    t: ndarray,
    rounding: RoundingLike = ChannelRounding.TRUNCATE,
) -> ndarray:
    """
    Vectorized :func:`interpolate`.

    Args:
        starts: Start colors, shape (N, 3)
        ends: End colors, shape (N, 3)
        t: Weights, shape (N,)
        rounding: Channel rounding policy

    Returns:
        uint8 array of shape (N, 3)
    """
    rounding = ChannelRounding(rounding)
    starts = np.asarray(starts, dtype=np.float64)
    ends = np.asarray(ends, dtype=np.float64)
    t = np.asarray(t, dtype=np.float64)

    if starts.shape != ends.shape or starts.shape[:-1] != t.shape:
        raise ValueError(
            f"Mismatched shapes: starts {starts.shape}, ends {ends.shape}, t {t.shape}"
        )

    w = t[..., None]
    blend = (1.0 - w) * starts + w * ends
    if rounding is ChannelRounding.NEAREST:
        channels = np.floor(blend + 0.5)
    else:
        channels = np.trunc(blend)

    channels = np.where(w <= 0.0, starts, channels)
    channels = np.where(w >= 1.0, ends, channels)
    return np.clip(channels, 0, 255).astype(np.uint8)
