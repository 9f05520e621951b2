"""
Value-to-color gradient scale.

A :class:`GradientEvaluator` spreads an ordered list of color stops evenly
across ``[min, max]``. With ``k`` stops there are ``k - 1`` segments, each
``(max - min) / (k - 1)`` wide. A value is mapped by locating its segment and
blending the two stops that bound it. Values outside the range get the
outlier colors, or the nearest end stop when no outlier color is set.

>>> from chromascale import GradientEvaluator
>>> grad = GradientEvaluator(0, 20, [(255, 255, 255), (255, 0, 0), (255, 255, 0)])
>>> grad.evaluate(10)
ColorRGB((255, 0, 0))
>>> grad.evaluate(5)
ColorRGB((255, 127, 127))
"""

from __future__ import annotations
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple
import math
import warnings
import numpy as np
from numpy import ndarray
from boundednumbers import clamp

from ..colors.rgb import ColorRGB, as_color, colors_to_array
from ..errors import InvalidConfiguration, NotInitialized
from ..types.color_types import ColorLike, Scalar
from ..utils import is_finite_real, value_or_default
from .interpolation import ChannelRounding, RoundingLike, interpolate, np_interpolate


class EvaluatorState(Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"


def _coerce_color(color: ColorLike, what: str) -> ColorRGB:
    try:
        return as_color(color)
    except (TypeError, ValueError) as e:
        raise InvalidConfiguration(f"{what} is not a valid color: {color!r}") from e


class GradientEvaluator:
    """
    Maps scalar values in ``[min, max]`` onto colors interpolated from stops.

    Construct it empty and call :meth:`initialize` before the first query, or
    pass the configuration straight to the constructor. Outlier colors are
    optional: ``None`` means values below ``min`` get the first stop and
    values above ``max`` get the last stop.

    Instances are meant to have a single owner. Use :meth:`copy` to hand an
    independent evaluator to another consumer.
    """

    __slots__ = (
        '_state',
        '_min',
        '_max',
        '_stops',
        '_min_outlier_color',
        '_max_outlier_color',
        '_rounding',
        '_stop_array',
    )

    def __init__(
        self,
        min: Optional[Scalar] = None,
        max: Optional[Scalar] = None,
        stops: Optional[Sequence[ColorLike]] = None,
        min_outlier_color: Optional[ColorLike] = None,
        max_outlier_color: Optional[ColorLike] = None,
        rounding: RoundingLike = ChannelRounding.TRUNCATE,
    ) -> None:
        self._state = EvaluatorState.UNINITIALIZED
        self._min = None
        self._max = None
        self._stops: Tuple[ColorRGB, ...] = ()
        self._min_outlier_color = None
        self._max_outlier_color = None
        self._rounding = ChannelRounding.TRUNCATE
        self._stop_array = None

        if (
            min is None and max is None and stops is None
            and min_outlier_color is None and max_outlier_color is None
            and rounding is ChannelRounding.TRUNCATE
        ):
            return
        if min is None or max is None or stops is None:
            raise InvalidConfiguration(
                "min, max and stops must be given together, and outlier colors or "
                "rounding only with them (omit everything for deferred initialization)"
            )
        self.initialize(min, max, stops, min_outlier_color, max_outlier_color, rounding)

    def initialize(
        self,
        min: Scalar,
        max: Scalar,
        stops: Sequence[ColorLike],
        min_outlier_color: Optional[ColorLike] = None,
        max_outlier_color: Optional[ColorLike] = None,
        rounding: RoundingLike = ChannelRounding.TRUNCATE,
    ) -> None:
        """
        Replace the whole configuration.

        Everything is validated before any state changes, so a failed call
        leaves the evaluator exactly as it was.

        Args:
            min: Lower bound of the mapped range (inclusive)
            max: Upper bound of the mapped range (inclusive), ``min <= max``
            stops: At least two colors, ordered from the ``min`` end to the ``max`` end
            min_outlier_color: Color for values below ``min``; ``None`` uses the first stop
            max_outlier_color: Color for values above ``max``; ``None`` uses the last stop
            rounding: Channel rounding policy for blended colors

        Raises:
            InvalidConfiguration: On fewer than two stops, ``min > max``,
                non-finite bounds, unusable colors or an unknown rounding policy.
        """
        if not is_finite_real(min) or not is_finite_real(max):
            raise InvalidConfiguration(f"min and max must be finite numbers, got {min!r} and {max!r}")
        if min > max:
            raise InvalidConfiguration(f"min must not exceed max, got min={min!r} > max={max!r}")
        if stops is None or isinstance(stops, (str, bytes)):
            raise InvalidConfiguration(f"stops must be a sequence of colors, got {stops!r}")

        stops = tuple(_coerce_color(c, f"stop {i}") for i, c in enumerate(stops))
        if len(stops) < 2:
            raise InvalidConfiguration(f"At least 2 stops are required, got {len(stops)}")

        if min_outlier_color is not None:
            min_outlier_color = _coerce_color(min_outlier_color, "min_outlier_color")
        if max_outlier_color is not None:
            max_outlier_color = _coerce_color(max_outlier_color, "max_outlier_color")

        try:
            rounding = ChannelRounding(rounding)
        except ValueError as e:
            raise InvalidConfiguration(f"Unknown rounding policy: {rounding!r}") from e

        if min == max:
            warnings.warn(
                f"Degenerate gradient range min == max == {min!r}; "
                "every in-range value maps to the first stop.",
                RuntimeWarning,
                stacklevel=2,
            )

        self._min = min
        self._max = max
        self._stops = stops
        self._min_outlier_color = min_outlier_color
        self._max_outlier_color = max_outlier_color
        self._rounding = rounding
        self._stop_array = colors_to_array(stops)
        self._state = EvaluatorState.INITIALIZED

    # ------------------ STATE ------------------
    def _require_initialized(self) -> None:
        if self._state is not EvaluatorState.INITIALIZED:
            raise NotInitialized(
                f"{self.__class__.__name__} must be initialized before use; call initialize()"
            )

    @property
    def state(self) -> EvaluatorState:
        return self._state

    @property
    def is_initialized(self) -> bool:
        return self._state is EvaluatorState.INITIALIZED

    @property
    def min(self) -> Scalar:
        self._require_initialized()
        return self._min

    @property
    def max(self) -> Scalar:
        self._require_initialized()
        return self._max

    @property
    def stops(self) -> Tuple[ColorRGB, ...]:
        self._require_initialized()
        return self._stops

    @property
    def min_outlier_color(self) -> Optional[ColorRGB]:
        self._require_initialized()
        return self._min_outlier_color

    @property
    def max_outlier_color(self) -> Optional[ColorRGB]:
        self._require_initialized()
        return self._max_outlier_color

    @property
    def rounding(self) -> ChannelRounding:
        self._require_initialized()
        return self._rounding

    @property
    def segment_count(self) -> int:
        """Number of interpolation segments (one fewer than the stops)."""
        self._require_initialized()
        return len(self._stops) - 1

    @property
    def segment_width(self) -> float:
        """Width of one segment in input units."""
        self._require_initialized()
        return (self._max - self._min) / (len(self._stops) - 1)

    # ------------------ QUERIES ------------------
    @staticmethod
    def _check_value(value: Scalar) -> None:
        if value != value:
            raise ValueError("Cannot evaluate a gradient at NaN")

    def _locate(self, value: Scalar) -> Tuple[int, float]:
        """Return the segment index and normalized fraction for an in-range value."""
        step = (self._max - self._min) / (len(self._stops) - 1)
        if step == 0:
            return 0, 0.0
        if value == self._max:
            return len(self._stops) - 2, 1.0
        offset = value - self._min
        # offset / step can round up past the last segment for values just under max
        bin_index = int(clamp(math.floor(offset / step), 0, len(self._stops) - 2))
        return bin_index, (offset - bin_index * step) / step

    def segment_index(self, value: Scalar) -> Optional[int]:
        """
        Index of the segment ``value`` falls into, or ``None`` for outliers.
        """
        self._require_initialized()
        self._check_value(value)
        if value < self._min or value > self._max:
            return None
        return self._locate(value)[0]

    def evaluate(self, value: Scalar) -> ColorRGB:
        """
        Map ``value`` to a color.

        Raises:
            NotInitialized: If the evaluator has not been initialized.
            ValueError: If ``value`` is NaN.
        """
        self._require_initialized()
        self._check_value(value)

        # Handle outliers
        if value < self._min:
            return value_or_default(self._min_outlier_color, self._stops[0])
        if value > self._max:
            return value_or_default(self._max_outlier_color, self._stops[-1])

        bin_index, t = self._locate(value)
        return interpolate(self._stops[bin_index], self._stops[bin_index + 1], t, self._rounding)

    __call__ = evaluate

    def evaluate_many(self, values: Iterable[Scalar] | ndarray) -> ndarray:
        """
        Vectorized :meth:`evaluate`.

        Args:
            values: Array-like of values, any shape

        Returns:
            uint8 array of shape ``values.shape + (3,)`` holding the same
            channels :meth:`evaluate` returns for each element.
        """
        self._require_initialized()
        v = np.asarray(values, dtype=np.float64)
        if np.isnan(v).any():
            raise ValueError("Cannot evaluate a gradient at NaN")

        flat = v.reshape(-1)
        num_segments = len(self._stops) - 1
        step = (self._max - self._min) / num_segments

        if step == 0:
            bins = np.zeros(flat.shape, dtype=np.intp)
            t = np.zeros(flat.shape, dtype=np.float64)
        else:
            offset = flat - self._min
            with np.errstate(invalid='ignore', over='ignore'):
                raw = np.floor(offset / step)
            bins = np.clip(np.nan_to_num(raw, nan=0.0), 0, num_segments - 1).astype(np.intp)
            with np.errstate(invalid='ignore'):
                t = (offset - bins * step) / step
            at_max = flat == self._max
            bins[at_max] = num_segments - 1
            t[at_max] = 1.0

        out = np_interpolate(
            self._stop_array[bins],
            self._stop_array[bins + 1],
            np.nan_to_num(t, nan=0.0, posinf=1.0, neginf=0.0),
            self._rounding,
        )

        below = flat < self._min
        above = flat > self._max
        out[below] = value_or_default(self._min_outlier_color, self._stops[0]).to_array()
        out[above] = value_or_default(self._max_outlier_color, self._stops[-1]).to_array()
        return out.reshape(v.shape + (3,))

    # ------------------ MISC ------------------
    def copy(self) -> GradientEvaluator:
        """Return an independent evaluator with the same configuration."""
        clone = self.__class__()
        if self.is_initialized:
            # colors are immutable, only the array needs its own buffer
            clone._min = self._min
            clone._max = self._max
            clone._stops = self._stops
            clone._min_outlier_color = self._min_outlier_color
            clone._max_outlier_color = self._max_outlier_color
            clone._rounding = self._rounding
            clone._stop_array = self._stop_array.copy()
            clone._state = EvaluatorState.INITIALIZED
        return clone

    def __repr__(self) -> str:
        if not self.is_initialized:
            return f"{self.__class__.__name__}(<uninitialized>)"
        return (
            f"{self.__class__.__name__}(min={self._min!r}, max={self._max!r}, "
            f"stops={len(self._stops)}, rounding={self._rounding.value!r})"
        )
