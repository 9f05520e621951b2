from __future__ import annotations
from typing import Any, ClassVar, Iterator, Tuple
from numpy import ndarray
import numpy as np

from ..types.color_types import CHANNEL_MAX, NUM_CHANNELS, ColorLike, RGBTuple
from ..utils import get_dimension


class ColorRGB:
    """
    Immutable 8-bit RGB color.

    Channels are coerced to ``int`` and clamped to ``[0, 255]``. Two colors
    are equal when all three channels match.
    """
    __slots__ = ('_value', '_is_frozen')  # no __dict__ → immutability

    num_channels: ClassVar[int] = NUM_CHANNELS
    maxima: ClassVar[RGBTuple] = (CHANNEL_MAX, CHANNEL_MAX, CHANNEL_MAX)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorLike) -> None:
        if isinstance(value, ColorRGB):
            value = value.value
        elif isinstance(value, ndarray):
            if value.ndim != 1:
                raise ValueError(f"ColorRGB expects a 1D array, got shape {value.shape}")
            value = value.tolist()
        elif isinstance(value, (str, bytes)):
            raise TypeError("ColorRGB does not parse strings; use ColorRGB.from_hex")

        if get_dimension(value) != self.num_channels:
            raise ValueError(f"ColorRGB expects {self.maxima!r}-shaped value, got {value!r}")

        # clamp value
        self._value = tuple(
            max(0, min(int(v), m)) for v, m in zip(value, self.maxima)
        )

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def from_hex(cls, code: str) -> ColorRGB:
        """Parse ``#RRGGBB`` or ``RRGGBB``."""
        digits = code[1:] if code.startswith('#') else code
        if len(digits) != 6:
            raise ValueError(f"Expected a 6-digit hex color, got {code!r}")
        try:
            channels = tuple(int(digits[i:i + 2], 16) for i in range(0, 6, 2))
        except ValueError as e:
            raise ValueError(f"Invalid hex color {code!r}") from e
        return cls(channels)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> RGBTuple:
        return self._value

    @property
    def red(self) -> int:
        return self._value[0]

    @property
    def green(self) -> int:
        return self._value[1]

    @property
    def blue(self) -> int:
        return self._value[2]

    def to_hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*self._value)

    def to_array(self) -> ndarray:
        return np.array(self._value, dtype=np.uint8)

    def __iter__(self) -> Iterator[int]:
        return iter(self._value)

    def __getitem__(self, index: int) -> int:
        return self._value[index]

    def __len__(self) -> int:
        return self.num_channels

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ColorRGB):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((ColorRGB, self._value))

    def __repr__(self) -> str:
        return f"ColorRGB({self._value!r})"

    def __reduce__(self):
        return (self.__class__, (self._value,))


def as_color(color: ColorLike) -> ColorRGB:
    """Return ``color`` as a ColorRGB, reusing the instance when possible."""
    if isinstance(color, ColorRGB):
        return color
    return ColorRGB(color)


def colors_to_array(colors: Tuple[ColorRGB, ...]) -> ndarray:
    """Stack colors into a ``(N, 3)`` float64 array for vectorized blending."""
    return np.array([c.value for c in colors], dtype=np.float64)
