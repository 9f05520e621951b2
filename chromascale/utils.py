from typing import Any, Optional, TypeVar
from collections.abc import Sized
from numbers import Real
import math

T = TypeVar('T')


def get_dimension(element: Any) -> int:
    if element is None:
        return 0
    if isinstance(element, Sized):
        return len(element)
    return 1


def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default


def is_finite_real(value: Any) -> bool:
    """Check that value is a real number (bools excluded) and not inf/nan."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)
