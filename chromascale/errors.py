"""Exceptions raised by chromascale."""


class GradientError(Exception):
    """Base class for gradient configuration and query errors."""


class InvalidConfiguration(GradientError, ValueError):
    """Raised when a gradient is initialized with an unusable configuration."""


class NotInitialized(GradientError, RuntimeError):
    """Raised when a gradient is queried before it has been initialized."""
