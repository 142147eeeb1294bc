"""Exception types raised by textscan."""


class TextscanError(Exception):
    """Base class for all textscan errors."""
    pass


class InvalidArgumentError(TextscanError, ValueError):
    """Raised when a caller breaks a function contract (e.g. a negative count)."""
    pass
