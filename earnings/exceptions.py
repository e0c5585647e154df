"""Exceptions raised by the earnings core."""


class InvalidSnapshot(ValueError):
    """Raised when account snapshot data cannot be used for calculation."""
    pass
