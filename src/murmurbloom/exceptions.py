"""murmurbloom exceptions."""


class MurmurBloomError(Exception):
    """Base exception."""


class InvalidParameterError(MurmurBloomError, ValueError):
    """Filter or estimator argument out of range."""


class UnencodableItemError(MurmurBloomError, TypeError):
    """Item has no stable byte encoding."""
