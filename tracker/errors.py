"""Exceptions raised by the transaction store and filters."""


class InvalidArgumentError(ValueError):
    """Raised when a required value is missing or an index is out of bounds."""
