"""Exceptions raised by business-time arithmetic."""


class InvalidConfiguration(ValueError):
    """Raised when a business window or default setting is malformed."""

    pass


class InvalidInput(ValueError):
    """Raised when a shift request carries an out-of-range or mistyped value."""

    pass
