"""
Errors raised by the question model.
"""


class InvalidArgumentError(ValueError):
    """Raised when a question is built from a missing or empty argument."""
    pass
