"""
Argument errors raised when binding values to a schema.

``ArgumentError`` is also a ``TypeError`` since that is what Python raises
for a bad call signature.
"""

from typing import Optional

from .base import OperationError


class ArgumentError(OperationError, TypeError):
    """Arguments supplied to an operation do not fit its schema."""

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation


class MissingParameterError(ArgumentError):
    """One or more required parameters have no bound value."""

    def __init__(self, message: str, missing_parameters: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.missing_parameters = missing_parameters or []


class TooManyPositionalArgumentsError(ArgumentError):
    """More positional values than declared positional parameters."""

    def __init__(self, message: str, expected_count: Optional[int] = None,
                 given_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.expected_count = expected_count
        self.given_count = given_count


class UnknownParameterError(ArgumentError):
    """Keyword values supplied for names the schema does not declare."""

    def __init__(self, message: str, unknown_parameters: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.unknown_parameters = unknown_parameters or []


class CurryError(ArgumentError):
    """A curried operation was fed a value after it was already prepared."""
