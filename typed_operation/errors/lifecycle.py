"""Errors raised around instance lifecycle, invocation and setup."""

from typing import Optional

from .base import OperationError


class InvalidOperationError(OperationError, NotImplementedError):
    """Operation was invoked without defining perform()."""

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation


class FrozenOperationError(OperationError, AttributeError):
    """Assignment to a parameter, or to any attribute of a frozen instance."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 attribute: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.attribute = attribute


class ConfigurationError(OperationError):
    """Loaded configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
