"""Errors raised while converting and type checking bound values."""

from typing import Any, Optional

from .base import OperationError


class ParameterTypeError(OperationError, TypeError):
    """Bound value does not satisfy its parameter's signature."""

    def __init__(self, message: str, parameter: Optional[str] = None,
                 expected: Any = None, actual_type: Optional[type] = None,
                 operation: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.parameter = parameter
        self.expected = expected
        self.actual_type = actual_type
        self.operation = operation


class ConversionError(OperationError, ValueError):
    """A parameter converter could not convert the supplied value."""

    def __init__(self, message: str, parameter: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.parameter = parameter
        self.value = value
