"""
Structured exception hierarchy for operation declaration and invocation.

Every error raised by the package derives from ``OperationError``. Families
also derive from the builtin exception Python itself would raise for the same
mistake (``TypeError`` for bad call arguments, ``ValueError`` for failed
conversions, ...), so callers can catch either.
"""

from .base import OperationError
from .declaration import (
    DeclarationError,
    ParameterOrderError,
    DuplicateParameterError,
    InvalidSignatureError,
)
from .arguments import (
    ArgumentError,
    MissingParameterError,
    TooManyPositionalArgumentsError,
    UnknownParameterError,
    CurryError,
)
from .types import (
    ParameterTypeError,
    ConversionError,
)
from .lifecycle import (
    InvalidOperationError,
    FrozenOperationError,
    ConfigurationError,
)

__all__ = [
    "OperationError",
    # Declaration
    "DeclarationError",
    "ParameterOrderError",
    "DuplicateParameterError",
    "InvalidSignatureError",
    # Arguments
    "ArgumentError",
    "MissingParameterError",
    "TooManyPositionalArgumentsError",
    "UnknownParameterError",
    "CurryError",
    # Types
    "ParameterTypeError",
    "ConversionError",
    # Lifecycle
    "InvalidOperationError",
    "FrozenOperationError",
    "ConfigurationError",
]
