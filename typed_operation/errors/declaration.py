"""
Declaration-time errors.

These are raised while a schema is being built (usually while a class
statement executes) and are fatal to that schema.
"""

from typing import Any, Optional

from .base import OperationError


class DeclarationError(OperationError):
    """A parameter declaration is invalid."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 parameter: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.parameter = parameter


class ParameterOrderError(DeclarationError):
    """Required positional parameter declared after an optional positional one."""


class DuplicateParameterError(DeclarationError):
    """Parameter name already declared on the schema."""


class InvalidSignatureError(DeclarationError):
    """Signature specification cannot be turned into a TypeSignature."""

    def __init__(self, message: str, signature: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.signature = signature
