"""Root of the typed_operation exception hierarchy."""

from typing import Any, Optional


class OperationError(Exception):
    """Base class for every error raised by typed_operation.

    The core never retries or recovers, so ``recoverable`` is always False.
    """

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False
