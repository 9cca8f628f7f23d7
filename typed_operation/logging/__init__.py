"""
Logging configuration and utilities for typed_operation.
"""
from .config import (
    configure_logging,
    get_application_logger,
    get_declaration_logger,
    get_invocation_logger,
    get_logger,
    log_application_transition,
    log_invocation,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "get_declaration_logger",
    "get_application_logger",
    "get_invocation_logger",
    "log_application_transition",
    "log_invocation",
]
