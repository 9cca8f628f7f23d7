"""
Centralized logging configuration for typed_operation.

All modules log through structlog on top of stdlib loggers named after the
module. Nothing is configured on import beyond a NullHandler on the package
logger: applications call ``configure_logging`` (directly or through
``typed_operation.setup``) and the core emits debug events for schema
declaration, partial application and invocation, filtered by level.
"""
import logging
import sys
from typing import IO, Any, Optional

import structlog
from structlog.stdlib import BoundLogger

logging.getLogger("typed_operation").addHandler(logging.NullHandler())


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Configure structlog on top of the standard library logging module.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include an ISO timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
        stream: Output stream, stdout when omitted
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=stream or sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str, **initial_values: Any) -> BoundLogger:
    """
    Get a structlog logger backed by the stdlib logger ``name``.

    The stdlib logger's level and handlers decide what is emitted. Until an
    application configures logging, events under ``typed_operation`` only
    reach the package NullHandler.

    Args:
        name: Logger name (typically __name__)
        initial_values: Context bound to every event

    Returns:
        structlog logger instance
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=BoundLogger,
        **initial_values,
    )


def get_declaration_logger(name: str) -> BoundLogger:
    """Logger for schema building, bound to the ``declaration`` subsystem."""
    return get_logger(name, subsystem="declaration")


def get_application_logger(name: str) -> BoundLogger:
    """Logger for partial application and currying steps."""
    return get_logger(name, subsystem="partial_application")


def get_invocation_logger(name: str) -> BoundLogger:
    """Logger for the before/perform/after lifecycle."""
    return get_logger(name, subsystem="invocation")


def log_application_transition(
    logger: BoundLogger,
    operation: str,
    from_state: str,
    to_state: str,
    bound: list[str],
    missing: list[str],
    trigger: str = "merge",
) -> None:
    """
    Log a partial application state change with standardized fields.

    Args:
        logger: Structlog logger instance
        operation: Registry key of the operation
        from_state: State before the merge
        to_state: State computed after the merge
        bound: Names that now have a bound value
        missing: Required names still unbound
        trigger: What caused the transition (merge, curry)
    """
    logger.debug(
        "Application state computed",
        operation=operation,
        from_state=from_state,
        to_state=to_state,
        bound=bound,
        missing=missing,
        trigger=trigger,
    )


def log_invocation(
    logger: BoundLogger,
    operation: str,
    phase: str,
    context: Optional[dict[str, Any]] = None,
) -> None:
    """
    Log a lifecycle phase of an operation call.

    Args:
        logger: Structlog logger instance
        operation: Registry key of the operation
        phase: Lifecycle phase (started, completed, failed)
        context: Additional context data
    """
    bound_logger = logger.bind(operation=operation, phase=phase)

    if context:
        bound_logger = bound_logger.bind(context=context)

    if phase == "failed":
        bound_logger.warning("Operation invocation failed")
    else:
        bound_logger.debug("Operation invocation")
