"""Default configuration parameters."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoggingParams:
    """structlog output parameters."""
    level: str = "WARNING"           # DEBUG shows declaration/application/invocation events
    format_json: bool = False        # JSON lines vs console renderer
    include_timestamp: bool = True
    include_caller: bool = False     # filename/lineno of the log call


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        logging=LoggingParams(),
    )
