"""
Process-wide registry of declared operations.

Operation classes register themselves once their schema is sealed. After
class definition the registry is only read. Re-registering a key (a class
redefined in an interactive session or reloaded module) replaces the entry.
"""

from typing import TYPE_CHECKING

from .logging.config import get_declaration_logger
from .parameters.schema import OperationSchema

if TYPE_CHECKING:
    from .operation import Operation

logger = get_declaration_logger(__name__)

_operations: dict[str, type["Operation"]] = {}


def operation_key(operation_class: type) -> str:
    """Registry key for an operation class: ``module.QualName``."""
    return f"{operation_class.__module__}.{operation_class.__qualname__}"


def register(operation_class: type["Operation"]) -> str:
    key = operation_key(operation_class)
    previous = _operations.get(key)
    if previous is not None and previous is not operation_class:
        logger.debug("Operation redefined", operation=key)
    _operations[key] = operation_class
    return key


def lookup(key: str) -> type["Operation"]:
    """
    Find a registered operation class.

    Raises:
        KeyError: If no operation is registered under ``key``
    """
    try:
        return _operations[key]
    except KeyError:
        raise KeyError(f"No operation registered as '{key}'") from None


def schema_for(key: str) -> OperationSchema:
    return lookup(key).__schema__


def keys() -> list[str]:
    return sorted(_operations)


def is_registered(key: str) -> bool:
    return key in _operations
