"""
Binding of call arguments to a schema.

``bind_arguments`` is the single entry point used by operation construction
(directly and through Prepared partial applications). It returns the final
name -> value mapping in declaration order or raises at the first violated
rule.
"""

from typing import Any

from .errors import (
    MissingParameterError,
    ParameterTypeError,
    TooManyPositionalArgumentsError,
    UnknownParameterError,
)
from .parameters.models import ParameterDescriptor
from .parameters.schema import OperationSchema


def check_arity(schema: OperationSchema, args: tuple) -> None:
    """Reject more positional values than declared positional slots."""
    expected = len(schema.positional_params)
    if len(args) > expected:
        raise TooManyPositionalArgumentsError(
            f"{schema.operation_name} takes {expected} positional argument(s) "
            f"but {len(args)} were given",
            operation=schema.operation_name,
            expected_count=expected,
            given_count=len(args),
        )


def check_known_keywords(schema: OperationSchema, kwargs: dict[str, Any]) -> None:
    """Reject keyword values for names the schema does not declare."""
    unknown = [name for name in kwargs if name not in schema]
    if unknown:
        raise UnknownParameterError(
            f"{schema.operation_name} got unexpected parameter(s): {', '.join(unknown)}",
            operation=schema.operation_name,
            unknown_parameters=unknown,
        )


def bind_arguments(schema: OperationSchema, args: tuple, kwargs: dict[str, Any]) -> dict[str, Any]:
    """
    Bind positional and keyword values to a schema.

    Positional parameters take the value at their index, else a keyword of
    the same name, else their default. Keyword parameters take their keyword
    value or their default. Every bound value is then converted and checked
    against its signature.

    Args:
        schema: Operation schema to bind against
        args: Positional values
        kwargs: Keyword values

    Returns:
        Mapping of every declared name to its validated value

    Raises:
        TooManyPositionalArgumentsError: More positional values than slots
        UnknownParameterError: Keyword for an undeclared name
        MissingParameterError: Required parameters left unbound
        ParameterTypeError: Converted value fails its signature
        ConversionError: A converter rejected its input
    """
    check_arity(schema, args)
    check_known_keywords(schema, kwargs)

    raw: dict[str, Any] = {}
    missing: list[str] = []

    for param in schema.positional_params:
        if param.kind_index < len(args):
            raw[param.name] = args[param.kind_index]
        elif param.name in kwargs:
            raw[param.name] = kwargs[param.name]
        elif param.has_default:
            raw[param.name] = param.resolve_default()
        else:
            missing.append(param.name)

    for param in schema.keyword_params:
        if param.name in kwargs:
            raw[param.name] = kwargs[param.name]
        elif param.has_default:
            raw[param.name] = param.resolve_default()
        else:
            missing.append(param.name)

    if missing:
        raise MissingParameterError(
            f"{schema.operation_name} is missing required parameter(s): {', '.join(missing)}",
            operation=schema.operation_name,
            missing_parameters=missing,
        )

    return {param.name: validate_value(schema, param, raw[param.name]) for param in schema}


def validate_value(schema: OperationSchema, param: ParameterDescriptor, value: Any) -> Any:
    """Convert ``value`` for ``param`` and check it against the signature."""
    converted = param.convert(value)
    if not param.accepts(converted):
        raise ParameterTypeError(
            f"Parameter '{param.name}' of {schema.operation_name} expected "
            f"{param.signature!r}, got {type(converted).__name__}",
            parameter=param.name,
            expected=param.signature,
            actual_type=type(converted),
            operation=schema.operation_name,
        )
    return converted
