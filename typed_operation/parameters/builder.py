"""
Normalization of a raw parameter declaration into a ParameterDescriptor.

Rules are applied in a fixed order:

1. ``optional=True`` wraps the signature in Nilable (idempotent).
2. An explicit default of None unions the signature with NoneType.
3. Positional declarations are checked against the schema's current state:
   a required positional may not follow an optional positional.
4. The default is resolved (explicit value/factory, else None for nilable
   signatures, else none at all which makes the parameter required).
5. A converter on a None-accepting declaration is wrapped so None is passed
   through unconverted.
"""

from typing import TYPE_CHECKING, Any, Callable, Optional

from ..errors import InvalidSignatureError, ParameterOrderError
from ..logging.config import get_declaration_logger
from ..signatures import NoneType, Concrete, TypeSignature, Union, coerce_signature
from .models import (
    NONE_DEFAULT,
    NOTHING,
    Deferred,
    ParameterDescriptor,
    ParameterKind,
    ReaderVisibility,
)

if TYPE_CHECKING:
    from .schema import SchemaBuilder

logger = get_declaration_logger(__name__)


class ParameterBuilder:
    """Builds one ParameterDescriptor against a schema under construction."""

    def __init__(
        self,
        schema: "SchemaBuilder",
        name: str,
        signature: Any = "any",
        *,
        optional: bool = False,
        positional: bool = False,
        default: Any = NOTHING,
        default_factory: Optional[Callable[[], Any]] = None,
        reader: str = "public",
        converter: Optional[Callable[[Any], Any]] = None,
    ):
        if default is not NOTHING and default_factory is not None:
            raise InvalidSignatureError(
                f"Parameter '{name}' cannot declare both default and default_factory",
                operation=schema.operation_name,
                parameter=name,
            )
        self.schema = schema
        self.name = name
        self.optional = optional
        self.positional = positional
        self.reader = ReaderVisibility(reader)
        self.converter = converter
        self.default = Deferred(default_factory) if default_factory is not None else default

        try:
            self.signature: TypeSignature = coerce_signature(signature)
        except InvalidSignatureError as exc:
            exc.operation = schema.operation_name
            exc.parameter = name
            raise

        self._prepare_signature()

    def define(self) -> ParameterDescriptor:
        """Produce the normalized descriptor for the schema's next slot."""
        kind = ParameterKind.POSITIONAL if self.positional else ParameterKind.KEYWORD
        has_default, default = self._resolve_default()

        return ParameterDescriptor(
            name=self.name,
            kind=kind,
            signature=self.signature,
            has_default=has_default,
            default=default,
            converter=self._wrap_converter(),
            declaration_index=self.schema.next_declaration_index(),
            kind_index=self.schema.next_kind_index(kind),
            reader=self.reader,
        )

    def _prepare_signature(self) -> None:
        if self._needs_to_be_nilable():
            self.signature = self.signature.wrap_nilable()
        if self._has_default_value_none() and not self._type_nilable():
            self.signature = Union(self.signature, Concrete(NoneType))
        if self.positional:
            self._validate_positional_order()

    def _needs_to_be_nilable(self) -> bool:
        # Already wrapped in a Nilable, don't wrap again
        return self.optional and not self._type_nilable()

    def _type_nilable(self) -> bool:
        return self.signature.is_nilable

    def _default_provided(self) -> bool:
        return self.default is not NOTHING

    def _has_default_value_none(self) -> bool:
        return self._default_provided() and self.default is None

    def _is_required(self) -> bool:
        return not self._default_provided() and not self._type_nilable()

    def _validate_positional_order(self) -> None:
        # Optional positionals may follow required ones, never the reverse
        if not self._is_required():
            return
        optional_positional = self.schema.optional_positional_parameters()
        if optional_positional:
            logger.warning(
                "Rejected parameter declaration",
                operation=self.schema.operation_name,
                parameter=self.name,
                after=[p.name for p in optional_positional],
            )
            raise ParameterOrderError(
                f"Cannot define required positional parameter '{self.name}' "
                f"after optional positional parameters",
                operation=self.schema.operation_name,
                parameter=self.name,
            )

    def _resolve_default(self) -> tuple[bool, Any]:
        if self._default_provided():
            if self.default is None:
                return True, NONE_DEFAULT
            return True, self.default
        if self._type_nilable():
            return True, NONE_DEFAULT
        return False, NOTHING

    def _wrap_converter(self) -> Optional[Callable[[Any], Any]]:
        converter = self.converter
        if converter is None:
            return None
        if not (self._type_nilable() or self._has_default_value_none()):
            return converter

        def convert_unless_none(value: Any) -> Any:
            return value if value is None else converter(value)

        return convert_unless_none
