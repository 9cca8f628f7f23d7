"""
Operation schemas: the ordered, immutable parameter list of an operation.

``SchemaBuilder`` validates declarations incrementally, in declaration
order, and ``build()`` seals the result into an ``OperationSchema`` whose
derived views (positional/keyword, required/optional) are cached.
"""

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Callable, Iterator, Optional

from ..errors import DuplicateParameterError
from ..logging.config import get_declaration_logger
from .builder import ParameterBuilder
from .models import NOTHING, ParameterDescriptor, ParameterKind

logger = get_declaration_logger(__name__)


@dataclass(frozen=True)
class OperationSchema:
    """Ordered collection of ParameterDescriptors owned by one operation."""

    operation_name: str
    parameters: tuple[ParameterDescriptor, ...] = ()

    def __iter__(self) -> Iterator[ParameterDescriptor]:
        return iter(self.parameters)

    def __len__(self) -> int:
        return len(self.parameters)

    def __contains__(self, name: object) -> bool:
        return name in self.by_name

    def __getitem__(self, name: str) -> ParameterDescriptor:
        return self.by_name[name]

    @cached_property
    def by_name(self) -> dict[str, ParameterDescriptor]:
        return {p.name: p for p in self.parameters}

    @cached_property
    def names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.parameters)

    @cached_property
    def positional_params(self) -> tuple[ParameterDescriptor, ...]:
        return tuple(p for p in self.parameters if p.is_positional)

    @cached_property
    def keyword_params(self) -> tuple[ParameterDescriptor, ...]:
        return tuple(p for p in self.parameters if p.is_keyword)

    @cached_property
    def required_params(self) -> tuple[ParameterDescriptor, ...]:
        return tuple(p for p in self.parameters if p.is_required)

    @cached_property
    def required_positional(self) -> tuple[ParameterDescriptor, ...]:
        return tuple(p for p in self.positional_params if p.is_required)

    @cached_property
    def required_keyword(self) -> tuple[ParameterDescriptor, ...]:
        return tuple(p for p in self.keyword_params if p.is_required)

    @cached_property
    def optional_positional(self) -> tuple[ParameterDescriptor, ...]:
        return tuple(p for p in self.positional_params if p.is_optional)

    @cached_property
    def optional_keyword(self) -> tuple[ParameterDescriptor, ...]:
        return tuple(p for p in self.keyword_params if p.is_optional)

    def missing_required(self, args: tuple, kwargs: dict[str, Any]) -> list[str]:
        """
        Names of required parameters left unbound by ``args``/``kwargs``.

        A positional parameter is bound when a positional value covers its
        index or a keyword value carries its name.
        """
        missing = [
            p.name for p in self.required_positional
            if p.kind_index >= len(args) and p.name not in kwargs
        ]
        missing.extend(p.name for p in self.required_keyword if p.name not in kwargs)
        return missing


class SchemaBuilder:
    """Ordered, incremental builder for an OperationSchema."""

    def __init__(self, operation_name: str, parent: Optional[OperationSchema] = None):
        self.operation_name = operation_name
        self._parameters: list[ParameterDescriptor] = list(parent.parameters) if parent else []

    def declare(
        self,
        name: str,
        signature: Any = "any",
        *,
        optional: bool = False,
        positional: bool = False,
        default: Any = NOTHING,
        default_factory: Optional[Callable[[], Any]] = None,
        reader: str = "public",
        converter: Optional[Callable[[Any], Any]] = None,
    ) -> ParameterDescriptor:
        """
        Declare the next parameter.

        Args:
            name: Parameter name, unique within the schema
            signature: Signature specification (see coerce_signature)
            optional: Wrap the signature in Nilable, defaulting to None
            positional: Accept the parameter positionally
            default: Default value; None also widens the signature
            default_factory: Zero-argument producer called per instance
            reader: "public" or "private" attribute exposure
            converter: Value -> Value function applied before type checking

        Returns:
            The normalized descriptor appended to the schema

        Raises:
            DuplicateParameterError: If the name is already declared
            ParameterOrderError: If a required positional follows an optional one
            InvalidSignatureError: If the signature cannot be interpreted
        """
        if any(p.name == name for p in self._parameters):
            logger.warning("Rejected parameter declaration", operation=self.operation_name,
                           parameter=name, reason="duplicate")
            raise DuplicateParameterError(
                f"Parameter '{name}' is already declared on {self.operation_name}",
                operation=self.operation_name,
                parameter=name,
            )

        descriptor = ParameterBuilder(
            self,
            name,
            signature,
            optional=optional,
            positional=positional,
            default=default,
            default_factory=default_factory,
            reader=reader,
            converter=converter,
        ).define()
        self._parameters.append(descriptor)

        logger.debug(
            "Parameter declared",
            operation=self.operation_name,
            parameter=name,
            kind=descriptor.kind.value,
            signature=repr(descriptor.signature),
            required=descriptor.is_required,
        )
        return descriptor

    def positional(self, name: str, signature: Any = "any", **options: Any) -> ParameterDescriptor:
        return self.declare(name, signature, **{**options, "positional": True})

    def named(self, name: str, signature: Any = "any", **options: Any) -> ParameterDescriptor:
        return self.declare(name, signature, **{**options, "positional": False})

    def optional_positional_parameters(self) -> list[ParameterDescriptor]:
        return [p for p in self._parameters if p.is_positional and p.is_optional]

    def next_declaration_index(self) -> int:
        return len(self._parameters)

    def next_kind_index(self, kind: ParameterKind) -> int:
        return sum(1 for p in self._parameters if p.kind == kind)

    def build(self) -> OperationSchema:
        schema = OperationSchema(self.operation_name, tuple(self._parameters))
        logger.debug("Schema sealed", operation=self.operation_name, parameters=list(schema.names))
        return schema
