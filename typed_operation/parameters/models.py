"""
Parameter descriptor data model.

A ParameterDescriptor is created once, when its schema is declared, and is
immutable afterwards. It carries everything the binding algorithm needs:
kind, signature, default and converter.
"""

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from ..errors import ConversionError
from ..signatures import TypeSignature


class ParameterKind(str, Enum):
    """How a parameter may be supplied."""
    POSITIONAL = "positional"
    KEYWORD = "keyword"


class ReaderVisibility(str, Enum):
    """Attribute name under which a bound value is exposed on instances."""
    PUBLIC = "public"       # instance.name
    PRIVATE = "private"     # instance._name


class _Nothing:
    """Marker for "no default supplied", distinct from a default of None."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "NOTHING"


NOTHING = _Nothing()


@dataclass(frozen=True)
class Deferred:
    """Default producer called once per bound instance."""
    producer: Callable[[], Any]

    def __call__(self) -> Any:
        return self.producer()


def _produce_none() -> None:
    return None


NONE_DEFAULT = Deferred(_produce_none)


@dataclass(frozen=True)
class ParameterDescriptor:
    """One declared parameter of an operation schema."""

    name: str
    kind: ParameterKind
    signature: TypeSignature
    has_default: bool = False
    default: Any = NOTHING                           # value or Deferred
    converter: Optional[Callable[[Any], Any]] = None
    declaration_index: int = 0                       # position among all parameters
    kind_index: int = 0                              # position among parameters of the same kind
    reader: ReaderVisibility = ReaderVisibility.PUBLIC

    @property
    def is_required(self) -> bool:
        return not self.has_default

    @property
    def is_optional(self) -> bool:
        return self.has_default

    @property
    def is_positional(self) -> bool:
        return self.kind == ParameterKind.POSITIONAL

    @property
    def is_keyword(self) -> bool:
        return self.kind == ParameterKind.KEYWORD

    @property
    def attribute_name(self) -> str:
        """Name of the instance attribute exposing the bound value."""
        if self.reader == ReaderVisibility.PRIVATE:
            return f"_{self.name}"
        return self.name

    def resolve_default(self) -> Any:
        """
        Produce the default value for one binding.

        Deferred producers are called; plain values are shallow-copied so
        instances never share a mutable default.
        """
        if not self.has_default:
            raise LookupError(f"Parameter '{self.name}' has no default")
        if isinstance(self.default, Deferred):
            return self.default()
        return copy.copy(self.default)

    def convert(self, value: Any) -> Any:
        """
        Apply the converter, if any.

        Raises:
            ConversionError: If the converter raises ConversionError,
                ValueError or TypeError
        """
        if self.converter is None:
            return value
        try:
            return self.converter(value)
        except ConversionError:
            raise
        except (ValueError, TypeError) as exc:
            raise ConversionError(
                f"Could not convert value for parameter '{self.name}': {exc}",
                parameter=self.name,
                value=value,
            ) from exc

    def accepts(self, value: Any) -> bool:
        return self.signature.matches(value)
