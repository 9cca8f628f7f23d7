"""
Type signatures attached to operation parameters.

A signature is a pure predicate over runtime values. Four variants exist:
``AnySignature`` (matches everything), ``Concrete`` (isinstance check against
one type), ``Union`` (any member matches) and ``Nilable`` (None or the inner
signature). No coercion happens here; converters run before the check.
"""

import types
import typing
from typing import Any, Iterable

from .errors import InvalidSignatureError

NoneType = type(None)


class TypeSignature:
    """Base class for all signature variants."""

    def matches(self, value: Any) -> bool:
        raise NotImplementedError

    def wrap_nilable(self) -> "TypeSignature":
        return Nilable(self)

    @property
    def is_nilable(self) -> bool:
        return False

    def __or__(self, other: Any) -> "TypeSignature":
        return Union(self, coerce_signature(other))

    def __ror__(self, other: Any) -> "TypeSignature":
        return Union(coerce_signature(other), self)


class AnySignature(TypeSignature):
    def matches(self, value): return True
    def __eq__(self, other): return isinstance(other, AnySignature)
    def __hash__(self): return hash(AnySignature)
    def __repr__(self): return "Any"


ANY = AnySignature()


class Concrete(TypeSignature):
    """Matches instances of ``type_tag`` (subclasses included).

    ``bool`` is not accepted for ``int``; declare ``(int, bool)`` to take both.
    """

    def __init__(self, type_tag: type):
        if not isinstance(type_tag, type):
            raise InvalidSignatureError(
                f"Concrete signature needs a class, got {type_tag!r}",
                signature=type_tag,
            )
        self.type_tag = type_tag

    def matches(self, value):
        if isinstance(value, bool) and self.type_tag is int:
            return False
        return isinstance(value, self.type_tag)

    def __eq__(self, other):
        return isinstance(other, Concrete) and self.type_tag is other.type_tag

    def __hash__(self):
        return hash((Concrete, self.type_tag))

    def __repr__(self):
        return self.type_tag.__name__


class Union(TypeSignature):
    """Ordered set of member signatures; nested unions are flattened."""

    def __init__(self, *members: TypeSignature):
        flat: list[TypeSignature] = []
        for member in members:
            for inner in (member.members if isinstance(member, Union) else (member,)):
                if inner not in flat:
                    flat.append(inner)
        self.members = tuple(flat)

    def matches(self, value):
        return any(member.matches(value) for member in self.members)

    def __eq__(self, other):
        return isinstance(other, Union) and set(self.members) == set(other.members)

    def __hash__(self):
        return hash((Union, frozenset(self.members)))

    def __repr__(self):
        return f"Union[{', '.join(repr(m) for m in self.members)}]"


class Nilable(TypeSignature):
    """None or a value the inner signature accepts.

    Wrapping is idempotent: ``Nilable(Nilable(x)) == Nilable(x)``.
    """

    def __init__(self, inner: TypeSignature):
        if isinstance(inner, Nilable):
            inner = inner.inner
        self.inner = inner

    def matches(self, value):
        return value is None or self.inner.matches(value)

    def wrap_nilable(self):
        return self

    @property
    def is_nilable(self):
        return True

    def __eq__(self, other):
        return isinstance(other, Nilable) and self.inner == other.inner

    def __hash__(self):
        return hash((Nilable, self.inner))

    def __repr__(self):
        return f"Nilable[{self.inner!r}]"


def optional(signature: Any) -> Nilable:
    """Wrap a signature specification so None is accepted."""
    return coerce_signature(signature).wrap_nilable()


def union(*signatures: Any) -> TypeSignature:
    return Union(*(coerce_signature(s) for s in signatures))


def coerce_signature(spec: Any) -> TypeSignature:
    """
    Turn a signature specification into a TypeSignature.

    Accepted forms: TypeSignature instances, classes, ``None`` (NoneType),
    ``typing.Any`` or the string ``"any"``, tuples/lists of the above
    (union), ``X | Y`` unions and ``Optional[X]``.

    Raises:
        InvalidSignatureError: If the specification is not understood
    """
    if isinstance(spec, TypeSignature):
        return spec
    if spec is None or spec is NoneType:
        return Concrete(NoneType)
    if spec is Any or spec == "any":
        return ANY
    if isinstance(spec, (tuple, list)):
        return _from_members(spec)

    origin = typing.get_origin(spec)
    if origin is typing.Union or origin is types.UnionType:
        members = typing.get_args(spec)
        if NoneType in members:
            rest = [m for m in members if m is not NoneType]
            inner = _from_members(rest) if len(rest) > 1 else coerce_signature(rest[0])
            return Nilable(inner)
        return _from_members(members)
    if origin is not None:
        # Parametrised generics (list[int], dict[str, Any]) check the origin only
        return Concrete(origin)
    if isinstance(spec, type):
        return Concrete(spec)

    raise InvalidSignatureError(f"Cannot interpret {spec!r} as a type signature", signature=spec)


def _from_members(specs: Iterable[Any]) -> TypeSignature:
    members = [coerce_signature(s) for s in specs]
    if not members:
        raise InvalidSignatureError("Union signature needs at least one member", signature=specs)
    if len(members) == 1:
        return members[0]
    return Union(*members)
