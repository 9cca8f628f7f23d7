"""
Operation base classes.

An operation declares its parameters as class-body fields::

    class Greet(Operation):
        name = positional_param(str)
        greeting = param(str, default="Hello")

        def perform(self):
            return f"{self.greeting}, {self.name}!"

Declarations are validated while the class statement executes, in body
order, and sealed into ``Greet.__schema__``. Constructing ``Greet("Ada")``
binds and validates the arguments, runs ``prepare()`` and yields an instance
whose ``call()`` runs before_execute -> perform -> after_execute.

Two mutability policies exist. ``Operation`` instances keep parameter
attributes read-only but accept auxiliary attributes. ``ImmutableOperation``
instances reject every assignment once ``prepare()`` has returned.
"""

from enum import Enum
from typing import Any, Callable, ClassVar, Iterable, Optional

from .binding import bind_arguments
from .curried import Curried
from .errors import DeclarationError, FrozenOperationError, InvalidOperationError
from .logging.config import get_invocation_logger, log_invocation
from .parameters.models import NOTHING
from .parameters.schema import OperationSchema, SchemaBuilder
from .partial import PartialApplication, apply_arguments
from . import registry

logger = get_invocation_logger(__name__)


class MutabilityPolicy(str, Enum):
    """Whether instances accept attribute assignment after construction."""
    MUTABLE = "mutable"
    FROZEN = "frozen"


class ParameterField:
    """Class-body parameter declaration; becomes the read-only accessor."""

    def __init__(self, signature: Any = "any", **options: Any):
        self.signature = signature
        self.options = options
        self.name: Optional[str] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return instance._values[self.name]

    def __set__(self, instance: Any, value: Any) -> None:
        raise FrozenOperationError(
            f"Parameter '{self.name}' of {type(instance).__qualname__} is read-only",
            operation=type(instance).operation_key(),
            attribute=self.name,
        )

    def __delete__(self, instance: Any) -> None:
        self.__set__(instance, None)

    def __repr__(self) -> str:
        return f"ParameterField({self.name!r}, {self.signature!r})"


def param(signature: Any = "any", *, optional: bool = False, positional: bool = False,
          default: Any = NOTHING, default_factory: Optional[Callable[[], Any]] = None,
          reader: str = "public", converter: Optional[Callable[[Any], Any]] = None) -> Any:
    """
    Declare a parameter in an operation class body.

    Keyword parameter by default; ``positional=True`` makes it positional.
    Required unless a default is given or ``optional=True``.
    """
    return ParameterField(
        signature,
        optional=optional,
        positional=positional,
        default=default,
        default_factory=default_factory,
        reader=reader,
        converter=converter,
    )


def positional_param(signature: Any = "any", **options: Any) -> Any:
    return param(signature, **{**options, "positional": True})


def named_param(signature: Any = "any", **options: Any) -> Any:
    return param(signature, **{**options, "positional": False})


_INSTANCE_STORAGE = frozenset({"_values", "_frozen"})


class Operation:
    """Base class for operations with the mutable instance policy."""

    __schema__: ClassVar[OperationSchema] = OperationSchema("Operation")
    __mutability__: ClassVar[MutabilityPolicy] = MutabilityPolicy.MUTABLE
    __match_args__: ClassVar[tuple[str, ...]] = ()

    def __init_subclass__(cls, abstract: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        builder = SchemaBuilder(registry.operation_key(cls), parent=cls.__schema__)

        for attr, value in list(cls.__dict__.items()):
            if not isinstance(value, ParameterField):
                continue
            descriptor = builder.declare(attr, value.signature, **value.options)
            _check_reserved(cls, descriptor.attribute_name)
            if descriptor.attribute_name != attr:
                delattr(cls, attr)
                setattr(cls, descriptor.attribute_name, value)

        cls.__schema__ = builder.build()
        cls.__match_args__ = tuple(p.attribute_name for p in cls.__schema__.positional_params)
        if not abstract:
            registry.register(cls)

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        object.__setattr__(self, "_values", bind_arguments(type(self).__schema__, args, kwargs))
        self.prepare()
        if type(self).__mutability__ == MutabilityPolicy.FROZEN:
            object.__setattr__(self, "_frozen", True)

    def __setattr__(self, name: str, value: Any) -> None:
        if self.__dict__.get("_frozen"):
            raise FrozenOperationError(
                f"Cannot set '{name}' on frozen operation {type(self).__qualname__}",
                operation=self.operation_key(),
                attribute=name,
            )
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if self.__dict__.get("_frozen"):
            raise FrozenOperationError(
                f"Cannot delete '{name}' on frozen operation {type(self).__qualname__}",
                operation=self.operation_key(),
                attribute=name,
            )
        super().__delattr__(name)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        args = ", ".join(f"{name}={value!r}" for name, value in self._values.items())
        return f"{type(self).__qualname__}({args})"

    # Class-level API

    @classmethod
    def operation_key(cls) -> str:
        return registry.operation_key(cls)

    @classmethod
    def invoke(cls, *args: Any, **kwargs: Any) -> Any:
        """Construct with the given arguments and call immediately."""
        return cls(*args, **kwargs).call()

    @classmethod
    def partial(cls, *args: Any, **kwargs: Any) -> PartialApplication:
        """Bind some arguments; returns PartiallyApplied or Prepared."""
        return apply_arguments(cls, args, kwargs)

    @classmethod
    def curry(cls) -> Curried:
        return Curried(cls, cls.partial())

    @classmethod
    def positional_parameters(cls) -> tuple[str, ...]:
        return _names(cls.__schema__.positional_params)

    @classmethod
    def keyword_parameters(cls) -> tuple[str, ...]:
        return _names(cls.__schema__.keyword_params)

    @classmethod
    def required_parameters(cls) -> tuple[str, ...]:
        return _names(cls.__schema__.required_params)

    @classmethod
    def required_positional_parameters(cls) -> tuple[str, ...]:
        return _names(cls.__schema__.required_positional)

    @classmethod
    def required_keyword_parameters(cls) -> tuple[str, ...]:
        return _names(cls.__schema__.required_keyword)

    @classmethod
    def optional_positional_parameters(cls) -> tuple[str, ...]:
        return _names(cls.__schema__.optional_positional)

    @classmethod
    def optional_keyword_parameters(cls) -> tuple[str, ...]:
        return _names(cls.__schema__.optional_keyword)

    # Instance API

    def replace(self, **changes: Any) -> "Operation":
        """New instance re-bound from this one's values overridden by ``changes``."""
        return type(self)(**{**self._values, **changes})

    def astuple(self) -> tuple:
        """Bound values in declaration order."""
        return tuple(self._values.values())

    def asdict(self, keys: Optional[Iterable[str]] = None) -> dict[str, Any]:
        """Bound values by name, optionally restricted to ``keys``."""
        if keys is None:
            return dict(self._values)
        return {key: self._values[key] for key in keys if key in self._values}

    # Lifecycle

    def prepare(self) -> None:
        """Runs once after binding, before any call. Override to set up state."""

    def call(self) -> Any:
        key = self.operation_key()
        log_invocation(logger, key, "started")
        try:
            result = self.execute_operation()
        except Exception as exc:
            log_invocation(logger, key, "failed", {"error": type(exc).__name__})
            raise
        log_invocation(logger, key, "completed")
        return result

    def __call__(self) -> Any:
        return self.call()

    def execute_operation(self) -> Any:
        self.before_execute()
        retval = self.perform()
        return self.after_execute(retval)

    def before_execute(self) -> None:
        pass

    def after_execute(self, retval: Any) -> Any:
        return retval

    def perform(self) -> Any:
        raise InvalidOperationError(
            f"Operation {type(self).__qualname__} does not implement perform()",
            operation=self.operation_key(),
        )


class ImmutableOperation(Operation, abstract=True):
    """Operation whose instances are frozen once prepare() returns."""

    __mutability__ = MutabilityPolicy.FROZEN

    def __hash__(self) -> int:
        return hash((type(self), tuple(self._values.items())))


def _names(params: Iterable[Any]) -> tuple[str, ...]:
    return tuple(p.name for p in params)


def _check_reserved(cls: type, attribute_name: str) -> None:
    if attribute_name in _INSTANCE_STORAGE or hasattr(Operation, attribute_name):
        raise DeclarationError(
            f"Parameter attribute '{attribute_name}' on {cls.__qualname__} "
            f"clashes with the Operation API",
            operation=registry.operation_key(cls),
            parameter=attribute_name,
        )
