"""
Partial application of operations.

Applying arguments to an operation class yields one of two states, computed
afresh on every merge from the bound-versus-required sets:

* ``PartiallyApplied`` - at least one required parameter is unbound;
* ``Prepared`` - every required parameter is bound, ready to materialize.

The class itself plays the third, ``UNAPPLIED``, state. Both states are
immutable; ``partial()`` returns a new application.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Iterable, Optional

from .binding import check_arity, check_known_keywords
from .curried import Curried
from .errors import MissingParameterError
from .logging.config import get_application_logger, log_application_transition

if TYPE_CHECKING:
    from .operation import Operation

logger = get_application_logger(__name__)


class ApplicationState(str, Enum):
    """Partial application states."""
    UNAPPLIED = "unapplied"
    PARTIALLY_APPLIED = "partially_applied"
    PREPARED = "prepared"


class PartialApplication:
    """Arguments bound so far to an operation class."""

    state: ClassVar[ApplicationState]

    def __init__(self, operation_class: type["Operation"], args: tuple = (),
                 kwargs: Optional[dict[str, Any]] = None):
        self.operation_class = operation_class
        self._args = tuple(args)
        self._kwargs = dict(kwargs or {})

    @property
    def positional_args(self) -> tuple:
        return self._args

    @property
    def keyword_args(self) -> dict[str, Any]:
        return dict(self._kwargs)

    @property
    def is_prepared(self) -> bool:
        return self.state == ApplicationState.PREPARED

    def missing_parameters(self) -> list[str]:
        return self.operation_class.__schema__.missing_required(self._args, self._kwargs)

    def partial(self, *args: Any, **kwargs: Any) -> "PartialApplication":
        """Merge more arguments; later keyword values override earlier ones."""
        return apply_arguments(
            self.operation_class,
            self._args + args,
            {**self._kwargs, **kwargs},
            previous_state=self.state,
        )

    def operation(self) -> "Operation":
        raise NotImplementedError

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Merge the call's arguments and invoke if that completes the application."""
        applied = self.partial(*args, **kwargs)
        if not applied.is_prepared:
            missing = applied.missing_parameters()
            raise MissingParameterError(
                f"Cannot call partially applied operation {self.operation_class.operation_key()}, "
                f"missing: {', '.join(missing)}",
                operation=self.operation_class.operation_key(),
                missing_parameters=missing,
            )
        return applied.operation().call()

    def curry(self) -> Curried:
        return Curried(self.operation_class, self)

    def astuple(self) -> tuple:
        """Bound values: positional values first, then keyword values."""
        return self._args + tuple(self._kwargs.values())

    def asdict(self, keys: Optional[Iterable[str]] = None) -> dict[str, Any]:
        """Bound values by name; positional values are named by their slot."""
        positional = self.operation_class.__schema__.positional_params
        bound = {param.name: value for param, value in zip(positional, self._args)}
        for name, value in self._kwargs.items():
            bound.setdefault(name, value)
        if keys is None:
            return bound
        return {key: bound[key] for key in keys if key in bound}

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.operation_class is other.operation_class
                and self._args == other._args and self._kwargs == other._kwargs)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        # Greet(name='Ada', greeting=?)
        bound = self.asdict()
        items = []
        for param in self.operation_class.__schema__:
            if param.name in bound:
                items.append(f"{param.name}={bound[param.name]!r}")
            elif param.is_required:
                items.append(f"{param.name}=?")
        return f"<{type(self).__name__} {self.operation_class.__qualname__}({', '.join(items)})>"


class PartiallyApplied(PartialApplication):
    state = ApplicationState.PARTIALLY_APPLIED

    def operation(self) -> "Operation":
        missing = self.missing_parameters()
        raise MissingParameterError(
            f"Cannot materialize {self.operation_class.operation_key()}, "
            f"missing: {', '.join(missing)}",
            operation=self.operation_class.operation_key(),
            missing_parameters=missing,
        )


class Prepared(PartialApplication):
    state = ApplicationState.PREPARED

    def operation(self) -> "Operation":
        """Construct the operation instance from the bound arguments."""
        return self.operation_class(*self._args, **self._kwargs)


def apply_arguments(
    operation_class: type["Operation"],
    args: tuple,
    kwargs: dict[str, Any],
    previous_state: ApplicationState = ApplicationState.UNAPPLIED,
    trigger: str = "merge",
) -> PartialApplication:
    """
    Compute the application state for a set of bound arguments.

    Args:
        operation_class: Operation the arguments are applied to
        args: All positional values bound so far
        kwargs: All keyword values bound so far
        previous_state: State the merge started from, for logging
        trigger: What caused the merge, for logging

    Returns:
        Prepared if no required parameter is missing, else PartiallyApplied

    Raises:
        TooManyPositionalArgumentsError: More positional values than slots
        UnknownParameterError: Keyword for an undeclared name
    """
    schema = operation_class.__schema__
    check_arity(schema, args)
    check_known_keywords(schema, kwargs)

    missing = schema.missing_required(args, kwargs)
    application_class = PartiallyApplied if missing else Prepared
    application = application_class(operation_class, args, kwargs)

    log_application_transition(
        logger,
        operation=schema.operation_name,
        from_state=previous_state.value,
        to_state=application.state.value,
        bound=list(application.asdict()),
        missing=missing,
        trigger=trigger,
    )
    return application
