"""
Currying: feed an operation one value at a time.

Each value goes to the next unfilled required slot, required positionals
first, then required keywords, both in declaration order. The step that
completes the application invokes the operation and returns its result.
"""

from typing import TYPE_CHECKING, Any, Optional

from .errors import CurryError
from .logging.config import get_application_logger

if TYPE_CHECKING:
    from .operation import Operation
    from .partial import PartialApplication

logger = get_application_logger(__name__)


class Curried:
    """One-value-at-a-time pipeline over a partial application."""

    def __init__(self, operation_class: type["Operation"],
                 partial_application: Optional["PartialApplication"] = None):
        self.operation_class = operation_class
        self.partial_application = partial_application or operation_class.partial()

    def __call__(self, arg: Any) -> Any:
        """
        Bind ``arg`` to the next required slot.

        Returns:
            The operation's result if this completed the application,
            otherwise a new Curried

        Raises:
            CurryError: If the application was already prepared
        """
        current = self.partial_application
        if current.is_prepared:
            raise CurryError(
                "A prepared operation should not be curried",
                operation=self.operation_class.operation_key(),
            )

        name, positionally = self._next_slot()
        logger.debug("Curry step", operation=self.operation_class.operation_key(),
                     parameter=name, positional=positionally)
        if positionally:
            applied = current.partial(arg)
        else:
            applied = current.partial(**{name: arg})

        if applied.is_prepared:
            return applied.operation().call()
        return Curried(self.operation_class, applied)

    call = __call__

    def _next_slot(self) -> tuple[str, bool]:
        schema = self.operation_class.__schema__
        args = self.partial_application.positional_args
        kwargs = self.partial_application.keyword_args

        for param in schema.required_positional:
            if param.kind_index >= len(args) and param.name not in kwargs:
                return param.name, param.kind_index == len(args)
        for param in schema.required_keyword:
            if param.name not in kwargs:
                return param.name, False
        # Unreachable while the application is not prepared
        raise CurryError(
            "No unfilled required parameter left to curry",
            operation=self.operation_class.operation_key(),
        )

    def __repr__(self) -> str:
        return f"<Curried {self.partial_application!r}>"
