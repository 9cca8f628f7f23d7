"""
typed_operation - typed, partially applicable operations

Declare an operation's parameters once (positional or keyword, defaults,
nilable markers, converters), then construct, validate, partially apply,
curry and invoke it. Declarations are checked when the class is defined;
arguments are checked when an instance is bound.
"""

from .config.loader import setup
from .curried import Curried
from .errors import (
    ArgumentError,
    ConversionError,
    CurryError,
    DeclarationError,
    DuplicateParameterError,
    FrozenOperationError,
    InvalidOperationError,
    InvalidSignatureError,
    MissingParameterError,
    OperationError,
    ParameterOrderError,
    ParameterTypeError,
    TooManyPositionalArgumentsError,
    UnknownParameterError,
)
from .operation import (
    ImmutableOperation,
    MutabilityPolicy,
    Operation,
    named_param,
    param,
    positional_param,
)
from .parameters import Deferred, OperationSchema, SchemaBuilder
from .partial import ApplicationState, PartialApplication, PartiallyApplied, Prepared
from .signatures import ANY, Concrete, Nilable, TypeSignature, Union, optional, union

__version__ = "0.1.0"

__all__ = [
    "setup",
    "Operation",
    "ImmutableOperation",
    "MutabilityPolicy",
    "param",
    "positional_param",
    "named_param",
    "optional",
    "union",
    "Deferred",
    "OperationSchema",
    "SchemaBuilder",
    "ApplicationState",
    "PartialApplication",
    "PartiallyApplied",
    "Prepared",
    "Curried",
    "TypeSignature",
    "ANY",
    "Concrete",
    "Nilable",
    "Union",
    "OperationError",
    "DeclarationError",
    "ParameterOrderError",
    "DuplicateParameterError",
    "InvalidSignatureError",
    "ArgumentError",
    "MissingParameterError",
    "TooManyPositionalArgumentsError",
    "UnknownParameterError",
    "CurryError",
    "ParameterTypeError",
    "ConversionError",
    "InvalidOperationError",
    "FrozenOperationError",
]
