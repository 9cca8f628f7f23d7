"""
Parameter declaration: descriptors, the declaration builder and schemas.
"""
from .models import (
    NOTHING,
    Deferred,
    ParameterDescriptor,
    ParameterKind,
    ReaderVisibility,
)
from .builder import ParameterBuilder
from .schema import OperationSchema, SchemaBuilder

__all__ = [
    "NOTHING",
    "Deferred",
    "ParameterDescriptor",
    "ParameterKind",
    "ReaderVisibility",
    "ParameterBuilder",
    "OperationSchema",
    "SchemaBuilder",
]
