"""Tests for the error hierarchy."""

import pytest

from typed_operation import Operation, param
from typed_operation.errors import (
    ArgumentError,
    ConfigurationError,
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


class TestErrorClassification:
    """Test error classification system."""

    def test_base_error(self):
        """Test the root error carries context and is never recoverable."""
        error = OperationError("base error")
        assert error.recoverable is False
        assert error.context == {}

        error = OperationError("with context", context={"profile": "dev"})
        assert error.context == {"profile": "dev"}

    def test_declaration_error_hierarchy(self):
        """Test declaration errors carry operation and parameter names."""
        order_error = ParameterOrderError("order", operation="m.Op", parameter="b")
        assert isinstance(order_error, DeclarationError)
        assert order_error.operation == "m.Op"
        assert order_error.parameter == "b"

        assert isinstance(DuplicateParameterError("dup"), DeclarationError)

        signature_error = InvalidSignatureError("bad", signature=42)
        assert isinstance(signature_error, DeclarationError)
        assert signature_error.signature == 42

    @pytest.mark.parametrize("error_class", [
        ArgumentError,
        MissingParameterError,
        TooManyPositionalArgumentsError,
        UnknownParameterError,
        CurryError,
        ParameterTypeError,
    ])
    def test_call_errors_are_type_errors(self, error_class):
        """Test argument and type errors can be caught as TypeError."""
        error = error_class("bad call")
        assert isinstance(error, TypeError)
        assert isinstance(error, OperationError)

    def test_argument_error_details(self):
        """Test argument errors keep their details."""
        missing = MissingParameterError("missing", missing_parameters=["a", "b"])
        assert missing.missing_parameters == ["a", "b"]

        arity = TooManyPositionalArgumentsError("arity", expected_count=1, given_count=3)
        assert arity.expected_count == 1
        assert arity.given_count == 3

        unknown = UnknownParameterError("unknown", unknown_parameters=["x"])
        assert unknown.unknown_parameters == ["x"]

    def test_builtin_bases(self):
        """Test the remaining errors inherit the matching builtin."""
        assert isinstance(ConversionError("bad", parameter="n", value="x"), ValueError)
        assert isinstance(InvalidOperationError("no perform"), NotImplementedError)
        assert isinstance(FrozenOperationError("frozen", attribute="a"), AttributeError)

    def test_configuration_error(self):
        """Test configuration errors carry the validation results."""
        error = ConfigurationError("invalid", errors=["e1"])
        assert error.errors == ["e1"]
        assert not isinstance(error, TypeError)


class TestRaisedErrors:
    """Test errors raised by operations carry useful details."""

    def test_missing_parameter_from_constructor(self, keyword_operation):
        """Test construction without required parameters."""
        with pytest.raises(MissingParameterError) as exc_info:
            keyword_operation(foo="1")
        assert exc_info.value.missing_parameters == ["bar", "baz"]
        assert exc_info.value.operation == keyword_operation.operation_key()

    def test_type_error_details(self, keyword_operation):
        """Test type mismatches name the parameter and types."""
        with pytest.raises(ParameterTypeError) as exc_info:
            keyword_operation(foo=1, bar="2", baz="3")
        error = exc_info.value
        assert error.parameter == "foo"
        assert error.actual_type is int
        assert "Parameter 'foo'" in str(error)

    def test_conversion_error_chains(self):
        """Test converter failures are wrapped with the original cause."""
        class Parse(Operation):
            number = param(int, converter=int)

        with pytest.raises(ConversionError) as exc_info:
            Parse(number="abc")
        assert exc_info.value.parameter == "number"
        assert exc_info.value.value == "abc"
        assert isinstance(exc_info.value.__cause__, ValueError)
