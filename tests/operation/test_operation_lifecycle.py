"""Tests for the invocation lifecycle and instance behaviour."""

import copy

import pytest

from typed_operation import Operation, param, positional_param
from typed_operation.errors import (
    DeclarationError,
    FrozenOperationError,
    InvalidOperationError,
    ParameterOrderError,
)


class TestInvocation:
    """Test before -> perform -> after."""

    def test_call_runs_hooks(self, positional_operation):
        """Test call() runs before and after hooks."""
        operation = positional_operation("first", 123)
        assert operation.call() == "first/123"
        assert operation.before_was_called
        assert operation.after_was_called

    def test_execute_operation_runs_hooks(self, positional_operation):
        """Test execute_operation() runs the same steps."""
        operation = positional_operation("first", 123)
        assert operation.execute_operation() == "first/123"
        assert operation.before_was_called

    def test_instance_is_callable(self, positional_operation):
        """Test calling the instance."""
        assert positional_operation("first")() == "first!"

    def test_class_invoke(self, keyword_operation):
        """Test construct-and-call in one step."""
        assert keyword_operation.invoke(foo="1", bar="2", baz="3") == "It worked, (1/2/3/qux//)"

    def test_invoke_as_plain_callable(self, positional_operation):
        """Test the class-level invoke in map()."""
        assert list(map(positional_operation.invoke, ["first", "second"])) == ["first!", "second!"]

    def test_after_execute_result_is_returned(self):
        """Test after_execute's return value becomes the result."""
        class Doubler(Operation):
            value = positional_param(int)

            def perform(self):
                return self.value

            def after_execute(self, retval):
                return retval * 2

        assert Doubler.invoke(4) == 8

    def test_call_is_repeatable(self):
        """Test calling twice re-runs the lifecycle against the same values."""
        class Counter(Operation):
            step = positional_param(int)

            def prepare(self):
                self.calls = 0

            def perform(self):
                self.calls += 1
                return self.step * self.calls

        operation = Counter(3)
        assert operation.call() == 3
        assert operation.call() == 6

    def test_missing_perform(self, no_perform_operation):
        """Test invoking an operation without perform()."""
        with pytest.raises(InvalidOperationError) as exc_info:
            no_perform_operation.invoke()
        assert str(exc_info.value) == "Operation NoPerformOperation does not implement perform()"

    def test_missing_perform_is_not_implemented(self, no_perform_operation):
        """Test InvalidOperationError is a NotImplementedError."""
        with pytest.raises(NotImplementedError):
            no_perform_operation().call()


class TestPrepare:
    """Test the pre-invocation hook."""

    def test_prepare_runs_on_construction(self, keyword_operation):
        """Test prepare() ran once binding finished."""
        operation = keyword_operation(foo="1", bar="2", baz="3")
        assert operation.local_var == 123

    def test_prepare_sees_bound_values(self):
        """Test prepare() can read parameters."""
        class Greeting(Operation):
            name = positional_param(str)

            def prepare(self):
                self.upper = self.name.upper()

            def perform(self):
                return self.upper

        assert Greeting.invoke("ada") == "ADA"


class TestInstanceBehaviour:
    """Test instance attributes, equality and copies."""

    def test_cannot_write_parameter(self, keyword_operation):
        """Test parameter attributes are read-only."""
        operation = keyword_operation(foo="1", bar="2", baz="3")
        with pytest.raises(FrozenOperationError):
            operation.foo = "2"
        with pytest.raises(AttributeError):
            del operation.foo

    def test_auxiliary_state_is_writable(self, keyword_operation):
        """Test the mutable policy accepts non-parameter attributes."""
        operation = keyword_operation(foo="1", bar="2", baz="3")
        operation.note = "hello"
        assert operation.note == "hello"

    def test_equality(self, keyword_and_positional_operation):
        """Test instances with the same values compare equal."""
        a = keyword_and_positional_operation("1", kw1="x")
        b = keyword_and_positional_operation(pos1="1", pos2="pos2", kw1="x")
        assert a == b
        assert a != keyword_and_positional_operation("2", kw1="x")

    def test_copy(self, keyword_and_positional_operation):
        """Test copied instances call identically."""
        operation = keyword_and_positional_operation("1", "2", kw1="1", kw2="2")
        assert copy.copy(operation).call() == "1/2/1/2"

    def test_replace(self, keyword_operation):
        """Test replace() re-binds with changed values."""
        operation = keyword_operation(foo="1", bar="2", baz="3")
        changed = operation.replace(bar="20", baz=30)
        assert changed.bar == "20"
        assert changed.baz == "30"
        assert changed.foo == "1"
        assert operation.bar == "2"

    def test_replace_revalidates(self, keyword_operation):
        """Test replace() type checks the merged values."""
        operation = keyword_operation(foo="1", bar="2", baz="3")
        with pytest.raises(TypeError):
            operation.replace(foo=1)

    def test_repr(self, positional_operation):
        """Test repr lists bound values."""
        assert repr(positional_operation("x")) == "PositionalOperation(first='x', second=None)"

    def test_decomposition(self, keyword_and_positional_operation):
        """Test astuple/asdict views."""
        operation = keyword_and_positional_operation("first", "second", kw1="foo", kw2="bar")
        assert operation.astuple() == ("first", "second", "foo", "bar")
        assert operation.asdict() == {"pos1": "first", "pos2": "second", "kw1": "foo", "kw2": "bar"}
        assert operation.asdict(["pos1", "kw2"]) == {"pos1": "first", "kw2": "bar"}

    def test_decomposition_includes_defaults(self, keyword_operation):
        """Test defaults appear in declaration order."""
        operation = keyword_operation(foo="1", bar="2", baz="3", can_be_nil=5)
        assert operation.astuple() == ("1", "2", "3", "qux", 5, None)

    def test_pattern_matching(self, keyword_and_positional_operation):
        """Test match statements on positional and keyword attributes."""
        operation = keyword_and_positional_operation("first", "second", kw1="foo")
        match operation:
            case keyword_and_positional_operation(pos1, pos2, kw1=kw1):
                assert (pos1, pos2, kw1) == ("first", "second", "foo")
            case _:
                pytest.fail("Pattern match failed")


class TestDeclaration:
    """Test class-body declaration."""

    def test_invalid_positional_order(self):
        """Test required positional after optional fails at class definition."""
        with pytest.raises(ParameterOrderError):
            class Invalid(Operation):
                first = positional_param(str, optional=True)
                second = positional_param(str)

    def test_private_reader(self):
        """Test private readers expose an underscored attribute."""
        class Secretive(Operation):
            token = param(str, reader="private")

            def perform(self):
                return self._token

        operation = Secretive(token="abc")
        assert operation.call() == "abc"
        assert not hasattr(operation, "token")
        assert operation.asdict() == {"token": "abc"}

    def test_reserved_names(self):
        """Test parameters may not shadow the Operation API."""
        with pytest.raises(DeclarationError):
            class Clashing(Operation):
                call = param(str)

    def test_inherited_parameters(self):
        """Test subclasses extend the parent's schema."""
        class Parent(Operation):
            name = positional_param(str)

        class Child(Parent):
            excited = param(bool, default=False)

            def perform(self):
                return self.name + ("!" if self.excited else "")

        assert Child.positional_parameters() == ("name",)
        assert Child.keyword_parameters() == ("excited",)
        assert Child.invoke("hi", excited=True) == "hi!"
        assert Parent.keyword_parameters() == ()
