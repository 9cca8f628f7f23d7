"""Pytest configuration and shared fixtures."""

import logging

import pytest
import structlog

from typed_operation import (
    ImmutableOperation,
    Operation,
    named_param,
    optional,
    param,
    positional_param,
)


class PositionalOperation(Operation):
    first = param(str, positional=True)
    second = param(str, optional=True, positional=True, converter=str)

    def before_execute(self):
        self.before_was_called = True
        super().before_execute()

    def after_execute(self, retval):
        self.after_was_called = True
        return super().after_execute(retval)

    def perform(self):
        if self.second:
            return f"{self.first}/{self.second}"
        return f"{self.first}!"


class KeywordAndPositionalOperation(Operation):
    pos1 = param(str, positional=True)
    pos2 = param(str, default="pos2", positional=True)
    kw1 = param(str)
    kw2 = param(str, default="kw2")

    def perform(self):
        return f"{self.pos1}/{self.pos2}/{self.kw1}/{self.kw2}"


class AlternativeDslOperation(Operation):
    pos1 = positional_param(str)
    pos2 = positional_param(str, default="pos2")
    pos3 = positional_param(optional(str))
    kw1 = named_param(str)
    kw2 = named_param(str, default="kw2")
    kw3 = named_param(optional(str))

    def perform(self):
        return "/".join(
            "" if v is None else v
            for v in (self.pos1, self.pos2, self.pos3, self.kw1, self.kw2, self.kw3)
        )


class KeywordOperation(Operation):
    foo = param(str)
    bar = param(str)
    baz = param(str, converter=str)
    with_default = param(str, default="qux")
    can_be_nil = param(int, optional=True)
    can_also_be_nil = param(Operation, default=None)

    def prepare(self):
        self.local_var = 123

    def perform(self):
        can_be_nil = "" if self.can_be_nil is None else self.can_be_nil
        can_also_be_nil = "" if self.can_also_be_nil is None else self.can_also_be_nil
        return (f"It worked, ({self.foo}/{self.bar}/{self.baz}/{self.with_default}/"
                f"{can_be_nil}/{can_also_be_nil})")


class CurryOperation(Operation):
    pos1 = param(str, positional=True)
    pos2 = param(str, positional=True)
    pos3 = param(optional(str), positional=True)
    kw1 = param(str)
    kw2 = param(str)
    kw3 = param(optional(str))

    def perform(self):
        return "/".join(
            "" if v is None else v
            for v in (self.pos1, self.pos2, self.pos3, self.kw1, self.kw2, self.kw3)
        )


class MutableDefaultOperation(Operation):
    my_hash = param(dict, default_factory=dict)


class FrozenDefaultOperation(ImmutableOperation):
    my_hash = param(dict, default_factory=dict)

    def prepare(self):
        self.prepared = True

    def perform(self):
        return sorted(self.my_hash)


class NoPerformOperation(Operation):
    pass


@pytest.fixture
def positional_operation():
    return PositionalOperation


@pytest.fixture
def keyword_and_positional_operation():
    return KeywordAndPositionalOperation


@pytest.fixture
def alternative_dsl_operation():
    return AlternativeDslOperation


@pytest.fixture
def keyword_operation():
    return KeywordOperation


@pytest.fixture
def curry_operation():
    return CurryOperation


@pytest.fixture
def mutable_default_operation():
    return MutableDefaultOperation


@pytest.fixture
def frozen_operation():
    return FrozenDefaultOperation


@pytest.fixture
def no_perform_operation():
    return NoPerformOperation


@pytest.fixture
def restore_logging():
    """Put structlog and the root logger back after a test configures them."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)
