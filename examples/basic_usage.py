#!/usr/bin/env python3
"""
Basic Usage Example - typed_operation

This script walks through the main features of typed_operation:
- Declaring positional and keyword parameters
- Invoking operations directly
- Partial application and currying
- Immutable operations and decomposition
- Error reporting for bad arguments

Run: python examples/basic_usage.py
"""

from typed_operation import (
    ImmutableOperation,
    MissingParameterError,
    Operation,
    ParameterTypeError,
    named_param,
    optional,
    positional_param,
    setup,
)


class Greet(Operation):
    """Build a greeting line."""

    name = positional_param(str)
    greeting = named_param(str, default="Hello")
    punctuation = named_param(optional(str))

    def perform(self):
        return f"{self.greeting}, {self.name}{self.punctuation or '!'}"


class Resize(ImmutableOperation):
    """Scale a width/height pair."""

    width = positional_param(int, converter=int)
    height = positional_param(int, converter=int)
    factor = named_param(float, default=1.0, converter=float)

    def perform(self):
        return round(self.width * self.factor), round(self.height * self.factor)


def demo_direct_invocation() -> None:
    print("\n=== Direct invocation ===")
    print(Greet.invoke("Ada"))
    print(Greet("Grace", greeting="Hi").call())
    print(Resize.invoke("640", 480, factor="0.5"))


def demo_partial_application() -> None:
    print("\n=== Partial application ===")
    polite = Greet.partial(greeting="Good evening")
    print(f"State: {polite!r}")
    for name in ["Ada", "Grace", "Edsger"]:
        print(polite(name))

    half = Resize.partial(factor=0.5)
    prepared = half.partial(1920, 1080)
    print(f"State: {prepared!r}")
    print(f"Operation: {prepared.operation()!r}")
    print(f"Result: {prepared()}")


def demo_currying() -> None:
    print("\n=== Currying ===")
    curried = Resize.curry()
    step = curried(800)
    print(f"After one value: {step!r}")
    print(f"Result: {step(600)}")


def demo_decomposition() -> None:
    print("\n=== Decomposition ===")
    resize = Resize(100, 50, factor=2)
    print(f"astuple: {resize.astuple()}")
    print(f"asdict: {resize.asdict()}")
    print(f"replace: {resize.replace(factor=3.0).call()}")

    match resize:
        case Resize(width, height) if width > height:
            print(f"Landscape {width}x{height}")
        case Resize(width, height):
            print(f"Portrait {width}x{height}")


def demo_errors() -> None:
    print("\n=== Errors ===")
    try:
        Greet()
    except MissingParameterError as e:
        print(f"Missing: {e.missing_parameters}")

    try:
        Greet(42)
    except ParameterTypeError as e:
        print(f"Type error: {e}")


def main() -> None:
    setup(overrides={"logging": {"level": "WARNING"}})

    demo_direct_invocation()
    demo_partial_application()
    demo_currying()
    demo_decomposition()
    demo_errors()


if __name__ == "__main__":
    main()
