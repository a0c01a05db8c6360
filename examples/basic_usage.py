"""Basic usage examples for typewrap."""

from typewrap import (
    ParameterTypeError,
    ReturnTypeError,
    default_registry,
    one_of,
    typed,
    validate,
    wrap,
)
from typewrap import types as t


# Example 1: Descriptors as trailing arguments
def add(x, y):
    """Add two numbers."""
    return x + y


checked_add = wrap(add, t.number, t.number)


# Example 2: Descriptor list followed by a return descriptor
def complex_add(a, b):
    """Add numbers or numeric strings; None when a is 0."""
    if a == 0:
        return None
    return float(a) + float(b)


checked_complex_add = wrap(
    complex_add,
    [one_of("string", "number"), {"anyOf": ["string", "number"]}],
    t.number,
)


# Example 3: Signature string
@typed("(string, integer?) -> string")
def repeat(text, times=2):
    return text * times


# Example 4: Custom predicates in their own registry
registry = default_registry()


@registry.register("positive")
def is_positive(value):
    return isinstance(value, (int, float)) and value > 0


@typed("positive", returns="positive", registry=registry)
def square(x):
    return x * x


# Example 5: Plain value checks
def validate_examples():
    """Demonstrate value validation."""
    print(f"42 is number: {validate(42, 'number')}")
    print(f"'42' is number: {validate('42', 'number')}")
    print(f"None is number?: {validate(None, 'number?')}")


if __name__ == "__main__":
    print(f"checked_add(2, 2) = {checked_add(2, 2)}")
    try:
        checked_add("2", 2)
    except ParameterTypeError as e:
        print(f"checked_add('2', 2) -> {e}")

    print(f"checked_complex_add('1', 2) = {checked_complex_add('1', 2)}")
    try:
        checked_complex_add(0, 2)
    except ReturnTypeError as e:
        print(f"checked_complex_add(0, 2) -> {e}")

    print(f"repeat('ab') = {repeat('ab')}")
    print(f"square(3) = {square(3)}")

    print("\nValue validation:")
    validate_examples()
