"""Descriptor matching."""

from typing import Any, Optional, Tuple

from ..types.constructs import OneOf, Primitive, TypeDescriptor, as_descriptor
from .registry import PredicateRegistry, _registry


class _Absent:
    """Marker for a position the caller supplied no argument for."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


def is_absent(value: Any) -> bool:
    return value is None or value is ABSENT


def matches(descriptor: TypeDescriptor, value: Any, registry: Optional[PredicateRegistry] = None) -> Any:
    """
    Check a value against a descriptor.

    Absent values (``None`` or ``ABSENT``) satisfy an optional primitive and
    fail a required one without consulting its predicate. For a present value
    the predicate's own result is returned as is. A union returns ``True``
    when any member matches, tried in declaration order.

    Raises:
        ConfigurationError: a present value reaches a primitive whose
            predicate the registry lacks
    """
    if registry is None:
        registry = _registry

    if isinstance(descriptor, Primitive):
        if is_absent(value):
            return not descriptor.required
        return registry.resolve(descriptor.name)(value)

    if isinstance(descriptor, OneOf):
        for member in descriptor.members:
            if matches(member, value, registry):
                return True
        return False

    raise TypeError(f"Not a type descriptor: {descriptor!r}")


def validate(value: Any, descriptor: Any, registry: Optional[PredicateRegistry] = None) -> bool:
    """
    Validate a value against a descriptor in any accepted spelling.

    Example:
        validate(42, "number")              # True
        validate(None, "string?")           # True
        validate("a", {"anyOf": ["number", "boolean"]})  # False
    """
    return matches(as_descriptor(descriptor), value, registry)


def check_resolvable(descriptor: TypeDescriptor, registry: Optional[PredicateRegistry] = None) -> None:
    """Raise ConfigurationError unless every predicate in ``descriptor`` is registered."""
    if registry is None:
        registry = _registry
    for name in predicate_names(descriptor):
        registry.resolve(name)


def predicate_names(descriptor: TypeDescriptor) -> Tuple[str, ...]:
    """Names of the predicates a descriptor would try, in order."""
    if isinstance(descriptor, Primitive):
        return (descriptor.name,)
    if isinstance(descriptor, OneOf):
        names = []
        for member in descriptor.members:
            names.extend(predicate_names(member))
        return tuple(names)
    return ()


def describe(descriptor: TypeDescriptor) -> str:
    return str(descriptor)


def shape_of(value: Any) -> str:
    """Reported shape of an actual value, for error messages."""
    if value is ABSENT:
        return "<missing>"
    if value is None:
        return "None"
    return type(value).__name__
