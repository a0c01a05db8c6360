"""Type descriptor constructs."""

from dataclasses import dataclass
from typing import Any, Mapping, Tuple, Union

from ..errors import ConfigurationError


@dataclass(frozen=True)
class Primitive:
    """Reference to a named predicate, required unless marked optional."""

    name: str
    required: bool = True

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ConfigurationError(f"Predicate name must be a non-empty string, got {self.name!r}")
        if not isinstance(self.required, bool):
            raise ConfigurationError(f"required must be a bool, got {self.required!r}")

    @property
    def optional(self) -> "Primitive":
        """Copy of this descriptor that also accepts an absent value."""
        return Primitive(self.name, required=False)

    def __or__(self, other: Any) -> "OneOf":
        return OneOf((self, as_descriptor(other)))

    def __str__(self) -> str:
        return self.name if self.required else f"{self.name}?"


@dataclass(frozen=True)
class OneOf:
    """Union descriptor: a value matches if any member matches."""

    members: Tuple["TypeDescriptor", ...] = ()

    def __post_init__(self):
        if isinstance(self.members, (str, Mapping)):
            raise ConfigurationError(
                f"OneOf takes a sequence of descriptors, got {self.members!r}; use one_of(...)"
            )
        object.__setattr__(self, "members", tuple(as_descriptor(m) for m in self.members))

    def __or__(self, other: Any) -> "OneOf":
        return OneOf((*self.members, as_descriptor(other)))

    def __str__(self) -> str:
        if not self.members:
            return "<nothing>"
        return " | ".join(str(m) for m in self.members)


TypeDescriptor = Union[Primitive, OneOf]


def one_of(*members: Any) -> OneOf:
    """
    Build a union descriptor.

    Example:
        one_of("string", "number")
        one_of(number, string.optional)
    """
    return OneOf(members)


def optional(descriptor: Any) -> Primitive:
    """Mark a primitive descriptor optional. Unions carry no flag of their own."""
    descriptor = as_descriptor(descriptor)
    if isinstance(descriptor, OneOf):
        raise ConfigurationError(
            f"Cannot mark union '{descriptor}' optional; mark its members instead"
        )
    return descriptor.optional


def as_descriptor(spec: Any) -> TypeDescriptor:
    """
    Normalize the accepted descriptor spellings to a descriptor.

    Accepts a descriptor, a type string such as ``"number?"`` or
    ``"string | number"``, or a mapping ``{"anyOf": ["string", "number"]}``.
    """
    if isinstance(spec, (Primitive, OneOf)):
        return spec

    if isinstance(spec, str):
        # Import here to avoid circular dependency
        from ..core.signature_parser import parse_type
        return parse_type(spec)

    if isinstance(spec, Mapping):
        return _from_any_of(spec)

    raise ConfigurationError(f"Not a type descriptor: {spec!r}")


def _from_any_of(spec: Mapping) -> OneOf:
    if set(spec) != {"anyOf"}:
        raise ConfigurationError(f"Descriptor mapping must have exactly one key 'anyOf': {dict(spec)!r}")

    names = spec["anyOf"]
    if not isinstance(names, (list, tuple)):
        raise ConfigurationError(f"'anyOf' must be a list of predicate names, got {names!r}")

    for name in names:
        if not isinstance(name, str):
            raise ConfigurationError(f"'anyOf' members must be predicate names, got {name!r}")

    return OneOf(tuple(Primitive(name.strip()) for name in names))
