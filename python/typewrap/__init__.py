"""typewrap: runtime argument and return type checks at function boundaries."""

from typewrap.errors import (
    TypeValidationError,
    ParameterTypeError,
    ReturnTypeError,
    ConfigurationError,
)
from typewrap.types import Primitive, OneOf, one_of, optional, as_descriptor
from typewrap.core import (
    ABSENT,
    PredicateRegistry,
    default_registry,
    matches,
    validate,
    parse_signature,
)
from typewrap.decorators import typed, wrap

__version__ = "0.1.0"

__all__ = [
    # Wrapping
    "wrap",
    "typed",
    # Matching
    "matches",
    "validate",
    "parse_signature",
    "ABSENT",
    # Descriptors
    "Primitive",
    "OneOf",
    "one_of",
    "optional",
    "as_descriptor",
    # Predicate registries
    "PredicateRegistry",
    "default_registry",
    # Errors
    "TypeValidationError",
    "ParameterTypeError",
    "ReturnTypeError",
    "ConfigurationError",
]
