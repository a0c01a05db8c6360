"""Exceptions raised by typewrap."""

from typing import Any, Optional


class TypeValidationError(TypeError):
    """Raised when runtime type validation fails."""
    pass


class ParameterTypeError(TypeValidationError):
    """An argument did not satisfy the descriptor declared for its position.

    Raised before the wrapped function runs, so the call had no side effects.
    """

    def __init__(self, index: int, descriptor: Any, value: Any, name: Optional[str] = None):
        from .core.validator import describe, predicate_names, shape_of

        self.index = index
        self.name = name
        self.descriptor = descriptor
        self.value = value
        self.expected = predicate_names(descriptor)

        label = f"Parameter {index} ({name})" if name else f"Parameter {index}"
        super().__init__(f"{label}: expected {describe(descriptor)}, got {shape_of(value)}")


class ReturnTypeError(TypeValidationError):
    """The wrapped function produced a value that fails the return descriptor.

    The function has already run; whatever it did is not undone.
    """

    def __init__(self, descriptor: Any, value: Any):
        from .core.validator import describe, predicate_names, shape_of

        self.descriptor = descriptor
        self.value = value
        self.expected = predicate_names(descriptor)
        super().__init__(f"Return value: expected {describe(descriptor)}, got {shape_of(value)}")


class ConfigurationError(ValueError):
    """Invalid descriptor declaration or unknown predicate name."""
    pass
