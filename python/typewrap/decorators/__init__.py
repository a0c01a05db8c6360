"""Function wrappers enforcing type descriptors."""

from .typed import typed, wrap

__all__ = ["typed", "wrap"]
