"""Predicate registry: resolves predicate names to check functions."""

import re
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional

from ..errors import ConfigurationError
from .predicates import BUILTIN_PREDICATES

Predicate = Callable[[Any], bool]

NAME_RE = re.compile(r"^[A-Za-z_][\w.\-]*$")


class PredicateRegistry:
    """
    Mapping of predicate names to one-argument boolean functions.

    A registry is the configuration object of the validation engine. Pass one
    explicitly to ``wrap``/``typed``/``matches`` to run with a different set of
    predicates; registries never share state with each other.

    Example:
        registry = default_registry()

        @registry.register("even")
        def is_even(value):
            return isinstance(value, int) and value % 2 == 0
    """

    def __init__(self, predicates: Optional[Mapping[str, Predicate]] = None):
        self._predicates: Dict[str, Predicate] = {}
        for name, predicate in (predicates or {}).items():
            self.register(name, predicate)

    def register(self, name: str, predicate: Optional[Predicate] = None):
        """Register ``predicate`` under ``name``, or return a decorator that does."""
        # Must stay reachable from string shorthand
        if not isinstance(name, str) or not NAME_RE.match(name):
            raise ConfigurationError(
                f"Predicate name must be an identifier such as 'even' or 'my.type', got {name!r}"
            )

        if predicate is None:
            def decorator(func: Predicate) -> Predicate:
                self.register(name, func)
                return func
            return decorator

        if not callable(predicate):
            raise ConfigurationError(f"Predicate '{name}' is not callable: {predicate!r}")

        self._predicates[name] = predicate
        return predicate

    def resolve(self, name: str) -> Predicate:
        try:
            return self._predicates[name]
        except KeyError:
            raise ConfigurationError(
                f"Unknown predicate '{name}' (known: {', '.join(self.names()) or 'none'})"
            ) from None

    def names(self) -> List[str]:
        return sorted(self._predicates)

    def copy(self) -> "PredicateRegistry":
        return PredicateRegistry(self._predicates)

    def __contains__(self, name: object) -> bool:
        return name in self._predicates

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._predicates)

    def __repr__(self) -> str:
        return f"PredicateRegistry({', '.join(self.names())})"


def default_registry() -> PredicateRegistry:
    """Create a registry preloaded with the builtin predicates."""
    return PredicateRegistry(BUILTIN_PREDICATES)


# Registry used when none is passed explicitly
_registry = default_registry()
