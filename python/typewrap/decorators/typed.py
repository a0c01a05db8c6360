"""Validating wrapper for argument and return descriptors."""

import functools
import inspect
from typing import Any, Callable, Dict, Optional, Tuple, TypeVar, cast

from ..core.contract import Contract, build_contract
from ..core.registry import PredicateRegistry, _registry
from ..core.validator import ABSENT, matches
from ..errors import ParameterTypeError, ReturnTypeError

F = TypeVar('F', bound=Callable[..., Any])


def wrap(func: F, *descriptors: Any, returns: Any = None, registry: Optional[PredicateRegistry] = None) -> F:
    """
    Wrap ``func`` so every call is checked against the declared descriptors.

    Args:
        func: Function to wrap
        *descriptors: Parameter descriptors, one per position; or a single
            list of them optionally followed by the return descriptor; or a
            single signature string
        returns: Return descriptor
        registry: Predicate registry, defaults to the builtin one

    Example:
        add = wrap(lambda x, y: x + y, "number", "number")
        add = wrap(lambda x, y: x + y, ["number", "number"], "number")
        add = wrap(lambda x, y: x + y, "(number, number) -> number")

    Raises:
        ConfigurationError: at wrap time, for malformed declarations
        ParameterTypeError: at call time, before ``func`` runs
        ReturnTypeError: at call time, after ``func`` ran
    """
    if registry is None:
        registry = _registry

    contract = build_contract(func, descriptors, returns, registry)

    if inspect.iscoroutinefunction(func):
        async def checked_call(args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> Any:
            result = await func(*args, **kwargs)
            validate_return(contract, result, registry)
            return result

        # Arguments are checked when called, not when awaited
        @functools.wraps(func)
        def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            validate_args(contract, args, kwargs, registry)
            return checked_call(args, kwargs)

        if hasattr(inspect, "markcoroutinefunction"):
            inspect.markcoroutinefunction(async_wrapper)

        wrapper = async_wrapper
    else:
        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            validate_args(contract, args, kwargs, registry)
            result = func(*args, **kwargs)
            validate_return(contract, result, registry)
            return result

        wrapper = sync_wrapper

    # Preserve contract info
    wrapper.__typewrap_contract__ = contract
    wrapper.__typewrap_registry__ = registry

    return cast(F, wrapper)


def typed(*descriptors: Any, returns: Any = None, registry: Optional[PredicateRegistry] = None) -> Callable[[F], F]:
    """
    Decorator form of :func:`wrap`.

    Example:
        @typed("number", "number", returns="number")
        def add(x, y):
            return x + y

        @typed("(string | number, string | number) -> number")
        def complex_add(a, b):
            ...
    """
    def decorator(func: F) -> F:
        return wrap(func, *descriptors, returns=returns, registry=registry)

    return decorator


def validate_args(contract: Contract, args: Tuple[Any, ...], kwargs: Dict[str, Any], registry: PredicateRegistry) -> None:
    """Validate call arguments, stopping at the first failing position."""
    for i, descriptor in enumerate(contract.params):
        if i < len(args):
            value = args[i]
        else:
            keyword = contract.keyword_at(i)
            value = kwargs.get(keyword, ABSENT) if keyword else ABSENT

        if not matches(descriptor, value, registry):
            raise ParameterTypeError(i, descriptor, value, name=contract.name_at(i))


def validate_return(contract: Contract, value: Any, registry: PredicateRegistry) -> None:
    """Validate a return value, if the contract declares one."""
    if contract.returns is None:
        return
    if not matches(contract.returns, value, registry):
        raise ReturnTypeError(contract.returns, value)
