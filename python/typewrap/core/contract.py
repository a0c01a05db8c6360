"""Normalization of descriptor declarations into a single contract."""

import inspect
import warnings
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple

from ..errors import ConfigurationError
from ..types.constructs import TypeDescriptor, as_descriptor
from .registry import PredicateRegistry
from .signature_parser import is_signature, parse_signature
from .validator import check_resolvable


@dataclass(frozen=True)
class Contract:
    """Parameter descriptors by position plus an optional return descriptor."""
    params: Tuple[TypeDescriptor, ...]
    returns: Optional[TypeDescriptor] = None
    param_names: Tuple[Optional[str], ...] = ()
    keywords: Tuple[Optional[str], ...] = ()

    def name_at(self, index: int) -> Optional[str]:
        return self.param_names[index] if index < len(self.param_names) else None

    def keyword_at(self, index: int) -> Optional[str]:
        return self.keywords[index] if index < len(self.keywords) else None

    def __str__(self) -> str:
        params_str = ", ".join(str(p) for p in self.params)
        if self.returns is None:
            return f"({params_str})"
        return f"({params_str}) -> {self.returns}"


def build_contract(
    func: Callable[..., Any],
    descriptors: Sequence[Any],
    returns: Any = None,
    registry: Optional[PredicateRegistry] = None,
) -> Contract:
    """
    Turn any accepted declaration into a ``Contract``.

    Declarations:
        build_contract(f, ["number", "number"])                  # trailing
        build_contract(f, [["number", "number"], "number"])      # list + return
        build_contract(f, ["(number, number) -> number"])        # signature

    Raises:
        ConfigurationError: malformed or ambiguous declaration, or an
            unknown predicate name
    """
    if not callable(func):
        raise ConfigurationError(f"Cannot wrap non-callable {func!r}")

    descriptors = list(descriptors)
    trailing = False

    if len(descriptors) == 1 and isinstance(descriptors[0], str) and is_signature(descriptors[0]):
        if returns is not None:
            raise ConfigurationError("A signature string already declares the return; drop returns=")
        sig = parse_signature(descriptors[0])
        params, ret = list(sig.params), sig.return_type

    elif descriptors and isinstance(descriptors[0], (list, tuple)):
        if len(descriptors) > 2:
            raise ConfigurationError(
                f"List form takes one return descriptor after the list, got {len(descriptors) - 1}"
            )
        params = [as_descriptor(d) for d in descriptors[0]]
        ret = returns
        if len(descriptors) == 2:
            if returns is not None:
                raise ConfigurationError("Return descriptor given both positionally and as returns=")
            ret = descriptors[1]
            if isinstance(ret, (list, tuple)):
                raise ConfigurationError(f"Return descriptor must be a single descriptor, got {ret!r}")

    else:
        for d in descriptors:
            if isinstance(d, (list, tuple)):
                raise ConfigurationError(
                    "A descriptor list must be the first and only parameter declaration"
                )
            if isinstance(d, str) and is_signature(d):
                raise ConfigurationError(f"Signature string '{d}' cannot be mixed with other descriptors")
        params = [as_descriptor(d) for d in descriptors]
        ret = returns
        trailing = True

    ret = as_descriptor(ret) if ret is not None else None

    names, keywords, variadic = _positional_params(func)
    if names is not None and not variadic:
        _check_arity(func, params, names, trailing)

    for descriptor in params:
        check_resolvable(descriptor, registry)
    if ret is not None:
        check_resolvable(ret, registry)

    return Contract(
        params=tuple(params),
        returns=ret,
        param_names=tuple(names or ()),
        keywords=tuple(keywords or ()),
    )


def _positional_params(func: Callable[..., Any]):
    """Names of positional parameters, their keyword names, and whether ``*args`` is taken."""
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return None, None, True

    names: List[str] = []
    keywords: List[Optional[str]] = []
    variadic = False
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.POSITIONAL_ONLY:
            names.append(param.name)
            keywords.append(None)
        elif param.kind is inspect.Parameter.POSITIONAL_OR_KEYWORD:
            names.append(param.name)
            keywords.append(param.name)
        elif param.kind is inspect.Parameter.VAR_POSITIONAL:
            variadic = True
    return names, keywords, variadic


def _check_arity(func: Callable[..., Any], params: List[TypeDescriptor], names: List[str], trailing: bool) -> None:
    excess = len(params) - len(names)
    if excess <= 0:
        return

    func_name = getattr(func, "__qualname__", repr(func))
    if trailing and excess == 1:
        raise ConfigurationError(
            f"{func_name} takes {len(names)} positional parameter(s) but {len(params)} descriptors "
            f"were given; if the last one is the return descriptor, use wrap(func, [params...], ret) "
            f"or returns="
        )
    warnings.warn(
        f"{func_name} takes {len(names)} positional parameter(s) but {len(params)} descriptors were given"
    )
