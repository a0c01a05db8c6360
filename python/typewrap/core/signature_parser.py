"""Parser for string descriptor shorthand and whole signatures."""

from dataclasses import dataclass
from typing import List, Optional

from ..errors import ConfigurationError
from ..types.constructs import OneOf, Primitive, TypeDescriptor
from .registry import NAME_RE


@dataclass(frozen=True)
class TypeSignature:
    """Parsed function signature."""
    params: List[TypeDescriptor]
    return_type: Optional[TypeDescriptor]

    def __str__(self) -> str:
        params_str = ", ".join(str(p) for p in self.params)
        if self.return_type is None:
            return f"({params_str})"
        return f"({params_str}) -> {self.return_type}"


class SignatureParser:
    """Parser for descriptor strings."""

    def parse(self, signature: str) -> TypeSignature:
        """
        Parse a function signature string.

        Formats:
            - "(number, number) -> number"
            - "(string | number, boolean?) -> string"
            - "() -> string"
        """
        signature = signature.strip()

        if '->' not in signature:
            raise ConfigurationError(f"Invalid signature format: missing '->': {signature}")

        params_str, return_str = signature.split('->', 1)
        params_str = params_str.strip()
        return_str = return_str.strip()

        if not params_str.startswith('(') or not params_str.endswith(')'):
            raise ConfigurationError(f"Invalid parameter format: {params_str}")

        params_content = params_str[1:-1].strip()
        params = [self.parse_type(p) for p in self._split(params_content, ',')] if params_content else []

        return TypeSignature(params=params, return_type=self.parse_type(return_str))

    def parse_type(self, type_str: str) -> TypeDescriptor:
        """
        Parse a single descriptor.

        Formats:
            - "number"
            - "number?"          optional primitive
            - "string | number"  union
            - "(string | number) | boolean"
        """
        type_str = type_str.strip()
        if not type_str:
            raise ConfigurationError("Empty type descriptor")

        alternatives = self._split(type_str, '|')
        if len(alternatives) > 1:
            return OneOf(tuple(self.parse_type(alt) for alt in alternatives))

        if type_str.startswith('(') and type_str.endswith(')'):
            return self.parse_type(type_str[1:-1])

        required = True
        if type_str.endswith('?'):
            required = False
            type_str = type_str[:-1].rstrip()
            if type_str.endswith(')'):
                raise ConfigurationError(
                    f"A union cannot be optional: '{type_str}?'; mark its members instead"
                )

        if not NAME_RE.match(type_str):
            raise ConfigurationError(f"Invalid predicate name: '{type_str}'")

        return Primitive(type_str, required=required)

    def _split(self, text: str, sep: str) -> List[str]:
        """Split on ``sep`` outside parentheses."""
        parts = []
        current = ""
        depth = 0

        for char in text:
            if char == '(':
                depth += 1
                current += char
            elif char == ')':
                depth -= 1
                if depth < 0:
                    raise ConfigurationError(f"Unbalanced parentheses in '{text}'")
                current += char
            elif char == sep and depth == 0:
                parts.append(current.strip())
                current = ""
            else:
                current += char

        if depth != 0:
            raise ConfigurationError(f"Unbalanced parentheses in '{text}'")

        parts.append(current.strip())
        if any(not p for p in parts):
            raise ConfigurationError(f"Empty entry in '{text}'")
        return parts


# Singleton parser instance
_parser = SignatureParser()


def parse_signature(sig: str) -> TypeSignature:
    """Parse a function signature string."""
    return _parser.parse(sig)


def parse_type(type_str: str) -> TypeDescriptor:
    """Parse a single descriptor string."""
    return _parser.parse_type(type_str)


def is_signature(text: str) -> bool:
    return '->' in text
