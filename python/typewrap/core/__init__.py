"""Core validation engine."""

from .registry import PredicateRegistry, default_registry, _registry
from .validator import ABSENT, matches, validate, describe, shape_of, predicate_names
from .signature_parser import parse_signature, parse_type, SignatureParser, TypeSignature
from .contract import Contract, build_contract

__all__ = [
    "PredicateRegistry",
    "default_registry",
    "_registry",
    "ABSENT",
    "matches",
    "validate",
    "describe",
    "shape_of",
    "predicate_names",
    "parse_signature",
    "parse_type",
    "SignatureParser",
    "TypeSignature",
    "Contract",
    "build_contract",
]
