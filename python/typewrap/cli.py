"""CLI entry point for typewrap."""

import ast
import sys
import argparse

from typewrap.core.registry import _registry
from typewrap.core.validator import check_resolvable, matches, shape_of
from typewrap.errors import ConfigurationError
from typewrap.types import as_descriptor


def _parse_value(text: str):
    try:
        return ast.literal_eval(text)
    except (ValueError, SyntaxError):
        return text


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="typewrap",
        description="typewrap: runtime type descriptors for function boundaries"
    )
    parser.add_argument("command", choices=["match", "predicates", "version"], help="Command to run")
    parser.add_argument("descriptor", nargs="?", help="Descriptor, e.g. 'number?' or 'string | number'")
    parser.add_argument("value", nargs="?", help="Python literal to check; unparseable text is taken as a string")

    args = parser.parse_args(argv)

    if args.command == "version":
        from typewrap import __version__
        print(f"typewrap version {__version__}")
        return 0

    if args.command == "predicates":
        for name in _registry.names():
            print(name)
        return 0

    if args.descriptor is None or args.value is None:
        print("Error: match requires a descriptor and a value", file=sys.stderr)
        return 2

    value = _parse_value(args.value)
    try:
        descriptor = as_descriptor(args.descriptor)
        check_resolvable(descriptor)
        ok = matches(descriptor, value)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if ok:
        print(f"✓ {value!r} matches {descriptor}")
        return 0

    print(f"✗ {value!r} ({shape_of(value)}) does not match {descriptor}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
