"""Type descriptors.

Named descriptors for the builtin predicates, so declarations read as
``number``, ``string.optional`` or ``number | string``.
"""

from .constructs import Primitive, OneOf, TypeDescriptor, one_of, optional, as_descriptor

any_ = Primitive('any')
number = Primitive('number')
integer = Primitive('integer')
string = Primitive('string')
boolean = Primitive('boolean')
bytes_ = Primitive('bytes')
list_ = Primitive('list')
tuple_ = Primitive('tuple')
dict_ = Primitive('dict')
callable_ = Primitive('callable')

__all__ = [
    # Constructs
    "Primitive",
    "OneOf",
    "TypeDescriptor",
    "one_of",
    "optional",
    "as_descriptor",
    # Named descriptors
    "any_",
    "number",
    "integer",
    "string",
    "boolean",
    "bytes_",
    "list_",
    "tuple_",
    "dict_",
    "callable_",
]
