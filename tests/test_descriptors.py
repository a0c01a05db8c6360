"""Test the type descriptor model."""

import dataclasses

import pytest

from typewrap import ConfigurationError, OneOf, Primitive, as_descriptor, one_of, optional
from typewrap import types as t


@pytest.mark.unit
@pytest.mark.descriptors
class TestPrimitive:
    """Test primitive descriptors."""

    def test_required_by_default(self):
        assert Primitive("number").required is True

    def test_optional_returns_new_descriptor(self):
        base = Primitive("number")
        opt = base.optional

        assert opt == Primitive("number", required=False)
        assert base.required is True
        assert opt is not base

    def test_required_flag_distinguishes_descriptors(self):
        assert Primitive("number") != Primitive("number", required=False)
        assert len({Primitive("number"), Primitive("number", required=False)}) == 2

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Primitive("number").required = False

    def test_empty_name_rejected(self):
        with pytest.raises(ConfigurationError):
            Primitive("")

    @pytest.mark.parametrize("flag", ["no", 0, None])
    def test_non_bool_required_rejected(self, flag):
        with pytest.raises(ConfigurationError, match="bool"):
            Primitive("number", required=flag)

    def test_str(self):
        assert str(Primitive("number")) == "number"
        assert str(Primitive("number", required=False)) == "number?"

    def test_named_descriptors(self):
        assert t.number == Primitive("number")
        assert t.string.optional == Primitive("string", required=False)
        # Shared module-level descriptor is untouched
        assert t.string.required is True


@pytest.mark.unit
@pytest.mark.descriptors
class TestOneOf:
    """Test union descriptors."""

    def test_one_of_normalizes_members(self):
        union = one_of("string", t.number, "boolean?")

        assert union.members == (
            Primitive("string"),
            Primitive("number"),
            Primitive("boolean", required=False),
        )

    def test_members_stored_as_tuple(self):
        union = OneOf([Primitive("string")])
        assert isinstance(union.members, tuple)

    @pytest.mark.parametrize("members", ["string", {"anyOf": ["string"]}])
    def test_members_must_be_a_sequence_of_descriptors(self, members):
        with pytest.raises(ConfigurationError, match="sequence of descriptors"):
            OneOf(members)

    def test_or_operator(self):
        assert t.string | t.number == OneOf((t.string, t.number))
        assert (t.string | t.number) | "boolean" == OneOf((t.string, t.number, t.boolean))

    def test_empty_union(self):
        assert OneOf().members == ()
        assert str(OneOf()) == "<nothing>"

    def test_str(self):
        assert str(one_of("string", "number?")) == "string | number?"

    def test_union_cannot_be_optional(self):
        with pytest.raises(ConfigurationError, match="members"):
            optional(one_of("string", "number"))

    def test_optional_helper_on_primitive(self):
        assert optional("number") == Primitive("number", required=False)


@pytest.mark.unit
@pytest.mark.descriptors
class TestAsDescriptor:
    """Test normalization of descriptor spellings."""

    def test_descriptor_passthrough(self):
        d = Primitive("number")
        assert as_descriptor(d) is d

    def test_string(self):
        assert as_descriptor("number") == Primitive("number")
        assert as_descriptor("number?") == Primitive("number", required=False)
        assert as_descriptor("string | number") == one_of("string", "number")

    def test_any_of_mapping(self):
        d = as_descriptor({"anyOf": ["string", "number"]})

        assert d == OneOf((Primitive("string"), Primitive("number")))
        assert all(m.required for m in d.members)

    def test_any_of_empty(self):
        assert as_descriptor({"anyOf": []}) == OneOf()

    def test_any_of_extra_keys_rejected(self):
        with pytest.raises(ConfigurationError, match="anyOf"):
            as_descriptor({"anyOf": ["string"], "required": False})

    def test_any_of_not_a_list(self):
        with pytest.raises(ConfigurationError):
            as_descriptor({"anyOf": "string"})

    def test_any_of_non_name_member(self):
        with pytest.raises(ConfigurationError):
            as_descriptor({"anyOf": ["string", 3]})

    @pytest.mark.parametrize("bad", [None, 42, int, object()])
    def test_unsupported_spellings(self, bad):
        with pytest.raises(ConfigurationError, match="Not a type descriptor"):
            as_descriptor(bad)
