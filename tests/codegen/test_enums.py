# Copyright 2026 Yangen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the generation of enumerations and the enumeration lookup table."""

from typing import Any

import pytest

from yangen import runtime
from yangen.codegen.enums import emit_enum, emit_registry, enum_type_name
from yangen.codegen.errors import EnumGenerationError
from yangen.model.ir import EnumSource
from yangen.model.schema import Identity, IdentityBase, LeafType, YangKind
from yangen.runtime import EnumDefinition

# ###############
# Test Helpers
# ###############


def _enumeration(name: str, values: list[str]) -> EnumSource:
    """Create an enumeration source with values in declaration order."""
    return EnumSource(name=name, type=LeafType(kind=YangKind.ENUMERATION, enum_values=values))


def _identityref(name: str, identities: list[tuple[str, str]]) -> EnumSource:
    """Create an identityref source from (name, module) pairs."""
    base = IdentityBase(
        name="base",
        module="base-module",
        values=[Identity(name=n, module=m) for n, m in identities],
    )
    return EnumSource(name=name, type=LeafType(kind=YangKind.IDENTITYREF, identity_base=base))


def _load(*snippets: str, enum_map: dict[str, Any] | None = None) -> dict[str, Any]:
    """Execute generated snippets and return the resulting namespace."""
    namespace: dict[str, Any] = {
        "__name__": "generated",
        "GeneratedEnum": runtime.GeneratedEnum,
        "EnumDefinition": runtime.EnumDefinition,
        "ENUM_MAP": enum_map if enum_map is not None else {},
    }
    exec(compile("\n\n".join(snippets), "<generated>", "exec"), namespace)
    return namespace


# ###############
# Enumerations
# ###############


class TestEnumeration:
    def test_generated_class(self) -> None:
        got = emit_enum(_enumeration("EnumeratedValueTwo", ["SPEED_2.5G", "SPEED-40G"]))
        want = '''class E_EnumeratedValueTwo(GeneratedEnum):
    """E_EnumeratedValueTwo is a derived int type which is used to represent
    the enumerated node EnumeratedValueTwo. An additional value named
    UNSET is added to the enumeration which is used as the nil value,
    indicating that the enumeration was not explicitly set by the program
    importing the generated structures.
    """

    # UNSET corresponds to the value UNSET of EnumeratedValueTwo
    UNSET = 0
    # SPEED_2_5G corresponds to the value SPEED_2.5G of EnumeratedValueTwo
    SPEED_2_5G = 1
    # SPEED_40G corresponds to the value SPEED-40G of EnumeratedValueTwo
    SPEED_40G = 2

    def enum_map(self) -> dict[str, dict[int, EnumDefinition]]:
        """Return the value lookup map associated with EnumeratedValueTwo."""
        return ENUM_MAP
'''
        assert got.name == "EnumeratedValueTwo"
        assert got.type_name == "E_EnumeratedValueTwo"
        assert got.const_def == want
        assert got.value_map == {1: EnumDefinition(name="SPEED_2.5G"), 2: EnumDefinition(name="SPEED-40G")}

    def test_codes_follow_declaration_order(self) -> None:
        got = emit_enum(_enumeration("Order", ["B", "A", "C"]))
        ns = _load(got.const_def)
        enum_cls = ns["E_Order"]
        assert [(m.name, m.value) for m in enum_cls] == [("UNSET", 0), ("B", 1), ("A", 2), ("C", 3)]
        assert issubclass(enum_cls, runtime.GeneratedEnum)
        assert enum_cls.A.is_generated_enum()

    def test_single_value(self) -> None:
        got = emit_enum(_enumeration("Single", ["ONLY"]))
        assert got.value_map == {1: EnumDefinition(name="ONLY")}
        assert "    ONLY = 1\n" in got.const_def

    def test_value_starting_with_digit(self) -> None:
        got = emit_enum(_enumeration("Speed", ["10G", "100G"]))
        ns = _load(got.const_def)
        assert ns["E_Speed"].V10G == 1
        assert got.value_map[2].name == "100G"

    def test_values_with_same_member_name(self) -> None:
        with pytest.raises(EnumGenerationError, match="more than once"):
            emit_enum(_enumeration("Clash", ["a-b", "a.b"]))

    def test_value_named_unset(self) -> None:
        with pytest.raises(EnumGenerationError, match="UNSET"):
            emit_enum(_enumeration("Clash", ["SET", "UNSET"]))

    @pytest.mark.parametrize("value", ["enum_map", "is_generated_enum", "mro"])
    def test_value_named_like_class_member(self, value: str) -> None:
        with pytest.raises(EnumGenerationError, match="clashes with a member of the generated class"):
            emit_enum(_enumeration("Clash", ["OK", value]))

    def test_enum_map_returns_registry(self) -> None:
        got = emit_enum(_enumeration("Colour", ["RED"]))
        registry = {"E_Colour": {1: EnumDefinition(name="RED")}}
        ns = _load(got.const_def, enum_map=registry)
        assert ns["E_Colour"].RED.enum_map() is registry

    def test_unsupported_kind(self) -> None:
        with pytest.raises(EnumGenerationError, match="string"):
            emit_enum(EnumSource(name="Str", type=LeafType(kind=YangKind.STRING)))


# ###############
# Identities
# ###############


class TestIdentityref:
    def test_codes_are_sorted_by_name(self) -> None:
        identities = [("VALUE_A", "mod"), ("VALUE_C", "mod2"), ("VALUE_B", "mod3")]
        got = emit_enum(_identityref("Base", identities))
        assert got.value_map == {
            1: EnumDefinition(name="VALUE_A", defining_module="mod"),
            2: EnumDefinition(name="VALUE_B", defining_module="mod3"),
            3: EnumDefinition(name="VALUE_C", defining_module="mod2"),
        }
        assert "    VALUE_A = 1\n" in got.const_def
        assert "    VALUE_B = 2\n" in got.const_def
        assert "    VALUE_C = 3\n" in got.const_def

    def test_input_order_does_not_matter(self) -> None:
        identities = [("VALUE_A", "mod"), ("VALUE_C", "mod2"), ("VALUE_B", "mod3")]
        first = emit_enum(_identityref("Base", identities))
        second = emit_enum(_identityref("Base", list(reversed(identities))))
        assert first == second

    def test_same_name_in_different_modules(self) -> None:
        got = emit_enum(_identityref("Base", [("ETH", "mod-b"), ("ETH", "mod-a"), ("ATM", "mod-a")]))
        ns = _load(got.const_def)
        enum_cls = ns["E_Base"]
        assert [(m.name, m.value) for m in enum_cls] == [
            ("UNSET", 0),
            ("ATM", 1),
            ("mod_a_ETH", 2),
            ("mod_b_ETH", 3),
        ]
        assert got.value_map[2] == EnumDefinition(name="ETH", defining_module="mod-a")
        assert got.value_map[3] == EnumDefinition(name="ETH", defining_module="mod-b")

    def test_repeated_identity_is_listed_once(self) -> None:
        got = emit_enum(_identityref("Base", [("X", "m"), ("X", "m")]))
        assert got.value_map == {1: EnumDefinition(name="X", defining_module="m")}

    def test_missing_identity_base(self) -> None:
        with pytest.raises(EnumGenerationError, match="no identity base"):
            emit_enum(EnumSource(name="Base", type=LeafType(kind=YangKind.IDENTITYREF)))

    def test_qualified_name_still_colliding(self) -> None:
        identities = [("b_c", "a"), ("c", "a_b"), ("c", "x")]
        with pytest.raises(EnumGenerationError):
            emit_enum(_identityref("Base", identities + [("a_b_c", "y")]))

    def test_identity_named_like_class_member(self) -> None:
        with pytest.raises(EnumGenerationError, match="enum_map"):
            emit_enum(_identityref("Base", [("enum_map", "m")]))


# ###############
# Lookup table
# ###############


class TestRegistry:
    def test_registry_text(self) -> None:
        tables = {
            "Speed": {2: EnumDefinition(name="SPEED-40G"), 1: EnumDefinition(name="SPEED_2.5G")},
            "Base": {1: EnumDefinition(name="VALUE_A", defining_module="mod")},
        }
        want = """# ENUM_MAP is a mapping, keyed by the name of the type defined for each
# enum in the generated code, which provides a mapping between the constant int
# value of each value of the enumeration, and the string that is used to
# represent it in the YANG schema.
ENUM_MAP: dict[str, dict[int, EnumDefinition]] = {
    "E_Base": {
        1: EnumDefinition(name="VALUE_A", defining_module="mod"),
    },
    "E_Speed": {
        1: EnumDefinition(name="SPEED_2.5G"),
        2: EnumDefinition(name="SPEED-40G"),
    },
}
"""
        assert emit_registry(tables) == want

    def test_registry_is_independent_of_input_order(self) -> None:
        a = {"A": {1: EnumDefinition(name="x")}}
        b = {"B": {1: EnumDefinition(name="y"), 2: EnumDefinition(name="z")}}
        assert emit_registry({**a, **b}) == emit_registry({**b, **a})

    def test_empty_registry(self) -> None:
        ns = _load(emit_registry({}))
        assert ns["ENUM_MAP"] == {}

    def test_registry_matches_generated_tables(self) -> None:
        colour = emit_enum(_enumeration("Colour", ["RED", "GREEN"]))
        base = emit_enum(_identityref("Base", [("X", "m")]))
        text = emit_registry({colour.name: colour.value_map, base.name: base.value_map})
        ns = _load(text)
        assert ns["ENUM_MAP"] == {
            enum_type_name("Base"): {1: EnumDefinition(name="X", defining_module="m")},
            enum_type_name("Colour"): {1: EnumDefinition(name="RED"), 2: EnumDefinition(name="GREEN")},
        }
