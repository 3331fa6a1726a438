# Copyright 2026 Yangen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Mapping of schema leaf types to native Python types."""

from __future__ import annotations

from collections.abc import Callable

from yangen.codegen.errors import TypeMappingError
from yangen.model.ir import MappedType
from yangen.model.schema import LeafType, YangKind

# ###############
# Public Interface
# ###############

# Either one name for every enumerated type of a leaf, or a lookup returning
# the name of a given enumeration or identityref type.
EnumNames = str | Callable[[LeafType], str | None] | None


def map_type(leaf_type: LeafType, *, enum_name: EnumNames = None) -> MappedType | list[MappedType]:
    """Resolve a leaf type to its native type.

    Union types resolve to the list of their branch types in declaration
    order. Nested unions are flattened in place and a native type that was
    already contributed by an earlier branch is skipped, so the first branch
    of each native type wins. The order is never changed: it becomes the
    order in which generated converters test an input value.

    Args:
        leaf_type: The resolved type of a leaf or leaf-list.
        enum_name: Name assigned to the enumeration or identity base of the
            leaf, or a callable returning the name for a given
            ``enumeration`` or ``identityref`` type. A callable is needed when
            a union has several enumerated branches. A name is required for
            every enumerated type, including union branches.

    Returns:
        A :class:`MappedType`, or a list of them for a union.

    Raises:
        TypeMappingError: On a dangling leafref or a missing enum name.
    """
    resolved = _follow_leafref(leaf_type)
    if resolved.kind is YangKind.UNION:
        branches: list[MappedType] = []
        _flatten_union(resolved, enum_name, branches, set())
        return branches
    return _map_scalar(resolved, enum_name)


def native_type_names(branches: list[MappedType]) -> list[str]:
    """Return the native type names of *branches*, in order."""
    return [b.native_type for b in branches]


# ################
# Implementation
# ################

_MAX_LEAFREF_HOPS = 64

_INTEGER_RANGES: dict[YangKind, tuple[int, int]] = {
    YangKind.INT8: (-(2**7), 2**7 - 1),
    YangKind.INT16: (-(2**15), 2**15 - 1),
    YangKind.INT32: (-(2**31), 2**31 - 1),
    YangKind.INT64: (-(2**63), 2**63 - 1),
    YangKind.UINT8: (0, 2**8 - 1),
    YangKind.UINT16: (0, 2**16 - 1),
    YangKind.UINT32: (0, 2**32 - 1),
    YangKind.UINT64: (0, 2**64 - 1),
}

_STRING = MappedType(native_type="string", python_type="str", check="isinstance({v}, str)")
_BOOL = MappedType(native_type="bool", python_type="bool", check="isinstance({v}, bool)")
_FLOAT = MappedType(native_type="float64", python_type="float", check="isinstance({v}, float)")
_BYTES = MappedType(native_type="bytes", python_type="bytes", check="isinstance({v}, bytes)")

_SIMPLE_TYPES: dict[YangKind, MappedType] = {
    YangKind.STRING: _STRING,
    YangKind.BITS: _STRING,
    YangKind.INSTANCE_IDENTIFIER: _STRING,
    YangKind.BOOLEAN: _BOOL,
    YangKind.EMPTY: _BOOL,
    YangKind.DECIMAL64: _FLOAT,
    YangKind.BINARY: _BYTES,
}


def _follow_leafref(leaf_type: LeafType) -> LeafType:
    """Return the type a (possibly chained) leafref ultimately refers to."""
    current = leaf_type
    for _ in range(_MAX_LEAFREF_HOPS):
        if current.kind is not YangKind.LEAFREF:
            return current
        if current.leafref_target is None:
            raise TypeMappingError("Leafref type has no resolved target type")
        current = current.leafref_target
    raise TypeMappingError(f"Leafref chain exceeds {_MAX_LEAFREF_HOPS} hops")


def _map_scalar(leaf_type: LeafType, enum_name: EnumNames) -> MappedType:
    kind = leaf_type.kind
    if kind in _INTEGER_RANGES:
        low, high = _INTEGER_RANGES[kind]
        return MappedType(
            native_type=kind.value,
            python_type="int",
            check=f"type({{v}}) is int and {low} <= {{v}} <= {high}",
        )
    if kind in _SIMPLE_TYPES:
        return _SIMPLE_TYPES[kind]
    if kind in (YangKind.ENUMERATION, YangKind.IDENTITYREF):
        name = enum_name(leaf_type) if callable(enum_name) else enum_name
        if not name:
            raise TypeMappingError(f"No enumeration name assigned for {kind.value} type")
        type_name = f"E_{name}"
        return MappedType(
            native_type=type_name,
            python_type=type_name,
            check=f"isinstance({{v}}, {type_name})",
            is_enum=True,
        )
    raise TypeMappingError(f"Unsupported leaf type '{kind.value}'")


def _flatten_union(
    leaf_type: LeafType,
    enum_name: EnumNames,
    branches: list[MappedType],
    seen: set[str],
) -> None:
    """Append the mapped branches of *leaf_type* to *branches*, depth first."""
    for member in leaf_type.union_types:
        resolved = _follow_leafref(member)
        if resolved.kind is YangKind.UNION:
            _flatten_union(resolved, enum_name, branches, seen)
            continue
        mapped = _map_scalar(resolved, enum_name)
        if mapped.native_type in seen:
            continue
        seen.add(mapped.native_type)
        branches.append(mapped)
