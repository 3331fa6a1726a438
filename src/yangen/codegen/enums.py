# Copyright 2026 Yangen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generation of enumeration types and the global enumeration lookup table.

Every enumeration or identity base becomes an ``IntEnum`` deriving from
:class:`yangen.runtime.GeneratedEnum`. Codes are assigned deterministically:

* **Enumerations** keep their declaration order; values are numbered from 1.
* **Identity bases** are unordered; values are sorted by name (then by
  defining module) before being numbered from 1, so that repeated runs
  produce identical code whatever the input order.

Code 0 is always ``UNSET``: the value was not explicitly set.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field

from yangen.codegen.errors import EnumGenerationError
from yangen.codegen.naming import safe_enum_name
from yangen.model.ir import EnumSource
from yangen.model.schema import Identity, YangKind
from yangen.runtime import EnumDefinition

# ###############
# Public Interface
# ###############

UNSET_NAME = "UNSET"

ENUM_MAP_NAME = "ENUM_MAP"


@dataclass(frozen=True)
class GeneratedEnumCode:
    """Generated code for one enumeration.

    Attributes:
        name: Name of the enumeration, without the ``E_`` prefix.
        const_def: The enumeration class.
        value_map: Display metadata of each assigned code (``UNSET`` excluded).
    """

    name: str
    const_def: str
    value_map: dict[int, EnumDefinition] = field(default_factory=dict)

    @property
    def type_name(self) -> str:
        return enum_type_name(self.name)


def enum_type_name(name: str) -> str:
    """Return the name of the generated enumeration class for *name*."""
    return f"E_{name}"


def emit_enum(source: EnumSource) -> GeneratedEnumCode:
    """Generate the enumeration class and code table for *source*.

    Raises:
        EnumGenerationError: If *source* is not an enumeration or identityref,
            or two values cannot be given distinct member names.
    """
    kind = source.type.kind
    if kind is YangKind.ENUMERATION:
        entries = [(safe_enum_name(v), EnumDefinition(name=v)) for v in source.type.enum_values]
    elif kind is YangKind.IDENTITYREF:
        if source.type.identity_base is None:
            raise EnumGenerationError(f"Identityref '{source.name}' has no identity base")
        entries = _identity_entries(source.type.identity_base.values)
    else:
        raise EnumGenerationError(f"Cannot generate an enumeration for '{source.name}' of type '{kind.value}'")

    _check_member_names(source.name, [member for member, _ in entries])

    type_name = enum_type_name(source.name)
    lines = [
        f"class {type_name}(GeneratedEnum):",
        f'    """{type_name} is a derived int type which is used to represent',
        f"    the enumerated node {source.name}. An additional value named",
        f"    {UNSET_NAME} is added to the enumeration which is used as the nil value,",
        "    indicating that the enumeration was not explicitly set by the program",
        "    importing the generated structures.",
        '    """',
        "",
        f"    # {UNSET_NAME} corresponds to the value {UNSET_NAME} of {source.name}",
        f"    {UNSET_NAME} = 0",
    ]
    value_map: dict[int, EnumDefinition] = {}
    for code, (member, definition) in enumerate(entries, start=1):
        lines.append(f"    # {member} corresponds to the value {definition.name} of {source.name}")
        lines.append(f"    {member} = {code}")
        value_map[code] = definition
    lines += [
        "",
        f"    def enum_map(self) -> dict[str, dict[int, EnumDefinition]]:",
        f'        """Return the value lookup map associated with {source.name}."""',
        f"        return {ENUM_MAP_NAME}",
    ]
    return GeneratedEnumCode(name=source.name, const_def="\n".join(lines) + "\n", value_map=value_map)


def emit_registry(tables: Mapping[str, Mapping[int, EnumDefinition]]) -> str:
    """Merge per-enumeration code tables into the global ``ENUM_MAP``.

    Args:
        tables: Code table of each enumeration, keyed by enumeration name
            (without the ``E_`` prefix).

    Returns:
        The ``ENUM_MAP`` assignment, keyed by generated class name. Class
        names and codes are sorted, so the text does not depend on the
        iteration order of *tables*.
    """
    lines = [
        f"# {ENUM_MAP_NAME} is a mapping, keyed by the name of the type defined for each",
        "# enum in the generated code, which provides a mapping between the constant int",
        "# value of each value of the enumeration, and the string that is used to",
        "# represent it in the YANG schema.",
        f"{ENUM_MAP_NAME}: dict[str, dict[int, EnumDefinition]] = {{",
    ]
    for name in sorted(tables):
        codes = tables[name]
        lines.append(f"    {json.dumps(enum_type_name(name))}: {{")
        for code in sorted(codes):
            lines.append(f"        {code}: {_definition_literal(codes[code])},")
        lines.append("    },")
    lines.append("}")
    return "\n".join(lines) + "\n"


# ################
# Implementation
# ################

# Methods defined on every generated enumeration, and names Enum refuses as members.
_RESERVED_MEMBERS = frozenset({"enum_map", "is_generated_enum", "mro"})


def _identity_entries(values: list[Identity]) -> list[tuple[str, EnumDefinition]]:
    """Return member names and definitions of identities in code order.

    Duplicate (name, module) pairs are dropped. Identities sharing a name
    across modules are kept apart by qualifying their member names with the
    defining module.
    """
    unique = sorted({(v.name, v.module) for v in values})
    counts: dict[str, int] = {}
    for name, _ in unique:
        member = safe_enum_name(name)
        counts[member] = counts.get(member, 0) + 1

    entries: list[tuple[str, EnumDefinition]] = []
    for name, module in unique:
        member = safe_enum_name(name)
        if counts[member] > 1:
            member = safe_enum_name(f"{module}_{name}")
        entries.append((member, EnumDefinition(name=name, defining_module=module)))
    return entries


def _check_member_names(enum_name: str, members: list[str]) -> None:
    seen = {UNSET_NAME}
    for member in members:
        if member in _RESERVED_MEMBERS:
            raise EnumGenerationError(
                f"Value '{member}' of enumeration '{enum_name}' clashes with a member of the generated class"
            )
        if member in seen:
            raise EnumGenerationError(f"Value '{member}' of enumeration '{enum_name}' is defined more than once")
        seen.add(member)


def _definition_literal(definition: EnumDefinition) -> str:
    if definition.defining_module:
        return (
            f"EnumDefinition(name={json.dumps(definition.name)},"
            f" defining_module={json.dumps(definition.defining_module)})"
        )
    return f"EnumDefinition(name={json.dumps(definition.name)})"
