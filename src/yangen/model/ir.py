# Copyright 2026 Yangen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Intermediate representation used by the code generator."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict

from yangen.model.schema import LeafType, SchemaNode

# ###############
# Public Interface
# ###############


class MappedType(BaseModel):
    """The native type a leaf resolves to.

    Attributes:
        native_type: Schema-level name of the native type (``int8``,
            ``string``, ``E_Colour``). Used to name union variants and in
            conversion error messages.
        python_type: Annotation text used in generated code.
        check: Predicate template evaluated by union converters. ``{v}`` is
            replaced with the name of the value under test.
        is_enum: True when the type is a generated enumeration.
    """

    model_config = ConfigDict(frozen=True)

    native_type: str
    python_type: str
    check: str
    is_enum: bool = False


@dataclass
class ListAttr:
    """Key metadata of a list directory.

    Attributes:
        keys: Resolved native type of each key leaf, by leaf name.
        key_elems: Key leaves in the declared key order. This order fixes the
            field order of composite key records and the parameter order of
            list constructors.
    """

    keys: dict[str, MappedType] = field(default_factory=dict)
    key_elems: list[SchemaNode] = field(default_factory=list)


@dataclass
class Directory:
    """A container, list or module that becomes a generated record.

    Attributes:
        name: Unique name assigned by the naming pass.
        fields: Schema nodes that become fields of the record, by name.
        path: Ancestor names from the tree root (``""``) to this directory.
        list_attr: Key metadata; present when the directory is a list element.
    """

    name: str
    fields: dict[str, SchemaNode] = field(default_factory=dict)
    path: list[str] = field(default_factory=list)
    list_attr: ListAttr | None = None

    @property
    def schema_path(self) -> str:
        """Return the ``/``-joined path of the directory."""
        return "/".join(self.path)


@dataclass(frozen=True)
class EnumSource:
    """An enumeration or identity base to be generated as an enum type.

    Attributes:
        name: Name assigned by the naming pass, without the ``E_`` prefix.
        type: The ``enumeration`` or ``identityref`` leaf type.
    """

    name: str
    type: LeafType


@dataclass(frozen=True)
class NamingRegistry:
    """Read-only table of unique names assigned before generation starts.

    Directory names are keyed by the ``/``-joined schema path of the
    container or list. Enumeration names are keyed by the path of the leaf
    that declares the enumeration, identity bases by ``/<module>/<base>``.
    A union with several enumeration branches keys the second and later ones
    by ``<leaf path>#<n>``, counting from 2 in declaration order.
    """

    directories: Mapping[str, str] = field(default_factory=dict)
    enums: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "directories", MappingProxyType(dict(self.directories)))
        object.__setattr__(self, "enums", MappingProxyType(dict(self.enums)))

    def directory_name(self, path: str) -> str | None:
        """Return the name assigned to the directory at *path*, if any."""
        return self.directories.get(path)

    def enum_name(self, key: str) -> str | None:
        """Return the name assigned to the enumeration keyed by *key*, if any."""
        return self.enums.get(key)
