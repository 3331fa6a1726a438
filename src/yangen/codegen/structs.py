# Copyright 2026 Yangen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generation of Python records for schema directories.

A directory becomes a ``@dataclass`` deriving from
:class:`yangen.runtime.GeneratedStruct`. Depending on its fields, the
generator also produces:

* composite key records for lists keyed by more than one leaf,
* ``new_<list>()`` constructors for keyed lists,
* a marker class, one variant class per branch and a ``to_<union>()``
  converter for every union leaf.

Generated text expects ``dataclass``, ``field``, the names exported by
:mod:`yangen.runtime`, the ``ytypes`` validation library and the
``SCHEMA_TREE`` mapping to be in scope, and relies on postponed evaluation of
annotations. Providing these is left to the file assembly stage.
Enumerated leaves default to their ``UNSET`` value, so enumeration classes
must be defined before the records that use them.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from yangen.codegen.errors import CodeGenerationError, MissingReferencedEntityError, TypeMappingError
from yangen.codegen.naming import camel_case, path_to_camel_case, snake_case
from yangen.codegen.paths import resolve_paths, schema_path
from yangen.codegen.types import map_type, native_type_names
from yangen.model.ir import Directory, MappedType, NamingRegistry
from yangen.model.schema import LeafType, SchemaNode, YangKind

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class GeneratedStructCode:
    """Generated code for one directory.

    Attributes:
        name: Name of the generated record.
        struct_def: Class statement, docstring and fields of the record.
        key_defs: Composite key records used by keyed lists of the record.
        methods: Remainder of the class body (constructors, converters,
            ``validate``), indented to follow ``struct_def``.
        union_defs: Marker and variant classes of the record's unions.
    """

    name: str
    struct_def: str
    key_defs: str = ""
    methods: str = ""
    union_defs: str = ""

    @property
    def class_source(self) -> str:
        """Return the complete class statement of the record."""
        return self.struct_def + self.methods


def emit_struct(
    directory: Directory,
    available: Mapping[str, Directory],
    registry: NamingRegistry,
    compress: bool,
    *,
    generate_schema: bool = False,
) -> GeneratedStructCode:
    """Generate the record for *directory*.

    Args:
        directory: The directory to generate.
        available: Every directory that can be referenced, keyed by its
            ``/``-joined schema path.
        registry: Names assigned to directories and enumerations.
        compress: Whether paths and union names are compressed.
        generate_schema: Whether a schema snapshot is attached to generated
            records. The snapshot is produced outside this module; the flag
            does not change the generated record.

    Returns:
        The generated code.

    Raises:
        PathResolutionError: If a field cannot be placed below a module.
        MissingReferencedEntityError: If a container or list field references
            a directory that is not available or has no assigned name.
        TypeMappingError: If a leaf type cannot be mapped.
    """
    return _StructEmitter(directory, available, registry, compress).emit()


# ################
# Implementation
# ################

_INDENT = "    "

# Members every generated record defines or inherits.
_BASE_MEMBERS = ("validate", "is_generated_struct")


@dataclass(frozen=True)
class _Field:
    """A record field as it appears in the dataclass body."""

    attr: str
    annotation: str
    default: str
    tag: str

    def render(self) -> str:
        return f"{_INDENT}{self.attr}: {self.annotation} = field({self.default}, metadata={_path_metadata(self.tag)})"


class _StructEmitter:
    """Generates the code for a single directory."""

    def __init__(
        self,
        directory: Directory,
        available: Mapping[str, Directory],
        registry: NamingRegistry,
        compress: bool,
    ) -> None:
        self._dir = directory
        self._available = available
        self._registry = registry
        self._compress = compress
        self._fields: list[_Field] = []
        self._key_defs: list[str] = []
        self._methods: list[str] = []
        self._union_defs: list[str] = []
        self._members: list[str] = list(_BASE_MEMBERS)

    def emit(self) -> GeneratedStructCode:
        """Generate every artifact of the directory, or raise on the first error."""
        seen_attrs: dict[str, str] = {}
        for name in sorted(self._dir.fields):
            node = self._dir.fields[name]
            paths = resolve_paths(self._dir, node, self._compress)
            tag = "|".join("/".join(p) for p in paths)
            attr = snake_case(node.name)
            if attr in seen_attrs:
                raise CodeGenerationError(
                    f"Fields '{seen_attrs[attr]}' and '{node.name}' of '{self._dir.name}'"
                    f" map to the same attribute '{attr}'"
                )
            seen_attrs[attr] = node.name

            if node.is_directory:
                self._emit_directory_field(node, attr, tag)
            else:
                self._emit_leaf_field(node, attr, tag)

        _check_member_clashes(self._dir.name, seen_attrs, self._members)
        self._methods.append(self._validate_method())
        return GeneratedStructCode(
            name=self._dir.name,
            struct_def=self._struct_def(),
            key_defs="\n\n".join(self._key_defs),
            methods="".join(self._methods),
            union_defs="\n\n".join(self._union_defs),
        )

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    def _emit_directory_field(self, node: SchemaNode, attr: str, tag: str) -> None:
        """Emit a field referencing the record generated for a container or list."""
        ref_path = "/" + "/".join(schema_path(node))
        target = self._available.get(ref_path)
        if target is None:
            raise MissingReferencedEntityError(
                f"Directory '{self._dir.name}' references '{ref_path}' which is not a known directory"
            )
        type_name = self._registry.directory_name(ref_path)
        if type_name is None:
            raise MissingReferencedEntityError(
                f"Directory '{self._dir.name}' references '{ref_path}' which has no assigned name"
            )

        if not node.is_list:
            self._fields.append(_Field(attr, f"{type_name} | None", "default=None", tag))
            return

        key_elems = target.list_attr.key_elems if target.list_attr is not None else []
        if not key_elems:
            self._fields.append(_Field(attr, f"list[{type_name}]", "default_factory=list", tag))
            return

        key_types = [self._key_type(target, k) for k in key_elems]
        if len(key_elems) == 1:
            key_type = key_types[0].python_type
        else:
            key_type = f"{self._dir.name}_{camel_case(node.name)}_Key"
            self._key_defs.append(self._key_def(key_type, node, key_elems, key_types))

        self._fields.append(_Field(attr, f"dict[{key_type}, {type_name}] | None", "default=None", tag))
        self._members.append(f"new_{attr}")
        self._methods.append(self._list_constructor(node, attr, type_name, key_type, key_elems, key_types))

    def _emit_leaf_field(self, node: SchemaNode, attr: str, tag: str) -> None:
        """Emit a scalar, enumerated or union leaf (or leaf-list)."""
        if node.type is None:
            raise TypeMappingError(f"Leaf '{node.name}' of '{self._dir.name}' has no type")
        mapped = map_type(node.type, enum_name=self._enum_names(node, node.type))

        if isinstance(mapped, list):
            if self._compress:
                type_name = f"{self._dir.name}_{camel_case(node.name)}_Union"
            else:
                type_name = f"{path_to_camel_case(schema_path(node))}_Union"
            self._union_defs.append(self._union_family(node, type_name, mapped))
            self._members.append(f"to_{snake_case(type_name)}")
            self._methods.append(self._union_converter(type_name, mapped))
            default = "default=None"
        else:
            type_name = mapped.python_type
            default = f"default={type_name}.UNSET" if mapped.is_enum else "default=None"

        if node.is_leaf_list:
            self._fields.append(_Field(attr, f"list[{type_name}]", "default_factory=list", tag))
        elif isinstance(mapped, MappedType) and mapped.is_enum:
            self._fields.append(_Field(attr, type_name, default, tag))
        else:
            self._fields.append(_Field(attr, f"{type_name} | None", default, tag))

    def _enum_names(self, node: SchemaNode, leaf_type: LeafType) -> Callable[[LeafType], str | None]:
        """Return a lookup of the registry name of each enumerated type within *leaf_type*.

        Identity bases are keyed by ``/<module>/<base>``. The first
        enumeration of a leaf is keyed by the leaf path, further enumerations
        of a union by ``<leaf path>#<n>`` counting from 2.
        """
        leaf_path = "/" + "/".join(schema_path(node))
        keys: list[tuple[LeafType, str]] = []
        enumerations = 0
        for enum_type in _enumerated_types(leaf_type):
            if enum_type.kind is YangKind.IDENTITYREF:
                if enum_type.identity_base is not None:
                    base = enum_type.identity_base
                    keys.append((enum_type, f"/{base.module}/{base.name}"))
                continue
            enumerations += 1
            keys.append((enum_type, leaf_path if enumerations == 1 else f"{leaf_path}#{enumerations}"))

        def lookup(enum_type: LeafType) -> str | None:
            for candidate, key in keys:
                if candidate is enum_type:
                    return self._registry.enum_name(key)
            return None

        return lookup

    def _key_type(self, target: Directory, key_elem: SchemaNode) -> MappedType:
        assert target.list_attr is not None
        mapped = target.list_attr.keys.get(key_elem.name)
        if mapped is None:
            raise TypeMappingError(f"Key leaf '{key_elem.name}' of list '{target.name}' has no resolved type")
        return mapped

    # ------------------------------------------------------------------
    # Code snippets
    # ------------------------------------------------------------------

    def _struct_def(self) -> str:
        lines = [
            "@dataclass",
            f"class {self._dir.name}(GeneratedStruct):",
            f'{_INDENT}"""{self._dir.name} represents the {self._dir.schema_path} YANG schema element."""',
        ]
        if self._fields:
            lines.append("")
            lines.extend(f.render() for f in self._fields)
        return "\n".join(lines) + "\n"

    def _key_def(
        self,
        key_name: str,
        node: SchemaNode,
        key_elems: list[SchemaNode],
        key_types: list[MappedType],
    ) -> str:
        lines = [
            "@dataclass(frozen=True)",
            f"class {key_name}:",
            f'{_INDENT}"""{key_name} represents the key for list {camel_case(node.name)}'
            f' of element {self._dir.schema_path}."""',
            "",
        ]
        for elem, mapped in zip(key_elems, key_types):
            lines.append(
                f"{_INDENT}{snake_case(elem.name)}: {mapped.python_type}"
                f" = field(metadata={_path_metadata(elem.name)})"
            )
        return "\n".join(lines) + "\n"

    def _list_constructor(
        self,
        node: SchemaNode,
        attr: str,
        element: str,
        key_type: str,
        key_elems: list[SchemaNode],
        key_types: list[MappedType],
    ) -> str:
        list_name = camel_case(node.name)
        params = [snake_case(k.name) for k in key_elems]
        signature = ", ".join(f"{p}: {t.python_type}" for p, t in zip(params, key_types))
        key = _free_name("key", params)
        i2, i3 = _INDENT * 2, _INDENT * 3

        lines = [
            "",
            f"{_INDENT}def new_{attr}(self, {signature}) -> {element}:",
            f'{i2}"""Create a new entry in the {list_name} list of the {self._dir.name} struct.',
            "",
            f"{i2}The keys of the list are populated from the input arguments. Raises",
            f"{i2}DuplicateKeyError if an entry with the same key already exists.",
            f'{i2}"""',
            f"{i2}# Initialise the list within the receiver struct if it has not already been",
            f"{i2}# created.",
            f"{i2}if self.{attr} is None:",
            f"{i3}self.{attr} = {{}}",
            "",
        ]
        if len(key_elems) == 1:
            lines.append(f"{i2}{key} = {params[0]}")
        else:
            lines.append(f"{i2}{key} = {key_type}(")
            lines.extend(f"{i3}{p}={p}," for p in params)
            lines.append(f"{i2})")
        lines += [
            "",
            f"{i2}# Ensure that this key has not already been used in the list. Keyed lists",
            f"{i2}# do not allow duplicate keys to be created.",
            f"{i2}if {key} in self.{attr}:",
            f'{i3}raise DuplicateKeyError(f"duplicate key {{{key}!r}} for list {list_name}")',
            "",
            f"{i2}self.{attr}[{key}] = {element}(",
        ]
        lines.extend(f"{i3}{p}={p}," for p in params)
        lines += [
            f"{i2})",
            "",
            f"{i2}return self.{attr}[{key}]",
        ]
        return "\n".join(lines) + "\n"

    def _union_family(self, node: SchemaNode, type_name: str, branches: list[MappedType]) -> str:
        leaf_path = "/" + "/".join(schema_path(node))
        blocks = [
            "\n".join(
                [
                    f"class {type_name}:",
                    f'{_INDENT}"""{type_name} is implemented by valid types for the union',
                    f"{_INDENT}for the leaf {leaf_path} within the YANG schema.",
                    f'{_INDENT}"""',
                ]
            )
            + "\n"
        ]
        for branch in branches:
            variant = _variant_name(type_name, branch)
            blocks.append(
                "\n".join(
                    [
                        "@dataclass(frozen=True)",
                        f"class {variant}({type_name}):",
                        f'{_INDENT}"""{variant} is used when {leaf_path}',
                        f"{_INDENT}is to be set to a {branch.native_type} value.",
                        f'{_INDENT}"""',
                        "",
                        f"{_INDENT}value: {branch.python_type}",
                    ]
                )
                + "\n"
            )
        return "\n\n".join(blocks)

    def _union_converter(self, type_name: str, branches: list[MappedType]) -> str:
        i2, i3 = _INDENT * 2, _INDENT * 3
        accepted = ", ".join(native_type_names(branches))
        lines = [
            "",
            f"{_INDENT}def to_{snake_case(type_name)}(self, i: object) -> {type_name}:",
            f'{i2}"""Convert i to the member of the {type_name} union matching its type.',
            "",
            f"{i2}Types are tried in the order the union declares them. Raises",
            f"{i2}UnionConversionError if i matches none of them.",
            f'{i2}"""',
        ]
        for branch in branches:
            condition = branch.check.replace("{v}", "i")
            lines.append(f"{i2}if {condition}:")
            lines.append(f"{i3}return {_variant_name(type_name, branch)}(i)")
        lines += [
            f"{i2}raise UnionConversionError(",
            f'{i3}f"cannot convert {{i!r}} to {type_name}, unknown union type, got: {{type(i).__name__}},"',
            f'{i3}f" want any of [{accepted}]"',
            f"{i2})",
        ]
        return "\n".join(lines) + "\n"

    def _validate_method(self) -> str:
        i2 = _INDENT * 2
        lines = [
            "",
            f"{_INDENT}def validate(self) -> None:",
            f'{i2}"""Validate the struct against the YANG schema corresponding to its type."""',
            f"{i2}ytypes.validate(SCHEMA_TREE[{_quote(self._dir.name)}], self)",
        ]
        return "\n".join(lines) + "\n"


def _enumerated_types(leaf_type: LeafType) -> list[LeafType]:
    """Return the enumeration and identityref types within *leaf_type*.

    Union members are visited depth first in declaration order and leafrefs
    are followed, matching the order in which union branches are mapped.
    """
    if leaf_type.kind in (YangKind.ENUMERATION, YangKind.IDENTITYREF):
        return [leaf_type]
    if leaf_type.kind is YangKind.UNION:
        return [t for member in leaf_type.union_types for t in _enumerated_types(member)]
    if leaf_type.kind is YangKind.LEAFREF and leaf_type.leafref_target is not None:
        return _enumerated_types(leaf_type.leafref_target)
    return []


def _check_member_clashes(struct_name: str, attrs: Mapping[str, str], members: list[str]) -> None:
    """Raise if a field attribute or another member takes the name of a generated member."""
    seen: set[str] = set()
    for member in members:
        if member in attrs:
            raise CodeGenerationError(
                f"Field '{attrs[member]}' of '{struct_name}' clashes with the generated member '{member}'"
            )
        if member in seen:
            raise CodeGenerationError(f"Struct '{struct_name}' generates the member '{member}' more than once")
        seen.add(member)


def _free_name(name: str, taken: list[str]) -> str:
    """Return *name*, suffixed with underscores until it is not in *taken*."""
    while name in taken:
        name += "_"
    return name


def _variant_name(type_name: str, branch: MappedType) -> str:
    return f"{type_name}_{camel_case(branch.native_type)}"


def _quote(text: str) -> str:
    """Return *text* as a double-quoted Python string literal."""
    return json.dumps(text)


def _path_metadata(tag: str) -> str:
    return "{" + '"path": ' + _quote(tag) + "}"
