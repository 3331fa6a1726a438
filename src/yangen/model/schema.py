# Copyright 2026 Yangen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Resolved schema tree consumed by the code generator.

The tree is produced upstream by the schema parser. The generator only reads
it: nodes are walked bottom-up through ``parent`` references and top-down
through ``children``, but never modified.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class YangKind(Enum):
    """Built-in types of the modeling language."""

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    STRING = "string"
    BOOLEAN = "boolean"
    EMPTY = "empty"
    DECIMAL64 = "decimal64"
    BINARY = "binary"
    BITS = "bits"
    ENUMERATION = "enumeration"
    IDENTITYREF = "identityref"
    UNION = "union"
    LEAFREF = "leafref"
    INSTANCE_IDENTIFIER = "instance-identifier"


class NodeKind(Enum):
    """Structural role of a node in the schema tree."""

    MODULE = "module"
    CONTAINER = "container"
    LIST = "list"
    LEAF = "leaf"
    LEAF_LIST = "leaf-list"


class Identity(BaseModel):
    """A named identity, attributed to the module that defines it."""

    name: str
    module: str = ""


class IdentityBase(BaseModel):
    """The base identity of an identityref; ``values`` carries no order."""

    name: str
    module: str = ""
    values: list[Identity] = _Field(default_factory=list)


class LeafType(BaseModel):
    """Type of a leaf or leaf-list as resolved by the schema parser."""

    kind: YangKind
    name: str | None = None
    union_types: list[LeafType] = _Field(default_factory=list)
    enum_values: list[str] = _Field(default_factory=list)
    identity_base: IdentityBase | None = None
    leafref_target: LeafType | None = None


@dataclass(eq=False)
class SchemaNode:
    """A node of the resolved schema tree.

    Nodes compare by identity: two distinct nodes with the same name are
    different schema elements.

    Attributes:
        name: Identifier of the node within its parent.
        kind: Structural role (module, container, list, leaf, leaf-list).
        type: Resolved type for leaves and leaf-lists.
        key: Declared key leaf names of a list, in declaration order.
        children: Child nodes keyed by name.
        parent: Enclosing node; ``None`` at the top of the tree.
        module: Name of the module that defines this node, when known.
    """

    name: str
    kind: NodeKind = NodeKind.LEAF
    type: LeafType | None = None
    key: list[str] = field(default_factory=list)
    children: dict[str, SchemaNode] = field(default_factory=dict)
    parent: SchemaNode | None = field(default=None, repr=False)
    module: str | None = None

    def add_child(self, child: SchemaNode) -> SchemaNode:
        """Attach *child* below this node and return it."""
        child.parent = self
        self.children[child.name] = child
        return child

    @property
    def is_list(self) -> bool:
        return self.kind is NodeKind.LIST

    @property
    def is_leaf_list(self) -> bool:
        return self.kind is NodeKind.LEAF_LIST

    @property
    def is_directory(self) -> bool:
        """Return True for nodes that become generated records of their own."""
        return self.kind in (NodeKind.CONTAINER, NodeKind.LIST)


# Resolve forward references for the recursive type model.
LeafType.model_rebuild()
