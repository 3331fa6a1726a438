# Copyright 2026 Yangen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema tree and intermediate representation for the code generator."""

from yangen.model.ir import (
    Directory,
    EnumSource,
    ListAttr,
    MappedType,
    NamingRegistry,
)
from yangen.model.schema import (
    Identity,
    IdentityBase,
    LeafType,
    NodeKind,
    SchemaNode,
    YangKind,
)

__all__ = [
    # Schema tree
    "YangKind",
    "NodeKind",
    "Identity",
    "IdentityBase",
    "LeafType",
    "SchemaNode",
    # Intermediate representation
    "MappedType",
    "ListAttr",
    "Directory",
    "EnumSource",
    "NamingRegistry",
]
