# Copyright 2026 Yangen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Resolution of the schema paths a generated field is mapped to.

Each field of a generated record is annotated with the path of its schema
node relative to the record. Two policies exist:

* **Uncompressed**: the path keeps every intermediate container between the
  record and the field.
* **Compressed**: ``config`` and ``state`` wrapper containers are removed.
  Key leaves of a list appear both in the ``config`` wrapper and directly in
  the list; for these both the short and the nested path are returned so
  that either representation can be matched when serialising.
"""

from __future__ import annotations

from yangen.codegen.errors import PathResolutionError
from yangen.model.ir import Directory
from yangen.model.schema import NodeKind, SchemaNode

# ###############
# Public Interface
# ###############

# Upper bound on the number of ancestors walked before a parent chain is
# treated as malformed (for example, cyclic).
MAX_SCHEMA_DEPTH = 256

# Wrapper containers removed from paths when compression is enabled.
COMPRESSED_CONTAINERS = frozenset({"config", "state"})


def schema_path(node: SchemaNode) -> list[str]:
    """Return the names of *node* and its ancestors, outermost first.

    Raises:
        PathResolutionError: If the parent chain is deeper than
            :data:`MAX_SCHEMA_DEPTH`.
    """
    names: list[str] = []
    current: SchemaNode | None = node
    while current is not None:
        if len(names) >= MAX_SCHEMA_DEPTH:
            raise PathResolutionError(
                f"Parent chain of '{node.name}' exceeds {MAX_SCHEMA_DEPTH} levels; the schema tree may be cyclic"
            )
        names.append(current.name)
        current = current.parent
    names.reverse()
    return names


def resolve_paths(directory: Directory, field: SchemaNode, compress: bool) -> list[list[str]]:
    """Return the paths *field* is mapped to within *directory*.

    Fields of a first-level directory (a directory directly below its module)
    are mapped to absolute paths starting with ``""`` and the directory name.
    Fields of deeper directories are mapped to paths relative to the
    directory.

    Args:
        directory: The directory that owns *field*.
        field: A schema node below the directory.
        compress: Whether ``config``/``state`` wrapper containers are removed.

    Returns:
        One path, or two paths (short first, then nested) for a list key
        leaf duplicated below a wrapper container when *compress* is set.

    Raises:
        PathResolutionError: If the directory is not defined within a module,
            or *field* is not a descendant of the directory.
    """
    if len(directory.path) < 3:
        raise PathResolutionError(
            f"Directory '{directory.name}' at '{directory.schema_path}' is not defined within a module"
        )
    target = directory.path[1:]

    segments = [field.name]
    directory_node: SchemaNode | None = None
    current = field.parent
    while current is not None:
        if len(segments) >= MAX_SCHEMA_DEPTH:
            raise PathResolutionError(
                f"Parent chain of '{field.name}' exceeds {MAX_SCHEMA_DEPTH} levels; the schema tree may be cyclic"
            )
        if current.name == target[-1] and schema_path(current) == target:
            directory_node = current
            break
        segments.append(current.name)
        current = current.parent

    if directory_node is None:
        raise PathResolutionError(
            f"Field '{field.name}' is not a descendant of directory '{directory.name}' at '{directory.schema_path}'"
        )
    if not _is_module_attributed(directory_node):
        raise PathResolutionError(
            f"Directory '{directory.name}' at '{directory.schema_path}' does not belong to a defining module"
        )

    segments.reverse()
    prefix = ["", directory.path[-1]] if len(directory.path) == 3 else []
    if not compress:
        return [prefix + segments]

    short = [s for s in segments[:-1] if s not in COMPRESSED_CONTAINERS] + segments[-1:]
    paths = [prefix + short]
    if short != segments and _is_duplicated_key(directory, directory_node, field):
        paths.append(prefix + segments)
    return paths


# ################
# Implementation
# ################


def _is_module_attributed(node: SchemaNode) -> bool:
    """Return True if the outermost ancestor of *node* is a module."""
    top = node
    while top.parent is not None:
        top = top.parent
    return top.kind is NodeKind.MODULE or top.module is not None


def _is_duplicated_key(directory: Directory, directory_node: SchemaNode, field: SchemaNode) -> bool:
    """Return True if *field* is a key leaf also present directly in the list."""
    if directory.list_attr is None:
        return False
    if not any(k.name == field.name for k in directory.list_attr.key_elems):
        return False
    return field.name in directory_node.children
