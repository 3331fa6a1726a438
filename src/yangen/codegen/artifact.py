# Copyright 2026 Yangen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization of generated code for the file assembly stage.

The result of a generation run is stored as a compact JSON document. The
format is versioned so that the assembly stage can detect artifacts written
by an incompatible generator.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from yangen.codegen.enums import GeneratedEnumCode
from yangen.codegen.generate import GeneratedCode, GenerationIssue
from yangen.codegen.structs import GeneratedStructCode
from yangen.runtime import EnumDefinition

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"

ARTIFACT_SUFFIX = ".yangen.json"


def serialize(code: GeneratedCode) -> str:
    """Serialize generated code to a compact JSON string."""
    return json.dumps(_code_to_dict(code), separators=(",", ":"))


def deserialize(data: str) -> GeneratedCode:
    """Deserialize generated code from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed :class:`GeneratedCode`.

    Raises:
        ValueError: If the artifact format version is not recognised.
    """
    obj = json.loads(data)
    version = obj.get("v")
    if version != ARTIFACT_FORMAT_VERSION:
        raise ValueError(f"Unsupported artifact format version: {version!r}")
    return _code_from_dict(obj)


def write_artifact(code: GeneratedCode, path: Path) -> None:
    """Write generated code to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(code), encoding="utf-8")


def read_artifact(path: Path) -> GeneratedCode:
    """Read and deserialize generated code from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))


# ################
# Implementation
# ################


def _code_to_dict(code: GeneratedCode) -> dict[str, Any]:
    return {
        "v": ARTIFACT_FORMAT_VERSION,
        "structs": [_struct_to_dict(s) for s in code.structs],
        "enums": [_enum_to_dict(e) for e in code.enums],
        "enum_map": code.enum_map,
        "errors": [{"entity": e.entity, "message": e.message} for e in code.errors],
    }


def _code_from_dict(obj: dict[str, Any]) -> GeneratedCode:
    return GeneratedCode(
        structs=[_struct_from_dict(s) for s in obj.get("structs", [])],
        enums=[_enum_from_dict(e) for e in obj.get("enums", [])],
        enum_map=obj.get("enum_map", ""),
        errors=[GenerationIssue(entity=e["entity"], message=e["message"]) for e in obj.get("errors", [])],
    )


def _struct_to_dict(code: GeneratedStructCode) -> dict[str, Any]:
    d: dict[str, Any] = {"name": code.name, "struct": code.struct_def}
    if code.key_defs:
        d["keys"] = code.key_defs
    if code.methods:
        d["methods"] = code.methods
    if code.union_defs:
        d["unions"] = code.union_defs
    return d


def _struct_from_dict(obj: dict[str, Any]) -> GeneratedStructCode:
    return GeneratedStructCode(
        name=obj["name"],
        struct_def=obj["struct"],
        key_defs=obj.get("keys", ""),
        methods=obj.get("methods", ""),
        union_defs=obj.get("unions", ""),
    )


def _enum_to_dict(code: GeneratedEnumCode) -> dict[str, Any]:
    # JSON object keys are strings; codes are restored to ints on load.
    values: dict[str, Any] = {}
    for value_code, definition in sorted(code.value_map.items()):
        entry: dict[str, str] = {"name": definition.name}
        if definition.defining_module:
            entry["module"] = definition.defining_module
        values[str(value_code)] = entry
    return {"name": code.name, "def": code.const_def, "values": values}


def _enum_from_dict(obj: dict[str, Any]) -> GeneratedEnumCode:
    return GeneratedEnumCode(
        name=obj["name"],
        const_def=obj["def"],
        value_map={
            int(value_code): EnumDefinition(name=entry["name"], defining_module=entry.get("module", ""))
            for value_code, entry in obj.get("values", {}).items()
        },
    )
