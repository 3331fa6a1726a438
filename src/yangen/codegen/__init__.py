# Copyright 2026 Yangen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Code generation pipeline: path resolution, type mapping, struct and enum emission."""

from yangen.codegen.artifact import ARTIFACT_SUFFIX, deserialize, read_artifact, serialize, write_artifact
from yangen.codegen.config import GeneratorConfig, GeneratorConfigError, load_generator_config
from yangen.codegen.enums import GeneratedEnumCode, emit_enum, emit_registry
from yangen.codegen.errors import (
    CodeGenerationError,
    EnumGenerationError,
    MissingReferencedEntityError,
    PathResolutionError,
    TypeMappingError,
)
from yangen.codegen.generate import GeneratedCode, GenerationIssue, generate_code
from yangen.codegen.paths import resolve_paths, schema_path
from yangen.codegen.structs import GeneratedStructCode, emit_struct
from yangen.codegen.types import map_type

__all__ = [
    "resolve_paths",
    "schema_path",
    "map_type",
    "emit_struct",
    "GeneratedStructCode",
    "emit_enum",
    "emit_registry",
    "GeneratedEnumCode",
    "generate_code",
    "GeneratedCode",
    "GenerationIssue",
    "GeneratorConfig",
    "GeneratorConfigError",
    "load_generator_config",
    "serialize",
    "deserialize",
    "write_artifact",
    "read_artifact",
    "ARTIFACT_SUFFIX",
    "CodeGenerationError",
    "PathResolutionError",
    "MissingReferencedEntityError",
    "TypeMappingError",
    "EnumGenerationError",
]
