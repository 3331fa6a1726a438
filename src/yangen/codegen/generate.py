# Copyright 2026 Yangen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Batch generation of every directory and enumeration of a schema.

The naming pass must have assigned every name before :func:`generate_code`
is called; the registry and the directory map are only read here.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from yangen.codegen.config import GeneratorConfig
from yangen.codegen.enums import GeneratedEnumCode, emit_enum, emit_registry
from yangen.codegen.errors import CodeGenerationError
from yangen.codegen.structs import GeneratedStructCode, emit_struct
from yangen.model.ir import Directory, EnumSource, NamingRegistry

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class GenerationIssue:
    """A directory or enumeration that could not be generated.

    Attributes:
        entity: Name of the directory or enumeration.
        message: Human-readable description of the error.
    """

    entity: str
    message: str


@dataclass
class GeneratedCode:
    """Result of a generation run.

    Attributes:
        structs: Generated records, sorted by name.
        enums: Generated enumerations, sorted by name.
        enum_map: The global ``ENUM_MAP`` built from every generated enumeration.
        errors: Directories and enumerations skipped because of an error.
    """

    structs: list[GeneratedStructCode] = field(default_factory=list)
    enums: list[GeneratedEnumCode] = field(default_factory=list)
    enum_map: str = ""
    errors: list[GenerationIssue] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any directory or enumeration failed to generate."""
        return len(self.errors) > 0


def generate_code(
    directories: Mapping[str, Directory],
    enums: Mapping[str, EnumSource],
    registry: NamingRegistry,
    config: GeneratorConfig | None = None,
) -> GeneratedCode:
    """Generate code for every directory and enumeration.

    A failing directory or enumeration is recorded in
    :attr:`GeneratedCode.errors` and contributes no code; generation carries
    on with the remaining ones. The enumeration map is built once all
    enumerations have been generated.

    Args:
        directories: Every directory of the schema, keyed by ``/``-joined
            schema path. Also used to resolve container and list references.
        enums: Every enumeration and identity base to generate.
        registry: Names assigned by the naming pass.
        config: Policy flags; defaults to an uncompressed run.

    Returns:
        The generated code and any errors.
    """
    config = config or GeneratorConfig()
    available = MappingProxyType(dict(directories))
    result = GeneratedCode()
    logger.debug(
        "Generating %d directories and %d enumerations (compress_paths=%s, generate_json_schema=%s)",
        len(available),
        len(enums),
        config.compress_paths,
        config.generate_json_schema,
    )

    for directory in sorted(available.values(), key=lambda d: d.name):
        try:
            code = emit_struct(
                directory,
                available,
                registry,
                config.compress_paths,
                generate_schema=config.generate_json_schema,
            )
        except CodeGenerationError as exc:
            logger.warning("Skipping directory '%s': %s", directory.name, exc)
            result.errors.append(GenerationIssue(entity=directory.name, message=str(exc)))
            continue
        logger.debug("Generated struct '%s'", code.name)
        result.structs.append(code)

    for source in sorted(enums.values(), key=lambda s: s.name):
        try:
            enum_code = emit_enum(source)
        except CodeGenerationError as exc:
            logger.warning("Skipping enumeration '%s': %s", source.name, exc)
            result.errors.append(GenerationIssue(entity=source.name, message=str(exc)))
            continue
        logger.debug("Generated enumeration '%s' with %d values", enum_code.name, len(enum_code.value_map))
        result.enums.append(enum_code)

    result.enum_map = emit_registry({e.name: e.value_map for e in result.enums})
    logger.info(
        "Generated %d structs and %d enumerations with %d errors",
        len(result.structs),
        len(result.enums),
        len(result.errors),
    )
    return result
