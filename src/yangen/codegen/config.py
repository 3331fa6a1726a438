# Copyright 2026 Yangen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the code generator configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############


class GeneratorConfigError(Exception):
    """Raised when a generator configuration file is invalid or cannot be loaded."""


@dataclass(frozen=True)
class GeneratorConfig:
    """Policy flags of a generation run.

    Attributes:
        compress_paths: Remove ``config``/``state`` wrapper containers from
            generated paths and use short union names.
        generate_json_schema: Attach a schema snapshot to each generated
            record. The snapshot is produced by the assembly stage and does
            not change the generated records.
    """

    compress_paths: bool = False
    generate_json_schema: bool = False


def load_generator_config(path: Path) -> GeneratorConfig:
    """Load and parse a generator configuration file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A GeneratorConfig populated from the file.

    Raises:
        GeneratorConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise GeneratorConfigError(f"Generator config file not found: {path}") from None
    except OSError as exc:
        raise GeneratorConfigError(f"Cannot read generator config file: {exc}") from exc

    return parse_generator_config(text, source_label=str(path))


def parse_generator_config(text: str, source_label: str = "<string>") -> GeneratorConfig:
    """Parse generator config YAML text into a GeneratorConfig.

    An empty document yields the default configuration.

    Raises:
        GeneratorConfigError: If the YAML is invalid, a key is unknown, or a
            value is not a boolean.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise GeneratorConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return GeneratorConfig()
    if not isinstance(data, dict):
        raise GeneratorConfigError(f"{source_label}: generator config must be a YAML mapping")

    unknown = sorted(str(k) for k in data if k not in _KEYS)
    if unknown:
        raise GeneratorConfigError(f"{source_label}: unknown field(s) {', '.join(repr(k) for k in unknown)}")

    return GeneratorConfig(
        compress_paths=_optional_bool(data, "compress-paths", source_label),
        generate_json_schema=_optional_bool(data, "generate-json-schema", source_label),
    )


# ################
# Implementation
# ################

_KEYS = frozenset({"compress-paths", "generate-json-schema"})


def _optional_bool(mapping: dict[str, object], key: str, source_label: str) -> bool:
    """Extract an optional boolean field, defaulting to False."""
    value = mapping.get(key, False)
    if not isinstance(value, bool):
        raise GeneratorConfigError(f"{source_label}: '{key}' must be a boolean")
    return value
