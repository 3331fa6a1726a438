# Copyright 2026 Yangen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Support types referenced by generated code.

Generated modules import the marker base classes and error types from here.
Validation itself is delegated to the external ``ytypes`` library.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

# ###############
# Public Interface
# ###############


class GeneratedStruct:
    """Marker base class of every generated schema record."""

    def is_generated_struct(self) -> bool:
        return True


class GeneratedEnum(IntEnum):
    """Marker base class of every generated enumeration.

    Value ``0`` of each subclass is ``UNSET``: the value was never assigned.
    """

    def is_generated_enum(self) -> bool:
        return True


@dataclass(frozen=True)
class EnumDefinition:
    """Display metadata of one enumeration value.

    Attributes:
        name: Value name as written in the schema.
        defining_module: Module defining the value; only set for identities.
    """

    name: str
    defining_module: str = ""


class DuplicateKeyError(KeyError):
    """Raised by a generated list constructor when the key is already in use."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class UnionConversionError(TypeError):
    """Raised by a generated union converter for a value of no accepted type."""
