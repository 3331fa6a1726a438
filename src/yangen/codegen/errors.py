# Copyright 2026 Yangen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Errors raised while generating code.

Every error is fatal for the directory or enumeration being generated: no
partial artifact is produced for it.
"""

# ###############
# Public Interface
# ###############


class CodeGenerationError(Exception):
    """Base class for all generation-time errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class PathResolutionError(CodeGenerationError):
    """Raised when a field or directory cannot be placed below a module."""


class MissingReferencedEntityError(CodeGenerationError):
    """Raised when a container or list field references an unknown directory."""


class TypeMappingError(CodeGenerationError):
    """Raised when a leaf type cannot be mapped to a native type."""


class EnumGenerationError(CodeGenerationError):
    """Raised when an enumeration cannot be generated unambiguously."""
