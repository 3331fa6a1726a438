# Copyright 2026 Yangen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Identifier helpers for generated code.

Schema identifiers may contain characters that are not valid in Python
(``-``, ``.``) and follow no particular casing convention. Type names are
derived with :func:`camel_case`, attribute and method names with
:func:`snake_case`.
"""

from __future__ import annotations

import keyword
import re

# ###############
# Public Interface
# ###############


def camel_case(name: str) -> str:
    """Return the CamelCase form of a schema identifier.

    Characters outside ``[A-Za-z0-9_]`` become underscores; an underscore
    followed by a lower-case letter is dropped and the letter upper-cased.
    The first letter is upper-cased.

    >>> camel_case("input-struct")
    'InputStruct'
    >>> camel_case("VALUE_1")
    'VALUE_1'
    """
    if not name:
        return ""
    text = _INVALID_CHARS.sub("_", name)
    text = _UNDERSCORE_LOWER.sub(lambda m: m.group(1).upper(), text)
    return text[0].upper() + text[1:]


def snake_case(name: str) -> str:
    """Return a snake_case Python identifier for a schema identifier or type name.

    >>> snake_case("keyLeafOne")
    'key_leaf_one'
    >>> snake_case("InputStruct_U1_Union")
    'input_struct_u1_union'
    """
    text = _INVALID_CHARS.sub("_", name)
    text = _LOWER_UPPER.sub(r"\1_\2", text)
    text = _ACRONYM_WORD.sub(r"\1_\2", text)
    return _make_identifier(text.lower())


def safe_enum_name(value: str) -> str:
    """Return a valid enum member name for an enumeration value.

    Values starting with a digit are prefixed with ``V``.

    >>> safe_enum_name("SPEED_2.5G")
    'SPEED_2_5G'
    """
    text = _INVALID_CHARS.sub("_", value)
    if not text or text[0].isdigit():
        text = "V" + text
    if keyword.iskeyword(text):
        text += "_"
    return text


def path_to_camel_case(path: list[str]) -> str:
    """Join the CamelCase form of every non-empty path segment with ``_``."""
    return "_".join(camel_case(segment) for segment in path if segment)


# ################
# Implementation
# ################

_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_]")
_UNDERSCORE_LOWER = re.compile(r"_([a-z])")
_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_WORD = re.compile(r"([A-Z]+)([A-Z][a-z])")


def _make_identifier(text: str) -> str:
    if not text or text[0].isdigit():
        text = "_" + text
    if keyword.iskeyword(text):
        text += "_"
    return text
