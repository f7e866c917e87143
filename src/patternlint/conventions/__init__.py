# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Controlled vocabularies shared by corpus conventions."""

from patternlint.conventions.dto_tag import (
    EnumDtoContext,
    EnumDtoDirection,
    EnumDtoSecurity,
    ModelDtoTag,
    ModelDtoTagOccurrence,
    dto_tag_errors,
    find_dto_tags,
    parse_dto_tag,
)

__all__ = [
    "EnumDtoContext",
    "EnumDtoDirection",
    "EnumDtoSecurity",
    "ModelDtoTag",
    "ModelDtoTagOccurrence",
    "dto_tag_errors",
    "find_dto_tags",
    "parse_dto_tag",
]
