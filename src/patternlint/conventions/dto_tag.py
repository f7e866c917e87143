# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""DTO tag convention: ``dto:"direction,context,security"``.

The three enumerations are a frozen public vocabulary. Code linters that
read the convention depend on these values staying stable; adding a member
is a corpus-wide breaking change.

Example::

    type CreateUserRequest struct {
        Email string `json:"email" dto:"in,api,pii"`
    }
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum


class EnumDtoDirection(StrEnum):
    """Data flow direction of the annotated field."""

    IN = "in"
    OUT = "out"
    INOUT = "inout"


class EnumDtoContext(StrEnum):
    """Transport context the DTO belongs to."""

    API = "api"
    CMD = "cmd"
    QUERY = "query"
    EVENT = "event"
    MSG = "msg"
    PRIV = "priv"


class EnumDtoSecurity(StrEnum):
    """Sensitivity classification of the field value."""

    PUB = "pub"
    PRIV = "priv"
    PII = "pii"
    SECRET = "secret"


# Position -> vocabulary, in tag order
DTO_TAG_POSITIONS: tuple[type[StrEnum], ...] = (
    EnumDtoDirection,
    EnumDtoContext,
    EnumDtoSecurity,
)

DTO_TAG_PATTERN = re.compile(r'\bdto:"([^"]*)"')


@dataclass(frozen=True)
class ModelDtoTag:
    """A well-formed DTO tag."""

    direction: EnumDtoDirection
    context: EnumDtoContext
    security: EnumDtoSecurity

    def __str__(self) -> str:
        return f'dto:"{self.direction},{self.context},{self.security}"'


@dataclass(frozen=True)
class ModelDtoTagOccurrence:
    """A ``dto:"..."`` tag found in a document."""

    value: str
    line: int


def allowed_values(position: int) -> list[str]:
    """Allowed tokens for a 1-indexed tag position, in declaration order."""
    return [member.value for member in DTO_TAG_POSITIONS[position - 1]]


def dto_tag_errors(value: str) -> list[str]:
    """Validate a tag value and describe every problem.

    Args:
        value: The text between the quotes of ``dto:"..."``.

    Returns:
        One message per problem, empty if the tag is well formed.
    """
    tokens = [token.strip() for token in value.split(",")]
    if len(tokens) != len(DTO_TAG_POSITIONS):
        return [
            f"expected {len(DTO_TAG_POSITIONS)} comma-separated tokens, "
            f"found {len(tokens)} in '{value}'"
        ]

    errors: list[str] = []
    for position, token in enumerate(tokens, start=1):
        allowed = allowed_values(position)
        if token not in allowed:
            errors.append(
                f"invalid token '{token}' in position {position} "
                f"(allowed: {','.join(allowed)})"
            )
    return errors


def parse_dto_tag(value: str) -> ModelDtoTag:
    """Parse a tag value into its three typed positions.

    Raises:
        ValueError: If the value is not exactly three valid tokens.
    """
    errors = dto_tag_errors(value)
    if errors:
        raise ValueError("; ".join(errors))
    direction, context, security = (token.strip() for token in value.split(","))
    return ModelDtoTag(
        direction=EnumDtoDirection(direction),
        context=EnumDtoContext(context),
        security=EnumDtoSecurity(security),
    )


def find_dto_tags(text: str) -> list[ModelDtoTagOccurrence]:
    """Find every ``dto:"..."`` occurrence in a document, with line numbers."""
    found: list[ModelDtoTagOccurrence] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        for m in DTO_TAG_PATTERN.finditer(line):
            found.append(ModelDtoTagOccurrence(value=m.group(1), line=lineno))
    return found


__all__ = [
    "DTO_TAG_PATTERN",
    "DTO_TAG_POSITIONS",
    "EnumDtoContext",
    "EnumDtoDirection",
    "EnumDtoSecurity",
    "ModelDtoTag",
    "ModelDtoTagOccurrence",
    "allowed_values",
    "dto_tag_errors",
    "find_dto_tags",
    "parse_dto_tag",
]
