# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Shared helpers."""

from patternlint.utils.atomic_write import atomic_write_text

__all__ = ["atomic_write_text"]
