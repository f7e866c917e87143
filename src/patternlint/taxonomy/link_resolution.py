# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Link target classification and resolution shared by V2, V3 and V4."""

from __future__ import annotations

import os
import re
from pathlib import Path
from urllib.parse import unquote, urlparse

_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")
_WEB_SCHEMES: frozenset[str] = frozenset({"http", "https", "ftp"})


def is_external(target: str) -> bool:
    """True if the target carries a URL scheme (``https:``, ``mailto:``...)."""
    return _SCHEME_PATTERN.match(target) is not None


def is_fragment_only(target: str) -> bool:
    """True for in-page anchors such as ``#usage``."""
    return target.startswith("#")


def target_path(target: str) -> str:
    """Strip fragment and query from a relative target and percent-decode it."""
    path = target.split("#", 1)[0].split("?", 1)[0]
    return unquote(path)


def is_markdown_target(target: str) -> bool:
    """True if a relative target points at a ``.md`` file."""
    return not is_external(target) and target_path(target).lower().endswith(".md")


def is_well_formed_url(target: str) -> bool:
    """Check that an external link parses as a well-formed URL.

    Web URLs need a host; ``mailto:`` needs an address. Other schemes only
    need a non-empty remainder.
    """
    if any(ch.isspace() for ch in target):
        return False
    try:
        parsed = urlparse(target)
        if parsed.scheme.lower() in _WEB_SCHEMES:
            return bool(parsed.netloc) and parsed.hostname is not None
    except ValueError:
        # Malformed IPv6 netloc or invalid port
        return False
    if parsed.scheme.lower() == "mailto":
        return "@" in parsed.path
    return bool(target[len(parsed.scheme) + 1 :])


def resolve_relative(source: Path, target: str, root: Path) -> Path | None:
    """Resolve a relative link against the file that contains it.

    Symlinks are not followed; ``..`` segments are collapsed lexically.

    Args:
        source: Absolute path of the file containing the link.
        target: Link target as written.
        root: Corpus root; targets outside it do not resolve.

    Returns:
        The absolute target path, or None if it escapes the root.
    """
    path = target_path(target)
    if not path:
        return source
    resolved = Path(os.path.normpath(source.parent / path))
    try:
        resolved.relative_to(root)
    except ValueError:
        return None
    return resolved


__all__ = [
    "is_external",
    "is_fragment_only",
    "is_markdown_target",
    "is_well_formed_url",
    "resolve_relative",
    "target_path",
]
