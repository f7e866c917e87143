# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Create pattern files and category folders from templates.

Templates carry ``[Token]`` placeholders. Substitution is a plain regex
replacement of the tokens whose value is known; anything else (``[Method]``,
``[ReturnType]``) stays in place for the author. A bracketed word followed by
``(`` is a Markdown link, not a placeholder.

A ``TEMPLATE-PATTERN.md`` or ``TEMPLATE-README.md`` at the corpus root takes
precedence over the template bundled with the package.
"""

from __future__ import annotations

import importlib.resources
import logging
import re
import unicodedata
from collections.abc import Mapping
from pathlib import Path

from patternlint.config.model_validator_config import ModelValidatorConfig, load_config
from patternlint.corpus.corpus_loader import load_corpus
from patternlint.corpus.model_category import CATEGORY_README_NAME
from patternlint.errors import TemplateError
from patternlint.taxonomy.rule_exemplar_language import detect_exemplar_language
from patternlint.utils.atomic_write import atomic_write_text

logger = logging.getLogger(__name__)

PATTERN_TEMPLATE_NAME = "TEMPLATE-PATTERN.md"
README_TEMPLATE_NAME = "TEMPLATE-README.md"

PLACEHOLDER_PATTERN = re.compile(r"\[([A-Za-z][A-Za-z0-9]*)\](?!\()")

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Turn a display name into a lowercase kebab-case slug.

    ``"Foo Bar"`` becomes ``"foo-bar"``; accents are folded to ASCII.
    """
    ascii_name = (
        unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    )
    return _NON_SLUG_CHARS.sub("-", ascii_name.lower()).strip("-")


def substitute_placeholders(text: str, values: Mapping[str, str]) -> str:
    """Replace known ``[Token]`` placeholders, leaving unknown ones intact."""

    def replace(match: re.Match[str]) -> str:
        return values.get(match.group(1), match.group(0))

    return PLACEHOLDER_PATTERN.sub(replace, text)


def load_template(root: Path, name: str) -> str:
    """Return the corpus-root template if present, else the bundled one.

    Raises:
        TemplateError: If the template cannot be read.
    """
    local = root / name
    try:
        if local.is_file():
            logger.debug("Using template %s", local)
            return local.read_text(encoding="utf-8")
        bundled = importlib.resources.files("patternlint.authoring").joinpath(
            "templates", name
        )
        return bundled.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateError(f"Cannot read template {name}: {e}") from e


def _resolve_language(root: Path, config: ModelValidatorConfig) -> str | None:
    if config.exemplar_language is not None:
        return config.exemplar_language
    return detect_exemplar_language(load_corpus(root, config), config)


def _write_new(path: Path, content: str, *, overwrite: bool) -> None:
    if path.exists() and not overwrite:
        raise TemplateError(f"{path} already exists (use --force to overwrite)")
    try:
        atomic_write_text(path, content)
    except OSError as e:
        raise TemplateError(f"Cannot write {path}: {e}") from e


def instantiate_pattern(
    root: Path,
    category: str,
    name: str,
    *,
    intent: str | None = None,
    language: str | None = None,
    overwrite: bool = False,
    config: ModelValidatorConfig | None = None,
) -> Path:
    """Render the pattern template into ``<root>/<category>/<slug>.md``.

    Args:
        root: Corpus root directory.
        category: Existing category folder name.
        name: Pattern display name, used as the title.
        intent: One-line intent; left as a placeholder when None.
        language: Code fence tag; defaults to the corpus exemplar language.
        overwrite: Replace an existing file.
        config: Validator configuration; loaded from the root when None.

    Returns:
        Path of the written file.

    Raises:
        TemplateError: If the name yields no slug, the category does not
            exist, or the file exists and ``overwrite`` is False.
    """
    root = Path(root).resolve()
    slug = slugify(name)
    if not slug:
        raise TemplateError(f"Cannot derive a slug from pattern name '{name}'")
    category_dir = root / category
    if not category_dir.is_dir():
        raise TemplateError(
            f"Category '{category}' does not exist (create it with new-category)"
        )

    config = config or load_config(root)
    language = language or _resolve_language(root, config)

    values = {
        "PatternName": name.strip(),
        "Slug": slug,
        "Category": category,
    }
    if intent:
        values["Intent"] = intent.strip()
    if language:
        values["Language"] = language

    content = substitute_placeholders(load_template(root, PATTERN_TEMPLATE_NAME), values)
    path = category_dir / f"{slug}.md"
    _write_new(path, content, overwrite=overwrite)
    logger.info("Created pattern %s", path.relative_to(root).as_posix())
    return path


def instantiate_category(
    root: Path,
    name: str,
    *,
    description: str | None = None,
    overwrite: bool = False,
) -> Path:
    """Render the README template into ``<root>/<slug>/README.md``.

    The folder name is the slug of ``name``; the README title is ``name``.

    Raises:
        TemplateError: If the name yields no slug or the README exists and
            ``overwrite`` is False.
    """
    root = Path(root).resolve()
    slug = slugify(name)
    if not slug:
        raise TemplateError(f"Cannot derive a folder name from category '{name}'")

    values = {
        "CategoryTitle": name.strip(),
        "Category": slug,
        "PatternCount": "0",
    }
    if description:
        values["Description"] = description.strip()

    content = substitute_placeholders(load_template(root, README_TEMPLATE_NAME), values)
    path = root / slug / CATEGORY_README_NAME
    _write_new(path, content, overwrite=overwrite)
    logger.info("Created category %s", path.relative_to(root).as_posix())
    return path


__all__ = [
    "PATTERN_TEMPLATE_NAME",
    "PLACEHOLDER_PATTERN",
    "README_TEMPLATE_NAME",
    "instantiate_category",
    "instantiate_pattern",
    "load_template",
    "slugify",
    "substitute_placeholders",
]
