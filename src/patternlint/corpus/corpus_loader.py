# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Corpus discovery and loading.

Layout::

    <root>/README.md               root index
    <root>/<category>/README.md    category index
    <root>/<category>/<slug>.md    pattern file

Category folders are the immediate subdirectories of the root that contain
at least one Markdown file. Hidden folders (``.git``), folders starting with
``_`` and configured ``excluded_dirs`` are never categories. Nested folders
inside a category are not scanned.

Reads are the only suspension points. Above ``parallel_threshold`` files
they run in a thread pool; ``executor.map`` keeps input order so the loaded
corpus is identical to a sequential load.
"""

from __future__ import annotations

import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from patternlint.config.model_validator_config import ModelValidatorConfig
from patternlint.corpus.model_category import CATEGORY_README_NAME, ModelCategory
from patternlint.corpus.model_corpus import ModelCorpus
from patternlint.corpus.model_corpus_file import ModelCorpusFile, ModelPatternFile
from patternlint.corpus.model_root_index import ROOT_INDEX_NAME, ModelRootIndex
from patternlint.errors import CorpusReadError, ValidationCancelledError
from patternlint.markdown.markdown_parser import parse_markdown

logger = logging.getLogger(__name__)


def _is_readme(path: Path) -> bool:
    return path.name.lower() == CATEGORY_README_NAME.lower()


def discover_categories(root: Path, config: ModelValidatorConfig) -> list[Path]:
    """Return category folders under ``root``, sorted by name.

    Args:
        root: Corpus root directory.
        config: Validator configuration (for ``excluded_dirs``).

    Raises:
        CorpusReadError: If the root cannot be listed.
    """
    excluded = set(config.excluded_dirs)
    try:
        entries = sorted(root.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise CorpusReadError(root, e.strerror or str(e)) from e

    categories: list[Path] = []
    for entry in entries:
        if not entry.is_dir():
            continue
        if entry.name.startswith((".", "_")) or entry.name in excluded:
            logger.debug("Skipping non-category folder %s", entry.name)
            continue
        try:
            has_markdown = any(child.suffix == ".md" for child in entry.iterdir())
        except OSError as e:
            raise CorpusReadError(entry, e.strerror or str(e)) from e
        if not has_markdown:
            logger.debug("Skipping folder without Markdown files: %s", entry.name)
            continue
        categories.append(entry)
    return categories


def discover_pattern_files(category_dir: Path) -> list[Path]:
    """Pattern files directly inside a category folder, sorted by name."""
    try:
        children = sorted(category_dir.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise CorpusReadError(category_dir, e.strerror or str(e)) from e
    return [
        child
        for child in children
        if child.is_file() and child.suffix == ".md" and not _is_readme(child)
    ]


def read_markdown(path: Path, stop_event: threading.Event | None = None) -> str:
    """Read one corpus file as UTF-8.

    Raises:
        ValidationCancelledError: If the stop signal is set.
        CorpusReadError: If the file cannot be read or decoded.
    """
    if stop_event is not None and stop_event.is_set():
        raise ValidationCancelledError("validation cancelled")
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise CorpusReadError(path, f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise CorpusReadError(path, e.strerror or str(e)) from e


def _read_all(
    paths: list[Path],
    config: ModelValidatorConfig,
    stop_event: threading.Event | None,
) -> list[str]:
    if len(paths) > config.parallel_threshold:
        max_workers = config.max_workers or min(len(paths), os.cpu_count() or 4)
        logger.debug("Reading %d files with %d workers", len(paths), max_workers)
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(
                executor.map(lambda p: read_markdown(p, stop_event), paths)
            )
    return [read_markdown(p, stop_event) for p in paths]


def load_corpus(
    root: Path,
    config: ModelValidatorConfig | None = None,
    *,
    stop_event: threading.Event | None = None,
) -> ModelCorpus:
    """Discover, read and parse every corpus file.

    Args:
        root: Corpus root directory.
        config: Validator configuration; defaults when None.
        stop_event: Cooperative cancellation signal.

    Returns:
        The loaded corpus.

    Raises:
        CorpusReadError: If the root is not a directory or a file is unreadable.
        ValidationCancelledError: If the stop signal is set during loading.
    """
    config = config or ModelValidatorConfig()
    root = Path(root).resolve()
    if not root.is_dir():
        raise CorpusReadError(root, "not a directory")

    root_readme = root / ROOT_INDEX_NAME
    category_dirs = discover_categories(root, config)

    # Flat read list: root README, then per category README + patterns
    to_read: list[Path] = []
    if root_readme.is_file():
        to_read.append(root_readme)
    layout: list[tuple[Path, Path | None, list[Path]]] = []
    for category_dir in category_dirs:
        readme = category_dir / CATEGORY_README_NAME
        readme_path = readme if readme.is_file() else None
        patterns = discover_pattern_files(category_dir)
        layout.append((category_dir, readme_path, patterns))
        if readme_path is not None:
            to_read.append(readme_path)
        to_read.extend(patterns)

    texts = dict(zip(to_read, _read_all(to_read, config, stop_event), strict=True))
    logger.debug("Loaded %d Markdown files from %s", len(texts), root)

    def corpus_file(path: Path) -> ModelCorpusFile:
        return ModelCorpusFile(
            path=path,
            rel_path=path.relative_to(root).as_posix(),
            document=parse_markdown(texts[path]),
        )

    categories: list[ModelCategory] = []
    for category_dir, readme_path, pattern_paths in layout:
        patterns = tuple(
            ModelPatternFile(
                path=p,
                rel_path=p.relative_to(root).as_posix(),
                document=parse_markdown(texts[p]),
                category=category_dir.name,
                slug=p.stem,
            )
            for p in pattern_paths
        )
        categories.append(
            ModelCategory(
                name=category_dir.name,
                path=category_dir,
                readme=corpus_file(readme_path) if readme_path is not None else None,
                patterns=patterns,
            )
        )

    root_index = None
    if root_readme in texts:
        root_index = ModelRootIndex.from_file(
            corpus_file(root_readme), config.alphabetical_heading
        )

    return ModelCorpus(root=root, categories=tuple(categories), root_index=root_index)


__all__ = [
    "discover_categories",
    "discover_pattern_files",
    "load_corpus",
    "read_markdown",
]
