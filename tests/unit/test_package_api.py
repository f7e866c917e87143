# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Unit tests for the public package surface and module-level loggers."""

from __future__ import annotations

import importlib
import logging
from pathlib import Path

import pytest

from patternlint.utils import atomic_write_text

pytestmark = pytest.mark.unit

PACKAGES = [
    "patternlint.authoring",
    "patternlint.config",
    "patternlint.corpus",
    "patternlint.index",
    "patternlint.markdown",
    "patternlint.taxonomy",
    "patternlint.utils",
]

LOGGING_MODULES = [
    "patternlint.authoring.template_instantiator",
    "patternlint.config.model_validator_config",
    "patternlint.corpus.corpus_loader",
    "patternlint.index.index_generator",
    "patternlint.taxonomy.taxonomy_validator",
    "patternlint.utils.atomic_write",
]


# =========================================================================
# Test: Exports
# =========================================================================


class TestPackageExports:
    """Every exported name resolves and nothing stale is exported."""

    @pytest.mark.parametrize("package_name", PACKAGES)
    def test_all_names_resolve(self, package_name: str) -> None:
        package = importlib.import_module(package_name)
        for name in package.__all__:
            assert hasattr(package, name), f"{package_name}.{name}"

    def test_rule_ids_come_from_the_enum(self) -> None:
        taxonomy = importlib.import_module("patternlint.taxonomy")
        assert "VALID_RULE_IDS" not in taxonomy.__all__
        assert [r.value for r in taxonomy.EnumTaxonomyRule] == [
            f"V{n}" for n in range(1, 9)
        ]

    def test_document_section_helpers(self) -> None:
        markdown = importlib.import_module("patternlint.markdown")
        document = markdown.ModelMarkdownDocument
        assert hasattr(document, "tables_in_section")
        assert not hasattr(document, "links_in_section")


# =========================================================================
# Test: Logger Naming
# =========================================================================


class TestModuleLoggers:
    """Each module logs through a ``logger`` named after the module."""

    @pytest.mark.parametrize("module_name", LOGGING_MODULES)
    def test_logger_is_named_after_module(self, module_name: str) -> None:
        module = importlib.import_module(module_name)
        assert isinstance(module.logger, logging.Logger)
        assert module.logger.name == module_name

    def test_records_carry_module_name(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="patternlint"):
            atomic_write_text(tmp_path / "x.md", "x")
        assert [r.name for r in caplog.records] == ["patternlint.utils.atomic_write"]
