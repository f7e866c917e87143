# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""
Integration tests: end-to-end corpus scenarios through the CLI.

Each scenario writes a whole corpus under tmp_path, runs ``patternlint
check`` and compares stdout line for line.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

from patternlint.__main__ import main

pytestmark = pytest.mark.integration


def replace_pattern(builder, category: str, slug: str, **kwargs: object) -> None:
    spec = builder.categories[category]
    spec.patterns = [p for p in spec.patterns if p.slug != slug]
    builder.add_pattern(category, slug, **kwargs)


def run_check(root: Path, capsys: pytest.CaptureFixture[str]) -> tuple[int, list[str]]:
    exit_code = main(["check", "--root", str(root)])
    return exit_code, capsys.readouterr().out.splitlines()


# =============================================================================
# Test Class: Corpus Scenarios
# =============================================================================


class TestCorpusScenarios:
    """One broken invariant per scenario, one line of output."""

    def test_broken_related_link(
        self, corpus_builder, capsys: pytest.CaptureFixture[str]
    ) -> None:
        replace_pattern(
            corpus_builder,
            "structural",
            "adapter",
            related=[
                ("Facade", "./facade.md"),
                ("Widget Wrapper", "./widget-wrapper.md"),
            ],
        )
        root = corpus_builder.build()

        exit_code, lines = run_check(root, capsys)

        assert exit_code == 1
        assert lines == [
            "structural/adapter.md: V3: broken relative link ./widget-wrapper.md"
        ]

    def test_category_count_mismatch(
        self, corpus_builder, capsys: pytest.CaptureFixture[str]
    ) -> None:
        for slug in ("bridge", "composite", "decorator", "flyweight", "proxy", "wrapper"):
            corpus_builder.add_pattern("structural", slug)
        corpus_builder.declared_counts["structural"] = 7
        root = corpus_builder.build()

        exit_code, lines = run_check(root, capsys)

        assert exit_code == 1
        assert lines == ["README.md: V1: category 'structural' declared 7, found 8"]

    def test_slug_collision(
        self, corpus_builder, capsys: pytest.CaptureFixture[str]
    ) -> None:
        corpus_builder.add_pattern("performance", "cache")
        corpus_builder.add_pattern("cloud", "cache")
        root = corpus_builder.build()

        exit_code, lines = run_check(root, capsys)

        assert exit_code == 1
        assert lines == [
            "cloud/cache.md: V5: slug 'cache' also used by performance/cache.md",
            "performance/cache.md: V5: slug 'cache' also used by cloud/cache.md",
        ]

    def test_invalid_dto_tag(
        self, corpus_builder, capsys: pytest.CaptureFixture[str]
    ) -> None:
        replace_pattern(
            corpus_builder,
            "enterprise",
            "dto",
            title="DTO",
            code='type Order struct {\n    ID string `dto:"input,api,public"`\n}',
        )
        root = corpus_builder.build()

        exit_code, lines = run_check(root, capsys)

        assert exit_code == 1
        assert lines == [
            "enterprise/dto.md: V7: invalid token 'input' in position 1 "
            "(allowed: in,out,inout); invalid token 'public' in position 3 "
            "(allowed: pub,priv,pii,secret)"
        ]

    def test_missing_required_section(
        self, corpus_builder, capsys: pytest.CaptureFixture[str]
    ) -> None:
        replace_pattern(
            corpus_builder, "concurrency", "actor", omit_sections=["When to Use"]
        )
        root = corpus_builder.build()

        exit_code, lines = run_check(root, capsys)

        assert exit_code == 1
        assert lines == [
            "concurrency/actor.md: V6: required section 'When to Use' missing"
        ]

    def test_clean_corpus(
        self, clean_corpus: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code, lines = run_check(clean_corpus, capsys)

        assert exit_code == 0
        assert lines == []


# =============================================================================
# Test Class: Authoring Round Trip
# =============================================================================


class TestAuthoringWorkflow:
    """new-pattern followed by index --write leaves a corpus that only lacks prose."""

    def test_new_pattern_then_index(
        self, corpus_builder, capsys: pytest.CaptureFixture[str]
    ) -> None:
        corpus_builder.with_markers = True
        root = corpus_builder.build()

        args = ["--root", str(root)]
        new_pattern = [
            "new-pattern",
            *args,
            "--category",
            "structural",
            "--name",
            "Bridge",
            "--intent",
            "Split abstraction from implementation.",
        ]
        assert main(new_pattern) == 0
        assert main(["index", *args, "--write"]) == 0
        capsys.readouterr()

        assert main(["check", *args, "--rule", "V2", "--rule", "V6"]) == 0
        assert capsys.readouterr().out == ""


# =============================================================================
# Test Class: Subprocess Invocation
# =============================================================================


class TestModuleInvocation:
    """python -m patternlint behaves like main()."""

    def test_module_exit_codes(self, clean_corpus: Path) -> None:
        clean = subprocess.run(
            [sys.executable, "-m", "patternlint", "check", "--root", str(clean_corpus)],
            capture_output=True,
            text=True,
            check=False,
        )
        assert clean.returncode == 0
        assert clean.stdout == ""

        (clean_corpus / "structural" / "facade.md").unlink()
        broken = subprocess.run(
            [sys.executable, "-m", "patternlint", "check", "--root", str(clean_corpus)],
            capture_output=True,
            text=True,
            check=False,
        )
        assert broken.returncode == 1
        assert "structural/adapter.md: V3: broken relative link ./facade.md" in broken.stdout
