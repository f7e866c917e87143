# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Validator configuration model.

The configuration is optional. When ``<root>/.patternlint.yaml`` is absent
every field takes its default, which encodes the corpus conventions:

- the fixed pattern-file skeleton (title, intent, then the sections below)
- ``dto:"..."`` tags are checked in the ``enterprise`` category
- the exemplar language is detected from the corpus itself

Example ``.patternlint.yaml``::

    exemplar_language: go
    exemplar_language_aliases: [golang]
    excluded_dirs: [assets]
    parallel_threshold: 20
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from patternlint.config.enum_log_level import EnumLogLevel
from patternlint.config.model_section_spec import ModelSectionSpec
from patternlint.errors import ConfigError

logger = logging.getLogger(__name__)

# Config file looked up at the corpus root when --config is not given
DEFAULT_CONFIG_FILENAME = ".patternlint.yaml"

# Category README lines that state the folder size. Each has one group
# capturing the count; matched case-insensitively against prose lines.
DEFAULT_README_COUNT_PATTERNS: tuple[str, ...] = (
    r"^\s*(?:>\s*)?this (?:category|folder) (?:holds|contains|has|groups|covers)"
    r" (\d+) (?:patterns?|files?)\b",
    r"^\s*>\s*(\d+) (?:patterns?|files?)\b",
    r"^#{2,6}\s+patterns?\s*\((\d+)\)\s*$",
)

# Same default as the contract linter batch threshold
DEFAULT_PARALLEL_THRESHOLD = 10

DEFAULT_SECTIONS: tuple[ModelSectionSpec, ...] = (
    ModelSectionSpec(
        name="Principle",
        aliases=["concept", "principle / concept", "principle and concept"],
    ),
    ModelSectionSpec(
        name="Problem Solved",
        aliases=["problem", "problems solved", "problem addressed"],
    ),
    ModelSectionSpec(name="Solution", aliases=["implementation"]),
    ModelSectionSpec(
        name="Complete Example",
        required=False,
        aliases=["full example", "worked example"],
    ),
    ModelSectionSpec(name="Variants", required=False, aliases=["variations"]),
    ModelSectionSpec(
        name="When to Use",
        aliases=["when to use / when not to use", "when to use it"],
    ),
    ModelSectionSpec(
        name="When Not to Use",
        aliases=["when to use / when not to use", "when not to use it"],
    ),
    ModelSectionSpec(
        name="Advantages / Disadvantages",
        aliases=[
            "advantages",
            "advantages and disadvantages",
            "pros and cons",
            "pros / cons",
            "trade-offs",
            "tradeoffs",
        ],
    ),
    ModelSectionSpec(name="Anti-patterns", aliases=["antipatterns", "anti patterns"]),
    ModelSectionSpec(name="Related Patterns"),
    ModelSectionSpec(
        name="Framework Implementations",
        required=False,
        aliases=[
            "recommended libraries",
            "framework implementations / recommended libraries",
            "libraries",
        ],
    ),
    ModelSectionSpec(name="Tests", required=False, aliases=["testing"]),
    ModelSectionSpec(name="Sources", aliases=["references"]),
)


class ModelValidatorConfig(BaseModel):
    """Configuration for the taxonomy validator and authoring tools.

    Attributes:
        exemplar_language: Fence tag every code block must carry. None means
            detect the most common tag in the corpus.
        exemplar_language_aliases: Extra tags treated as the exemplar.
        diagram_languages: Fence tags that mark ASCII diagrams.
        dto_tag_categories: Categories whose files are scanned for dto tags.
        excluded_dirs: Top-level folders that are never categories.
        sections: Ordered pattern-file skeleton.
        check_readme_counts: Require category READMEs to state their pattern
            count, and check that it is accurate.
        readme_count_patterns: Regexes recognising a count statement line in
            a category README; group 1 is the count.
        alphabetical_heading: Substring identifying the root index
            alphabetical section heading.
        parallel_threshold: File count above which files are read in a
            thread pool.
        max_workers: Thread pool size (None: min(files, cpu_count)).
        log_level: Logging level when --verbose is not given.
    """

    exemplar_language: str | None = Field(
        default=None,
        description="Fence tag for all code examples (None: auto-detect)",
    )

    exemplar_language_aliases: list[str] = Field(
        default_factory=list,
        description="Extra fence tags accepted as the exemplar language",
    )

    diagram_languages: list[str] = Field(
        default_factory=lambda: ["text", "ascii", "plaintext", "txt"],
        description="Fence tags that mark diagrams, exempt from the exemplar rule",
    )

    dto_tag_categories: list[str] = Field(
        default_factory=lambda: ["enterprise"],
        description="Categories whose files must use well-formed dto tags",
    )

    excluded_dirs: list[str] = Field(
        default_factory=list,
        description="Top-level folders that are not categories",
    )

    sections: list[ModelSectionSpec] = Field(
        default_factory=lambda: list(DEFAULT_SECTIONS),
        min_length=1,
        description="Ordered pattern-file skeleton",
    )

    check_readme_counts: bool = Field(
        default=True,
        description="Require and check the pattern count stated in category READMEs",
    )

    readme_count_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_README_COUNT_PATTERNS),
        min_length=1,
        description="Regexes for count statement lines; group 1 is the count",
    )

    alphabetical_heading: str = Field(
        default="alphabetical",
        min_length=1,
        description="Heading substring of the root alphabetical index",
    )

    parallel_threshold: int = Field(
        default=DEFAULT_PARALLEL_THRESHOLD,
        ge=1,
        description="Read files in parallel above this many files",
    )

    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Thread pool size for parallel reads",
    )

    log_level: EnumLogLevel = Field(
        default=EnumLogLevel.WARNING,
        description="Logging level when --verbose is not given",
    )

    model_config = ConfigDict(extra="forbid")

    # ==========================================
    # Validators
    # ==========================================

    @field_validator(
        "exemplar_language_aliases", "diagram_languages", "dto_tag_categories"
    )
    @classmethod
    def normalize_tags(cls, v: list[str]) -> list[str]:
        """Lowercase and strip tag lists."""
        return [item.strip().lower() for item in v if item.strip()]

    @field_validator("exemplar_language")
    @classmethod
    def normalize_exemplar(cls, v: str | None) -> str | None:
        """Lowercase the exemplar tag; blank means auto-detect."""
        if v is None or not v.strip():
            return None
        return v.strip().lower()

    @field_validator("readme_count_patterns")
    @classmethod
    def validate_count_patterns(cls, v: list[str]) -> list[str]:
        """Each pattern must compile and capture the count in a group."""
        for pattern in v:
            try:
                compiled = re.compile(pattern)
            except re.error as e:
                raise ValueError(f"Invalid count pattern {pattern!r}: {e}") from e
            if compiled.groups < 1:
                raise ValueError(f"Count pattern {pattern!r} has no capture group")
        return v

    @model_validator(mode="after")
    def validate_unique_sections(self) -> ModelValidatorConfig:
        """Section names must be unique so findings are unambiguous."""
        seen: set[str] = set()
        for section in self.sections:
            key = section.name.lower()
            if key in seen:
                raise ValueError(f"Duplicate section name in skeleton: {section.name}")
            seen.add(key)
        return self

    # ==========================================
    # Derived values
    # ==========================================

    def accepted_languages(self, exemplar: str) -> frozenset[str]:
        """Return every fence tag treated as the exemplar language."""
        return frozenset({exemplar, *self.exemplar_language_aliases})

    def count_statement_patterns(self) -> list[re.Pattern[str]]:
        """Compiled README count statement patterns, case-insensitive."""
        return [re.compile(p, re.IGNORECASE) for p in self.readme_count_patterns]

    # ==========================================
    # Factory Methods
    # ==========================================

    @classmethod
    def from_yaml(cls, path: str | Path) -> ModelValidatorConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            ModelValidatorConfig instance.

        Raises:
            ConfigError: If the file is missing, is not valid YAML, or fails
                validation.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file '{path}': {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file '{path}': {e}") from e

        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise ConfigError(
                f"Config file '{path}' must contain a mapping, "
                f"got {type(data).__name__}"
            )

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in '{path}': {e}") from e


def load_config(root: Path, config_path: Path | None = None) -> ModelValidatorConfig:
    """Resolve the configuration for a corpus root.

    Args:
        root: Corpus root directory.
        config_path: Explicit config file. Must exist when given.

    Returns:
        Loaded configuration, or defaults when no config file is present.

    Raises:
        ConfigError: If the config file is invalid, or an explicit path is
            missing.
    """
    if config_path is not None:
        logger.debug("Loading config from %s", config_path)
        return ModelValidatorConfig.from_yaml(config_path)

    default_path = root / DEFAULT_CONFIG_FILENAME
    if default_path.is_file():
        logger.debug("Loading config from %s", default_path)
        return ModelValidatorConfig.from_yaml(default_path)

    return ModelValidatorConfig()


__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_PARALLEL_THRESHOLD",
    "DEFAULT_README_COUNT_PATTERNS",
    "DEFAULT_SECTIONS",
    "ModelValidatorConfig",
    "load_config",
]
