# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Validator configuration loaded from ``.patternlint.yaml``."""

from patternlint.config.enum_log_level import EnumLogLevel
from patternlint.config.model_section_spec import ModelSectionSpec
from patternlint.config.model_validator_config import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_SECTIONS,
    ModelValidatorConfig,
    load_config,
)

__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_SECTIONS",
    "EnumLogLevel",
    "ModelSectionSpec",
    "ModelValidatorConfig",
    "load_config",
]
