# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""
patternlint CLI.

Validates a design-pattern Markdown corpus against its editorial contract
and helps authors keep it that way.

Usage:
    python -m patternlint check
    python -m patternlint check --root path/to/patterns --format json
    python -m patternlint check --metrics --verbose
    python -m patternlint new-pattern --category concurrency --name "Foo Bar"
    python -m patternlint new-category --name "Cloud Native"
    python -m patternlint index --check

Rules:
    V1 - category counts in the root index match the folders
    V2 - every pattern is listed in its category README and the root index
    V3 - relative links resolve, external links are well-formed
    V4 - related-pattern tables reference pattern files by slug
    V5 - slugs are unique and kebab-case
    V6 - pattern files follow the section skeleton
    V7 - dto:"direction,context,security" tags use the frozen vocabulary
    V8 - code blocks use the exemplar language

Exit Codes:
    0 - Success: no findings (or command completed)
    1 - Findings: the corpus breaks the contract, or indexes are stale
    2 - Error: usage error, unreadable corpus, invalid config, cancellation
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import threading
from pathlib import Path

from patternlint.authoring import instantiate_category, instantiate_pattern
from patternlint.config import EnumLogLevel, ModelValidatorConfig, load_config
from patternlint.corpus import load_corpus
from patternlint.errors import PatternLintError
from patternlint.index import generated_blocks, regenerate_indexes
from patternlint.taxonomy import (
    EnumTaxonomyRule,
    ModelValidationMetrics,
    ModelValidationResult,
    run_validation,
)

# JSON output indentation (spaces)
JSON_INDENT_SPACES = 2

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

EXIT_CLEAN = 0
EXIT_FINDINGS = 1
EXIT_ERROR = 2


def _configure_logging(verbose: bool, config: ModelValidatorConfig | None) -> None:
    """Send log records to stderr; stdout is reserved for findings."""
    if verbose:
        level = EnumLogLevel.DEBUG
    elif config is not None:
        level = config.log_level
    else:
        level = EnumLogLevel.WARNING
    logging.basicConfig(level=level.value, format=LOG_FORMAT, stream=sys.stderr)


def _format_metrics_text(metrics: ModelValidationMetrics, files_scanned: int) -> str:
    """Format metrics as human-readable text.

    Args:
        metrics: The validation metrics to format.
        files_scanned: Number of Markdown files scanned.

    Returns:
        Formatted metrics text block.
    """
    lines: list[str] = []
    lines.append("Metrics:")
    lines.append(f"  Files scanned: {files_scanned}")
    lines.append(f"  Categories: {metrics.categories_scanned}")
    lines.append(f"  Patterns: {metrics.patterns_scanned}")

    duration_sec = metrics.duration_ms / 1000.0
    lines.append(f"  Duration: {duration_sec:.2f}s")
    lines.append(f"  Exemplar language: {metrics.exemplar_language or '(none)'}")

    total = sum(metrics.findings_by_rule.values())
    lines.append(f"  Findings: {total}")
    if metrics.findings_by_rule:
        lines.append("  By rule:")
        for rule_id in sorted(
            metrics.findings_by_rule, key=lambda r: EnumTaxonomyRule(r).number
        ):
            lines.append(f"    {rule_id}: {metrics.findings_by_rule[rule_id]}")

    return "\n".join(lines)


def _format_text_output(result: ModelValidationResult) -> str:
    """One ``<path>: <rule>: <reason>`` line per finding; empty when clean."""
    return "\n".join(str(f) for f in result.findings)


def _format_json_output(result: ModelValidationResult) -> str:
    """Format findings as a JSON array of ``{"path", "rule", "reason"}``."""
    return json.dumps(
        [f.to_dict() for f in result.findings], indent=JSON_INDENT_SPACES
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_check(args: argparse.Namespace) -> int:
    """Validate the corpus and print findings."""
    config = load_config(args.root, args.config)
    _configure_logging(args.verbose, config)

    rules = [EnumTaxonomyRule(r) for r in args.rule] if args.rule else None
    stop_event = threading.Event()
    try:
        result = run_validation(
            args.root,
            config,
            rules=rules,
            stop_event=stop_event,
            collect_metrics=args.metrics,
        )
    except KeyboardInterrupt:
        stop_event.set()
        print("Error: validation cancelled", file=sys.stderr)
        return EXIT_ERROR

    if args.format == "json":
        print(_format_json_output(result))
    elif not result.is_clean:
        print(_format_text_output(result))

    if args.metrics and result.metrics is not None:
        print(_format_metrics_text(result.metrics, result.files_scanned), file=sys.stderr)

    return EXIT_CLEAN if result.is_clean else EXIT_FINDINGS


def cmd_new_pattern(args: argparse.Namespace) -> int:
    """Create a pattern file from the pattern template."""
    _configure_logging(args.verbose, None)
    root = args.root.resolve()
    path = instantiate_pattern(
        root,
        args.category,
        args.name,
        intent=args.intent,
        language=args.language,
        overwrite=args.force,
    )
    print(f"Created {path.relative_to(root).as_posix()}")
    print(
        "Run 'patternlint index --write' to list it in the indexes.",
        file=sys.stderr,
    )
    return EXIT_CLEAN


def cmd_new_category(args: argparse.Namespace) -> int:
    """Create a category folder with a README from the README template."""
    _configure_logging(args.verbose, None)
    root = args.root.resolve()
    path = instantiate_category(root, args.name, description=args.description)
    print(f"Created {path.relative_to(root).as_posix()}")
    return EXIT_CLEAN


def cmd_index(args: argparse.Namespace) -> int:
    """Print, write or verify the generated index blocks."""
    config = load_config(args.root, args.config)
    _configure_logging(args.verbose, config)
    root = args.root.resolve()

    if args.write:
        for path in regenerate_indexes(root, config, write=True):
            print(f"Updated {path.relative_to(root).as_posix()}")
        return EXIT_CLEAN

    if args.check:
        stale = regenerate_indexes(root, config, write=False)
        for path in stale:
            print(f"{path.relative_to(root).as_posix()}: generated index is stale")
        return EXIT_FINDINGS if stale else EXIT_CLEAN

    corpus = load_corpus(root, config)
    for path, blocks in sorted(generated_blocks(corpus).items()):
        rel_path = path.relative_to(root).as_posix()
        for name, content in blocks.items():
            print(f"<!-- {rel_path}: {name} -->")
            print(content)
            print()
    return EXIT_CLEAN


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--root",
        "-r",
        type=Path,
        default=Path("."),
        metavar="PATH",
        help="Corpus root directory (default: current directory)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging on stderr",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        description="patternlint - validate and maintain a design-pattern corpus",
        prog="patternlint",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s check                                   # Validate the current directory
  %(prog)s check --root patterns --format json     # JSON output for CI
  %(prog)s check --rule V3 --rule V4               # Only link rules
  %(prog)s new-pattern --category concurrency --name "Foo Bar"
  %(prog)s new-category --name "Cloud Native" --description "Cloud patterns"
  %(prog)s index --write                           # Refresh generated tables
""",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Check command
    check_parser = subparsers.add_parser("check", help="Validate the corpus")
    _add_common_arguments(check_parser)
    check_parser.add_argument(
        "--format",
        "-f",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    check_parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        metavar="PATH",
        help="Config file (default: <root>/.patternlint.yaml if present)",
    )
    check_parser.add_argument(
        "--metrics",
        "-m",
        action="store_true",
        help="Print files scanned, duration and findings by rule on stderr",
    )
    check_parser.add_argument(
        "--rule",
        action="append",
        choices=[r.value for r in EnumTaxonomyRule],
        metavar="ID",
        help="Run only this rule (repeatable, V1-V8)",
    )
    check_parser.set_defaults(handler=cmd_check)

    # New pattern command
    pattern_parser = subparsers.add_parser(
        "new-pattern", help="Create a pattern file from the template"
    )
    _add_common_arguments(pattern_parser)
    pattern_parser.add_argument("--category", required=True, help="Category folder")
    pattern_parser.add_argument("--name", required=True, help="Pattern display name")
    pattern_parser.add_argument("--intent", default=None, help="One-line intent")
    pattern_parser.add_argument(
        "--language",
        default=None,
        help="Code fence tag (default: the corpus exemplar language)",
    )
    pattern_parser.add_argument(
        "--force", action="store_true", help="Overwrite an existing file"
    )
    pattern_parser.set_defaults(handler=cmd_new_pattern)

    # New category command
    category_parser = subparsers.add_parser(
        "new-category", help="Create a category folder and README"
    )
    _add_common_arguments(category_parser)
    category_parser.add_argument("--name", required=True, help="Category name")
    category_parser.add_argument(
        "--description", default=None, help="One-line category description"
    )
    category_parser.set_defaults(handler=cmd_new_category)

    # Index command
    index_parser = subparsers.add_parser(
        "index", help="Print, write or verify generated index tables"
    )
    _add_common_arguments(index_parser)
    index_parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        metavar="PATH",
        help="Config file (default: <root>/.patternlint.yaml if present)",
    )
    mode = index_parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--write", action="store_true", help="Rewrite stale generated blocks"
    )
    mode.add_argument(
        "--check",
        action="store_true",
        help="Exit 1 if any generated block is stale",
    )
    index_parser.set_defaults(handler=cmd_index)

    return parser


def main(args: list[str] | None = None) -> int:
    """CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None).

    Returns:
        Exit code following Unix conventions:
            0 - Success
            1 - Findings or stale indexes
            2 - Error: usage error, unreadable corpus, invalid config
    """
    parser = build_parser()
    try:
        parsed_args = parser.parse_args(args)
    except SystemExit as e:
        # argparse exits 0 for --help and 2 for usage errors
        return e.code if isinstance(e.code, int) else EXIT_ERROR

    if parsed_args.command is None:
        parser.print_help(sys.stderr)
        return EXIT_ERROR

    try:
        return int(parsed_args.handler(parsed_args))

    except PatternLintError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    except KeyboardInterrupt:
        print("Error: interrupted", file=sys.stderr)
        return EXIT_ERROR

    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
