"""CLI parser group builders, one per subcommand."""

from __future__ import annotations

import argparse

from smart_renamer.core.enums import convention_tokens


def _common_options() -> argparse.ArgumentParser:
    """Options accepted after every subcommand."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--path",
        type=str,
        default=None,
        help="Project root directory (default: $RENAMER_ROOT or current directory)",
    )
    common.add_argument(
        "--verbose", "-v", action="store_true", help="Show debug logging"
    )
    return common


def _add_patterns_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--patterns",
        type=str,
        default=None,
        help="Comma-separated source globs (default: config code_patterns)",
    )


def _add_init_parser(sub, common) -> None:
    p_init = sub.add_parser(
        "init", parents=[common], help="Create .renamer/config.json for this project"
    )
    p_init.add_argument(
        "--convention",
        choices=convention_tokens(),
        default=None,
        help="File naming convention (default: detected from existing files)",
    )
    p_init.add_argument(
        "--force", action="store_true", help="Overwrite an existing configuration"
    )


def _add_set_convention_parser(sub, common) -> None:
    p_set = sub.add_parser(
        "set-convention", parents=[common], help="Set the file naming convention"
    )
    p_set.add_argument(
        "convention", type=str, help=f"One of: {', '.join(convention_tokens())}"
    )


def _add_validate_parser(sub, common) -> None:
    p_validate = sub.add_parser(
        "validate", parents=[common], help="Check file names against the convention"
    )
    p_validate.add_argument(
        "--fix", action="store_true", help="Print mv commands for invalid names"
    )


def _add_suggest_parser(sub, common) -> None:
    p_suggest = sub.add_parser(
        "suggest", parents=[common], help="Rank name suggestions for a file name"
    )
    p_suggest.add_argument("filename", type=str, help="File name to suggest for")
    p_suggest.add_argument("--json", action="store_true", help="Output as JSON")


def _add_analyze_parser(sub, common) -> None:
    p_analyze = sub.add_parser(
        "analyze", parents=[common], help="Summarize file and code naming"
    )
    scope = p_analyze.add_mutually_exclusive_group()
    scope.add_argument(
        "--files-only", action="store_true", help="Only analyze file names"
    )
    scope.add_argument(
        "--code-only", action="store_true", help="Only analyze code identifiers"
    )
    _add_patterns_option(p_analyze)


def _add_rename_parser(sub, common) -> None:
    p_rename = sub.add_parser(
        "rename", parents=[common], help="Rename files to follow the convention"
    )
    p_rename.add_argument(
        "--dry-run", action="store_true", help="Show renames without applying them"
    )
    p_rename.add_argument(
        "--yes", "-y", action="store_true", help="Apply the planned renames"
    )
    p_rename.add_argument(
        "--keep",
        type=str,
        default="",
        help="Comma-separated file names to leave untouched",
    )


def _add_validate_code_parser(sub, common) -> None:
    p_code = sub.add_parser(
        "validate-code",
        parents=[common],
        help="Check code identifiers against the code conventions",
    )
    p_code.add_argument(
        "--fix", action="store_true", help="Show alternative spellings"
    )
    p_code.add_argument("--json", action="store_true", help="Output as JSON")
    _add_patterns_option(p_code)


def _add_analyze_code_parser(sub, common) -> None:
    p_code = sub.add_parser(
        "analyze-code",
        parents=[common],
        help="Histogram code identifiers by convention",
    )
    p_code.add_argument("--json", action="store_true", help="Output as JSON")
    _add_patterns_option(p_code)


def _add_config_parser(sub, common) -> None:
    p_config = sub.add_parser("config", help="Show/set/unset project configuration")
    config_sub = p_config.add_subparsers(dest="config_action")
    config_sub.add_parser("show", parents=[common], help="Show all config values")
    c_set = config_sub.add_parser("set", parents=[common], help="Set a config value")
    c_set.add_argument("config_key", type=str, help="Config key name (e.g. code.types)")
    c_set.add_argument("config_value", type=str, help="Value to set")
    c_unset = config_sub.add_parser(
        "unset", parents=[common], help="Reset a config key to default"
    )
    c_unset.add_argument("config_key", type=str, help="Config key name")


__all__ = [
    "_add_analyze_code_parser",
    "_add_analyze_parser",
    "_add_config_parser",
    "_add_init_parser",
    "_add_rename_parser",
    "_add_set_convention_parser",
    "_add_suggest_parser",
    "_add_validate_code_parser",
    "_add_validate_parser",
    "_common_options",
]
