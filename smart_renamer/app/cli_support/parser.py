"""CLI parser construction helpers."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version as get_version

from smart_renamer.app.cli_support.parser_groups import (
    _add_analyze_code_parser,
    _add_analyze_parser,
    _add_config_parser,
    _add_init_parser,
    _add_rename_parser,
    _add_set_convention_parser,
    _add_suggest_parser,
    _add_validate_code_parser,
    _add_validate_parser,
    _common_options,
)

USAGE_EXAMPLES = """
file names:
  init            Create a config (convention detected from existing files)
  set-convention  Change the file naming convention
  validate        Check file names against the convention
  suggest         Rank suggestions for one file name
  rename          Rename files to follow the convention

code identifiers:
  validate-code   Check declarations against the code conventions
  analyze-code    Histogram declarations by convention

both:
  analyze         File and code summary with recommendations
  config          Show, set or reset configuration values

examples:
  renamer init --convention kebab-case
  renamer validate --fix
  renamer rename --dry-run
  renamer rename --yes --keep README.md,Makefile
  renamer validate-code --patterns "src/**/*.ts"
  renamer analyze-code --json
  renamer config set code.types PascalCase
"""


class _NoAbbrevArgumentParser(argparse.ArgumentParser):
    """Argparse parser variant that disables long-option abbreviation."""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("allow_abbrev", False)
        super().__init__(*args, **kwargs)


def _cli_version_string() -> str:
    """Return the best available CLI version label."""
    try:
        return f"renamer {get_version('smart-renamer')}"
    except PackageNotFoundError:
        return "renamer (version unknown)"


def create_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser with all subcommands."""
    parser = _NoAbbrevArgumentParser(
        prog="renamer",
        description="Renamer: infer, validate and convert naming conventions",
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=_cli_version_string(),
    )
    sub = parser.add_subparsers(
        dest="command",
        required=True,
        parser_class=_NoAbbrevArgumentParser,
    )
    common = _common_options()
    _add_init_parser(sub, common)
    _add_set_convention_parser(sub, common)
    _add_validate_parser(sub, common)
    _add_suggest_parser(sub, common)
    _add_analyze_parser(sub, common)
    _add_rename_parser(sub, common)
    _add_validate_code_parser(sub, common)
    _add_analyze_code_parser(sub, common)
    _add_config_parser(sub, common)
    return parser


__all__ = ["USAGE_EXAMPLES", "create_parser"]
