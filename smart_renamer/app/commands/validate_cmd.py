"""validate command: check file names against the configured convention."""

from __future__ import annotations

import argparse
import shlex
import sys

from smart_renamer.app.commands.helpers.runtime import command_runtime
from smart_renamer.app.commands.helpers.targets import target_files
from smart_renamer.config import file_convention
from smart_renamer.engine.suggestions import validate_file_name
from smart_renamer.output import colorize


def cmd_validate(args: argparse.Namespace) -> None:
    """Report file names that break the convention; exit 1 when any do."""
    runtime = command_runtime(args)
    convention = file_convention(runtime.config)
    exceptions = runtime.config.get("exceptions", [])
    print(colorize(f"Validating files against '{convention}' convention...\n", "bold"))

    invalid: list[tuple[str, str]] = []
    for info in target_files(runtime):
        result = validate_file_name(info.name, convention, exceptions)
        if result.is_valid or not result.expected_name:
            continue
        invalid.append((info.path, result.expected_name))
        print(colorize(f"  {info.name}", "red"))
        print(f"    Should be: {result.expected_name}")
        print(colorize(f"    Path: {info.path}", "dim"))

    if not invalid:
        print(colorize("All files follow the naming convention.", "green"))
        return

    print(f"\nFound {len(invalid)} file(s) that don't follow the convention.")
    if args.fix:
        print(colorize("\nSuggested fixes:", "bold"))
        for path, expected in invalid:
            parent = path.rpartition("/")[0]
            target = f"{parent}/{expected}" if parent else expected
            print(f"mv {shlex.quote(path)} {shlex.quote(target)}")
    sys.exit(1)


__all__ = ["cmd_validate"]
