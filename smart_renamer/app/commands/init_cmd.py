"""init command: write a project config, defaulting to the detected convention."""

from __future__ import annotations

import argparse
import sys

from smart_renamer.app.commands.helpers.runtime import command_runtime
from smart_renamer.app.commands.helpers.targets import project_files
from smart_renamer.config import config_exists, default_config, save_config
from smart_renamer.core.detection import detect_convention
from smart_renamer.core.enums import NamingConvention
from smart_renamer.file_discovery import rel
from smart_renamer.output import colorize, print_error


def cmd_init(args: argparse.Namespace) -> None:
    """Create .renamer/config.json for the project."""
    runtime = command_runtime(args)
    if config_exists(runtime.config_file) and not args.force:
        print(
            colorize(
                f"Config already exists at {rel(runtime.config_file, runtime.root)}; "
                "use --force to overwrite.",
                "yellow",
            )
        )
        return

    detected = detect_convention(info.name for info in project_files(runtime))
    convention = args.convention or detected or NamingConvention.CAMEL

    config = default_config()
    config["convention"] = str(convention)
    try:
        save_config(config, runtime.config_file)
    except OSError as exc:
        print_error(f"could not save config: {exc}")
        sys.exit(1)

    print(colorize(f"Configuration saved to {rel(runtime.config_file, runtime.root)}", "green"))
    print(f"  File convention:   {config['convention']}")
    print(f"  Folder convention: {config['folders']}")
    print("  Code conventions:")
    for category, token in config["code"].items():
        print(f"    {category.capitalize():<12} {token}")
    if args.convention and detected and args.convention != detected:
        print(
            colorize(
                f"\n  Note: detected '{detected}' in existing files, "
                f"but you chose '{args.convention}'",
                "yellow",
            )
        )
    print(colorize("\n  Next: renamer validate-code, renamer analyze-code", "dim"))


__all__ = ["cmd_init"]
