"""set-convention command: change the file naming convention."""

from __future__ import annotations

import argparse
import sys

from smart_renamer.app.commands.helpers.runtime import command_runtime
from smart_renamer.config import save_config, set_config_value
from smart_renamer.output import colorize, print_error


def cmd_set_convention(args: argparse.Namespace) -> None:
    runtime = command_runtime(args)
    config = runtime.config
    set_config_value(config, "convention", args.convention)
    try:
        save_config(config, runtime.config_file)
    except OSError as exc:
        print_error(f"could not save config: {exc}")
        sys.exit(1)
    print(colorize(f"Convention set to '{config['convention']}'", "green"))


__all__ = ["cmd_set_convention"]
