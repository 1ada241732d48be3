"""config command: show, set or reset project configuration values."""

from __future__ import annotations

import argparse
import json
import sys

from smart_renamer.app.commands.helpers.runtime import command_runtime
from smart_renamer.config import save_config, set_config_value, unset_config_value
from smart_renamer.file_discovery import rel
from smart_renamer.output import colorize, print_error


def cmd_config(args: argparse.Namespace) -> None:
    action = getattr(args, "config_action", None)
    if action == "set":
        _config_set(args)
    elif action == "unset":
        _config_unset(args)
    else:
        _config_show(args)


def _config_show(args: argparse.Namespace) -> None:
    runtime = command_runtime(args)
    source = rel(runtime.config_file, runtime.root) if runtime.config_file.exists() else "defaults"
    print(colorize(f"Configuration ({source}):", "bold"))
    print(json.dumps(runtime.config, indent=2))


def _config_set(args: argparse.Namespace) -> None:
    runtime = command_runtime(args)
    try:
        set_config_value(runtime.config, args.config_key, args.config_value)
    except (KeyError, ValueError) as exc:
        print_error(exc.args[0] if exc.args else str(exc))
        sys.exit(1)
    _save(runtime)
    print(colorize(f"Set {args.config_key} = {args.config_value}", "green"))


def _config_unset(args: argparse.Namespace) -> None:
    runtime = command_runtime(args)
    try:
        unset_config_value(runtime.config, args.config_key)
    except KeyError as exc:
        print_error(exc.args[0] if exc.args else str(exc))
        sys.exit(1)
    _save(runtime)
    print(colorize(f"Reset {args.config_key} to its default", "green"))


def _save(runtime) -> None:
    try:
        save_config(runtime.config, runtime.config_file)
    except OSError as exc:
        print_error(f"could not save config: {exc}")
        sys.exit(1)


__all__ = ["cmd_config"]
