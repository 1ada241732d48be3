"""suggest command: ranked rename suggestions for one file name."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict

from smart_renamer.app.commands.helpers.runtime import command_runtime
from smart_renamer.config import file_convention
from smart_renamer.engine.suggestions import suggest_multiple_names


def cmd_suggest(args: argparse.Namespace) -> None:
    runtime = command_runtime(args)
    primary = file_convention(runtime.config)
    suggestions = suggest_multiple_names(
        args.filename, primary, runtime.config.get("exceptions", [])
    )

    if args.json:
        print(json.dumps([asdict(s) for s in suggestions], indent=2))
        return

    print(f"Suggestions for: {args.filename}\n")
    for suggestion in suggestions:
        marker = "*" if suggestion.convention == primary else " "
        print(
            f"{marker} {suggestion.convention:<20} {suggestion.suggested:<30} "
            f"({suggestion.confidence * 100:.1f}%)"
        )


__all__ = ["cmd_suggest"]
