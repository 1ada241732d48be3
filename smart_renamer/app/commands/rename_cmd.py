"""rename command: plan and apply file renames to the configured convention."""

from __future__ import annotations

import argparse

from smart_renamer.app.commands.helpers.runtime import command_runtime
from smart_renamer.app.commands.helpers.targets import target_files
from smart_renamer.config import file_convention
from smart_renamer.engine.renaming import apply_renames, plan_renames
from smart_renamer.output import colorize, log


def cmd_rename(args: argparse.Namespace) -> None:
    """Preview renames by default; only ``--yes`` touches the filesystem."""
    runtime = command_runtime(args)
    convention = file_convention(runtime.config)
    keep = {name.strip() for name in args.keep.split(",") if name.strip()}
    print(colorize(f"Finding files to rename to '{convention}' convention...\n", "bold"))

    planned, skipped = plan_renames(
        target_files(runtime),
        convention,
        runtime.config.get("exceptions", []),
        keep,
    )
    for path, reason in skipped:
        log(f"  Skipping {path} ({reason})")

    if not planned:
        print(colorize("All files already follow the naming convention.", "green"))
        return

    apply = args.yes and not args.dry_run
    print(f"{'Renaming' if apply else 'Would rename'} {len(planned)} file(s):\n")
    for plan in planned:
        print(f"  {plan.path} -> {plan.target}")

    if not apply:
        hint = "Dry run complete." if args.dry_run else "Re-run with --yes to apply."
        print(colorize(f"\n{hint} No files were renamed.", "dim"))
        return

    report = apply_renames(planned, runtime.root)
    print()
    for plan, error in report.failed:
        print(colorize(f"  Failed to rename {plan.path}: {error}", "red"))
    print(
        colorize(
            f"Completed: {len(report.renamed)} renamed, {len(report.failed)} failed",
            "green" if not report.failed else "yellow",
        )
    )


__all__ = ["cmd_rename"]
