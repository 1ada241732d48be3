"""analyze command: file and code naming summary with recommendations."""

from __future__ import annotations

import argparse

from smart_renamer.app.commands.helpers.rendering import (
    print_code_summary,
    print_file_summary,
    print_violation_counts,
    section,
)
from smart_renamer.app.commands.helpers.runtime import command_runtime
from smart_renamer.app.commands.helpers.targets import analyze_code, project_files
from smart_renamer.config import code_conventions
from smart_renamer.engine.analysis import analyze_file_names
from smart_renamer.engine.validation import validate_identifiers
from smart_renamer.output import colorize

CONSISTENCY_THRESHOLD = 0.8


def cmd_analyze(args: argparse.Namespace) -> None:
    runtime = command_runtime(args)
    recommendations: list[str] = []
    print(colorize("Project Analysis\n", "bold"))

    if not args.code_only:
        section("File Naming Analysis")
        files = analyze_file_names(info.name for info in project_files(runtime))
        print_file_summary(files)
        if files.consistency < CONSISTENCY_THRESHOLD:
            recommendations += [
                "File naming could be improved:",
                "  - Run `renamer validate --fix` to see file suggestions",
                "  - Run `renamer rename --dry-run` to preview changes",
            ]
        else:
            recommendations.append("File naming is consistent.")

    if not args.files_only:
        section("Code Naming Analysis")
        code = analyze_code(runtime, args.patterns)
        validation = validate_identifiers(code.identifiers, code_conventions(runtime.config))
        print(f"Violations found: {validation.total_violations}\n")
        print_code_summary(code.summary)
        if validation.violations_by_category:
            print(colorize("Top violations:", "red"))
            print_violation_counts(validation.violations_by_category)
            print()
        if validation.total_violations:
            recommendations += [
                "Code naming could be improved:",
                "  - Run `renamer validate-code --fix` to see code suggestions",
                "  - Adjust the `code` section of .renamer/config.json if the "
                "conventions are wrong",
            ]
        else:
            recommendations.append("Code naming follows conventions.")

    section("Recommendations")
    for line in recommendations:
        print(line)


__all__ = ["cmd_analyze"]
