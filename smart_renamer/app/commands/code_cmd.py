"""validate-code and analyze-code commands."""

from __future__ import annotations

import argparse
import json
import sys
from collections import defaultdict

from smart_renamer.app.commands.helpers.rendering import (
    print_code_summary,
    print_violation_counts,
)
from smart_renamer.app.commands.helpers.runtime import command_runtime
from smart_renamer.app.commands.helpers.targets import analyze_code
from smart_renamer.config import code_conventions
from smart_renamer.engine.validation import (
    ValidationOutcome,
    suggest_alternatives,
    validate_identifiers,
)
from smart_renamer.output import colorize


def _violation_payload(outcome: ValidationOutcome) -> dict:
    ident = outcome.identifier
    return {
        "file": ident.source_file,
        "line": ident.line,
        "column": ident.column,
        "name": ident.name,
        "category": ident.category,
        "component_like": ident.is_component_like,
        "expected": outcome.expected_convention,
        "suggested": outcome.suggested_name,
        "message": outcome.violation_message,
    }


def cmd_validate_code(args: argparse.Namespace) -> None:
    """Report identifiers that break the code conventions; exit 1 when any do."""
    runtime = command_runtime(args)
    conventions = code_conventions(runtime.config)
    result = analyze_code(runtime, args.patterns)
    summary = validate_identifiers(result.identifiers, conventions)

    if args.json:
        print(
            json.dumps(
                {
                    "total_checked": summary.total_checked,
                    "total_violations": summary.total_violations,
                    "violations_by_category": summary.violations_by_category,
                    "violations": [_violation_payload(v) for v in summary.violations],
                    "skipped": [{"file": p, "reason": r} for p, r in result.skipped],
                },
                indent=2,
            )
        )
        if summary.total_violations:
            sys.exit(1)
        return

    print(colorize("Validating code conventions...\n", "bold"))
    for category, token in conventions.as_dict().items():
        print(colorize(f"  {category.capitalize():<12} {token}", "dim"))
    print()

    if not summary.total_violations:
        print(colorize("All code follows the naming conventions.", "green"))
        print(f"Checked {summary.total_checked} identifier(s).")
        return

    by_file: dict[str, list[ValidationOutcome]] = defaultdict(list)
    for outcome in summary.violations:
        by_file[outcome.identifier.source_file].append(outcome)

    print(colorize(f"Found {summary.total_violations} naming violation(s):\n", "red"))
    for path, outcomes in by_file.items():
        print(colorize(f"{path}:", "bold"))
        for outcome in outcomes:
            print(
                f"  Line {outcome.identifier.line}: {outcome.violation_message} "
                f"-> \"{outcome.suggested_name}\""
            )
            if args.fix:
                alternatives = suggest_alternatives(outcome.identifier, conventions)
                if alternatives:
                    names = ", ".join(name for _, name in alternatives)
                    print(colorize(f"    Alternatives: {names}", "dim"))
        print()

    print(colorize("Violation summary:", "bold"))
    print_violation_counts(summary.violations_by_category)
    print(
        f"\nTotal: {summary.total_violations} violation(s) in {len(by_file)} file(s)"
    )
    if not args.fix:
        print(colorize("\nUse --fix to see alternative spellings", "dim"))
    sys.exit(1)


def cmd_analyze_code(args: argparse.Namespace) -> None:
    runtime = command_runtime(args)
    result = analyze_code(runtime, args.patterns)
    summary = result.summary

    if args.json:
        print(
            json.dumps(
                {
                    "total_identifiers": summary.total_identifiers,
                    "consistency_score": summary.consistency_score,
                    "conventions": summary.conventions,
                    "skipped": [{"file": p, "reason": r} for p, r in result.skipped],
                },
                indent=2,
            )
        )
        return

    print(colorize("Analyzing code naming patterns...\n", "bold"))
    print_code_summary(summary)
    if summary.total_identifiers and summary.consistency_score < 0.8:
        print(colorize("Recommendations:", "yellow"))
        print("  - Standardize naming conventions across the project")
        print("  - Use `renamer validate-code --fix` to see specific suggestions")
    elif summary.total_identifiers:
        print(colorize("Good consistency: code follows consistent naming patterns.", "green"))


__all__ = ["cmd_analyze_code", "cmd_validate_code"]
