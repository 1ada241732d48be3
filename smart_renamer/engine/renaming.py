"""Bulk file rename planning and application."""

from __future__ import annotations

import logging
import os
from collections.abc import Collection, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from smart_renamer.core.enums import NamingConvention
from smart_renamer.engine.suggestions import suggest_name
from smart_renamer.file_discovery import FileInfo

logger = logging.getLogger(__name__)

# Project files whose names tools depend on.
DEFAULT_EXCLUSIONS = frozenset(
    {
        "package.json",
        "tsconfig.json",
        "bun.lockb",
        "naming.config",
        "package-lock.json",
        "yarn.lock",
        ".gitignore",
        "LICENSE",
        ".eslintrc.js",
        ".eslintrc.json",
        ".prettierrc",
        ".prettierrc.json",
        "babel.config.js",
        "webpack.config.js",
        "vite.config.js",
        "rollup.config.js",
        "jest.config.js",
        "vitest.config.js",
        ".env.example",
        "Dockerfile",
        "docker-compose.yml",
        "docker-compose.yaml",
    }
)

# Checked in order; compound suffixes such as ".d.ts" come before plain ones.
EXCLUDED_EXTENSIONS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("image", (".jpg", ".jpeg", ".png", ".gif", ".bmp", ".svg", ".webp", ".ico", ".tiff")),
    ("markdown", (".md", ".markdown")),
    ("TypeScript declaration", (".d.ts", ".d.mts", ".d.cts")),
    ("C/C++ header", (".h", ".hpp", ".hxx")),
    ("declaration", (".hi", ".pyi", ".rbi", ".rei", ".mli", ".sig", ".fsi", ".spec", ".def")),
    ("config", (".config.js", ".config.ts", ".config.json", ".yml", ".yaml", ".toml", ".ini")),
)


@dataclass(frozen=True)
class RenamePlan:
    path: str
    original: str
    suggested: str
    confidence: float

    @property
    def target(self) -> str:
        parent = os.path.dirname(self.path)
        return f"{parent}/{self.suggested}" if parent else self.suggested


@dataclass
class RenameReport:
    renamed: list[RenamePlan] = field(default_factory=list)
    failed: list[tuple[RenamePlan, str]] = field(default_factory=list)


def skip_reason(filename: str, keep: Collection[str] = ()) -> str | None:
    """Why ``filename`` must not be renamed, or None when it may be."""
    if filename.startswith("."):
        return "hidden file"
    if filename in DEFAULT_EXCLUSIONS:
        return "protected project file"
    if filename in keep:
        return "kept"
    lowered = filename.lower()
    for reason, suffixes in EXCLUDED_EXTENSIONS:
        if lowered.endswith(suffixes):
            return f"{reason} file"
    if "config" in lowered:
        return "config file"
    return None


def plan_renames(
    files: Iterable[FileInfo],
    convention: NamingConvention,
    exceptions: Collection[str] = (),
    keep: Collection[str] = (),
) -> tuple[list[RenamePlan], list[tuple[str, str]]]:
    """Split files into planned renames and (path, reason) skips.

    Directories and names already following the convention produce neither.
    """
    planned: list[RenamePlan] = []
    skipped: list[tuple[str, str]] = []
    for info in files:
        if info.is_directory:
            continue
        reason = skip_reason(info.name, keep)
        if reason is not None:
            skipped.append((info.path, reason))
            continue
        suggestion = suggest_name(info.name, convention, exceptions)
        if suggestion.suggested == info.name or not suggestion.suggested:
            continue
        planned.append(
            RenamePlan(info.path, info.name, suggestion.suggested, suggestion.confidence)
        )
    return planned, skipped


def apply_renames(plans: Iterable[RenamePlan], root: str | Path) -> RenameReport:
    """Rename each planned file under ``root``; failures are recorded, not raised."""
    root = Path(root)
    report = RenameReport()
    for plan in plans:
        source = root / plan.path
        target = root / plan.target
        # A case-only rename on a case-insensitive filesystem "exists" already.
        if target.exists() and not _same_file(source, target):
            report.failed.append((plan, f"target exists: {plan.target}"))
            continue
        try:
            os.rename(source, target)
        except OSError as exc:
            logger.debug("Rename %s -> %s failed: %s", plan.path, plan.target, exc)
            report.failed.append((plan, str(exc)))
            continue
        report.renamed.append(plan)
    return report


def _same_file(a: Path, b: Path) -> bool:
    try:
        return a.samefile(b)
    except OSError:
        return False


__all__ = [
    "DEFAULT_EXCLUSIONS",
    "EXCLUDED_EXTENSIONS",
    "RenamePlan",
    "RenameReport",
    "apply_renames",
    "plan_renames",
    "skip_reason",
]
