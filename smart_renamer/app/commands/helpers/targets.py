"""Collect the files and identifiers a command works on."""

from __future__ import annotations

import fnmatch
import functools

from smart_renamer.app.commands.helpers.runtime import CommandRuntime
from smart_renamer.engine.analysis import CodeAnalysisResult, analyze_sources
from smart_renamer.file_discovery import (
    FileInfo,
    find_code_files,
    list_project_files,
    read_project_file,
)
from smart_renamer.languages.typescript.parser import parse_source
from smart_renamer.output import log


def project_files(runtime: CommandRuntime) -> list[FileInfo]:
    """Every listed file (directories excluded) under the project root."""
    entries = list_project_files(
        runtime.root,
        max_depth=int(runtime.config.get("max_depth", 3)),
        extra_exclusions=runtime.exclusions,
    )
    return [entry for entry in entries if not entry.is_directory]


def target_files(runtime: CommandRuntime) -> list[FileInfo]:
    """Project files whose names match the configured ``files`` patterns."""
    patterns = runtime.config.get("files") or ["*"]
    return [
        info
        for info in project_files(runtime)
        if any(fnmatch.fnmatch(info.name, pattern) for pattern in patterns)
    ]


def code_patterns(runtime: CommandRuntime, raw: str | None) -> list[str]:
    if raw:
        return [p.strip() for p in raw.split(",") if p.strip()]
    return list(runtime.config.get("code_patterns", []))


def analyze_code(runtime: CommandRuntime, raw_patterns: str | None) -> CodeAnalysisResult:
    """Parse and classify every matching source file under the project root."""
    paths = find_code_files(
        runtime.root, code_patterns(runtime, raw_patterns), runtime.exclusions
    )
    result = analyze_sources(
        paths,
        read_source=functools.partial(read_project_file, runtime.root),
        parse_source=parse_source,
    )
    if result.skipped:
        log(f"  Skipped {len(result.skipped)} file(s) that could not be parsed")
        for path, reason in result.skipped:
            log(f"    {path}: {reason}")
    return result


__all__ = ["analyze_code", "code_patterns", "project_files", "target_files"]
