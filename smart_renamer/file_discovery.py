"""File discovery: project listings, code file finding and exclusion matching."""

from __future__ import annotations

import fnmatch
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(os.environ.get("RENAMER_ROOT", Path.cwd())).resolve()

__all__ = [
    "CODE_EXCLUSIONS",
    "FileInfo",
    "IGNORED_NAMES",
    "PROJECT_ROOT",
    "find_code_files",
    "list_project_files",
    "matches_exclusion",
    "read_project_file",
    "rel",
    "safe_write_text",
]


# Entries never listed when enumerating a project for file-name checks.
IGNORED_NAMES = frozenset(
    {
        "node_modules",
        ".git",
        "dist",
        "build",
        ".DS_Store",
        "Thumbs.db",
        "CLAUDE.md",
    }
)

# Directories pruned while searching for source files.
CODE_EXCLUSIONS = frozenset({"node_modules", "dist", "build"})

_DECLARATION_SUFFIX = ".d.ts"


@dataclass(frozen=True)
class FileInfo:
    name: str
    path: str
    extension: str
    is_directory: bool


def matches_exclusion(rel_path: str, exclusion: str) -> bool:
    """Check if a relative path matches an exclusion pattern (path-component aware).

    Matches if exclusion is a path component (e.g. "legacy" matches
    "legacy/old.ts" or "src/legacy/a.ts") or a directory prefix (e.g.
    "src/legacy" matches "src/legacy/a.ts"). Does NOT do substring matching:
    "legacy" will NOT match "legacyUtils.ts".

    Glob-style ``*`` is supported per component: ``*.generated`` matches any
    path component ending with ``.generated``.
    """
    parts = Path(rel_path).parts
    if exclusion in parts:
        return True
    if "*" in exclusion and any(fnmatch.fnmatch(part, exclusion) for part in parts):
        return True
    if "/" in exclusion or os.sep in exclusion:
        normalized = exclusion.rstrip("/").rstrip(os.sep)
        return rel_path.startswith(normalized + "/") or rel_path.startswith(
            normalized + os.sep
        )
    return False


def _normalize_path_separators(path: str) -> str:
    return path.replace("\\", "/")


def rel(path: str | Path, root: Path | None = None) -> str:
    """Render ``path`` relative to the project root, with forward slashes."""
    root = (root or PROJECT_ROOT).resolve()
    resolved = Path(path).resolve()
    try:
        return _normalize_path_separators(str(resolved.relative_to(root)))
    except ValueError:
        return _normalize_path_separators(os.path.relpath(resolved, root))


def safe_write_text(filepath: str | Path, content: str) -> None:
    """Atomically write text to a file using temp+rename."""
    p = Path(filepath)
    p.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=p.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w") as f:
            f.write(content)
        os.replace(tmp, str(p))
    except OSError:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise


def read_project_file(root: Path, rel_path: str) -> str:
    return (root / rel_path).read_text(encoding="utf-8")


def _is_listed(name: str) -> bool:
    if name in IGNORED_NAMES:
        return False
    return not name.startswith(".") or name == ".gitignore"


def list_project_files(
    root: str | Path,
    max_depth: int = 3,
    extra_exclusions: tuple[str, ...] = (),
) -> list[FileInfo]:
    """List files and directories under ``root`` down to ``max_depth`` levels.

    Entries directly under ``root`` are depth 0. Hidden entries other than
    ``.gitignore`` and the usual build/VCS directories are skipped.
    """
    root = Path(root)
    found: list[FileInfo] = []

    def walk(directory: Path, depth: int) -> None:
        if depth > max_depth:
            return
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            logger.warning("Cannot read directory %s: %s", directory, exc)
            return
        for entry in entries:
            if not _is_listed(entry.name):
                continue
            rel_path = _normalize_path_separators(str(entry.relative_to(root)))
            if extra_exclusions and any(
                matches_exclusion(rel_path, ex) for ex in extra_exclusions
            ):
                continue
            is_dir = entry.is_dir()
            found.append(
                FileInfo(
                    name=entry.name,
                    path=rel_path,
                    extension="" if is_dir else entry.suffix,
                    is_directory=is_dir,
                )
            )
            if is_dir:
                walk(entry, depth + 1)

    walk(root, 0)
    return found


def _matches_pattern(rel_path: str, pattern: str) -> bool:
    if fnmatch.fnmatch(rel_path, pattern):
        return True
    # "**/" also matches zero directories.
    if pattern.startswith("**/"):
        tail = pattern[3:]
        target = rel_path if "/" in tail else rel_path.rsplit("/", 1)[-1]
        return fnmatch.fnmatch(target, tail)
    return False


def find_code_files(
    root: str | Path,
    patterns: list[str] | tuple[str, ...],
    extra_exclusions: tuple[str, ...] = (),
) -> list[str]:
    """Return sorted project-relative paths of source files matching any pattern."""
    root = Path(root)
    files: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = _normalize_path_separators(os.path.relpath(dirpath, root))
        prefix = "" if rel_dir == "." else rel_dir + "/"
        dirnames[:] = sorted(
            d
            for d in dirnames
            if d not in CODE_EXCLUSIONS
            and not any(matches_exclusion(prefix + d, ex) for ex in extra_exclusions)
        )
        for fname in filenames:
            if fname.endswith(_DECLARATION_SUFFIX):
                continue
            rel_file = prefix + fname
            if not any(_matches_pattern(rel_file, p) for p in patterns):
                continue
            if any(matches_exclusion(rel_file, ex) for ex in extra_exclusions):
                continue
            files.append(rel_file)
    return sorted(files)
