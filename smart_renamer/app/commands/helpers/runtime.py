"""Runtime context helpers for command handlers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from smart_renamer.config import config_path, load_config
from smart_renamer.file_discovery import PROJECT_ROOT


@dataclass(frozen=True)
class CommandRuntime:
    """Explicit runtime dependencies shared by command handlers."""

    root: Path
    config: dict
    config_file: Path

    @property
    def exclusions(self) -> tuple[str, ...]:
        return tuple(self.config.get("exclude", []))


def project_root(args) -> Path:
    path = getattr(args, "path", None)
    return Path(path).resolve() if path else PROJECT_ROOT


def command_runtime(args) -> CommandRuntime:
    """Return runtime context from explicit args.runtime or construct one."""
    runtime = getattr(args, "runtime", None)
    if isinstance(runtime, CommandRuntime):
        return runtime

    root = project_root(args)
    config_file = config_path(root)
    return CommandRuntime(root=root, config=load_config(config_file), config_file=config_file)


__all__ = ["CommandRuntime", "command_runtime", "project_root"]
