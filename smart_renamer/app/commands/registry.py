"""Central command registry for CLI command handler resolution."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

CommandHandler = Callable[[Any], None]

_COMMAND_HANDLERS: dict[str, CommandHandler] | None = None


def _build_handlers() -> dict[str, CommandHandler]:
    """Import all command modules and build the handler dict on first access."""
    from smart_renamer.app.commands.analyze_cmd import cmd_analyze
    from smart_renamer.app.commands.code_cmd import cmd_analyze_code, cmd_validate_code
    from smart_renamer.app.commands.config_cmd import cmd_config
    from smart_renamer.app.commands.init_cmd import cmd_init
    from smart_renamer.app.commands.rename_cmd import cmd_rename
    from smart_renamer.app.commands.set_convention_cmd import cmd_set_convention
    from smart_renamer.app.commands.suggest_cmd import cmd_suggest
    from smart_renamer.app.commands.validate_cmd import cmd_validate

    return {
        "init": cmd_init,
        "set-convention": cmd_set_convention,
        "validate": cmd_validate,
        "suggest": cmd_suggest,
        "analyze": cmd_analyze,
        "rename": cmd_rename,
        "validate-code": cmd_validate_code,
        "analyze-code": cmd_analyze_code,
        "config": cmd_config,
    }


def get_command_handlers() -> dict[str, CommandHandler]:
    """Return cached command handler dict, building on first access."""
    global _COMMAND_HANDLERS
    if _COMMAND_HANDLERS is None:
        _COMMAND_HANDLERS = _build_handlers()
    return _COMMAND_HANDLERS


__all__ = ["CommandHandler", "get_command_handlers"]
