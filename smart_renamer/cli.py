"""CLI entry point: parse args, configure logging, dispatch command handlers."""

from __future__ import annotations

import logging
import sys

from smart_renamer.app.cli_support.parser import create_parser
from smart_renamer.app.commands.registry import get_command_handlers
from smart_renamer.core.models import ConfigError
from smart_renamer.languages.typescript.parser import ParserUnavailableError
from smart_renamer.output import colorize

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _resolve_handler(command: str):
    return get_command_handlers()[command]


def main(argv: list[str] | None = None) -> None:
    # Ensure Unicode output works on Windows terminals (cp1252 etc.)
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            try:
                stream.reconfigure(encoding="utf-8", errors="replace")
            except (AttributeError, OSError):
                logger.debug(
                    "Skipping stream reconfigure for %s (not supported)",
                    getattr(stream, "name", "<stream>"),
                )

    parser = create_parser()
    args = parser.parse_args(argv)
    _configure_logging(getattr(args, "verbose", False))

    try:
        handler = _resolve_handler(args.command)
        handler(args)
    except (ConfigError, ParserUnavailableError) as exc:
        print(colorize(f"  {exc}", "red"), file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted.")
        sys.exit(1)


if __name__ == "__main__":
    main()
