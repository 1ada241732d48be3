"""Project naming config (.renamer/config.json)."""

from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from smart_renamer.core.enums import NamingConvention, parse_convention
from smart_renamer.core.models import ConfigError, ConventionConfig
from smart_renamer.file_discovery import PROJECT_ROOT, safe_write_text

logger = logging.getLogger(__name__)

CONFIG_DIR = ".renamer"
CONFIG_FILE_NAME = "config.json"


def config_path(root: Path) -> Path:
    return root / CONFIG_DIR / CONFIG_FILE_NAME


CONFIG_FILE = config_path(PROJECT_ROOT)

CODE_KEY_PREFIX = "code."
_CONVENTION_KEYS = ("convention", "folders")


@dataclass(frozen=True)
class ConfigKey:
    type: type
    default: object
    description: str


CONFIG_SCHEMA: dict[str, ConfigKey] = {
    "convention": ConfigKey(str, NamingConvention.CAMEL.value,
        "Naming convention for file names"),
    "files": ConfigKey(list, ["*.ts", "*.js"],
        "File patterns the file naming convention targets"),
    "folders": ConfigKey(str, NamingConvention.KEBAB.value,
        "Naming convention for folder names"),
    "exceptions": ConfigKey(list, ["index", "main", "app"],
        "Base names exempt from file name validation (case-insensitive)"),
    "code": ConfigKey(dict, ConventionConfig().as_dict(),
        "Code identifier conventions {category: convention}"),
    "code_patterns": ConfigKey(list, ["**/*.ts", "**/*.tsx", "**/*.js", "**/*.jsx"],
        "Glob patterns of source files checked for identifier naming"),
    "exclude": ConfigKey(list, [],
        "Path patterns to exclude from discovery"),
    "max_depth": ConfigKey(int, 3,
        "Directory depth for file name enumeration"),
}


def default_config() -> dict[str, Any]:
    """Return a config dict with all keys set to their defaults."""
    return {k: copy.deepcopy(v.default) for k, v in CONFIG_SCHEMA.items()}


def config_exists(path: Path | None = None) -> bool:
    return (path or CONFIG_FILE).exists()


def _repair_conventions(config: dict[str, Any]) -> bool:
    """Reset unrecognised convention tokens to their defaults."""
    changed = False
    for key in _CONVENTION_KEYS:
        try:
            parse_convention(config[key])
        except ValueError as exc:
            logger.warning("Ignoring config %s: %s", key, exc)
            config[key] = CONFIG_SCHEMA[key].default
            changed = True

    code = config.get("code")
    if not isinstance(code, dict):
        code = {}
        config["code"] = code
        changed = True
    for key, default in ConventionConfig().as_dict().items():
        if key not in code:
            code[key] = default
            changed = True
            continue
        try:
            parse_convention(code[key])
        except ValueError as exc:
            logger.warning("Ignoring config code.%s: %s", key, exc)
            code[key] = default
            changed = True
    return changed


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load config from disk.

    Missing or unreadable files give the defaults. Missing keys are filled in
    and invalid convention tokens fall back to their defaults.
    """
    p = path or CONFIG_FILE
    config: dict[str, Any] = {}
    if p.exists():
        try:
            loaded = json.loads(p.read_text())
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
            logger.warning("Could not read %s: %s", p, exc)
        else:
            if isinstance(loaded, dict):
                config = loaded

    changed = False
    for key, schema in CONFIG_SCHEMA.items():
        if key not in config:
            config[key] = copy.deepcopy(schema.default)
            changed = True
    changed = _repair_conventions(config) or changed

    if changed and p.exists():
        try:
            save_config(config, p)
        except OSError as exc:
            logger.debug("Could not update %s: %s", p, exc)

    return config


def save_config(config: dict, path: Path | None = None) -> None:
    """Save config to disk atomically."""
    p = path or CONFIG_FILE
    safe_write_text(p, json.dumps(config, indent=2) + "\n")


def _checked_convention(key: str, raw: str) -> str:
    try:
        return parse_convention(raw).value
    except ValueError as exc:
        raise ConfigError(f"{key}: {exc}") from exc


def set_config_value(config: dict, key: str, raw: str) -> None:
    """Parse and set a config value from a raw string.

    Convention keys (``convention``, ``folders`` and ``code.<category>``) only
    accept one of the five convention tokens.
    """
    if key.startswith(CODE_KEY_PREFIX):
        category = key[len(CODE_KEY_PREFIX):]
        if category not in ConventionConfig.keys():
            raise KeyError(f"Unknown code category: {category}")
        config.setdefault("code", {})[category] = _checked_convention(key, raw)
        return

    if key not in CONFIG_SCHEMA:
        raise KeyError(f"Unknown config key: {key}")

    schema = CONFIG_SCHEMA[key]

    if key in _CONVENTION_KEYS:
        config[key] = _checked_convention(key, raw)
    elif schema.type is int:
        config[key] = int(raw)
    elif schema.type is list:
        # For list keys, append the value
        config.setdefault(key, [])
        if raw not in config[key]:
            config[key].append(raw)
    elif schema.type is dict:
        raise ValueError(f"Cannot set dict key '{key}' directly; use '{key}.<name>'")
    else:
        config[key] = raw


def unset_config_value(config: dict, key: str) -> None:
    """Reset a config key to its default value."""
    if key.startswith(CODE_KEY_PREFIX):
        category = key[len(CODE_KEY_PREFIX):]
        defaults = ConventionConfig().as_dict()
        if category not in defaults:
            raise KeyError(f"Unknown code category: {category}")
        config.setdefault("code", {})[category] = defaults[category]
        return
    if key not in CONFIG_SCHEMA:
        raise KeyError(f"Unknown config key: {key}")
    config[key] = copy.deepcopy(CONFIG_SCHEMA[key].default)


def file_convention(config: dict[str, Any]) -> NamingConvention:
    return NamingConvention(_checked_convention("convention", config["convention"]))


def code_conventions(config: dict[str, Any]) -> ConventionConfig:
    """Build the immutable per-category config, defaulting absent categories."""
    code = config.get("code")
    merged = ConventionConfig().as_dict()
    if isinstance(code, dict):
        merged.update(code)
    return ConventionConfig.from_mapping(merged)


__all__ = [
    "CONFIG_FILE",
    "CONFIG_SCHEMA",
    "ConfigKey",
    "code_conventions",
    "config_exists",
    "config_path",
    "default_config",
    "file_convention",
    "load_config",
    "save_config",
    "set_config_value",
    "unset_config_value",
]
