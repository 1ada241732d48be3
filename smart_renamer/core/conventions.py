"""Convention codec: word segmentation, membership tests and joins."""

from __future__ import annotations

import re

from smart_renamer.core.enums import NamingConvention

CONVENTION_PATTERNS: dict[NamingConvention, re.Pattern[str]] = {
    NamingConvention.CAMEL: re.compile(r"[a-z][a-zA-Z0-9]*"),
    NamingConvention.SNAKE: re.compile(r"[a-z][a-z0-9_]*"),
    NamingConvention.KEBAB: re.compile(r"[a-z][a-z0-9-]*"),
    NamingConvention.PASCAL: re.compile(r"[A-Z][a-zA-Z0-9]*"),
    NamingConvention.UPPER_SNAKE: re.compile(r"[A-Z][A-Z0-9_]*"),
}

# Most specific first: "MAX" is both PascalCase and UPPER_SNAKE_CASE but reads
# as a constant; "user" is camel, snake and kebab but reads as camelCase.
_SPECIFICITY_ORDER: tuple[NamingConvention, ...] = (
    NamingConvention.UPPER_SNAKE,
    NamingConvention.PASCAL,
    NamingConvention.CAMEL,
    NamingConvention.SNAKE,
    NamingConvention.KEBAB,
)

# Digit->upper only counts in mixed-case names: "base64Encode" splits after the
# digits, "USER_2FA" keeps "2fa" whole.
_CASE_BOUNDARY_RE = re.compile(r"([a-z0-9])([A-Z])")
_LOWER_RE = re.compile(r"[a-z]")
_SEPARATOR_RE = re.compile(r"[_\-\s]+")


def segment_words(name: str) -> list[str]:
    """Split an identifier into lowercase word tokens.

    Boundaries are lower->upper case transitions, ``_``, ``-`` and whitespace.
    Empty or boundary-only input yields an empty list.
    """
    spaced = _CASE_BOUNDARY_RE.sub(r"\1 \2", name) if _LOWER_RE.search(name) else name
    return [word.lower() for word in _SEPARATOR_RE.split(spaced) if word]


def matches_convention(name: str, convention: NamingConvention) -> bool:
    """Return True if the whole of ``name`` satisfies the convention's pattern."""
    return CONVENTION_PATTERNS[convention].fullmatch(name) is not None


def matching_conventions(name: str) -> list[NamingConvention]:
    """Every convention ``name`` satisfies, in priority order."""
    return [c for c, pattern in CONVENTION_PATTERNS.items() if pattern.fullmatch(name)]


def classify_name(name: str) -> NamingConvention | None:
    """Return the single most specific convention ``name`` follows, or None (mixed)."""
    for convention in _SPECIFICITY_ORDER:
        if matches_convention(name, convention):
            return convention
    return None


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def join_words(words: list[str], convention: NamingConvention) -> str:
    """Join a word sequence under a convention. An empty sequence joins to ``""``."""
    if not words:
        return ""
    if convention == NamingConvention.CAMEL:
        return words[0].lower() + "".join(_capitalize(w) for w in words[1:])
    if convention == NamingConvention.SNAKE:
        return "_".join(w.lower() for w in words)
    if convention == NamingConvention.KEBAB:
        return "-".join(w.lower() for w in words)
    if convention == NamingConvention.PASCAL:
        return "".join(_capitalize(w) for w in words)
    if convention == NamingConvention.UPPER_SNAKE:
        return "_".join(w.upper() for w in words)
    raise ValueError(f"Unknown naming convention: {convention!r}")


def convert_name(name: str, convention: NamingConvention) -> str:
    """Re-spell ``name`` under ``convention`` (segment, then join)."""
    return join_words(segment_words(name), convention)


def base_name(filename: str) -> str:
    """Strip the trailing extension. A leading dot does not start an extension."""
    dot = filename.rfind(".")
    return filename[:dot] if dot > 0 else filename


def extension(filename: str) -> str:
    """Return the trailing extension including its dot, or ``""``."""
    dot = filename.rfind(".")
    return filename[dot:] if dot > 0 else ""


__all__ = [
    "CONVENTION_PATTERNS",
    "base_name",
    "classify_name",
    "convert_name",
    "extension",
    "join_words",
    "matches_convention",
    "matching_conventions",
    "segment_words",
]
