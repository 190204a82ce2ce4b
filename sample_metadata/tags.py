from __future__ import annotations

import re
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Dict, Tuple

from .models import TagClass

# Base directory for rule files shipped with the package
_RULES_DIR = Path(__file__).resolve().parent / "rules"

# Classes in priority order; UNCLASSIFIED is the fallback, never matched
_PRIORITY: Tuple[TagClass, ...] = tuple(t for t in TagClass if t is not TagClass.UNCLASSIFIED)


@lru_cache(maxsize=None)
def _load_rules(name: str) -> Dict[str, Dict[str, list]]:
    """Load a TOML rule file from the package rules directory.

    Parameters
    ----------
    name: str
        Name of the rule file without extension.
    """

    path = _RULES_DIR / f"{name}.toml"
    if not path.exists():
        return {}
    with path.open("rb") as fh:
        return tomllib.load(fh)


@lru_cache(maxsize=None)
def tag_patterns() -> Tuple[Tuple[TagClass, Tuple[re.Pattern[str], ...]], ...]:
    """Return the compiled tag patterns for every class in priority order."""

    rules = _load_rules("tags")
    table = []
    for tag_class in _PRIORITY:
        raw = rules.get(tag_class.value, {}).get("patterns", [])
        table.append((tag_class, tuple(re.compile(p, re.IGNORECASE) for p in raw)))
    return tuple(table)


def matches(tag: str, tag_class: TagClass) -> bool:
    """Return ``True`` if ``tag`` matches any pattern of ``tag_class``."""

    for candidate, patterns in tag_patterns():
        if candidate is tag_class:
            return any(p.fullmatch(tag.strip()) for p in patterns)
    return False


def classify(tag: str) -> TagClass:
    """Return the semantic class of an attribute tag.

    Only the tag text is considered. The first class in priority order with
    a pattern matching the whole tag wins; anything else is
    ``TagClass.UNCLASSIFIED``.
    """

    text = tag.strip()
    for tag_class, patterns in tag_patterns():
        if any(p.fullmatch(text) for p in patterns):
            return tag_class
    return TagClass.UNCLASSIFIED


__all__ = ["classify", "matches", "tag_patterns"]
