"""Option helpers shared by the built-in rules."""

from __future__ import annotations

import re
from typing import Any

from ..file_system import FileSystem
from ..models import Rule

# JavaScript-style regex flag letters accepted in rulesets
REGEX_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "u": 0,
    "g": 0,
}


def file_system_for(fs: FileSystem, rule: Rule) -> FileSystem:
    """The filesystem injected into the rule options, else the one passed in."""
    return rule.options.get("fs") or fs


def as_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value]


def compile_pattern(pattern: str, flags: str | None = None) -> re.Pattern[str]:
    bits = 0
    for letter in flags or "":
        if letter not in REGEX_FLAGS:
            raise ValueError(f"unsupported regex flag: {letter!r}")
        bits |= REGEX_FLAGS[letter]
    return re.compile(pattern, bits)
