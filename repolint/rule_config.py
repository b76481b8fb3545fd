"""Normalization of rule declarations.

A ruleset declares each rule under a key (`id` or `id:module`) with one of
three value shapes:

    "readme-exists": true                                   # toggle
    "readme-exists": "warning"                              # level toggle
    "readme-exists": ["error", {"files": ["README*"]}]      # spec + options

Each shape is parsed into a declaration variant and then converted into a
Rule by `parse_rule`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Union

from .models import DEFAULT_LEVEL, Rule
from .ruleset import RulesetError

if TYPE_CHECKING:
    from .file_system import FileSystem


@dataclass(frozen=True)
class Toggle:
    """`true` / `false`."""

    value: bool


@dataclass(frozen=True)
class LevelToggle:
    """A string such as "error", "warning" or "off"."""

    value: str


@dataclass(frozen=True)
class ConfiguredToggle:
    """`[spec, options]` where spec is a bool, a level string or a mapping."""

    spec: Any
    options: dict[str, Any] = field(default_factory=dict)


RuleDeclaration = Union[Toggle, LevelToggle, ConfiguredToggle]


def parse_declaration(raw: Any) -> RuleDeclaration:
    """Classify a raw JSON rule value into a declaration variant."""
    if isinstance(raw, bool):
        return Toggle(raw)
    if isinstance(raw, str):
        return LevelToggle(raw)
    if isinstance(raw, list) and raw:
        options = raw[1] if len(raw) > 1 else {}
        if options is None:
            options = {}
        if not isinstance(options, dict):
            raise RulesetError(f"rule options must be a mapping, got {type(options).__name__}")
        return ConfiguredToggle(raw[0], options)
    raise RulesetError(f"unsupported rule declaration: {raw!r}")


def parse_enabled(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() != "off"
    if isinstance(value, dict):
        # Legacy semantics: `{"enabled": false}` still enables the rule.
        return True
    return True


def parse_level(value: Any) -> str:
    if isinstance(value, str):
        return value.strip().lower()
    return DEFAULT_LEVEL


def split_rule_key(key: str) -> tuple[str, str]:
    """`id:module` -> (id, module); a bare key names both."""
    parts = key.split(":")
    if len(parts) == 2:
        return parts[0], parts[1]
    return parts[0], parts[0]


def to_rule(key: str, declaration: RuleDeclaration, fs: "FileSystem | None" = None) -> Rule:
    if isinstance(declaration, ConfiguredToggle):
        spec: Any = declaration.spec
        options = dict(declaration.options)
    else:
        spec = declaration.value
        options = {}

    if not options.get("fs"):
        options["fs"] = fs

    rule_id, module = split_rule_key(key)
    return Rule(
        id=rule_id,
        module=module,
        enabled=parse_enabled(spec),
        level=parse_level(spec),
        options=options,
        fs=fs,
    )


def parse_rule(key: str, raw: Any, fs: "FileSystem | None" = None) -> Rule:
    """Parse one `key: value` entry of a ruleset section into a Rule."""
    return to_rule(key, parse_declaration(raw), fs)
