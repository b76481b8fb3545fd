"""
Rule registry for module name -> rule lookup.

A module resolves either to a rule function `(fs, rule) -> list[Result]`
or to a nested ruleset document, which the linter evaluates recursively.
Nested rulesets may be registered as a parsed document or as a path that is
loaded on first use.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Union

from ..ruleset import load_ruleset

if TYPE_CHECKING:
    from ..file_system import FileSystem
    from ..models import Result, Rule

RuleFn = Callable[["FileSystem", "Rule"], list["Result"]]
RulesetDoc = dict[str, Any]
Resolved = Union[RuleFn, RulesetDoc, None]


class RuleRegistry:
    def __init__(self):
        self._rules: dict[str, RuleFn] = {}
        self._rulesets: dict[str, RulesetDoc | Path] = {}

    def register(self, module: str, fn: RuleFn) -> None:
        if not module:
            raise ValueError("Rule module name must be non-empty")
        self._rules[module] = fn

    def register_ruleset(self, module: str, document: RulesetDoc | Path) -> None:
        if not module:
            raise ValueError("Ruleset module name must be non-empty")
        self._rulesets[module] = document

    def resolve(self, module: str) -> Resolved:
        """Rule function first, then nested ruleset, else None."""
        fn = self._rules.get(module)
        if fn is not None:
            return fn
        document = self._rulesets.get(module)
        if isinstance(document, Path):
            return load_ruleset(document)
        return document

    def ids(self) -> list[str]:
        return list(self._rules.keys())

    def ruleset_ids(self) -> list[str]:
        return list(self._rulesets.keys())

    def copy(self) -> "RuleRegistry":
        clone = RuleRegistry()
        clone._rules = dict(self._rules)
        clone._rulesets = dict(self._rulesets)
        return clone


registry = RuleRegistry()


def register_rule(module: str) -> Callable[[RuleFn], RuleFn]:
    """Decorator registering a built-in rule with the global registry."""

    def decorator(fn: RuleFn) -> RuleFn:
        registry.register(module, fn)
        return fn

    return decorator


def register_bundled_rulesets(directory: Path) -> None:
    """Register every `*.json` in `directory` as a nested ruleset named by its stem."""
    for path in sorted(directory.glob("*.json")):
        registry.register_ruleset(path.stem, path)
