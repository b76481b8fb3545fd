"""Data models for rules and their results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .file_system import FileSystem

# Label of the target every ruleset section can use unconditionally
UNIVERSAL_TARGET = "all"

DEFAULT_LEVEL = "error"


@dataclass
class Rule:
    """A rule declaration normalized for execution."""

    id: str
    module: str
    enabled: bool = True
    level: str = DEFAULT_LEVEL  # error, warning, off, or any custom string
    options: dict[str, Any] = field(default_factory=dict)
    fs: "FileSystem | None" = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization (filesystem excluded)."""
        return {
            "id": self.id,
            "module": self.module,
            "enabled": self.enabled,
            "level": self.level,
            "options": {k: v for k, v in self.options.items() if k != "fs"},
        }


@dataclass(frozen=True)
class Result:
    """One pass/fail judgment produced by a rule."""

    rule: Rule
    message: str
    metadata: Any = None
    passed: bool = False

    @property
    def is_error(self) -> bool:
        """True for a failed result whose rule is error-level."""
        return not self.passed and self.rule.level == DEFAULT_LEVEL

    def to_dict(self) -> dict[str, Any]:
        return {
            "rule": self.rule.to_dict(),
            "message": self.message,
            "metadata": self.metadata,
            "passed": self.passed,
        }


# One entry per executed rule, in execution order
Evaluation = list[list[Result]]
