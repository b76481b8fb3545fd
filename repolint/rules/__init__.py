"""Rules: checks producing pass/fail results, and nested rulesets composed of them."""

from pathlib import Path

from .registry import RuleFn, RuleRegistry, register_bundled_rulesets, register_rule, registry

# Import built-in rules so they self-register with the global registry.
from . import (  # noqa: F401,E402
    directory_existence,
    file_contents,
    file_existence,
    file_starts_with,
    file_type_exclusion,
    git_working_tree,
    license_detectable,
)

register_bundled_rulesets(Path(__file__).parent)

__all__ = [
    "RuleFn",
    "RuleRegistry",
    "register_rule",
    "registry",
]
