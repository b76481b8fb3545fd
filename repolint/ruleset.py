"""Ruleset discovery, loading and validation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

# Searched upward from the target directory, in this order
CONFIG_FILENAMES = ("repolint.json", "repolinter.json")

BUNDLED_RULESETS_DIR = Path(__file__).parent / "rulesets"
DEFAULT_RULESET_PATH = BUNDLED_RULESETS_DIR / "default.json"


class RulesetError(ValueError):
    """A ruleset document is missing, unreadable or malformed."""


def find_config(filename: str, cwd: Path) -> Path | None:
    """Find `filename` in `cwd` or the closest parent directory containing it."""
    cur = cwd.resolve()
    for p in (cur, *cur.parents):
        candidate = p / filename
        if candidate.is_file():
            return candidate
    return None


def discover_ruleset_path(target_dir: Path) -> Path:
    """Locate the ruleset for `target_dir`, falling back to the bundled default."""
    for filename in CONFIG_FILENAMES:
        found = find_config(filename, target_dir)
        if found is not None:
            return found
    return DEFAULT_RULESET_PATH


def validate_ruleset(data: Any, source: str = "<ruleset>") -> dict[str, Any]:
    """Check the parts of the document target resolution depends on."""
    if not isinstance(data, dict):
        raise RulesetError(f"{source}: ruleset must be a mapping")

    axioms = data.get("axioms")
    if axioms is not None:
        if not isinstance(axioms, dict):
            raise RulesetError(f"{source}: 'axioms' must be a mapping of axiom id to target name")
        for axiom_id, target_name in axioms.items():
            if not isinstance(target_name, str) or not target_name.strip():
                raise RulesetError(f"{source}: axiom {axiom_id!r} needs a target name")

    rules = data.get("rules")
    if not isinstance(rules, dict):
        raise RulesetError(f"{source}: 'rules' must be a mapping of target to rules")
    for target, section in rules.items():
        if not isinstance(section, dict):
            raise RulesetError(f"{source}: rules for target {target!r} must be a mapping")

    return data


def load_ruleset(path: Path) -> dict[str, Any]:
    """
    Load a ruleset document.

    JSON is the native format; `.yaml`/`.yml` files are parsed with PyYAML.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise RulesetError(f"cannot read ruleset {path}: {e}") from e

    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise RulesetError(f"cannot parse ruleset {path}: {e}") from e

    return validate_ruleset(data, source=str(path))
