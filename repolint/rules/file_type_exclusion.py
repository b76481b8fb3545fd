"""Fail for every file matching an excluded type glob."""

from __future__ import annotations

from ..file_system import FileSystem
from ..models import Result, Rule
from .common import as_list, file_system_for
from .registry import register_rule


@register_rule("file-type-exclusion")
def file_type_exclusion(fs: FileSystem, rule: Rule) -> list[Result]:
    options = rule.options
    fs = file_system_for(fs, rule)
    types = as_list(options.get("type"))

    offenders = fs.find_all_files(types, bool(options.get("nocase", False)))
    if not offenders:
        return [Result(rule, f"Excluded file type doesn't exist ({', '.join(types)})", None, True)]
    return [Result(rule, f"Excluded file type exists ({rel_path})", rel_path, False) for rel_path in offenders]
