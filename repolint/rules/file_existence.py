"""Pass when at least one file matches the configured globs."""

from __future__ import annotations

from ..file_system import FileSystem
from ..models import Result, Rule
from .common import as_list, file_system_for
from .registry import register_rule


@register_rule("file-existence")
def file_existence(fs: FileSystem, rule: Rule) -> list[Result]:
    options = rule.options
    fs = file_system_for(fs, rule)
    files = as_list(options.get("files"))

    found = fs.find_first_file(files, bool(options.get("nocase", False)))
    if found:
        return [Result(rule, f"found ({found})", found, True)]

    message = options.get("fail-message") or f"not found: ({', '.join(files)})"
    return [Result(rule, message, None, False)]
