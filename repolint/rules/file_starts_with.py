"""Header checks: every matched file must open with all the patterns."""

from __future__ import annotations

from ..file_system import FileSystem
from ..models import Result, Rule
from .common import as_list, compile_pattern, file_system_for
from .registry import register_rule

DEFAULT_LINE_COUNT = 5


@register_rule("file-starts-with")
def file_starts_with(fs: FileSystem, rule: Rule) -> list[Result]:
    options = rule.options
    fs = file_system_for(fs, rule)
    files = as_list(options.get("files"))
    line_count = int(options.get("lineCount", DEFAULT_LINE_COUNT))
    patterns = [compile_pattern(p, options.get("flags")) for p in as_list(options.get("patterns"))]

    results: list[Result] = []
    for rel_path in fs.find_all_files(files, bool(options.get("nocase", False))):
        if fs.is_binary_file(rel_path):
            continue
        head = fs.get_file_lines(rel_path, line_count)
        if head is None:
            continue
        missing = [p.pattern for p in patterns if not p.search(head)]
        if missing:
            message = f"The first {line_count} lines of {rel_path} do not contain: {', '.join(missing)}"
            results.append(Result(rule, message, rel_path, False))
        else:
            results.append(Result(rule, f"The first {line_count} lines of {rel_path} contain all patterns", rel_path, True))

    if not results:
        return [Result(rule, f"no files to check: ({', '.join(files)})", None, True)]
    return results
