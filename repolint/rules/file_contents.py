"""Content checks over matched text files.

`file-contents` passes per file when the pattern is found;
`file-not-contents` passes per file when it is absent.
"""

from __future__ import annotations

from ..file_system import FileSystem
from ..models import Result, Rule
from .common import as_list, compile_pattern, file_system_for
from .registry import register_rule


def _check_contents(fs: FileSystem, rule: Rule, *, expect_match: bool) -> list[Result]:
    options = rule.options
    fs = file_system_for(fs, rule)
    files = as_list(options.get("files"))
    content = str(options.get("content", ""))
    pattern = compile_pattern(content, options.get("flags"))

    results: list[Result] = []
    for rel_path in fs.find_all_files(files, bool(options.get("nocase", False))):
        if fs.is_binary_file(rel_path):
            continue
        text = fs.get_file_contents(rel_path)
        if text is None:
            continue
        matched = pattern.search(text) is not None
        verb = "contains" if matched else "doesn't contain"
        results.append(Result(rule, f"File {rel_path} {verb} {content}", rel_path, matched == expect_match))

    if not results:
        # No matching files: required content is missing, forbidden content is absent
        return [Result(rule, f"not found: ({', '.join(files)})", None, not expect_match)]
    return results


@register_rule("file-contents")
def file_contents(fs: FileSystem, rule: Rule) -> list[Result]:
    return _check_contents(fs, rule, expect_match=True)


@register_rule("file-not-contents")
def file_not_contents(fs: FileSystem, rule: Rule) -> list[Result]:
    return _check_contents(fs, rule, expect_match=False)
