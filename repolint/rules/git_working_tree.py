"""Pass when the target directory is (inside) a git working tree."""

from __future__ import annotations

from ..file_system import FileSystem
from ..models import Result, Rule
from .common import file_system_for
from .registry import register_rule


@register_rule("git-working-tree")
def git_working_tree(fs: FileSystem, rule: Rule) -> list[Result]:
    fs = file_system_for(fs, rule)
    root = fs.target_dir.resolve()
    candidates = [root]
    if rule.options.get("allowSubDir"):
        candidates.extend(root.parents)

    for candidate in candidates:
        if (candidate / ".git").exists():
            return [Result(rule, f"The directory is managed with Git ({candidate})", str(candidate), True)]
    return [Result(rule, "The directory is not managed with Git", None, False)]
