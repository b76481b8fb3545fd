"""Number of distinct commit authors in the target repository."""

from __future__ import annotations

import subprocess

from ..file_system import FileSystem
from .registry import register_axiom


@register_axiom("contributor-count", keyword="contributor")
def contributor_count(fs: FileSystem) -> int:
    """Count unique author emails in `git log`; 0 outside a git repository."""
    try:
        result = subprocess.run(
            ["git", "log", "--format=%aE"],
            cwd=fs.target_dir,
            capture_output=True,
            text=True,
        )
    except OSError:
        # git not installed
        return 0
    if result.returncode != 0:
        return 0

    authors = {line.strip().lower() for line in result.stdout.splitlines() if line.strip()}
    return len(authors)
