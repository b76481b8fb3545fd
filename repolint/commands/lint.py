"""Lint command implementation."""

from __future__ import annotations

import shutil
import subprocess
import tempfile
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ..axioms import registry as axiom_registry
from ..engine import Linter
from ..formatters import FORMATTERS
from ..reporting import console_reporter
from ..rules import registry as rule_registry
from ..ruleset import load_ruleset


def _clone(url: str, console: Console) -> Path | None:
    """Clone `url` into a fresh temporary directory."""
    workdir = Path(tempfile.mkdtemp(prefix="repolint-"))
    console.print(f"Cloning {url}...", style="dim")
    result = subprocess.run(
        ["git", "clone", "--quiet", url, str(workdir)],
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        shutil.rmtree(workdir, ignore_errors=True)
        console.print(f"git clone failed: {result.stderr.strip()}", style="bold red")
        return None
    return workdir


def run_lint(
    target: str,
    ruleset_path: Path | None = None,
    output_format: str = "symbol",
    filter_paths: tuple[str, ...] = (),
    git: bool = False,
) -> int:
    """Lint a directory (or a cloned git URL).

    Args:
        target: Directory to lint, or a repository URL when `git` is set
        ruleset_path: Explicit ruleset file; discovered from the target when omitted
        output_format: "symbol" (human-readable) or "json"
        filter_paths: Restrict checks to these paths
        git: Treat `target` as a URL and clone it first

    Returns:
        Exit code (0 = success, 1 = error-level failures found)
    """
    status = Console(stderr=True)
    ruleset = load_ruleset(ruleset_path) if ruleset_path is not None else None

    workdir: Path | None = None
    if git:
        workdir = _clone(target, status)
        if workdir is None:
            return 1
        target_dir = workdir
    else:
        target_dir = Path(target)
        if not target_dir.is_dir():
            status.print(f"Not a directory: {target}", style="bold red")
            return 1

    # JSON goes to stdout alone so it can be piped
    info_console = status if output_format == "json" else None
    linter = Linter(
        formatter=FORMATTERS[output_format](),
        reporter=console_reporter(info_console=info_console),
    )

    try:
        linter.lint(target_dir, filter_paths, ruleset)
    finally:
        if workdir is not None:
            shutil.rmtree(workdir, ignore_errors=True)

    return linter.exit_code


def run_list_rules() -> int:
    """Print registered rules, nested rulesets and axioms."""
    console = Console()

    table = Table(title="Registry")
    table.add_column("Kind", style="cyan")
    table.add_column("Name")

    for module in sorted(rule_registry.ids()):
        table.add_row("rule", module)
    for module in sorted(rule_registry.ruleset_ids()):
        table.add_row("ruleset", module)
    for axiom_id in sorted(axiom_registry.ids()):
        kind = "axiom (counting)" if axiom_registry.get(axiom_id).counting else "axiom"
        table.add_row(kind, axiom_id)

    console.print(table)
    return 0
