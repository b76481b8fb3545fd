"""CLI entrypoint for repolint."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .ruleset import RulesetError


@click.group()
@click.version_option(__version__, prog_name="repolint")
@click.option("--verbose", is_flag=True, help="Log axiom outcomes and rule errors to stderr")
def cli(verbose: bool) -> None:
    """repolint - audit a repository against a ruleset of compliance checks."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@cli.command()
@click.argument("target", default=".")
@click.option(
    "--ruleset",
    "-r",
    "ruleset_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Ruleset file (defaults to repolint.json/repolinter.json found upward, else the bundled default)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["symbol", "json"]),
    default="symbol",
    help="Result output format",
)
@click.option(
    "--path",
    "-p",
    "filter_paths",
    multiple=True,
    help="Only check this path (repeatable)",
)
@click.option(
    "--git",
    is_flag=True,
    help="TARGET is a git URL to clone into a temporary directory",
)
def lint(
    target: str,
    ruleset_path: Path | None,
    output_format: str,
    filter_paths: tuple[str, ...],
    git: bool,
) -> None:
    """Lint TARGET (default: current directory).

    Exits with status 1 when an error-level rule fails.

    Examples:

        repolint lint .

        repolint lint --format json -p src -p docs .

        repolint lint --git https://github.com/org/project.git
    """
    from .commands.lint import run_lint

    try:
        exit_code = run_lint(target, ruleset_path, output_format, filter_paths, git)
    except RulesetError as e:
        raise click.ClickException(str(e)) from e
    sys.exit(exit_code)


@cli.command("rules")
def list_rules() -> None:
    """List registered rules, nested rulesets and axioms."""
    from .commands.lint import run_list_rules

    sys.exit(run_list_rules())


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
