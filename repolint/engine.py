"""Lint engine: targets -> rules -> results."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Iterable

from .axioms import AxiomRegistry
from .axioms import registry as default_axioms
from .file_system import FileSystem
from .formatters import Formatter, SymbolFormatter
from .models import Evaluation, Result, Rule
from .reporting import Reporter, console_reporter
from .rule_config import parse_rule
from .rules import RuleRegistry
from .rules import registry as default_rules
from .ruleset import discover_ruleset_path, load_ruleset, validate_ruleset
from .targets import resolve_targets

logger = logging.getLogger(__name__)


class Linter:
    """
    Evaluates rulesets against a directory.

    One FileSystem is shared by every axiom and rule of a run, including
    nested rulesets. `exit_code` becomes 1 once any enabled error-level rule
    fails, in this run or a nested one, and is never reset.
    """

    def __init__(
        self,
        *,
        file_system: FileSystem | None = None,
        rules: RuleRegistry | None = None,
        axioms: AxiomRegistry | None = None,
        formatter: Formatter | None = None,
        reporter: Reporter | None = None,
    ):
        self.fs = file_system or FileSystem()
        self.rules = rules if rules is not None else default_rules
        self.axioms = axioms if axioms is not None else default_axioms
        self.formatter = formatter or SymbolFormatter()
        self.reporter = reporter or console_reporter()
        self.exit_code = 0
        self.configured: list[Rule] = []

    @property
    def failed(self) -> bool:
        return self.exit_code != 0

    def lint(
        self,
        target_dir: Path | str,
        filter_paths: Iterable[str] = (),
        ruleset: dict[str, Any] | None = None,
    ) -> Evaluation:
        """
        Run every enabled rule of every active target.

        Args:
            target_dir: Directory to audit
            filter_paths: Only paths under these (or matching these globs) are checked
            ruleset: Ruleset document; discovered from target_dir when omitted

        Returns:
            One result list per executed rule, in execution order. Results of
            nested rulesets are reported but not included.

        Raises:
            RulesetError: the ruleset is malformed or declares an unknown axiom
        """
        target_dir = Path(target_dir)
        filter_paths = list(filter_paths)

        self.fs.target_dir = target_dir
        self.fs.filter_paths = filter_paths
        self.fs.refresh()
        self.reporter.info(f"Target directory: {target_dir}")
        if filter_paths:
            self.reporter.info("Paths to include in checks:\n\t" + "\n\t".join(filter_paths))

        if ruleset is None:
            ruleset_path = discover_ruleset_path(target_dir)
            self.reporter.info(f"Ruleset: {os.path.relpath(ruleset_path, target_dir)}")
            ruleset = load_ruleset(ruleset_path)
        else:
            validate_ruleset(ruleset)

        targets = resolve_targets(ruleset, self.fs, self.axioms)
        logger.debug("Active targets: %s", targets)

        evaluation: Evaluation = []
        any_failures = False

        for target in targets:
            section = ruleset["rules"].get(target)
            if not section:
                continue
            for key, declaration in section.items():
                rule = parse_rule(key, declaration, self.fs)
                self.configured.append(rule)
                if not rule.enabled:
                    continue

                try:
                    resolved = self.rules.resolve(rule.module)
                    if callable(resolved):
                        results = list(resolved(self.fs, rule))
                        for result in results:
                            if not isinstance(result, Result):
                                raise TypeError(f"rule returned {type(result).__name__}, expected Result")
                        failed = any(r.is_error for r in results)
                        evaluation.append(results)
                        any_failures = any_failures or failed
                    elif resolved is not None:
                        self.lint(target_dir, filter_paths, resolved)
                    else:
                        logger.warning("Rule %s: no rule or ruleset named %r, skipping", rule.id, rule.module)
                except Exception as e:
                    logger.debug("Rule %s raised", rule.id, exc_info=True)
                    failure = Result(rule, str(e), None, False)
                    evaluation.append([failure])
                    any_failures = any_failures or failure.is_error

        for results in evaluation:
            self._render([r for r in results if not r.passed])
            self._render([r for r in results if r.passed])

        if any_failures:
            self.exit_code = 1

        return evaluation

    def _render(self, results: list[Result]) -> None:
        for result in results:
            formatted = self.formatter.format(result)
            if formatted:
                self.reporter.result(formatted)


def lint(
    target_dir: Path | str,
    filter_paths: Iterable[str] = (),
    ruleset: dict[str, Any] | None = None,
    **kwargs: Any,
) -> Evaluation:
    """Lint `target_dir` with a fresh Linter (see Linter for keyword arguments)."""
    return Linter(**kwargs).lint(target_dir, filter_paths, ruleset)
