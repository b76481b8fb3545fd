"""Target resolution: which ruleset sections apply to the target directory."""

from __future__ import annotations

import logging
import operator
import re
from typing import TYPE_CHECKING, Any, Callable

from .axioms import AxiomRegistry
from .axioms import registry as default_axioms
from .models import UNIVERSAL_TARGET

if TYPE_CHECKING:
    from .file_system import FileSystem

logger = logging.getLogger(__name__)

COMPARISONS: dict[str, Callable[[Any, Any], bool]] = {
    "<": operator.lt,
    ">": operator.gt,
    "=": operator.eq,
}

_OPERATOR_RE = re.compile(r"[<>=]")
_NUMBER_RE = re.compile(r"[0-9]+")


def parse_comparison(label: str) -> tuple[str, int] | None:
    """First comparison operator and first integer in `label`, if both exist."""
    op = _OPERATOR_RE.search(label)
    num = _NUMBER_RE.search(label)
    if op is None or num is None:
        return None
    return op.group(0), int(num.group(0))


def comparison_targets(ruleset: dict[str, Any], keyword: str, value: int | float) -> list[str]:
    """Rule-section keys mentioning `keyword` whose comparison holds for `value`."""
    matched: list[str] = []
    for label in ruleset.get("rules", {}):
        if keyword not in label:
            continue
        parsed = parse_comparison(label)
        if parsed is None:
            logger.debug("Ignoring target %r: no comparison found", label)
            continue
        op, threshold = parsed
        if COMPARISONS[op](value, threshold):
            matched.append(label)
    return matched


def resolve_targets(
    ruleset: dict[str, Any],
    fs: "FileSystem",
    axioms: AxiomRegistry | None = None,
) -> list[str]:
    """
    Build the list of active target labels.

    The universal target is always first. Each declared axiom then adds
    `name=*`, plus either `name=<outcome>` per outcome (categorical axioms)
    or every matching comparison key (counting axioms).

    Raises:
        UnknownAxiomError: a declared axiom is not registered
    """
    axioms = axioms if axioms is not None else default_axioms
    targets = [UNIVERSAL_TARGET]

    for axiom_id, name in (ruleset.get("axioms") or {}).items():
        axiom = axioms.get(axiom_id)
        outcome = axiom(fs)
        logger.debug("Axiom %s -> %r", axiom_id, outcome)

        targets.append(f"{name}=*")

        if axiom.counting:
            targets.extend(comparison_targets(ruleset, axiom.keyword or "", outcome))
            continue

        targets.extend(f"{name}={value}" for value in outcome)

    return targets
