"""
Axiom registry for axiom id -> inspector lookup.

Categorical axioms return a list of outcome strings (e.g. detected
languages). Counting axioms return a single number and carry a keyword used
to find the comparison targets (`contributors>10`) in a ruleset.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Union

from ..ruleset import RulesetError

if TYPE_CHECKING:
    from ..file_system import FileSystem

AxiomFn = Callable[["FileSystem"], Union[list[str], int, float]]


class UnknownAxiomError(RulesetError):
    """A ruleset declares an axiom nobody registered."""


@dataclass(frozen=True)
class Axiom:
    id: str
    fn: AxiomFn
    keyword: str | None = None  # set for counting axioms

    @property
    def counting(self) -> bool:
        return self.keyword is not None

    def __call__(self, fs: "FileSystem") -> list[str] | int | float:
        return self.fn(fs)


class AxiomRegistry:
    def __init__(self):
        self._axioms: dict[str, Axiom] = {}

    def register(self, axiom_id: str, fn: AxiomFn, *, keyword: str | None = None) -> Axiom:
        if not axiom_id:
            raise ValueError("Axiom id must be non-empty")
        axiom = Axiom(id=axiom_id, fn=fn, keyword=keyword)
        self._axioms[axiom_id] = axiom
        return axiom

    def get(self, axiom_id: str) -> Axiom:
        try:
            return self._axioms[axiom_id]
        except KeyError:
            raise UnknownAxiomError(f"unknown axiom: {axiom_id!r}") from None

    def __contains__(self, axiom_id: object) -> bool:
        return axiom_id in self._axioms

    def ids(self) -> list[str]:
        return list(self._axioms.keys())

    def copy(self) -> "AxiomRegistry":
        clone = AxiomRegistry()
        clone._axioms = dict(self._axioms)
        return clone


registry = AxiomRegistry()


def register_axiom(axiom_id: str, *, keyword: str | None = None) -> Callable[[AxiomFn], AxiomFn]:
    """Decorator registering a built-in axiom with the global registry."""

    def decorator(fn: AxiomFn) -> AxiomFn:
        registry.register(axiom_id, fn, keyword=keyword)
        return fn

    return decorator
