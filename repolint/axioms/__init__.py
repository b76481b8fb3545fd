"""Axioms: inspectors whose outcomes select which ruleset targets apply."""

from .registry import Axiom, AxiomFn, AxiomRegistry, UnknownAxiomError, register_axiom, registry

# Import built-in axioms so they self-register with the global registry.
from . import contributor_count, licensee, linguist, packagers  # noqa: F401,E402

__all__ = [
    "Axiom",
    "AxiomFn",
    "AxiomRegistry",
    "UnknownAxiomError",
    "register_axiom",
    "registry",
]
