"""Pass when the licensee axiom recognises at least one license."""

from __future__ import annotations

from ..axioms.licensee import licensee
from ..file_system import FileSystem
from ..models import Result, Rule
from .common import file_system_for
from .registry import register_rule


@register_rule("license-detectable-by-licensee")
def license_detectable_by_licensee(fs: FileSystem, rule: Rule) -> list[Result]:
    licenses = licensee(file_system_for(fs, rule))
    if licenses:
        return [Result(rule, f"Licensee identified the license for project: {', '.join(licenses)}", licenses, True)]
    return [Result(rule, "Licensee did not identify a license for project", None, False)]
