"""Result formatters: Result -> renderable (or None to suppress output)."""

from __future__ import annotations

import json
from typing import Any, Protocol

from rich.text import Text

from .models import Result

SYMBOLS = {
    "success": ("✔", "bold green"),
    "error": ("✖", "bold red"),
    "warning": ("⚠", "yellow"),
    "info": ("ℹ", "blue"),
}


class Formatter(Protocol):
    def format(self, result: Result) -> Any | None: ...


class SymbolFormatter:
    """One styled line per result: symbol, rule id and message."""

    def format(self, result: Result) -> Text | None:
        if result.passed:
            key = "success"
        else:
            key = result.rule.level if result.rule.level in SYMBOLS else "info"
        symbol, style = SYMBOLS[key]

        line = Text()
        line.append(symbol, style=style)
        line.append(f" {result.rule.id}: ", style="bold")
        line.append(result.message)
        return line


class JsonFormatter:
    """One JSON document per result."""

    def __init__(self, indent: int | None = None):
        self.indent = indent

    def format(self, result: Result) -> str | None:
        return json.dumps(result.to_dict(), indent=self.indent, default=str)


FORMATTERS: dict[str, type] = {
    "symbol": SymbolFormatter,
    "json": JsonFormatter,
}
