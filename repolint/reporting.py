"""Reporter hooks receiving informational lines and formatted results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from rich.console import Console


@dataclass
class Reporter:
    info: Callable[[str], None]
    result: Callable[[Any], None]


def console_reporter(console: Console | None = None, info_console: Console | None = None) -> Reporter:
    """Reporter printing to a rich console (stdout unless told otherwise)."""
    console = console or Console()
    info_console = info_console or console

    def info(message: str) -> None:
        info_console.print(message, style="dim", markup=False, emoji=False, highlight=False)

    def result(renderable: Any) -> None:
        if isinstance(renderable, str):
            console.print(renderable, markup=False, emoji=False, highlight=False, soft_wrap=True)
        else:
            console.print(renderable)

    return Reporter(info=info, result=result)
