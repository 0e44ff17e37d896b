"""
Notice Board — Toast Notifications
====================================

What:  Short success/error messages shown after each user action.
How:   Printed through a rich Console and kept in `history`, newest last.
"""

from typing import List, NamedTuple, Optional

from rich.console import Console


class Toast(NamedTuple):
    level: str
    message: str


class Toaster:
    STYLES = {"success": "bold green", "error": "bold red"}
    ICONS = {"success": "✔", "error": "✖"}

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.history: List[Toast] = []

    def success(self, message: str) -> None:
        self._show("success", message)

    def error(self, message: str) -> None:
        self._show("error", message)

    @property
    def last(self) -> Optional[Toast]:
        return self.history[-1] if self.history else None

    def _show(self, level: str, message: str) -> None:
        self.history.append(Toast(level, message))
        self.console.print(f"{self.ICONS[level]} {message}", style=self.STYLES[level])
