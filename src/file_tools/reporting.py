"""Progress sinks handed to the splitter and joiner."""

from __future__ import annotations

from typing import Protocol

from rich.console import Console
from rich.markup import escape

from .rich_console import console as shared_console


class Reporter(Protocol):
    def write(self, text: str) -> None: ...

    def write_line(self, text: str = "") -> None: ...


class ConsoleReporter:
    """Write progress text to a Rich console (the shared one by default)."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or shared_console

    def write(self, text: str) -> None:
        self._console.print(escape(text), end="", soft_wrap=True)

    def write_line(self, text: str = "") -> None:
        self._console.print(escape(text), soft_wrap=True)


class NullReporter:
    def write(self, text: str) -> None:
        pass

    def write_line(self, text: str = "") -> None:
        pass


class RecordingReporter:
    """Keep progress text in memory, one entry per completed line."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self._pending = ""

    def write(self, text: str) -> None:
        self._pending += text

    def write_line(self, text: str = "") -> None:
        self.lines.append(self._pending + text)
        self._pending = ""
