"""Shared Rich consoles for command output."""

from rich.console import Console

# Single shared console so progress narration stays aligned across commands.
console: Console = Console(highlight=False, emoji=False)
error_console: Console = Console(stderr=True, highlight=False, emoji=False)
