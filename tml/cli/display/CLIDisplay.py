"""CLI display implementation using Rich library."""

import sys

from rich.console import Console
from rich.text import Text


class CLIDisplay:
    """Error reporting on stderr.

    Messages are printed as plain text so paths containing brackets are never
    read as Rich markup. The console is bound to ``sys.stderr`` at construction
    time, so build a display per command run.
    """

    def __init__(self):
        self.stderr_console = Console(file=sys.stderr, soft_wrap=True, highlight=False)

    def _print(self, label: str, style: str, message: str) -> None:
        self.stderr_console.print(Text.assemble((label, style), f": {message}"))

    def error(self, message: str) -> None:
        self._print("error", "bold red", message)

    def caused_by(self, message: str) -> None:
        self._print("caused by", "red", message)

    def error_chain(self, messages: list[str]) -> None:
        """Print the first message as the error and the rest as its causes."""
        if not messages:
            return
        self.error(messages[0])
        for message in messages[1:]:
            self.caused_by(message)
