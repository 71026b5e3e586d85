"""Rich Console factory and the injected Output printer.

Consoles render to a StringIO buffer and the text is written with
``click.echo``; in non-TTY environments (tests, pipes) Rich disables
color codes automatically.
"""

from __future__ import annotations

from io import StringIO

import click
from rich.console import Console
from rich.text import Text
from rich.theme import Theme

NOW_THEME = Theme(
    {
        "now.success": "cyan",
        "now.error": "bold red",
        "now.warning": "bold yellow",
        "now.prompt": "dim",
        "now.param": "bold",
        "now.muted": "grey50",
        "now.ok": "green",
        "now.bad": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=NOW_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    if not isinstance(console.file, StringIO):
        raise TypeError("console is not backed by a StringIO buffer")
    return console.file.getvalue()


class Output:
    """User-facing printer passed into commands and reporters.

    ``error``, ``warn``, ``log`` and ``print`` write to stderr so that
    stdout only carries the success line.
    """

    def __init__(self, *, no_color: bool = False) -> None:
        self._no_color = no_color

    def _emit(self, *parts: Text | str, err: bool = True, newline: bool = True) -> None:
        console = create_console(no_color=self._no_color)
        texts = [p if isinstance(p, Text) else Text(p) for p in parts]
        console.print(*texts, sep="", end="\n" if newline else "", soft_wrap=True)
        click.echo(get_output(console), err=err, nl=False)

    def error(self, message: str) -> None:
        self._emit(Text("Error! ", style="now.error"), Text(message))

    def warn(self, message: str) -> None:
        self._emit(Text("WARN! ", style="now.warning"), Text(message))

    def log(self, message: str) -> None:
        self._emit(Text("> ", style="now.prompt"), Text(message))

    def print(self, text: str | Text) -> None:
        """Write *text* verbatim (no trailing newline added)."""
        self._emit(text, newline=False)

    def success(self, message: str | Text) -> None:
        self._emit(Text("> Success! ", style="now.success"), message, err=False)
