"""Plain-text formatting helpers: DNS/nameserver tables and elapsed stamps.

Tables are built with Rich and rendered to a StringIO-backed console,
so the returned strings carry no ANSI codes and can be embedded in any
Output call.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence

from rich.table import Table
from rich.text import Text

from nowctl.output.console import create_console, get_output

OK_MARK = "✔"
BAD_MARK = "✘"


def _render_table(table: Table, extra_space: str) -> str:
    console = create_console(no_color=True)
    console.print(table)
    lines = get_output(console).rstrip("\n").splitlines()
    return "\n".join(f"{extra_space}{line}".rstrip() for line in lines)


def _plain_table(*headers: str) -> Table:
    table = Table(box=None, pad_edge=False, show_edge=False, padding=(0, 3, 0, 0))
    for header in headers:
        table.add_column(header, header_style="dim", no_wrap=True)
    return table


def format_ns_table(
    intended: Sequence[str],
    current: Sequence[str],
    *,
    extra_space: str = "",
) -> str:
    """Render intended vs. current nameservers side by side.

    Each current nameserver is marked ✔ when it belongs to the intended
    set and ✘ otherwise.
    """
    wanted = sorted(intended)
    actual = sorted(current)
    table = _plain_table("Intended Nameservers", "Current Nameservers", "")
    for i in range(max(len(wanted), len(actual))):
        ns_wanted = wanted[i] if i < len(wanted) else ""
        ns_actual = actual[i] if i < len(actual) else ""
        mark = ""
        if ns_actual:
            mark = OK_MARK if ns_actual in wanted else BAD_MARK
        table.add_row(Text(ns_wanted), Text(ns_actual), Text(mark))
    return _render_table(table, extra_space)


def format_dns_table(
    rows: Sequence[Sequence[str]],
    *,
    extra_space: str = "",
) -> str:
    """Render DNS records as ``name  type  value`` rows."""
    table = _plain_table("name", "type", "value")
    for row in rows:
        table.add_row(*(Text(str(cell)) for cell in row))
    return _render_table(table, extra_space)


def format_elapsed(seconds: float) -> str:
    """Format a duration the way the CLI reports timings (``[350ms]``, ``[2.1s]``)."""
    if seconds < 1:
        return f"[{round(seconds * 1000)}ms]"
    return f"[{seconds:.1f}s]"


def stamp() -> Callable[[], str]:
    """Start a timer; calling the result returns the elapsed time stamp."""
    start = time.monotonic()

    def elapsed() -> str:
        return format_elapsed(time.monotonic() - start)

    return elapsed
