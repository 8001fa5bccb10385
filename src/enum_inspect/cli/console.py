"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so that
bootstrap paths (``--help``, ``--version``) and every command remain
functional even when Rich is not installed; output then falls back to
plain text on stderr.

Two kinds of text reach the console:

* **markup** — literal strings written by the CLI itself, passed to
  :meth:`_ConsoleProxy.print`; Rich tags are rendered or stripped.
* **parts** — anything carrying user-derived text (names, values,
  descriptions, error messages), passed to :meth:`_ConsoleProxy.message`
  or as table cells.  A part is a plain ``str`` or a ``(text, style)``
  tuple and is never parsed as markup.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from typing import Any

from enum_inspect.exceptions import EnvironmentError

_MARKUP = re.compile(r"\[/?[a-z ]+\]")

Part = str | tuple[str, str]
"""Literal text, optionally paired with a Rich style name."""


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def rich_available() -> bool:
    """Return whether ``rich`` can be imported."""
    try:
        _load_rich_console_class()
    except EnvironmentError:
        return False
    return True


def strip_markup(text: str) -> str:
    """Remove simple Rich style tags such as ``[bold red]`` and ``[/]``."""
    return _MARKUP.sub("", text).replace("[/]", "")


def plain_text(part: Part) -> str:
    """Return the text of *part* without its style."""
    return part if isinstance(part, str) else part[0]


def _rich_text(part: Part) -> Any:
    """Build a ``rich.text.Text`` that renders *part* verbatim."""
    from rich.text import Text

    if isinstance(part, str):
        return Text(part)
    text, style = part
    return Text(text, style=style)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render CLI markup with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(
                *(strip_markup(o) if isinstance(o, str) else o for o in objects),
                file=sys.stderr,
            )
            return
        rich_console.print(*objects)

    def message(self, *parts: Part) -> None:
        """Print *parts* on one line without interpreting any markup."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print("".join(plain_text(p) for p in parts), file=sys.stderr)
            return
        from rich.text import Text

        rich_console.print(Text.assemble(*parts))

    def table(
        self,
        title: Part,
        columns: Sequence[str],
        rows: Sequence[Sequence[Part]],
    ) -> None:
        """Render *rows* as a Rich table, or as aligned plain text."""
        try:
            from rich.table import Table
        except ModuleNotFoundError:
            _print_plain_table(title, columns, rows)
            return

        table = Table(
            title=_rich_text(title),
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        for column in columns:
            table.add_column(column)
        for row in rows:
            table.add_row(*(_rich_text(cell) for cell in row))
        self.print(table)


def _print_plain_table(
    title: Part,
    columns: Sequence[str],
    rows: Sequence[Sequence[Part]],
) -> None:
    """Render a table without Rich."""
    plain_rows = [[plain_text(cell) for cell in row] for row in rows]
    widths = [
        max([len(column)] + [len(row[i]) for row in plain_rows])
        for i, column in enumerate(columns)
    ]
    total = sum(widths) + 2 * (len(widths) - 1)
    print(f"\n{plain_text(title)}", file=sys.stderr)
    print("=" * total, file=sys.stderr)
    print("  ".join(c.ljust(w) for c, w in zip(columns, widths)), file=sys.stderr)
    print("-" * total, file=sys.stderr)
    for row in plain_rows:
        print("  ".join(c.ljust(w) for c, w in zip(row, widths)), file=sys.stderr)
    print(file=sys.stderr)


console = _ConsoleProxy()
