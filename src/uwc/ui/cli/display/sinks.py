"""src/uwc/ui/cli/display/sinks.py
What: Render count rows either as tab-separated lines or as aligned columns.
Why: Keep presentation choices out of the counting pipeline.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO, final

from rich.cells import cell_len
from rich.console import Console
from rich.table import Table
from rich.text import Text


def _fields(counts: Sequence[int], label: str | None) -> list[str]:
    fields = [str(value) for value in counts]
    if label is not None:
        fields.append(label)
    return fields


@final
class TabSeparatedSink:
    """Write each row immediately as tab-separated, newline-terminated text."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream: TextIO = stream if stream is not None else sys.stdout

    def write_header(self, columns: Sequence[str]) -> None:
        _ = self._stream.write("\t".join(columns) + "\n")

    def write_row(self, counts: Sequence[int], label: str | None = None) -> None:
        _ = self._stream.write("\t".join(_fields(counts, label)) + "\n")

    def close(self) -> None:
        self._stream.flush()


@final
class ElasticSink:
    """Buffer rows and print them as aligned columns on close.

    Column widths depend on every row, so nothing is printed until
    ``close`` is called.
    """

    _PADDING: int = 2

    def __init__(self, console: Console | None = None) -> None:
        self._console: Console = (
            console
            if console is not None
            else Console(highlight=False, markup=False, emoji=False, soft_wrap=True)
        )
        self._rows: list[list[str]] = []

    def write_header(self, columns: Sequence[str]) -> None:
        self._rows.append(list(columns))

    def write_row(self, counts: Sequence[int], label: str | None = None) -> None:
        self._rows.append(_fields(counts, label))

    def close(self) -> None:
        if not self._rows:
            return

        column_count = max(len(row) for row in self._rows)
        widths = [0] * column_count
        for row in self._rows:
            for index, cell in enumerate(row):
                widths[index] = max(widths[index], cell_len(cell))

        # Right padding only: columns sit exactly _PADDING cells apart.
        table = Table.grid(padding=(0, self._PADDING, 0, 0))
        for _ in range(column_count):
            table.add_column(no_wrap=True)
        for row in self._rows:
            table.add_row(*(Text(cell) for cell in row))

        table_width = sum(widths) + self._PADDING * (column_count - 1)
        # print() clamps to the console width; rows must never wrap or truncate.
        if self._console.width < table_width:
            self._console.width = table_width
        self._console.print(table, width=table_width)
        self._rows.clear()


__all__ = ["ElasticSink", "TabSeparatedSink"]
