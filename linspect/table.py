"""Plain-text table rendering with right-aligned cells."""

from __future__ import annotations

from typing import Iterable, Sequence


def _center(text: str, width: int) -> str:
    gap = width - len(text)
    if gap <= 0:
        return text
    left = gap // 2
    return " " * left + text + " " * (gap - left)


def render_table(header: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """Render *header* and *rows* as a bordered table.

    Header cells are centred and body cells are right-aligned. Every row
    must have as many cells as the header.
    """
    header = [str(cell) for cell in header]
    if not header:
        raise ValueError("table header must have at least one column")
    body = [[str(cell) for cell in row] for row in rows]
    for row in body:
        if len(row) != len(header):
            raise ValueError(
                f"row has {len(row)} cells, expected {len(header)}: {row}"
            )

    widths = [max(map(len, column)) for column in zip(header, *body)]
    border = "+" + "+".join("-" * (width + 2) for width in widths) + "+"

    def line(cells: Iterable[str]) -> str:
        return "| " + " | ".join(cells) + " |"

    lines = [
        border,
        line(_center(cell, width) for cell, width in zip(header, widths)),
        border,
    ]
    lines.extend(
        line(cell.rjust(width) for cell, width in zip(row, widths)) for row in body
    )
    lines.append(border)
    return "\n".join(lines) + "\n"