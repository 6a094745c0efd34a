"""Network device statistics entries and their tabular rendering."""

from __future__ import annotations

from dataclasses import dataclass

from .table import render_table

COLUMNS = (
    "INTERFACE",
    "RECEIVE-BYTES",
    "RECEIVE-PACKETS",
    "TRANSMIT-BYTES",
    "TRANSMIT-PACKETS",
    # extra columns for sorting
    "RECEIVE-BYTES-NUM",
    "TRANSMIT-BYTES-NUM",
)

COLUMNS_TO_SHOW = 5


@dataclass
class NetStatEntry:
    """Simplified traffic statistics for one network interface."""

    interface: str = ""
    receive_bytes: str = ""
    receive_packets: int = 0
    transmit_bytes: str = ""
    transmit_packets: int = 0
    # kept for sorting
    receive_bytes_num: int = 0
    transmit_bytes_num: int = 0

    def to_row(self) -> list[str]:
        """Return the entry as strings in ``COLUMNS`` order."""
        return [
            self.interface,
            self.receive_bytes,
            f"{self.receive_packets:d}",
            self.transmit_bytes,
            f"{self.transmit_packets:d}",
            f"{self.receive_bytes_num:d}",
            f"{self.transmit_bytes_num:d}",
        ]


def convert_ns(*entries: NetStatEntry) -> tuple[list[str], list[list[str]]]:
    """Return the header and rows, most bytes received first."""
    rows = [entry.to_row() for entry in entries]
    rows.sort(key=lambda row: (-float(row[5]), -float(row[6])))
    return list(COLUMNS), rows


def string_ns(header: list[str], rows: list[list[str]], top_limit: int) -> str:
    """Render the shown columns; a positive *top_limit* caps the rows."""
    if top_limit > 0:
        rows = rows[:top_limit]
    return render_table(
        header[:COLUMNS_TO_SHOW], [row[:COLUMNS_TO_SHOW] for row in rows]
    )