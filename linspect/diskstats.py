"""Disk statistics entries and their tabular rendering."""

from __future__ import annotations

from dataclasses import dataclass

from .table import render_table

COLUMNS = (
    "DEVICE",
    "READS-COMPLETED",
    "SECTORS-READ",
    "TIME(READS)",
    "WRITES-COMPLETED",
    "SECTORS-WRITTEN",
    "TIME(WRITES)",
    # extra columns for sorting
    "MILLISECONDS(READS)",
    "MILLISECONDS(WRITES)",
)

COLUMNS_TO_SHOW = 7


@dataclass
class DiskStatEntry:
    """Simplified disk statistics for one device."""

    device: str = ""
    reads_completed: int = 0
    sectors_read: int = 0
    time_spent_on_reading: str = ""
    writes_completed: int = 0
    sectors_written: int = 0
    time_spent_on_writing: str = ""
    # kept for sorting
    time_spent_on_reading_ms: int = 0
    time_spent_on_writing_ms: int = 0

    def to_row(self) -> list[str]:
        """Return the entry as strings in ``COLUMNS`` order."""
        return [
            self.device,
            f"{self.reads_completed:d}",
            f"{self.sectors_read:d}",
            self.time_spent_on_reading,
            f"{self.writes_completed:d}",
            f"{self.sectors_written:d}",
            self.time_spent_on_writing,
            f"{self.time_spent_on_reading_ms:d}",
            f"{self.time_spent_on_writing_ms:d}",
        ]


def convert_ds(*entries: DiskStatEntry) -> tuple[list[str], list[list[str]]]:
    """Return the header and rows, most sectors written first."""
    rows = [entry.to_row() for entry in entries]
    rows.sort(key=lambda row: (-float(row[5]), -float(row[4])))
    return list(COLUMNS), rows


def string_ds(header: list[str], rows: list[list[str]], top_limit: int) -> str:
    """Render the shown columns; a positive *top_limit* caps the rows."""
    if top_limit > 0:
        rows = rows[:top_limit]
    return render_table(
        header[:COLUMNS_TO_SHOW], [row[:COLUMNS_TO_SHOW] for row in rows]
    )