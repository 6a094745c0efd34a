"""Socket entries and their tabular rendering."""

from __future__ import annotations

from dataclasses import dataclass

from .table import render_table

COLUMNS = (
    "PROTOCOL",
    "PROGRAM",
    "STATE",
    "PID",
    "LOCAL-IP",
    "LOCAL-PORT",
    "REMOTE-IP",
    "REMOTE-PORT",
    "USER",
)

COLUMNS_TO_SHOW = 9


@dataclass
class SocketEntry:
    """Simplified TCP socket owned by a process."""

    protocol: str = ""
    program: str = ""
    state: str = ""
    pid: int = 0
    local_ip: str = ""
    local_port: int = 0
    remote_ip: str = ""
    remote_port: int = 0
    user: str = ""

    def to_row(self) -> list[str]:
        """Return the entry as strings in ``COLUMNS`` order."""
        return [
            self.protocol,
            self.program,
            self.state,
            f"{self.pid:d}",
            self.local_ip,
            f"{self.local_port:d}",
            self.remote_ip,
            f"{self.remote_port:d}",
            self.user,
        ]


def convert_ss(*entries: SocketEntry) -> tuple[list[str], list[list[str]]]:
    """Return the header and rows, ordered as text by program, state,
    protocol, PID and local IP."""
    rows = [entry.to_row() for entry in entries]
    rows.sort(key=lambda row: (row[1], row[2], row[0], row[3], row[4]))
    return list(COLUMNS), rows


def string_ss(header: list[str], rows: list[list[str]], top_limit: int) -> str:
    """Render the shown columns; a positive *top_limit* caps the rows."""
    if top_limit > 0:
        rows = rows[:top_limit]
    return render_table(
        header[:COLUMNS_TO_SHOW], [row[:COLUMNS_TO_SHOW] for row in rows]
    )