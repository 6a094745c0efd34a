"""Process entries and their tabular rendering."""

from __future__ import annotations

from dataclasses import dataclass

from .table import render_table

COLUMNS = (
    "PROGRAM",
    "STATE",
    "PID",
    "PPID",
    "CPU",
    "VMRSS",
    "VMSIZE",
    "FD",
    "THREADS",
    "VOLUNTARY-CTXT-SWITCHES",
    "NON-VOLUNTARY-CTXT-SWITCHES",
    # extra columns for sorting
    "CPU-NUM",
    "VMRSS-NUM",
    "VMSIZE-NUM",
)

COLUMNS_TO_SHOW = 11


@dataclass
class ProcessEntry:
    """Simplified status of one process."""

    program: str = ""
    state: str = ""
    pid: int = 0
    ppid: int = 0
    cpu: str = ""
    vmrss: str = ""
    vmsize: str = ""
    fd: int = 0
    threads: int = 0
    voluntary_ctxt_switches: int = 0
    nonvoluntary_ctxt_switches: int = 0
    # kept for sorting
    cpu_num: float = 0.0
    vmrss_num: int = 0
    vmsize_num: int = 0

    def to_row(self) -> list[str]:
        """Return the entry as strings in ``COLUMNS`` order."""
        return [
            self.program,
            self.state,
            f"{self.pid:d}",
            f"{self.ppid:d}",
            self.cpu,
            self.vmrss,
            self.vmsize,
            f"{self.fd:d}",
            f"{self.threads:d}",
            f"{self.voluntary_ctxt_switches:d}",
            f"{self.nonvoluntary_ctxt_switches:d}",
            f"{self.cpu_num:3.2f}",
            f"{self.vmrss_num:d}",
            f"{self.vmsize_num:d}",
        ]


def convert_ps(*entries: ProcessEntry) -> tuple[list[str], list[list[str]]]:
    """Return the header and rows, by resident memory, CPU, then size."""
    rows = [entry.to_row() for entry in entries]
    rows.sort(key=lambda row: (-float(row[12]), -float(row[11]), -float(row[13])))
    return list(COLUMNS), rows


def string_ps(header: list[str], rows: list[list[str]], top_limit: int) -> str:
    """Render the shown columns; a positive *top_limit* caps the rows."""
    if top_limit > 0:
        rows = rows[:top_limit]
    return render_table(
        header[:COLUMNS_TO_SHOW], [row[:COLUMNS_TO_SHOW] for row in rows]
    )