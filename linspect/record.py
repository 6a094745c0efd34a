"""One timestamped record of process, load, disk and network statistics."""

from __future__ import annotations

from dataclasses import dataclass, field

from . import diskstats, netdev, process
from .diskstats import DiskStatEntry
from .netdev import NetStatEntry
from .process import ProcessEntry

_NANOS_PER_SECOND = 10**9

PROC_HEADER: tuple[str, ...] = (
    "UNIX-NANOSECOND",
    "UNIX-SECOND",
    *process.COLUMNS,
    "LOAD-AVERAGE-1-MINUTE",
    "LOAD-AVERAGE-5-MINUTE",
    "LOAD-AVERAGE-15-MINUTE",
    *diskstats.COLUMNS,
    *netdev.COLUMNS,
    "READS-COMPLETED-DELTA",
    "SECTORS-READ-DELTA",
    "WRITES-COMPLETED-DELTA",
    "SECTORS-WRITTEN-DELTA",
    "READ-BYTES-DELTA",
    "READ-MEGABYTES-DELTA",
    "WRITE-BYTES-DELTA",
    "WRITE-MEGABYTES-DELTA",
    "RECEIVE-BYTES-DELTA",
    "RECEIVE-PACKETS-DELTA",
    "TRANSMIT-BYTES-DELTA",
    "TRANSMIT-PACKETS-DELTA",
    "RECEIVE-BYTES-NUM-DELTA",
    "TRANSMIT-BYTES-NUM-DELTA",
    "EXTRA",
)

PROC_HEADER_INDEX: dict[str, int] = {name: idx for idx, name in enumerate(PROC_HEADER)}


def nano_to_unix(unix_nano: int) -> int:
    """Convert unix nanoseconds to unix seconds, truncating toward zero."""
    seconds = abs(unix_nano) // _NANOS_PER_SECOND
    return seconds if unix_nano >= 0 else -seconds


@dataclass
class LoadAvg:
    """System load averages and scheduling entity counts."""

    load_avg_1_minute: float = 0.0
    load_avg_5_minute: float = 0.0
    load_avg_15_minute: float = 0.0
    runnable_kernel_scheduling_entities: int = 0
    current_kernel_scheduling_entities: int = 0


@dataclass
class Proc:
    """Statistics gathered at one moment.

    Byte deltas derive from sector deltas with 512-byte sectors.
    """

    unix_nanosecond: int = 0
    unix_second: int = 0

    ps_entry: ProcessEntry = field(default_factory=ProcessEntry)
    load_avg: LoadAvg = field(default_factory=LoadAvg)

    ds_entry: DiskStatEntry = field(default_factory=DiskStatEntry)
    reads_completed_delta: int = 0
    sectors_read_delta: int = 0
    writes_completed_delta: int = 0
    sectors_written_delta: int = 0
    read_bytes_delta: int = 0
    read_megabytes_delta: int = 0
    write_bytes_delta: int = 0
    write_megabytes_delta: int = 0

    ns_entry: NetStatEntry = field(default_factory=NetStatEntry)
    receive_bytes_delta: str = ""
    receive_packets_delta: int = 0
    transmit_bytes_delta: str = ""
    transmit_packets_delta: int = 0
    receive_bytes_num_delta: int = 0
    transmit_bytes_num_delta: int = 0

    # free-form data read from a user-supplied file
    extra: bytes = b""

    def to_row(self) -> list[str]:
        """Return the record as strings in ``PROC_HEADER`` order."""
        return [
            f"{self.unix_nanosecond:d}",
            f"{self.unix_second:d}",
            *self.ps_entry.to_row(),
            f"{self.load_avg.load_avg_1_minute:3.2f}",
            f"{self.load_avg.load_avg_5_minute:3.2f}",
            f"{self.load_avg.load_avg_15_minute:3.2f}",
            *self.ds_entry.to_row(),
            *self.ns_entry.to_row(),
            f"{self.reads_completed_delta:d}",
            f"{self.sectors_read_delta:d}",
            f"{self.writes_completed_delta:d}",
            f"{self.sectors_written_delta:d}",
            f"{self.read_bytes_delta:d}",
            f"{self.read_megabytes_delta:d}",
            f"{self.write_bytes_delta:d}",
            f"{self.write_megabytes_delta:d}",
            self.receive_bytes_delta,
            f"{self.receive_packets_delta:d}",
            self.transmit_bytes_delta,
            f"{self.transmit_packets_delta:d}",
            f"{self.receive_bytes_num_delta:d}",
            f"{self.transmit_bytes_num_delta:d}",
            self.extra.decode("utf-8", errors="replace"),
        ]