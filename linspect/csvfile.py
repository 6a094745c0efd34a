"""Collections of statistics records, saved to and loaded from CSV files."""

from __future__ import annotations

import copy
import csv
import dataclasses
from dataclasses import dataclass, field
from typing import Optional

from .binary_search import Boundaries
from .diskstats import DiskStatEntry
from .formatting import humanize_bytes
from .interpolate import combine, interpolate
from .netdev import NetStatEntry
from .process import ProcessEntry
from .record import PROC_HEADER, PROC_HEADER_INDEX, LoadAvg, Proc, nano_to_unix

_U64 = 1 << 64

# one sector is 512 bytes in the Linux kernel
_SECTOR_SIZE = 512


def _counter_delta(current: int, previous: int) -> int:
    """Difference of two unsigned 64-bit counters, wrapping like the counters."""
    return (current - previous) % _U64


@dataclass
class CSV:
    """Statistics records sorted by unix time, with their time range."""

    file_path: str = ""
    pid: int = 0
    disk_device: str = ""
    network_interface: str = ""
    extra_path: str = ""

    header: list[str] = field(default_factory=lambda: list(PROC_HEADER))
    header_index: dict[str, int] = field(
        default_factory=lambda: dict(PROC_HEADER_INDEX)
    )

    min_unix_nanosecond: int = 0
    min_unix_second: int = 0
    max_unix_nanosecond: int = 0
    max_unix_second: int = 0

    rows: list[Proc] = field(default_factory=list)

    def append(self, proc: Proc) -> None:
        """Append a record, filling in its deltas against the previous one.

        Records must arrive in increasing unix nanosecond order.
        """
        cur = copy.deepcopy(proc)
        if not self.rows:
            self.min_unix_nanosecond = cur.unix_nanosecond
            self.min_unix_second = cur.unix_second
            self.max_unix_nanosecond = cur.unix_nanosecond
            self.max_unix_second = cur.unix_second
            self.rows = [cur]
            return

        prev = self.rows[-1]
        if prev.unix_nanosecond >= cur.unix_nanosecond:
            raise ValueError(
                f"clock went backwards: got {cur.unix_nanosecond}, "
                f"but expected more than {prev.unix_nanosecond}"
            )

        self.max_unix_nanosecond = cur.unix_nanosecond
        self.max_unix_second = cur.unix_second

        cur_ds, prev_ds = cur.ds_entry, prev.ds_entry
        cur.reads_completed_delta = _counter_delta(
            cur_ds.reads_completed, prev_ds.reads_completed
        )
        cur.sectors_read_delta = _counter_delta(cur_ds.sectors_read, prev_ds.sectors_read)
        cur.writes_completed_delta = _counter_delta(
            cur_ds.writes_completed, prev_ds.writes_completed
        )
        cur.sectors_written_delta = _counter_delta(
            cur_ds.sectors_written, prev_ds.sectors_written
        )

        cur.read_bytes_delta = (cur.sectors_read_delta * _SECTOR_SIZE) % _U64
        cur.write_bytes_delta = (cur.sectors_written_delta * _SECTOR_SIZE) % _U64
        # megabyte deltas are always recorded as zero
        cur.read_megabytes_delta = 0
        cur.write_megabytes_delta = 0

        cur_ns, prev_ns = cur.ns_entry, prev.ns_entry
        cur.receive_bytes_num_delta = _counter_delta(
            cur_ns.receive_bytes_num, prev_ns.receive_bytes_num
        )
        cur.transmit_bytes_num_delta = _counter_delta(
            cur_ns.transmit_bytes_num, prev_ns.transmit_bytes_num
        )
        cur.receive_packets_delta = _counter_delta(
            cur_ns.receive_packets, prev_ns.receive_packets
        )
        cur.transmit_packets_delta = _counter_delta(
            cur_ns.transmit_packets, prev_ns.transmit_packets
        )
        cur.receive_bytes_delta = humanize_bytes(cur.receive_bytes_num_delta)
        cur.transmit_bytes_delta = humanize_bytes(cur.transmit_bytes_num_delta)

        self.rows.append(cur)

    def save(self) -> None:
        """Append the header and every record to the file at ``file_path``."""
        with open(self.file_path, "a", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle, lineterminator="\n")
            writer.writerow(self.header)
            writer.writerows(row.to_row() for row in self.rows)

    def interpolate(self) -> "CSV":
        """Return a copy with one record per second over the whole range.

        Records that share a unix second are combined into their average,
        and seconds with no record are filled with linear estimates. When
        anything changes, every unix nanosecond in the copy is reset to 0.
        """
        cc = copy.deepcopy(self)
        if len(cc.rows) < 2 or cc.min_unix_second == cc.max_unix_second:
            return cc

        expected_rows = cc.max_unix_second - cc.min_unix_second + 1
        by_second: dict[int, list[Proc]] = {}
        for row in cc.rows:
            by_second.setdefault(row.unix_second, []).append(row)
        if len(cc.rows) == expected_rows and len(cc.rows) == len(by_second):
            return cc

        second_to_proc: dict[int, Proc] = {
            sec: procs[0] if len(procs) == 1 else combine(*procs)
            for sec, procs in by_second.items()
        }
        all_seconds = list(second_to_proc)
        cc._set_rows(second_to_proc)

        missing = [
            sec
            for sec in range(cc.min_unix_second, cc.max_unix_second + 1)
            if sec not in second_to_proc
        ]
        if not missing:
            return cc

        bounds = Boundaries(all_seconds)
        for second in missing:
            if second in second_to_proc:
                continue
            bd = bounds.find_boundary(second)
            if bd.lower == second and bd.upper == second:
                raise ValueError(
                    f"{second} is supposed to be missing but found at index {bd.lower_idx}"
                )
            if bd.lower_idx == -1 or bd.upper_idx == -1:
                raise ValueError(f"boundary is not found for missing second {second}")
            for known in (bd.lower, bd.upper):
                if known not in second_to_proc:
                    raise ValueError(f"{known} is not found among known seconds")
            estimates = interpolate(second_to_proc[bd.lower], second_to_proc[bd.upper])
            for estimate in estimates:
                second_to_proc[estimate.unix_second] = estimate
                bounds.add(estimate.unix_second)

        cc._set_rows(second_to_proc)
        return cc

    def _set_rows(self, second_to_proc: dict[int, Proc]) -> None:
        rows = [
            dataclasses.replace(row, unix_nanosecond=0)
            for row in second_to_proc.values()
        ]
        rows.sort(key=lambda p: (p.unix_nanosecond, p.unix_second))
        self.rows = rows
        self.min_unix_nanosecond = rows[0].unix_nanosecond
        self.min_unix_second = rows[0].unix_second
        self.max_unix_nanosecond = rows[-1].unix_nanosecond
        self.max_unix_second = rows[-1].unix_second


def _uint(text: str) -> int:
    value = int(text)
    if value < 0:
        raise ValueError(f"expected an unsigned integer, got {text!r}")
    return value


def _parse_row(row: list[str]) -> Proc:
    def cell(name: str) -> str:
        idx = PROC_HEADER_INDEX[name]
        if idx >= len(row):
            raise ValueError(f"row has no {name} column: {row}")
        return row[idx]

    return Proc(
        unix_nanosecond=int(cell("UNIX-NANOSECOND")),
        unix_second=int(cell("UNIX-SECOND")),
        ps_entry=ProcessEntry(
            program=cell("PROGRAM"),
            state=cell("STATE"),
            pid=int(cell("PID")),
            ppid=int(cell("PPID")),
            cpu=cell("CPU"),
            vmrss=cell("VMRSS"),
            vmsize=cell("VMSIZE"),
            fd=_uint(cell("FD")),
            threads=_uint(cell("THREADS")),
            voluntary_ctxt_switches=_uint(cell("VOLUNTARY-CTXT-SWITCHES")),
            nonvoluntary_ctxt_switches=_uint(cell("NON-VOLUNTARY-CTXT-SWITCHES")),
            cpu_num=float(cell("CPU-NUM")),
            vmrss_num=_uint(cell("VMRSS-NUM")),
            vmsize_num=_uint(cell("VMSIZE-NUM")),
        ),
        load_avg=LoadAvg(
            load_avg_1_minute=float(cell("LOAD-AVERAGE-1-MINUTE")),
            load_avg_5_minute=float(cell("LOAD-AVERAGE-5-MINUTE")),
            load_avg_15_minute=float(cell("LOAD-AVERAGE-15-MINUTE")),
        ),
        ds_entry=DiskStatEntry(
            device=cell("DEVICE"),
            reads_completed=_uint(cell("READS-COMPLETED")),
            sectors_read=_uint(cell("SECTORS-READ")),
            time_spent_on_reading=cell("TIME(READS)"),
            writes_completed=_uint(cell("WRITES-COMPLETED")),
            sectors_written=_uint(cell("SECTORS-WRITTEN")),
            time_spent_on_writing=cell("TIME(WRITES)"),
            time_spent_on_reading_ms=_uint(cell("MILLISECONDS(READS)")),
            time_spent_on_writing_ms=_uint(cell("MILLISECONDS(WRITES)")),
        ),
        reads_completed_delta=_uint(cell("READS-COMPLETED-DELTA")),
        sectors_read_delta=_uint(cell("SECTORS-READ-DELTA")),
        writes_completed_delta=_uint(cell("WRITES-COMPLETED-DELTA")),
        sectors_written_delta=_uint(cell("SECTORS-WRITTEN-DELTA")),
        read_bytes_delta=_uint(cell("READ-BYTES-DELTA")),
        read_megabytes_delta=_uint(cell("READ-MEGABYTES-DELTA")),
        write_bytes_delta=_uint(cell("WRITE-BYTES-DELTA")),
        write_megabytes_delta=_uint(cell("WRITE-MEGABYTES-DELTA")),
        ns_entry=NetStatEntry(
            interface=cell("INTERFACE"),
            receive_bytes=cell("RECEIVE-BYTES"),
            receive_packets=_uint(cell("RECEIVE-PACKETS")),
            transmit_bytes=cell("TRANSMIT-BYTES"),
            transmit_packets=_uint(cell("TRANSMIT-PACKETS")),
            receive_bytes_num=_uint(cell("RECEIVE-BYTES-NUM")),
            transmit_bytes_num=_uint(cell("TRANSMIT-BYTES-NUM")),
        ),
        receive_bytes_delta=cell("RECEIVE-BYTES-DELTA"),
        receive_packets_delta=_uint(cell("RECEIVE-PACKETS-DELTA")),
        transmit_bytes_delta=cell("TRANSMIT-BYTES-DELTA"),
        transmit_packets_delta=_uint(cell("TRANSMIT-PACKETS-DELTA")),
        receive_bytes_num_delta=_uint(cell("RECEIVE-BYTES-NUM-DELTA")),
        transmit_bytes_num_delta=_uint(cell("TRANSMIT-BYTES-NUM-DELTA")),
        extra=cell("EXTRA").encode("utf-8"),
    )


def read_csv(path: str) -> CSV:
    """Load a CSV file written by :meth:`CSV.save`."""
    with open(path, newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))
    if len(rows) <= 1:
        raise ValueError(f"expected len(rows)>1, got {len(rows)}")
    if not rows[0] or rows[0][0] != "UNIX-NANOSECOND":
        raise ValueError(f"expected header at top, got {rows[0]}")

    body = rows[1:]
    first: Optional[int] = int(body[0][0]) if body[0] else None
    last: Optional[int] = int(body[-1][0]) if body[-1] else None
    if first is None or last is None:
        raise ValueError("empty row found")

    result = CSV(
        file_path=path,
        min_unix_nanosecond=first,
        min_unix_second=nano_to_unix(first),
        max_unix_nanosecond=last,
        max_unix_second=nano_to_unix(last),
    )
    for row in body:
        proc = _parse_row(row)
        result.pid = proc.ps_entry.pid
        result.disk_device = proc.ds_entry.device
        result.network_interface = proc.ns_entry.interface
        result.rows.append(proc)
    return result