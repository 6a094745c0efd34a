"""Combine records sharing a second and estimate records for missing seconds."""

from __future__ import annotations

import copy
from typing import Sequence

from .formatting import humanize_bytes, humanize_duration_ms
from .record import Proc

_Path = tuple[str, ...]

# Integer counters that are averaged or linearly estimated.
_INT_FIELDS: tuple[_Path, ...] = (
    ("ps_entry", "voluntary_ctxt_switches"),
    ("ps_entry", "nonvoluntary_ctxt_switches"),
    ("ps_entry", "vmrss_num"),
    ("ps_entry", "vmsize_num"),
    ("ds_entry", "reads_completed"),
    ("ds_entry", "sectors_read"),
    ("ds_entry", "writes_completed"),
    ("ds_entry", "sectors_written"),
    ("ds_entry", "time_spent_on_reading_ms"),
    ("ds_entry", "time_spent_on_writing_ms"),
    ("reads_completed_delta",),
    ("sectors_read_delta",),
    ("writes_completed_delta",),
    ("sectors_written_delta",),
    ("read_bytes_delta",),
    ("read_megabytes_delta",),
    ("write_bytes_delta",),
    ("write_megabytes_delta",),
    ("ns_entry", "receive_packets"),
    ("ns_entry", "transmit_packets"),
    ("ns_entry", "receive_bytes_num"),
    ("ns_entry", "transmit_bytes_num"),
    ("receive_packets_delta",),
    ("transmit_packets_delta",),
    ("receive_bytes_num_delta",),
    ("transmit_bytes_num_delta",),
)

# Floating-point measurements that are averaged or linearly estimated.
_FLOAT_FIELDS: tuple[_Path, ...] = (
    ("ps_entry", "cpu_num"),
    ("load_avg", "load_avg_1_minute"),
    ("load_avg", "load_avg_5_minute"),
    ("load_avg", "load_avg_15_minute"),
)


def _get(proc: Proc, path: _Path):
    obj = proc
    for name in path:
        obj = getattr(obj, name)
    return obj


def _set(proc: Proc, path: _Path, value) -> None:
    obj = proc
    for name in path[:-1]:
        obj = getattr(obj, name)
    setattr(obj, path[-1], value)


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _refresh_labels(proc: Proc) -> None:
    """Recompute the human-readable fields from their numeric counterparts."""
    proc.ps_entry.cpu = f"{proc.ps_entry.cpu_num:3.2f} %"
    proc.ps_entry.vmrss = humanize_bytes(proc.ps_entry.vmrss_num)
    proc.ps_entry.vmsize = humanize_bytes(proc.ps_entry.vmsize_num)
    proc.ds_entry.time_spent_on_reading = humanize_duration_ms(
        proc.ds_entry.time_spent_on_reading_ms
    )
    proc.ds_entry.time_spent_on_writing = humanize_duration_ms(
        proc.ds_entry.time_spent_on_writing_ms
    )
    proc.ns_entry.receive_bytes = humanize_bytes(proc.ns_entry.receive_bytes_num)
    proc.ns_entry.transmit_bytes = humanize_bytes(proc.ns_entry.transmit_bytes_num)
    proc.receive_bytes_delta = humanize_bytes(proc.receive_bytes_num_delta)
    proc.transmit_bytes_delta = humanize_bytes(proc.transmit_bytes_num_delta)


def combine(*procs: Proc) -> Proc:
    """Combine records into one holding the averages of their numeric fields.

    The unix nanosecond is reset to 0; the unix second and every field that
    cannot be averaged come from the last record.
    """
    if not procs:
        return Proc()
    if len(procs) == 1:
        return copy.deepcopy(procs[0])

    count = len(procs)
    combined = copy.deepcopy(procs[-1])
    combined.unix_nanosecond = 0

    for path in _INT_FIELDS:
        _set(combined, path, sum(_get(p, path) for p in procs) // count)
    for path in _FLOAT_FIELDS:
        _set(combined, path, sum(_get(p, path) for p in procs) / count)

    # Both entity counts are derived from the summed 15-minute load average.
    load15_total = sum(p.load_avg.load_avg_15_minute for p in procs)
    entities = _div(int(load15_total), count)
    combined.load_avg.runnable_kernel_scheduling_entities = entities
    combined.load_avg.current_kernel_scheduling_entities = entities

    _refresh_labels(combined)
    return combined


def interpolate(lower: Proc, upper: Proc) -> list[Proc]:
    """Return estimated records for every second strictly between two records.

    Fields that cannot be estimated are taken from *upper*; the unix
    nanosecond of each estimate is 0.
    """
    if upper.unix_second <= lower.unix_second:
        raise ValueError(
            f"lower unix second {lower.unix_second} >= "
            f"upper unix second {upper.unix_second}"
        )

    ranges = upper.unix_second - lower.unix_second
    if ranges == 1:
        return []

    int_steps = {
        path: _div(_get(upper, path) - _get(lower, path), ranges)
        for path in _INT_FIELDS
    }
    float_steps = {
        path: (_get(upper, path) - _get(lower, path)) / ranges
        for path in _FLOAT_FIELDS
    }
    # Both entity steps follow the change in runnable entities.
    entity_step = _div(
        upper.load_avg.runnable_kernel_scheduling_entities
        - lower.load_avg.runnable_kernel_scheduling_entities,
        ranges,
    )

    estimates = []
    for step in range(1, ranges):
        proc = copy.deepcopy(upper)
        proc.unix_nanosecond = 0
        proc.unix_second = lower.unix_second + step

        for path, delta in int_steps.items():
            _set(proc, path, _get(lower, path) + step * delta)
        for path, delta in float_steps.items():
            _set(proc, path, _get(lower, path) + step * delta)

        proc.load_avg.runnable_kernel_scheduling_entities = (
            lower.load_avg.runnable_kernel_scheduling_entities + step * entity_step
        )
        proc.load_avg.current_kernel_scheduling_entities = (
            lower.load_avg.current_kernel_scheduling_entities + step * entity_step
        )

        _refresh_labels(proc)
        estimates.append(proc)
    return estimates