from linspect.diskstats import DiskStatEntry
from linspect.netdev import NetStatEntry
from linspect.process import ProcessEntry
from linspect.record import (
    PROC_HEADER,
    PROC_HEADER_INDEX,
    LoadAvg,
    Proc,
    nano_to_unix,
)


def test_row_starts_with_timestamps_and_ends_with_extra():
    proc = Proc(unix_nanosecond=3_000_000_001, unix_second=3, extra=b"payload")
    row = proc.to_row()
    assert PROC_HEADER[0] == "UNIX-NANOSECOND"
    assert PROC_HEADER[1] == "UNIX-SECOND"
    assert PROC_HEADER[-1] == "EXTRA"
    assert row[0] == "3000000001"
    assert row[1] == "3"
    assert row[-1] == "payload"


def test_header_index_matches_positions():
    assert len(PROC_HEADER_INDEX) == len(PROC_HEADER)
    for name, idx in PROC_HEADER_INDEX.items():
        assert PROC_HEADER[idx] == name


def test_row_column_positions():
    proc = Proc(
        ps_entry=ProcessEntry(program="etcd"),
        load_avg=LoadAvg(load_avg_1_minute=10.0),
        ds_entry=DiskStatEntry(device="sda"),
        ns_entry=NetStatEntry(interface="eth0"),
        extra=b"x",
    )
    row = proc.to_row()
    assert PROC_HEADER_INDEX["PROGRAM"] == 2
    assert PROC_HEADER_INDEX["LOAD-AVERAGE-1-MINUTE"] == 16
    assert PROC_HEADER_INDEX["DEVICE"] == 19
    assert PROC_HEADER_INDEX["INTERFACE"] == 28
    assert PROC_HEADER_INDEX["EXTRA"] == 49
    assert row[2] == "etcd"
    assert row[16] == "10.00"
    assert row[19] == "sda"
    assert row[28] == "eth0"
    assert row[49] == "x"


def test_nano_to_unix_truncates():
    assert nano_to_unix(0) == 0
    assert nano_to_unix(999_999_999) == 0
    assert nano_to_unix(1_000_000_000) == 1
    assert nano_to_unix(-1_500_000_000) == -1


def test_default_row_has_header_length():
    row = Proc().to_row()
    assert len(row) == len(PROC_HEADER)
    assert row[PROC_HEADER_INDEX["UNIX-NANOSECOND"]] == "0"
    assert row[PROC_HEADER_INDEX["EXTRA"]] == ""


def test_row_carries_fields():
    proc = Proc(
        unix_nanosecond=1_500_000_000_123,
        unix_second=nano_to_unix(1_500_000_000_123),
        ps_entry=ProcessEntry(
            program="etcd",
            state="S (sleeping)",
            pid=42,
            ppid=1,
            cpu="0.00 %",
            voluntary_ctxt_switches=7,
            nonvoluntary_ctxt_switches=8,
            threads=9,
        ),
        load_avg=LoadAvg(load_avg_1_minute=10.0, load_avg_15_minute=20.0),
        ds_entry=DiskStatEntry(device="sda", writes_completed=10000, sectors_written=20000),
        ns_entry=NetStatEntry(interface="eth0", receive_bytes="0 B", receive_bytes_num=5),
        transmit_bytes_delta="159 B",
        transmit_bytes_num_delta=159,
        write_bytes_delta=50,
        extra=b"10",
    )
    row = proc.to_row()
    index = PROC_HEADER_INDEX
    assert len(row) == len(PROC_HEADER)
    assert row[index["UNIX-NANOSECOND"]] == "1500000000123"
    assert row[index["UNIX-SECOND"]] == str(proc.unix_second)
    assert row[index["PROGRAM"]] == "etcd"
    assert row[index["STATE"]] == "S (sleeping)"
    assert row[index["PID"]] == "42"
    assert row[index["CPU"]] == "0.00 %"
    assert row[index["THREADS"]] == "9"
    assert row[index["VOLUNTARY-CTXT-SWITCHES"]] == "7"
    assert row[index["NON-VOLUNTARY-CTXT-SWITCHES"]] == "8"
    assert row[index["DEVICE"]] == "sda"
    assert row[index["WRITES-COMPLETED"]] == "10000"
    assert row[index["SECTORS-WRITTEN"]] == "20000"
    assert row[index["INTERFACE"]] == "eth0"
    assert row[index["RECEIVE-BYTES-NUM"]] == "5"
    assert row[index["TRANSMIT-BYTES-DELTA"]] == "159 B"
    assert row[index["TRANSMIT-BYTES-NUM-DELTA"]] == "159"
    assert row[index["WRITE-BYTES-DELTA"]] == "50"
    assert row[index["EXTRA"]] == "10"


def test_load_averages_use_two_decimals():
    proc = Proc(load_avg=LoadAvg(load_avg_1_minute=10.0, load_avg_5_minute=0.0))
    row = proc.to_row()
    assert row[PROC_HEADER_INDEX["LOAD-AVERAGE-1-MINUTE"]] == "10.00"
    assert row[PROC_HEADER_INDEX["LOAD-AVERAGE-5-MINUTE"]] == "0.00"


def test_row_embeds_entry_rows():
    ps = ProcessEntry(program="a", pid=3, cpu_num=1.5)
    ds = DiskStatEntry(device="sdb", reads_completed=4)
    ns = NetStatEntry(interface="lo", transmit_packets=6)
    row = Proc(ps_entry=ps, ds_entry=ds, ns_entry=ns).to_row()
    ps_start = PROC_HEADER_INDEX["PROGRAM"]
    ds_start = PROC_HEADER_INDEX["DEVICE"]
    ns_start = PROC_HEADER_INDEX["INTERFACE"]
    assert row[ps_start : ps_start + len(ps.to_row())] == ps.to_row()
    assert row[ds_start : ds_start + len(ds.to_row())] == ds.to_row()
    assert row[ns_start : ns_start + len(ns.to_row())] == ns.to_row()


def test_default_records_are_independent():
    first = Proc()
    second = Proc()
    first.ps_entry.pid = 5
    assert second.ps_entry.pid == 0