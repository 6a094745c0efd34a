import pytest

from linspect.diskstats import DiskStatEntry
from linspect.interpolate import combine, interpolate
from linspect.netdev import NetStatEntry
from linspect.process import ProcessEntry
from linspect.record import LoadAvg, Proc


def _estimated(second, load1, load15, writes, sectors, **extra):
    return Proc(
        unix_nanosecond=0,
        unix_second=second,
        ps_entry=ProcessEntry(cpu="0.00 %", vmrss="0 B", vmsize="0 B"),
        load_avg=LoadAvg(load_avg_1_minute=load1, load_avg_15_minute=load15),
        ds_entry=DiskStatEntry(
            time_spent_on_reading="0 seconds",
            time_spent_on_writing="0 seconds",
            writes_completed=writes,
            sectors_written=sectors,
        ),
        ns_entry=NetStatEntry(receive_bytes="0 B", transmit_bytes="0 B"),
        receive_bytes_delta="0 B",
        transmit_bytes_delta=extra.pop("transmit_bytes_delta", "0 B"),
        **extra,
    )


def test_interpolate_missing_one():
    lower = Proc(
        unix_nanosecond=10,
        unix_second=1,
        load_avg=LoadAvg(load_avg_1_minute=10.0, load_avg_15_minute=20.0),
        ds_entry=DiskStatEntry(writes_completed=10000, sectors_written=20000),
        transmit_bytes_num_delta=244,
    )
    upper = Proc(
        unix_nanosecond=12,
        unix_second=3,
        load_avg=LoadAvg(load_avg_1_minute=40.0, load_avg_15_minute=130.0),
        ds_entry=DiskStatEntry(writes_completed=50000, sectors_written=100000),
        transmit_bytes_num_delta=74,
    )
    expected = _estimated(
        2,
        25.0,
        75.0,
        30000,
        60000,
        transmit_bytes_delta="159 B",
        transmit_bytes_num_delta=159,
    )
    assert interpolate(lower, upper) == [expected]


def test_interpolate_missing_a_lot():
    lower = Proc(
        unix_nanosecond=10,
        unix_second=1,
        load_avg=LoadAvg(load_avg_1_minute=5.0, load_avg_15_minute=15.0),
        ds_entry=DiskStatEntry(writes_completed=10000, sectors_written=20000),
        write_bytes_delta=50,
    )
    upper = Proc(
        unix_nanosecond=100,
        unix_second=10,
        load_avg=LoadAvg(load_avg_1_minute=50.0, load_avg_15_minute=150.0),
        ds_entry=DiskStatEntry(writes_completed=100000, sectors_written=200000),
        write_bytes_delta=5000,
    )
    expected = [
        _estimated(2, 10, 30, 20000, 40000, write_bytes_delta=600),
        _estimated(3, 15, 45, 30000, 60000, write_bytes_delta=1150),
        _estimated(4, 20.0, 60.0, 40000, 80000, write_bytes_delta=1700),
        _estimated(5, 25, 75, 50000, 100000, write_bytes_delta=2250),
        _estimated(6, 30.0, 90.0, 60000, 120000, write_bytes_delta=2800),
        _estimated(7, 35, 105, 70000, 140000, write_bytes_delta=3350),
        _estimated(8, 40.0, 120.0, 80000, 160000, write_bytes_delta=3900),
        _estimated(9, 45, 135, 90000, 180000, write_bytes_delta=4450),
    ]
    assert interpolate(lower, upper) == expected


def test_interpolate_adjacent_seconds_returns_nothing():
    assert interpolate(Proc(unix_second=5), Proc(unix_second=6)) == []


@pytest.mark.parametrize("upper_second", [5, 4])
def test_interpolate_rejects_non_increasing_seconds(upper_second):
    with pytest.raises(ValueError):
        interpolate(Proc(unix_second=5), Proc(unix_second=upper_second))


def test_interpolate_does_not_alias_upper():
    upper = Proc(unix_second=4, extra=b"x")
    rows = interpolate(Proc(unix_second=1), upper)
    rows[0].ds_entry.device = "changed"
    assert upper.ds_entry.device == ""
    assert [row.unix_second for row in rows] == [2, 3]
    assert all(row.extra == b"x" for row in rows)


def test_combine_empty_returns_default():
    assert combine() == Proc()


def test_combine_single_returns_equal_copy():
    proc = Proc(unix_nanosecond=7, unix_second=3, extra=b"10")
    result = combine(proc)
    assert result == proc
    result.unix_second = 99
    assert proc.unix_second == 3


def test_combine_averages_and_keeps_last():
    first = Proc(
        unix_nanosecond=1_000_000_001,
        unix_second=1,
        ps_entry=ProcessEntry(program="first", cpu_num=10.0, vmrss_num=100),
        load_avg=LoadAvg(load_avg_1_minute=1.0),
        ds_entry=DiskStatEntry(device="sda", writes_completed=10),
        ns_entry=NetStatEntry(interface="eth0", receive_bytes_num=1000),
        extra=b"10",
    )
    last = Proc(
        unix_nanosecond=1_000_000_002,
        unix_second=1,
        ps_entry=ProcessEntry(program="last", cpu_num=20.0, vmrss_num=300),
        load_avg=LoadAvg(load_avg_1_minute=3.0),
        ds_entry=DiskStatEntry(device="sdb", writes_completed=20),
        ns_entry=NetStatEntry(interface="eth1", receive_bytes_num=3000),
        extra=b"100",
    )
    combined = combine(first, last)
    assert combined.unix_nanosecond == 0
    assert combined.unix_second == 1
    assert combined.ps_entry.program == "last"
    assert combined.ps_entry.cpu_num == 15.0
    assert combined.ps_entry.cpu == "15.00 %"
    assert combined.ps_entry.vmrss_num == 200
    assert combined.ps_entry.vmrss == "200 B"
    assert combined.load_avg.load_avg_1_minute == 2.0
    assert combined.ds_entry.device == "sdb"
    assert combined.ds_entry.writes_completed == 15
    assert combined.ns_entry.interface == "eth1"
    assert combined.ns_entry.receive_bytes_num == 2000
    assert combined.ns_entry.receive_bytes == "2.0 kB"
    assert combined.extra == b"100"


def test_combine_average_not_above_last_for_growing_counters():
    rows = [
        Proc(
            unix_second=1,
            ns_entry=NetStatEntry(
                receive_bytes_num=1000 * i, transmit_bytes_num=500 * i
            ),
        )
        for i in range(1, 4)
    ]
    combined = combine(*rows)
    assert combined.ns_entry.receive_bytes_num <= rows[-1].ns_entry.receive_bytes_num
    assert combined.ns_entry.transmit_bytes_num <= rows[-1].ns_entry.transmit_bytes_num
    assert combined.ns_entry.receive_bytes_num == 2000


def test_combine_does_not_modify_inputs():
    first = Proc(unix_nanosecond=5, ps_entry=ProcessEntry(cpu_num=1.0))
    last = Proc(unix_nanosecond=6, ps_entry=ProcessEntry(cpu_num=3.0))
    combine(first, last)
    assert last.unix_nanosecond == 6
    assert last.ps_entry.cpu_num == 3.0
    assert last.ps_entry.cpu == ""