# linspect

A library for looking at a Linux host. It does these things:

- runs `df` and parses its output;
- parses the mount table (`/etc/mtab`);
- renders disk, network, process and socket entries as plain-text tables;
- keeps timestamped statistics records as a CSV time series. Duplicate
  seconds in a series can be merged, and missing seconds can be estimated.

Python 3.10 or newer is required. The package uses only the standard library.

## File systems

`linspect.df` runs `/bin/df` with a fixed set of output columns and parses the
result into `Row` records. Block counts are in 1K blocks. Byte totals and
human-readable sizes are filled in as well.

```python
from linspect import df

for row in df.get_default(""):
    print(row.mounted_on, row.file_system_type, row.total_blocks_parsed_bytes)

print(df.get_device("/boot"))
```

- `df.read(df_path, target)` returns the raw output of `df`.
- `df.get(df_path, target)` does the same and parses the output.
- `df.parse(text)` parses text you already have. It keeps one row per mount
  point and raises `ValueError` when the header or the column count is wrong.
- `df.get_device(target)` raises `ValueError` unless exactly one row comes back.
- A missing `df` binary raises `FileNotFoundError`.
- A failing `df` raises `df.DfError`. Its `output` attribute holds what `df`
  printed.

## Mount table

```python
from linspect import mtab

for entry in mtab.get_mtab("/etc/mtab"):
    print(entry.file_system, entry.mounted_on, entry.options, entry.dump, entry.pass_)
```

`mtab.parse_mtab(text)` parses text you have already read. A line with fewer
than six columns raises `ValueError`.

## Tables

The modules `diskstats`, `netdev`, `process` and `sockets` each provide three
things:

- an entry dataclass: `DiskStatEntry`, `NetStatEntry`, `ProcessEntry` or
  `SocketEntry`;
- a `convert_*` function, which returns the header and the sorted rows;
- a `string_*` function, which renders the shown columns with
  `linspect.table.render_table`.

```python
from linspect import diskstats

entries = [
    diskstats.DiskStatEntry(device="sda", writes_completed=10, sectors_written=80),
    diskstats.DiskStatEntry(device="sdb", writes_completed=5, sectors_written=200),
]
header, rows = diskstats.convert_ds(*entries)
print(diskstats.string_ds(header, rows, -1))
```

The rows are sorted as follows:

- disks by sectors written, then by writes completed, both descending;
- interfaces by bytes received, then by bytes transmitted, both descending;
- processes by resident memory, then CPU, then virtual size, all descending;
- sockets as text by program, state, protocol, PID and local IP.

A positive `top_limit` keeps only the first rows.

`render_table(header, rows)` draws a bordered table with centred header cells
and right-aligned body cells. It raises `ValueError` when a row's length does
not match the header's.

## Filters

`linspect.options.EntryOptions` describes an entry filter:

- program name, matched as a suffix of the command name, or a custom
  predicate;
- PID and top limit;
- TCP/TCP6 and local/remote port;
- disk device, network interface and extra path.

Contradictory combinations raise `ValueError` when the filter is created.
When neither `tcp` nor `tcp6` is set, both are enabled. `matches_program(name)`
applies the program filter.

## Time series

A `linspect.record.Proc` holds one sample:

- its unix nanosecond and unix second;
- a `ProcessEntry`, a `LoadAvg`, a `DiskStatEntry` and a `NetStatEntry`;
- the deltas against the previous sample;
- free-form `extra` bytes.

`Proc.to_row()` lays a sample out in `PROC_HEADER` order.

`linspect.csvfile.CSV` collects samples:

- `append(proc)` adds a sample. It fills in the disk and network deltas
  against the previous sample, using 512-byte sectors. It raises `ValueError`
  if the unix nanosecond does not increase.
- `save()` appends the header and every row to `file_path`.
- `read_csv(path)` loads a saved file back. The series' PID, disk device and
  network interface are taken from the last row.

```python
from linspect.csvfile import read_csv

series = read_csv("samples.csv")
filled = series.interpolate()
for proc in filled.rows:
    print(proc.unix_second, proc.load_avg.load_avg_1_minute)
```

`interpolate()` returns a copy of the series and leaves the original alone.

- Rows that share a unix second are averaged into one with
  `linspect.interpolate.combine`.
- Each missing second is estimated linearly from its neighbours with
  `linspect.interpolate.interpolate`.
- When it merges or fills anything, every unix nanosecond in the copy is set
  to 0.
- A series with fewer than two rows, or one already holding a row for every
  second, comes back unchanged.

## Helpers

- `linspect.formatting.humanize_bytes(n)` formats a byte count with base-1000
  units, for example `"1.0 kB"`.
- `linspect.formatting.humanize_duration_ms(ms)` formats a duration in
  milliseconds, for example `"3 minutes"`.
- `linspect.binary_search` provides:
  - `binary_search_int64`;
  - a closest-value `BinaryTree`;
  - `Boundaries`, which finds the nearest known seconds on each side of a gap.

## What it does not do

The package does not gather live statistics itself. Nothing in it reads
`/proc` for processes, disks, network devices, load averages or TCP sockets.
Entries and `Proc` samples have to be built by the caller. It also installs
no command-line tool.