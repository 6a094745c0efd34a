"""Run the ``df`` command and parse its output into rows."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass

from .formatting import humanize_bytes

DF_PATH = "/bin/df"

DF_FLAGS = (
    "--all",
    "--sync",
    "--block-size=1024",
    "--output=source,target,fstype,file,itotal,iavail,iused,ipcent,size,avail,used,pcent",
)

# 'Mounted on' is split into two words by whitespace.
HEADERS = (
    "Filesystem",
    "Mounted",
    "on",
    "Type",
    "File",
    "Inodes",
    "IFree",
    "IUsed",
    "IUse%",
    "1K-blocks",
    "Avail",
    "Used",
    "Use%",
)

_BLOCK_SIZE = 1024


class DfError(OSError):
    """The ``df`` command exited with a failure status."""

    def __init__(self, message: str, output: str = "") -> None:
        super().__init__(message)
        self.output = output


@dataclass
class Row:
    """One row of ``df`` output; block counts are in 1K blocks."""

    file_system: str = ""
    device: str = ""
    mounted_on: str = ""
    file_system_type: str = ""
    file: str = ""
    inodes: int = 0
    ifree: int = 0
    iused: int = 0
    iused_percent: str = ""
    total_blocks: int = 0
    total_blocks_bytes_n: int = 0
    total_blocks_parsed_bytes: str = ""
    available_blocks: int = 0
    available_blocks_bytes_n: int = 0
    available_blocks_parsed_bytes: str = ""
    used_blocks: int = 0
    used_blocks_bytes_n: int = 0
    used_blocks_parsed_bytes: str = ""
    used_blocks_percent: str = ""


def read(df_path: str, target: str = "") -> str:
    """Run ``df`` at *df_path* and return its combined, stripped output."""
    if not os.path.exists(df_path):
        raise FileNotFoundError(f"{df_path!r} does not exist")
    args = [df_path, *DF_FLAGS]
    if target:
        args.append(target.strip())
    completed = subprocess.run(
        args, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, check=False
    )
    output = completed.stdout.decode("utf-8", errors="replace").strip()
    if completed.returncode != 0:
        raise DfError(
            f"{df_path} exited with status {completed.returncode}: {output}", output
        )
    return output


def _base(path: str) -> str:
    stripped = path.rstrip("/")
    if not stripped:
        return "/" if path else "."
    return stripped.rsplit("/", 1)[-1]


def _count(value: str, fields: list[str]) -> int:
    value = value.strip()
    if value == "-":
        return 0
    try:
        return int(value)
    except ValueError as err:
        raise ValueError(f"parse error {err} (row {fields})") from err


def _percent(value: str) -> str:
    return value.replace("%", " %").strip()


def _parse_row(fields: list[str]) -> Row:
    (
        source,
        target,
        fstype,
        file,
        itotal,
        iavail,
        iused,
        ipcent,
        size,
        avail,
        used,
        pcent,
    ) = fields
    total = _count(size, fields)
    available = _count(avail, fields)
    used_blocks = _count(used, fields)
    file_system = source.strip()
    return Row(
        file_system=file_system,
        device=_base(file_system),
        mounted_on=target.strip(),
        file_system_type=fstype.strip(),
        file=file.strip(),
        inodes=_count(itotal, fields),
        ifree=_count(iavail, fields),
        iused=_count(iused, fields),
        iused_percent=_percent(ipcent),
        total_blocks=total,
        total_blocks_bytes_n=total * _BLOCK_SIZE,
        total_blocks_parsed_bytes=humanize_bytes(total * _BLOCK_SIZE),
        available_blocks=available,
        available_blocks_bytes_n=available * _BLOCK_SIZE,
        available_blocks_parsed_bytes=humanize_bytes(available * _BLOCK_SIZE),
        used_blocks=used_blocks,
        used_blocks_bytes_n=used_blocks * _BLOCK_SIZE,
        used_blocks_parsed_bytes=humanize_bytes(used_blocks * _BLOCK_SIZE),
        used_blocks_percent=_percent(pcent),
    )


def parse(text: str) -> list[Row]:
    """Parse ``df`` output; one row is kept per mount point."""
    header_found = False
    raw_rows: list[list[str]] = []
    for line in text.split("\n"):
        fields = line.split()
        if not fields:
            continue
        if fields[0] == "Filesystem":
            if tuple(fields) != HEADERS:
                raise ValueError(
                    f"unexpected 'df' command header order ({fields}, "
                    f"expected {list(HEADERS)}, output: {text!r})"
                )
            header_found = True
            continue
        if not header_found:
            continue
        if len(fields) != len(HEADERS) - 1:
            raise ValueError(
                f"unexpected row column number {fields} (expected {list(HEADERS)})"
            )
        raw_rows.append(fields)

    by_mount: dict[str, Row] = {}
    for fields in raw_rows:
        row = _parse_row(fields)
        by_mount[row.mounted_on] = row
    return list(by_mount.values())


def get(df_path: str, target: str = "") -> list[Row]:
    """Run ``df`` at *df_path* and return its parsed rows."""
    return parse(read(df_path, target))


def get_default(target: str = "") -> list[Row]:
    """Run the system ``df`` and return its parsed rows."""
    return get(DF_PATH, target)


def get_device(target: str) -> str:
    """Return the name of the device on which *target* is mounted."""
    rows = get_default(target)
    if len(rows) != 1:
        raise ValueError(f"expected 1 df row at {target!r} (got {rows})")
    return rows[0].device