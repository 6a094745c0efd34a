"""Read the mounted file system table."""

from __future__ import annotations

import os
from dataclasses import dataclass

MTAB_PATH = "/etc/mtab"

_COLUMNS = 6


@dataclass
class Mtab:
    """One entry of the mount table."""

    file_system: str = ""
    mounted_on: str = ""
    file_system_type: str = ""
    options: str = ""
    # how often the dump program backs the file system up; 0 means never
    dump: int = 0
    # fsck order at boot: 1 for root, 2 after root, 0 to skip
    pass_: int = 0


def parse_mtab(text: str) -> list[Mtab]:
    """Parse mount table text into entries."""
    entries = []
    for line in text.splitlines():
        if not line:
            continue
        fields = line.split()
        if len(fields) < _COLUMNS:
            raise ValueError(f"not enough columns at {fields}")
        file_system, mounted_on, fs_type, options, dump, fsck_pass = fields[:_COLUMNS]
        entries.append(
            Mtab(
                file_system=file_system,
                mounted_on=mounted_on,
                file_system_type=fs_type,
                options=options,
                dump=int(dump),
                pass_=int(fsck_pass),
            )
        )
    return entries


def get_mtab(path: str = MTAB_PATH) -> list[Mtab]:
    """Read and parse the mount table at *path*."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"{path!r} does not exist")
    with open(path, encoding="utf-8", errors="replace") as handle:
        return parse_mtab(handle.read())