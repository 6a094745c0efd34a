"""Filters that select which entries an inspection returns."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass
class EntryOptions:
    """Entry filter.

    A *program* name matches every command name that ends with it; a
    custom *program_match* predicate takes precedence over it. The disk
    device, network interface and extra path select what a system
    statistics record gathers and cannot be combined with the process or
    socket filters. When neither *tcp* nor *tcp6* is asked for, both are
    enabled.
    """

    program: str = ""
    program_match: Optional[Callable[[str], bool]] = field(
        default=None, repr=False, compare=False
    )
    pid: int = 0
    top_limit: int = 0

    # socket filters
    tcp: bool = False
    tcp6: bool = False
    local_port: int = 0
    remote_port: int = 0

    # system statistics record filters
    disk_device: str = ""
    network_interface: str = ""
    extra_path: str = ""

    def __post_init__(self) -> None:
        if self.program_match is None and self.program:
            suffix = self.program
            self.program_match = lambda command_name: command_name.endswith(suffix)

        filters_by_program = self.program_match is not None
        if self.disk_device or self.network_interface or self.extra_path:
            if (
                filters_by_program
                or self.top_limit > 0
                or self.local_port > 0
                or self.remote_port > 0
                or self.tcp
                or self.tcp6
            ):
                raise ValueError(
                    "not-valid Proc filter; disk device "
                    f"{self.disk_device!r} or network interface "
                    f"{self.network_interface!r} or extra path {self.extra_path!r}"
                )
        if filters_by_program and self.pid > 0:
            raise ValueError(
                f"can't filter both by program({self.program!r}) and PID({self.pid})"
            )
        if not self.tcp and not self.tcp6:
            self.tcp = True
            self.tcp6 = True
        if self.local_port > 0 and self.remote_port > 0:
            raise ValueError(
                f"can't query by both local({self.local_port}) "
                f"and remote({self.remote_port}) ports"
            )

    def matches_program(self, command_name: str) -> bool:
        """Return whether *command_name* passes the program filter."""
        if self.program_match is None:
            return True
        return bool(self.program_match(command_name))