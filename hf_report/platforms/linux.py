"""Linux implementation of the host fact extractors."""

from __future__ import annotations

import os
import time
from pathlib import Path
from typing import Callable, Iterable, TypeVar

import psutil
import structlog

from hf_common.errors import ResourceOpenError, ScanError, SystemQueryError, wrap_error
from hf_report.parsers import (
    decode_cstring,
    format_memory,
    format_uptime,
    parse_cpuinfo,
    parse_meminfo,
    parse_os_release,
)
from hf_report.platforms.base import HostPlatform
from hf_report.target import LINUX

logger = structlog.get_logger(__name__)

OS_RELEASE_PATH = Path("/etc/os-release")
CPUINFO_PATH = Path("/proc/cpuinfo")
MEMINFO_PATH = Path("/proc/meminfo")

T = TypeVar("T")


class LinuxPlatform(HostPlatform):
    """Reads facts from /etc, /proc and the uname/boot-time queries."""

    def __init__(
        self,
        *,
        os_release_path: Path = OS_RELEASE_PATH,
        cpuinfo_path: Path = CPUINFO_PATH,
        meminfo_path: Path = MEMINFO_PATH,
        uname: Callable[[], os.uname_result] = os.uname,
        boot_time: Callable[[], float] = psutil.boot_time,
        clock: Callable[[], float] = time.time,
    ):
        super().__init__(LINUX)
        self.os_release_path = Path(os_release_path)
        self.cpuinfo_path = Path(cpuinfo_path)
        self.meminfo_path = Path(meminfo_path)
        self._uname = uname
        self._boot_time = boot_time
        self._clock = clock

    def _read(self, path: Path, parser: Callable[[Iterable[str]], T]) -> T:
        """Open ``path`` and feed its lines to ``parser``; the file is always closed.

        Undecodable bytes become U+FFFD so a stray byte never hides a key
        that appears on another line.
        """
        try:
            handle = path.open("r", encoding="utf-8", errors="replace")
        except OSError as exc:
            raise wrap_error(
                ResourceOpenError, f"failed to open {path}", context={"path": path}, cause=exc
            )
        with handle:
            logger.debug("reading host file", path=str(path))
            try:
                return parser(handle)
            except OSError as exc:
                raise wrap_error(
                    ScanError, f"failed to scan {path}", context={"path": path}, cause=exc
                )

    def os_name(self) -> str:
        return self._read(self.os_release_path, parse_os_release)

    def kernel(self) -> str:
        try:
            release = self._uname().release
        except OSError as exc:
            raise wrap_error(SystemQueryError, "failed syscall utsname", cause=exc)
        return decode_cstring(os.fsencode(release))

    def uptime(self) -> str:
        try:
            booted_at = self._boot_time()
        except (OSError, RuntimeError, psutil.Error) as exc:
            raise wrap_error(SystemQueryError, "failed syscall sysinfo", cause=exc)
        seconds = max(0, int(self._clock() - booted_at))
        logger.debug("queried uptime", seconds=seconds)
        return format_uptime(seconds)

    def cpu(self) -> str:
        return self._read(self.cpuinfo_path, parse_cpuinfo)

    def memory(self) -> str:
        return format_memory(self._read(self.meminfo_path, parse_meminfo))
