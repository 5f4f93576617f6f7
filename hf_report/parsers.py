"""Parsers for the Linux host information sources.

Every parser consumes an iterable of raw lines (an open text file works) and
either returns the extracted value or raises a typed ``HFError``. I/O errors
raised while iterating propagate unchanged so the caller can report them as
scan failures.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Mapping

from hf_common.errors import MissingValueError, ParseError

PRETTY_NAME = "PRETTY_NAME"
MODEL_NAME = "model name"

UINT64_MAX = 2**64 - 1
_DIGITS = re.compile(r"[0-9]+")

KIB_PER_MIB = 1024
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600


def _lines(stream: Iterable[str]) -> Iterator[str]:
    for raw in stream:
        line = raw[:-1] if raw.endswith("\n") else raw
        yield line[:-1] if line.endswith("\r") else line


def parse_os_release(stream: Iterable[str], key: str = PRETTY_NAME) -> str:
    """Return the value of ``key`` from os-release formatted lines.

    Blank lines and ``#`` comments are skipped, the value loses surrounding
    double quotes and the first match wins.
    """
    value = ""
    for line in _lines(stream):
        if not line or line.startswith("#"):
            continue
        name, sep, raw_value = line.partition("=")
        if not sep:
            continue
        if name == key:
            value = raw_value.strip('"')
            break
    if not value:
        raise MissingValueError(f'no value for "{key}"', context={"key": key})
    return value


def parse_cpuinfo(stream: Iterable[str], key: str = MODEL_NAME) -> str:
    """Return the first ``key`` value from /proc/cpuinfo formatted lines."""
    value = ""
    for line in _lines(stream):
        if not line:
            continue
        name, sep, raw_value = line.partition(":")
        if not sep:
            continue
        if name.strip() == key:
            value = raw_value.strip()
            break
    if not value:
        raise MissingValueError(f'no value for "{key}"', context={"key": key})
    return value


def parse_uint64(field: str) -> int:
    """Parse a base-10 unsigned 64-bit integer, rejecting signs and separators."""
    if _DIGITS.fullmatch(field) is None or int(field) > UINT64_MAX:
        raise ParseError(f"cannot convert {field} uint64", context={"field": field})
    return int(field)


def parse_meminfo(stream: Iterable[str]) -> dict[str, int]:
    """Map /proc/meminfo keys to their kilobyte values.

    Lines with two or fewer fields are ignored; a value that is not an
    unsigned integer aborts the whole parse.
    """
    meminfo: dict[str, int] = {}
    for line in _lines(stream):
        if not line:
            continue
        fields = line.split()
        if len(fields) <= 2:
            continue
        key = fields[0].removesuffix(":")
        meminfo[key] = parse_uint64(fields[1])
    return meminfo


def format_memory(meminfo: Mapping[str, int]) -> str:
    """Render used/total memory in megabytes, missing keys counting as zero.

    Used memory is not clamped and goes negative when free, buffers and
    cached exceed the total.
    """
    total = meminfo.get("MemTotal", 0) // KIB_PER_MIB
    free = meminfo.get("MemFree", 0) // KIB_PER_MIB
    buffers = meminfo.get("Buffers", 0) // KIB_PER_MIB
    cached = meminfo.get("Cached", 0) // KIB_PER_MIB
    used = total - (free + buffers + cached)
    return f"{used}M / {total}M"


def format_uptime(seconds: int) -> str:
    """Format an uptime in whole seconds.

    Examples:
        >>> format_uptime(5400)
        '1h 30m'
        >>> format_uptime(3600)
        '1h'
        >>> format_uptime(45)
        '0m'
    """
    seconds = int(seconds)
    hours = seconds // SECONDS_PER_HOUR
    minutes = (seconds // SECONDS_PER_MINUTE) % 60
    if hours > 0 and minutes > 0:
        return f"{hours}h {minutes}m"
    if hours > 0:
        return f"{hours}h"
    return f"{minutes}m"


def decode_cstring(buffer: bytes) -> str:
    """Decode a NUL-terminated byte buffer, dropping everything from the first NUL."""
    raw, _, _ = bytes(buffer).partition(b"\x00")
    return raw.decode("utf-8", errors="replace")
