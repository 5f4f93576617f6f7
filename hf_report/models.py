"""Dataclasses describing collected host facts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    label: str
    value: str


@dataclass(frozen=True)
class Fact:
    """A reported host attribute and the platform operation producing it."""

    label: str
    operation: str
    description: str


# Display order of the report.
FACTS: tuple[Fact, ...] = (
    Fact("OS", "os_name", "os"),
    Fact("Kernel", "kernel", "kernel"),
    Fact("Uptime", "uptime", "uptime"),
    Fact("CPU", "cpu", "cpu"),
    Fact("Memory", "memory", "memory"),
)
