"""Tests for ordered fact collection."""

from __future__ import annotations

from collections import Counter

import pytest

from hf_common.errors import CollectionError, MissingValueError, UnsupportedTargetError
from hf_report.collector import collect
from hf_report.models import Entry
from hf_report.platforms.base import HostPlatform


pytestmark = pytest.mark.unit_report


class CountingPlatform(HostPlatform):
    """Platform returning canned values and counting calls."""

    def __init__(self, failing: str | None = None):
        super().__init__("linux")
        self.calls: Counter[str] = Counter()
        self.order: list[str] = []
        self.failing = failing

    def _value(self, name: str, value: str) -> str:
        self.calls[name] += 1
        self.order.append(name)
        if name == self.failing:
            raise MissingValueError(f"no value for {name}", context={"key": name})
        return value

    def os_name(self) -> str:
        return self._value("os_name", "Debian GNU/Linux 12 (bookworm)")

    def kernel(self) -> str:
        return self._value("kernel", "6.1.0-18-amd64")

    def uptime(self) -> str:
        return self._value("uptime", "3h 12m")

    def cpu(self) -> str:
        return self._value("cpu", "AMD Ryzen 7 5800X")

    def memory(self) -> str:
        return self._value("memory", "5500M / 16000M")


def test_collect_returns_entries_in_display_order() -> None:
    platform = CountingPlatform()
    entries = collect("linux", platform=platform)

    assert entries == [
        Entry("OS", "Debian GNU/Linux 12 (bookworm)"),
        Entry("Kernel", "6.1.0-18-amd64"),
        Entry("Uptime", "3h 12m"),
        Entry("CPU", "AMD Ryzen 7 5800X"),
        Entry("Memory", "5500M / 16000M"),
    ]
    assert platform.order == ["os_name", "kernel", "uptime", "cpu", "memory"]


def test_collect_stops_at_first_failure() -> None:
    platform = CountingPlatform(failing="os_name")
    with pytest.raises(CollectionError) as excinfo:
        collect("linux", platform=platform)

    assert platform.calls["os_name"] == 1
    assert platform.calls["cpu"] == 0
    assert platform.calls["memory"] == 0
    assert str(excinfo.value) == "unable to get os: no value for os_name"
    assert excinfo.value.context["fact"] == "OS"
    assert isinstance(excinfo.value.__cause__, MissingValueError)


def test_collect_names_the_failing_fact() -> None:
    platform = CountingPlatform(failing="uptime")
    with pytest.raises(CollectionError, match="^unable to get uptime: ") as excinfo:
        collect("linux", platform=platform)
    assert excinfo.value.context == {"key": "uptime", "fact": "Uptime", "target": "linux"}
    assert platform.order == ["os_name", "kernel", "uptime"]


def test_collect_unsupported_target() -> None:
    with pytest.raises(CollectionError, match="unable to get os: target not supported") as excinfo:
        collect("plan9")
    assert isinstance(excinfo.value.__cause__, UnsupportedTargetError)
