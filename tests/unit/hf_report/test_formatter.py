"""Tests for report rendering."""

from __future__ import annotations

import pytest

from hf_report.formatter import format_entries
from hf_report.models import Entry


pytestmark = pytest.mark.unit_report


def test_format_entries_aligns_labels() -> None:
    entries = [Entry("OS", "Linux"), Entry("Kernel", "6.1")]
    assert format_entries(entries) == "OS     Linux\nKernel 6.1"


def test_format_entries_full_report() -> None:
    entries = [
        Entry("OS", "Fedora Linux 40"),
        Entry("Kernel", "6.8.5"),
        Entry("Uptime", "2h"),
        Entry("CPU", "Apple M2"),
        Entry("Memory", "900M / 4000M"),
    ]
    assert format_entries(entries).splitlines() == [
        "OS     Fedora Linux 40",
        "Kernel 6.8.5",
        "Uptime 2h",
        "CPU    Apple M2",
        "Memory 900M / 4000M",
    ]
    assert not format_entries(entries).endswith("\n")


def test_format_entries_empty() -> None:
    assert format_entries([]) == ""


def test_format_entries_single_entry_has_no_padding() -> None:
    assert format_entries([Entry("CPU", "x")]) == "CPU x"
