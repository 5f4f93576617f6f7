"""Plain-text rendering of collected entries."""

from __future__ import annotations

from typing import Sequence

from hf_report.models import Entry


def format_entries(entries: Sequence[Entry]) -> str:
    """Render entries as a label column padded to the longest label.

    Examples:
        >>> format_entries([Entry("OS", "Linux"), Entry("Kernel", "6.1")])
        'OS     Linux\\nKernel 6.1'
    """
    width = max((len(entry.label) for entry in entries), default=0)
    return "\n".join(f"{entry.label.ljust(width)} {entry.value}" for entry in entries)
