"""Public API surface for hf_report."""

from hf_report.collector import collect
from hf_report.formatter import format_entries
from hf_report.models import FACTS, Entry, Fact
from hf_report.platforms import (
    HostPlatform,
    LinuxPlatform,
    PlatformRegistry,
    PlatformSpec,
    UnsupportedPlatform,
    get_platform,
)
from hf_report.settings import ReporterSettings
from hf_report.target import resolve_target

__all__ = [
    "Entry",
    "FACTS",
    "Fact",
    "HostPlatform",
    "LinuxPlatform",
    "PlatformRegistry",
    "PlatformSpec",
    "ReporterSettings",
    "UnsupportedPlatform",
    "collect",
    "format_entries",
    "get_platform",
    "resolve_target",
]
