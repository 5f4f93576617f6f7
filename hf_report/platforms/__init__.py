"""Per-target implementations of the host fact extractors."""

from hf_report.platforms.base import HostPlatform, UnsupportedPlatform
from hf_report.platforms.linux import LinuxPlatform
from hf_report.platforms.registry import PlatformRegistry, PlatformSpec, get_platform

__all__ = [
    "HostPlatform",
    "LinuxPlatform",
    "PlatformRegistry",
    "PlatformSpec",
    "UnsupportedPlatform",
    "get_platform",
]
