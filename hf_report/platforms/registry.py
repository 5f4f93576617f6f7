"""Registry mapping target identifiers to platform implementations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

import structlog

from hf_report.platforms.base import HostPlatform, UnsupportedPlatform
from hf_report.platforms.linux import LinuxPlatform
from hf_report.target import LINUX

logger = structlog.get_logger(__name__)


@dataclass
class PlatformSpec:
    """Metadata and factory for a supported target."""

    target: str
    description: str
    factory: Callable[[], HostPlatform]


BUILTIN_PLATFORMS: tuple[PlatformSpec, ...] = (
    PlatformSpec(target=LINUX, description="procfs and uname", factory=LinuxPlatform),
)


class PlatformRegistry:
    """Registry for per-target platforms; unknown targets get UnsupportedPlatform."""

    def __init__(self, specs: Optional[Iterable[PlatformSpec]] = None) -> None:
        self._platforms: Dict[str, PlatformSpec] = {}
        for spec in BUILTIN_PLATFORMS if specs is None else specs:
            self.register(spec)

    def register(self, spec: PlatformSpec) -> None:
        """Register a platform spec, replacing any previous one for its target."""
        if not isinstance(spec, PlatformSpec):
            raise TypeError(f"Unknown platform spec type: {type(spec)}")
        self._platforms[spec.target] = spec

    def create(self, target: str) -> HostPlatform:
        spec = self._platforms.get(target)
        if spec is None:
            logger.debug(
                "no platform for target", target=target, supported=sorted(self._platforms)
            )
            return UnsupportedPlatform(target)
        logger.debug("selected platform", target=target, description=spec.description)
        return spec.factory()


def get_platform(target: str) -> HostPlatform:
    """Return the platform implementation for ``target``."""
    return PlatformRegistry().create(target)
