"""
Base platform abstract class for host fact extraction.

This module defines the interface every per-OS implementation must provide,
plus the uniform implementation used for targets without one.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from hf_common.errors import UnsupportedTargetError


class HostPlatform(ABC):
    """Abstract base class for the per-target fact extractors."""

    def __init__(self, target: str):
        """
        Initialize the platform.

        Args:
            target: Identifier of the operating system this platform serves
        """
        self.target = target

    @abstractmethod
    def os_name(self) -> str:
        """Return the distribution's display name."""

    @abstractmethod
    def kernel(self) -> str:
        """Return the kernel release string."""

    @abstractmethod
    def uptime(self) -> str:
        """Return the formatted system uptime."""

    @abstractmethod
    def cpu(self) -> str:
        """Return the CPU model name."""

    @abstractmethod
    def memory(self) -> str:
        """Return used and total memory as ``"<used>M / <total>M"``."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(target={self.target!r})"


class UnsupportedPlatform(HostPlatform):
    """Platform for targets without an implementation; every fact fails."""

    def _unsupported(self) -> UnsupportedTargetError:
        return UnsupportedTargetError(context={"target": self.target})

    def os_name(self) -> str:
        raise self._unsupported()

    def kernel(self) -> str:
        raise self._unsupported()

    def uptime(self) -> str:
        raise self._unsupported()

    def cpu(self) -> str:
        raise self._unsupported()

    def memory(self) -> str:
        raise self._unsupported()
