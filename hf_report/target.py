"""Resolution of the running operating system identifier."""

from __future__ import annotations

import sys

LINUX = "linux"


def resolve_target(platform: str | None = None) -> str:
    """Return the identifier of the running operating system.

    ``sys.platform`` is used unless ``platform`` is given; every Linux
    flavour is reported as ``"linux"``.
    """
    raw = sys.platform if platform is None else platform
    if raw.startswith(LINUX):
        return LINUX
    return raw
