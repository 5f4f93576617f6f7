"""Host fact collection.

Invokes the platform extractors in display order and stops at the first
failure, which is reported as a ``CollectionError`` naming the fact.
"""

from __future__ import annotations

import structlog

from hf_common.errors import CollectionError, HFError, wrap_error
from hf_report.models import FACTS, Entry
from hf_report.platforms import HostPlatform, get_platform

logger = structlog.get_logger(__name__)


def collect(target: str, platform: HostPlatform | None = None) -> list[Entry]:
    """Collect every fact for ``target`` or raise on the first failure."""
    host = platform if platform is not None else get_platform(target)
    entries: list[Entry] = []
    for fact in FACTS:
        try:
            value = getattr(host, fact.operation)()
        except HFError as exc:
            raise wrap_error(
                CollectionError,
                f"unable to get {fact.description}: {exc}",
                context={**exc.context, "fact": fact.label, "target": target},
                cause=exc,
            )
        logger.debug("collected fact", fact=fact.label, value=value)
        entries.append(Entry(fact.label, value))
    return entries
