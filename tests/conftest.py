import logging

import pytest
import structlog

from hf_common.logging import configure_logging


@pytest.fixture(autouse=True)
def _isolated_logging(monkeypatch):
    """Route structlog through stdlib and restore root handlers afterwards."""
    for name in ("HOSTFETCH_LOG_LEVEL", "HOSTFETCH_LOG_JSON", "HOSTFETCH_LOG_FILE", "HOSTFETCH_STRICT_EXIT"):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    configure_logging()
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()
