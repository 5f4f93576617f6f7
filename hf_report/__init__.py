"""hostfetch - a minimal host information reporter."""

__version__ = "0.1.0"
