"""Shared helpers for hostfetch."""

from hf_common.api import HFError, configure_logging, error_to_payload

__all__ = ["configure_logging", "HFError", "error_to_payload"]
