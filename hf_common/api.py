"""Public API surface for hf_common."""

from hf_common.config import parse_bool_env, parse_int_env, parse_str_env
from hf_common.errors import (
    CollectionError,
    HFError,
    MissingValueError,
    ParseError,
    ResourceOpenError,
    ScanError,
    SystemQueryError,
    UnsupportedTargetError,
    error_to_payload,
    wrap_error,
)
from hf_common.logging import configure_logging

__all__ = [
    "CollectionError",
    "HFError",
    "MissingValueError",
    "ParseError",
    "ResourceOpenError",
    "ScanError",
    "SystemQueryError",
    "UnsupportedTargetError",
    "configure_logging",
    "error_to_payload",
    "parse_bool_env",
    "parse_int_env",
    "parse_str_env",
    "wrap_error",
]
