"""Shared error taxonomy for hostfetch."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar


def _normalize_context_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple)):
        return [_normalize_context_value(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-friendly copy of an error context mapping."""
    return {key: _normalize_context_value(val) for key, val in context.items()}


class HFError(Exception):
    """Base error type for typed failure handling."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.error_type, "message": str(self), "context": self.context}


class UnsupportedTargetError(HFError):
    """The running operating system has no strategy for a fact."""

    def __init__(
        self,
        message: str = "target not supported",
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context=context, cause=cause)


class ResourceOpenError(HFError):
    """A required file could not be opened."""


class ScanError(HFError):
    """An I/O error occurred while reading a file's contents."""


class MissingValueError(HFError):
    """A file was read successfully but the sought key was never present."""


class ParseError(HFError):
    """A numeric field could not be interpreted as an unsigned 64-bit integer."""


class SystemQueryError(HFError):
    """The underlying OS-level information query failed."""


class CollectionError(HFError):
    """A fact could not be collected; wraps the extractor failure."""


T = TypeVar("T", bound=HFError)


def wrap_error(
    error_cls: type[T],
    message: str,
    *,
    context: Mapping[str, Any] | None = None,
    cause: Exception | None = None,
) -> T:
    """Create a typed HFError with optional context and cause."""
    return error_cls(message, context=context, cause=cause)


def error_to_payload(error: HFError) -> dict[str, Any]:
    """Convert an HFError to a structured log payload."""
    return {
        "error_type": error.error_type,
        "error": str(error),
        "error_context": error.context,
    }
