"""Error values and library exception types."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Protocol, runtime_checkable


@runtime_checkable
class ErrorValue(Protocol):
    """Read-only view of an application error that can be rendered."""

    @property
    def status(self) -> int: ...

    @property
    def message(self) -> str: ...

    @property
    def headers(self) -> Mapping[str, str]: ...


class ErrorFormatError(Exception):
    """Base error type."""


class HTTPError(ErrorFormatError):
    """Structured HTTP error carrying a status, a message and extra headers.

    The status is not validated; whatever the caller supplies is rendered.
    """

    def __init__(
        self,
        status: int,
        message: str = "",
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(status, message)
        self._status = status
        self._message = message
        self._headers: Mapping[str, str] = MappingProxyType(dict(headers or {}))

    @property
    def status(self) -> int:
        return self._status

    @property
    def message(self) -> str:
        return self._message

    @property
    def headers(self) -> Mapping[str, str]:
        return self._headers

    def __str__(self) -> str:
        return f"{self._status}: {self._message}"


class SerializationError(ErrorFormatError):
    """Raised by strict formatters when a payload cannot be encoded."""


class TemplateError(ErrorFormatError):
    """Raised when an HTML error template cannot be found or rendered."""


__all__ = [
    "ErrorFormatError",
    "ErrorValue",
    "HTTPError",
    "SerializationError",
    "TemplateError",
]
