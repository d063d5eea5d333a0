"""Response primitives and the sink protocol formatters write to."""

from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable

import msgspec

from .http import CONTENT_TYPE

Headers = tuple[tuple[str, str], ...]


class Response(msgspec.Struct, frozen=True):
    """Immutable rendered error response."""

    status: int
    headers: Headers = ()
    body: bytes = b""

    @property
    def content_type(self) -> str:
        for name, value in self.headers:
            if name.lower() == "content-type":
                return value
        return ""


@runtime_checkable
class ResponseSink(Protocol):
    """Transport-side response writer."""

    def set_header(self, name: str, value: str) -> None: ...

    def set_status(self, status: int) -> None: ...

    def write(self, data: bytes) -> None: ...


def error_response(
    status: int,
    content_type: str,
    body: bytes,
    headers: Mapping[str, str] | None = None,
) -> Response:
    """Build a response whose first header is ``Content-Type``.

    Entries of ``headers`` follow in mapping order; a ``Content-Type`` among
    them is ignored so the negotiated type is the one sent.
    """

    extra = tuple(
        (name, value)
        for name, value in (headers or {}).items()
        if name.lower() != "content-type"
    )
    return Response(status=status, headers=((CONTENT_TYPE, content_type),) + extra, body=body)


def write_response(sink: ResponseSink, response: Response) -> None:
    """Write headers, then the status, then the body onto ``sink``."""

    for name, value in response.headers:
        sink.set_header(name, value)
    sink.set_status(response.status)
    sink.write(response.body)


__all__ = [
    "Headers",
    "Response",
    "ResponseSink",
    "error_response",
    "write_response",
]
