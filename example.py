"""Minimal WSGI application that renders every request as a 404.

Run ``python example.py`` and try::

    curl -i localhost:8000/missing
    curl -i -H 'Accept: application/json' localhost:8000/missing
    curl -i -H 'Accept: text/html' localhost:8000/missing

The response body follows the ``Accept`` header of each request.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable
from wsgiref.simple_server import make_server

from httperrorfmt import HTTPError, content_negotiating_formatter
from httperrorfmt.http import status_line

negotiator = content_negotiating_formatter()


class WSGISink:
    """Collect headers, status and body for ``start_response``."""

    def __init__(self) -> None:
        self.headers: list[tuple[str, str]] = []
        self.status = 500
        self.chunks: list[bytes] = []

    def set_header(self, name: str, value: str) -> None:
        self.headers.append((name, value))

    def set_status(self, status: int) -> None:
        self.status = status

    def write(self, data: bytes) -> None:
        self.chunks.append(data)


def app(environ: dict[str, Any], start_response: Callable[..., Any]) -> Iterable[bytes]:
    error = HTTPError(404, f"{environ.get('PATH_INFO', '/')} was not found")
    sink = WSGISink()
    negotiator.format(sink, error, environ.get("HTTP_ACCEPT", ""))
    start_response(status_line(sink.status), sink.headers)
    return sink.chunks


if __name__ == "__main__":
    with make_server("", 8000, app) as server:
        server.serve_forever()
