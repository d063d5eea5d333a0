"""Testing helpers."""

from __future__ import annotations

from typing import Any


class RecordingSink:
    """In-memory :class:`~httperrorfmt.responses.ResponseSink` that records every call."""

    __test__ = False

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []
        self.headers: dict[str, str] = {}
        self.status: int | None = None
        self.body = b""

    def set_header(self, name: str, value: str) -> None:
        self.calls.append(("set_header", (name, value)))
        self.headers[name] = value

    def set_status(self, status: int) -> None:
        self.calls.append(("set_status", status))
        self.status = status

    def write(self, data: bytes) -> None:
        self.calls.append(("write", data))
        self.body += data

    @property
    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")
