"""JSON and XML encoding of error payloads."""

from __future__ import annotations

import re
from typing import Any, Protocol, cast
from xml.etree import ElementTree as ET

import msgspec

from .exceptions import SerializationError


class _JSONModule(Protocol):
    def encode(self, obj: Any) -> bytes: ...

    def decode(self, data: bytes) -> Any: ...

    def format(self, buf: bytes, *, indent: int = 2) -> bytes: ...


_json = cast(_JSONModule, getattr(msgspec, "json"))

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'
XML_INDENT = "    "
JSON_INDENT = 2

# Characters outside the XML 1.0 Char production.
_INVALID_XML_CHARS = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")
# Lone surrogates are valid in ``str`` but cannot be encoded as UTF-8.
_SURROGATES = re.compile("[\ud800-\udfff]")


class ErrorBody(msgspec.Struct, omit_defaults=True):
    """JSON error document; ``code`` is dropped when empty."""

    error: str
    status: int
    code: str = ""


def scrub_text(value: Any) -> Any:
    """Replace lone surrogates in ``value`` with U+FFFD; non-strings pass through."""

    if isinstance(value, str):
        return _SURROGATES.sub("\ufffd", value)
    return value


def text_encode(value: str) -> bytes:
    """Encode ``value`` as UTF-8, replacing characters UTF-8 cannot carry."""

    return scrub_text(value).encode("utf-8")


def json_encode(value: Any, *, pretty: bool = False) -> bytes:
    """Serialize ``value`` to JSON bytes using msgspec.

    ``pretty`` indents nested values by two spaces per level.
    """

    try:
        data = _json.encode(value)
        if pretty:
            data = _json.format(data, indent=JSON_INDENT)
    except (TypeError, ValueError, msgspec.MsgspecError) as exc:
        raise SerializationError(f"cannot encode {type(value).__name__} as JSON") from exc
    return data


def json_decode(data: bytes) -> Any:
    """Deserialize JSON ``data`` into native Python values."""

    return _json.decode(data)


def _xml_text(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise TypeError(f"cannot serialize {value!r} (type {type(value).__name__})")
    return _INVALID_XML_CHARS.sub("\ufffd", str(value))


def xml_encode(root: str, fields: list[tuple[str, Any]]) -> bytes:
    """Serialize ``fields`` as children of a ``root`` element.

    The document starts with the UTF-8 XML declaration and children are
    indented by four spaces. Characters XML cannot carry are replaced with
    U+FFFD.
    """

    try:
        element = ET.Element(root)
        for name, value in fields:
            ET.SubElement(element, name).text = _xml_text(value)
        ET.indent(element, space=XML_INDENT)
        document = ET.tostring(element, encoding="unicode", short_empty_elements=False)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"cannot encode <{root}> as XML") from exc
    return (XML_DECLARATION + document).encode("utf-8")


__all__ = [
    "ErrorBody",
    "JSON_INDENT",
    "XML_DECLARATION",
    "XML_INDENT",
    "json_decode",
    "json_encode",
    "scrub_text",
    "text_encode",
    "xml_encode",
]
