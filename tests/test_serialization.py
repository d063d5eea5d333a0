from __future__ import annotations

import lxml.etree as LET
import pytest

from httperrorfmt.exceptions import SerializationError
from httperrorfmt.serialization import (
    XML_DECLARATION,
    ErrorBody,
    json_decode,
    json_encode,
    xml_encode,
)


def test_json_encode_compact_preserves_field_order() -> None:
    body = ErrorBody(error="Resource not found", status=404, code="Not Found")
    assert json_encode(body) == b'{"error":"Resource not found","status":404,"code":"Not Found"}'


def test_json_encode_omits_empty_code() -> None:
    assert json_encode(ErrorBody(error="odd", status=799)) == b'{"error":"odd","status":799}'


def test_json_encode_pretty_uses_two_space_indent() -> None:
    data = json_encode(ErrorBody(error="x", status=400, code="Bad Request"), pretty=True)
    lines = data.decode().splitlines()
    assert lines[0] == "{"
    assert lines[1].startswith('  "error"')
    assert lines[-1] == "}"
    assert json_decode(data) == {"error": "x", "status": 400, "code": "Bad Request"}


def test_json_encode_wraps_failures() -> None:
    with pytest.raises(SerializationError) as excinfo:
        json_encode({"error": object()})
    assert excinfo.value.__cause__ is not None


def test_xml_encode_layout() -> None:
    data = xml_encode("error", [("message", "gone"), ("status", 410), ("code", "Gone")])
    assert data.decode() == (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        "<error>\n"
        "    <message>gone</message>\n"
        "    <status>410</status>\n"
        "    <code>Gone</code>\n"
        "</error>"
    )


def test_xml_encode_escapes_and_keeps_empty_elements() -> None:
    data = xml_encode("error", [("message", "a < b & c"), ("code", "")])
    text = data.decode()
    assert "<message>a &lt; b &amp; c</message>" in text
    assert "<code></code>" in text
    root = LET.fromstring(data)
    assert root.findtext("message") == "a < b & c"


def test_xml_encode_replaces_invalid_characters() -> None:
    data = xml_encode("error", [("message", "bell\x07")])
    root = LET.fromstring(data)
    assert root.findtext("message") == "bell\ufffd"
    assert data.startswith(XML_DECLARATION.encode())


def test_xml_encode_rejects_unsupported_values() -> None:
    with pytest.raises(SerializationError):
        xml_encode("error", [("message", object())])
