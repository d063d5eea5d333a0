from __future__ import annotations

from httperrorfmt.http import REASON_PHRASES, reason_phrase, status_line


def test_reason_phrase_for_known_and_unknown_statuses() -> None:
    assert reason_phrase(404) == "Not Found"
    assert reason_phrase(500) == "Internal Server Error"
    assert reason_phrase(299) == ""
    assert reason_phrase(799) == ""
    assert reason_phrase(-1) == ""


def test_reason_phrase_table_is_pinned() -> None:
    assert reason_phrase(413) == "Request Entity Too Large"
    assert reason_phrase(414) == "Request URI Too Long"
    assert reason_phrase(418) == "I'm a teapot"
    assert reason_phrase(422) == "Unprocessable Entity"
    assert all(100 <= code <= 599 for code in REASON_PHRASES)


def test_status_line() -> None:
    assert status_line(404) == "404 Not Found"
    assert status_line(799) == "799 Unknown"
