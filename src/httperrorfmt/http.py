"""HTTP content types and reason phrases."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

CONTENT_TYPE = "Content-Type"

JSON = "application/json"
HTML = "text/html"
XML = "application/xml"
TEXT = "text/plain"

HTML_UTF8 = "text/html; charset=utf-8"

# Fixed table so rendered payloads do not change with the interpreter's
# ``http.HTTPStatus`` wording.
REASON_PHRASES: Mapping[int, str] = MappingProxyType(
    {
        100: "Continue",
        101: "Switching Protocols",
        102: "Processing",
        103: "Early Hints",
        200: "OK",
        201: "Created",
        202: "Accepted",
        203: "Non-Authoritative Information",
        204: "No Content",
        205: "Reset Content",
        206: "Partial Content",
        207: "Multi-Status",
        208: "Already Reported",
        226: "IM Used",
        300: "Multiple Choices",
        301: "Moved Permanently",
        302: "Found",
        303: "See Other",
        304: "Not Modified",
        305: "Use Proxy",
        307: "Temporary Redirect",
        308: "Permanent Redirect",
        400: "Bad Request",
        401: "Unauthorized",
        402: "Payment Required",
        403: "Forbidden",
        404: "Not Found",
        405: "Method Not Allowed",
        406: "Not Acceptable",
        407: "Proxy Authentication Required",
        408: "Request Timeout",
        409: "Conflict",
        410: "Gone",
        411: "Length Required",
        412: "Precondition Failed",
        413: "Request Entity Too Large",
        414: "Request URI Too Long",
        415: "Unsupported Media Type",
        416: "Requested Range Not Satisfiable",
        417: "Expectation Failed",
        418: "I'm a teapot",
        421: "Misdirected Request",
        422: "Unprocessable Entity",
        423: "Locked",
        424: "Failed Dependency",
        425: "Too Early",
        426: "Upgrade Required",
        428: "Precondition Required",
        429: "Too Many Requests",
        431: "Request Header Fields Too Large",
        451: "Unavailable For Legal Reasons",
        500: "Internal Server Error",
        501: "Not Implemented",
        502: "Bad Gateway",
        503: "Service Unavailable",
        504: "Gateway Timeout",
        505: "HTTP Version Not Supported",
        506: "Variant Also Negotiates",
        507: "Insufficient Storage",
        508: "Loop Detected",
        510: "Not Extended",
        511: "Network Authentication Required",
    }
)


def reason_phrase(status: int) -> str:
    """Return the standard reason phrase for ``status``.

    Unknown and out-of-range codes yield an empty string so callers can
    drop the phrase entirely.
    """

    return REASON_PHRASES.get(int(status), "")


def status_line(status: int) -> str:
    """Return ``"<status> <phrase>"``, using ``Unknown`` when no phrase exists."""

    return f"{status} {reason_phrase(status) or 'Unknown'}"


__all__ = [
    "CONTENT_TYPE",
    "HTML",
    "HTML_UTF8",
    "JSON",
    "REASON_PHRASES",
    "TEXT",
    "XML",
    "reason_phrase",
    "status_line",
]
