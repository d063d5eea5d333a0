"""Formatters turning an :class:`~httperrorfmt.exceptions.ErrorValue` into a response.

Each formatter exposes ``render`` (build a :class:`Response`) and ``format``
(render, then write onto a :class:`ResponseSink`). Formatters are frozen
structs holding configuration only, so one instance can serve any number of
requests.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol, runtime_checkable

import msgspec

from . import http
from .exceptions import ErrorFormatError, ErrorValue, SerializationError, TemplateError
from .http import reason_phrase
from .responses import Response, ResponseSink, error_response, write_response
from .serialization import ErrorBody, json_encode, scrub_text, text_encode, xml_encode
from .templates import DEFAULT_TEMPLATE_NAME, TemplateSet, default_templates

logger = logging.getLogger(__name__)


@runtime_checkable
class Formatter(Protocol):
    """Renders an error value for one content type."""

    def render(self, error: ErrorValue, accept: str = "") -> Response: ...

    def format(self, sink: ResponseSink, error: ErrorValue, accept: str = "") -> Response: ...


def format_error(
    formatter: Formatter,
    sink: ResponseSink,
    error: ErrorValue,
    accept: str = "",
) -> Response:
    """Render ``error`` with ``formatter`` and write the result to ``sink``."""

    response = formatter.render(error, accept)
    write_response(sink, response)
    return response


def _body_or_empty(
    build: Callable[[], bytes],
    *,
    strict: bool,
    kind: str,
    error: ErrorValue,
) -> bytes:
    try:
        return build()
    except ErrorFormatError:
        if strict:
            raise
        logger.debug("Discarding %s body for status %s", kind, error.status, exc_info=True)
        return b""


class JSONFormatter(msgspec.Struct, frozen=True):
    """``application/json`` error documents."""

    pretty_print: bool = False
    strict: bool = False

    def render(self, error: ErrorValue, accept: str = "") -> Response:
        body = _body_or_empty(
            lambda: json_encode(_json_body(error), pretty=self.pretty_print),
            strict=self.strict,
            kind="JSON",
            error=error,
        )
        return error_response(error.status, http.JSON, body, error.headers)

    def format(self, sink: ResponseSink, error: ErrorValue, accept: str = "") -> Response:
        return format_error(self, sink, error, accept)


def _json_body(error: ErrorValue) -> ErrorBody:
    return ErrorBody(error=scrub_text(error.message), status=error.status, code=reason_phrase(error.status))


class HTMLFormatter(msgspec.Struct, frozen=True):
    """``text/html`` error pages.

    With ``templates`` set, the page is produced from the template named
    ``template_name`` and every field is escaped. Without templates a bare
    ``<h1>``/``<p>`` fragment is written and the message is inserted as-is,
    so only trusted messages should reach that path.
    """

    templates: TemplateSet | None = None
    template_name: str = DEFAULT_TEMPLATE_NAME
    strict: bool = False

    def render(self, error: ErrorValue, accept: str = "") -> Response:
        templates = self.templates
        reason = reason_phrase(error.status)
        if templates is None:
            body = text_encode(f"<h1>{error.status} {reason}</h1><p>{error.message}</p>")
        else:
            context = {"Status": error.status, "Error": error.message, "Code": reason}
            body = _body_or_empty(
                lambda: text_encode(templates.render(self.template_name, context)),
                strict=self.strict,
                kind="HTML",
                error=error,
            )
        return error_response(error.status, http.HTML_UTF8, body, error.headers)

    def format(self, sink: ResponseSink, error: ErrorValue, accept: str = "") -> Response:
        return format_error(self, sink, error, accept)


def html_formatter(
    templates: TemplateSet | None = None,
    template_name: str = DEFAULT_TEMPLATE_NAME,
    *,
    strict: bool = False,
) -> HTMLFormatter:
    """Return an :class:`HTMLFormatter` backed by the default error page."""

    if templates is None:
        templates = default_templates()
    if template_name not in templates:
        message = f"template {template_name!r} is not defined"
        if strict:
            raise TemplateError(message)
        logger.debug("%s; pages for this formatter will be empty", message)
    return HTMLFormatter(templates=templates, template_name=template_name, strict=strict)


class XMLFormatter(msgspec.Struct, frozen=True):
    """``application/xml`` error documents rooted at ``<error>``."""

    strict: bool = False

    def render(self, error: ErrorValue, accept: str = "") -> Response:
        fields = [
            ("message", error.message),
            ("status", error.status),
            ("code", reason_phrase(error.status)),
        ]
        body = _body_or_empty(
            lambda: xml_encode("error", fields),
            strict=self.strict,
            kind="XML",
            error=error,
        )
        return error_response(error.status, http.XML, body, error.headers)

    def format(self, sink: ResponseSink, error: ErrorValue, accept: str = "") -> Response:
        return format_error(self, sink, error, accept)


class TextFormatter(msgspec.Struct, frozen=True):
    """``text/plain`` responses carrying the message verbatim."""

    def render(self, error: ErrorValue, accept: str = "") -> Response:
        return error_response(error.status, http.TEXT, text_encode(error.message), error.headers)

    def format(self, sink: ResponseSink, error: ErrorValue, accept: str = "") -> Response:
        return format_error(self, sink, error, accept)


class DefaultFormatter(msgspec.Struct, frozen=True):
    """Two-way formatter: compact JSON when the client accepts it, text otherwise.

    Independent of :class:`~httperrorfmt.negotiation.ContentNegotiator`; it
    has no registration table.
    """

    def render(self, error: ErrorValue, accept: str = "") -> Response:
        if http.JSON in (accept or ""):
            try:
                body = json_encode(_json_body(error))
            except SerializationError:
                logger.debug("Discarding JSON body for status %s", error.status, exc_info=True)
                body = b""
            return error_response(error.status, http.JSON, body, error.headers)
        return error_response(error.status, http.TEXT, text_encode(error.message), error.headers)

    def format(self, sink: ResponseSink, error: ErrorValue, accept: str = "") -> Response:
        return format_error(self, sink, error, accept)


__all__ = [
    "DefaultFormatter",
    "Formatter",
    "HTMLFormatter",
    "JSONFormatter",
    "TextFormatter",
    "XMLFormatter",
    "format_error",
    "html_formatter",
]
