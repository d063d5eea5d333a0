"""Accept-header driven selection of error formatters.

Selection is a substring scan of the raw ``Accept`` value against a fixed
preference order. Quality weights and wildcards are not interpreted:
``"text/html;q=0.1, application/json;q=0.9"`` and
``"application/json;q=0.1, text/html"`` both pick JSON, and ``"*/*"`` falls
through to plain text.
"""

from __future__ import annotations

import logging
from typing import Mapping

from . import http
from .config import FormatterConfig
from .exceptions import ErrorValue
from .formatters import (
    Formatter,
    JSONFormatter,
    TextFormatter,
    XMLFormatter,
    format_error,
    html_formatter,
)
from .responses import Response, ResponseSink
from .templates import TemplateSet

logger = logging.getLogger(__name__)

PREFERENCE_ORDER: tuple[str, ...] = (http.JSON, http.HTML, http.XML, http.TEXT)
FALLBACK_CONTENT_TYPE = http.TEXT


def select_content_type(accept: str | None) -> str:
    """Return the preferred content type label found in ``accept``."""

    if not accept:
        return FALLBACK_CONTENT_TYPE
    for content_type in PREFERENCE_ORDER:
        if content_type in accept:
            return content_type
    return FALLBACK_CONTENT_TYPE


def accept_header(headers: Mapping[str, str] | None) -> str:
    """Return the ``Accept`` value from ``headers`` regardless of case."""

    for name, value in (headers or {}).items():
        if name.lower() == "accept":
            return value
    return ""


class ContentNegotiator:
    """Registry of formatters keyed by content type with a default fallback."""

    __slots__ = ("_default", "_formatters")

    select_content_type = staticmethod(select_content_type)

    def __init__(self, default: Formatter | None = None) -> None:
        self._formatters: dict[str, Formatter] = {}
        self._default: Formatter = default if default is not None else TextFormatter()

    @property
    def default(self) -> Formatter:
        return self._default

    def register(self, content_type: str, formatter: Formatter) -> "ContentNegotiator":
        """Map ``content_type`` to ``formatter``, replacing any earlier entry."""

        self._formatters[content_type] = formatter
        return self

    def set_default(self, formatter: Formatter) -> "ContentNegotiator":
        """Use ``formatter`` when no registered content type matches."""

        self._default = formatter
        return self

    def content_types(self) -> tuple[str, ...]:
        return tuple(self._formatters)

    def formatter_for(self, accept: str | None) -> Formatter:
        content_type = select_content_type(accept)
        formatter = self._formatters.get(content_type)
        if formatter is None:
            logger.debug("No formatter registered for %s; using default", content_type)
            return self._default
        return formatter

    def render(self, error: ErrorValue, accept: str = "") -> Response:
        return self.formatter_for(accept).render(error, accept)

    def format(self, sink: ResponseSink, error: ErrorValue, accept: str = "") -> Response:
        return format_error(self.formatter_for(accept), sink, error, accept)


def content_negotiating_formatter(config: FormatterConfig | None = None) -> ContentNegotiator:
    """Return a negotiator wired for JSON, HTML and plain text.

    JSON is pretty-printed unless ``config.pretty_json`` is false. XML is
    registered only when ``config.include_xml`` is set.
    """

    config = config or FormatterConfig()
    templates = TemplateSet({config.template_name: config.html_template})
    negotiator = (
        ContentNegotiator()
        .register(http.JSON, JSONFormatter(pretty_print=config.pretty_json, strict=config.strict))
        .register(http.HTML, html_formatter(templates, config.template_name, strict=config.strict))
        .register(http.TEXT, TextFormatter())
        .set_default(TextFormatter())
    )
    if config.include_xml:
        negotiator.register(http.XML, XMLFormatter(strict=config.strict))
    return negotiator


__all__ = [
    "ContentNegotiator",
    "FALLBACK_CONTENT_TYPE",
    "PREFERENCE_ORDER",
    "accept_header",
    "content_negotiating_formatter",
    "select_content_type",
]
