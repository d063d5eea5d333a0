"""Render HTTP errors as JSON, HTML, XML or plain text based on the Accept header."""

from .config import FormatterConfig
from .exceptions import ErrorFormatError, ErrorValue, HTTPError, SerializationError, TemplateError
from .formatters import (
    DefaultFormatter,
    Formatter,
    HTMLFormatter,
    JSONFormatter,
    TextFormatter,
    XMLFormatter,
    format_error,
    html_formatter,
)
from .http import reason_phrase
from .negotiation import (
    PREFERENCE_ORDER,
    ContentNegotiator,
    accept_header,
    content_negotiating_formatter,
    select_content_type,
)
from .responses import Response, ResponseSink, write_response
from .templates import DEFAULT_HTML_TEMPLATE, TemplateSet

__all__ = [
    "DEFAULT_HTML_TEMPLATE",
    "PREFERENCE_ORDER",
    "ContentNegotiator",
    "DefaultFormatter",
    "ErrorFormatError",
    "ErrorValue",
    "Formatter",
    "FormatterConfig",
    "HTMLFormatter",
    "HTTPError",
    "JSONFormatter",
    "Response",
    "ResponseSink",
    "SerializationError",
    "TemplateError",
    "TemplateSet",
    "TextFormatter",
    "XMLFormatter",
    "accept_header",
    "content_negotiating_formatter",
    "format_error",
    "html_formatter",
    "reason_phrase",
    "select_content_type",
    "write_response",
]
