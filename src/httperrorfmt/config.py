"""Formatter configuration objects."""

from __future__ import annotations

from msgspec import Struct

from .templates import DEFAULT_HTML_TEMPLATE, DEFAULT_TEMPLATE_NAME


class FormatterConfig(Struct, frozen=True):
    """Typed configuration for :func:`~httperrorfmt.negotiation.content_negotiating_formatter`."""

    pretty_json: bool = True
    strict: bool = False
    include_xml: bool = False
    html_template: str = DEFAULT_HTML_TEMPLATE
    template_name: str = DEFAULT_TEMPLATE_NAME
