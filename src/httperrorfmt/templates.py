"""Named HTML error templates backed by an autoescaping Jinja2 environment."""

from __future__ import annotations

from typing import Any, Mapping

import jinja2
from jinja2 import DictLoader, Environment, StrictUndefined

from .exceptions import TemplateError

DEFAULT_TEMPLATE_NAME = "error"

DEFAULT_HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <title>Error {{ Status }}</title>
    <style>
        body { font-family: Arial, sans-serif; margin: 40px; }
        .error-container { max-width: 600px; margin: 0 auto; }
        .error-code { font-size: 48px; color: #e74c3c; margin-bottom: 20px; }
        .error-message { font-size: 18px; color: #333; margin-bottom: 20px; }
        .error-details { font-size: 14px; color: #666; }
    </style>
</head>
<body>
    <div class="error-container">
        <div class="error-code">{{ Status }}</div>
        <div class="error-message">{{ Error }}</div>
        <div class="error-details">{{ Code }}</div>
    </div>
</body>
</html>"""


class TemplateSet:
    """Template sources compiled into one environment and addressed by name.

    Output is always autoescaped and undefined variables are errors, so a
    template referring to a field the formatter does not supply fails to
    render instead of printing an empty string.
    """

    __slots__ = ("_sources", "environment")

    def __init__(self, templates: Mapping[str, str] | None = None) -> None:
        self._sources: dict[str, str] = {}
        self.environment = Environment(
            loader=DictLoader(self._sources),
            autoescape=True,
            undefined=StrictUndefined,
        )
        for name, source in (templates or {}).items():
            self.add(name, source)

    def add(self, name: str, source: str) -> "TemplateSet":
        """Compile ``source`` under ``name``; syntax errors raise :class:`TemplateError`."""

        previous = self._sources.get(name)
        self._sources[name] = source
        try:
            self.environment.get_template(name)
        except jinja2.TemplateSyntaxError as exc:
            if previous is None:
                del self._sources[name]
            else:
                self._sources[name] = previous
            raise TemplateError(f"cannot compile template {name!r}: {exc}") from exc
        return self

    def names(self) -> tuple[str, ...]:
        return tuple(self._sources)

    def __contains__(self, name: object) -> bool:
        return name in self._sources

    def render(self, name: str, context: Mapping[str, Any]) -> str:
        try:
            template = self.environment.get_template(name)
        except jinja2.TemplateNotFound:
            raise TemplateError(f"no template named {name!r}") from None
        try:
            return template.render(context)
        except jinja2.TemplateError as exc:
            raise TemplateError(f"cannot render template {name!r}: {exc}") from exc


def default_templates() -> TemplateSet:
    """Return a set holding :data:`DEFAULT_HTML_TEMPLATE` as ``"error"``."""

    return TemplateSet({DEFAULT_TEMPLATE_NAME: DEFAULT_HTML_TEMPLATE})


__all__ = [
    "DEFAULT_HTML_TEMPLATE",
    "DEFAULT_TEMPLATE_NAME",
    "TemplateSet",
    "default_templates",
]
