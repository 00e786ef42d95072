"""
Template engine for spec documents.

Thin layer over Jinja2:
- `{{ name }}` and dotted lookups (`{{ architecture.components }}`)
- `{% if %}` / `{% for %}` blocks, including `{% for key, value in m.items() %}`
- helpers: uppercase, lowercase, capitalize, join, quote (filters and
  functions), current_date / current_year (values)
- missing variables and None render as empty strings

Built-in templates are looked up through the provider registry in
specpilot.templates: (language) -> (framework or none) -> provider.

Usage:
    engine = TemplateEngine()
    text = engine.render_from_string("# {{ project_name | uppercase }}", ctx)
    template = engine.get_builtin_template("python", "fastapi", "project.yaml")
"""

import json
import logging
from datetime import date
from typing import Any, Dict, Iterable, Mapping, Optional

from jinja2 import BaseLoader, ChainableUndefined, Environment, Template, TemplateError

from specpilot.errors import TemplateRenderError

logger = logging.getLogger(__name__)


def _text(value: Any) -> str:
    if value is None or isinstance(value, ChainableUndefined):
        return ""
    return str(value)


def uppercase(value: Any) -> str:
    return _text(value).upper()


def lowercase(value: Any) -> str:
    return _text(value).lower()


def capitalize(value: Any) -> str:
    """Upper-case the first character, leave the rest alone."""
    text = _text(value)
    return text[:1].upper() + text[1:]


def join(items: Optional[Iterable[Any]], separator: str = ", ") -> str:
    if items is None or isinstance(items, ChainableUndefined):
        return ""
    if isinstance(items, str):
        return items
    return separator.join(_text(item) for item in items)


def quote(value: Any) -> str:
    """Double-quoted scalar, safe inside YAML."""
    return json.dumps(_text(value), ensure_ascii=False)


HELPERS = {
    "uppercase": uppercase,
    "lowercase": lowercase,
    "capitalize": capitalize,
    "join": join,
    "quote": quote,
}


def _finalize(value: Any) -> Any:
    return "" if value is None else value


class TemplateEngine:
    """Compiles template strings against a context.

    Compiled templates are cached by source text; the engine holds no
    other state.
    """

    def __init__(self):
        self._env = Environment(
            loader=BaseLoader(),
            undefined=ChainableUndefined,
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            finalize=_finalize,
        )
        self._compiled: Dict[str, Template] = {}
        self._register_helpers()

    def _register_helpers(self) -> None:
        for name, helper in HELPERS.items():
            self._env.filters[name] = helper
            self._env.globals[name] = helper

    def compile(self, template: str, name: Optional[str] = None) -> Template:
        """Compile a template string.

        Raises:
            TemplateRenderError: On syntax errors or unknown helpers
        """
        compiled = self._compiled.get(template)
        if compiled is not None:
            return compiled

        try:
            compiled = self._env.from_string(template)
        except TemplateError as e:
            raise TemplateRenderError(str(e), name) from e

        self._compiled[template] = compiled
        return compiled

    def render_from_string(self, template: str, context: Any, name: Optional[str] = None) -> str:
        """Render a template string.

        Args:
            template: Template source
            context: Mapping of variables, or an object with to_template_vars()
            name: Optional template name used in error messages

        Returns:
            Rendered text
        """
        compiled = self.compile(template, name)
        variables = self._variables(context)

        try:
            return compiled.render(**variables)
        except TemplateError as e:
            raise TemplateRenderError(str(e), name) from e

    def get_builtin_template(self, language: str, framework: Optional[str], file_name: str) -> str:
        """Find the built-in template for a language/framework.

        Tries the framework provider first, then the language provider.
        An empty string means no built-in template exists; callers treat
        that as "nothing to render", not as an error.
        """
        from specpilot.templates import get_provider

        framework_provider = get_provider(language, framework) if framework else None
        if framework_provider is not None:
            template = framework_provider.template_for(file_name)
            if template:
                return template

        language_provider = get_provider(language)
        if language_provider is not None:
            template = language_provider.template_for(file_name)
            if template:
                return template

        logger.debug(f"No built-in template for {language}/{framework}/{file_name}")
        return ""

    def _variables(self, context: Any) -> Dict[str, Any]:
        today = date.today()
        variables: Dict[str, Any] = {
            "current_date": today.isoformat(),
            "current_year": str(today.year),
        }

        if context is None:
            return variables
        if hasattr(context, "to_template_vars"):
            variables.update(context.to_template_vars())
        elif isinstance(context, Mapping):
            variables.update(context)
        else:
            raise TypeError(f"Unsupported template context: {type(context).__name__}")

        return variables
