"""
SpecPilot templates - built-in document templates per language.

Providers are registered in a two-level table:
    language -> framework (None for the language itself) -> provider

Available providers:
- typescript: generic, react, express, next
- javascript: generic, express
- python: generic, django, fastapi
- java: generic, spring-boot

Usage:
    from specpilot.templates import get_provider

    provider = get_provider("python", "fastapi")
    template = provider.template_for("project.yaml")
"""

from typing import Dict, Optional

from specpilot.templates.base import FOOTER, TemplateProvider, front_matter
from specpilot.templates.catalog import TemplateEntry, TemplateRegistry
from specpilot.templates.documents import INLINE_TEMPLATES
from specpilot.templates.java import JavaProvider, SpringBootProvider
from specpilot.templates.python import DjangoProvider, FastAPIProvider, PythonProvider
from specpilot.templates.typescript import (
    ExpressProvider,
    JavaScriptExpressProvider,
    JavaScriptProvider,
    NextProvider,
    ReactProvider,
    TypeScriptProvider,
)


# Provider registry
PROVIDERS: Dict[str, Dict[Optional[str], TemplateProvider]] = {
    "typescript": {
        None: TypeScriptProvider(),
        "react": ReactProvider(),
        "express": ExpressProvider(),
        "next": NextProvider(),
    },
    "javascript": {
        None: JavaScriptProvider(),
        "express": JavaScriptExpressProvider(),
    },
    "python": {
        None: PythonProvider(),
        "django": DjangoProvider(),
        "fastapi": FastAPIProvider(),
    },
    "java": {
        None: JavaProvider(),
        "spring-boot": SpringBootProvider(),
    },
}


def get_provider(language: str, framework: Optional[str] = None) -> Optional[TemplateProvider]:
    """Get the provider registered for a language/framework pair.

    No fallback happens here: an unknown framework returns None and the
    caller decides whether to try the language provider.

    Args:
        language: Language key (e.g. "typescript")
        framework: Framework key, or None for the language provider

    Returns:
        Provider instance or None if not registered
    """
    frameworks = PROVIDERS.get(language)
    if frameworks is None:
        return None
    return frameworks.get(framework)


__all__ = [
    "FOOTER",
    "INLINE_TEMPLATES",
    "PROVIDERS",
    "TemplateEntry",
    "TemplateProvider",
    "TemplateRegistry",
    "front_matter",
    "get_provider",
]
