"""
Python providers.

Framework variants: django, fastapi
"""

from typing import Dict, List, Optional

from specpilot.templates.base import TemplateProvider


class PythonProvider(TemplateProvider):
    """Generic Python project."""

    @property
    def language(self) -> str:
        return "python"

    @property
    def display_name(self) -> str:
        return "Python"

    @property
    def build_command(self) -> str:
        return "python -m build"

    @property
    def source_tree(self) -> str:
        return (
            "src/<package>/\n"
            "├── __init__.py\n"
            "├── core/           # Business logic\n"
            "├── services/       # Integrations and I/O\n"
            "└── utils/          # Helpers\n"
            "tests/              # pytest suite\n"
        )

    def dependencies(self) -> Dict[str, List[str]]:
        return {"runtime": [], "development": ["pytest"]}


class DjangoProvider(PythonProvider):
    """Django web application."""

    @property
    def framework(self) -> Optional[str]:
        return "django"

    @property
    def source_tree(self) -> str:
        return (
            "<project>/          # Django settings, urls, wsgi/asgi\n"
            "apps/\n"
            "├── <app>/models.py  # ORM models\n"
            "├── <app>/views.py   # Views\n"
            "└── <app>/tests.py   # App tests\n"
            "templates/          # HTML templates\n"
        )

    def dependencies(self) -> Dict[str, List[str]]:
        return {
            "runtime": ["django", "djangorestframework"],
            "development": ["pytest", "pytest-django"],
        }

    def framework_notes(self) -> List[str]:
        return [
            "Each bounded feature is a Django app",
            "Database changes go through migrations",
            "Settings are split per environment",
        ]


class FastAPIProvider(PythonProvider):
    """FastAPI service."""

    @property
    def framework(self) -> Optional[str]:
        return "fastapi"

    @property
    def source_tree(self) -> str:
        return (
            "app/\n"
            "├── main.py         # FastAPI app factory\n"
            "├── routers/        # APIRouter modules\n"
            "├── models/         # Pydantic schemas\n"
            "└── services/       # Business logic\n"
            "tests/              # pytest + httpx tests\n"
        )

    def dependencies(self) -> Dict[str, List[str]]:
        return {
            "runtime": ["fastapi", "uvicorn", "pydantic"],
            "development": ["pytest", "httpx"],
        }

    def framework_notes(self) -> List[str]:
        return [
            "Endpoints are grouped in APIRouter modules",
            "Request and response bodies are Pydantic models",
            "Shared resources are injected with Depends()",
        ]
