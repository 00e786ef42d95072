"""
TypeScript and JavaScript providers.

Framework variants:
    typescript: react, express, next
    javascript: express
"""

from typing import Dict, List, Optional

from specpilot.templates.base import TemplateProvider


class TypeScriptProvider(TemplateProvider):
    """Generic TypeScript project."""

    @property
    def language(self) -> str:
        return "typescript"

    @property
    def display_name(self) -> str:
        return "TypeScript"

    @property
    def build_command(self) -> str:
        return "npm run build"

    def dependencies(self) -> Dict[str, List[str]]:
        return {"runtime": [], "development": ["typescript"]}


class ReactProvider(TypeScriptProvider):
    """React single-page application."""

    @property
    def framework(self) -> Optional[str]:
        return "react"

    @property
    def source_tree(self) -> str:
        return (
            "src/\n"
            "├── components/     # Presentational and container components\n"
            "├── hooks/          # Custom React hooks\n"
            "├── pages/          # Route-level views\n"
            "├── services/       # API clients and business logic\n"
            "└── __tests__/      # Component tests\n"
        )

    def dependencies(self) -> Dict[str, List[str]]:
        return {
            "runtime": ["react", "react-dom"],
            "development": ["@types/react", "@types/react-dom", "typescript", "vite"],
        }

    def framework_notes(self) -> List[str]:
        return [
            "Components are function components using hooks",
            "State shared across routes lives in context providers or a store",
            "Side effects are isolated in hooks and services",
        ]


class ExpressProvider(TypeScriptProvider):
    """Express REST API server."""

    @property
    def framework(self) -> Optional[str]:
        return "express"

    @property
    def source_tree(self) -> str:
        return (
            "src/\n"
            "├── routes/         # express routers\n"
            "├── controllers/    # Request handlers\n"
            "├── middleware/     # express middleware (auth, logging, errors)\n"
            "├── services/       # Business logic\n"
            "└── tests/          # Test files\n"
        )

    def dependencies(self) -> Dict[str, List[str]]:
        return {
            "runtime": ["express", "cors", "helmet"],
            "development": ["@types/express", "@types/cors", "@types/helmet", "typescript", "ts-node"],
        }

    def framework_notes(self) -> List[str]:
        return [
            "Routes are grouped in express routers mounted by resource",
            "Cross-cutting concerns run as express middleware",
            "A single error-handling middleware formats error responses",
        ]


class NextProvider(TypeScriptProvider):
    """Next.js full-stack application."""

    @property
    def framework(self) -> Optional[str]:
        return "next"

    @property
    def source_tree(self) -> str:
        return (
            "app/                # Next.js app router (pages, layouts, route handlers)\n"
            "components/         # Shared UI components\n"
            "lib/                # Server and client utilities\n"
            "public/             # Static assets\n"
        )

    def dependencies(self) -> Dict[str, List[str]]:
        return {
            "runtime": ["next", "react", "react-dom"],
            "development": ["@types/react", "typescript"],
        }

    def framework_notes(self) -> List[str]:
        return [
            "Server components by default, client components opt in",
            "API endpoints live in route handlers under app/",
        ]


class JavaScriptProvider(TypeScriptProvider):
    """Generic JavaScript (Node.js) project."""

    @property
    def language(self) -> str:
        return "javascript"

    @property
    def display_name(self) -> str:
        return "JavaScript"

    def dependencies(self) -> Dict[str, List[str]]:
        return {"runtime": [], "development": []}


class JavaScriptExpressProvider(JavaScriptProvider):
    """Express server in plain JavaScript."""

    @property
    def framework(self) -> Optional[str]:
        return "express"

    @property
    def source_tree(self) -> str:
        return ExpressProvider().source_tree

    def dependencies(self) -> Dict[str, List[str]]:
        return {"runtime": ["express", "cors", "helmet"], "development": ["nodemon"]}

    def framework_notes(self) -> List[str]:
        return ExpressProvider().framework_notes()
