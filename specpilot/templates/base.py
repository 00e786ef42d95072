"""
Base template provider for built-in spec documents.

A provider supplies the language/framework dependent templates
(project.yaml and architecture.md). Framework providers subclass their
language provider and override the hooks that differ: dependencies,
source tree, framework notes.
"""

import json
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional

from specpilot.rules import CANONICAL_MANDATES


def front_matter(title: str) -> str:
    """YAML front-matter block shared by every generated Markdown file."""
    return (
        "---\n"
        f"title: {title}\n"
        "project: {{ project_name | quote }}\n"
        "language: {{ language | quote }}\n"
        "framework: {{ framework | quote }}\n"
        "lastUpdated: {{ last_updated }}\n"
        "sourceOfTruth: project/project.yaml\n"
        "---\n"
    )


FOOTER = "\n---\n*Last updated: {{ last_updated }}*\n"


def _yaml_list(items: List[str], indent: int = 2) -> str:
    pad = " " * indent
    return "".join(f"{pad}- {json.dumps(item)}\n" for item in items)


class TemplateProvider(ABC):
    """Built-in templates for one language, optionally one framework."""

    @property
    @abstractmethod
    def language(self) -> str:
        """Language key (e.g. "python")."""
        ...

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable language name (e.g. "Python")."""
        ...

    @property
    def framework(self) -> Optional[str]:
        """Framework key, or None for the language-level provider."""
        return None

    @property
    def build_command(self) -> str:
        return ""

    @property
    def source_tree(self) -> str:
        return (
            "src/\n"
            "├── components/     # Reusable components\n"
            "├── services/       # Business logic\n"
            "├── utils/          # Utility functions\n"
            "├── types/          # Type definitions\n"
            "└── tests/          # Test files\n"
        )

    def rules(self) -> List[str]:
        return [
            f"Follow {self.display_name} best practices and coding standards",
            "Write comprehensive tests for all functionality",
            "Document all public APIs and interfaces",
            *CANONICAL_MANDATES,
            "Use semantic versioning for releases",
            "Keep dependencies up to date",
        ]

    def dependencies(self) -> Dict[str, List[str]]:
        return {"runtime": [], "development": []}

    def framework_notes(self) -> List[str]:
        """Bullet points for the framework section of architecture.md."""
        return []

    def template_for(self, file_name: str) -> str:
        """Template source for a document, or "" if not built in."""
        builders: Dict[str, Callable[[], str]] = {
            "project.yaml": self.project_yaml,
            "architecture.md": self.architecture_md,
        }
        builder = builders.get(file_name)
        return builder() if builder else ""

    def project_yaml(self) -> str:
        parts = [
            "# {{ project_name }} - SDD Project Configuration\n",
            "name: {{ project_name | quote }}\n",
            'version: "1.0.0"\n',
            f"language: {self.language}\n",
            "{% if framework %}\n",
            "framework: {{ framework | quote }}\n",
            "{% endif %}\n",
            "description: {{ description | quote }}\n",
            "author: {{ author | quote }}\n",
            "\n",
            "# Project Rules and AI Context\n",
            "rules:\n",
            _yaml_list(self.rules()),
            "\n",
            "# Development Context for AI\n",
            "ai_context:\n",
            _yaml_list([
                "This is a specification-driven development project",
                "All changes should be documented in appropriate .specs/ files",
                "Follow the established architecture patterns",
                "Maintain backwards compatibility when possible",
            ]),
            "\n",
            "# Team Guidelines\n",
            "team:\n",
            "  code_review_required: true\n",
            "  testing_required: true\n",
            "  documentation_required: true\n",
        ]

        if self.build_command:
            parts += [
                "\n",
                "# Build and Deployment\n",
                "build:\n",
                f"  command: {json.dumps(self.build_command)}\n",
            ]

        parts += ["\n", "# Dependencies\n", "dependencies:\n"]
        for group, packages in self.dependencies().items():
            if packages:
                parts.append(f"  {group}:\n")
                parts.append(_yaml_list(packages, indent=4))
            else:
                parts.append(f"  {group}: []\n")

        return "".join(parts)

    def architecture_md(self) -> str:
        parts = [
            front_matter("Architecture"),
            "\n",
            "# {{ project_name }} Architecture\n",
            "\n",
            "## Overview\n",
            "This document outlines the architecture and design decisions for "
            f"{{{{ project_name }}}}, a {self.display_name} application"
            "{% if framework %} built with {{ framework }}{% endif %}.\n",
            "\n",
            "## Architecture Patterns\n",
            f"- **Language**: {self.display_name}\n",
            "- **Architecture Style**: [Specify: MVC, Microservices, Layered, etc.]\n",
            "- **Data Flow**: [Specify: Unidirectional, Event-driven, etc.]\n",
            "\n",
            "## Core Components\n",
            "{% if architecture.components %}\n",
            "{% for component in architecture.components %}\n",
            "- {{ component }}\n",
            "{% endfor %}\n",
            "{% else %}\n",
            "_No components discovered yet. List the main modules and services "
            "with their responsibilities here._\n",
            "{% endif %}\n",
            "\n",
            "### Application Structure\n",
            "```\n",
            "{% if architecture.directories %}\n",
            "{{ architecture.directories }}\n",
            "{% else %}\n",
            self.source_tree,
            "{% endif %}\n",
            "```\n",
            "\n",
            "### File Types\n",
            "{% if architecture.file_types %}\n",
            "| Extension | Files |\n",
            "|-----------|-------|\n",
            "{% for extension, count in architecture.file_types.items() %}\n",
            "| {{ extension }} | {{ count }} |\n",
            "{% endfor %}\n",
            "{% else %}\n",
            "_File type breakdown not available. Add one after the first "
            "codebase review._\n",
            "{% endif %}\n",
            "\n",
            "## Design Decisions\n",
            "\n",
            "### Decision 1: [Decision Title]\n",
            "- **Date**: {{ last_updated }}\n",
            "- **Context**: [Why this decision was needed]\n",
            "- **Decision**: [What was decided]\n",
            "- **Consequences**: [Positive and negative impacts]\n",
        ]

        notes = self.framework_notes()
        if notes:
            parts += ["\n", f"## Framework: {self.framework}\n"]
            parts += [f"- {note}\n" for note in notes]

        parts += [
            "\n",
            "## Deployment Architecture\n",
            "[Describe deployment strategy, infrastructure, and environments]\n",
            "\n",
            "## Security Considerations\n",
            "[List security measures and considerations]\n",
            "\n",
            "## Performance Considerations\n",
            "[Describe performance requirements and optimization strategies]\n",
            "\n",
            "## Monitoring and Observability\n",
            "[Describe logging, metrics, and monitoring strategy]\n",
            "\n",
            "## Cross-References\n",
            "- API: ./api.yaml\n",
            "- Requirements: ../project/requirements.md\n",
            "- Project config: ../project/project.yaml\n",
            FOOTER,
        ]
        return "".join(parts)
