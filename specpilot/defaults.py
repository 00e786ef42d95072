"""
Canned default content for required spec documents.

Used when a document has to be created without the generator: the
validator's create-<file> fix and the migrator's back-fill step. Every
default passes the validator's structural checks on its own.
"""

import json
from datetime import date
from typing import TYPE_CHECKING, Callable, Dict

from specpilot.rules import CANONICAL_MANDATES

if TYPE_CHECKING:
    from specpilot.documents import DocumentKind


def _today() -> str:
    return date.today().isoformat()


def _front_matter(title: str, project_name: str) -> str:
    return (
        "---\n"
        f"title: {title}\n"
        f"project: {_quote(project_name)}\n"
        'language: ""\n'
        'framework: ""\n'
        f"lastUpdated: {_today()}\n"
        "sourceOfTruth: project/project.yaml\n"
        "---\n\n"
    )


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _note_block(note: str) -> str:
    if not note:
        return ""
    return f"> {note}\n\n"


def _footer() -> str:
    return f"\n---\n*Last updated: {_today()}*\n"


def _project_yaml(project_name: str, note: str) -> str:
    comment = f"# {note}\n" if note else ""
    rules = "\n".join(f'  - "{rule}"' for rule in CANONICAL_MANDATES)
    return (
        f"# {project_name} - Project Configuration\n"
        f"{comment}"
        f"name: {_quote(project_name)}\n"
        'version: "1.0.0"\n'
        'language: "typescript"\n'
        'description: "Project description"\n'
        "\n"
        "# Project Rules and AI Context\n"
        "rules:\n"
        '  - "Follow best practices and coding standards"\n'
        '  - "Write comprehensive tests for all functionality"\n'
        '  - "Document all public APIs and interfaces"\n'
        f"{rules}\n"
        "\n"
        "# Development Context for AI\n"
        "ai_context:\n"
        '  - "This is a specification-driven development project"\n'
        '  - "All changes should be documented in appropriate .specs/ files"\n'
        '  - "Follow the established architecture patterns"\n'
    )


def _architecture_md(project_name: str, note: str) -> str:
    return (
        _front_matter("Architecture", project_name)
        + f"# {project_name} Architecture\n\n"
        + _note_block(note)
        + "## Overview\n"
        "This document outlines the architecture and design decisions for this project.\n\n"
        "## Architecture Patterns\n"
        "- **Architecture Style**: _Not yet decided_\n"
        "- **Data Flow**: _Not yet decided_\n\n"
        "## Core Components\n"
        "_Document the main components as they are introduced._\n\n"
        "## Design Decisions\n"
        "_Record decisions here as they are made._\n"
        + _footer()
    )


def _requirements_md(project_name: str, note: str) -> str:
    return (
        _front_matter("Requirements", project_name)
        + f"# {project_name} Requirements\n\n"
        + _note_block(note)
        + "## Project Overview\n"
        "_Describe what the project does and who it is for._\n\n"
        "## Functional Requirements\n"
        "_List requirements as REQ-001, REQ-002, ..._\n\n"
        "## Non-Functional Requirements\n"
        "_Performance, security and availability targets._\n\n"
        "## User Stories\n"
        "_As a <role>, I want <goal> so that <benefit>._\n"
        + _footer()
    )


def _api_yaml(project_name: str, note: str) -> str:
    comment = f"# {note}\n" if note else ""
    return (
        f"# {project_name} API Specification\n"
        f"{comment}"
        "openapi: 3.0.3\n"
        "info:\n"
        f"  title: {_quote(project_name + ' API')}\n"
        '  description: "API description"\n'
        '  version: "1.0.0"\n'
        "paths: {}\n"
    )


def _tests_md(project_name: str, note: str) -> str:
    return (
        _front_matter("Test Strategy", project_name)
        + f"# {project_name} Test Strategy\n\n"
        + _note_block(note)
        + "## Test Strategy\n"
        "_Describe unit, integration and end-to-end testing._\n\n"
        "## Test Cases\n"
        "_List test cases as TEST-001, TEST-002, ..._\n\n"
        "## Coverage Goals\n"
        "_State the coverage target._\n"
        + _footer()
    )


def _tasks_md(project_name: str, note: str) -> str:
    return (
        _front_matter("Tasks", project_name)
        + f"# {project_name} Task Management\n\n"
        + _note_block(note)
        + "## Backlog\n"
        "- [ ] TASK-001: Define project requirements\n\n"
        "## In Progress\n"
        "_Nothing in progress._\n\n"
        "## Completed\n"
        "- [x] Create specification structure\n"
        + _footer()
    )


def _context_md(project_name: str, note: str) -> str:
    return (
        _front_matter("Development Context", project_name)
        + f"# {project_name} Development Context\n\n"
        + _note_block(note)
        + "## Project Memory\n"
        "_Key decisions, known issues and future considerations._\n"
        + _footer()
    )


def _prompts_md(project_name: str, note: str) -> str:
    return (
        _front_matter("Prompts Log", project_name)
        + "# Development Prompts Log\n\n"
        + _note_block(note)
        + "## Overview\n"
        f"This file contains ALL AI interactions and development prompts for {project_name}, "
        "maintaining complete traceability of the development process.\n\n"
        "**MANDATE**: This file MUST be updated with every AI interaction during development.\n\n"
        "## Latest Entries\n\n"
        f"### Project Setup ({_today()})\n\n"
        "#### Prompt: Initial Validation\n"
        '**Prompt**: "Validate project specifications and fix any issues"\n\n'
        "**Context**: Running specpilot validation to ensure project compliance\n\n"
        "**Response**:\n"
        "- Validated project structure\n"
        "- Ensured mandate compliance\n"
        "- Created missing specification files\n\n"
        "**Files Modified**: Various .specs/ files\n\n"
        "**Next Actions**: Continue development following specifications\n\n"
        "---\n\n"
        "## Template for Future Entries\n\n"
        "### Session [N]: [Session Title]\n"
        "**Date**: [YYYY-MM-DD]\n"
        "**Participants**: [Team members, AI interactions]\n\n"
        "#### Prompts and Responses\n\n"
        "1. **[Prompt Category]**\n"
        '   - **Prompt**: "[Exact prompt text]"\n'
        '   - **Context**: "[Why this prompt was needed]"\n'
        '   - **Response**: "[Summary of AI response]"\n'
        '   - **Outcome**: "[Result of the interaction]"\n'
        + _footer()
    )


def _docs_md(project_name: str, note: str) -> str:
    return (
        _front_matter("Development Docs", project_name)
        + f"# {project_name} Development Documentation\n\n"
        + _note_block(note)
        + "## Getting Started\n"
        "_Development setup instructions._\n\n"
        "## Deployment\n"
        "_How the project is built and released._\n"
        + _footer()
    )


_DEFAULTS: Dict[str, Callable[[str, str], str]] = {
    "project.yaml": _project_yaml,
    "architecture.md": _architecture_md,
    "requirements.md": _requirements_md,
    "api.yaml": _api_yaml,
    "tests.md": _tests_md,
    "tasks.md": _tasks_md,
    "context.md": _context_md,
    "prompts.md": _prompts_md,
    "docs.md": _docs_md,
}


def default_content(kind: "DocumentKind", project_name: str = "project-name", note: str = "") -> str:
    """Build the default text for a document.

    Documents without a dedicated default get a titled stub.
    """
    builder = _DEFAULTS.get(kind.filename)
    if builder is not None:
        return builder(project_name, note)

    stem = kind.filename.rsplit(".", 1)[0]
    return f"# {stem}\n\n" + _note_block(note) + "_Content to be added._\n" + _footer()
