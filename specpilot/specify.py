"""
Fold a new project description into an existing spec root.

Updates three documents in place:
- requirements.md: the "## Project Overview" section
- context.md: a dated entry under "## Project Memory"
- prompts.md: a dated prompt entry under "## Latest Entries"

Documents that do not exist are skipped. With regenerate=True the whole
tree is first rebuilt from project.yaml and the new description.

Usage:
    from specpilot.specify import specify

    result = specify(project_dir, "A REST API for invoices")
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import List, Optional, Tuple, Union

import yaml

from specpilot.documents import DEFAULT_SPECS_NAME, DocumentKind, locate_document
from specpilot.errors import SpecPilotError
from specpilot.generator import GenerationOptions, generate_specs
from specpilot.rules import ProjectConfiguration

logger = logging.getLogger(__name__)

OVERVIEW_HEADING = "## Project Overview"
MEMORY_HEADING = "## Project Memory"
LATEST_ENTRIES_HEADING = "## Latest Entries"
PROMPTS_OVERVIEW_HEADING = "## Overview"


@dataclass
class SpecifyResult:
    """What a specify run touched."""
    specs_dir: Path
    project_name: str
    language: str
    framework: Optional[str] = None
    updated_files: List[str] = field(default_factory=list)
    regenerated: bool = False

    def format(self) -> str:
        """Format result for display."""
        stack = self.language + (f" + {self.framework}" if self.framework else "")
        lines = [f"Project: {self.project_name} ({stack})"]
        if self.regenerated:
            lines.append(f"Regenerated specs in {self.specs_dir}")
        for f in self.updated_files:
            lines.append(f"  ~ {f}")
        if not self.updated_files:
            lines.append("  (no documents to update)")
        return "\n".join(lines)


def specify(
    project_dir: Union[str, Path],
    description: str,
    specs_name: str = DEFAULT_SPECS_NAME,
    regenerate: bool = False,
    author: Optional[str] = None,
) -> SpecifyResult:
    """Record a new description in the spec root.

    Args:
        project_dir: Project directory
        description: Free-text description of what to build
        specs_name: Spec root folder name
        regenerate: Rebuild every document from templates first and
            replace (not extend) the requirements overview
        author: Author for regenerated documents when project.yaml
            has none

    Returns:
        SpecifyResult listing the updated documents

    Raises:
        SpecPilotError: If the description is empty, or the spec root or
            project.yaml is missing or unreadable
    """
    if not description or not description.strip():
        raise SpecPilotError("No description provided")

    specs_dir = Path(project_dir) / specs_name
    if not specs_dir.is_dir():
        raise SpecPilotError(f"Specs directory not found: {specs_dir} (run 'specpilot init' first)")

    config = _load_project(specs_dir)
    result = SpecifyResult(
        specs_dir=specs_dir,
        project_name=config.name or "updated-project",
        language=config.language or "typescript",
        framework=config.framework,
    )
    logger.info(f"Found project: {result.project_name} ({result.language})")

    if regenerate:
        generate_specs(GenerationOptions(
            project_name=result.project_name,
            language=result.language,
            framework=result.framework,
            target_dir=str(project_dir),
            specs_name=specs_name,
            author=str(config.extra.get("author") or "") or author,
            description=description,
        ))
        result.regenerated = True

    today = date.today().isoformat()
    updates = [
        (DocumentKind.REQUIREMENTS, lambda text: update_requirements(text, description, replace=regenerate)),
        (DocumentKind.CONTEXT, lambda text: update_context(text, description, today)),
        (DocumentKind.PROMPTS, lambda text: update_prompts_log(text, description, today)),
    ]
    for kind, update in updates:
        path = locate_document(specs_dir, kind)
        if path is None:
            logger.debug(f"{kind.filename} not found, skipping")
            continue
        path.write_text(update(path.read_text(encoding="utf-8")), encoding="utf-8")
        result.updated_files.append(kind.filename)
        logger.debug(f"Updated {path}")

    return result


def _load_project(specs_dir: Path) -> ProjectConfiguration:
    path = locate_document(specs_dir, DocumentKind.PROJECT)
    if path is None:
        raise SpecPilotError("project.yaml not found. Please ensure this is a valid SpecPilot project.")
    try:
        return ProjectConfiguration.load(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise SpecPilotError(f"Failed to read project.yaml: {e}") from e


def _section_bounds(lines: List[str], heading: str) -> Optional[Tuple[int, int]]:
    """(start, end) line indexes of a level-2 section, end exclusive.

    Headings inside fenced code blocks are ignored.
    """
    start = None
    fence = None
    for i, line in enumerate(lines):
        marker = line[:3]
        if marker in ("```", "~~~"):
            if fence is None:
                fence = marker
            elif marker == fence:
                fence = None
            continue
        if fence is not None:
            continue
        if start is None:
            if line.strip() == heading:
                start = i
        elif line.startswith("## "):
            return start, i
    if start is None:
        return None
    return start, len(lines)


def _append_to_section(content: str, heading: str, block: str) -> Optional[str]:
    """Insert block at the end of a section, None if the section is absent."""
    lines = content.split("\n")
    bounds = _section_bounds(lines, heading)
    if bounds is None:
        return None

    start, end = bounds
    # Keep trailing blank lines after the inserted block
    insert_at = end
    while insert_at > start + 1 and not lines[insert_at - 1].strip():
        insert_at -= 1
    lines[insert_at:insert_at] = [""] + block.rstrip("\n").split("\n")
    return "\n".join(lines)


def update_requirements(content: str, description: str, replace: bool = False) -> str:
    """Put a description into the Project Overview section.

    replace swaps the section body; otherwise an "Additional Context"
    block is appended. A missing section is added after the title.
    """
    lines = content.split("\n")
    bounds = _section_bounds(lines, OVERVIEW_HEADING)

    if bounds is None:
        section = [OVERVIEW_HEADING, description, ""]
        title = next((i for i, line in enumerate(lines) if line.startswith("# ")), None)
        if title is None:
            return "\n".join(section) + "\n" + content
        lines[title + 1:title + 1] = [""] + section
        return "\n".join(lines)

    if replace:
        start, end = bounds
        lines[start:end] = [OVERVIEW_HEADING, description, ""]
        return "\n".join(lines)

    return _append_to_section(content, OVERVIEW_HEADING, f"### Additional Context\n{description}\n")


def update_context(content: str, description: str, today: str) -> str:
    """Add a dated specification entry to Project Memory."""
    entry = (
        "### Latest Specification Update\n"
        f"**Date**: {today}\n"
        f"**Description**: {description}\n"
        "**Source**: specpilot specify command\n"
    )
    updated = _append_to_section(content, MEMORY_HEADING, entry)
    if updated is None:
        return content.rstrip("\n") + f"\n\n{MEMORY_HEADING}\n{entry}"
    return updated


def update_prompts_log(content: str, description: str, today: str) -> str:
    """Log the description as a prompt entry under Latest Entries.

    The Latest Entries section is created after Overview, or at the end
    of the file, when missing.
    """
    entry = (
        f"### Specification Update ({today})\n"
        "#### Prompt: Project Specification\n"
        f'**Prompt**: "{description}"\n'
        "\n"
        "**Context**: User provided specification description via specpilot specify command\n"
        "\n"
        "**Files Modified**: requirements.md, context.md, prompts.md\n"
        "\n"
        "---\n"
    )
    updated = _append_to_section(content, LATEST_ENTRIES_HEADING, entry)
    if updated is not None:
        return updated

    section = f"{LATEST_ENTRIES_HEADING}\n\n{entry}"
    updated = _append_to_section(content, PROMPTS_OVERVIEW_HEADING, section)
    if updated is not None:
        return updated
    return content.rstrip("\n") + f"\n\n{section}"
