"""
Spec Validator.

Checks an existing spec root for missing documents, a well-formed
project.yaml with the prompt-tracking mandate, a maintained prompts.md
and a few content-quality heuristics. Problems are collected on a
ValidationResult; only a missing spec root short-circuits the run.

Fixes are identified by strings:
    create-<file>          write default content for a missing document
    add-mandates           append the canonical MANDATE rules to project.yaml
    create-prompts-entry   overwrite prompts.md with the default log (never
                           queued by validate, only applied by explicit id)

Usage:
    from specpilot.validator import validate, auto_fix

    result = validate(project_dir)
    if not result.is_valid:
        applied = auto_fix(project_dir, result.fixable)
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml

from specpilot.documents import (
    REQUIRED_DOCUMENTS,
    DocumentKind,
    document_path,
    locate_document,
)
from specpilot.rules import ProjectConfiguration

logger = logging.getLogger(__name__)

# Spec root names, checked in order
SPEC_ROOT_CANDIDATES = (".specs", ".project-spec", "specs", "specifications")

FIX_ADD_MANDATES = "add-mandates"
FIX_CREATE_PROMPTS_ENTRY = "create-prompts-entry"
CREATE_PREFIX = "create-"

# prompts.md shorter than this (stripped) counts as minimal
MIN_PROMPTS_LENGTH = 100

ARCHITECTURE_SECTIONS = ("Overview", "Architecture", "Components", "Decisions")


@dataclass
class ValidationResult:
    """Outcome of one validation run.

    Mandates are counted in two places: the rule scan of project.yaml
    (config_mandates) and the content scan of prompts.md
    (prompts_mandates). mandates_verified is their sum.
    """
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    fixable: List[str] = field(default_factory=list)
    files_checked: int = 0
    config_mandates: int = 0
    prompts_mandates: int = 0
    specs_dir: Optional[Path] = None
    applied_fixes: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def mandates_verified(self) -> int:
        return self.config_mandates + self.prompts_mandates

    def add_error(self, message: str, fix: Optional[str] = None) -> None:
        self.errors.append(message)
        if fix and fix not in self.fixable:
            self.fixable.append(fix)

    def summary(self) -> Dict[str, int]:
        """Counts shown by `validate --verbose`."""
        return {
            "files_checked": self.files_checked,
            "errors": len(self.errors),
            "warnings": len(self.warnings),
            "mandates_verified": self.mandates_verified,
            "config_mandates": self.config_mandates,
            "prompts_mandates": self.prompts_mandates,
        }

    def format(self, verbose: bool = False) -> str:
        """Format result for display."""
        lines = []

        if self.is_valid:
            lines.append("All specifications are valid.")
        else:
            lines.append(f"Validation failed ({len(self.errors)} errors).")

        if self.errors:
            lines.append(f"\nErrors ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ! {e}")

        if self.warnings:
            lines.append(f"\nWarnings ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  - {w}")

        if self.applied_fixes:
            lines.append(f"\nApplied fixes ({len(self.applied_fixes)}):")
            for f in self.applied_fixes:
                lines.append(f"  + {f}")
        elif self.fixable:
            lines.append(f"\n{len(self.fixable)} issue(s) can be fixed with --fix")

        if verbose:
            lines.append("")
            lines.append(f"Files checked: {self.files_checked}")
            lines.append(f"Errors: {len(self.errors)}")
            lines.append(f"Warnings: {len(self.warnings)}")
            lines.append(
                f"Mandates verified: {self.mandates_verified} "
                f"(project.yaml: {self.config_mandates}, prompts.md: {self.prompts_mandates})"
            )

        return "\n".join(lines)


def find_specs_dir(project_dir: Union[str, Path]) -> Optional[Path]:
    """First existing spec root under a project, or None."""
    root = Path(project_dir)
    for candidate in SPEC_ROOT_CANDIDATES:
        path = root / candidate
        if path.exists():
            return path
    return None


def validate(project_dir: Union[str, Path], fix: bool = False, verbose: bool = False) -> ValidationResult:
    """Validate the spec root of a project.

    Args:
        project_dir: Project directory containing the spec root
        fix: Apply fixable issues, then validate again
        verbose: Report unreadable documents as warnings

    Returns:
        ValidationResult; after fixing, the result of the second pass
        with applied_fixes filled in
    """
    result = _validate(Path(project_dir), verbose)
    if not fix or not result.fixable:
        return result

    applied = auto_fix(project_dir, result.fixable)
    logger.info(f"Applied {len(applied)} of {len(result.fixable)} fixes")

    result = _validate(Path(project_dir), verbose)
    result.applied_fixes = applied
    return result


def _validate(project_dir: Path, verbose: bool) -> ValidationResult:
    result = ValidationResult()

    specs_dir = find_specs_dir(project_dir)
    if specs_dir is None:
        result.add_error("No .specs directory found in project")
        return result
    result.specs_dir = specs_dir

    for kind in REQUIRED_DOCUMENTS:
        if locate_document(specs_dir, kind) is None:
            result.add_error(f"Missing required file: {kind.filename}", f"{CREATE_PREFIX}{kind.filename}")
        else:
            result.files_checked += 1

    _check_project_yaml(specs_dir, result)
    _check_prompts(specs_dir, result)
    _check_architecture(specs_dir, result, verbose)
    _check_requirements(specs_dir, result, verbose)
    _check_tasks(specs_dir, result, verbose)

    logger.debug(
        f"Validated {specs_dir}: {len(result.errors)} errors, {len(result.warnings)} warnings"
    )
    return result


def _check_project_yaml(specs_dir: Path, result: ValidationResult) -> None:
    path = locate_document(specs_dir, DocumentKind.PROJECT)
    if path is None:
        return

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        result.add_error(f"Failed to parse project.yaml: {e}")
        return

    if not data or not isinstance(data, dict):
        result.add_error("project.yaml is empty or invalid")
        return

    for name in ("name", "version", "language"):
        if not data.get(name):
            result.add_error(f"project.yaml missing required field: {name}")

    if not isinstance(data.get("rules"), list):
        result.warnings.append("project.yaml should have a rules section")

    config = ProjectConfiguration.from_dict(data)
    if config.has_prompt_mandate():
        result.config_mandates += 1
    else:
        result.add_error("Missing MANDATE for prompt tracking in project.yaml rules", FIX_ADD_MANDATES)


def _check_prompts(specs_dir: Path, result: ValidationResult) -> None:
    path = locate_document(specs_dir, DocumentKind.PROMPTS)
    if path is None:
        result.add_error("prompts.md is missing - this violates prompt tracking mandate")
        return

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        result.add_error(f"Failed to read prompts.md: {e}")
        return

    if len(content.strip()) < MIN_PROMPTS_LENGTH:
        result.warnings.append(
            "prompts.md appears to have minimal content - ensure AI interactions are being tracked"
        )

    if str(date.today().year) not in content:
        result.warnings.append(
            "prompts.md may not be up to date - ensure recent AI interactions are documented"
        )

    if "MANDATE" in content and "AI interaction" in content:
        result.prompts_mandates += 1


def _read_optional(specs_dir: Path, kind: DocumentKind, result: ValidationResult, verbose: bool) -> Optional[str]:
    """Content of a document for heuristic checks, None if absent or unreadable."""
    path = locate_document(specs_dir, kind)
    if path is None:
        return None
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        if verbose:
            result.warnings.append(f"Could not validate {kind.filename} content: {e}")
        return None


def _check_architecture(specs_dir: Path, result: ValidationResult, verbose: bool) -> None:
    content = _read_optional(specs_dir, DocumentKind.ARCHITECTURE, result, verbose)
    if content is None:
        return

    lowered = content.lower()
    missing = [s for s in ARCHITECTURE_SECTIONS if s.lower() not in lowered]
    if missing:
        result.warnings.append(f"architecture.md missing sections: {', '.join(missing)}")


def _check_requirements(specs_dir: Path, result: ValidationResult, verbose: bool) -> None:
    content = _read_optional(specs_dir, DocumentKind.REQUIREMENTS, result, verbose)
    if content is None:
        return

    if "[Placeholder" in content or "[To be" in content:
        result.warnings.append("requirements.md contains placeholder text that should be updated")
    if "User Stories" not in content and "Functional Requirements" not in content:
        result.warnings.append("requirements.md should include user stories or functional requirements")


def _check_tasks(specs_dir: Path, result: ValidationResult, verbose: bool) -> None:
    content = _read_optional(specs_dir, DocumentKind.TASKS, result, verbose)
    if content is None:
        return

    has_in_progress = "In Progress" in content or "in-progress" in content
    has_completed = "Completed" in content or "completed" in content
    if not has_in_progress and not has_completed:
        result.warnings.append("tasks.md should track task status (In Progress, Completed, etc.)")


def apply_fix(specs_dir: Union[str, Path], fix_id: str) -> bool:
    """Apply one fix to a spec root.

    Args:
        specs_dir: Spec root directory
        fix_id: Fix identifier

    Returns:
        True if the fix changed something; False if it was unknown,
        not needed (file already exists, mandate already present) or failed
    """
    specs_dir = Path(specs_dir)
    try:
        if fix_id == FIX_ADD_MANDATES:
            return _add_mandates(specs_dir)
        if fix_id == FIX_CREATE_PROMPTS_ENTRY:
            return _create_prompts_entry(specs_dir)
        if fix_id.startswith(CREATE_PREFIX):
            kind = DocumentKind.from_filename(fix_id[len(CREATE_PREFIX):])
            if kind is not None:
                return _create_missing(specs_dir, kind)
    except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as e:
        logger.warning(f"Fix {fix_id} failed: {e}")
        return False

    logger.warning(f"Unknown fix: {fix_id}")
    return False


def auto_fix(project_dir: Union[str, Path], fixable: List[str]) -> List[str]:
    """Apply fixes one by one, skipping any that fail.

    Not atomic: fixes applied before a failure stay applied.

    Returns:
        Fix identifiers that were applied
    """
    specs_dir = find_specs_dir(project_dir)
    if specs_dir is None:
        return []

    applied = []
    for fix_id in fixable:
        if apply_fix(specs_dir, fix_id):
            applied.append(fix_id)
    return applied


def _create_missing(specs_dir: Path, kind: DocumentKind) -> bool:
    if locate_document(specs_dir, kind) is not None:
        logger.debug(f"{kind.filename} already exists, nothing to create")
        return False

    path = document_path(specs_dir, kind)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(kind.default_content(), encoding="utf-8")
    logger.debug(f"Created {path}")
    return True


def _add_mandates(specs_dir: Path) -> bool:
    path = locate_document(specs_dir, DocumentKind.PROJECT)
    if path is None:
        return False

    config = ProjectConfiguration.load(path)
    added = config.add_mandates()
    if not added:
        return False

    # Full rewrite: comments and key formatting are not preserved
    config.save(path)
    logger.debug(f"Added {len(added)} mandates to {path}")
    return True


def _create_prompts_entry(specs_dir: Path) -> bool:
    path = locate_document(specs_dir, DocumentKind.PROMPTS) or document_path(specs_dir, DocumentKind.PROMPTS)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(DocumentKind.PROMPTS.default_content(), encoding="utf-8")
    logger.debug(f"Wrote default prompts log to {path}")
    return True
