"""
Specification document catalog.

Every document SpecPilot knows about is a DocumentKind member. The
generator, validator and migrator all read filenames, subfolders and
default contents from here, so the three never disagree about what a
complete .specs folder looks like.

Layout of a generated spec root:
    .specs/
    ├── README.md
    ├── spec-update-template.md
    ├── project/        project.yaml, requirements.md, project-plan.md
    ├── architecture/   architecture.md, api.yaml
    ├── planning/       tasks.md, roadmap.md
    ├── quality/        tests.md
    └── development/    docs.md, context.md, prompts.md

Usage:
    from specpilot.documents import DocumentKind, locate_document

    path = locate_document(specs_dir, DocumentKind.PROJECT)
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Tuple, Union


DEFAULT_SPECS_NAME = ".specs"

# Subfolders of a spec root, in creation order
SUBFOLDERS: Tuple[str, ...] = (
    "project",
    "architecture",
    "planning",
    "quality",
    "development",
)


class DocumentKind(Enum):
    """A logical specification document.

    Members are declared in generation order. Each value is
    (filename, subfolder, required, builtin) where an empty subfolder
    means the spec root itself and builtin marks documents whose
    template depends on language/framework.
    """
    README = ("README.md", "", False, False)
    PROJECT = ("project.yaml", "project", True, True)
    REQUIREMENTS = ("requirements.md", "project", True, False)
    ARCHITECTURE = ("architecture.md", "architecture", True, True)
    API = ("api.yaml", "architecture", True, False)
    TASKS = ("tasks.md", "planning", True, False)
    ROADMAP = ("roadmap.md", "planning", False, False)
    DOCS = ("docs.md", "development", True, False)
    CONTEXT = ("context.md", "development", True, False)
    PROJECT_PLAN = ("project-plan.md", "project", False, False)
    PROMPTS = ("prompts.md", "development", True, False)
    TESTS = ("tests.md", "quality", True, False)
    SPEC_UPDATE_TEMPLATE = ("spec-update-template.md", "", False, False)

    def __init__(self, filename: str, subfolder: str, required: bool, builtin: bool):
        self.filename = filename
        self.subfolder = subfolder
        self.required = required
        self.builtin = builtin

    @property
    def relative_path(self) -> str:
        """Path of this document below the spec root (nested layout)."""
        if self.subfolder:
            return f"{self.subfolder}/{self.filename}"
        return self.filename

    @property
    def is_markdown(self) -> bool:
        return self.filename.endswith(".md")

    @classmethod
    def from_filename(cls, filename: str) -> Optional["DocumentKind"]:
        """Look up a document by its canonical filename."""
        for kind in cls:
            if kind.filename == filename:
                return kind
        return None

    def default_content(self, project_name: str = "project-name", note: str = "") -> str:
        """Canned content used to back-fill a missing document.

        Args:
            project_name: Name written into the document
            note: Optional provenance note (e.g. "created during migration")

        Returns:
            Document text that passes the validator's structural checks
        """
        from specpilot.defaults import default_content
        return default_content(self, project_name=project_name, note=note)


# The nine documents every spec root must contain, in validation order
REQUIRED_DOCUMENTS: Tuple[DocumentKind, ...] = (
    DocumentKind.PROJECT,
    DocumentKind.ARCHITECTURE,
    DocumentKind.REQUIREMENTS,
    DocumentKind.API,
    DocumentKind.TESTS,
    DocumentKind.TASKS,
    DocumentKind.CONTEXT,
    DocumentKind.PROMPTS,
    DocumentKind.DOCS,
)


def uses_nested_layout(specs_dir: Union[str, Path]) -> bool:
    """Check whether a spec root has any of the standard subfolders."""
    root = Path(specs_dir)
    return any((root / sub).is_dir() for sub in SUBFOLDERS)


def locate_document(specs_dir: Union[str, Path], kind: DocumentKind) -> Optional[Path]:
    """Find a document in a spec root.

    Looks in the document's subfolder first, then directly under the
    root (flat layout produced by migration or older versions).

    Args:
        specs_dir: Spec root directory
        kind: Document to find

    Returns:
        Path to the existing file, or None if absent in both places
    """
    root = Path(specs_dir)
    candidates = [root / kind.relative_path]
    if kind.subfolder:
        candidates.append(root / kind.filename)

    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def document_path(specs_dir: Union[str, Path], kind: DocumentKind) -> Path:
    """Where a missing document should be created.

    Nested roots get the file in its subfolder; flat roots get it
    directly under the root.
    """
    root = Path(specs_dir)
    if kind.subfolder and uses_nested_layout(root):
        return root / kind.relative_path
    return root / kind.filename
