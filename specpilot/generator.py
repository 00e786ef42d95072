"""
Spec Generator.

Creates the .specs tree for a project: the root folder, its five
subfolders, and one rendered file per DocumentKind.

project.yaml and architecture.md come from the language/framework
providers; every other document uses a fixed inline template.

Usage:
    from specpilot.generator import GenerationOptions, generate_specs

    options = GenerationOptions(project_name="acme-api", language="typescript",
                                framework="express", target_dir=".")
    result = generate_specs(options)
    print(result.format())
"""

import logging
import os
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional

from specpilot.documents import DEFAULT_SPECS_NAME, SUBFOLDERS, DocumentKind
from specpilot.engine import TemplateEngine
from specpilot.errors import GenerationError
from specpilot.templates import INLINE_TEMPLATES

logger = logging.getLogger(__name__)

DEFAULT_AUTHOR = "Your Name"


@dataclass
class ArchitectureSummary:
    """What a codebase scan found: components, directory tree, file types."""
    components: List[str] = field(default_factory=list)
    directories: str = ""
    file_types: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ArchitectureSummary":
        file_types = data.get("file_types", data.get("fileTypes")) or {}
        return cls(
            components=[str(c) for c in data.get("components") or []],
            directories=data.get("directories") or "",
            file_types={str(k): int(v) for k, v in file_types.items()},
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "components": list(self.components),
            "directories": self.directories,
            "file_types": dict(self.file_types),
        }


@dataclass
class AnalysisResult:
    """Read-only codebase analysis handed to the generator."""
    architecture: Optional[ArchitectureSummary] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisResult":
        arch = data.get("architecture")
        return cls(architecture=ArchitectureSummary.from_dict(arch) if arch else None)


@dataclass
class GenerationOptions:
    """Inputs for one generation run.

    Attributes:
        project_name: Project name, written into every document
        language: Language key (checked by the caller, not here)
        framework: Optional framework key
        target_dir: Directory the spec root is created in
        specs_name: Name of the spec root folder
        author: Author name, defaults to a placeholder
        description: Project description, derived when omitted
        analysis: Optional codebase analysis
        ide: IDE selector; accepted for callers, not used by the core
    """
    project_name: str
    language: str
    framework: Optional[str] = None
    target_dir: str = "."
    specs_name: str = DEFAULT_SPECS_NAME
    author: Optional[str] = None
    description: Optional[str] = None
    analysis: Optional[AnalysisResult] = None
    ide: Optional[str] = None

    @property
    def specs_dir(self) -> Path:
        return Path(self.target_dir) / self.specs_name


@dataclass(frozen=True)
class GenerationContext:
    """Substitution environment shared by every template in a run."""
    project_name: str
    language: str
    framework: Optional[str]
    author: str
    description: str
    last_updated: str
    contributors: tuple
    architecture: Optional[ArchitectureSummary] = None

    @classmethod
    def from_options(cls, options: GenerationOptions) -> "GenerationContext":
        if not options.project_name:
            raise ValueError("project_name must not be empty")

        author = options.author or DEFAULT_AUTHOR
        description = options.description or default_description(options.language, options.framework)
        architecture = options.analysis.architecture if options.analysis else None

        return cls(
            project_name=options.project_name,
            language=options.language,
            framework=options.framework or None,
            author=author,
            description=description,
            last_updated=date.today().isoformat(),
            contributors=(author,),
            architecture=architecture,
        )

    def to_template_vars(self) -> Dict[str, Any]:
        return {
            "project_name": self.project_name,
            "language": self.language,
            "framework": self.framework,
            "author": self.author,
            "description": self.description,
            "last_updated": self.last_updated,
            "current_date": self.last_updated,
            "contributors": list(self.contributors),
            "architecture": self.architecture.to_dict() if self.architecture else None,
        }


@dataclass
class GenerationResult:
    """Result of a generation run.

    Attributes:
        specs_dir: Spec root that was written
        files_written: Paths relative to the spec root, in write order
        skipped: Documents with no template for this language/framework
    """
    specs_dir: Path
    files_written: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    def format(self) -> str:
        """Format result for display."""
        lines = [f"Specs created at: {self.specs_dir}", ""]

        lines.append(f"Files ({len(self.files_written)}):")
        for f in self.files_written:
            lines.append(f"  + {f}")

        if self.skipped:
            lines.append(f"\nSkipped ({len(self.skipped)}):")
            for f in self.skipped:
                lines.append(f"  - {f} (no template)")

        return "\n".join(lines)


def default_description(language: str, framework: Optional[str] = None) -> str:
    if framework:
        return f"A {language} project using {framework}"
    return f"A {language} project"


class SpecGenerator:
    """Renders and writes the spec tree for one set of options."""

    def __init__(self, options: GenerationOptions, engine: Optional[TemplateEngine] = None):
        self.options = options
        self.engine = engine or TemplateEngine()
        self.context = GenerationContext.from_options(options)
        self.specs_dir = options.specs_dir

    def generate(self) -> GenerationResult:
        """Create directories and write every document.

        Raises:
            GenerationError: If a directory or file cannot be written
        """
        result = GenerationResult(specs_dir=self.specs_dir)
        self._create_directories()

        for kind in DocumentKind:
            template = self.template_for(kind)
            if not template:
                logger.warning(
                    f"No template for {kind.filename} "
                    f"({self.context.language}/{self.context.framework}), skipping"
                )
                result.skipped.append(kind.relative_path)
                continue

            content = self.engine.render_from_string(template, self.context, name=kind.filename)
            self._write(kind.relative_path, content)
            result.files_written.append(kind.relative_path)

        logger.info(f"Generated {len(result.files_written)} spec files in {self.specs_dir}")
        return result

    def template_for(self, kind: DocumentKind) -> str:
        """Template source for a document, "" when none applies."""
        if kind.builtin:
            return self.engine.get_builtin_template(
                self.context.language, self.context.framework, kind.filename
            )
        return INLINE_TEMPLATES.get(kind, "")

    def _create_directories(self) -> None:
        for directory in [self.specs_dir] + [self.specs_dir / sub for sub in SUBFOLDERS]:
            try:
                os.makedirs(directory, exist_ok=True)
            except OSError as e:
                raise GenerationError(str(directory), e.strerror or str(e)) from e

    def _write(self, relative_path: str, content: str) -> None:
        path = self.specs_dir / relative_path
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise GenerationError(str(path), e.strerror or str(e)) from e
        logger.debug(f"Wrote {path}")


def generate_specs(options: GenerationOptions) -> GenerationResult:
    """Generate the full spec tree.

    Args:
        options: Generation inputs

    Returns:
        GenerationResult listing the written files

    Raises:
        GenerationError: If the target is not writable
        TemplateRenderError: If a template fails to render
    """
    return SpecGenerator(options).generate()
