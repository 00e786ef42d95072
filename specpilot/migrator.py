"""
Project Migrator.

Moves a spec tree between layouts:
- complex: legacy nested .project-spec (config/, specs/, tools/, docs/)
- simple: flat .specs with the required documents at the root

A complex -> simple migration maps files through a fixed table, merges
into targets that already exist, and back-fills any required document
that is still missing. Other migrations copy files across without
overwriting.

Usage:
    from specpilot.migrator import LayoutKind, check_migration_needed, migrate

    needed, reason, message = check_migration_needed(project_dir, "complex", "simple")
    if needed:
        result = migrate(project_dir, "complex", "simple")
"""

import logging
import shutil
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, List, NamedTuple, Optional, Union

from specpilot.documents import REQUIRED_DOCUMENTS, DocumentKind
from specpilot.errors import MigrationError

logger = logging.getLogger(__name__)

MERGE_SEPARATOR = "\n\n---\n\n"
BACKUP_PREFIX = "backup-"
MIGRATION_NOTE = "Created during migration from complex to simplified structure."
MIGRATED_PROJECT_NAME = "migrated-project"


class LayoutKind(Enum):
    """A named spec directory layout and its root directory."""
    COMPLEX = ".project-spec"
    SIMPLE = ".specs"

    @property
    def dir_name(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: Union[str, "LayoutKind"]) -> "LayoutKind":
        """Resolve a layout name ("complex", "project-spec", "simple").

        Raises:
            MigrationError: If the name is not a known layout
        """
        if isinstance(name, LayoutKind):
            return name
        layout = _LAYOUT_ALIASES.get(name.lower())
        if layout is None:
            known = ", ".join(sorted(_LAYOUT_ALIASES))
            raise MigrationError(f"Unknown layout '{name}' (expected one of: {known})")
        return layout


_LAYOUT_ALIASES: Dict[str, LayoutKind] = {
    "complex": LayoutKind.COMPLEX,
    "project-spec": LayoutKind.COMPLEX,
    "simple": LayoutKind.SIMPLE,
}


def _complex_mapping() -> Dict[str, DocumentKind]:
    mapping = {kind.filename: kind for kind in REQUIRED_DOCUMENTS}
    mapping.update({
        "config/project.yaml": DocumentKind.PROJECT,
        "specs/architecture/architecture.md": DocumentKind.ARCHITECTURE,
        "specs/features/requirements.md": DocumentKind.REQUIREMENTS,
        "specs/technical/api.yaml": DocumentKind.API,
        "specs/technical/tests.md": DocumentKind.TESTS,
        "tools/tasks.md": DocumentKind.TASKS,
        "docs/context.md": DocumentKind.CONTEXT,
        "docs/prompts.md": DocumentKind.PROMPTS,
        "docs/docs.md": DocumentKind.DOCS,
    })
    return mapping


# Source path (relative or basename) -> document it becomes in the flat layout
COMPLEX_TO_SIMPLE: Dict[str, DocumentKind] = _complex_mapping()


class MigrationCheck(NamedTuple):
    needed: bool
    reason: str
    message: str = ""


@dataclass
class MigrationResult:
    """Counts and warnings from one migration run."""
    files_migrated: int = 0
    files_merged: int = 0
    files_created: int = 0
    warnings: List[str] = field(default_factory=list)
    target_dir: Optional[Path] = None

    def format(self) -> str:
        """Format result for display."""
        lines = [f"Migrated to: {self.target_dir}", ""]
        lines.append(f"Files migrated: {self.files_migrated}")
        lines.append(f"Files merged: {self.files_merged}")
        lines.append(f"Files created: {self.files_created}")

        if self.warnings:
            lines.append(f"\nWarnings ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  - {w}")

        return "\n".join(lines)


def check_migration_needed(
    project_dir: Union[str, Path],
    source: Union[str, LayoutKind],
    target: Union[str, LayoutKind],
) -> MigrationCheck:
    """Check whether a migration can run.

    Args:
        project_dir: Project directory
        source: Source layout name
        target: Target layout name

    Returns:
        MigrationCheck with reason "no_source", "already_migrated" or "ready"
    """
    source_layout = LayoutKind.parse(source)
    target_layout = LayoutKind.parse(target)
    source_dir = Path(project_dir) / source_layout.dir_name
    target_dir = Path(project_dir) / target_layout.dir_name

    if not source_dir.exists():
        return MigrationCheck(
            False, "no_source",
            f'Source structure "{source}" not found. The directory {source_dir} does not exist.',
        )

    if target_dir.exists():
        return MigrationCheck(
            False, "already_migrated",
            f'Target structure "{target}" already exists at {target_dir}.',
        )

    return MigrationCheck(True, "ready", "Migration can proceed")


def validate_source(project_dir: Union[str, Path], source: Union[str, LayoutKind]) -> bool:
    """Check that the source layout's directory exists."""
    return (Path(project_dir) / LayoutKind.parse(source).dir_name).exists()


def create_backup(project_dir: Union[str, Path]) -> Path:
    """Copy the whole project into backup-<timestamp> inside it.

    Earlier backup-* entries are not copied again.

    Returns:
        Path to the backup directory
    """
    project_dir = Path(project_dir)
    timestamp = datetime.now().strftime("%Y-%m-%dT%H-%M-%S-%f")
    backup_dir = project_dir / f"{BACKUP_PREFIX}{timestamp}"
    backup_dir.mkdir(parents=True, exist_ok=True)

    for item in sorted(project_dir.iterdir()):
        if item.name.startswith(BACKUP_PREFIX):
            continue
        if item.is_dir():
            shutil.copytree(item, backup_dir / item.name)
        else:
            shutil.copy2(item, backup_dir / item.name)

    logger.info(f"Backup created at {backup_dir}")
    return backup_dir


def migrate(
    project_dir: Union[str, Path],
    source: Union[str, LayoutKind] = LayoutKind.COMPLEX,
    target: Union[str, LayoutKind] = LayoutKind.SIMPLE,
) -> MigrationResult:
    """Migrate a spec tree from one layout to another.

    Args:
        project_dir: Project directory
        source: Source layout name
        target: Target layout name

    Returns:
        MigrationResult with counts and per-file warnings

    Raises:
        MigrationError: If a layout is unknown, the source directory is
            missing, or source and target are the same
    """
    source_layout = LayoutKind.parse(source)
    target_layout = LayoutKind.parse(target)
    if source_layout is target_layout:
        raise MigrationError(f"Source and target layout are both {source_layout.dir_name}")

    source_dir = Path(project_dir) / source_layout.dir_name
    target_dir = Path(project_dir) / target_layout.dir_name
    if not source_dir.exists():
        raise MigrationError(f"Source directory {source_dir} does not exist")

    target_dir.mkdir(parents=True, exist_ok=True)
    result = MigrationResult(target_dir=target_dir)

    if source_layout is LayoutKind.COMPLEX:
        _migrate_from_complex(source_dir, target_dir, result)
    else:
        _copy_without_overwrite(source_dir, target_dir, result)

    logger.info(
        f"Migration done: {result.files_migrated} migrated, {result.files_merged} merged, "
        f"{result.files_created} created"
    )
    return result


def map_complex_file(relative_path: str) -> Optional[DocumentKind]:
    """Document a complex-layout file becomes, or None if it is dropped.

    The full relative path is tried first, then the basename.
    """
    kind = COMPLEX_TO_SIMPLE.get(relative_path)
    if kind is None:
        kind = COMPLEX_TO_SIMPLE.get(relative_path.rsplit("/", 1)[-1])
    return kind


def _migrate_from_complex(source_dir: Path, target_dir: Path, result: MigrationResult) -> None:
    for source_path in sorted(source_dir.rglob("*")):
        if source_path.is_dir():
            continue

        relative = source_path.relative_to(source_dir).as_posix()
        kind = map_complex_file(relative)
        if kind is None:
            logger.debug(f"No mapping for {relative}, dropped")
            continue

        target_path = target_dir / kind.filename
        try:
            if target_path.exists():
                _merge(source_path, target_path)
                result.files_merged += 1
                logger.debug(f"Merged {relative} into {target_path}")
            else:
                shutil.copyfile(source_path, target_path)
                result.files_migrated += 1
                logger.debug(f"Copied {relative} to {target_path}")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to migrate {relative}: {e}")
            result.warnings.append(f"Failed to migrate {relative}: {e}")

    _backfill_missing(target_dir, result)


def _merge(source_path: Path, target_path: Path) -> None:
    source_content = source_path.read_text(encoding="utf-8")
    target_content = target_path.read_text(encoding="utf-8")
    target_path.write_text(target_content + MERGE_SEPARATOR + source_content, encoding="utf-8")


def _backfill_missing(target_dir: Path, result: MigrationResult) -> None:
    for kind in REQUIRED_DOCUMENTS:
        path = target_dir / kind.filename
        if path.exists():
            continue
        content = kind.default_content(project_name=MIGRATED_PROJECT_NAME, note=MIGRATION_NOTE)
        path.write_text(content, encoding="utf-8")
        result.files_created += 1
        logger.debug(f"Created default {path}")


def _copy_without_overwrite(source_dir: Path, target_dir: Path, result: MigrationResult) -> None:
    for source_path in sorted(source_dir.rglob("*")):
        if source_path.is_dir():
            continue

        relative = source_path.relative_to(source_dir)
        target_path = target_dir / relative
        if target_path.exists():
            result.warnings.append(f"Target file {relative.as_posix()} already exists, skipping")
            continue

        target_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source_path, target_path)
        result.files_migrated += 1
        logger.debug(f"Copied {relative} to {target_path}")
