"""
Tests for layout migration.
"""

import pytest

from specpilot.documents import REQUIRED_DOCUMENTS, DocumentKind
from specpilot.errors import MigrationError
from specpilot.migrator import (
    LayoutKind,
    check_migration_needed,
    create_backup,
    map_complex_file,
    migrate,
    validate_source,
)
from specpilot.validator import validate


def write(path, content):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@pytest.fixture
def complex_project(tmp_path):
    source = tmp_path / ".project-spec"
    write(source / "config" / "project.yaml", "name: legacy\nversion: '0.9'\nlanguage: python\n")
    write(source / "specs" / "architecture" / "architecture.md", "# Legacy architecture\n")
    write(source / "docs" / "prompts.md", "# Legacy prompts\n")
    write(source / "notes" / "random.txt", "not mapped\n")
    return tmp_path


class TestLayoutKind:
    """Tests for layout name resolution."""

    def test_aliases(self):
        """complex and project-spec are the same layout."""
        assert LayoutKind.parse("complex") is LayoutKind.COMPLEX
        assert LayoutKind.parse("project-spec") is LayoutKind.COMPLEX
        assert LayoutKind.parse("simple") is LayoutKind.SIMPLE
        assert LayoutKind.parse(LayoutKind.SIMPLE) is LayoutKind.SIMPLE

    def test_dir_names(self):
        """Each layout has a root directory."""
        assert LayoutKind.COMPLEX.dir_name == ".project-spec"
        assert LayoutKind.SIMPLE.dir_name == ".specs"

    def test_unknown_layout(self):
        """Unknown names are rejected."""
        with pytest.raises(MigrationError):
            LayoutKind.parse("nested")


class TestCheckMigrationNeeded:
    """Tests for the migration pre-check."""

    def test_no_source(self, tmp_path):
        """A missing source layout means no migration."""
        check = check_migration_needed(tmp_path, "complex", "simple")
        assert check.needed is False
        assert check.reason == "no_source"

    def test_already_migrated(self, complex_project):
        """An existing target means already migrated."""
        (complex_project / ".specs").mkdir()
        needed, reason, _ = check_migration_needed(complex_project, "complex", "simple")
        assert needed is False
        assert reason == "already_migrated"

    def test_ready(self, complex_project):
        """Source present and target absent means migration is needed."""
        check = check_migration_needed(complex_project, "project-spec", "simple")
        assert check.needed is True
        assert check.reason == "ready"

    def test_validate_source(self, complex_project):
        """validate_source checks the source directory only."""
        assert validate_source(complex_project, "complex")
        assert not validate_source(complex_project, "simple")


class TestMapping:
    """Tests for the complex-to-flat filename table."""

    @pytest.mark.parametrize("relative,kind", [
        ("config/project.yaml", DocumentKind.PROJECT),
        ("specs/features/requirements.md", DocumentKind.REQUIREMENTS),
        ("specs/technical/api.yaml", DocumentKind.API),
        ("tools/tasks.md", DocumentKind.TASKS),
        ("docs/context.md", DocumentKind.CONTEXT),
        ("prompts.md", DocumentKind.PROMPTS),
        ("elsewhere/docs.md", DocumentKind.DOCS),
    ])
    def test_mapped(self, relative, kind):
        """Known relative paths and basenames map to documents."""
        assert map_complex_file(relative) is kind

    def test_unmapped(self):
        """Other files are dropped."""
        assert map_complex_file("notes/random.txt") is None
        assert map_complex_file("roadmap.md") is None


class TestMigrateComplex:
    """Tests for complex -> simple migration."""

    def test_copies_mapped_files(self, complex_project):
        """Mapped files are copied byte for byte."""
        result = migrate(complex_project, "complex", "simple")
        target = complex_project / ".specs"

        assert (target / "project.yaml").read_text() == "name: legacy\nversion: '0.9'\nlanguage: python\n"
        assert (target / "architecture.md").read_text() == "# Legacy architecture\n"
        assert result.files_migrated == 3
        assert result.files_merged == 0

    def test_unmapped_files_dropped(self, complex_project):
        """Unmapped files are neither copied nor counted."""
        migrate(complex_project, "complex", "simple")
        assert not (complex_project / ".specs" / "random.txt").exists()

    def test_backfills_missing(self, complex_project):
        """Still-missing required files are created with defaults."""
        result = migrate(complex_project, "complex", "simple")
        target = complex_project / ".specs"

        assert result.files_created == 6
        for kind in REQUIRED_DOCUMENTS:
            assert (target / kind.filename).is_file(), kind.filename
        assert "migration" in (target / "tasks.md").read_text()

    def test_merge_existing_target(self, complex_project):
        """An existing target gets old + separator + new."""
        target = complex_project / ".specs"
        write(target / "project.yaml", "old: content\n")
        source_content = (complex_project / ".project-spec" / "config" / "project.yaml").read_text()

        result = migrate(complex_project, "complex", "simple")

        merged = (target / "project.yaml").read_text()
        assert merged == "old: content\n" + "\n\n---\n\n" + source_content
        assert result.files_merged == 1
        assert result.files_migrated == 2

    def test_relative_and_basename_both_map(self, tmp_path):
        """Two sources for one document are merged in walk order."""
        source = tmp_path / ".project-spec"
        write(source / "docs" / "docs.md", "first")
        write(source / "docs.md", "second")

        result = migrate(tmp_path, "complex", "simple")
        assert result.files_migrated == 1
        assert result.files_merged == 1
        assert (tmp_path / ".specs" / "docs.md").read_text() in (
            "first\n\n---\n\nsecond", "second\n\n---\n\nfirst",
        )

    def test_per_file_failure_is_warning(self, complex_project):
        """A failing file becomes a warning and the walk continues."""
        (complex_project / ".specs").mkdir()
        # A directory where a file should be makes the copy fail
        (complex_project / ".specs" / "architecture.md").mkdir()

        result = migrate(complex_project, "complex", "simple")
        assert any(w.startswith("Failed to migrate specs/architecture/architecture.md") for w in result.warnings)
        assert (complex_project / ".specs" / "project.yaml").is_file()

    def test_migrated_tree_validates(self, tmp_path):
        """A migrated tree with back-filled documents passes validation."""
        write(tmp_path / ".project-spec" / "docs" / "context.md", "# Context\n")
        migrate(tmp_path, "complex", "simple")
        result = validate(tmp_path)
        assert result.is_valid, result.errors

    def test_missing_source_raises(self, tmp_path):
        """Migration without a source directory is fatal."""
        with pytest.raises(MigrationError):
            migrate(tmp_path, "complex", "simple")

    def test_same_layout_raises(self, complex_project):
        """Source and target must differ."""
        with pytest.raises(MigrationError):
            migrate(complex_project, "complex", "project-spec")


class TestMigrateSimple:
    """Tests for copy-only migration."""

    def test_copies_without_overwrite(self, tmp_path):
        """Existing targets are skipped with a warning."""
        write(tmp_path / ".specs" / "project" / "project.yaml", "new")
        write(tmp_path / ".specs" / "tasks.md", "tasks")
        write(tmp_path / ".project-spec" / "tasks.md", "existing")

        result = migrate(tmp_path, "simple", "complex")

        assert (tmp_path / ".project-spec" / "tasks.md").read_text() == "existing"
        assert (tmp_path / ".project-spec" / "project" / "project.yaml").read_text() == "new"
        assert result.files_migrated == 1
        assert result.warnings == ["Target file tasks.md already exists, skipping"]
        assert result.files_created == 0


class TestBackup:
    """Tests for project backups."""

    def test_backup_copies_everything(self, complex_project):
        """All files and folders are copied into backup-<timestamp>."""
        write(complex_project / "README.md", "readme")
        backup = create_backup(complex_project)

        assert backup.parent == complex_project
        assert backup.name.startswith("backup-")
        assert (backup / "README.md").read_text() == "readme"
        assert (backup / ".project-spec" / "config" / "project.yaml").is_file()

    def test_backup_skips_earlier_backups(self, complex_project):
        """Earlier backups are not nested into new ones."""
        first = create_backup(complex_project)
        second = create_backup(complex_project)

        assert first != second
        assert not (second / first.name).exists()
