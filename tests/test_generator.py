"""
Tests for the spec generator.
"""

from datetime import date

import pytest
import yaml

from specpilot.errors import GenerationError
from specpilot.generator import (
    AnalysisResult,
    ArchitectureSummary,
    GenerationContext,
    GenerationOptions,
    SpecGenerator,
    generate_specs,
)
from specpilot.rules import PROMPT_TRACKING_MANDATE


EXPECTED_FILES = [
    "project/project.yaml",
    "architecture/architecture.md",
    "project/requirements.md",
    "architecture/api.yaml",
    "quality/tests.md",
    "planning/tasks.md",
    "development/context.md",
    "development/prompts.md",
    "development/docs.md",
    "project/project-plan.md",
]


@pytest.fixture
def specs_dir(tmp_path):
    options = GenerationOptions(
        project_name="acme-api",
        language="typescript",
        framework="express",
        target_dir=str(tmp_path),
    )
    generate_specs(options)
    return tmp_path / ".specs"


class TestGenerationContext:
    """Tests for context defaults."""

    def test_defaults(self):
        """Author and description get defaults."""
        ctx = GenerationContext.from_options(GenerationOptions(project_name="x", language="python"))
        assert ctx.author == "Your Name"
        assert ctx.description == "A python project"
        assert ctx.contributors == ("Your Name",)
        assert ctx.last_updated == date.today().isoformat()

    def test_description_mentions_framework(self):
        """The derived description names the framework."""
        ctx = GenerationContext.from_options(
            GenerationOptions(project_name="x", language="python", framework="django")
        )
        assert ctx.description == "A python project using django"

    def test_empty_name_rejected(self):
        """A project name is required."""
        with pytest.raises(ValueError):
            GenerationContext.from_options(GenerationOptions(project_name="", language="python"))

    def test_context_is_immutable(self):
        """The context cannot be changed during rendering."""
        ctx = GenerationContext.from_options(GenerationOptions(project_name="x", language="java"))
        with pytest.raises(AttributeError):
            ctx.project_name = "y"

    def test_analysis_from_dict_accepts_camel_case(self):
        """fileTypes from a JSON analysis maps to file_types."""
        analysis = AnalysisResult.from_dict({
            "architecture": {"components": ["api"], "directories": "src/", "fileTypes": {".ts": 4}}
        })
        assert analysis.architecture.file_types == {".ts": 4}


class TestGenerateSpecs:
    """Tests for the generated tree."""

    def test_all_files_exist(self, specs_dir):
        """Every expected document is written."""
        for relative in EXPECTED_FILES:
            assert (specs_dir / relative).is_file(), relative
        assert (specs_dir / "README.md").is_file()
        assert (specs_dir / "spec-update-template.md").is_file()

    def test_subfolders_created(self, specs_dir):
        """The five subfolders exist."""
        for sub in ("project", "architecture", "planning", "quality", "development"):
            assert (specs_dir / sub).is_dir()

    def test_project_name_in_every_file(self, specs_dir):
        """Every generated file mentions the project name."""
        for path in specs_dir.rglob("*"):
            if path.is_file():
                assert "acme-api" in path.read_text(encoding="utf-8"), path.name

    def test_markdown_front_matter(self, specs_dir):
        """Every Markdown file starts with front-matter."""
        for path in specs_dir.rglob("*.md"):
            content = path.read_text(encoding="utf-8")
            assert content.startswith("---"), path.name
            header = content.split("---")[1]
            for key in ("title:", "project:", "language:", "framework:", "lastUpdated:", "sourceOfTruth:"):
                assert key in header, f"{path.name} missing {key}"

    def test_prompts_mandate(self, specs_dir):
        """prompts.md carries the prompt tracking mandate."""
        content = (specs_dir / "development" / "prompts.md").read_text(encoding="utf-8")
        assert "MANDATE" in content
        assert "AI interactions" in content
        assert "prompts.md" in content

    def test_project_yaml_contents(self, specs_dir):
        """project.yaml reflects the options."""
        data = yaml.safe_load((specs_dir / "project" / "project.yaml").read_text(encoding="utf-8"))
        assert data["name"] == "acme-api"
        assert data["language"] == "typescript"
        assert data["framework"] == "express"
        assert data["author"] == "Your Name"
        assert PROMPT_TRACKING_MANDATE in data["rules"]

    def test_api_yaml_parses(self, specs_dir):
        """api.yaml is valid YAML."""
        data = yaml.safe_load((specs_dir / "architecture" / "api.yaml").read_text(encoding="utf-8"))
        assert data["info"]["title"] == "acme-api API"
        assert data["paths"] == {}

    def test_express_architecture(self, specs_dir):
        """The express provider shapes architecture.md."""
        content = (specs_dir / "architecture" / "architecture.md").read_text(encoding="utf-8")
        assert "express" in content
        assert "## Framework: express" in content

    def test_language_only_architecture_does_not_mention_express(self, tmp_path):
        """Without a framework the generic template is used."""
        generate_specs(GenerationOptions(project_name="acme-web", language="typescript",
                                         target_dir=str(tmp_path)))
        content = (tmp_path / ".specs" / "architecture" / "architecture.md").read_text(encoding="utf-8")
        assert "express" not in content

    def test_front_matter_dates(self, specs_dir):
        """lastUpdated is today's date."""
        content = (specs_dir / "planning" / "tasks.md").read_text(encoding="utf-8")
        assert f"lastUpdated: {date.today().isoformat()}" in content

    @pytest.mark.parametrize("name", ["acme: api #1", "@acme", "acme #1"])
    def test_front_matter_is_yaml_for_awkward_names(self, tmp_path, name):
        """Names with YAML syntax characters survive in every front-matter block."""
        generate_specs(GenerationOptions(project_name=name, language="python", target_dir=str(tmp_path)))
        for path in (tmp_path / ".specs").rglob("*.md"):
            header = yaml.safe_load(path.read_text(encoding="utf-8").split("---\n")[1])
            assert header["project"] == name, path.name
            assert header["language"] == "python"
        data = yaml.safe_load((tmp_path / ".specs" / "project" / "project.yaml").read_text(encoding="utf-8"))
        assert data["name"] == name

    def test_custom_specs_name_and_author(self, tmp_path):
        """specs_name and author are honoured."""
        result = generate_specs(GenerationOptions(project_name="shop", language="java",
                                                  target_dir=str(tmp_path), specs_name="docs-specs",
                                                  author="Jane Doe", description="Online shop"))
        assert result.specs_dir == tmp_path / "docs-specs"
        data = yaml.safe_load((tmp_path / "docs-specs" / "project" / "project.yaml").read_text())
        assert data["author"] == "Jane Doe"
        assert data["description"] == "Online shop"

    def test_result_lists_files_in_order(self, tmp_path):
        """README comes first and every document is listed."""
        result = generate_specs(GenerationOptions(project_name="x", language="python",
                                                  target_dir=str(tmp_path)))
        assert result.files_written[0] == "README.md"
        assert result.files_written[-1] == "spec-update-template.md"
        assert len(result.files_written) == 13
        assert result.skipped == []
        assert "Files (13)" in result.format()

    def test_regenerate_overwrites(self, tmp_path):
        """A second run overwrites files and does not fail on existing dirs."""
        options = GenerationOptions(project_name="x", language="python", target_dir=str(tmp_path))
        generate_specs(options)
        tasks = tmp_path / ".specs" / "planning" / "tasks.md"
        tasks.write_text("edited")

        generate_specs(options)
        assert tasks.read_text() != "edited"

    def test_unknown_language_skips_builtin_documents(self, tmp_path):
        """No provider means the two built-in documents are skipped."""
        result = generate_specs(GenerationOptions(project_name="x", language="go",
                                                  target_dir=str(tmp_path)))
        assert set(result.skipped) == {"project/project.yaml", "architecture/architecture.md"}
        assert not (tmp_path / ".specs" / "project" / "project.yaml").exists()
        assert (tmp_path / ".specs" / "planning" / "tasks.md").exists()

    def test_unwritable_target_names_path(self, tmp_path):
        """Filesystem failures raise GenerationError with the path."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(GenerationError) as exc:
            generate_specs(GenerationOptions(project_name="x", language="python",
                                             target_dir=str(blocker)))
        assert "blocker" in exc.value.path


class TestAnalysis:
    """Tests for analysis-driven architecture.md."""

    def test_analysis_rendered(self, tmp_path):
        """Components, directories and file types appear."""
        analysis = AnalysisResult(architecture=ArchitectureSummary(
            components=["BillingService", "InvoiceRepository"],
            directories="src/\n  billing/\n",
            file_types={".py": 12, ".sql": 3},
        ))
        generate_specs(GenerationOptions(project_name="billing", language="python",
                                         target_dir=str(tmp_path), analysis=analysis))
        content = (tmp_path / ".specs" / "architecture" / "architecture.md").read_text(encoding="utf-8")

        assert "- BillingService" in content
        assert "- InvoiceRepository" in content
        assert "  billing/" in content
        assert "| .py | 12 |" in content
        assert "| .sql | 3 |" in content

    def test_placeholders_without_analysis(self, specs_dir):
        """Absent analysis falls back to instructive text."""
        content = (specs_dir / "architecture" / "architecture.md").read_text(encoding="utf-8")
        assert "No components discovered yet" in content
        assert "File type breakdown not available" in content
        assert "routes/" in content

    def test_partial_analysis(self, tmp_path):
        """Missing parts of an analysis fall back individually."""
        analysis = AnalysisResult(architecture=ArchitectureSummary(components=["Core"]))
        generator = SpecGenerator(GenerationOptions(project_name="p", language="java",
                                                    target_dir=str(tmp_path), analysis=analysis))
        generator.generate()
        content = (tmp_path / ".specs" / "architecture" / "architecture.md").read_text(encoding="utf-8")
        assert "- Core" in content
        assert "src/main/java/" in content
        assert "File type breakdown not available" in content
