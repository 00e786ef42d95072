"""
Tests for project.yaml parsing and mandate rules.
"""

import pytest
import yaml

from specpilot.rules import (
    CANONICAL_MANDATES,
    CHRONOLOGY_MANDATE,
    PROMPT_TRACKING_MANDATE,
    ProjectConfiguration,
    Rule,
    RuleKind,
)


class TestRule:
    """Tests for rule classification."""

    def test_canonical_mandates_recognised(self):
        """The canonical strings get their own kinds."""
        assert Rule.parse(PROMPT_TRACKING_MANDATE).kind is RuleKind.PROMPT_TRACKING_MANDATE
        assert Rule.parse(CHRONOLOGY_MANDATE).kind is RuleKind.CHRONOLOGY_MANDATE

    @pytest.mark.parametrize("text", [
        "MANDATE: keep prompt tracking on",
        "mandate - all prompt history tracking is required",
        "MANDATE: log everything in prompts.md",
    ])
    def test_pattern_matches_prompt_mandate(self, text):
        """Custom wording still counts as the prompt mandate."""
        assert Rule.parse(text).kind is RuleKind.PROMPT_TRACKING_MANDATE

    def test_chronology_pattern(self):
        """Chronology wording is recognised."""
        assert Rule.parse("MANDATE: chronological order").kind is RuleKind.CHRONOLOGY_MANDATE

    def test_custom_rule(self):
        """Ordinary rules are custom."""
        rule = Rule.parse("Write tests")
        assert rule.kind is RuleKind.CUSTOM
        assert not rule.is_mandate

    def test_prompts_without_mandate_is_custom(self):
        """Mentioning prompts.md alone is not a mandate."""
        assert Rule.parse("Update prompts.md sometimes").kind is RuleKind.CUSTOM

    def test_non_string_rule(self):
        """Non-string YAML values are stringified."""
        assert Rule.parse(42).text == "42"
        assert Rule.parse(None).text == ""

    def test_mentions_prompt_mandate_is_case_sensitive(self):
        """The loose pre-append check wants MANDATE and lowercase prompt."""
        assert Rule("MANDATE: prompt log").mentions_prompt_mandate()
        assert not Rule("mandate: prompt log").mentions_prompt_mandate()


class TestProjectConfiguration:
    """Tests for ProjectConfiguration load/save."""

    def test_loads_fields_and_extra(self):
        """Known keys become fields, the rest is kept."""
        config = ProjectConfiguration.loads(
            "name: shop\nversion: '2.0'\nlanguage: python\nframework: django\n"
            "rules:\n  - Write tests\nteam:\n  code_review_required: true\n"
        )
        assert config.name == "shop"
        assert config.version == "2.0"
        assert config.framework == "django"
        assert [r.text for r in config.rules] == ["Write tests"]
        assert config.extra == {"team": {"code_review_required": True}}

    @pytest.mark.parametrize("content", ["", "just a string", "- a\n- list\n"])
    def test_loads_rejects_non_mapping(self, content):
        """Empty or non-mapping documents are invalid."""
        with pytest.raises(ValueError):
            ProjectConfiguration.loads(content)

    def test_loads_rejects_bad_yaml(self):
        """Malformed YAML propagates the parser error."""
        with pytest.raises(yaml.YAMLError):
            ProjectConfiguration.loads("name: [unclosed")

    def test_rules_not_a_list(self):
        """A scalar rules value yields no rules."""
        config = ProjectConfiguration.loads("name: x\nrules: nope\n")
        assert config.rules == []

    def test_scalar_rules_block_add_mandates(self):
        """A scalar rules value is kept and add_mandates refuses to run."""
        config = ProjectConfiguration.loads("name: x\nrules: Always write tests\n")
        with pytest.raises(ValueError):
            config.add_mandates()
        assert yaml.safe_load(config.dumps())["rules"] == "Always write tests"

    def test_mapping_rule_written_back_unchanged(self):
        """An unquoted `key: value` rule keeps its YAML shape on save."""
        config = ProjectConfiguration.loads("name: x\nrules:\n  - 'Be nice'\n  - Style: follow pep8\n")
        config.add_mandates()
        data = yaml.safe_load(config.dumps())
        assert data["rules"] == ["Be nice", {"Style": "follow pep8"}, *CANONICAL_MANDATES]

    def test_absent_keys_not_added(self):
        """Saving does not invent description or ai_context."""
        config = ProjectConfiguration.loads("name: x\nversion: '1'\nlanguage: go\nrules:\n  - a\n")
        config.add_mandates()
        data = yaml.safe_load(config.dumps())
        assert "description" not in data
        assert "ai_context" not in data
        assert "framework" not in data

    def test_present_empty_keys_kept(self):
        """Keys that were loaded survive even when empty."""
        config = ProjectConfiguration.loads("name: x\ndescription: ''\nai_context: []\n")
        data = yaml.safe_load(config.dumps())
        assert data["description"] == ""
        assert data["ai_context"] == []

    def test_save_keeps_extra_keys(self, tmp_path):
        """Keys without a field survive a save/load cycle."""
        path = tmp_path / "project.yaml"
        path.write_text("name: x\nversion: 1\nlanguage: java\nbuild:\n  command: mvn package\n")

        config = ProjectConfiguration.load(path)
        config.save(path)

        data = yaml.safe_load(path.read_text())
        assert data["build"] == {"command": "mvn package"}
        assert data["language"] == "java"

    def test_add_mandates_appends_both(self):
        """Both canonical mandates are appended when none are present."""
        config = ProjectConfiguration(name="x", rules=[Rule.parse("Write tests")])
        added = config.add_mandates()
        assert added == CANONICAL_MANDATES
        assert [r.text for r in config.rules][-2:] == CANONICAL_MANDATES
        assert config.has_prompt_mandate()

    def test_add_mandates_noop_when_present(self):
        """Nothing is added when a rule already mentions the prompt mandate."""
        config = ProjectConfiguration(rules=[Rule.parse("MANDATE: prompt logging")])
        assert config.add_mandates() == []
        assert len(config.rules) == 1

    def test_mandates_filter(self):
        """mandates() filters by kind."""
        config = ProjectConfiguration(rules=[Rule.parse(r) for r in ["a", *CANONICAL_MANDATES]])
        assert len(config.mandates()) == 2
        assert len(config.mandates(RuleKind.CHRONOLOGY_MANDATE)) == 1
