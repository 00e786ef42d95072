"""
Project configuration (project.yaml) and its rules.

Rules in project.yaml are free text. A few of them are "mandates" that
the validator insists on. Rules are classified once when the file is
parsed; the canonical mandate strings are recognised exactly, anything
else falls back to pattern matching.

Usage:
    config = ProjectConfiguration.load(path)
    if not config.has_prompt_mandate():
        config.add_mandates()
        config.save(path)
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml


PROMPT_TRACKING_MANDATE = (
    "MANDATE: Update .specs/prompts.md with ALL AI interactions and "
    "development prompts by default"
)
CHRONOLOGY_MANDATE = (
    "MANDATE: Maintain chronological prompt history for complete "
    "development traceability"
)

# Appended by the add-mandates fix, in this order
CANONICAL_MANDATES: List[str] = [PROMPT_TRACKING_MANDATE, CHRONOLOGY_MANDATE]

_PROMPT_MANDATE_PATTERN = re.compile(
    r"MANDATE.*prompt.*tracking|MANDATE.*prompts\.md", re.IGNORECASE
)
_CHRONOLOGY_MANDATE_PATTERN = re.compile(
    r"MANDATE.*chronolog", re.IGNORECASE
)

# Keys with a dedicated field on ProjectConfiguration
_KNOWN_KEYS = ("name", "version", "language", "framework", "description", "rules", "ai_context")


class RuleKind(Enum):
    """Classification of a project.yaml rule."""
    CUSTOM = "custom"
    PROMPT_TRACKING_MANDATE = "prompt_tracking_mandate"
    CHRONOLOGY_MANDATE = "chronology_mandate"


@dataclass(frozen=True)
class Rule:
    """A single rule with its classification.

    `raw` holds the YAML value when it was not a plain string (for
    example `- Style: follow pep8` parses as a mapping); saving writes
    that value back unchanged.
    """
    text: str
    kind: RuleKind = RuleKind.CUSTOM
    raw: Any = field(default=None, compare=False, repr=False)

    @classmethod
    def parse(cls, value: Any) -> "Rule":
        """Classify a rule.

        Exact canonical mandates win; otherwise the prompt-tracking and
        chronology patterns are tried in that order.
        """
        raw = None if isinstance(value, str) else value
        text = "" if value is None else str(value)

        if text == PROMPT_TRACKING_MANDATE:
            return cls(text, RuleKind.PROMPT_TRACKING_MANDATE)
        if text == CHRONOLOGY_MANDATE:
            return cls(text, RuleKind.CHRONOLOGY_MANDATE)

        if _PROMPT_MANDATE_PATTERN.search(text):
            return cls(text, RuleKind.PROMPT_TRACKING_MANDATE, raw)
        if _CHRONOLOGY_MANDATE_PATTERN.search(text):
            return cls(text, RuleKind.CHRONOLOGY_MANDATE, raw)

        return cls(text, raw=raw)

    @property
    def value(self) -> Any:
        """What gets written back to project.yaml."""
        return self.text if self.raw is None else self.raw

    @property
    def is_mandate(self) -> bool:
        return self.kind is not RuleKind.CUSTOM

    def mentions_prompt_mandate(self) -> bool:
        """Loose check used before appending mandates (MANDATE + prompt)."""
        return "MANDATE" in self.text and "prompt" in self.text


@dataclass
class ProjectConfiguration:
    """Parsed contents of project.yaml.

    Keys without a dedicated field (team, build, dependencies, author, ...)
    are kept in `extra` so a load/save cycle does not drop them. Known
    keys are written only if they were loaded or have a value. A `rules`
    value that is not a list is kept in `invalid_rules` and blocks
    add_mandates. Comments and formatting are not preserved.
    """
    name: str = ""
    version: str = ""
    language: str = ""
    description: str = ""
    framework: Optional[str] = None
    rules: List[Rule] = field(default_factory=list)
    ai_context: List[str] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)
    loaded_keys: Tuple[str, ...] = field(default=(), compare=False, repr=False)
    invalid_rules: Any = field(default=None, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProjectConfiguration":
        raw_rules = data.get("rules")
        raw_context = data.get("ai_context")
        rules_ok = raw_rules is None or isinstance(raw_rules, list)
        return cls(
            name=_scalar(data.get("name")),
            version=_scalar(data.get("version")),
            language=_scalar(data.get("language")),
            description=_scalar(data.get("description")),
            framework=_scalar(data.get("framework")) or None,
            rules=[Rule.parse(r) for r in raw_rules] if isinstance(raw_rules, list) else [],
            ai_context=[str(c) for c in raw_context] if isinstance(raw_context, list) else [],
            extra={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
            loaded_keys=tuple(k for k in _KNOWN_KEYS if k in data),
            invalid_rules=None if rules_ok else raw_rules,
        )

    def _keep(self, key: str, value: Any) -> bool:
        return bool(value) or key in self.loaded_keys

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for key in ("name", "version", "language", "framework", "description"):
            value = getattr(self, key)
            if self._keep(key, value):
                data[key] = value
        if self.invalid_rules is not None:
            data["rules"] = self.invalid_rules
        elif self._keep("rules", self.rules):
            data["rules"] = [r.value for r in self.rules]
        if self._keep("ai_context", self.ai_context):
            data["ai_context"] = list(self.ai_context)
        data.update(self.extra)
        return data

    @classmethod
    def loads(cls, content: str) -> "ProjectConfiguration":
        """Parse project.yaml text.

        Raises:
            yaml.YAMLError: If the text is not valid YAML
            ValueError: If the document is empty or not a mapping
        """
        data = yaml.safe_load(content)
        if not data or not isinstance(data, dict):
            raise ValueError("project.yaml is empty or invalid")
        return cls.from_dict(data)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "ProjectConfiguration":
        with open(path, "r", encoding="utf-8") as f:
            return cls.loads(f.read())

    def dumps(self) -> str:
        return yaml.safe_dump(
            self.to_dict(),
            sort_keys=False,
            allow_unicode=True,
            indent=2,
            width=120,
        )

    def save(self, path: Union[str, Path]) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.dumps())

    def mandates(self, kind: Optional[RuleKind] = None) -> List[Rule]:
        """Rules recognised as mandates, optionally of one kind."""
        return [
            r for r in self.rules
            if r.is_mandate and (kind is None or r.kind is kind)
        ]

    def has_prompt_mandate(self) -> bool:
        return bool(self.mandates(RuleKind.PROMPT_TRACKING_MANDATE))

    def add_mandates(self) -> List[str]:
        """Append the canonical mandates unless a prompt mandate is present.

        Returns:
            The rule strings that were appended (empty if none)

        Raises:
            ValueError: If the loaded rules value is not a list
        """
        if self.invalid_rules is not None:
            raise ValueError("project.yaml rules must be a list to add mandates")
        if any(r.mentions_prompt_mandate() for r in self.rules):
            return []

        existing = {r.text for r in self.rules}
        added = []
        for mandate in CANONICAL_MANDATES:
            if mandate not in existing:
                self.rules.append(Rule.parse(mandate))
                added.append(mandate)
        return added


def _scalar(value: Any) -> str:
    """Stringify a YAML scalar, treating null as empty."""
    if value is None:
        return ""
    return str(value)
