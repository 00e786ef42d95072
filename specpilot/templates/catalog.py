"""
Template registry for discovery and listing.

The registry describes template "flavors" per language/framework so the
`list` command can show what is available. Generation does not read it;
rendering goes through the providers in specpilot.templates.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from specpilot.documents import REQUIRED_DOCUMENTS


def _required_files() -> List[str]:
    return [kind.filename for kind in REQUIRED_DOCUMENTS]


@dataclass
class TemplateEntry:
    """One listed template flavor."""
    name: str
    language: str
    description: str
    framework: Optional[str] = None
    files: List[str] = field(default_factory=_required_files)

    @property
    def is_generic(self) -> bool:
        return self.framework is None or self.name == "generic"


_BUILTIN_ENTRIES = [
    ("generic", "typescript", None, "Basic TypeScript project structure"),
    ("react", "typescript", "react", "React application with modern tooling"),
    ("express", "typescript", "express", "REST API server setup"),
    ("next", "typescript", "next", "Next.js full-stack application"),
    ("cli", "typescript", "cli", "Command-line tool development"),
    ("generic", "javascript", None, "Basic JavaScript (Node.js) project structure"),
    ("express", "javascript", "express", "REST API server in plain JavaScript"),
    ("generic", "python", None, "Basic Python project structure"),
    ("fastapi", "python", "fastapi", "Modern API development"),
    ("django", "python", "django", "Web application framework"),
    ("data-science", "python", "data-science", "Jupyter, pandas, scikit-learn setup"),
    ("generic", "java", None, "Maven/Gradle project structure"),
    ("spring-boot", "java", "spring-boot", "Microservices development"),
]


class TemplateRegistry:
    """In-memory catalog of template entries.

    Each instance starts with the built-in entries; add_template only
    affects that instance.
    """

    def __init__(self):
        self._templates: List[TemplateEntry] = [
            TemplateEntry(name=name, language=language, framework=framework, description=description)
            for name, language, framework, description in _BUILTIN_ENTRIES
        ]

    def get_templates(self, language: Optional[str] = None) -> List[TemplateEntry]:
        """All entries, or only those for one language."""
        if language:
            return [t for t in self._templates if t.language == language]
        return list(self._templates)

    def get_template(self, language: str, framework: Optional[str] = None) -> Optional[TemplateEntry]:
        """Find an entry.

        Args:
            language: Language key
            framework: Framework key; None selects the language's generic entry

        Returns:
            First matching entry or None
        """
        for entry in self._templates:
            if entry.language != language:
                continue
            if framework:
                if entry.framework == framework:
                    return entry
            elif entry.is_generic:
                return entry
        return None

    def add_template(self, entry: TemplateEntry) -> None:
        self._templates.append(entry)
