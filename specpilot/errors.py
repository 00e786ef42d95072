"""
Exception types raised by SpecPilot.

Fatal conditions are raised. Problems that a run can keep going past
(missing spec files, failed per-file copies) are collected on result
objects instead.
"""

from typing import Optional


class SpecPilotError(Exception):
    """Base class for all SpecPilot errors."""


class ConfigError(SpecPilotError):
    """Raised when .specpilot.yaml cannot be read or parsed."""


class TemplateRenderError(SpecPilotError):
    """Raised when a template fails to compile or render."""

    def __init__(self, message: str, template_name: Optional[str] = None):
        self.message = message
        self.template_name = template_name
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.template_name:
            return f"{self.template_name}: {self.message}"
        return self.message


class GenerationError(SpecPilotError):
    """Raised when a spec document cannot be written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write {path}: {reason}")


class MigrationError(SpecPilotError):
    """Raised when a migration cannot start."""
