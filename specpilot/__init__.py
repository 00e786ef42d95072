"""
SpecPilot - Specification-driven development scaffolding.

A small CLI and library for:
- Generating a standardized .specs folder (requirements, architecture,
  tasks, test strategy, AI prompt log)
- Validating an existing .specs folder and auto-fixing common issues
- Migrating legacy .project-spec layouts to the flat .specs layout
- Folding new descriptions into an existing .specs folder

No network calls. Everything is plain files on disk.
"""

__version__ = "0.1.0"
__author__ = "SpecPilot Contributors"

from specpilot.documents import DocumentKind, REQUIRED_DOCUMENTS
from specpilot.generator import GenerationOptions, SpecGenerator, generate_specs
from specpilot.migrator import LayoutKind, migrate, check_migration_needed
from specpilot.validator import ValidationResult, validate, auto_fix

__all__ = [
    "DocumentKind",
    "REQUIRED_DOCUMENTS",
    "GenerationOptions",
    "SpecGenerator",
    "generate_specs",
    "LayoutKind",
    "migrate",
    "check_migration_needed",
    "ValidationResult",
    "validate",
    "auto_fix",
]
