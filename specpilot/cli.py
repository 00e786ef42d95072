"""
SpecPilot CLI - Specification folders for spec-driven development.

Commands:
- init: Generate a .specs folder for a project
- validate: Check a .specs folder, optionally fixing issues
- migrate: Convert a legacy .project-spec layout to .specs
- list: Show available templates
- specify: Fold a new description into existing specs
"""

import logging

import click

from specpilot import __version__
from specpilot.cli_commands import register_all


@click.group()
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(debug: bool):
    """SpecPilot - Specification-driven development scaffolding.

    Generate, validate and maintain a .specs folder describing
    requirements, architecture, tasks and AI prompt history.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


register_all(cli)


# ============================================================================
# Entry Point
# ============================================================================

def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
