"""
Validate Command - Check a .specs folder.

Commands:
- validate: Report missing documents, mandate violations and content issues
"""

import sys

import click


def register(cli):
    """Register validate command with CLI."""

    @cli.command("validate")
    @click.option("-d", "--dir", "project_dir", default=".", type=click.Path(file_okay=False),
                  help="Project directory")
    @click.option("--fix", is_flag=True, help="Auto-fix common issues")
    @click.option("--verbose", is_flag=True, help="Show detailed validation results")
    def validate_cmd(project_dir: str, fix: bool, verbose: bool):
        """Validate project specifications.

        Exits with status 1 when errors remain.

        \b
        Examples:
            specpilot validate
            specpilot validate --fix --verbose
        """
        from specpilot.validator import validate

        result = validate(project_dir, fix=fix, verbose=verbose)
        click.echo(result.format(verbose=verbose))

        if not result.is_valid:
            sys.exit(1)
