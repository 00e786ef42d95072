"""
Specify Command - Fold a description into existing specs.

Commands:
- specify: Update requirements, context and the prompt log
"""

import sys

import click


def register(cli):
    """Register specify command with CLI."""

    @cli.command("specify")
    @click.argument("description")
    @click.option("-d", "--dir", "project_dir", default=".", type=click.Path(file_okay=False),
                  help="Project directory")
    @click.option("--specs-name", default=None, help="Name for specs folder")
    @click.option("-u", "--update", is_flag=True, help="Regenerate specs with new description")
    def specify_cmd(description: str, project_dir: str, specs_name: str, update: bool):
        """Record a new description in the project specs.

        DESCRIPTION: What you want to build

        \b
        Example:
            specpilot specify "Add invoice export to CSV"
        """
        from specpilot.config import load_config
        from specpilot.errors import SpecPilotError
        from specpilot.specify import specify

        try:
            config = load_config(project_dir)
            specs_name = specs_name or config.specs_name
            result = specify(project_dir, description, specs_name=specs_name,
                             regenerate=update, author=config.author)
        except SpecPilotError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        click.echo(result.format())
        click.echo("\nNext: specpilot validate")
