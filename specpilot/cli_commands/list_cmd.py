"""
List Command - Show available templates.

Commands:
- list: Template flavors per language/framework
"""

import click

from specpilot.config import SUPPORTED_LANGUAGES


def register(cli):
    """Register list command with CLI."""

    @cli.command("list")
    @click.option("--lang", default=None, type=click.Choice(SUPPORTED_LANGUAGES),
                  help="Filter by language")
    @click.option("--verbose", is_flag=True, help="Show template details")
    def list_cmd(lang: str, verbose: bool):
        """List available templates."""
        from specpilot.templates import TemplateRegistry

        templates = TemplateRegistry().get_templates(lang)
        if not templates:
            click.echo("No templates found matching your criteria.")
            return

        current = None
        for t in templates:
            if t.language != current:
                if current is not None:
                    click.echo("")
                click.echo(f"{t.language}:")
                current = t.language

            label = t.name if t.framework is None else f"{t.name} ({t.framework})"
            click.echo(f"  {label:<28} {t.description}")
            if verbose:
                click.echo(f"    files: {', '.join(t.files)}")
