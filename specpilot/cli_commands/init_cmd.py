"""
Init Command - Generate a .specs folder.

Commands:
- init: Render every spec document for a new or existing project
"""

import os
import sys

import click

from specpilot.config import FRAMEWORKS, SUPPORTED_LANGUAGES


def register(cli):
    """Register init command with CLI."""

    @cli.command("init")
    @click.argument("name")
    @click.option("-l", "--lang", default=None, type=click.Choice(SUPPORTED_LANGUAGES),
                  help="Programming language (defaults to .specpilot.yaml, then typescript).")
    @click.option("-f", "--framework", default=None,
                  help="Framework (react, express, next, django, fastapi, spring-boot, ...).")
    @click.option("-d", "--dir", "target_dir", default=".", type=click.Path(file_okay=False),
                  help="Target directory")
    @click.option("--specs-name", default=None, help="Name for specs folder")
    @click.option("--author", default=None, help="Author written into the specs")
    @click.option("--description", default=None, help="Project description")
    def init_cmd(name: str, lang: str, framework: str, target_dir: str,
                 specs_name: str, author: str, description: str):
        """Initialize specifications for a project.

        NAME: Project name written into every document

        \b
        Examples:
            specpilot init acme-api --lang typescript --framework express
            specpilot init billing --lang python --dir services/billing
        """
        from specpilot.config import load_config
        from specpilot.errors import SpecPilotError
        from specpilot.generator import GenerationOptions, generate_specs

        try:
            config = load_config(target_dir)
            language = lang or config.language
            framework = framework or (config.framework if not lang else None)

            if framework and framework not in FRAMEWORKS.get(language, []):
                click.echo(
                    f"Warning: '{framework}' is not a known {language} framework, "
                    "using language defaults where needed",
                    err=True,
                )

            os.makedirs(target_dir, exist_ok=True)
            result = generate_specs(GenerationOptions(
                project_name=name,
                language=language,
                framework=framework,
                target_dir=target_dir,
                specs_name=specs_name or config.specs_name,
                author=author or config.author,
                description=description,
            ))
        except (SpecPilotError, ValueError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        click.echo(result.format())
        click.echo("")
        click.echo("Next steps:")
        click.echo("  1. Paste the onboarding prompt from development/prompts.md into your AI agent")
        click.echo("  2. specpilot validate")
