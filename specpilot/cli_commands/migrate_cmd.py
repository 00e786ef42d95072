"""
Migrate Command - Convert between spec layouts.

Commands:
- migrate: Move a legacy .project-spec tree into the flat .specs layout
"""

import sys

import click


def register(cli):
    """Register migrate command with CLI."""

    @cli.command("migrate")
    @click.option("-d", "--dir", "project_dir", default=".", type=click.Path(file_okay=False),
                  help="Project directory")
    @click.option("--from", "source", default="complex",
                  type=click.Choice(["complex", "project-spec", "simple"]),
                  help="Source structure")
    @click.option("--to", "target", default="simple",
                  type=click.Choice(["complex", "project-spec", "simple"]),
                  help="Target structure")
    @click.option("--backup", is_flag=True, help="Create backup before migration")
    def migrate_cmd(project_dir: str, source: str, target: str, backup: bool):
        """Migrate specifications to a new layout.

        \b
        Examples:
            specpilot migrate
            specpilot migrate --from project-spec --to simple --backup
        """
        from specpilot.errors import SpecPilotError
        from specpilot.migrator import check_migration_needed, create_backup, migrate

        try:
            check = check_migration_needed(project_dir, source, target)
            if check.reason == "no_source":
                click.echo(f"Error: {check.message}", err=True)
                sys.exit(1)
            if check.reason == "already_migrated":
                click.echo(f"Warning: {check.message} Files will be merged into it.", err=True)

            if backup:
                backup_dir = create_backup(project_dir)
                click.echo(f"Backup created: {backup_dir}")

            result = migrate(project_dir, source, target)
        except (SpecPilotError, OSError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        click.echo(result.format())
        click.echo("\nNext: specpilot validate")
