"""
SpecPilot CLI Commands - one module per command.

Structure:
    cli_commands/
    ├── __init__.py      # This file - registration
    ├── init_cmd.py      # init
    ├── validate_cmd.py  # validate
    ├── migrate_cmd.py   # migrate
    ├── list_cmd.py      # list
    └── specify_cmd.py   # specify

Usage:
    from specpilot.cli_commands import register_all

    @click.group()
    def cli():
        pass

    register_all(cli)
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_all(cli: "click.Group") -> None:
    """Register all command modules with the CLI group.

    Each module has a `register(cli)` function that adds its commands
    to the CLI group using Click decorators.

    Args:
        cli: The Click group to register commands with
    """
    from . import init_cmd
    from . import validate_cmd
    from . import migrate_cmd
    from . import list_cmd
    from . import specify_cmd

    init_cmd.register(cli)
    validate_cmd.register(cli)
    migrate_cmd.register(cli)
    list_cmd.register(cli)
    specify_cmd.register(cli)


__all__ = ["register_all"]
