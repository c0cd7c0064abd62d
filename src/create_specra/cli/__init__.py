"""
create-specra CLI package.

- create.py: The create command
- utils.py: Version, logging and error output helpers

The command is registered as the application's only command, so it runs
without a sub-command name: ``create-specra my-docs``.
"""

import typer

from create_specra.cli.create import create_command

app = typer.Typer(
    help="Create a new Specra documentation site.",
    add_completion=False,
)

app.command(name="create")(create_command)


def main() -> None:
    app(standalone_mode=True)


__all__ = ["app", "main", "create_command"]
