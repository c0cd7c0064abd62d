"""
The create command.

Gathers the request from arguments and prompts, runs the scaffolding
pipeline and reports what to do next. Every pipeline failure exits with
status 1.
"""

from __future__ import annotations

import typer

from create_specra.cli.utils import configure_logging, print_error, version_callback
from create_specra.cli_ui import RichPrompter
from create_specra.core.environment import InvocationContext
from create_specra.core.errors import SpecraError
from create_specra.core.init_impl import (
    RawProjectInput,
    SubprocessExecutor,
    build_success_report,
    create_project,
    list_templates,
    resolve_request,
    select_package_manager,
)


def create_command(
    path: str | None = typer.Argument(
        None, help="Directory to create the project in (prompted for if omitted)"
    ),
    template: str | None = typer.Option(
        None, "--template", "-t", help="Template to use (prompted for if omitted)"
    ),
    use_npm: bool = typer.Option(False, "--use-npm", help="Install dependencies with npm"),
    use_yarn: bool = typer.Option(False, "--use-yarn", help="Install dependencies with yarn"),
    use_pnpm: bool = typer.Option(False, "--use-pnpm", help="Install dependencies with pnpm"),
    skip_install: bool = typer.Option(
        False, "--skip-install", help="Do not install dependencies"
    ),
    skip_git: bool = typer.Option(
        False, "--skip-git", help="Do not initialize a git repository"
    ),
    list_templates_flag: bool = typer.Option(
        False, "--list-templates", help="List available templates and exit"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logging"),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """
    Create a new Specra documentation site.

    Without --use-npm/--use-yarn/--use-pnpm the package manager that
    launched create-specra is used (npm if none did).

    Examples:
        create-specra my-docs                       # Prompt for the template
        create-specra my-docs --template minimal    # No prompts
        create-specra my-docs --use-pnpm            # Install with pnpm
        create-specra my-docs --skip-install        # Files only
        create-specra --list-templates              # Show templates
    """
    configure_logging(verbose)
    context = InvocationContext.from_process()
    templates = list_templates(context.templates_dir)

    if list_templates_flag:
        if not templates:
            typer.echo("No templates available.")
            return

        typer.echo("Available templates:\n")
        for t in templates:
            typer.echo(f"  {t.id:<12} {t.description}")
        typer.echo("\nUse: create-specra <project-directory> --template <template>")
        return

    try:
        raw = RawProjectInput(
            raw_path=path,
            template_id=template,
            package_manager=select_package_manager(use_npm, use_yarn, use_pnpm),
            skip_install=skip_install,
            skip_git=skip_git,
        )
        request = resolve_request(raw, RichPrompter(), templates)

        typer.echo("")
        result = create_project(
            request,
            context,
            SubprocessExecutor(),
            progress_callback=typer.echo,
        )
    except SpecraError as e:
        print_error(e)
        raise typer.Exit(code=1)

    for line in build_success_report(result):
        typer.echo(line)
    typer.echo("")
