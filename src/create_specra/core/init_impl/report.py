"""Next-step reporting for a created project."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .project import CreateResult

# Scripts every template's package.json provides, with what they do
SCRIPT_DESCRIPTIONS = (
    ("dev", "Starts the development server."),
    ("build", "Builds the app for production."),
    ("start", "Runs the built app in production mode."),
)


def build_success_report(result: CreateResult) -> list[str]:
    """
    Build the lines shown after a successful run.

    Args:
        result: Outcome of create_project()

    Returns:
        Report lines, blank strings separating paragraphs
    """
    destination = result.destination
    command = result.command

    lines = [
        f"Success! Created {destination.base_name} at {destination.absolute_path}",
        "",
        "Inside that directory, you can run several commands:",
        "",
    ]
    for script, description in SCRIPT_DESCRIPTIONS:
        lines.append(f"  {command.run(script)}")
        lines.append(f"    {description}")
        lines.append("")

    lines.append("We suggest that you begin by typing:")
    lines.append("")
    lines.append(f"  cd {destination.raw_path}")
    if not result.installed:
        lines.append(f"  {command.install}")
    lines.append(f"  {command.run('dev')}")
    return lines
