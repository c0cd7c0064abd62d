"""
Rich interactive UI components for the create-specra CLI.

Provides the free-text and cursor-navigable selection prompts behind
RichPrompter. Every prompt reports cancellation as a Cancelled value.
"""

import sys
from collections.abc import Sequence

from rich import box
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from create_specra.core.init_impl.request import Answered, Cancelled, Choice, PromptResult

# Check if we're in a TTY for interactive features
IS_TTY = sys.stdin.isatty() and sys.stdout.isatty()

console = Console()

CANCEL_WORDS = ("q", "quit", "cancel")

# Style definitions
STYLES = {
    "title": Style(color="bright_cyan", bold=True),
    "selected": Style(color="bright_white", bgcolor="blue", bold=True),
    "unselected": Style(color="white"),
    "description": Style(color="bright_black"),
    "badge_recommended": Style(color="yellow", bold=True),
    "error": Style(color="red", bold=True),
    "info": Style(color="cyan"),
    "muted": Style(color="bright_black"),
    "highlight": Style(color="bright_cyan"),
}


def print_header(title: str) -> None:
    """Print a styled question header."""
    console.print()
    console.print(Text(title, style=STYLES["title"]))
    console.print()


def ask_text(question: str, default: str) -> PromptResult[str]:
    """
    Ask a free-text question.

    An empty answer takes the default. Ctrl+C or end of input cancels.
    """
    prompt = Text(f"{question} ", style=STYLES["info"])
    prompt.append(f"({default}) ", style=STYLES["muted"])
    try:
        answer = console.input(prompt).strip()
    except (KeyboardInterrupt, EOFError):
        console.print()
        return Cancelled()
    return Answered(answer or default)


def select_interactive(
    options: Sequence[Choice],
    title: str,
    default: str | None = None,
) -> PromptResult[str]:
    """
    Interactive single-choice selection.

    Uses arrow keys for navigation and Enter to select.
    Falls back to numbered input if not in a TTY.

    Args:
        options: Choices to offer
        title: Question shown above the menu
        default: Value initially highlighted

    Returns:
        Answered with the chosen value, or Cancelled
    """
    if not options:
        return Cancelled()

    if not IS_TTY:
        return _select_simple(options, title)

    try:
        import termios
    except ImportError:
        # No termios on Windows
        return _select_simple(options, title)

    try:
        return _select_with_keyboard(options, title, default)
    except (OSError, termios.error):
        # stdin is not a real terminal
        return _select_simple(options, title)


def _select_with_keyboard(
    options: Sequence[Choice],
    title: str,
    default: str | None,
) -> PromptResult[str]:
    """Keyboard-navigable selection menu."""
    import termios
    import tty

    values = [opt.value for opt in options]
    selected_idx = values.index(default) if default in values else 0

    def render_menu() -> None:
        """Render the selection menu."""
        console.print("\033[2J\033[H", end="")
        print_header(title)

        for i, opt in enumerate(options):
            is_selected = i == selected_idx

            prefix = "› " if is_selected else "  "
            label_style = STYLES["selected"] if is_selected else STYLES["unselected"]

            line = Text()
            line.append(prefix, style=STYLES["highlight"] if is_selected else STYLES["muted"])
            line.append(opt.label, style=label_style)
            if opt.badge:
                line.append(f" [{opt.badge}]", style=STYLES["badge_recommended"])
            console.print(line)

            if is_selected and opt.description:
                console.print(Text(f"    {opt.description}", style=STYLES["description"]))

        console.print()
        console.print(Text("↑/↓ Navigate  Enter Select  q Cancel", style=STYLES["muted"]))

    def get_key() -> str:
        """Get a single keypress."""
        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            ch = sys.stdin.read(1)
            # Arrow keys arrive as escape sequences
            if ch == "\x1b":
                ch += sys.stdin.read(2)
            return ch
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    try:
        while True:
            render_menu()
            key = get_key()

            if key == "\x1b[A":
                selected_idx = (selected_idx - 1) % len(options)
            elif key == "\x1b[B":
                selected_idx = (selected_idx + 1) % len(options)
            elif key in ("\r", "\n"):
                console.print("\033[2J\033[H", end="")
                return Answered(options[selected_idx].value)
            elif key in ("q", "Q", "\x03", "\x1b\x1b\x1b"):
                console.print("\033[2J\033[H", end="")
                return Cancelled()
            elif key.isdigit():
                idx = int(key) - 1
                if 0 <= idx < len(options):
                    console.print("\033[2J\033[H", end="")
                    return Answered(options[idx].value)

    except KeyboardInterrupt:
        console.print("\033[2J\033[H", end="")
        return Cancelled()


def _select_simple(options: Sequence[Choice], title: str) -> PromptResult[str]:
    """Simple numbered selection (fallback for non-TTY)."""
    print_header(title)

    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column("Num", style="cyan", width=4)
    table.add_column("Name", style="white")
    table.add_column("Badge", style="yellow")
    table.add_column("Description", style="bright_black")

    for i, opt in enumerate(options, 1):
        badge = f"[{opt.badge}]" if opt.badge else ""
        table.add_row(f"{i}.", opt.label, Text(badge), opt.description)

    console.print(table)
    console.print()

    while True:
        try:
            choice = console.input(Text("Enter number or name: ", style=STYLES["info"])).strip()
        except (KeyboardInterrupt, EOFError):
            console.print()
            return Cancelled()

        if not choice or choice.lower() in CANCEL_WORDS:
            return Cancelled()

        if choice.isdigit():
            idx = int(choice) - 1
            if 0 <= idx < len(options):
                return Answered(options[idx].value)

        choice_lower = choice.lower()
        for opt in options:
            if opt.label.lower() == choice_lower or opt.value.lower() == choice_lower:
                return Answered(opt.value)

        console.print(
            Text(f"Invalid choice. Enter 1-{len(options)} or a template name.", style=STYLES["error"])
        )


class RichPrompter:
    """Prompter that talks to the terminal through rich."""

    def ask_text(self, question: str, default: str) -> PromptResult[str]:
        return ask_text(question, default)

    def ask_choice(
        self, question: str, choices: Sequence[Choice], default: str | None = None
    ) -> PromptResult[str]:
        return select_interactive(choices, question, default)
