"""Output helpers for the langver CLI."""

from rich.console import Console
from rich.markup import escape

from ..exceptions import LanguageVersionFormatError

console = Console()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {escape(message)}")


def print_format_error(error: LanguageVersionFormatError) -> None:
    """Print a format error with a caret under the offending character.

    Args:
        error: The error raised while parsing.
    """
    print_error(str(error))
    console.print(f"  {escape(error.source)}", highlight=False, soft_wrap=True)
    console.print(f"  {' ' * error.offset}[red]^[/red]", soft_wrap=True)
