"""Command-line interface for langver."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from ..config import load_config
from ..exceptions import ConfigError, LanguageVersionFormatError
from ..parse import parse_language_version
from ._helpers import console, print_error, print_format_error, print_success

logger = logging.getLogger(__name__)

app = typer.Typer(help="Parse and compare language versions")

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to config file (pyproject.toml or langver.toml)",
    ),
]


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option(..., "--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Parse and compare language versions."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@app.command()
def parse(
    version: Annotated[str, typer.Argument(..., help="Language version string")],
    as_json: Annotated[
        bool, typer.Option(..., "--json", help="Print the result as JSON")
    ] = False,
) -> None:
    """Parse a language version and show its parts."""
    try:
        parsed = parse_language_version(version)
    except LanguageVersionFormatError as e:
        logger.debug("Rejected %r at offset %d", e.source, e.offset)
        print_format_error(e)
        raise typer.Exit(1) from e

    if as_json:
        console.print(json.dumps({"major": parsed.major, "minor": parsed.minor}))
    else:
        console.print(f"major: {parsed.major}")
        console.print(f"minor: {parsed.minor}")


@app.command()
def compare(
    left: Annotated[str, typer.Argument(..., help="First language version")],
    right: Annotated[str, typer.Argument(..., help="Second language version")],
) -> None:
    """Compare two language versions."""
    try:
        left_version = parse_language_version(left)
        right_version = parse_language_version(right)
    except LanguageVersionFormatError as e:
        print_format_error(e)
        raise typer.Exit(1) from e

    result = left_version.compare(right_version)
    symbol = "<" if result < 0 else ">" if result > 0 else "="
    console.print(f"{left_version} {symbol} {right_version}")


@app.command()
def check(
    version: Annotated[str, typer.Argument(..., help="Language version to check")],
    minimum: Annotated[
        str | None,
        typer.Option(
            ...,
            "--minimum",
            "-m",
            help="Minimum supported version (overrides the config)",
        ),
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Check a language version against the project requirements."""
    try:
        cfg = load_config(config)
        target = parse_language_version(version)
        required = (
            parse_language_version(minimum) if minimum is not None else cfg.minimum
        )
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e
    except LanguageVersionFormatError as e:
        print_format_error(e)
        raise typer.Exit(1) from e

    if required is None and not cfg.features:
        print_error("No minimum version or features configured")
        raise typer.Exit(1)

    if cfg.features:
        table = Table(title=f"Features in {target}")
        table.add_column("Feature", style="cyan")
        table.add_column("Since", style="green")
        table.add_column("Supported")

        for name, since in sorted(cfg.features.items(), key=lambda item: item[1]):
            supported = cfg.supports(name, target)
            table.add_row(
                escape(name),
                str(since),
                "[green]yes[/green]" if supported else "[red]no[/red]",
            )

        console.print(table)

    if required is not None:
        logger.debug("Checking %s against minimum %s", target, required)
        if target < required:
            print_error(f"{target} is below the minimum supported version {required}")
            raise typer.Exit(1)
        print_success(f"{target} meets the minimum supported version {required}")


if __name__ == "__main__":
    app()
