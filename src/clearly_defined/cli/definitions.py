import logging
from collections.abc import Sequence
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from clearly_defined.core.client import Client
from clearly_defined.core.coordinates import Coordinate, SemverVersion
from clearly_defined.errors import ClearlyDefinedError, DecodeError
from clearly_defined.models import Definition

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _get_client() -> Client:
    return Client()


def _parse_coordinates(arguments: Sequence[str]) -> list[Coordinate]:
    coordinates = []
    for argument in arguments:
        try:
            coordinates.append(Coordinate.parse(argument))
        except DecodeError as exc:
            logger.warning("Skipping %s: %s", argument, exc)
    return coordinates


def _render_definition(definition: Definition) -> None:
    coordinates = escape(str(definition.coordinates))
    if definition.described is None:
        console.print(f"[red]{coordinates}[/red] not harvested")
        return

    console.print(f"{coordinates} - {definition.scores.effective}")
    if definition.licensed is not None:
        discovered = ", ".join(definition.licensed.facets.core.discovered.expressions)
        console.print(f"  Declared {escape(definition.licensed.declared)} - Discovered {escape(discovered)}")

    for file in definition.files:
        if file.license is None:
            continue
        style = "bold green" if "license" in file.natures else "dim green"
        console.print(f"  license: [{style}]{escape(file.license)}[/{style}] path: {escape(file.path)}")


def get(
    coordinates: Annotated[list[str], typer.Argument(help="Coordinates such as crate/cratesio/-/syn/1.0.14.")],
    chunk_size: Annotated[int | None, typer.Option(help="Coordinates per request (max 1000).")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log requests and decoding details.")] = False,
) -> None:
    """Fetch and print the definitions of components."""
    _configure_logging(verbose)
    parsed = _parse_coordinates(coordinates)
    if not parsed:
        console.print("[yellow]No valid coordinates given.[/yellow]")
        raise typer.Exit(1)

    try:
        with _get_client() as client:
            definitions = client.get_definitions(parsed, chunk_size)
    except (ClearlyDefinedError, ValueError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc

    for definition in definitions:
        _render_definition(definition)


def parse(
    coordinates: Annotated[list[str], typer.Argument(help="Coordinates to validate.")],
) -> None:
    """Parse coordinates and show their components."""
    table = Table(show_lines=False)
    for header in ("shape", "provider", "namespace", "name", "version", "kind", "pr"):
        table.add_column(header)

    failed = False
    for argument in coordinates:
        try:
            coordinate = Coordinate.parse(argument)
        except DecodeError as exc:
            console.print(f"[red]{escape(argument)}[/red]: {escape(str(exc))}")
            failed = True
            continue
        table.add_row(
            coordinate.shape.value,
            coordinate.provider.value,
            coordinate.namespace or "-",
            coordinate.name,
            str(coordinate.version),
            "semver" if isinstance(coordinate.version, SemverVersion) else "any",
            "" if coordinate.curation_pr is None else str(coordinate.curation_pr),
        )

    console.print(table)
    if failed:
        raise typer.Exit(1)
