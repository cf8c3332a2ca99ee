"""CLI application entry point for draftcore.

This module provides the main CLI interface using Typer. Every command
loads a JSON drawing, runs one engine operation and either prints the
result or writes the edited drawing.
"""

from pathlib import Path
from typing import Annotated

import typer

from draftcore import __version__
from draftcore.cli.output import (
    console,
    print_document_info,
    print_edit_success,
    print_error,
    print_points,
    print_snap_result,
    print_step,
)
from draftcore.config import SnapSettings
from draftcore.core import SnapEngine, distance_to_entity, extend, find_intersections, trim
from draftcore.domain import Document, Entity, Point, SnapKind
from draftcore.exceptions import DocumentLoadError, DocumentSaveError, DraftCoreError
from draftcore.io import DocumentReader, DocumentWriter
from draftcore.utils import configure_logging

ON_TARGET_TOLERANCE = 1e-6

# Create the Typer app
app = typer.Typer(
    name="draftcore",
    help="Inspect and edit 2D drawings: snapping, intersections, trim and extend.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Draftcore[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Inspect and edit 2D drawings stored as JSON documents."""
    configure_logging(log_file=log_file, console_level=log_level)


def _load(path: Path) -> Document:
    return DocumentReader(path).load()


def _require_entity(document: Document, entity_id: str) -> Entity:
    entity = document.get_entity(entity_id)
    if entity is None:
        print_error(f"Entity not found: {entity_id}")
        raise typer.Exit(code=1)
    return entity


def _save(document: Document, input_path: Path, output: Path | None) -> Path:
    target = output if output is not None else DocumentWriter.get_edited_path(input_path)
    DocumentWriter(target).save(document)
    return target


def _fail(exc: DraftCoreError) -> typer.Exit:
    if isinstance(exc, DocumentLoadError):
        print_error(f"Could not load document: {exc.reason}", details=exc.path)
    elif isinstance(exc, DocumentSaveError):
        print_error(f"Could not save document: {exc.reason}", details=exc.path)
    else:
        print_error(str(exc))
    return typer.Exit(code=1)


@app.command()
def info(
    document_path: Annotated[
        Path,
        typer.Argument(help="Path to a JSON drawing", show_default=False),
    ],
) -> None:
    """Show a summary of a drawing and list its entities."""
    try:
        document = _load(document_path)
    except DraftCoreError as e:
        raise _fail(e) from e
    print_document_info(str(document_path), document)


@app.command()
def snap(
    document_path: Annotated[
        Path,
        typer.Argument(help="Path to a JSON drawing", show_default=False),
    ],
    x: Annotated[float, typer.Argument(help="Cursor X in document units")],
    y: Annotated[float, typer.Argument(help="Cursor Y in document units")],
    scale: Annotated[
        float,
        typer.Option("--scale", "-s", help="View scale (screen units per document unit)"),
    ] = 1.0,
    distance: Annotated[
        float,
        typer.Option("--distance", "-d", help="Snap radius in screen units"),
    ] = 10.0,
    disable: Annotated[
        list[str] | None,
        typer.Option("--disable", help="Snap kind to switch off (repeatable)"),
    ] = None,
) -> None:
    """Find the best snap target near a cursor position.

    Example:
        draftcore snap drawing.json 9.8 0.1 --disable grid
    """
    if scale <= 0 or distance <= 0:
        print_error("--scale and --distance must be positive")
        raise typer.Exit(code=1)

    kinds = {kind: True for kind in SnapKind}
    for name in disable or []:
        try:
            kinds[SnapKind(name.lower())] = False
        except ValueError:
            print_error(
                f"Invalid snap kind: {name}",
                details="Valid values: " + ", ".join(kind.value for kind in SnapKind),
            )
            raise typer.Exit(code=1) from None

    settings = SnapSettings(enabled_kinds=kinds, snap_distance=distance)
    try:
        document = _load(document_path)
    except DraftCoreError as e:
        raise _fail(e) from e

    print_snap_result(SnapEngine(settings, scale=scale).snap(Point(x, y), document))


@app.command()
def intersect(
    document_path: Annotated[
        Path,
        typer.Argument(help="Path to a JSON drawing", show_default=False),
    ],
    first_id: Annotated[str, typer.Argument(help="ID of the first entity")],
    second_id: Annotated[str, typer.Argument(help="ID of the second entity")],
) -> None:
    """List the intersection points of two entities."""
    try:
        document = _load(document_path)
    except DraftCoreError as e:
        raise _fail(e) from e

    first = _require_entity(document, first_id)
    second = _require_entity(document, second_id)
    print_points(find_intersections(first, second))


@app.command("extend")
def extend_command(
    document_path: Annotated[
        Path,
        typer.Argument(help="Path to a JSON drawing", show_default=False),
    ],
    target_id: Annotated[str, typer.Argument(help="ID of the line or arc to extend")],
    boundary_id: Annotated[str, typer.Argument(help="ID of the boundary entity")],
    x: Annotated[float, typer.Argument(help="Click X; the nearer end is extended")],
    y: Annotated[float, typer.Argument(help="Click Y; the nearer end is extended")],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output path (default: {name}-edited.json)"),
    ] = None,
) -> None:
    """Extend a line or arc until it meets a boundary."""
    try:
        document = _load(document_path)
        target = _require_entity(document, target_id)
        boundary = _require_entity(document, boundary_id)

        print_step(f"Extending {target.TYPE} to {boundary.TYPE}")
        extended = extend(target, [boundary], Point(x, y))
        if extended is None:
            print_error("Entity could not be extended", details="No reachable boundary point.")
            raise typer.Exit(code=1)

        saved = _save(document.update_entity(extended), document_path, output)
    except DraftCoreError as e:
        raise _fail(e) from e

    print_edit_success("Extended", str(saved), [extended])


@app.command("trim")
def trim_command(
    document_path: Annotated[
        Path,
        typer.Argument(help="Path to a JSON drawing", show_default=False),
    ],
    target_id: Annotated[str, typer.Argument(help="ID of the entity to trim")],
    cutter_id: Annotated[str, typer.Argument(help="ID of the cutting entity")],
    x: Annotated[float, typer.Argument(help="Click X on the portion to keep")],
    y: Annotated[float, typer.Argument(help="Click Y on the portion to keep")],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output path (default: {name}-edited.json)"),
    ] = None,
) -> None:
    """Trim an entity where a cutter crosses it."""
    try:
        document = _load(document_path)
        target = _require_entity(document, target_id)
        cutter = _require_entity(document, cutter_id)

        print_step(f"Trimming {target.TYPE} with {cutter.TYPE}")
        intersections = [
            p
            for p in find_intersections(cutter, target)
            if distance_to_entity(target, p) <= ON_TARGET_TOLERANCE
        ]
        replacements = trim(target, cutter, intersections, Point(x, y))
        if not replacements:
            print_error("Entity could not be trimmed", details="The cutter does not cross it.")
            raise typer.Exit(code=1)

        saved = _save(document.replace_entity(target.id, replacements), document_path, output)
    except DraftCoreError as e:
        raise _fail(e) from e

    print_edit_success("Trimmed", str(saved), replacements)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
