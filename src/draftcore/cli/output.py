"""Rich console output helpers for the CLI.

This module renders documents, snap results and edit summaries using the
Rich library.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from draftcore.domain import Document, Entity, Point, SnapResult

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def format_point(point: Point) -> str:
    """Format a point with up to six decimals and no trailing zeros."""

    def _num(value: float) -> str:
        text = f"{value:.6f}".rstrip("0").rstrip(".")
        return "0" if text in ("-0", "") else text

    return f"({_num(point.x)}, {_num(point.y)})"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Draftcore[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_document_info(path: str, document: Document) -> None:
    """Print a document summary and its entity table.

    Args:
        path: Path the document was loaded from
        document: The loaded document
    """
    line = Text("  ")
    line.append(document.name, style="bold")
    line.append(f" ({path})")
    console.print(line)
    console.print(
        f"  {len(document.entities)} entities {SYM_DOT} {len(document.layers)} layers "
        f"{SYM_DOT} grid {document.grid_size:g}"
    )

    if not document.entities:
        return

    layer_names = {layer.id: layer.name for layer in document.layers}
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("ID", overflow="fold")
    table.add_column("Type")
    table.add_column("Layer")
    table.add_column("Selected")
    for entity in document.entities:
        table.add_row(
            entity.id,
            entity.TYPE,
            layer_names.get(entity.layer, entity.layer),
            SYM_OK if entity.is_selected else "",
        )
    console.print()
    console.print(table)


def print_snap_result(result: SnapResult | None) -> None:
    """Print the winning snap candidate, or a notice if there is none."""
    if result is None:
        console.print(f"  {SYM_DOT} No snap target in range")
        return

    line = Text("  ")
    line.append(result.label, style="bold")
    line.append(f" [{result.kind.value}] ")
    line.append(format_point(result.position))
    if result.source_entity_id is not None:
        line.append(f" {SYM_DOT} {result.source_entity_id}")
    console.print(line)


def print_points(points: Sequence[Point]) -> None:
    """Print a list of points, one per line."""
    if not points:
        console.print(f"  {SYM_DOT} No intersections")
        return
    console.print(f"  [green]{len(points)}[/green] intersection(s)")
    for point in points:
        console.print(f"  {format_point(point)}")


def print_edit_success(action: str, output_path: str, entities: Sequence[Entity]) -> None:
    """Print success message after an edit has been saved.

    Args:
        action: Past-tense verb describing the edit ("Extended", "Trimmed")
        output_path: Path the edited document was written to
        entities: Entities produced by the edit
    """
    console.print(f"\n[bold green]{SYM_OK} {action}[/bold green]")
    for entity in entities:
        console.print(f"  {entity.TYPE} {entity.id}")
    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
