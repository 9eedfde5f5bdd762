"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from polyhit.core import CornerHit, EdgeHit, HitTarget
from polyhit.domain import Inclusion, Point, Viewport

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

_INCLUSION_STYLES = {
    Inclusion.INSIDE: "green",
    Inclusion.OUTSIDE: "dim",
    Inclusion.BOUNDARY: "yellow",
}


def _format_point(point: Point) -> str:
    return f"({point.x:g}, {point.y:g})"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Polyhit[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_scene_info(scene_path: str, kind: str, contour_count: int) -> None:
    """Print scene information.

    Args:
        scene_path: Path to the scene file
        kind: Kind of the root shape
        contour_count: Number of contours in the scene
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(scene_path)
    line.append(f" ({kind})")
    console.print(line)
    console.print(f"  {contour_count} contours")


def print_classification(
    point: Point,
    per_contour: list[Inclusion],
    composed: Inclusion,
) -> None:
    """Print per-contour and composed classification of a point.

    Args:
        point: The query point
        per_contour: Inclusion of the point against each contour in order
        composed: Inclusion against the whole scene
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Contour", justify="right")
    table.add_column("Inclusion")
    for index, inclusion in enumerate(per_contour):
        style = _INCLUSION_STYLES[inclusion]
        table.add_row(str(index), f"[{style}]{inclusion.name}[/{style}]")
    console.print(table)

    style = _INCLUSION_STYLES[composed]
    console.print(
        f"\n[bold]{SYM_OK}[/bold] {_format_point(point)} is "
        f"[bold {style}]{composed.name}[/bold {style}]"
    )


def print_hit(
    point: Point,
    target: HitTarget,
    corner: CornerHit,
    edge: EdgeHit,
) -> None:
    """Print a hit-test result.

    Args:
        point: The query point in object space
        target: What the point is over
        corner: Corner search result
        edge: Edge search result
    """
    console.print(f"  Object point {SYM_DOT} {_format_point(point)}")
    console.print(f"  Target {SYM_DOT} [bold]{target.value}[/bold]")
    if target is HitTarget.CORNER:
        console.print(f"  Vertex {SYM_DOT} {corner.index}")
    elif target is HitTarget.EDGE:
        console.print(
            f"  Edge {SYM_DOT} {edge.start_index} -> {edge.end_index} "
            f"{SYM_DOT} nearest {_format_point(edge.nearest)}"
        )


def print_zoom(before: Viewport, after: Viewport) -> None:
    """Print a zoom step.

    Args:
        before: Viewport before the wheel step
        after: Viewport after the wheel step
    """
    console.print(f"  Convention {SYM_DOT} {after.convention.value}")
    console.print(f"  Scale {SYM_DOT} {before.scale:g} -> {after.scale:g}")
    console.print(
        f"  Offset {SYM_DOT} {_format_point(before.offset)} -> {_format_point(after.offset)}"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
