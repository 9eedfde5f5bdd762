"""CLI application entry point for polyhit.

This module provides an inspection CLI using Typer. It runs single kernel
queries against a scene file so that containment, hit-testing and zoom
behavior can be checked from a terminal.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from polyhit import __version__
from polyhit.cli.output import (
    print_classification,
    print_error,
    print_header,
    print_hit,
    print_scene_info,
    print_step,
    print_zoom,
)
from polyhit.config import GeometryConfig, LoggingConfig, PolyhitSettings, ViewportConfig
from polyhit.core import (
    DEFAULT_HANDLE_RADIUS,
    EPSILON,
    classify_target,
    contour_contains_point,
    find_corner,
    find_edge,
    shape_contains_point,
    to_object,
    wheel_zoom,
)
from polyhit.domain import Point, Shape, TransformConvention, Viewport, iter_contours
from polyhit.exceptions import PolyhitError, SceneLoadError
from polyhit.io import SceneReader
from polyhit.utils import QueryLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="polyhit",
    help="Inspect containment, hit-testing and zoom queries of the polyhit geometry kernel.",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass
class _CliState:
    settings: PolyhitSettings
    quiet: bool
    query_logger: QueryLogger | None = None


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"Polyhit v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
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
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
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
    """Polyhit geometry kernel inspection tool."""
    settings = PolyhitSettings(
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level,
        ),
    )
    ctx.obj = _CliState(settings=settings, quiet=quiet)


def _state(ctx: typer.Context) -> _CliState:
    state: _CliState = ctx.obj
    if state.query_logger is None:
        logger = configure_logging(
            log_file=state.settings.logging.log_file,
            console_level=state.settings.logging.log_level,
            file_level=state.settings.logging.file_log_level,
            quiet=state.quiet,
        )
        state.query_logger = QueryLogger(logger)
    return state


def _load_scene(scene: Path, quiet: bool) -> Shape:
    if not quiet:
        print_step("Loading scene")
    reader = SceneReader(scene)
    shape = reader.load()
    if not quiet:
        print_scene_info(str(scene), reader.kind, reader.contour_count)
    return shape


def _parse_convention(convention: str) -> TransformConvention:
    try:
        return TransformConvention(convention.lower())
    except ValueError:
        print_error(
            f"Invalid convention: {convention}",
            details="Valid values: direct, transposed",
        )
        raise typer.Exit(code=1) from None


@app.command()
def classify(
    ctx: typer.Context,
    scene: Annotated[Path, typer.Argument(help="Path to a JSON scene file", show_default=False)],
    x: Annotated[float, typer.Argument(help="Query X in object space", show_default=False)],
    y: Annotated[float, typer.Argument(help="Query Y in object space", show_default=False)],
    epsilon: Annotated[
        float,
        typer.Option(
            "--epsilon",
            "-e",
            help="Absolute boundary tolerance",
            min=0.0,
        ),
    ] = EPSILON,
) -> None:
    """Classify a point as inside, outside or on the boundary of a scene.

    Each contour is reported on its own, followed by the even-odd composite
    for the whole scene.

    Example:
        polyhit classify scene.json 10 10
    """
    state = _state(ctx)
    try:
        geometry = GeometryConfig(epsilon=epsilon)
        if not state.quiet:
            print_header(__version__)
        shape = _load_scene(scene, state.quiet)

        point = Point(x, y)
        tolerance = geometry.epsilon
        per_contour = [
            contour_contains_point(contour, point, tolerance) for contour in iter_contours(shape)
        ]
        composed = shape_contains_point(shape, point, tolerance)
        state.query_logger.log_classification(point, composed, len(per_contour))

        if not state.quiet:
            print_step("Classification")
        print_classification(point, per_contour, composed)
    except SceneLoadError as e:
        print_error(f"Could not load scene: {e.reason}")
        raise typer.Exit(code=1) from e
    except PolyhitError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


@app.command()
def hit(
    ctx: typer.Context,
    scene: Annotated[Path, typer.Argument(help="Path to a JSON scene file", show_default=False)],
    x: Annotated[float, typer.Argument(help="Cursor X in screen space", show_default=False)],
    y: Annotated[float, typer.Argument(help="Cursor Y in screen space", show_default=False)],
    radius: Annotated[
        float,
        typer.Option(
            "--radius",
            "-r",
            help="Handle radius in screen pixels",
            min=0.01,
        ),
    ] = DEFAULT_HANDLE_RADIUS,
    epsilon: Annotated[
        float,
        typer.Option(
            "--epsilon",
            "-e",
            help="Absolute boundary tolerance for body hits",
            min=0.0,
        ),
    ] = EPSILON,
    scale: Annotated[float, typer.Option("--scale", "-s", help="Viewport scale")] = 1.0,
    offset_x: Annotated[float, typer.Option("--offset-x", help="Viewport offset X")] = 0.0,
    offset_y: Annotated[float, typer.Option("--offset-y", help="Viewport offset Y")] = 0.0,
    convention: Annotated[
        str,
        typer.Option(
            "--convention",
            "-c",
            help="Transform convention (direct|transposed)",
        ),
    ] = "transposed",
) -> None:
    """Report what a cursor at screen position (X, Y) is over.

    Corners take precedence over edges, edges over bodies.

    Example:
        polyhit hit scene.json 120 80 --scale 2
    """
    state = _state(ctx)
    conv = _parse_convention(convention)
    try:
        viewport = Viewport(scale=scale, offset=Point(offset_x, offset_y), convention=conv)
        geometry = GeometryConfig(epsilon=epsilon, handle_radius=radius)
        if not state.quiet:
            print_header(__version__)
        shape = _load_scene(scene, state.quiet)

        point = to_object(viewport, Point(x, y))
        reach = geometry.handle_radius_at(viewport.scale)
        target = classify_target(point, shape, reach, geometry.epsilon)
        state.query_logger.log_hit(point, target)

        if not state.quiet:
            print_step("Hit test")
        print_hit(point, target, find_corner(point, shape, reach), find_edge(point, shape, reach))
    except SceneLoadError as e:
        print_error(f"Could not load scene: {e.reason}")
        raise typer.Exit(code=1) from e
    except PolyhitError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


@app.command()
def zoom(
    ctx: typer.Context,
    delta: Annotated[float, typer.Option("--delta", "-d", help="Mouse wheel delta")] = 120.0,
    scale: Annotated[float, typer.Option("--scale", "-s", help="Current scale")] = 1.0,
    offset_x: Annotated[float, typer.Option("--offset-x", help="Current offset X")] = 0.0,
    offset_y: Annotated[float, typer.Option("--offset-y", help="Current offset Y")] = 0.0,
    cursor_x: Annotated[float, typer.Option("--cursor-x", help="Cursor X in screen space")] = 0.0,
    cursor_y: Annotated[float, typer.Option("--cursor-y", help="Cursor Y in screen space")] = 0.0,
    convention: Annotated[
        str,
        typer.Option(
            "--convention",
            "-c",
            help="Transform convention (direct|transposed)",
        ),
    ] = "transposed",
) -> None:
    """Apply one mouse wheel step anchored at the cursor.

    Example:
        polyhit zoom --delta 120 --cursor-x 200 --cursor-y 150
    """
    state = _state(ctx)
    conv = _parse_convention(convention)
    try:
        config = ViewportConfig(convention=conv)
        before = Viewport(scale=scale, offset=Point(offset_x, offset_y), convention=config.convention)
        after = wheel_zoom(before, delta, Point(cursor_x, cursor_y), config.scale_per_delta)
        state.query_logger.log_zoom(before.scale, after.scale, after.offset)

        if not state.quiet:
            print_header(__version__)
            print_step("Zoom")
        print_zoom(before, after)
    except PolyhitError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
