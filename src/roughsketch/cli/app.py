"""CLI application entry point for roughsketch.

This module provides the main CLI interface using Typer.
"""

import json
import math
from pathlib import Path
from typing import Annotated

import typer

from roughsketch import __version__
from roughsketch.cli.output import (
    console,
    print_error,
    print_fill_styles,
    print_header,
    print_summary,
)
from roughsketch.config import (
    DrawConfig,
    FillerConfig,
    FillStyle,
    LoggingConfig,
    RenderConfig,
    SketchSettings,
)
from roughsketch.core import FILLERS, Generator, create_filler
from roughsketch.domain import Drawable, Point
from roughsketch.exceptions import (
    ConfigurationError,
    FillError,
    RoughSketchError,
    ShapeArgumentError,
)
from roughsketch.io import SvgRenderer
from roughsketch.utils import GenerationLogger, configure_logging

# Number of coordinates taken by each fixed-size shape
SHAPE_ARITY = {
    "line": 4,
    "rectangle": 4,
    "ellipse": 4,
    "circle": 3,
    "arc": 6,
}

# Shapes that take a list of x y pairs
POINT_SHAPES = ("polygon", "linear_path", "curve")

OUTPUT_FORMATS = ("svg", "json", "summary")

# Added to the outline seed to seed fill strokes
FILL_SEED_OFFSET = 104729

# Create the Typer app
app = typer.Typer(
    name="roughsketch",
    help="Draw hand-sketched looking shapes as SVG.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]roughsketch[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
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
    """Draw hand-sketched looking shapes as SVG."""


def build_drawable(
    generator: Generator, shape: str, coords: list[float], closed: bool = False
) -> Drawable:
    """Dispatch a shape name and flat coordinate list to the generator.

    Args:
        generator: Generator to draw with
        shape: Shape name (line, rectangle, ellipse, circle, arc, polygon,
            linear_path, curve)
        coords: Flat coordinate list; arc angles are in degrees
        closed: Close arcs into a pie slice

    Returns:
        Generated drawable

    Raises:
        ShapeArgumentError: If the shape is unknown or has the wrong
            number of coordinates
    """
    if shape in SHAPE_ARITY:
        expected = SHAPE_ARITY[shape]
        if len(coords) != expected:
            raise ShapeArgumentError(
                shape, f"expected {expected} coordinates, got {len(coords)}"
            )

        if shape == "line":
            return generator.line(*coords)
        if shape == "rectangle":
            return generator.rectangle(*coords)
        if shape == "ellipse":
            return generator.ellipse(*coords)
        if shape == "circle":
            return generator.circle(*coords)

        cx, cy, rx, ry, start, stop = coords
        return generator.arc(
            cx, cy, rx, ry, math.radians(start), math.radians(stop), closed=closed
        )

    if shape in POINT_SHAPES:
        if not coords or len(coords) % 2:
            raise ShapeArgumentError(
                shape, f"expected x y pairs, got {len(coords)} coordinates"
            )
        points = [Point(x, y) for x, y in zip(coords[0::2], coords[1::2])]
        if shape == "polygon":
            return generator.polygon(points)
        if shape == "linear_path":
            return generator.linear_path(points)
        return generator.curve_path(points)

    known = ", ".join([*SHAPE_ARITY, *POINT_SHAPES])
    raise ShapeArgumentError(shape, f"unknown shape (expected one of: {known})")


def fill_draw_config(draw_config: DrawConfig) -> DrawConfig:
    """Copy of ``draw_config`` for fill strokes, seeded apart from the outline."""
    return draw_config.copy_with(seed=draw_config.seed + FILL_SEED_OFFSET)


# Negative coordinates such as -10 are not options
@app.command(context_settings={"ignore_unknown_options": True})
def draw(
    shape: Annotated[
        str,
        typer.Argument(
            help="Shape to draw (line|rectangle|ellipse|circle|arc|polygon|linear_path|curve)",
            show_default=False,
        ),
    ],
    coords: Annotated[
        list[float],
        typer.Argument(
            help="Shape coordinates; arc takes cx cy rx ry start stop (degrees)",
            show_default=False,
        ),
    ],
    roughness: Annotated[
        float,
        typer.Option("--roughness", "-r", help="How rough the drawing is (0 = exact)"),
    ] = 1.0,
    bowing: Annotated[
        float,
        typer.Option("--bowing", "-b", help="How much straight lines bow"),
    ] = 1.0,
    seed: Annotated[
        int,
        typer.Option("--seed", "-s", help="Seed for the randomizer"),
    ] = 1,
    fill: Annotated[
        str,
        typer.Option("--fill", "-f", help="Fill style (see `roughsketch fills`)"),
    ] = "none",
    hachure_angle: Annotated[
        float,
        typer.Option("--hachure-angle", help="Angle of fill lines in degrees"),
    ] = 320.0,
    hachure_gap: Annotated[
        float,
        typer.Option("--hachure-gap", help="Distance between fill lines"),
    ] = 15.0,
    fill_weight: Annotated[
        float,
        typer.Option("--fill-weight", help="Stroke width of fill lines"),
    ] = 1.0,
    output_format: Annotated[
        str,
        typer.Option("--format", help="Output format (svg|json|summary)"),
    ] = "svg",
    stroke: Annotated[
        str,
        typer.Option("--stroke", help="Outline color"),
    ] = "#000000",
    fill_color: Annotated[
        str,
        typer.Option("--fill-color", help="Fill color"),
    ] = "#555555",
    closed: Annotated[
        bool,
        typer.Option("--closed", help="Close arcs into a pie slice"),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log every generated drawable"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="No log output on the console"),
    ] = False,
) -> None:
    """Draw one shape and write it to stdout.

    Example:
        roughsketch draw rectangle 10 10 200 100 --fill hachure > box.svg
        roughsketch draw arc 0 0 50 30 -90 45 --closed --fill dots
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if output_format not in OUTPUT_FORMATS:
        print_error(
            f"Invalid format: {output_format}",
            details=f"Valid values: {', '.join(OUTPUT_FORMATS)}",
        )
        raise typer.Exit(code=1)

    try:
        draw_config = DrawConfig.build(roughness=roughness, bowing=bowing, seed=seed)
        filler_config = FillerConfig.build(
            hachure_angle=hachure_angle,
            hachure_gap=hachure_gap,
            fill_weight=fill_weight,
            draw_config=fill_draw_config(draw_config),
        )
        filler = create_filler(fill.lower(), filler_config)

        settings = SketchSettings(
            draw=draw_config,
            filler=filler_config,
            fill_style=filler.style,
            render=RenderConfig(stroke=stroke, fill=fill_color, fill_weight=fill_weight),
            logging=LoggingConfig(
                log_file=log_file,
                log_level="DEBUG" if verbose else log_level,
            ),
        )

        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
        generation_logger = GenerationLogger(logger)

        generator = Generator(settings.draw, filler, logger=generation_logger)
        drawable = build_drawable(generator, shape.lower(), coords, closed=closed)

    except ShapeArgumentError as e:
        print_error(str(e), details=f"Shape '{e.shape}' could not be drawn.")
        raise typer.Exit(code=1)
    except ConfigurationError as e:
        print_error(f"Invalid option: {e.reason}", details=f"Field: {e.field}")
        raise typer.Exit(code=1)
    except FillError as e:
        valid = ", ".join(style.value for style in FillStyle)
        print_error(str(e), details=f"Valid values: {valid}")
        raise typer.Exit(code=1)
    except RoughSketchError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if output_format == "svg":
        typer.echo(SvgRenderer(settings.render).to_svg([drawable]), nl=False)
    elif output_format == "json":
        typer.echo(json.dumps(drawable.to_dict(), indent=2))
    else:
        print_summary(drawable, generation_logger.stats)


@app.command()
def fills() -> None:
    """List the available fill styles."""
    print_header(__version__)
    styles = []
    for style, filler in FILLERS.items():
        description = (filler.__doc__ or "").strip().split("\n")[0]
        styles.append((style.value, description))
    print_fill_styles(styles)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
