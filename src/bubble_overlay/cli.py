from __future__ import annotations

import pathlib
from dataclasses import dataclass
from typing import List

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from bubble_overlay._color import RGBA, normalize_color
from bubble_overlay._config import get_settings
from bubble_overlay.backends import RasterSurface, SvgSurface
from bubble_overlay.bubble import bubble_commands, bubble_radius, default_stripe_width, stripe_count
from bubble_overlay.commands import DrawCommand, count_strokes, describe, replay
from bubble_overlay.geometry import Rect

console = Console()
app = typer.Typer(help="Draw striped bubble overlays to PNG or SVG.")


@dataclass(frozen=True)
class BubbleOptions:
    rect: Rect
    bubble_color: RGBA
    stripe_color: RGBA
    stripe_width: float
    background: RGBA


def _resolve_options(
    size: int | None,
    bubble_color: str | None,
    stripe_color: str | None,
    stripe_width: float | None,
    background: str | None,
) -> BubbleOptions:
    settings = get_settings()
    side = size if size is not None else settings.size
    rect = Rect.square(side)
    try:
        bubble = normalize_color(bubble_color) if bubble_color is not None else settings.bubble_color
        stripe = normalize_color(stripe_color) if stripe_color is not None else settings.stripe_color
        back = normalize_color(background) if background is not None else settings.background
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    width = stripe_width if stripe_width is not None else default_stripe_width(rect, settings.stripe_ratio)
    return BubbleOptions(rect=rect, bubble_color=bubble, stripe_color=stripe, stripe_width=width, background=back)


def _plan(opts: BubbleOptions) -> List[DrawCommand]:
    try:
        return bubble_commands(opts.rect, opts.bubble_color, opts.stripe_color, opts.stripe_width)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _next_available_path(path: pathlib.Path) -> pathlib.Path:
    """Return a non-conflicting path by appending ' (n)' before the suffix."""

    if not path.exists():
        return path

    parent = path.parent
    stem = path.stem
    suffix = path.suffix
    n = 1
    while True:
        candidate = parent / f"{stem} ({n}){suffix}"
        if not candidate.exists():
            return candidate
        n += 1


def _output_path(output: pathlib.Path, overwrite: bool) -> pathlib.Path:
    final_output = output
    if output.exists() and not overwrite:
        final_output = _next_available_path(output)
        console.print(f"[yellow]Output {output} exists; writing to {final_output} instead.[/yellow]")
    final_output.parent.mkdir(parents=True, exist_ok=True)
    return final_output


def _report(kind: str, path: pathlib.Path, opts: BubbleOptions, strokes: int) -> None:
    console.print(
        Panel(
            f"Wrote {kind} to [green]{path}[/green]. "
            f"Radius {bubble_radius(opts.rect):g}, stripe width {opts.stripe_width:g}, {strokes} stripes.",
            title="Render complete",
            border_style="green",
        )
    )


SizeOption = typer.Option(None, "--size", min=1, help="Bubble diameter in pixels (defaults to config).")
BubbleColorOption = typer.Option(None, "--bubble-color", help="Disc fill color.")
StripeColorOption = typer.Option(None, "--stripe-color", help="Stripe stroke color.")
StripeWidthOption = typer.Option(None, "--stripe-width", help="Stripe thickness; spacing is twice this.")
BackgroundOption = typer.Option(None, "--background", help="Canvas background color.")


@app.command()
def render(
    output: pathlib.Path = typer.Argument(pathlib.Path("bubble.png"), help="PNG file to write."),
    size: int | None = SizeOption,
    bubble_color: str | None = BubbleColorOption,
    stripe_color: str | None = StripeColorOption,
    stripe_width: float | None = StripeWidthOption,
    background: str | None = BackgroundOption,
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing file."),
) -> None:
    """
    Rasterize the striped bubble with cairo and save it as an image.
    """

    opts = _resolve_options(size, bubble_color, stripe_color, stripe_width, background)
    commands = _plan(opts)
    side = int(round(opts.rect.width))
    surface = RasterSurface(side, side, background=opts.background)
    replay(commands, surface)

    final_output = _output_path(output, overwrite)
    try:
        surface.save(final_output)
    except (OSError, ValueError) as exc:
        raise typer.BadParameter(f"Failed to write image: {exc}") from exc
    _report("PNG", final_output, opts, count_strokes(commands))


@app.command()
def svg(
    output: pathlib.Path = typer.Argument(pathlib.Path("bubble.svg"), help="SVG file to write."),
    size: int | None = SizeOption,
    bubble_color: str | None = BubbleColorOption,
    stripe_color: str | None = StripeColorOption,
    stripe_width: float | None = StripeWidthOption,
    background: str | None = BackgroundOption,
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing file."),
) -> None:
    """
    Export the striped bubble as an SVG document.
    """

    opts = _resolve_options(size, bubble_color, stripe_color, stripe_width, background)
    commands = _plan(opts)
    surface = SvgSurface(opts.rect.width, opts.rect.height, background=opts.background)
    replay(commands, surface)

    final_output = _output_path(output, overwrite)
    try:
        surface.save(final_output)
    except OSError as exc:
        raise typer.BadParameter(f"Failed to write SVG: {exc}") from exc
    _report("SVG", final_output, opts, count_strokes(commands))


@app.command()
def plan(
    size: int | None = SizeOption,
    stripe_width: float | None = StripeWidthOption,
) -> None:
    """
    Print the draw commands for a bubble without rendering it.
    """

    opts = _resolve_options(size, None, None, stripe_width, None)
    commands = _plan(opts)

    console.rule("Bubble plan")
    table = Table("#", "Command", "Arguments")
    for idx, command in enumerate(commands):
        name, args = describe(command)
        table.add_row(str(idx), name, args)
    console.print(table)
    strokes = stripe_count(bubble_radius(opts.rect), opts.stripe_width)
    console.print(f"[magenta]{strokes} stripes (1 centre + {(strokes - 1) // 2} mirrored pairs).[/magenta]")
