"""Spectrabars CLI - Command line interface."""

from __future__ import annotations

import json
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from spectrabars import __version__
from spectrabars.audio.loader import AudioLoader, AudioLoadError
from spectrabars.config import (
    BARS_HEIGHT,
    COLOR_THEMES,
    DEFAULT_SAMPLE_SIZE,
    DEFAULT_THEME,
    VIZ_FPS,
)
from spectrabars.engine.errors import VisualizationError
from spectrabars.engine.pipeline import max_possible_magnitude, visualize_audio, visualize_frames
from spectrabars.visualization.base import VisualizerRegistry


console = Console()
err_console = Console(stderr=True)

loader = AudioLoader()


def _fail(message: str) -> None:
    err_console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)
    sys.exit(1)


def _load(path: str):
    try:
        return loader.load(path)
    except AudioLoadError as e:
        _fail(str(e))


@click.group()
@click.option("--verbose", is_flag=True, help="Show debug logging")
@click.version_option(version=__version__)
def main(verbose: bool) -> None:
    """Spectrabars - frequency bars for audio visualization.

    Computes the bar heights a renderer would draw for a given video frame
    of an audio file.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@main.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--frame", "-f", type=click.IntRange(min=0), default=0, help="Frame index")
@click.option("--fps", type=float, default=VIZ_FPS, show_default=True, help="Frames per second")
@click.option(
    "--bars",
    "-n",
    "number_of_samples",
    type=int,
    default=DEFAULT_SAMPLE_SIZE // 2,
    show_default=True,
    help="Number of bars (power of two)",
)
@click.option("--max-int", type=float, default=None, help="Normalization divisor (default: track peak)")
@click.option("--smoothing/--no-smoothing", default=True, help="Average with neighboring frames")
@click.option(
    "--style",
    "-s",
    type=click.Choice(VisualizerRegistry.get_names()),
    default="bars",
    help="Rendering style",
)
@click.option(
    "--theme",
    "-t",
    type=click.Choice(list(COLOR_THEMES.keys())),
    default=DEFAULT_THEME,
    help="Color theme",
)
@click.option("--json", "as_json", is_flag=True, help="Print bar values as JSON")
def bars(
    path: str,
    frame: int,
    fps: float,
    number_of_samples: int,
    max_int: float | None,
    smoothing: bool,
    style: str,
    theme: str,
    as_json: bool,
) -> None:
    """Compute the bars for one frame of PATH."""
    audio = _load(path)
    try:
        values = visualize_audio(
            audio,
            frame=frame,
            fps=fps,
            number_of_samples=number_of_samples,
            smoothing=smoothing,
            max_int=max_int,
        )
    except (VisualizationError, ValueError) as e:
        _fail(str(e))

    if as_json:
        click.echo(json.dumps(values.tolist()))
        return

    visualizer = VisualizerRegistry.create(
        style, width=max(len(values), 1), height=BARS_HEIGHT, theme=theme
    )
    visualizer.update(values)
    seconds = frame / fps
    console.print(
        Panel(
            visualizer.render(),
            title=f"[bold]{escape(click.format_filename(path))}[/bold]",
            subtitle=f"frame {frame} @ {fps:g} fps ({seconds:.2f}s)",
            expand=False,
        )
    )


@main.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--start", type=click.IntRange(min=0), default=0, help="First frame")
@click.option("--end", type=click.IntRange(min=0), default=None, help="Last frame, exclusive (default: end of audio)")
@click.option("--fps", type=float, default=VIZ_FPS, show_default=True, help="Frames per second")
@click.option(
    "--bars",
    "-n",
    "number_of_samples",
    type=int,
    default=DEFAULT_SAMPLE_SIZE // 2,
    show_default=True,
    help="Number of bars (power of two)",
)
@click.option("--smoothing/--no-smoothing", default=True, help="Average with neighboring frames")
@click.option("--workers", type=click.IntRange(min=1), default=None, help="Worker threads")
def frames(
    path: str,
    start: int,
    end: int | None,
    fps: float,
    number_of_samples: int,
    smoothing: bool,
    workers: int | None,
) -> None:
    """Print the bars of a frame range of PATH as JSON lines."""
    audio = _load(path)
    if not fps > 0:
        _fail(f'The argument "fps" must be a positive number. Got instead: {fps}')
    if end is None:
        end = audio.frame_count(fps)

    try:
        results = visualize_frames(
            audio,
            range(start, end),
            fps=fps,
            number_of_samples=number_of_samples,
            smoothing=smoothing,
            workers=workers,
        )
    except (VisualizationError, ValueError) as e:
        _fail(str(e))

    for frame, values in zip(range(start, end), results):
        click.echo(json.dumps({"frame": frame, "bars": values.tolist()}))


@main.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--fps", type=click.FloatRange(min=0, min_open=True), default=VIZ_FPS, show_default=True)
def info(path: str, fps: float) -> None:
    """Show the properties of PATH relevant to visualization."""
    audio = _load(path)

    table = Table(show_header=False, box=None)
    table.add_column(style="dim")
    table.add_column(style="bold")
    table.add_row("Sample rate", f"{audio.sample_rate} Hz")
    table.add_row("Channels", str(audio.number_of_channels))
    table.add_row("Duration", f"{audio.duration_in_seconds:.2f}s")
    table.add_row("Frames", f"{audio.frame_count(fps)} @ {fps:g} fps")
    table.add_row("Max magnitude", str(max_possible_magnitude(audio)))
    console.print(table)


if __name__ == "__main__":
    main()
