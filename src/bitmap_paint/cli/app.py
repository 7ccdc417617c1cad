"""Typer CLI application."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from bitmap_paint.config import load_config
from bitmap_paint.core.constants import MAX_HEIGHT, MAX_WIDTH
from bitmap_paint.core.errors import GridError
from bitmap_paint.logging_setup import configure_logging


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="bitmap-paint",
        help="Draw monochrome bitmaps and animations in the terminal.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    @app.callback()
    def main(
        log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Append log records to this file")] = None,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug records")] = False,
    ) -> None:
        """Monochrome raster editor with packed bitmap export."""
        configure_logging(log_file, verbose=verbose)

    def _load_or_exit(path: Path):
        from bitmap_paint.io.reader import load_frames
        try:
            return load_frames(path)
        except (OSError, GridError) as e:
            err_console.print(f"[red]Error loading {path}: {e}[/]")
            raise typer.Exit(1)

    @app.command()
    def paint(
        file: Annotated[Optional[Path], typer.Argument(help="Text grid file to open")] = None,
        width: Annotated[Optional[int], typer.Option("--width", "-w", min=1, max=MAX_WIDTH, help="Canvas width")] = None,
        height: Annotated[Optional[int], typer.Option("--height", "-H", min=1, max=MAX_HEIGHT, help="Canvas height")] = None,
        config_file: Annotated[Optional[Path], typer.Option("--config", help="Config file (default: ~/.config/bitmap-paint/config.json)")] = None,
    ) -> None:
        """Launch the interactive editor."""
        from bitmap_paint.cli.core.terminal import Terminal
        from bitmap_paint.cli.studio.editor import run_editor
        from bitmap_paint.edit.controller import EditorController

        if not Terminal.is_interactive():
            err_console.print("[red]This program must be run in an interactive terminal.[/]")
            raise typer.Exit(1)

        config = load_config(config_file)
        controller = EditorController(
            width or config.width,
            height or config.height,
            frame_delay=config.frame_delay_ms,
            fill_capacity=config.fill_capacity,
        )
        if file is not None and file.exists() and not controller.load(file):
            err_console.print(f"[red]{controller.message}[/]")
            raise typer.Exit(1)

        run_editor(controller, file)

    @app.command()
    def view(
        path: Annotated[Path, typer.Argument(help="Text grid file to show")],
        frame: Annotated[int, typer.Option("--frame", "-f", min=1, help="Frame to show (1-based)")] = 1,
    ) -> None:
        """Print a grid to the terminal."""
        from bitmap_paint.render.terminal import TerminalRenderer

        frames = _load_or_exit(path)
        if frame > len(frames):
            err_console.print(f"[red]{path.name} has only {len(frames)} frame(s)[/]")
            raise typer.Exit(1)
        print(TerminalRenderer().render(frames[frame - 1]))

    @app.command()
    def info(
        path: Annotated[Path, typer.Argument(help="Text grid file to inspect")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show dimensions, frame count and packed size of a grid file."""
        from bitmap_paint.codec.packed import bytes_per_frame

        frames = _load_or_exit(path)
        first = frames[0]
        data = {
            "width": first.width,
            "height": first.height,
            "frames": len(frames),
            "bytes_per_frame": bytes_per_frame(first.width, first.height),
            "pixels_on": [frame.count() for frame in frames],
        }
        if json_output:
            print(json.dumps(data, indent=2))
            return

        console.print(f"[bold cyan]{path.name}[/]")
        console.print(f"  [bold]Size:[/]    {data['width']}x{data['height']}")
        console.print(f"  [bold]Frames:[/]  {data['frames']}")
        console.print(f"  [bold]Packed:[/]  {data['bytes_per_frame']} bytes per frame")
        for index, count in enumerate(data["pixels_on"], start=1):
            console.print(f"  [dim]Frame {index}:[/] {count} pixels on")

    @app.command()
    def export(
        source: Annotated[Path, typer.Argument(help="Text grid file")],
        dest: Annotated[Path, typer.Argument(help="Destination C source/header")],
        name: Annotated[Optional[str], typer.Option("--name", "-n", help="C array name")] = None,
    ) -> None:
        """Export a grid (or animation) as a packed C byte array."""
        from bitmap_paint.io.writer import save_animation_export, save_export

        frames = _load_or_exit(source)
        try:
            if len(frames) > 1:
                save_animation_export(frames, dest, name=name or "animation")
            else:
                save_export(frames[0], dest, name=name or "bitmap")
        except OSError as e:
            err_console.print(f"[red]Error writing {dest}: {e}[/]")
            raise typer.Exit(1)
        console.print(f"[green]Exported {source} → {dest}[/]")

    @app.command("import-image")
    def import_image(
        image: Annotated[Path, typer.Argument(help="PNG/JPG/GIF image")],
        dest: Annotated[Path, typer.Argument(help="Destination text grid file")],
        width: Annotated[Optional[int], typer.Option("--width", "-w", min=1, max=MAX_WIDTH, help="Grid width")] = None,
        height: Annotated[Optional[int], typer.Option("--height", "-H", min=1, max=MAX_HEIGHT, help="Grid height")] = None,
        threshold: Annotated[int, typer.Option("--threshold", "-t", min=0, max=256, help="Gray level below which pixels are on")] = 128,
        invert: Annotated[bool, typer.Option("--invert", "-i", help="Light pixels become on")] = False,
    ) -> None:
        """Convert an image to a text grid by thresholding."""
        from bitmap_paint.import_image import to_grid
        from bitmap_paint.io.writer import save

        try:
            grid = to_grid(image, width, height, threshold=threshold, invert=invert)
            save(grid, dest)
        except (OSError, GridError) as e:
            err_console.print(f"[red]Error importing {image}: {e}[/]")
            raise typer.Exit(1)
        console.print(f"[green]Imported {image} → {dest} ({grid.width}x{grid.height})[/]")

    return app
