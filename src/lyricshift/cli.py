"""lyricshift CLI entry point.

Automatic mode (input only) derives the direction from the extension and
writes ``<stem>_converted.<ext>`` next to the input; ASS inputs also get
their translation/romanization tracks extracted to LRC. Manual mode takes an
explicit direction and output path.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from lyricshift.detect import auto_output_path, detect_direction
from lyricshift.errors import LyricShiftError
from lyricshift.extract import extract_lrc_tracks
from lyricshift.files import convert_file, read_text, write_lrc_files
from lyricshift.models import ConversionResult, Direction
from lyricshift.settings import ConverterSettings, resolve_settings

app = typer.Typer(
    name="lyricshift",
    help="Convert karaoke lyrics between ASS, QRC and Lyricify Syllable (.lys).",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

_VALID_DIRECTIONS = "ass2qrc (2q), qrc2ass (2a), ass2lys (2l), lys2ass (l2a)"


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False, show_time=False)],
        force=True,
    )


def _input_error(message: str) -> None:
    err_console.print(Panel(message, title="[red]Input Error[/red]", border_style="red"))
    raise typer.Exit(1)


def _run_conversion(
    direction: Direction,
    source: Path,
    destination: Path,
    settings: ConverterSettings,
) -> ConversionResult:
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("{task.completed} lines"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task(f"{direction.value}: {source.name}", total=None)

        def _progress_callback(current: int, total: Optional[int]) -> None:
            progress.update(task, completed=current, total=total)

        return convert_file(direction, source, destination, settings, _progress_callback)


def _extract_lrc(source: Path, settings: ConverterSettings) -> None:
    tracks = extract_lrc_tracks(read_text(source), settings)
    if tracks.is_empty():
        console.print("[dim]No translation or romanization lines found.[/dim]")
        return
    for path in write_lrc_files(source, tracks):
        console.print(f"[green]LRC written:[/] [dim]{path.name}[/dim]")


@app.command()
def main(
    input_file: Annotated[
        Path,
        typer.Argument(
            file_okay=True,
            dir_okay=False,
            help="Input file (.ass, .qrc or .lys).",
        ),
    ],
    direction: Annotated[
        Optional[str],
        typer.Argument(help=f"Conversion direction: {_VALID_DIRECTIONS}. Requires OUTPUT_FILE."),
    ] = None,
    output_file: Annotated[
        Optional[Path],
        typer.Argument(dir_okay=False, help="Output file. Requires DIRECTION."),
    ] = None,
    extract_lrc: Annotated[
        bool,
        typer.Option("--extract-lrc", help="Also extract translation/romanization LRC files from ASS input."),
    ] = False,
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config", "-c",
            dir_okay=False,
            help="Settings JSON (default: $LYRICSHIFT_CONFIG, then built-in defaults).",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log per-line details."),
    ] = False,
) -> None:
    """Convert one lyric file."""
    _setup_logging(verbose)

    if (direction is None) != (output_file is None):
        _input_error(
            "Manual mode needs both DIRECTION and OUTPUT_FILE.\n"
            "Give only INPUT_FILE for automatic mode."
        )

    if not input_file.exists():
        _input_error(
            f"File not found: [bold]{input_file}[/bold]\n"
            f"Check that the path is correct and the file is accessible."
        )

    try:
        settings = resolve_settings(config)

        if direction is not None:
            resolved = Direction.parse(direction)
            if resolved is None:
                _input_error(
                    f"Unknown direction: [bold]{direction}[/bold]\n"
                    f"Valid directions: {_VALID_DIRECTIONS}"
                )
            destination = output_file
            want_lrc = extract_lrc
        else:
            ass_lines = read_text(input_file).splitlines() if input_file.suffix.lower() == ".ass" else ()
            resolved = detect_direction(input_file, ass_lines)
            destination = auto_output_path(input_file, resolved)
            want_lrc = True

        console.print(
            f"\n[bold cyan]lyricshift[/bold cyan] — [dim]{input_file.name}[/dim] "
            f"-> [dim]{destination.name}[/dim] ([bold]{resolved.value}[/bold])\n"
        )
        result = _run_conversion(resolved, input_file, destination, settings)

    except LyricShiftError as e:
        err_console.print(Panel(str(e), title="[red]Conversion Error[/red]", border_style="red"))
        raise typer.Exit(1)

    # The conversion output is already written; extraction failures only warn.
    if want_lrc and resolved.source_is_ass:
        try:
            _extract_lrc(input_file, settings)
        except LyricShiftError as e:
            err_console.print(Panel(str(e), title="[yellow]LRC Extraction Skipped[/yellow]", border_style="yellow"))

    console.print(Panel(
        f"[bold green]Conversion complete[/bold green]\n\n"
        f"  Output:   [dim]{destination}[/dim]\n"
        f"  Read:     {result.lines_read} lines\n"
        f"  Written:  {result.lines_written} lines\n"
        f"  Metadata: {len(result.metadata)} tags",
        title="[green]Done[/green]",
        border_style="green",
    ))
    if result.warnings:
        console.print(Panel(
            "Some lines were skipped or had mismatched timing. See the warnings above.",
            title="[yellow]Warnings[/yellow]",
            border_style="yellow",
        ))
