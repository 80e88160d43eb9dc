"""CLI command implementations"""

import logging
import signal
import threading
from pathlib import Path
from typing import Annotated, Optional

import typer

from md2html import __version__
from md2html.config import Settings, load_config
from md2html.core.pipeline import convert
from md2html.core.utils.fs import MD_SUFFIX, file_exists
from md2html.core.watch import FileWatcher
from md2html.errors import Md2HtmlError, WatchError


LOG_FORMAT = "[md2html] %(levelname)s %(name)s: %(message)s"
SHUTDOWN_POLL_S = 0.2


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail("Invalid configuration", e)


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("md2html").setLevel(level)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"md2html {__version__}")
        raise typer.Exit()


def _run_convert(input_path: Path, output_path: Optional[Path], settings: Settings, verb: str) -> bool:
    """Run one conversion and report it. Returns False on failure."""
    try:
        result = convert(input_path, output_path, settings)
    except Md2HtmlError as e:
        typer.echo(f"Error: {e}", err=True)
        return False
    typer.echo(f"{verb}: {result.input_path} -> {result.output_path}")
    return True


def _wait_for_shutdown(done: threading.Event) -> None:
    """Block until SIGTERM sets done or the user hits Ctrl+C."""
    try:
        while not done.wait(SHUTDOWN_POLL_S):
            pass
    except KeyboardInterrupt:
        pass


def _watch(input_path: Path, output_path: Optional[Path], settings: Settings) -> None:
    """Rebuild on every debounced change until interrupted."""
    done = threading.Event()

    def on_change(path: Path) -> None:
        _run_convert(path, output_path, settings, "Recompiled")

    def on_error(error: WatchError) -> None:
        typer.echo(f"Error: {error}", err=True)

    previous = signal.signal(signal.SIGTERM, lambda signum, frame: done.set())
    watcher = FileWatcher(input_path, on_change, settings.debounce_ms, on_error=on_error)
    try:
        watcher.start()
        typer.echo(f"Watching {input_path} for changes... (Ctrl+C to stop)", err=True)
        _wait_for_shutdown(done)
    finally:
        watcher.stop()
        if previous is not None:
            signal.signal(signal.SIGTERM, previous)
    typer.echo(f"Stopped watching {input_path}.", err=True)


def convert_cmd(
    input_file: Annotated[Path, typer.Argument(metavar="INPUT", help="Path to the Markdown file to convert")],
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Output file path (default: input with .html extension)")] = None,
    out_dir: Annotated[Optional[str], typer.Option("--out-dir", help="Directory for the derived .html file")] = None,
    watch: Annotated[bool, typer.Option("--watch", "-w", help="Watch the input file and recompile on change")] = False,
    version: Annotated[Optional[bool], typer.Option(
        "--version", "-V", callback=_version_callback, is_eager=True, help="Show the version and exit",
    )] = None,
    ):
    """Convert a Markdown file into a standalone HTML document."""
    settings = _settings(overrides={"output_dir": out_dir})
    _configure_logging(settings.log_level)

    input_path = input_file.resolve()
    if not file_exists(input_path):
        _fail(f"Input file not found: {input_path}")
    if not input_path.name.lower().endswith(MD_SUFFIX):
        typer.echo(f"Warning: Input file does not have a .md extension: {input_path}", err=True)
    output_path = output.resolve() if output else None

    ok = _run_convert(input_path, output_path, settings, "Converted")
    if watch:
        _watch(input_path, output_path, settings)
    elif not ok:
        raise typer.Exit(1)
