"""Typer-based CLI entry point for splitting and joining files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

import typer
from rich.markup import escape

from .config import ConfigError, Settings, load_settings
from .joiner import JoinError, join_pieces
from .outcome import ExitCode
from .reporting import ConsoleReporter, NullReporter, Reporter
from .rich_console import error_console
from .splitter import SplitRequest, split_file

LOGGER = logging.getLogger("file_tools.cli")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Conventional status for a run stopped with Ctrl+C.
INTERRUPTED_EXIT_CODE = 130

app = typer.Typer(
    no_args_is_help=True,
    help="Split a file into pieces of bounded size and join them back together.",
)


@dataclass
class _State:
    settings: Settings
    reporter: Reporter


def setup_logging(verbose: bool, settings: Settings) -> None:
    level = logging.DEBUG if verbose else settings.log_level
    logger = logging.getLogger("file_tools")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    fmt = logging.Formatter(LOG_FORMAT)
    sh = logging.StreamHandler()
    sh.setFormatter(fmt)
    logger.addHandler(sh)
    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(settings.log_file, mode="a", encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)


def _fail(message: str, code: ExitCode) -> typer.Exit:
    error_console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)
    return typer.Exit(int(code))


@app.callback()
def configure(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Do not print per-piece progress.",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        envvar="FILE_TOOLS_CONFIG",
        help="YAML settings file (log_level, log_file, buffer_size).",
    ),
) -> None:
    """Split a file into pieces of bounded size and join them back together."""
    try:
        settings = load_settings(config)
    except ConfigError as exc:
        raise _fail(f"Invalid configuration: {exc}", ExitCode.COMMAND_LINE_ERROR) from exc

    setup_logging(verbose, settings)
    reporter: Reporter = NullReporter() if quiet else ConsoleReporter()
    ctx.obj = _State(settings=settings, reporter=reporter)


@app.command("split")
def split_command(
    ctx: typer.Context,
    source_path: Path = typer.Argument(
        ...,
        help="Filename and path to the file to process.",
    ),
    max_bytes: str = typer.Argument(
        ...,
        help=(
            "Maximum size of each split file in bytes. A number may be followed by K, M or G, "
            "e.g. 20M splits the file into pieces of at most 20 megabytes."
        ),
    ),
) -> None:
    """Split a file into multiple files of at most MAX_BYTES each, written next to it."""
    state: _State = ctx.obj
    outcome = split_file(
        SplitRequest(source_path=source_path, max_bytes_spec=max_bytes),
        reporter=state.reporter,
        buffer_size=state.settings.buffer_size,
    )
    if not outcome.ok:
        raise _fail(outcome.message, outcome.exit_code)
    LOGGER.info("Split %s into %d piece(s)", source_path, outcome.piece_count)


@app.command("join")
def join_command(
    ctx: typer.Context,
    source_path: Path = typer.Argument(
        ...,
        help="Path of the original file; its pieces are looked up next to it.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Destination for the reassembled file (defaults to SOURCE_PATH).",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        help="Overwrite the destination file if it already exists.",
    ),
) -> None:
    """Reassemble a file from the pieces produced by `split`."""
    state: _State = ctx.obj
    try:
        count = join_pieces(source_path, output=output, force=force, reporter=state.reporter)
    except (JoinError, OSError) as exc:
        raise _fail(str(exc), ExitCode.APPLICATION_ERROR) from exc
    LOGGER.info("Joined %d piece(s) into %s", count, output or source_path)


def main(argv: Sequence[str] | None = None) -> int:
    try:
        result = app(
            args=list(argv) if argv is not None else None,
            prog_name="file-tools",
            standalone_mode=False,
        )
    except typer.TyperException as exc:
        # Usage errors (missing argument, unknown option such as "-100") carry their own status.
        error_console.print(escape(exc.format_message()), soft_wrap=True)
        return exc.exit_code
    except typer.Abort:
        error_console.print("Aborted.")
        return INTERRUPTED_EXIT_CODE
    except Exception as exc:
        LOGGER.critical("Unhandled exception: %s", exc)
        LOGGER.debug("Traceback for unhandled exception", exc_info=True)
        error_console.print(f"[red]Unhandled error:[/red] {escape(str(exc))}", soft_wrap=True)
        return int(ExitCode.UNHANDLED_EXCEPTION)
    if isinstance(result, int):
        return result
    return int(ExitCode.SUCCESS)


if __name__ == "__main__":
    raise SystemExit(main())
