"""Chunked split of one source file into size-bounded pieces."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from .naming import piece_index, piece_name
from .outcome import OutcomeKind, SplitOutcome
from .reporting import NullReporter, Reporter
from .size_spec import SizeSpecError, format_size, parse_size

LOGGER = logging.getLogger("file_tools.splitter")

DEFAULT_BUFFER_SIZE = 1024 * 1024


class TruncatedReadError(OSError):
    """The source ended before the byte count measured when it was opened."""


@dataclass(frozen=True, slots=True)
class SplitRequest:
    source_path: str | Path
    max_bytes_spec: str


def _copy_exact(src: BinaryIO, dst: BinaryIO, num_bytes: int, buffer_size: int) -> None:
    remaining = num_bytes
    while remaining > 0:
        chunk = src.read(min(remaining, buffer_size))
        if not chunk:
            raise TruncatedReadError(
                f"Source ended {remaining} byte(s) short of the expected piece size {num_bytes}."
            )
        dst.write(chunk)
        remaining -= len(chunk)


def _write_piece(src: BinaryIO, dest: Path, num_bytes: int, buffer_size: int) -> None:
    """Write the next ``num_bytes`` of ``src`` to ``dest``.

    The piece is flushed and closed before returning. If copying fails (or is
    interrupted) the partial piece is removed before the error propagates, so a
    file carrying a piece name is always complete.
    """
    with dest.open("wb") as dst:
        try:
            _copy_exact(src, dst, num_bytes, buffer_size)
            dst.flush()
        except BaseException:
            dst.close()
            dest.unlink(missing_ok=True)
            raise


def _remove_stale_pieces(source: Path, piece_count: int, reporter: Reporter) -> None:
    """Delete pieces numbered ``piece_count`` or higher left by an earlier split."""
    for candidate in sorted(source.parent.iterdir()):
        index = piece_index(source, candidate)
        if index is None or index < piece_count or not candidate.is_file():
            continue
        LOGGER.info("Removing stale piece %s from a previous split", candidate)
        reporter.write_line(f"Removing stale file '{candidate}'")
        candidate.unlink()


def split_file(
    request: SplitRequest,
    *,
    reporter: Reporter | None = None,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> SplitOutcome:
    """Split ``request.source_path`` into pieces written alongside it.

    Every expected failure is returned as a classified ``SplitOutcome``:
    an invalid size specification is a format error and touches no files,
    problems opening, reading or writing are I/O errors, and anything else
    raised while splitting is an unexpected error. The cause is kept on the
    outcome in both of the latter cases.
    """
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")
    reporter = reporter or NullReporter()

    try:
        max_bytes = parse_size(request.max_bytes_spec)
    except SizeSpecError as exc:
        LOGGER.debug("Rejected size specification %r: %s", request.max_bytes_spec, exc)
        return SplitOutcome.failure(OutcomeKind.FORMAT_ERROR, str(exc), cause=exc)

    source = Path(request.source_path)
    piece_count = 0
    try:
        with source.open("rb") as src:
            # Length is fixed at open time; a shrinking source surfaces as a truncated read.
            total_size = os.fstat(src.fileno()).st_size
            LOGGER.info(
                "Splitting %s (%d bytes) into pieces of at most %s",
                source,
                total_size,
                format_size(max_bytes),
            )

            consumed = 0
            while consumed < total_size:
                piece_size = min(max_bytes, total_size - consumed)
                out_path = piece_name(source, piece_count)

                reporter.write(f"Creating file '{out_path}'")
                LOGGER.debug(
                    "Buffer size %d, position %d, piece %d", piece_size, consumed, piece_count
                )
                _write_piece(src, out_path, piece_size, buffer_size)
                reporter.write_line(f" size {piece_size} bytes")

                piece_count += 1
                consumed += piece_size

            _remove_stale_pieces(source, piece_count, reporter)
    except OSError as exc:
        LOGGER.debug("I/O failure after %d piece(s) of %s", piece_count, source, exc_info=True)
        return SplitOutcome.failure(
            OutcomeKind.IO_ERROR,
            f"Unable to split '{source}': {exc}",
            cause=exc,
            piece_count=piece_count,
        )
    except Exception as exc:
        LOGGER.exception("Unexpected error after %d piece(s) of %s", piece_count, source)
        return SplitOutcome.failure(
            OutcomeKind.UNEXPECTED_ERROR,
            f"Unexpected error while splitting '{source}': {exc}",
            cause=exc,
            piece_count=piece_count,
        )

    LOGGER.info("Wrote %d piece(s) for %s", piece_count, source)
    return SplitOutcome.success(piece_count)
