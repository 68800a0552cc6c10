"""Reassemble a file from the pieces written by the splitter."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from .naming import piece_index
from .reporting import NullReporter, Reporter

LOGGER = logging.getLogger("file_tools.joiner")


class JoinError(Exception):
    """Raised when pieces cannot be joined back into a file."""


def find_pieces(source_path: str | Path) -> list[Path]:
    """Return the pieces of ``source_path`` ordered by piece index.

    Ordering is numeric, so ``name.1000.ext`` follows ``name.999.ext``.
    The indices must run from 0 without gaps.
    """
    source = Path(source_path)
    directory = source.parent
    if not directory.is_dir():
        raise JoinError(f"Directory does not exist: {directory}")

    indexed: list[tuple[int, Path]] = []
    for candidate in directory.iterdir():
        index = piece_index(source, candidate)
        if index is not None and candidate.is_file():
            indexed.append((index, candidate))
    indexed.sort()

    if not indexed:
        raise JoinError(f"No pieces of {source.name} found in {directory}")

    for expected, (index, path) in enumerate(indexed):
        if index != expected:
            raise JoinError(f"Missing piece {expected} of {source.name} (next found: {path.name})")
    return [path for _, path in indexed]


def join_pieces(
    source_path: str | Path,
    *,
    output: str | Path | None = None,
    force: bool = False,
    reporter: Reporter | None = None,
) -> int:
    """Concatenate the pieces of ``source_path`` into ``output``.

    ``output`` defaults to ``source_path`` itself. Returns the number of pieces
    used.
    """
    reporter = reporter or NullReporter()
    source = Path(source_path)
    destination = Path(output) if output is not None else source

    pieces = find_pieces(source)
    if any(destination.resolve() == piece.resolve() for piece in pieces):
        raise JoinError(f"Output {destination} is one of the pieces being joined.")
    if destination.exists() and not force:
        raise JoinError(
            f"Refusing to overwrite existing file: {destination}. Pass --force to overwrite."
        )

    destination.parent.mkdir(parents=True, exist_ok=True)
    LOGGER.info("Joining %d piece(s) into %s", len(pieces), destination)
    with destination.open("wb") as dst:
        for piece in pieces:
            reporter.write_line(f"Appending file '{piece}'")
            with piece.open("rb") as src:
                shutil.copyfileobj(src, dst)
    return len(pieces)
