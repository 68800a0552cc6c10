"""Deterministic names for the pieces of a split file.

``report.csv`` becomes ``report.000.csv``, ``report.001.csv``, ...;
an extensionless ``data`` becomes ``data.000``, ``data.001``, ...
Indices are zero-padded to three digits and simply grow wider past 999.
"""

from __future__ import annotations

from pathlib import Path

INDEX_WIDTH = 3


def _split_extension(name: str) -> tuple[str, str]:
    """Split a file name into ``(stem, extension)`` without the dot.

    The extension is whatever follows the final dot, so ``.bashrc`` has the
    extension ``bashrc`` and an empty stem. A trailing dot (``name.``) means
    no extension; that dot is dropped.
    """
    stem, dot, ext = name.rpartition(".")
    if not dot:
        return name, ""
    if not ext:
        return name[:-1], ""
    return stem, ext


def _format_index(index: int) -> str:
    if index < 0:
        raise ValueError(f"Piece index must be non-negative, got {index}")
    return f"{index:0{INDEX_WIDTH}d}"


def piece_name(source_path: str | Path, index: int) -> Path:
    """Return the path of piece ``index`` for ``source_path``."""
    source = Path(source_path)
    stem, ext = _split_extension(source.name)
    parts = [stem, _format_index(index)]
    if ext:
        parts.append(ext)
    return source.with_name(".".join(parts))


def piece_index(source_path: str | Path, candidate: str | Path) -> int | None:
    """Return the piece index encoded in ``candidate``, if it is a piece of ``source_path``."""
    source = Path(source_path)
    candidate = Path(candidate)
    stem, ext = _split_extension(source.name)

    prefix = f"{stem}."
    suffix = f".{ext}" if ext else ""
    name = candidate.name
    if not name.startswith(prefix) or not name.endswith(suffix):
        return None

    digits = name[len(prefix) : len(name) - len(suffix)]
    if len(digits) < INDEX_WIDTH or not (digits.isascii() and digits.isdigit()):
        return None
    index = int(digits)
    # Reject spellings that piece_name would never produce, e.g. "0007".
    if _format_index(index) != digits:
        return None
    return index
