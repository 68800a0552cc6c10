"""Split files into size-bounded pieces and join them back together.

Pieces are written next to the source and carry their order in the file
name, so reconstruction needs nothing but the pieces themselves.
"""

__all__ = [
    "cli",
    "config",
    "joiner",
    "naming",
    "outcome",
    "reporting",
    "size_spec",
    "splitter",
]
