"""Reading puzzle input files."""

from __future__ import annotations

import os


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the lines of a text file without their line endings.

    Lines end at ``"\\n"``. A ``"\\r"`` just before it is dropped. A final
    line ending does not produce an extra empty line.
    """
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]