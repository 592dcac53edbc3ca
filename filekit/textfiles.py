"""Reading and writing line-oriented text files."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def read_lines_until_blank(stream: TextIO) -> list[str]:
    """Collect lines from ``stream`` until a blank (whitespace-only) line or end of input."""
    lines = []
    for raw in stream:
        line = _strip_terminator(raw)
        if not line.strip():
            break
        lines.append(line)
    return lines


def write_lines(path: str | os.PathLike, lines: Iterable[str]) -> None:
    """Write each line followed by a newline, replacing any existing file."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        for line in lines:
            handle.write(f"{line}\n")


def read_lines(path: str | os.PathLike) -> list[str]:
    """Return the lines of a file without their ``\\n`` or ``\\r\\n`` terminators."""
    with open(path, encoding="utf-8", newline="") as handle:
        content = handle.read()
    if not content:
        return []
    parts = content.split("\n")
    if content.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def read_text(path: str | os.PathLike) -> str:
    """Return the whole file as text, exactly as stored."""
    return Path(path).read_text(encoding="utf-8", errors="strict")