"""Reading a single line of user input after showing a prompt."""

from __future__ import annotations

import sys
from typing import BinaryIO, TextIO


def _show(prompt: str, stdout: TextIO | None) -> None:
    out = sys.stdout if stdout is None else stdout
    out.write(prompt)
    out.flush()


def get_input(prompt: str, stdin: TextIO | None = None, stdout: TextIO | None = None) -> str:
    """Show ``prompt``, read one line of text and return it with surrounding whitespace removed.

    At end of input an empty string is returned.
    """
    _show(prompt, stdout)
    source = sys.stdin if stdin is None else stdin
    return source.readline().strip()


def get_input_bytes(
    prompt: str, stdin: BinaryIO | None = None, stdout: TextIO | None = None
) -> str:
    """Show ``prompt``, read raw bytes up to a newline and decode them leniently.

    Invalid UTF-8 sequences are replaced rather than rejected.
    """
    _show(prompt, stdout)
    source = sys.stdin.buffer if stdin is None else stdin
    raw = source.readline()
    return raw.decode("utf-8", errors="replace").strip()