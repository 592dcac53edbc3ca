"""An interactive log that appends timestamped entries to a file."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from datetime import datetime
from typing import TextIO

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_PATH = "log.txt"
EXIT_COMMAND = "exit"


def format_entry(message: str, now: datetime) -> str:
    """Return one log line: ``timestamp - message`` followed by a newline."""
    return f"{now.strftime(TIMESTAMP_FORMAT)} - {message}\n"


def append_entry(path: str | os.PathLike, message: str, now: datetime) -> str:
    """Append a formatted entry to ``path``, creating the file if needed; return the entry."""
    entry = format_entry(message, now)
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(entry)
    return entry


def _is_exit(text: str) -> bool:
    return text.isascii() and text.lower() == EXIT_COMMAND


def run(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    path: str | os.PathLike = DEFAULT_LOG_PATH,
    clock: Callable[[], datetime] | None = None,
) -> int:
    """Log every line typed until ``exit`` (any case) or end of input; return entries written."""
    source = sys.stdin if stdin is None else stdin
    out = sys.stdout if stdout is None else stdout
    now = datetime.now if clock is None else clock

    print("請輸入日誌內容，若要退出請輸入 'exit'：", file=out)
    written = 0
    while True:
        out.write("> ")
        out.flush()
        raw = source.readline()
        if not raw:
            break
        text = raw.strip()
        if _is_exit(text):
            print("程式退出。", file=out)
            break
        entry = append_entry(path, text, now())
        written += 1
        print(f"已記錄：{entry.strip()}", file=out)
    return written