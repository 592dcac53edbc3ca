"""Copying files and directory trees, and creating directories and empty files."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

PathLike = str | os.PathLike


def copy_file(source: PathLike, destination: PathLike) -> int:
    """Copy a file's contents and permission bits; return the number of bytes copied."""
    shutil.copyfile(source, destination)
    shutil.copymode(source, destination)
    return Path(destination).stat().st_size


def copy_file_manual(source: PathLike, destination: PathLike) -> int:
    """Copy a file by reading it whole and writing it out; return the number of bytes."""
    contents = Path(source).read_bytes()
    Path(destination).write_bytes(contents)
    return len(contents)


def ensure_dir(path: PathLike) -> Path:
    """Create ``path`` and any missing parents; existing directories are left alone."""
    target = Path(path)
    target.mkdir(parents=True, exist_ok=True)
    return target


def touch_file(path: PathLike) -> Path:
    """Create an empty file at ``path``, truncating it if it already exists."""
    target = Path(path)
    with target.open("wb"):
        pass
    return target


def copy_dir_recursive(src: PathLike, dst: PathLike) -> None:
    """Copy every file and subdirectory of ``src`` into ``dst``, creating it if needed."""
    src_path = Path(src)
    dst_path = Path(dst)
    if not dst_path.exists():
        dst_path.mkdir(parents=True, exist_ok=True)
    for entry in src_path.iterdir():
        target = dst_path / entry.name
        if entry.is_dir():
            copy_dir_recursive(entry, target)
        else:
            copy_file(entry, target)