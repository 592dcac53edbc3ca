"""Interactive command that copies a directory tree under a destination root."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from filekit.copying import copy_dir_recursive
from filekit.prompts import get_input

DEFAULT_DEST_ROOT = Path(r"C:\copy")


def resolve_source(src_input: str, cwd: str | Path) -> Path:
    """Use an absolute path as given; join a relative one onto ``cwd``."""
    path = Path(src_input)
    return path if path.is_absolute() else Path(cwd) / path


def copy_tree_interactive(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    cwd: str | Path | None = None,
    dst_root: str | Path = DEFAULT_DEST_ROOT,
) -> bool:
    """Ask for a source directory and a destination name, then copy; return success."""
    out = sys.stdout if stdout is None else stdout
    err = sys.stderr if stderr is None else stderr
    base = Path.cwd() if cwd is None else Path(cwd)

    src_input = get_input("請輸入來源目錄路徑: ", stdin, out)
    dst_input = get_input("請輸入目的目錄名稱（相對於目前目錄）: ", stdin, out)

    src_path = resolve_source(src_input, base)
    dst_path = Path(dst_root) / dst_input

    if not src_path.exists():
        print(f"來源路徑不存在: {src_path}", file=err)
        return False
    if not src_path.is_dir():
        print(f"來源路徑不是一個目錄: {src_path}", file=err)
        return False

    try:
        copy_dir_recursive(src_path, dst_path)
    except OSError as exc:
        print(f"複製過程中發生錯誤: {exc}", file=err)
        return False
    print("目錄複製成功!", file=out)
    return True


def main(argv: list[str] | None = None) -> int:
    """Run the interactive directory copy."""
    parser = argparse.ArgumentParser(
        prog="filekit", description="Copy a directory tree under a destination root."
    )
    parser.add_argument(
        "--dest-root",
        type=Path,
        default=DEFAULT_DEST_ROOT,
        help="directory under which the copy is created",
    )
    args = parser.parse_args(argv)
    copy_tree_interactive(dst_root=args.dest_root)
    return 0


if __name__ == "__main__":
    sys.exit(main())