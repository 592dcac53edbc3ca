# filekit

Small, dependency-free file utilities for everyday scripting.

## Modules

- **`filekit.copying`**
  - `copy_file(source, destination)` copies a file's contents and permission bits.
    It returns the size of the copy in bytes.
  - `copy_file_manual(source, destination)` reads the whole source and writes it out.
    It returns the number of bytes.
  - `ensure_dir(path)` creates a directory and any missing parents.
  - `touch_file(path)` creates an empty file, truncating an existing one.
  - `copy_dir_recursive(src, dst)` copies a whole directory tree into `dst` and creates `dst` if needed.
- **`filekit.textfiles`**
  - `read_lines_until_blank(stream)` collects lines from a stream up to the first blank line or the end of input.
  - `write_lines(path, lines)` writes the lines one per line, with `\n` endings.
  - `read_lines(path)` returns the lines without their `\n` / `\r\n` terminators.
  - `read_text(path)` returns the whole file as UTF-8 text.
- **`filekit.logbook`**
  - `format_entry(message, now)` builds a line of the form `YYYY-MM-DD HH:MM:SS - message`.
  - `append_entry(path, message, now)` appends such a line to a file and creates the file if needed.
  - `run(stdin, stdout, path, clock)` is an interactive prompt. It logs each typed line to `log.txt` by default. It stops at `exit` (in any case) or at the end of input, and returns the number of entries written.
- **`filekit.transfer`**
  - `send_file(path, host, port, chunk_size)` streams a file over TCP in 1024-byte chunks by default. It returns the number of bytes sent.
  - `receive_into(conn, path, chunk_size)` writes what a socket delivers into a file until the peer closes the connection.
  - `serve(host, port, path, max_clients)` accepts connections and writes each upload to `path` in its own thread. Without `max_clients` it runs forever. Progress is reported through the `logging` module.
- **`filekit.prompts`**
  - `get_input(prompt, stdin, stdout)` prints a prompt and reads one trimmed line.
  - `get_input_bytes(prompt, stdin, stdout)` does the same from a binary stream and decodes invalid UTF-8 leniently.

## Installation

```
pip install .
```

## Command line

```
filekit
filekit --dest-root /path/to/backups
```

The command asks for two things:

1. A source directory, absolute or relative to the current directory.
2. A destination name.

It then copies the source tree to `<dest-root>/<name>`. The default destination root is `C:\copy`.

The source must exist and must be a directory. If it is not, the command prints a message on standard error and copies nothing.

## Library use

```python
from datetime import datetime

from filekit.copying import copy_dir_recursive, copy_file
from filekit.logbook import append_entry
from filekit.textfiles import read_lines, write_lines

copy_file("notes.txt", "notes_copy.txt")
copy_dir_recursive("project/src", "backup/src")

write_lines("multiline.txt", ["first line", "second line"])
print(read_lines("multiline.txt"))  # ['first line', 'second line']

append_entry("log.txt", "started the job", datetime.now())
```

Sending a file to a listening receiver:

```python
from filekit.transfer import send_file, serve

# on the receiving side
serve("0.0.0.0", 9999, "received.bin", max_clients=1)

# on the sending side
send_file("video.mkv", "192.0.2.10", 9999)
```

## What it does not do

- The log book and the TCP transfer have no commands of their own. Use them from Python.
- The transfer sends raw bytes only:
  - no file name or size is sent;
  - there is no authentication or encryption;
  - an interrupted transfer cannot be resumed.
- Every upload to a server goes to the same file path.

## Running the tests

```
pip install .[test]
pytest
```