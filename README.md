# fdlines

Read lines one at a time straight from an operating-system file
descriptor. Data is pulled with `os.read` in chunks of a fixed buffer
size. Each call returns the next line as `bytes`, with its trailing
newline (`b"\n"`) if it has one. Only the last line of the input may lack
one. Data read past the end of a line is kept and returned by later
calls. When the input runs out, you get `None`.

## Installation

```
pip install fdlines
```

## Reading from one descriptor

```python
import os
from fdlines.reader import LineReader, read_lines

fd = os.open("notes.txt", os.O_RDONLY)
reader = LineReader(fd, 42)

first = reader.read_line()      # e.g. b"first line\n"
for line in reader:             # the remaining lines
    print(line)

os.close(fd)
```

- `LineReader(fd, buffer_size=42)` raises `ValueError` if `fd` is negative
  or `buffer_size` is not positive.
- `read_line()` returns the next line, or `None` once the input is
  exhausted. If reading the descriptor fails, the pending data is
  discarded and the `OSError` is raised.
- `reset()` throws away any data that has been read but not yet returned.
- Iterating over a `LineReader` yields lines until `read_line()` returns
  `None`.
- `read_lines(fd, buffer_size=42)` is a shortcut that yields every
  remaining line from a descriptor.

## Reading from several descriptors at once

`MultiLineReader` keeps a separate pending buffer for each descriptor.
This lets you interleave reads from several descriptors without mixing
their contents:

```python
import os
from fdlines.multi import MultiLineReader

a = os.open("a.txt", os.O_RDONLY)
b = os.open("b.txt", os.O_RDONLY)
lines = MultiLineReader(45)

lines.read_line(a)
lines.read_line(b)
lines.read_line(a)

print(a in lines, len(lines))   # descriptors currently tracked
lines.discard(b)                # drop whatever is buffered for b
```

- `MultiLineReader(buffer_size=45)` raises `ValueError` if `buffer_size`
  is negative.
- `read_line(fd)` raises `ValueError` for a negative descriptor. If
  reading fails, it drops the descriptor's state and raises the
  `OSError`.
- A descriptor stops being tracked once it returns its last line (a line
  without a trailing newline) or `None`. It also stops being tracked when
  you call `discard(fd)`, or when a read on it fails.
- `fd in reader` and `len(reader)` tell you which descriptors, and how
  many, are currently tracked.

## What it does not do

This is a library only. There is no command-line tool. It does not open
or close descriptors for you, and it does not decode the bytes it returns
into text.

## Running the tests

```
pip install -e ".[test]"
pytest
```