# linereader

Read lines one at a time from raw operating-system file descriptors. Data is
read with `os.read` in chunks of a fixed size. Whatever follows the last
newline is kept until the next call. Lines are returned as `bytes`.

## Installation

```
pip install .
```

## Reading a single descriptor

```python
import os
from linereader.reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
reader = LineReader(fd, 300)

first = reader.read_line()   # b"first line\n", or None at end of input
for line in reader:          # yields the remaining lines
    print(line.decode(), end="")

reader.reset()               # drops any data still held
os.close(fd)
```

Each line comes back with its trailing newline. The last line of the input
may have none. Once the input is used up, `read_line` returns `None`.

`LineReader(fd, buffer_size=300)` raises `ValueError` if `fd` is negative or
`buffer_size` is not positive. If a read fails, the `OSError` propagates and
the held data is discarded.

The module-level `linereader.reader.get_next_line(fd)` shares one leftover
buffer across all calls and reads 300 bytes at a time. A negative descriptor
discards that buffer and returns `None`.

Two helpers split held data:

- `extract_line(buffer)` returns the first line, newline included. It returns
  `None` for an empty buffer or for `None`.
- `remaining_after_line(buffer)` returns what follows the first newline. It
  returns `None` if there is no newline.

## Reading several descriptors at once

```python
from linereader.multi import MultiLineReader

reader = MultiLineReader(300, 1024)
line_a = reader.read_line(fd_a)
line_b = reader.read_line(fd_b)
line_a2 = reader.read_line(fd_a)   # continues where fd_a left off
reader.reset(fd_a)
```

`MultiLineReader(buffer_size=300, max_fds=16)` keeps a separate leftover
buffer for each descriptor, so data from one never mixes with another.
`read_line` returns `None` for any descriptor outside `0 <= fd < max_fds`.
A non-positive `buffer_size` or `max_fds` raises `ValueError`.

The module-level `linereader.multi.get_next_line(fd)` does the same job with
one shared `MultiLineReader` that uses the defaults (300-byte reads,
descriptors 0 to 15).

## Running the tests

```
pip install ".[test]"
pytest
```