# rtcommon

Small, dependency-free building blocks for runtime code.

## Modules

- `rtcommon.errors`: the `ErrorCode` integer enumeration. Its codes are grouped
  in blocks that start at 0, 100, 200, 300, 400 and 500. It also provides the
  `StackError` exception, which carries one of those codes in `code`. When no
  message is given, the message defaults to the code's name in lower case.
- `rtcommon.path`: path helpers that accept both `/` and `\` as separators.
  The functions are `is_absolute`, `is_relative`, `get_filename`,
  `remove_filename`, `truncate`, `canonicalize`, `add_slash`, `remove_slash`,
  `combine` and the wildcard matcher `match`. `match` understands `?` and `*`
  and compares without regard to case. Every function returns a new string.
- `rtcommon.strutil`: `trim_whitespace`, `remove_trailing_space`,
  `replace_char` and `safe_copy`. Whitespace means the C-locale set of
  characters: space, `\t`, `\n`, `\v`, `\f` and `\r`. `safe_copy(src, dest_size)`
  returns at most `dest_size - 1` characters. It raises
  `StackError(ErrorCode.INVALID_PARAMETER)` when `src` is `None` or when
  `dest_size` is less than 1.
- `rtcommon.fsport`: descriptions of file-system objects. These are the flags
  `FileAttributes` and `FileMode`, the `SeekOrigin` enumeration, and the
  dataclasses `FileStat` and `DirEntry`, both of which have `is_directory()`.
  Names longer than `MAX_NAME_LEN` (127) are rejected, and so are sizes that do
  not fit in 32 bits.
- `rtcommon.resources`: a read-only archive of embedded files.
  - `ResourceArchive(data)` looks up paths without regard to case.
    `get_data(path)` returns a file's bytes. `search_file(path)` returns a
    `ResourceInfo` that holds `type`, `data_start` and `data_length`.
  - `ResourceType` tells directories from files.
  - `build_archive(tree)` packs a nested dictionary into the archive format.
    Its values are bytes for files and mappings for directories.
- `rtcommon.tasks`: tasks backed by threads and timing helpers.
  - `Task`, `TaskParameters`, `DEFAULT_PARAMS` and `create_task`.
    `create_task` accepts `TaskParameters`, but threads choose their own stack
    size and priority.
  - `delay_task(ms)` and `switch_task()`.
  - `get_system_time()` gives a millisecond clock wrapped to 32 bits, and
    `get_system_time64()` gives the same clock unwrapped.
  - `time_compare(t1, t2)` compares wrapping 32-bit tick counters.
  - The constants `INFINITE_DELAY` and `MAX_DELAY`.
- `rtcommon.sync`: synchronisation primitives with timeouts in milliseconds.
  A timeout of `0` only polls, and `INFINITE_DELAY` waits forever.
  - `Event` resets itself: a successful `wait` consumes the signal.
    `set_from_isr()` sets the event and always returns `False`.
  - `Semaphore(count)` starts at its maximum count. Releases beyond that
    maximum are ignored.
  - `Mutex` can be locked again by its owner and works as a context manager.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Working with paths:

```python
from rtcommon import path

path.canonicalize("/a/b/../c/./d")        # "/a/c/d"
path.combine("docs", "/index.html", 64)   # "docs/index.html"
path.match("Index.HTML", "*.html")        # True
```

Building and reading a resource archive:

```python
from rtcommon.errors import ErrorCode, StackError
from rtcommon.resources import ResourceArchive, build_archive

blob = build_archive({"www": {"index.html": b"<html></html>"}})
archive = ResourceArchive(blob)
archive.get_data("/www/index.html")   # b"<html></html>"

try:
    archive.get_data("/www/missing.html")
except StackError as exc:
    assert exc.code is ErrorCode.NOT_FOUND
```

Tasks and synchronisation:

```python
from rtcommon.sync import Event
from rtcommon.tasks import create_task

done = Event()
task = create_task("worker", lambda arg: arg.set(), done)
done.wait(1000)   # True once the worker has run
task.join(1.0)    # join takes seconds, like threading
```

## What it does not do

- `rtcommon.fsport` only describes files, directory entries, modes and seek
  origins. It provides no file-system access of its own.
- Tasks are ordinary threads. Nothing here suspends or resumes the scheduler,
  and stack sizes and priorities are not applied.
- There is no command-line tool.