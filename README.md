# profanutils

A collection of small, self-contained building blocks in the spirit of a
hobby operating system's user space:

- **C-style string and memory helpers** (`profanutils.cstring`): integer,
  hex and decimal formatting, `basename`/`dirname`, `memmem`, `strlcpy`,
  `strlcat` and friends, all working on Python strings and bytes.
- **stdlib helpers** (`profanutils.cstdlib`): `a64l`/`l64a`, `atoi`,
  `itoa`, `div` (returning a `DivResult`) and the reentrant `rand_r`
  generator.
- **Clock arithmetic** (`profanutils.timeutil`): an `RtcTime` record,
  `time_calc_unix`, `time_add`, and `setting_get`, a `name=value` settings
  reader that `time_jet_lag` uses for a time-zone offset in hours.
- **Coloured text markup** (`profanutils.colortext`): `parse_markup` turns
  `$0`…`$E` colour codes into `Segment`s, `format_markup` handles
  `%s %d %x %c %f`, and `rainbow` cycles six colours over a message.
- **A line editor** (`profanutils.lineedit`): `LineEditor` driven by `Key`
  events, with cursor movement, deletion, tab insertion and history
  browsing.
- **An in-memory file system** (`profanutils.vfs`): `FileSystem` with
  directories and files, and `fopen`/`freopen` giving `Stream`s in the
  `r`, `r+`, `w`, `w+`, `a` and `a+` modes.
- **File commands** (`profanutils.commands`): `cat`, `ls`, `mkdir`,
  `mkfile`, `echo` and `show_args` working on a `FileSystem` and returning
  the coloured text they would print.
- **Graphics and games**: a pixel `Canvas` that sends only changed pixels to
  a sink (`profanutils.canvas`), Conway's Game of Life (`life.Board`),
  Connect Four with a simple computer opponent (`power4`), a ray-casting
  renderer (`raycast`), a rotating wireframe cube (`wirecube`) and a
  Mandelbrot renderer (`mandel`).
- **Small programs**: an interpreter for a tiny numeric opcode language
  (`livra`), a Towers of Hanoi solver (`hanoi`) and a prime-counting
  benchmark (`primes`).

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the test suite:

```
pip install ".[test]"
pytest
```

## Library examples

```python
from profanutils.cstdlib import a64l, atoi, itoa
from profanutils.cstring import basename
from profanutils.primes import is_prime
from profanutils.vfs import FileSystem, fopen

assert a64l("FT") == 2001
assert atoi("-10") == -10
assert itoa(-10, 10) == "-10"
assert basename("test1/test2/test3") == "test3"
assert is_prime(7)

fs = FileSystem()
fs.make_dir("/", "user")
with fopen(fs, "/user/test.txt", "w") as stream:
    stream.write("some text\n")
with fopen(fs, "/user/test.txt", "r") as stream:
    assert stream.read() == b"some text\n"
```

## Commands

Installing the package provides three commands:

```
profan-livra PROGRAM   # run a program file in the numeric opcode language
profan-hanoi [DISKS]   # print the moves that solve the Towers of Hanoi
profan-perf [LIMIT]    # time how long counting primes below LIMIT takes
```

`profan-hanoi` asks for the number of disks when it is not given.

## What it does not do

- There is no interactive shell: the file commands are plain functions, and
  nothing reads command lines, changes directory or dispatches to them.
- The file system lives in memory only; nothing is saved to disk.
- The graphics and games compute boards and pixels, but nothing opens a
  window or reads the keyboard; drawing goes to a `Canvas` and its `render`
  hands pixels to a function you supply.