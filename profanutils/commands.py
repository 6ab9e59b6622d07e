"""Small file-system commands: cat, ls, mkdir, mkfile, echo and show_args.

Each command returns the coloured text it would print.
"""

from __future__ import annotations

from collections.abc import Sequence

from .colortext import Color, Segment, format_markup
from .vfs import FileSystem, SectorType

NAME_COLUMN = 22


def assemble_path(old: str, new: str) -> str:
    """Join ``new`` onto directory ``old``, adding a ``/`` only when missing."""
    base = old if old.endswith("/") else old + "/"
    return base + new


def _is_kind(fs: FileSystem, path: str, kind: SectorType) -> bool:
    return fs.exists(path) and fs.kind(path) is kind


def cat(fs: FileSystem, cwd: str, name: str) -> list[Segment]:
    """Show the contents of file ``name`` in directory ``cwd``."""
    file = assemble_path(cwd, name)
    if not _is_kind(fs, file, SectorType.FILE):
        return format_markup("$3%s$B file not found\n", file)
    content = fs.read(file).decode("utf-8", errors="replace")
    segments = [Segment(content, Color.MAGENTA)] if content else []
    return segments + format_markup("\n")


def _entry(marker: str, name: str, tail: str, value: int) -> list[Segment]:
    segments = format_markup(marker, name)
    padding = NAME_COLUMN - len(name)
    if padding > 0:
        segments.append(Segment(" " * padding, Color.WHITE))
    return segments + format_markup(tail, value)


def ls(fs: FileSystem, cwd: str, arg: str = "") -> list[Segment]:
    """List a directory: subdirectories with their entry counts, then files with their sizes.

    ``arg`` names a directory relative to ``cwd``; empty (or ``ls``) lists ``cwd`` itself.
    """
    path = "" if arg == "ls" else arg
    ls_path = assemble_path(cwd, path) if path else cwd
    if not _is_kind(fs, ls_path, SectorType.DIRECTORY):
        return format_markup("$3%s$B is not a directory\n", ls_path)

    entries = [(name, assemble_path(ls_path, name)) for name in fs.list_dir(ls_path)]
    kinds = {name: fs.kind(full) for name, full in entries}
    segments: list[Segment] = []
    for name, full in entries:
        if kinds[name] is SectorType.DIRECTORY:
            segments += _entry("$2%s", name, "%d elm\n", len(fs.list_dir(full)))
    for name, full in entries:
        if kinds[name] is SectorType.FILE:
            segments += _entry("$1%s", name, "%d oct\n", len(fs.read(full)))
    return segments


def mkdir(fs: FileSystem, cwd: str, name: str) -> list[Segment]:
    """Create directory ``name`` in ``cwd``; the name ``..`` is refused with a message."""
    if name == "..":
        return format_markup("$3Un dossier ne peut pas avoir comme nom .. !\n")
    fs.make_dir(cwd, name)
    return []


def mkfile(fs: FileSystem, cwd: str, name: str) -> list[Segment]:
    """Create an empty file ``name`` in ``cwd``."""
    fs.make_file(cwd, name)
    return []


def echo(args: Sequence[str]) -> list[Segment]:
    """Print the arguments after the program path and working directory, each followed by a space."""
    segments: list[Segment] = []
    for arg in args[2:]:
        segments += format_markup("%s ", arg)
    return segments + format_markup("\n")


def show_args(args: Sequence[str]) -> list[Segment]:
    """Print the argument count and every argument with its index."""
    segments = format_markup("$4have %d arguments\n", len(args))
    for index, arg in enumerate(args):
        segments += format_markup("$4arg %d: $1%s\n", index, arg)
    return segments