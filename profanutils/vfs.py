"""An in-memory file system of directories and files, with buffered C-style streams."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from enum import IntEnum
from types import TracebackType

READ_MODES = frozenset({"r", "r+"})
TRUNCATE_MODES = frozenset({"w", "w+"})
APPEND_MODES = frozenset({"a", "a+"})
MODES = READ_MODES | TRUNCATE_MODES | APPEND_MODES

READABLE_MODES = frozenset({"r", "r+", "w+", "a+"})
WRITABLE_MODES = TRUNCATE_MODES | APPEND_MODES


class SectorType(IntEnum):
    """Kind of an entry in the file system."""

    FILE = 2
    DIRECTORY = 3


def _normalize(path: str) -> str:
    parts = [part for part in path.split("/") if part]
    return "/" + "/".join(parts)


def _join(path: str, name: str) -> str:
    base = _normalize(path)
    return f"/{name}" if base == "/" else f"{base}/{name}"


def _check_name(name: str) -> None:
    if not name or "/" in name:
        raise ValueError(f"invalid entry name: {name!r}")


@dataclass
class _Node:
    kind: SectorType
    data: bytes = b""
    children: list[str] = field(default_factory=list)


class FileSystem:
    """A tree of named directories and files, rooted at ``/``."""

    def __init__(self) -> None:
        self._nodes: dict[str, _Node] = {"/": _Node(SectorType.DIRECTORY)}

    def _node(self, path: str) -> _Node:
        node = self._nodes.get(_normalize(path))
        if node is None:
            raise FileNotFoundError(f"{path} not found")
        return node

    def _directory(self, path: str) -> _Node:
        node = self._node(path)
        if node.kind is not SectorType.DIRECTORY:
            raise NotADirectoryError(f"{path} is not a directory")
        return node

    def _file(self, path: str) -> _Node:
        node = self._node(path)
        if node.kind is not SectorType.FILE:
            raise IsADirectoryError(f"{path} is a directory")
        return node

    def _make(self, path: str, name: str, kind: SectorType) -> str:
        _check_name(name)
        parent = self._directory(path)
        full = _join(path, name)
        if full in self._nodes:
            raise FileExistsError(f"{full} already exists")
        self._nodes[full] = _Node(kind)
        parent.children.append(name)
        return full

    def make_dir(self, path: str, name: str) -> str:
        """Create directory ``name`` inside directory ``path`` and return its full path."""
        return self._make(path, name, SectorType.DIRECTORY)

    def make_file(self, path: str, name: str) -> str:
        """Create an empty file ``name`` inside directory ``path`` and return its full path."""
        return self._make(path, name, SectorType.FILE)

    def exists(self, path: str) -> bool:
        """Tell whether ``path`` names a file or directory."""
        return _normalize(path) in self._nodes

    def kind(self, path: str) -> SectorType:
        """Return whether ``path`` is a file or a directory."""
        return self._node(path).kind

    def read(self, path: str) -> bytes:
        """Return the contents of the file at ``path``."""
        return self._file(path).data

    def write(self, path: str, data: bytes) -> None:
        """Replace the contents of the existing file at ``path``."""
        self._file(path).data = bytes(data)

    def list_dir(self, path: str) -> list[str]:
        """Return the names in directory ``path`` in the order they were created."""
        return list(self._directory(path).children)


class Stream:
    """A file opened through :func:`fopen`, held wholly in memory until flushed."""

    def __init__(self, fs: FileSystem, filename: str, mode: str) -> None:
        self.fs = fs
        self.filename = filename
        self.path, _, self.name = filename.rpartition("/")
        self.mode = mode
        self.buffer = fs.read(filename)
        self.position = 0
        self.eof = False
        self.error = False
        self.closed = False

    def __enter__(self) -> Stream:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _check_open(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed stream")

    def read(self, count: int = -1) -> bytes:
        """Return up to ``count`` bytes from the current position, all when negative.

        Asking for more than remains sets ``eof``; once ``eof`` is set nothing is read.
        """
        self._check_open()
        if self.mode not in READABLE_MODES:
            raise io.UnsupportedOperation(f"stream opened with mode {self.mode!r} is not readable")
        if self.eof:
            return b""
        remaining = len(self.buffer) - self.position
        if count < 0 or count > remaining:
            count = remaining
            self.eof = True
        chunk = self.buffer[self.position : self.position + count]
        self.position += count
        return chunk

    def write(self, data: bytes | str) -> int:
        """Replace (``w`` modes) or extend (``a`` modes) the contents and flush them.

        Returns the number of bytes given.
        """
        self._check_open()
        if self.mode not in WRITABLE_MODES:
            raise io.UnsupportedOperation(f"stream opened with mode {self.mode!r} is not writable")
        payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        if self.mode in TRUNCATE_MODES:
            self.buffer = payload
        else:
            self.buffer += payload
        self.position = 0
        self.eof = False
        self.error = False
        self.flush()
        return len(payload)

    def flush(self) -> None:
        """Store the buffer in the file system when the stream is writable."""
        self._check_open()
        if self.mode in WRITABLE_MODES:
            self.fs.write(self.filename, self.buffer)

    def close(self) -> None:
        """Flush a writable stream and close it; closing twice does nothing."""
        if self.closed:
            return
        self.flush()
        self.closed = True


def fopen(fs: FileSystem, filename: str, mode: str) -> Stream:
    """Open ``filename`` in ``fs``; files are created unless ``mode`` is ``r`` or ``r+``.

    Raises FileNotFoundError for a missing file in a read mode, ValueError for an
    unknown mode.
    """
    if mode not in MODES:
        raise ValueError(f"invalid mode: {mode!r}")
    filename = _normalize(filename)
    if not fs.exists(filename):
        if mode in READ_MODES:
            raise FileNotFoundError(f"{filename} not found")
        path, _, name = filename.rpartition("/")
        fs.make_file(path or "/", name)
    return Stream(fs, filename, mode)


def freopen(stream: Stream, filename: str, mode: str) -> Stream:
    """Close ``stream`` and open ``filename`` with ``mode`` on the same file system."""
    stream.close()
    return fopen(stream.fs, filename, mode)