"""File-system helpers: existence checks, directory listing and line-based text files."""

from __future__ import annotations

import enum
import os
from typing import Callable, Iterable

from .lists import ListEntry


class FileMode(enum.IntEnum):
    """How a text file is opened."""

    READ = 0
    WRITE = 1
    APPEND = 2


class FindFlags(enum.IntFlag):
    """Options for directory listing."""

    HIDDEN = 0x0010
    DIR = 0x0020
    SYSFILE = 0x0040
    FULLPATH = 0x0080


class EntryType(enum.IntEnum):
    """Type tag of a listed directory entry."""

    DIR = 4
    FILE = 8


class FileAccessError(Exception):
    """Raised when a text file is used against the mode it was opened in."""


def exists(fname: str) -> bool:
    """Return True if a file or directory exists at ``fname``."""
    return os.path.exists(fname)


def _scan(directory: str, matches: Callable[[str], bool], mask: int) -> list[ListEntry]:
    want_dirs = bool(mask & FindFlags.DIR)
    full_path = bool(mask & FindFlags.FULLPATH)
    prefix = directory if directory.endswith("/") else directory + "/"
    found = []
    with os.scandir(directory) as listing:
        for entry in sorted(listing, key=lambda item: item.name):
            if want_dirs:
                if not entry.is_dir(follow_symlinks=False):
                    continue
                kind = EntryType.DIR
            else:
                if not entry.is_file(follow_symlinks=False):
                    continue
                if not matches(os.path.splitext(entry.name)[1]):
                    continue
                kind = EntryType.FILE
            name = prefix + entry.name if full_path else entry.name
            found.append(ListEntry(int(kind), name))
    return found


def find_list(directory: str, filter: str = "", mask: int = 0) -> list[ListEntry]:
    """List files whose extension contains ``filter``, or directories if ``mask`` has DIR."""
    return _scan(directory, lambda ext: filter in ext, mask)


def find_list_ext(directory: str, filters: Iterable[str], mask: int = 0) -> list[ListEntry]:
    """Like :func:`find_list`, matching a file if its extension contains any of ``filters``."""
    patterns = list(filters)
    return _scan(directory, lambda ext: any(p in ext for p in patterns), mask)


def path(fname: str) -> str:
    """Return the directory part of ``fname`` with a trailing slash."""
    cut = max(fname.rfind("/"), fname.rfind("\\"))
    if cut < 0:
        return fname + "/"
    return fname[:cut] + "/"


def path_parent(path: str) -> str:
    """Return the parent of ``path``."""
    return os.path.dirname(path)


def create_folder(path: str) -> None:
    """Create one directory; an existing directory is left alone."""
    try:
        os.mkdir(path)
    except FileExistsError:
        if not os.path.isdir(path):
            raise


class TextFile:
    """A text file read or written line by line."""

    def __init__(self, fname: str, mode: FileMode = FileMode.READ) -> None:
        self.mode = FileMode(mode)
        self.name = fname
        self.line = 0
        self._at_end = False
        open_mode = {FileMode.READ: "r", FileMode.WRITE: "w", FileMode.APPEND: "a"}[self.mode]
        self._file = open(fname, open_mode, encoding="utf-8", newline="")

    @property
    def _writable(self) -> bool:
        return self.mode is not FileMode.READ

    def _next_line(self) -> str | None:
        raw = self._file.readline()
        if not raw.endswith("\n"):
            self._at_end = True
            return raw or None
        return raw[:-1]

    def write(self, text: str) -> None:
        """Write ``text`` without a line break."""
        if not self._writable:
            raise FileAccessError(f"Can't write to read-only file! Filename: {self.name}")
        self._file.write(text)

    def read(self) -> str:
        """Read the next line, without its line break; empty at the end of the file."""
        if self._writable:
            raise FileAccessError(f"Can't read write-only file! Filename: {self.name}")
        line = self._next_line()
        return "" if line is None else line

    def ln(self) -> None:
        """Write a line break, or skip a line when reading."""
        if self._writable:
            self._file.write("\n")
        elif self._next_line() is not None:
            self.line += 1

    def eof(self) -> bool:
        """Return True once a read has reached the end of the file."""
        return self._at_end

    def close(self) -> None:
        """Close the file."""
        self._file.close()

    def __enter__(self) -> "TextFile":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()