"""INI files read and written by section and key."""

from __future__ import annotations

import configparser
import os


class IniFile:
    """An INI file whose changes are written back as they are made."""

    def __init__(self, fname: str) -> None:
        self.fname = fname
        self._parser = configparser.ConfigParser(interpolation=None)
        self._parser.optionxform = str
        self._closed = False
        if os.path.exists(fname):
            self._parser.read(fname, encoding="utf-8")

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError(f"INI file is closed: {self.fname}")

    def _lookup(self, section: str, key: str) -> str | None:
        self._check_open()
        if not self._parser.has_section(section):
            return None
        return self._parser.get(section, key, fallback=None)

    def read_int(self, section: str, key: str, default: int = 0) -> int:
        """Return the integer under ``section``/``key``, or ``default`` if absent."""
        value = self._lookup(section, key)
        return default if value is None else int(value.strip())

    def read_str(self, section: str, key: str, default: str = "") -> str:
        """Return the text under ``section``/``key``, or ``default`` if absent."""
        value = self._lookup(section, key)
        return default if value is None else value

    def write_int(self, section: str, key: str, value: int) -> None:
        """Store an integer and save the file."""
        self.write_str(section, key, str(int(value)))

    def write_str(self, section: str, key: str, value: str) -> None:
        """Store a string and save the file."""
        self._check_open()
        if not self._parser.has_section(section):
            self._parser.add_section(section)
        self._parser.set(section, key, value)
        self.save()

    def save(self) -> None:
        """Write the current contents to disk."""
        self._check_open()
        with open(self.fname, "w", encoding="utf-8") as handle:
            self._parser.write(handle)

    def close(self) -> None:
        """Release the file; further use raises ValueError."""
        self._closed = True

    def __enter__(self) -> "IniFile":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()