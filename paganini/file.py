"""File resource with seeking, reading and word-by-word text reading."""

from __future__ import annotations

import os
from enum import IntEnum

from paganini.log import warning
from paganini.resource import Resource


class SeekFrom(IntEnum):
    """Reference point for File.seek."""

    START = os.SEEK_SET
    CURRENT = os.SEEK_CUR
    END = os.SEEK_END


class File(Resource):
    """A file opened for reading and writing."""

    def __init__(self, path: str = os.devnull, binary: bool = True, name: str = "") -> None:
        super().__init__(name)
        self.path = path
        self.binary = binary
        self._handle = open(path, "r+b")

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def get_line(self) -> str:
        """Read the next whitespace-separated word from a text file.

        Returns an empty string for binary files, at end of file, or on error.
        """
        if self.binary:
            warning(f"Cannot get line from binary file '{self.name}'.")
            return ""
        word = bytearray()
        try:
            while ch := self._handle.read(1):
                if ch.isspace():
                    if word:
                        self._handle.seek(-1, os.SEEK_CUR)
                        break
                    continue
                word += ch
        except OSError:
            warning(f"Error while reading file '{self.name}'")
            return ""
        return word.decode()

    def seek(self, offset: int, whence: SeekFrom = SeekFrom.START) -> int:
        """Move to offset relative to whence and return the new position."""
        return self._handle.seek(offset, int(whence))

    def tell(self) -> int:
        """Return the current position."""
        return self._handle.tell()

    def dump(self) -> bytes:
        """Return the whole contents, leaving the position unchanged."""
        old_pos = self.tell()
        self.seek(0, SeekFrom.START)
        try:
            return self._handle.read()
        finally:
            self.seek(old_pos, SeekFrom.START)

    def read(self, size: int) -> bytes:
        """Read up to size bytes from the current position."""
        return self._handle.read(size)

    def close(self) -> None:
        if not self._handle.closed:
            self._handle.close()

    def __enter__(self) -> File:
        return self

    def __exit__(self, *args) -> None:
        self.close()