"""WAV audio files."""

from __future__ import annotations

from paganini.file import File
from paganini.log import fatal


class WavFile(File):
    """A WAV file; opening it reads the RIFF header."""

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.header = self.read(4)
        if len(self.header) != 4:
            self.close()
            fatal("WAV File Error: Couldn't read RIFF header.")