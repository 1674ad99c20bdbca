"""Line-oriented input for the console session.

The session never touches stdin directly; it pulls lines from a
LineSource so a scripted source can stand in for the keyboard.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO

import click


class LineSource(ABC):

    @abstractmethod
    def read_line(self) -> str | None:
        """Return the next line without its line ending, or None at end of input."""


class StreamLineSource(LineSource):
    """Reads from a text stream, standard input by default."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else click.get_text_stream("stdin")

    def read_line(self) -> str | None:
        line = self._stream.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")
