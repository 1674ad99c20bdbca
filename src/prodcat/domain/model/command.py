"""Menu commands and the quit sentinel used by the console prompts."""

from __future__ import annotations

from enum import Enum


class Command(Enum):
    ADD_PRODUCT = "P"
    SEARCH = "S"
    QUIT = "Q"

    @classmethod
    def parse(cls, text: str | None) -> Command | None:
        """Return the command for *text* (any case), or None if unknown."""
        if text is None:
            return None
        try:
            return cls(text.strip().upper())
        except ValueError:
            return None


class QuitSignal:
    """Returned by a prompt instead of text when the user typed "Q"."""

    _instance: QuitSignal | None = None

    def __new__(cls) -> QuitSignal:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "QUIT"

    def __bool__(self) -> bool:
        return False


QUIT = QuitSignal()


def is_quit(text: str) -> bool:
    return text.strip().upper() == Command.QUIT.value
