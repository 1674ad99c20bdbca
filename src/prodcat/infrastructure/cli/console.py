"""Console output for the catalog session.

Color is purely presentational: the session calls the Console port
and ClickConsole decides how (and whether) to style the text.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import click


class Console(ABC):

    @abstractmethod
    def prompt(self, text: str) -> None:
        """Write *text* without a trailing newline."""

    @abstractmethod
    def echo(self, text: str = "") -> None:
        """Write a plain line."""

    @abstractmethod
    def heading(self, text: str) -> None:
        """Write a banner or table header."""

    @abstractmethod
    def highlight(self, text: str) -> None:
        """Write a line that should stand out, e.g. a search hit."""

    @abstractmethod
    def success(self, text: str) -> None: ...

    @abstractmethod
    def error(self, text: str) -> None: ...

    @abstractmethod
    def clear(self) -> None:
        """Clear the screen, if the output supports it."""


class ClickConsole(Console):
    """Renders through click so color is stripped when stdout is not a terminal.

    ``color=None`` lets click decide; True or False forces it.
    """

    def __init__(self, color: bool | None = None, clear_screen: bool = True) -> None:
        self._color = color
        self._clear_screen = clear_screen

    def prompt(self, text: str) -> None:
        click.echo(text, nl=False, color=self._color)

    def echo(self, text: str = "") -> None:
        click.echo(text, color=self._color)

    def heading(self, text: str) -> None:
        click.secho(text, fg="yellow", color=self._color)

    def highlight(self, text: str) -> None:
        click.secho(text, fg="magenta", color=self._color)

    def success(self, text: str) -> None:
        click.secho(text, fg="green", color=self._color)

    def error(self, text: str) -> None:
        click.secho(text, fg="red", color=self._color)

    def clear(self) -> None:
        # click.clear() is a no-op when stdout is not a terminal
        if self._clear_screen:
            click.clear()
