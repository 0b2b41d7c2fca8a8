"""Line-oriented console used by the interactive controller."""

from __future__ import annotations

from abc import ABC, abstractmethod

import click


class EndOfInput(Exception):
    """The console has no more lines to read."""


class Console(ABC):

    @abstractmethod
    def echo(self, message: str = "", nl: bool = True) -> None:
        """Write *message* to the user."""

    @abstractmethod
    def read_line(self) -> str:
        """Read one line without its newline; raise EndOfInput at EOF."""

    def ask(self, prompt: str) -> str:
        self.echo(prompt, nl=False)
        return self.read_line()


class ClickConsole(Console):
    """Writes with ``click.echo`` and reads stdin line by line."""

    def echo(self, message: str = "", nl: bool = True) -> None:
        click.echo(message, nl=nl)

    def read_line(self) -> str:
        line = click.get_text_stream("stdin").readline()
        if not line:
            raise EndOfInput()
        return line.rstrip("\r\n")
