"""A numbered text menu that reads the user's choice."""

from __future__ import annotations

import sys
from typing import Iterator, Optional, TextIO

INVALID_CHOICE = " Opcao Invalida!"


class Menu:
    """Prints a titled list of items and asks for a choice by number.

    The item list is kept by reference, so later changes to it show up
    the next time the menu is printed.
    """

    def __init__(
        self,
        items: list[str],
        title: str = "Menu",
        message: str = "Escolha uma opcao: ",
        decorator: str = "-",
        *,
        input_stream: Optional[TextIO] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        self.items = items
        self.title = title
        self.message = message
        self.decorator = decorator
        self._input = input_stream
        self._output = output
        self._tokens: Optional[Iterator[str]] = None

    @property
    def _out(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def _read_tokens(self) -> Iterator[str]:
        stream = self._input if self._input is not None else sys.stdin
        for line in stream:
            yield from line.split()

    def _next_token(self) -> str:
        if self._tokens is None:
            self._tokens = self._read_tokens()
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError("no more input for the menu choice") from None

    def decorate(self) -> None:
        """Print a rule a little wider than the title or message."""
        width = max(len(self.message), len(self.title))
        print(self.decorator * (width + 2), file=self._out)

    def print_menu(self) -> None:
        print(f" {self.title}", file=self._out)
        self.decorate()
        for number, item in enumerate(self.items, start=1):
            print(f" {number} - {item}", file=self._out)
        self.decorate()

    def is_valid_choice(self, choice: int) -> bool:
        """True for 0 up to the number of items; otherwise report and return False."""
        if 0 <= choice <= len(self.items):
            return True
        print(INVALID_CHOICE, file=self._out)
        return False

    def get_choice(self) -> int:
        """Show the menu until a valid number is entered, and return it."""
        while True:
            self.print_menu()
            self._out.write(f" {self.message}")
            self._out.flush()
            token = self._next_token()
            try:
                choice = int(token)
            except ValueError:
                print(INVALID_CHOICE, file=self._out)
                continue
            if self.is_valid_choice(choice):
                return choice