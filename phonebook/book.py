"""A fixed-size phone book that overwrites its oldest entry when full."""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import TextIO

from phonebook.contact import Contact

_BORDER = "+----------+----------+----------+----------+"
_HEADERS = ("Index", "First Name", "Last Name", "Nickname")
_PROMPT = "Enter index to display contact details or -1 to returning to main menu: "
EOF_MESSAGE = "\nEOF detected, exiting program...\n"

_INTEGER = re.compile(r"[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class EndOfInput(Exception):
    """Raised when input runs out while the user is being asked something."""


def _read_index(stdin: TextIO) -> int | None:
    """Read the next integer token the way a formatted stream would.

    Blank lines are skipped.  Returns None when the line does not start with
    a number that fits a 32-bit integer.  Raises EOFError at end of input.
    """
    while True:
        line = stdin.readline()
        if not line:
            raise EOFError
        text = line.lstrip()
        if text:
            break
    match = _INTEGER.match(text)
    if match is None:
        return None
    value = int(match.group())
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


class PhoneBook:
    """Holds up to ``capacity`` contacts, replacing the oldest once full."""

    def __init__(self, capacity: int = 8) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._contacts: list[Contact] = []
        self._oldest = 0

    def add(self, contact: Contact) -> None:
        """Store a contact, overwriting the oldest slot when the book is full."""
        if len(self._contacts) < self.capacity:
            self._contacts.append(contact)
        else:
            self._contacts[self._oldest] = contact
            self._oldest = (self._oldest + 1) % self.capacity

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(self._contacts)

    def __getitem__(self, index: int) -> Contact:
        if not 0 <= index < len(self._contacts):
            raise IndexError(f"no contact at index {index}")
        return self._contacts[index]

    def table(self) -> str:
        """Return the contact list as a bordered table."""
        header = "|" + "".join(title.rjust(10) + "|" for title in _HEADERS)
        lines = [_BORDER, header, _BORDER]
        lines.extend(
            "|" + str(index).rjust(10) + "|" + contact.preview()
            for index, contact in enumerate(self._contacts)
        )
        lines.append(_BORDER)
        return "\n".join(lines) + "\n"

    def search(self, stdin: TextIO, stdout: TextIO) -> Contact | None:
        """Show the table and ask for an index until a valid one is given.

        Returns the chosen contact after printing its details, or None when
        the book is empty or the user enters -1.  Raises EndOfInput when
        input runs out.
        """
        if not self._contacts:
            stdout.write("The phonebook is empty!\n")
            return None
        stdout.write(self.table())
        while True:
            stdout.write(_PROMPT)
            try:
                index = _read_index(stdin)
            except EOFError:
                stdout.write(EOF_MESSAGE)
                raise EndOfInput from None
            if index is None:
                stdout.write("Error input, please enter a number!\n")
                continue
            if index == -1:
                stdout.write("Returning to main menu\n")
                return None
            if not 0 <= index < len(self._contacts):
                stdout.write("Invalid index!\n")
                continue
            break
        contact = self._contacts[index]
        stdout.write(contact.details())
        return contact