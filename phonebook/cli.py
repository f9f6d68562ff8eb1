"""Interactive phone book driven by ADD, SEARCH and EXIT commands."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from phonebook.book import EOF_MESSAGE, EndOfInput, PhoneBook
from phonebook.contact import Contact

_SPACES = frozenset(" \t\n\v\f\r")
_FIELDS = (
    ("first_name", "First Name: "),
    ("last_name", "Last Name: "),
    ("nickname", "Nickname: "),
    ("phone_number", "Phone Number: "),
    ("darkest_secret", "Darkest Secret: "),
)


def read_field(prompt: str, stdin: TextIO, stdout: TextIO) -> str:
    """Ask until a non-blank, tab-free value is entered.

    Raises EndOfInput when input runs out.
    """
    while True:
        stdout.write(prompt)
        line = stdin.readline()
        if not line:
            stdout.write(EOF_MESSAGE)
            raise EndOfInput
        value = line.removesuffix("\n")
        if all(char in _SPACES for char in value):
            stdout.write(
                "This field cannot be empty or contain only spaces. "
                "Please enter again.\n"
            )
            continue
        if "\t" in value:
            stdout.write(
                "This field cannot contain tab characters. Please enter again.\n"
            )
            continue
        return value


def run(stdin: TextIO, stdout: TextIO) -> PhoneBook:
    """Run the command loop until EXIT or end of input; return the book."""
    book = PhoneBook()
    while True:
        stdout.write("Enter a command (ADD, SEARCH, EXIT): ")
        line = stdin.readline()
        if not line:
            stdout.write(EOF_MESSAGE)
            break
        command = line.removesuffix("\n")
        if not command:
            continue
        try:
            if command == "ADD":
                values = {
                    name: read_field(prompt, stdin, stdout)
                    for name, prompt in _FIELDS
                }
                book.add(Contact(**values))
            elif command == "SEARCH":
                book.search(stdin, stdout)
            elif command == "EXIT":
                break
            else:
                stdout.write("BAD COMMAND\n")
        except EndOfInput:
            break
    return book


def main(argv: Sequence[str] | None = None) -> int:
    """Run the phone book on standard input and output."""
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())