"""A single phone book entry."""

from __future__ import annotations

from dataclasses import dataclass

_COLUMN_WIDTH = 10


def _cell(text: str) -> str:
    if len(text) > _COLUMN_WIDTH:
        text = text[: _COLUMN_WIDTH - 1] + "."
    return text.rjust(_COLUMN_WIDTH)


@dataclass
class Contact:
    """A contact with its name, nickname, phone number and secret."""

    first_name: str = ""
    last_name: str = ""
    nickname: str = ""
    phone_number: str = ""
    darkest_secret: str = ""

    def preview(self) -> str:
        """Return the three name columns of a table row, each ten wide."""
        cells = (self.first_name, self.last_name, self.nickname)
        return "".join(_cell(text) + "|" for text in cells)

    def details(self) -> str:
        """Return every field on its own labelled line."""
        return (
            "\n"
            f"First Name:       {self.first_name}\n"
            f"Last Name:        {self.last_name}\n"
            f"Nickname:         {self.nickname}\n"
            f"Phone Number:     {self.phone_number}\n"
            f"Darkest Secret:   {self.darkest_secret}\n"
            "\n"
        )