# phonebook

This package has two things in it. One is a small phone book that keeps its
contacts only while the program runs. The other is a `megaphone` command that
prints whatever you give it in upper case.

## Installation

```
pip install .
```

## The phone book

Start it with:

```
phonebook
```

The program asks for a command:

- `ADD` asks for a first name, last name, nickname, phone number and darkest
  secret. A field is refused if it is empty, holds only whitespace, or
  contains a tab. When a field is refused, the program asks for it again.
- `SEARCH` shows every stored contact in a table with four columns: index,
  first name, last name and nickname. Each column is ten characters wide and
  right aligned. Text longer than ten characters is cut to nine and ends in a
  dot. You then enter an index to see the full entry, or `-1` to go back to
  the menu. The program asks again in these cases:
  - the line does not start with a whole number,
  - the number does not fit in 32 bits,
  - the index is out of range.

  Blank lines are skipped. If the book is empty, it says so and returns to
  the menu.
- `EXIT` leaves the program.

Any other command prints `BAD COMMAND`, and an empty line is ignored. The book
holds eight contacts. Once it is full, each new contact replaces the oldest
one. Ending the input (Ctrl-D) quits at any prompt.

## The megaphone

```
megaphone "shhhhh... I think the students are asleep..."
```

This prints the arguments joined with nothing between them, with ASCII
letters in upper case:

```
SHHHHH... I THINK THE STUDENTS ARE ASLEEP...
```

With no arguments it prints `* LOUD AND UNBEARABLE FEEDBACK NOISE *`.

## Use from Python

```python
import io

from phonebook.book import PhoneBook
from phonebook.cli import run
from phonebook.contact import Contact
from phonebook.megaphone import shout

book = PhoneBook()            # capacity defaults to 8
book.add(Contact("Ada", "Lovelace", "ada", "0123", "prefers tea"))
print(len(book))              # 1
print(book.table())           # the table shown by SEARCH
print(book[0].details())      # every field on its own line

print(shout(["hello", " world"]))  # HELLO WORLD

# Drive the command loop from any text streams; the filled book is returned.
out = io.StringIO()
book = run(io.StringIO("ADD\nA\nB\nC\n1\nS\nEXIT\n"), out)
```

The building blocks are:

- `phonebook.contact.Contact` is a dataclass with the fields `first_name`,
  `last_name`, `nickname`, `phone_number` and `darkest_secret`. Its
  `preview()` method gives one table row and `details()` gives the full
  entry.
- `phonebook.book.PhoneBook(capacity=8)` supports `add()`, `len()`,
  iteration and indexing. Indexing raises `IndexError` when out of range.
  `table()` gives the contact table. `search(stdin, stdout)` runs the
  interactive index prompt: it returns the chosen contact, or `None` for an
  empty book or `-1`, and raises `EndOfInput` when input runs out.
- `phonebook.cli.read_field(prompt, stdin, stdout)` asks until a valid field
  value is entered. `run(stdin, stdout)` runs the whole command loop.

## What it does not do

Nothing is stored on disk. The phone book is empty every time it starts, and
everything in it is lost when the program ends. Contacts cannot be edited or
deleted, only overwritten once the book is full.

## Running the tests

```
pip install ".[test]"
pytest
```