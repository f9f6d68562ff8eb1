import io

import pytest

from phonebook.book import EndOfInput, PhoneBook
from phonebook.contact import Contact


def _named(name):
    return Contact(name, "Last", "nick", "5550100", "secret")


def _book(count, capacity=8):
    book = PhoneBook(capacity)
    for number in range(count):
        book.add(_named(f"c{number}"))
    return book


def _search(book, text):
    out = io.StringIO()
    result = book.search(io.StringIO(text), out)
    return result, out.getvalue()


def test_new_book_is_empty():
    book = PhoneBook()
    assert len(book) == 0
    assert list(book) == []


def test_add_keeps_order():
    book = _book(3)
    assert [contact.first_name for contact in book] == ["c0", "c1", "c2"]


def test_full_book_replaces_oldest():
    book = _book(9)
    assert len(book) == 8
    assert book[0].first_name == "c8"
    assert book[1].first_name == "c1"
    book.add(_named("c9"))
    assert book[1].first_name == "c9"
    assert book[0].first_name == "c8"


def test_replacement_wraps_around():
    book = _book(2 + 2 * 2, capacity=2)
    assert [contact.first_name for contact in book] == ["c4", "c5"]


def test_invalid_capacity():
    with pytest.raises(ValueError):
        PhoneBook(0)


@pytest.mark.parametrize("index", [-1, 3, 8])
def test_getitem_out_of_range(index):
    with pytest.raises(IndexError):
        _book(3)[index]


def test_table_layout():
    book = _book(2)
    lines = book.table().splitlines()
    border = "+----------+----------+----------+----------+"
    assert lines[0] == lines[2] == lines[-1] == border
    assert len(lines) == 4 + len(book)
    assert lines[3] == "|" + "0".rjust(10) + "|" + book[0].preview()
    assert all(len(line) == len(border) for line in lines)


def test_search_empty_book():
    result, output = _search(PhoneBook(), "0\n")
    assert result is None
    assert output == "The phonebook is empty!\n"


def test_search_valid_index():
    book = _book(3)
    result, output = _search(book, "1\n")
    assert result == book[1]
    assert output.startswith(book.table())
    assert output.endswith(book[1].details())


def test_search_return_to_menu():
    result, output = _search(_book(2), "-1\n")
    assert result is None
    assert output.endswith("Returning to main menu\n")


def test_search_rejects_non_number():
    book = _book(2)
    result, output = _search(book, "abc\n0\n")
    assert result == book[0]
    assert "Error input, please enter a number!\n" in output


def test_search_rejects_out_of_range():
    book = _book(2)
    result, output = _search(book, "5\n-3\n1\n")
    assert result == book[1]
    assert output.count("Invalid index!\n") == 2


def test_search_rejects_overflow():
    book = _book(1)
    result, output = _search(book, "99999999999\n0\n")
    assert result == book[0]
    assert "Error input, please enter a number!\n" in output


def test_search_skips_blank_lines_and_trailing_text():
    book = _book(2)
    result, output = _search(book, "\n   \n 1 extra\n")
    assert result == book[1]
    assert "Error input" not in output


def test_search_end_of_input():
    out = io.StringIO()
    with pytest.raises(EndOfInput):
        _book(1).search(io.StringIO(""), out)
    assert out.getvalue().endswith("\nEOF detected, exiting program...\n")