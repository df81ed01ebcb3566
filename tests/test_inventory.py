import pytest

from libstock.inventory import Book, Inventory, inventory_menu


def make_io(lines):
    feed = iter(lines)
    out = []

    def read_line():
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    return read_line, out.append, out


@pytest.fixture
def inventory(tmp_path):
    return Inventory(tmp_path / "inventory.txt")


def test_record_format():
    assert Book(101, "Book Title", 5).to_record() == "101|Book Title|5"


def test_record_round_trip():
    book = Book(4, "War and Peace", 11)
    assert Book.from_record(book.to_record()) == book


def test_from_record_rejects_malformed():
    with pytest.raises(ValueError):
        Book.from_record("4|Title")


def test_table_row_aligns_columns():
    row = Book(1, "Dune", 5).table_row()
    assert row.startswith("1     Dune ")
    assert row.index("5") == 37


def test_add_book_rejects_negative(inventory):
    with pytest.raises(ValueError):
        inventory.add_book(Book(1, "Dune", -1))


def test_books_stop_at_malformed_line(inventory):
    inventory.add_book(Book(1, "Dune", 5))
    inventory.store.add("not a record")
    inventory.add_book(Book(2, "Emma", 1))
    assert inventory.books() == [Book(1, "Dune", 5)]


def test_books_missing_file(inventory):
    with pytest.raises(FileNotFoundError):
        inventory.books()


def test_adjust_stock_clamps_at_zero(inventory):
    inventory.add_book(Book(1, "Dune", 5))
    inventory.add_book(Book(2, "Emma", 1))
    assert inventory.adjust_stock(1, 3) == Book(1, "Dune", 8)
    assert inventory.adjust_stock(2, -100) == Book(2, "Emma", 0)
    assert inventory.books() == [Book(1, "Dune", 8), Book(2, "Emma", 0)]


def test_adjust_stock_unknown_id(inventory):
    inventory.add_book(Book(1, "Dune", 5))
    assert inventory.adjust_stock(9, 1) is None
    assert inventory.books() == [Book(1, "Dune", 5)]


def test_remove_book(inventory):
    inventory.add_book(Book(1, "Dune", 5))
    assert inventory.remove_book(1) is True
    assert inventory.remove_book(1) is False
    assert inventory.books() == []


def test_low_stock_and_total(inventory):
    books = [Book(1, "A", 2), Book(2, "B", 3), Book(3, "C", 5)]
    for book in books:
        inventory.add_book(book)
    assert inventory.low_stock() == [books[0]]
    assert inventory.low_stock(6) == books
    assert inventory.total_quantity() == 10


def test_menu_add_update_report(inventory):
    read_line, write, out = make_io(
        ["1", "x", "5", "Dune", "-1", "2", "2", "5", "+4", "6", "7"]
    )
    inventory_menu(inventory, read_line, write)
    text = "".join(out)
    assert inventory.books() == [Book(5, "Dune", 6)]
    assert "Invalid input. Please enter a valid ID: " in text
    assert "Invalid input. Enter a non-negative quantity: " in text
    assert "Stock updated successfully." in text
    assert "Total Books in Inventory: 6" in text
    assert text.endswith("Exiting...\n")


def test_menu_low_stock_messages(inventory):
    inventory.add_book(Book(1, "Dune", 10))
    read_line, write, out = make_io(["5", "3", "1", "3", "1", "7"])
    inventory_menu(inventory, read_line, write)
    text = "".join(out)
    assert "No low stock alerts." in text
    assert "Book removed successfully." in text
    assert "Book ID not found." in text
    assert inventory.books() == []


def test_menu_missing_file_messages(inventory):
    read_line, write, out = make_io(["4", "6", "2", "1", "1", "9", "7"])
    inventory_menu(inventory, read_line, write)
    text = "".join(out)
    assert "No inventory found." in text
    assert "No inventory data." in text
    assert "File open failed" in text
    assert "Invalid choice! Please try again." in text
    with pytest.raises(FileNotFoundError):
        inventory.books()