"""Book stock levels kept in the inventory file."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, replace
from functools import partial
from typing import Callable

from libstock.records import RecordStore

FILENAME = "inventory.txt"
LOW_STOCK_THRESHOLD = 3
TITLE_LEN = 100

_RECORD = re.compile(r"\s*([+-]?\d+)\|([^|]+)\|\s*([+-]?\d+)")
_INT = re.compile(r"\s*([+-]?\d+)")
_RULE = "-" * 50 + "\n"

MENU = (
    "\nLibrary Inventory Management\n"
    "1. Add Book\n"
    "2. Update Stock\n"
    "3. Remove Book\n"
    "4. View Inventory\n"
    "5. Low Stock Alerts\n"
    "6. Inventory Report\n"
    "7. Exit\n"
    "Enter choice: "
)


def _scan_int(text: str) -> int | None:
    match = _INT.match(text)
    return int(match.group(1)) if match else None


def _header() -> str:
    return f"{'ID':<5} {'Title':<30} {'Quantity':<10}\n"


@dataclass
class Book:
    id: int
    title: str
    quantity: int

    def to_record(self) -> str:
        return f"{self.id}|{self.title}|{self.quantity}"

    @classmethod
    def from_record(cls, line: str) -> Book:
        match = _RECORD.match(line.removesuffix("\n"))
        if not match:
            raise ValueError(f"malformed book record: {line!r}")
        bid, title, quantity = match.groups()
        return cls(int(bid), title, int(quantity))

    def table_row(self) -> str:
        return f"{self.id:<5} {self.title:<30} {self.quantity:<10}"


class Inventory:
    """The book inventory file."""

    def __init__(self, path: str | os.PathLike = FILENAME):
        self.store = RecordStore(path)

    def add_book(self, book: Book) -> None:
        if book.quantity < 0:
            raise ValueError("quantity must be non-negative")
        self.store.add(book.to_record())

    def books(self) -> list[Book]:
        """Return books up to the first malformed line; raise if the file is missing."""
        result = []
        for line in self.store.lines():
            if not line.strip():
                continue
            try:
                result.append(Book.from_record(line))
            except ValueError:
                break
        return result

    def adjust_stock(self, book_id: int, change: int) -> Book | None:
        """Change a book's quantity, never below zero; None if the id is absent."""
        for book in self.books():
            if book.id == book_id:
                updated = replace(book, quantity=max(0, book.quantity + change))
                if not self.store.update(str(book_id), updated.to_record()):
                    return None
                return updated
        return None

    def remove_book(self, book_id: int) -> bool:
        return self.store.delete(str(book_id))

    def low_stock(self, threshold: int = LOW_STOCK_THRESHOLD) -> list[Book]:
        return [book for book in self.books() if book.quantity < threshold]

    def total_quantity(self) -> int:
        return sum(book.quantity for book in self.books())


def _add_book(inventory, read_line, write):
    write("Enter Book ID: ")
    while (bid := _scan_int(read_line())) is None:
        write("Invalid input. Please enter a valid ID: ")
    write("Enter Title: ")
    title = read_line()[:TITLE_LEN - 1]
    write("Enter Quantity: ")
    while (quantity := _scan_int(read_line())) is None or quantity < 0:
        write("Invalid input. Enter a non-negative quantity: ")
    try:
        inventory.add_book(Book(bid, title, quantity))
    except OSError as exc:
        write(f"File open failed: {exc.strerror}\n")
        write("Failed to add book.\n")
    else:
        write("Book added successfully.\n")


def _update_stock(inventory, read_line, write):
    write("Enter Book ID to update: ")
    bid = _scan_int(read_line())
    write("Enter stock change (+/-): ")
    change = _scan_int(read_line())
    if bid is None or change is None:
        write("Invalid number.\n")
        return
    try:
        updated = inventory.adjust_stock(bid, change)
    except FileNotFoundError as exc:
        write(f"File open failed: {exc.strerror}\n")
        return
    except OSError:
        write("Failed to update file.\n")
        return
    write("Stock updated successfully.\n" if updated else "Book ID not found.\n")


def _remove_book(inventory, read_line, write):
    write("Enter Book ID to remove: ")
    bid = _scan_int(read_line())
    found = False
    if bid is not None:
        try:
            found = inventory.remove_book(bid)
        except OSError as exc:
            write(f"File open failed: {exc.strerror}\n")
    write("Book removed successfully.\n" if found else "Book ID not found.\n")


def _view(inventory, write):
    try:
        books = inventory.books()
    except FileNotFoundError:
        write("No inventory found.\n")
        return
    write("\n" + _header() + _RULE)
    for book in books:
        write(book.table_row() + "\n")


def _low_stock(inventory, write):
    try:
        books = inventory.low_stock()
    except FileNotFoundError:
        write("No inventory found.\n")
        return
    write(f"\nLow Stock Alert (Less than {LOW_STOCK_THRESHOLD})\n")
    write(_header())
    for book in books:
        write(book.table_row() + "\n")
    if not books:
        write("No low stock alerts.\n")


def _report(inventory, write):
    try:
        books = inventory.books()
    except FileNotFoundError:
        write("No inventory data.\n")
        return
    write("\nInventory Report:\n")
    write(_header())
    for book in books:
        write(book.table_row() + "\n")
    write(_RULE)
    write(f"Total Books in Inventory: {sum(b.quantity for b in books)}\n")


def inventory_menu(
    inventory: Inventory,
    read_line: Callable[[], str] = input,
    write: Callable[[str], object] = partial(print, end="", flush=True),
) -> None:
    """Run the interactive inventory menu."""
    try:
        while True:
            write(MENU)
            match _scan_int(read_line()):
                case 1:
                    _add_book(inventory, read_line, write)
                case 2:
                    _update_stock(inventory, read_line, write)
                case 3:
                    _remove_book(inventory, read_line, write)
                case 4:
                    _view(inventory, write)
                case 5:
                    _low_stock(inventory, write)
                case 6:
                    _report(inventory, write)
                case 7:
                    write("Exiting...\n")
                    return
                case _:
                    write("Invalid choice! Please try again.\n")
    except EOFError:
        return