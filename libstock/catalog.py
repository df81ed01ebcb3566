"""Book categories and suppliers kept in pipe-delimited files."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from functools import partial
from typing import Callable

from libstock.records import RecordStore

CATEGORIES_FILE = "categories.txt"
SUPPLIERS_FILE = "suppliers.txt"
NAME_LEN = 50
PHONE_LEN = 20
EMAIL_LEN = 50
ID_LEN = 10

_CATEGORY = re.compile(r"\s*([+-]?\d+)\|([^\n]+)")
_SUPPLIER = re.compile(r"\s*([+-]?\d+)\|([^|\n]+)\|([^|\n]+)\|([^\n]+)")
_INT = re.compile(r"\s*([+-]?\d+)")

MENU = (
    "\n=== Category & Supplier Management Menu ===\n"
    "1. Add Category\n"
    "2. View Categories\n"
    "3. Update Category\n"
    "4. Delete Category\n"
    "5. Add Supplier\n"
    "6. View Suppliers\n"
    "7. Update Supplier\n"
    "8. Delete Supplier\n"
    "9. Back to Main Menu\n"
    "Enter your choice: "
)


def _scan_int(text: str) -> int | None:
    match = _INT.match(text)
    return int(match.group(1)) if match else None


def _parse_all(lines: list[str], parse: Callable[[str], object]) -> list:
    """Parse lines in order, skipping blanks and stopping at the first malformed one."""
    result = []
    for line in lines:
        if not line.strip():
            continue
        try:
            result.append(parse(line))
        except ValueError:
            break
    return result


@dataclass
class Category:
    id: int
    name: str

    def to_record(self) -> str:
        return f"{self.id}|{self.name}"

    @classmethod
    def from_record(cls, line: str) -> Category:
        match = _CATEGORY.match(line.removesuffix("\n"))
        if not match:
            raise ValueError(f"malformed category record: {line!r}")
        cid, name = match.groups()
        return cls(int(cid), name)


@dataclass
class Supplier:
    id: int
    name: str
    phone: str
    email: str

    def to_record(self) -> str:
        return f"{self.id}|{self.name}|{self.phone}|{self.email}"

    @classmethod
    def from_record(cls, line: str) -> Supplier:
        match = _SUPPLIER.match(line.removesuffix("\n"))
        if not match:
            raise ValueError(f"malformed supplier record: {line!r}")
        sid, name, phone, email = match.groups()
        return cls(int(sid), name, phone, email)


class CategoryRegistry:
    """The categories file."""

    def __init__(self, path: str | os.PathLike = CATEGORIES_FILE):
        self.store = RecordStore(path)

    def add(self, category: Category) -> None:
        self.store.add(category.to_record())

    def categories(self) -> list[Category]:
        """Return categories up to the first malformed line; raise if the file is missing."""
        return _parse_all(self.store.lines(), Category.from_record)

    def update(self, category_id: int | str, name: str) -> bool:
        """Rename the category with this id; return whether it was found."""
        key = str(category_id)
        return self.store.update(key, f"{key}|{name}")

    def delete(self, category_id: int | str) -> bool:
        return self.store.delete(str(category_id))


class SupplierRegistry:
    """The suppliers file."""

    def __init__(self, path: str | os.PathLike = SUPPLIERS_FILE):
        self.store = RecordStore(path)

    def add(self, supplier: Supplier) -> None:
        self.store.add(supplier.to_record())

    def suppliers(self) -> list[Supplier]:
        """Return suppliers up to the first malformed line; raise if the file is missing."""
        return _parse_all(self.store.lines(), Supplier.from_record)

    def update(self, supplier_id: int | str, name: str, phone: str, email: str) -> bool:
        """Replace the details of the supplier with this id; return whether it was found."""
        key = str(supplier_id)
        return self.store.update(key, f"{key}|{name}|{phone}|{email}")

    def delete(self, supplier_id: int | str) -> bool:
        return self.store.delete(str(supplier_id))


def _read_token(read_line) -> str:
    """Read the next whitespace-delimited word, as a bounded id."""
    while True:
        words = read_line().split()
        if words:
            return words[0][:ID_LEN - 1]


def _read_text(read_line, size: int) -> str:
    return read_line()[:size - 1]


def _report_found(write, action, found: bool) -> None:
    write(f"{action}.\n" if found else "ID not found.\n")


def _attempt(write, operation) -> bool:
    try:
        return operation()
    except OSError as exc:
        write(f"File open failed: {exc.strerror}\n")
        return False


def _add_category(categories, read_line, write):
    write("Category ID: ")
    cid = _scan_int(read_line())
    write("Category Name: ")
    name = _read_text(read_line, NAME_LEN)
    if cid is None:
        write("Invalid number.\n")
        return
    _attempt(write, lambda: categories.add(Category(cid, name)))


def _view(store, title, write):
    write(f"\n--- {title} ---\n")
    try:
        write(store.read())
    except OSError as exc:
        write(f"File open failed: {exc.strerror}\n")


def _update_category(categories, read_line, write):
    write("Category ID to update: ")
    cid = _read_token(read_line)
    write("New Category Name: ")
    name = _read_text(read_line, NAME_LEN)
    _report_found(write, "Updated", _attempt(write, lambda: categories.update(cid, name)))


def _delete_category(categories, read_line, write):
    write("Category ID to delete: ")
    cid = _read_token(read_line)
    _report_found(write, "Deleted", _attempt(write, lambda: categories.delete(cid)))


def _supplier_details(read_line, write, prefix):
    write(f"{prefix}Name: ")
    name = _read_text(read_line, NAME_LEN)
    write(f"{prefix}Phone: ")
    phone = _read_text(read_line, PHONE_LEN)
    write(f"{prefix}Email: ")
    email = _read_text(read_line, EMAIL_LEN)
    return name, phone, email


def _add_supplier(suppliers, read_line, write):
    write("Supplier ID: ")
    sid = _scan_int(read_line())
    name, phone, email = _supplier_details(read_line, write, "")
    if sid is None:
        write("Invalid number.\n")
        return
    _attempt(write, lambda: suppliers.add(Supplier(sid, name, phone, email)))


def _update_supplier(suppliers, read_line, write):
    write("Supplier ID to update: ")
    sid = _read_token(read_line)
    name, phone, email = _supplier_details(read_line, write, "New ")
    _report_found(
        write, "Updated", _attempt(write, lambda: suppliers.update(sid, name, phone, email))
    )


def _delete_supplier(suppliers, read_line, write):
    write("Supplier ID to delete: ")
    sid = _read_token(read_line)
    _report_found(write, "Deleted", _attempt(write, lambda: suppliers.delete(sid)))


def category_supplier_menu(
    categories: CategoryRegistry,
    suppliers: SupplierRegistry,
    read_line: Callable[[], str] = input,
    write: Callable[[str], object] = partial(print, end="", flush=True),
) -> None:
    """Run the interactive category and supplier menu."""
    try:
        while True:
            write(MENU)
            match _scan_int(read_line()):
                case 1:
                    _add_category(categories, read_line, write)
                case 2:
                    _view(categories.store, "Categories", write)
                case 3:
                    _update_category(categories, read_line, write)
                case 4:
                    _delete_category(categories, read_line, write)
                case 5:
                    _add_supplier(suppliers, read_line, write)
                case 6:
                    _view(suppliers.store, "Suppliers", write)
                case 7:
                    _update_supplier(suppliers, read_line, write)
                case 8:
                    _delete_supplier(suppliers, read_line, write)
                case 9:
                    write("Returning to Main Menu...\n")
                    return
                case _:
                    write("Invalid choice. Please enter a number between 1 and 9.\n")
    except EOFError:
        return