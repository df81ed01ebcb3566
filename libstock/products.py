"""Product records stored as pipe-delimited lines."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from functools import partial
from typing import Callable

from libstock.records import RecordStore

PRODUCTS_FILE = "products.txt"
NAME_LEN = 50
CATEGORY_LEN = 30

_FLOAT = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_RECORD = re.compile(
    rf"\s*([+-]?\d+)\|([^|]+)\|([^|]+)\|\s*([+-]?\d+)\|\s*({_FLOAT})"
)
_INT = re.compile(r"\s*([+-]?\d+)")
_NUMBER = re.compile(rf"\s*({_FLOAT})")

MENU = (
    "\n===== Inventory Management System =====\n"
    "1. Add Product\n"
    "2. View Products\n"
    "3. Update Product\n"
    "4. Delete Product\n"
    "5. Exit\n"
    "Enter your choice: "
)


def _scan_int(text: str) -> int | None:
    match = _INT.match(text)
    return int(match.group(1)) if match else None


def _scan_float(text: str) -> float | None:
    match = _NUMBER.match(text)
    return float(match.group(1)) if match else None


@dataclass
class Product:
    id: int
    name: str
    category: str
    quantity: int
    price: float

    def to_record(self) -> str:
        return f"{self.id}|{self.name}|{self.category}|{self.quantity}|{self.price:.2f}"

    @classmethod
    def from_record(cls, line: str) -> Product:
        match = _RECORD.match(line.removesuffix("\n"))
        if not match:
            raise ValueError(f"malformed product record: {line!r}")
        pid, name, category, quantity, price = match.groups()
        return cls(int(pid), name, category, int(quantity), float(price))

    def display(self) -> str:
        return (
            f"ID: {self.id}\nName: {self.name}\nCategory: {self.category}\n"
            f"Quantity: {self.quantity}\nPrice: RM{self.price:.2f}\n\n"
        )


class ProductCatalog:
    """The products file."""

    def __init__(self, path: str | os.PathLike = PRODUCTS_FILE):
        self.store = RecordStore(path)

    def add(self, product: Product) -> None:
        """Validate and append a product."""
        if product.id <= 0:
            raise ValueError("product id must be a positive integer")
        if not product.name:
            raise ValueError("product name cannot be empty")
        if not product.category:
            raise ValueError("product category cannot be empty")
        if product.quantity < 0:
            raise ValueError("quantity must be non-negative")
        if product.price < 0:
            raise ValueError("price must be non-negative")
        self.store.add(product.to_record())

    def products(self) -> list[Product]:
        """Return every well-formed product; raise if the file is missing."""
        result = []
        for line in self.store.lines():
            try:
                result.append(Product.from_record(line))
            except ValueError:
                continue
        return result

    def update(self, product: Product) -> bool:
        return self.store.update(str(product.id), product.to_record())

    def delete(self, product_id: int) -> bool:
        return self.store.delete(str(product_id))


def _ask_until(read_line, write, prompt, retry, parse, accept):
    write(prompt)
    while True:
        value = parse(read_line())
        if value is not None and accept(value):
            return value
        write(retry)


def _add_product(catalog, read_line, write):
    pid = _ask_until(read_line, write, "Enter Product ID: ",
                     "Invalid ID. Enter a positive integer: ", _scan_int, lambda v: v > 0)
    name = _ask_until(read_line, write, "Enter Product Name: ",
                      "Name cannot be empty. Enter again: ",
                      lambda s: s[:NAME_LEN - 1], bool)
    category = _ask_until(read_line, write, "Enter Category: ",
                          "Category cannot be empty. Enter again: ",
                          lambda s: s[:CATEGORY_LEN - 1], bool)
    quantity = _ask_until(read_line, write, "Enter Quantity: ",
                          "Invalid quantity. Enter non-negative integer: ",
                          _scan_int, lambda v: v >= 0)
    price = _ask_until(read_line, write, "Enter Price: ",
                       "Invalid price. Enter non-negative value: ",
                       _scan_float, lambda v: v >= 0)
    try:
        catalog.add(Product(pid, name, category, quantity, price))
    except OSError as exc:
        write(f"File open failed: {exc.strerror}\n")
        write("Failed to add product.\n")
    else:
        write("Product added successfully!\n")


def _view_products(catalog, write):
    try:
        products = catalog.products()
    except FileNotFoundError:
        write("No products found.\n")
        return
    if not products:
        write("No products to display.\n")
        return
    write("\n--- Product List ---\n")
    for product in products:
        write(product.display())


def _update_product(catalog, read_line, write):
    write("Enter Product ID to update: ")
    pid = _scan_int(read_line())
    write("Enter new name: ")
    name = read_line()[:NAME_LEN - 1]
    write("Enter new category: ")
    category = read_line()[:CATEGORY_LEN - 1]
    write("Enter new quantity: ")
    quantity = _scan_int(read_line())
    write("Enter new price: ")
    price = _scan_float(read_line())
    if pid is None or quantity is None or price is None:
        write("Invalid number.\n")
        return
    try:
        found = catalog.update(Product(pid, name, category, quantity, price))
    except OSError as exc:
        write(f"File open failed: {exc.strerror}\n")
        found = False
    write("Product updated successfully.\n" if found else "Product not found.\n")


def _delete_product(catalog, read_line, write):
    write("Enter Product ID to delete: ")
    pid = _scan_int(read_line())
    found = False
    if pid is not None:
        try:
            found = catalog.delete(pid)
        except OSError as exc:
            write(f"File open failed: {exc.strerror}\n")
    write("Product deleted successfully.\n" if found else "Product not found.\n")


def product_menu(
    catalog: ProductCatalog,
    read_line: Callable[[], str] = input,
    write: Callable[[str], object] = partial(print, end="", flush=True),
) -> None:
    """Run the interactive product management menu."""
    try:
        while True:
            write(MENU)
            match _scan_int(read_line()):
                case 1:
                    _add_product(catalog, read_line, write)
                case 2:
                    _view_products(catalog, write)
                case 3:
                    _update_product(catalog, read_line, write)
                case 4:
                    _delete_product(catalog, read_line, write)
                case 5:
                    write("Exiting program. Goodbye!\n")
                    return
                case _:
                    write("Invalid choice. Please enter a number between 1 and 5.\n")
    except EOFError:
        return