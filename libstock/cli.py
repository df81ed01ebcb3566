"""Command-line entry points for the library inventory system."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path

from libstock.catalog import (
    CATEGORIES_FILE,
    EMAIL_LEN,
    NAME_LEN,
    PHONE_LEN,
    SUPPLIERS_FILE,
    Category,
    CategoryRegistry,
    Supplier,
    SupplierRegistry,
    category_supplier_menu,
)
from libstock.inventory import FILENAME, Inventory, inventory_menu
from libstock.products import PRODUCTS_FILE, ProductCatalog, product_menu
from libstock.records import RecordStore, file_operations_menu
from libstock.users import (
    TRANSACTIONS_FILE,
    USERS_FILE,
    TransactionStore,
    UserStore,
    user_transaction_menu,
)

_INT = re.compile(r"\s*([+-]?\d+)")

MAIN_MENU = (
    "\n===== Library Inventory System =====\n"
    "1. Product Management (Role 1)\n"
    "2. Inventory & Stock (Role 2)\n"
    "3. Category & Suppliers (Role 3)\n"
    "4. Users & Transactions (Role 4)\n"
    "5. File Operations & Reports (Role 5)\n"
    "6. Exit\n"
    "Enter your choice: "
)
CATALOG_MENU = "\n--- Menu ---\n1. Category\n2. Supplier\n3. Exit\nChoice: "


def _scan_int(text: str) -> int | None:
    match = _INT.match(text)
    return int(match.group(1)) if match else None


def _read_line() -> str:
    return input()


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _data_dir(argv, prog: str, description: str) -> Path:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument(
        "-d", "--data-dir", type=Path, default=Path("."),
        help="directory holding the data files (default: current directory)",
    )
    return parser.parse_args(argv).data_dir


def main(argv=None) -> int:
    """Run the main library inventory menu."""
    data_dir = _data_dir(argv, "libstock", "Library inventory system.")
    try:
        while True:
            _write(MAIN_MENU)
            match _scan_int(_read_line()):
                case 1:
                    product_menu(ProductCatalog(data_dir / PRODUCTS_FILE), _read_line, _write)
                case 2:
                    _write("Inventory Module (Role 2)")
                    inventory_menu(Inventory(data_dir / FILENAME), _read_line, _write)
                case 3:
                    _write("Category/Supplier Module (Role 3)\n")
                    category_supplier_menu(
                        CategoryRegistry(data_dir / CATEGORIES_FILE),
                        SupplierRegistry(data_dir / SUPPLIERS_FILE),
                        _read_line,
                        _write,
                    )
                case 4:
                    _write("User/Transaction Module (Role 4)\n")
                    user_transaction_menu(
                        UserStore(data_dir / USERS_FILE),
                        TransactionStore(data_dir / TRANSACTIONS_FILE),
                        _read_line,
                        _write,
                    )
                case 5:
                    _write("File & Reports Module (Role 5)\n")
                    file_operations_menu(RecordStore(data_dir / FILENAME), _read_line, _write)
                case 6:
                    _write("Exiting program.\n")
                    return 0
                case _:
                    _write("Invalid choice. Please try again.\n")
    except EOFError:
        return 0


def _add_category(registry: CategoryRegistry) -> None:
    _write("Category ID: ")
    category_id = _scan_int(_read_line())
    _write("Category Name: ")
    name = _read_line()[:NAME_LEN - 1]
    if category_id is None:
        _write("Invalid number.\n")
        return
    registry.add(Category(category_id, name))
    _write("Added.\n")


def _view_categories(registry: CategoryRegistry) -> None:
    try:
        categories = registry.categories()
    except OSError:
        _write("No data.\n")
        return
    _write("\n--- Categories ---\n")
    for category in categories:
        _write(f"ID: {category.id} | Name: {category.name}\n")


def _update_category(registry: CategoryRegistry) -> None:
    try:
        existing = registry.categories()
    except OSError:
        return
    _write("Category ID to update: ")
    category_id = _scan_int(_read_line())
    if category_id is None or not any(c.id == category_id for c in existing):
        _write("ID not found.\n")
        return
    _write("New Name: ")
    registry.update(category_id, _read_line()[:NAME_LEN - 1])
    _write("Updated.\n")


def _delete_category(registry: CategoryRegistry) -> None:
    if not registry.store.path.exists():
        return
    _write("Category ID to delete: ")
    category_id = _scan_int(_read_line())
    found = category_id is not None and registry.delete(category_id)
    _write("Deleted.\n" if found else "ID not found.\n")


def _supplier_details() -> tuple[str, str, str]:
    _write("New Name: ")
    name = _read_line()[:NAME_LEN - 1]
    _write("New Phone: ")
    phone = _read_line()[:PHONE_LEN - 1]
    _write("New Email: ")
    email = _read_line()[:EMAIL_LEN - 1]
    return name, phone, email


def _add_supplier(registry: SupplierRegistry) -> None:
    _write("Supplier ID: ")
    supplier_id = _scan_int(_read_line())
    _write("Name: ")
    name = _read_line()[:NAME_LEN - 1]
    _write("Phone: ")
    phone = _read_line()[:PHONE_LEN - 1]
    _write("Email: ")
    email = _read_line()[:EMAIL_LEN - 1]
    if supplier_id is None:
        _write("Invalid number.\n")
        return
    registry.add(Supplier(supplier_id, name, phone, email))
    _write("Added.\n")


def _view_suppliers(registry: SupplierRegistry) -> None:
    try:
        suppliers = registry.suppliers()
    except OSError:
        _write("No data.\n")
        return
    _write("\n--- Suppliers ---\n")
    for s in suppliers:
        _write(f"ID: {s.id} | Name: {s.name} | Phone: {s.phone} | Email: {s.email}\n")


def _update_supplier(registry: SupplierRegistry) -> None:
    try:
        existing = registry.suppliers()
    except OSError:
        return
    _write("Supplier ID to update: ")
    supplier_id = _scan_int(_read_line())
    if supplier_id is None or not any(s.id == supplier_id for s in existing):
        _write("ID not found.\n")
        return
    registry.update(supplier_id, *_supplier_details())
    _write("Updated.\n")


def _delete_supplier(registry: SupplierRegistry) -> None:
    if not registry.store.path.exists():
        return
    _write("Supplier ID to delete: ")
    supplier_id = _scan_int(_read_line())
    found = supplier_id is not None and registry.delete(supplier_id)
    _write("Deleted.\n" if found else "ID not found.\n")


_CATEGORY_ACTIONS = {1: _add_category, 2: _view_categories, 3: _update_category, 4: _delete_category}
_SUPPLIER_ACTIONS = {1: _add_supplier, 2: _view_suppliers, 3: _update_supplier, 4: _delete_supplier}


def _catalog_submenu(title: str, actions, registry) -> None:
    while True:
        _write(f"\n--- {title} ---\n1. Add\n2. View\n3. Update\n4. Delete\n5. Back\nChoice: ")
        action = actions.get(_scan_int(_read_line()))
        if action is None:
            return
        try:
            action(registry)
        except OSError:
            _write("File error.\n")


def catalog_main(argv=None) -> int:
    """Run the stand-alone category and supplier menu."""
    data_dir = _data_dir(argv, "libstock-catalog", "Category and supplier records.")
    categories = CategoryRegistry(data_dir / CATEGORIES_FILE)
    suppliers = SupplierRegistry(data_dir / SUPPLIERS_FILE)
    try:
        while True:
            _write(CATALOG_MENU)
            match _scan_int(_read_line()):
                case 1:
                    _catalog_submenu("Category", _CATEGORY_ACTIONS, categories)
                case 2:
                    _catalog_submenu("Supplier", _SUPPLIER_ACTIONS, suppliers)
                case _:
                    return 0
    except EOFError:
        return 0