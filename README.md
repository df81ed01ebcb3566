# libstock

A small console program for keeping a library's stock in plain text files.
Products, books, categories and suppliers are stored one record per line, as
`|`-separated fields whose first field is the record's ID. Users and
transactions are stored as blocks of `Label: value` lines.

## Install

    pip install .

## Use

Start the main menu:

    libstock

The data files are read from and written to the current directory; pass
`-d DIR` (or `--data-dir DIR`) to use another directory.

The menu offers:

1. Product management (`products.txt`): add, view, update and delete products
   with a name, category, quantity and price. IDs must be positive; quantity
   and price must not be negative.
2. Inventory and stock (`inventory.txt`): add books, change stock levels
   (never below zero), remove books, view the inventory, list titles with
   fewer than 3 copies and print a report with the total number of books.
3. Categories and suppliers (`categories.txt`, `suppliers.txt`).
4. Users and transactions (`users.txt`, `transactions.txt`). User types are
   `admin`, `staff` or `customer`; any other type is stored as `customer`.
   New transactions start with the status `pending`. Missing files are
   created empty.
5. Raw record operations on `inventory.txt`: append, read, update or delete a
   line by its ID.

Categories and suppliers can also be managed on their own, with the same
`-d`/`--data-dir` option:

    libstock-catalog

## From Python

The stores behind the menus can be used directly:

    from libstock.inventory import Book, Inventory

    inventory = Inventory("inventory.txt")
    inventory.add_book(Book(101, "Dune", 5))
    inventory.adjust_stock(101, -3)
    for book in inventory.low_stock(3):
        print(book.table_row())
    print(inventory.total_quantity())

- `libstock.records.RecordStore` offers the underlying line operations
  (`add`, `read`, `lines`, `update`, `delete`); `update` and `delete` return
  whether a record with that ID was found.
- `libstock.products.ProductCatalog` holds `Product` records.
- `libstock.catalog.CategoryRegistry` and `SupplierRegistry` hold `Category`
  and `Supplier` records.
- `libstock.users.UserStore` and `TransactionStore` keep `User` and
  `Transaction` records in memory, newest first, and save them on every
  change; `load` reads them back. `add` raises `ValueError` for an ID in use,
  and `update`, `update_status` and `delete` raise `KeyError` for an unknown
  ID.

Each menu is also available as a function taking its store(s) plus optional
`read_line` and `write` callables: `product_menu`, `inventory_menu`,
`category_supplier_menu`, `user_transaction_menu` and `file_operations_menu`.

## Tests

    pip install .[test]
    pytest