"""Pipe-delimited record files keyed by their first field."""

from __future__ import annotations

import os
import re
from functools import partial
from pathlib import Path
from typing import Callable

DEFAULT_FILE = "inventory.txt"
TEMP_NAME = "temp.txt"

_INT = re.compile(r"\s*([+-]?\d+)")

MENU = (
    "\n=== Advanced File Operations ===\n"
    "1. Add Record to File\n"
    "2. Read File\n"
    "3. Update Record by ID\n"
    "4. Delete Record by ID\n"
    "5. Exit to Main Menu\n"
    "Enter your choice: "
)


def _first_field(line: str) -> str | None:
    """Return the first '|'-separated token, skipping leading separators."""
    stripped = line.lstrip("|")
    if not stripped:
        return None
    return stripped.split("|", 1)[0]


def _scan_int(text: str) -> int | None:
    match = _INT.match(text)
    return int(match.group(1)) if match else None


class RecordStore:
    """A text file of one record per line, identified by the first field."""

    def __init__(self, path: str | os.PathLike = DEFAULT_FILE, temp_path: str | os.PathLike | None = None):
        self.path = Path(path)
        self.temp_path = Path(temp_path) if temp_path is not None else self.path.with_name(TEMP_NAME)

    def add(self, data: str) -> None:
        """Append one record line to the file, creating it if needed."""
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(f"{data}\n")

    def read(self) -> str:
        """Return the whole file contents."""
        return self.path.read_text(encoding="utf-8")

    def lines(self) -> list[str]:
        """Return the file's lines without their line endings."""
        with self.path.open(encoding="utf-8") as fh:
            return [line.removesuffix("\n") for line in fh]

    def update(self, record_id: str, new_data: str) -> bool:
        """Replace every record whose id matches; return whether one did."""
        return self._rewrite(record_id, new_data)

    def delete(self, record_id: str) -> bool:
        """Drop every record whose id matches; return whether one did."""
        return self._rewrite(record_id, None)

    def _rewrite(self, record_id: str, replacement: str | None) -> bool:
        found = False
        with self.path.open(encoding="utf-8") as src, self.temp_path.open("w", encoding="utf-8") as dst:
            for line in src:
                if _first_field(line) == record_id:
                    found = True
                    if replacement is not None:
                        dst.write(f"{replacement}\n")
                else:
                    dst.write(line)
        os.replace(self.temp_path, self.path)
        return found


def file_operations_menu(
    store: RecordStore,
    read_line: Callable[[], str] = input,
    write: Callable[[str], object] = partial(print, end="", flush=True),
) -> None:
    """Run the interactive menu for raw record operations."""
    try:
        while True:
            write(MENU)
            choice = _scan_int(read_line())
            match choice:
                case 1:
                    write("Enter new record (e.g., 101|Book Title|5):\n")
                    data = read_line()[:255]
                    try:
                        store.add(data)
                    except OSError as exc:
                        write(f"File open failed: {exc.strerror}\n")
                        write("Failed to add data.\n")
                    else:
                        write("Data added successfully.\n")
                case 2:
                    write(f"\nContents of '{store.path}':\n")
                    try:
                        write(store.read())
                    except OSError as exc:
                        write(f"File open failed: {exc.strerror}\n")
                case 3:
                    write("Enter ID to update: ")
                    record_id = read_line()[:9]
                    write("Enter new full record (same format):\n")
                    new_data = read_line()[:255]
                    try:
                        found = store.update(record_id, new_data)
                    except OSError as exc:
                        write(f"File open failed: {exc.strerror}\n")
                        found = False
                    write("Record updated successfully.\n" if found else "Record not found.\n")
                case 4:
                    write("Enter ID to delete: ")
                    record_id = read_line()[:9]
                    try:
                        found = store.delete(record_id)
                    except OSError as exc:
                        write(f"File open failed: {exc.strerror}\n")
                        found = False
                    write("Record deleted successfully.\n" if found else "Record not found.\n")
                case 5:
                    write("Returning to Main Menu...\n")
                    return
                case _:
                    write("Invalid choice! Please try again.\n")
    except EOFError:
        return