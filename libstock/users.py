"""Library users and their borrowing transactions."""

from __future__ import annotations

import contextlib
import os
import re
from collections import deque
from dataclasses import dataclass, replace
from functools import partial
from pathlib import Path
from typing import Callable

USERS_FILE = "users.txt"
TRANSACTIONS_FILE = "transactions.txt"
USER_TYPES = ("admin", "staff", "customer")
DEFAULT_USER_TYPE = "customer"
DEFAULT_STATUS = "pending"
SKIP = "-"

_INT = re.compile(r"[+-]?\d+")
_USER = re.compile(
    r"User ID:\s*([+-]?\d+)\s*Username:\s*(\S+)\s*Email:\s*(\S+)\s*Type:\s*(\S+)"
)
_TRANSACTION = re.compile(
    r"Transaction ID:\s*([+-]?\d+)\s*User ID:\s*([+-]?\d+)\s*Item ID:\s*([+-]?\d+)"
    r"\s*Item Type:\s*(\S+)\s*Status:\s*(\S+)"
)

MENU = (
    "\n=== User & Transaction Management ===\n"
    "1. User Management\n"
    "2. Transaction Management\n"
    "3. Exit\nYour choice: "
)
USER_MENU = "\n--- User ---\n1. Add\n2. View\n3. Update\n4. Delete\n5. Back\nChoice: "
TRANSACTION_MENU = (
    "\n--- Transaction ---\n1. Add\n2. View\n3. Update\n4. Delete\n5. Back\nChoice: "
)


@dataclass
class User:
    id: int
    username: str
    email: str
    user_type: str = DEFAULT_USER_TYPE


@dataclass
class Transaction:
    id: int
    user_id: int
    item_id: int
    item_type: str
    status: str = DEFAULT_STATUS


def normalize_user_type(user_type: str) -> str:
    """Return the type if it is a known one, otherwise the default type."""
    return user_type if user_type in USER_TYPES else DEFAULT_USER_TYPE


def _user_block(user: User) -> str:
    return (
        f"User ID: {user.id}\nUsername: {user.username}\n"
        f"Email: {user.email}\nType: {user.user_type}\n\n\n"
    )


def _transaction_block(trans: Transaction) -> str:
    return (
        f"Transaction ID: {trans.id}\nUser ID: {trans.user_id}\n"
        f"Item ID: {trans.item_id}\nItem Type: {trans.item_type}\n"
        f"Status: {trans.status}\n\n\n"
    )


def _read_creating(path: Path) -> str:
    if not path.exists():
        path.write_text("", encoding="utf-8")
    return path.read_text(encoding="utf-8")


class UserStore:
    """The users file, held in memory newest first."""

    def __init__(self, path: str | os.PathLike = USERS_FILE):
        self.path = Path(path)
        self.users: list[User] = []

    def load(self) -> list[User]:
        """Read all users, creating an empty file if none exists."""
        text = _read_creating(self.path)
        self.users = [
            User(int(uid), name, email, utype) for uid, name, email, utype in _USER.findall(text)
        ]
        return self.users

    def save(self) -> None:
        self.path.write_text("".join(map(_user_block, self.users)), encoding="utf-8")

    def _index(self, user_id: int) -> int:
        for index, user in enumerate(self.users):
            if user.id == user_id:
                return index
        raise KeyError(user_id)

    def add(self, user: User) -> User:
        """Insert a new user at the front and save; the id must be unused."""
        if any(existing.id == user.id for existing in self.users):
            raise ValueError(f"user id {user.id} exists")
        stored = replace(user, user_type=normalize_user_type(user.user_type))
        self.users.insert(0, stored)
        self.save()
        return stored

    def update(self, user_id: int, username: str | None = None, email: str | None = None,
               user_type: str | None = None) -> User:
        """Change a user's details; '-' or None skips a field, unknown types are ignored."""
        user = self.users[self._index(user_id)]
        if username is not None and username != SKIP:
            user.username = username
        if email is not None and email != SKIP:
            user.email = email
        if user_type in USER_TYPES:
            user.user_type = user_type
        self.save()
        return user

    def delete(self, user_id: int) -> User:
        removed = self.users.pop(self._index(user_id))
        self.save()
        return removed


class TransactionStore:
    """The transactions file, held in memory newest first."""

    def __init__(self, path: str | os.PathLike = TRANSACTIONS_FILE):
        self.path = Path(path)
        self.transactions: list[Transaction] = []

    def load(self) -> list[Transaction]:
        """Read all transactions, creating an empty file if none exists."""
        text = _read_creating(self.path)
        self.transactions = [
            Transaction(int(tid), int(uid), int(iid), itype, status)
            for tid, uid, iid, itype, status in _TRANSACTION.findall(text)
        ]
        return self.transactions

    def save(self) -> None:
        self.path.write_text(
            "".join(map(_transaction_block, self.transactions)), encoding="utf-8"
        )

    def _index(self, transaction_id: int) -> int:
        for index, trans in enumerate(self.transactions):
            if trans.id == transaction_id:
                return index
        raise KeyError(transaction_id)

    def add(self, transaction: Transaction) -> Transaction:
        """Insert a new transaction at the front and save; the id must be unused."""
        if any(existing.id == transaction.id for existing in self.transactions):
            raise ValueError(f"transaction id {transaction.id} exists")
        self.transactions.insert(0, transaction)
        self.save()
        return transaction

    def update_status(self, transaction_id: int, status: str) -> Transaction:
        trans = self.transactions[self._index(transaction_id)]
        trans.status = status
        self.save()
        return trans

    def delete(self, transaction_id: int) -> Transaction:
        removed = self.transactions.pop(self._index(transaction_id))
        self.save()
        return removed


class _Words:
    """Whitespace-separated words drawn from successive input lines."""

    def __init__(self, read_line: Callable[[], str]):
        self._read_line = read_line
        self._pending: deque[str] = deque()

    def word(self) -> str:
        while not self._pending:
            self._pending.extend(self._read_line().split())
        return self._pending.popleft()

    def number(self) -> int | None:
        match = _INT.match(self.word())
        return int(match.group()) if match else None


def _add_user(users, words, write):
    write("Enter user ID: ")
    user_id = words.number()
    if user_id is None:
        write("Invalid number.\n")
        return
    if any(user.id == user_id for user in users.users):
        write("User ID exists!\n")
        return
    write("Enter username: ")
    username = words.word()
    write("Enter email: ")
    email = words.word()
    write("Enter user type: ")
    user_type = words.word()
    users.add(User(user_id, username, email, user_type))
    write("User added.\n")


def _view_users(users, words, write):
    if not users.users:
        write("No users.\n")
        return
    for user in users.users:
        write(f"ID: {user.id}\nName: {user.username}\nEmail: {user.email}\n"
              f"Type: {user.user_type}\n\n")


def _update_user(users, words, write):
    write("Enter user ID to update: ")
    user_id = words.number()
    if user_id is None or not any(user.id == user_id for user in users.users):
        write("User not found.\n")
        return
    write("New username (- to skip): ")
    username = words.word()
    write("New email (- to skip): ")
    email = words.word()
    write("New type (- to skip): ")
    user_type = words.word()
    if user_type not in USER_TYPES:
        write("Invalid. Keeping old.\n")
    users.update(user_id, username, email, user_type)
    write("User updated.\n")


def _delete_user(users, words, write):
    write("Enter user ID to delete: ")
    user_id = words.number()
    try:
        users.delete(user_id)
    except KeyError:
        write("User not found.\n")
    else:
        write("User deleted.\n")


def _add_transaction(transactions, words, write):
    write("Enter transaction ID: ")
    trans_id = words.number()
    if trans_id is None:
        write("Invalid number.\n")
        return
    if any(trans.id == trans_id for trans in transactions.transactions):
        write("ID exists!\n")
        return
    write("User ID: ")
    user_id = words.number()
    write("Item ID: ")
    item_id = words.number()
    write("Item Type: ")
    item_type = words.word()
    if user_id is None or item_id is None:
        write("Invalid number.\n")
        return
    transactions.add(Transaction(trans_id, user_id, item_id, item_type))
    write("Transaction added.\n")


def _view_transactions(transactions, words, write):
    if not transactions.transactions:
        write("No transactions.\n")
        return
    for trans in transactions.transactions:
        write(f"Trans ID: {trans.id}\nUser ID: {trans.user_id}\nItem ID: {trans.item_id}\n"
              f"Item Type: {trans.item_type}\nStatus: {trans.status}\n\n")


def _update_transaction(transactions, words, write):
    write("Enter transaction ID: ")
    trans_id = words.number()
    if trans_id is None or not any(t.id == trans_id for t in transactions.transactions):
        write("Not found.\n")
        return
    write("New status (completed/pending/cancelled): ")
    transactions.update_status(trans_id, words.word())
    write("Transaction updated.\n")


def _delete_transaction(transactions, words, write):
    write("Enter transaction ID to delete: ")
    trans_id = words.number()
    try:
        transactions.delete(trans_id)
    except KeyError:
        write("Not found.\n")
    else:
        write("Deleted.\n")


_USER_ACTIONS = {1: _add_user, 2: _view_users, 3: _update_user, 4: _delete_user}
_TRANSACTION_ACTIONS = {
    1: _add_transaction,
    2: _view_transactions,
    3: _update_transaction,
    4: _delete_transaction,
}


def _submenu(menu, actions, store, words, write):
    while True:
        write(menu)
        choice = words.number()
        if choice == 5:
            return
        action = actions.get(choice)
        if action is None:
            continue
        try:
            action(store, words, write)
        except OSError as exc:
            write(f"File open failed: {exc.strerror}\n")


def _open_store(store, write):
    existed = store.path.exists()
    try:
        store.load()
    except OSError:
        write(f"Failed to create file: {store.path}\n")
        return
    if not existed:
        write(f"Created missing file: {store.path}\n")


def user_transaction_menu(
    users: UserStore,
    transactions: TransactionStore,
    read_line: Callable[[], str] = input,
    write: Callable[[str], object] = partial(print, end="", flush=True),
) -> None:
    """Run the interactive user and transaction menu, saving both stores on the way out."""
    _open_store(users, write)
    _open_store(transactions, write)
    words = _Words(read_line)
    try:
        while True:
            write(MENU)
            choice = words.number()
            if choice == 1:
                _submenu(USER_MENU, _USER_ACTIONS, users, words, write)
            elif choice == 2:
                _submenu(TRANSACTION_MENU, _TRANSACTION_ACTIONS, transactions, words, write)
            elif choice == 3:
                return
    except EOFError:
        return
    finally:
        with contextlib.suppress(OSError):
            users.save()
        with contextlib.suppress(OSError):
            transactions.save()