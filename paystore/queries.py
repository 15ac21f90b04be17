"""SQL queries on accounts, entries and transfers over a SQLite connection."""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from typing import Any, Callable, Sequence, TypeVar

from .models import Account, Entry, Transfer

T = TypeVar("T")

_SCHEMA = """
CREATE TABLE IF NOT EXISTS accounts (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    owner TEXT NOT NULL,
    balance INTEGER NOT NULL,
    currency TEXT NOT NULL,
    created_at TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS entries (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    account_id INTEGER NOT NULL,
    amount INTEGER NOT NULL,
    created_at TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS transfers (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    from_account_id INTEGER NOT NULL,
    to_account_id INTEGER NOT NULL,
    amount INTEGER NOT NULL,
    created_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS entries_account_id_idx ON entries (account_id);
CREATE INDEX IF NOT EXISTS transfers_from_idx ON transfers (from_account_id);
CREATE INDEX IF NOT EXISTS transfers_to_idx ON transfers (to_account_id);
"""

_ACCOUNT_COLUMNS = "id, owner, balance, currency, created_at"
_ENTRY_COLUMNS = "id, account_id, amount, created_at"
_TRANSFER_COLUMNS = "id, from_account_id, to_account_id, amount, created_at"


class NoRowsError(LookupError):
    """Raised when a query that returns one row finds none."""

    def __init__(self, message: str = "no rows in result set") -> None:
        super().__init__(message)


def create_schema(conn: sqlite3.Connection) -> None:
    """Create the accounts, entries and transfers tables if they are missing."""
    conn.executescript(_SCHEMA)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _account(row: Sequence[Any]) -> Account:
    id_, owner, balance, currency, created_at = row
    return Account(id_, owner, balance, currency, datetime.fromisoformat(created_at))


def _entry(row: Sequence[Any]) -> Entry:
    id_, account_id, amount, created_at = row
    return Entry(id_, account_id, amount, datetime.fromisoformat(created_at))


def _transfer(row: Sequence[Any]) -> Transfer:
    id_, from_id, to_id, amount, created_at = row
    return Transfer(id_, from_id, to_id, amount, datetime.fromisoformat(created_at))


class Queries:
    """Typed queries run on one SQLite connection."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def _one(self, sql: str, params: Sequence[Any], build: Callable[[Sequence[Any]], T]) -> T:
        row = self._conn.execute(sql, params).fetchone()
        if row is None:
            raise NoRowsError()
        return build(row)

    def _many(self, sql: str, params: Sequence[Any], build: Callable[[Sequence[Any]], T]) -> list[T]:
        return [build(row) for row in self._conn.execute(sql, params)]

    # accounts

    def add_account_balance(self, account_id: int, amount: int) -> Account:
        """Add ``amount`` to an account's balance and return the updated account."""
        cursor = self._conn.execute(
            "UPDATE accounts SET balance = balance + ? WHERE id = ?", (amount, account_id)
        )
        if cursor.rowcount == 0:
            raise NoRowsError()
        return self.get_account(account_id)

    def create_account(self, owner: str, balance: int, currency: str) -> Account:
        """Insert an account and return it as stored."""
        cursor = self._conn.execute(
            "INSERT INTO accounts (owner, balance, currency, created_at) VALUES (?, ?, ?, ?)",
            (owner, balance, currency, _now()),
        )
        return self.get_account(cursor.lastrowid)

    def delete_account(self, account_id: int) -> None:
        """Delete an account; deleting a missing account is not an error."""
        self._conn.execute("DELETE FROM accounts WHERE id = ?", (account_id,))

    def get_account(self, account_id: int) -> Account:
        """Return the account with the given id."""
        return self._one(
            f"SELECT {_ACCOUNT_COLUMNS} FROM accounts WHERE id = ? LIMIT 1",
            (account_id,),
            _account,
        )

    def get_account_for_update(self, account_id: int) -> Account:
        """Return the account with the given id for a following update."""
        return self._one(
            f"SELECT {_ACCOUNT_COLUMNS} FROM accounts WHERE id = ? LIMIT 1",
            (account_id,),
            _account,
        )

    def list_accounts(self, limit: int, offset: int) -> list[Account]:
        """Return a page of accounts ordered by id."""
        return self._many(
            f"SELECT {_ACCOUNT_COLUMNS} FROM accounts ORDER BY id LIMIT ? OFFSET ?",
            (limit, offset),
            _account,
        )

    def update_account(self, account_id: int, balance: int) -> None:
        """Set an account's balance."""
        self._conn.execute("UPDATE accounts SET balance = ? WHERE id = ?", (balance, account_id))

    # entries

    def create_entry(self, account_id: int, amount: int) -> Entry:
        """Insert a balance entry and return it as stored."""
        cursor = self._conn.execute(
            "INSERT INTO entries (account_id, amount, created_at) VALUES (?, ?, ?)",
            (account_id, amount, _now()),
        )
        return self.get_entry(cursor.lastrowid)

    def get_entry(self, entry_id: int) -> Entry:
        """Return the entry with the given id."""
        return self._one(
            f"SELECT {_ENTRY_COLUMNS} FROM entries WHERE id = ? LIMIT 1",
            (entry_id,),
            _entry,
        )

    def list_entries(self, account_id: int, limit: int, offset: int) -> list[Entry]:
        """Return a page of one account's entries ordered by id."""
        return self._many(
            f"SELECT {_ENTRY_COLUMNS} FROM entries WHERE account_id = ? "
            "ORDER BY id LIMIT ? OFFSET ?",
            (account_id, limit, offset),
            _entry,
        )

    # transfers

    def create_transfer(self, from_account_id: int, to_account_id: int, amount: int) -> Transfer:
        """Insert a transfer record and return it as stored."""
        cursor = self._conn.execute(
            "INSERT INTO transfers (from_account_id, to_account_id, amount, created_at) "
            "VALUES (?, ?, ?, ?)",
            (from_account_id, to_account_id, amount, _now()),
        )
        return self.get_transfer(cursor.lastrowid)

    def get_transfer(self, transfer_id: int) -> Transfer:
        """Return the transfer with the given id."""
        return self._one(
            f"SELECT {_TRANSFER_COLUMNS} FROM transfers WHERE id = ? LIMIT 1",
            (transfer_id,),
            _transfer,
        )

    def list_transfers(
        self, from_account_id: int, to_account_id: int, limit: int, offset: int
    ) -> list[Transfer]:
        """Return a page of transfers sent from or received by the given accounts."""
        return self._many(
            f"SELECT {_TRANSFER_COLUMNS} FROM transfers "
            "WHERE from_account_id = ? OR to_account_id = ? "
            "ORDER BY id LIMIT ? OFFSET ?",
            (from_account_id, to_account_id, limit, offset),
            _transfer,
        )