"""Transactional operations over the query layer."""

from __future__ import annotations

import sqlite3
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator

from .models import Account, Entry, Transfer
from .queries import Queries


@dataclass(frozen=True)
class TransferTxResult:
    """Everything written by one money transfer."""

    transfer: Transfer
    from_entry: Entry
    to_entry: Entry
    from_account: Account
    to_account: Account

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of the result."""
        return {
            "transfer": self.transfer.to_dict(),
            "from_entry": self.from_entry.to_dict(),
            "to_entry": self.to_entry.to_dict(),
            "from_account": self.from_account.to_dict(),
            "to_account": self.to_account.to_dict(),
        }


def _add_money(
    q: Queries, account_id1: int, amount1: int, account_id2: int, amount2: int
) -> tuple[Account, Account]:
    account1 = q.add_account_balance(account_id1, amount1)
    account2 = q.add_account_balance(account_id2, amount2)
    return account1, account2


class Store(Queries):
    """Queries plus transactions on one connection.

    The connection is switched to autocommit mode, so single queries take
    effect at once and transactions are opened explicitly.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        conn.isolation_level = None
        super().__init__(conn)
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator[Queries]:
        """Run a block in a transaction: commit on success, roll back on error."""
        with self._lock:
            if self._conn.in_transaction:
                raise RuntimeError("a transaction is already open on this connection")
            self._conn.execute("BEGIN IMMEDIATE")
            try:
                yield Queries(self._conn)
            except BaseException:
                self._conn.execute("ROLLBACK")
                raise
            self._conn.execute("COMMIT")

    def transfer_tx(self, from_account_id: int, to_account_id: int, amount: int) -> TransferTxResult:
        """Move money between two accounts, recording the transfer and both entries."""
        with self.transaction() as q:
            transfer = q.create_transfer(from_account_id, to_account_id, amount)
            from_entry = q.create_entry(from_account_id, -amount)
            to_entry = q.create_entry(to_account_id, amount)
            # Update in id order so concurrent transfers lock rows consistently.
            if from_account_id < to_account_id:
                from_account, to_account = _add_money(
                    q, from_account_id, -amount, to_account_id, amount
                )
            else:
                to_account, from_account = _add_money(
                    q, to_account_id, amount, from_account_id, -amount
                )
        return TransferTxResult(transfer, from_entry, to_entry, from_account, to_account)