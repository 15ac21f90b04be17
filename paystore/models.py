"""Records stored by the payment store."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Account:
    """A customer account holding a balance in one currency."""

    id: int
    owner: str
    balance: int
    currency: str
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of the account."""
        return {
            "id": self.id,
            "owner": self.owner,
            "balance": self.balance,
            "currency": self.currency,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class Entry:
    """A change to one account's balance; the amount may be negative or positive."""

    id: int
    account_id: int
    amount: int
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of the entry."""
        return {
            "id": self.id,
            "account_id": self.account_id,
            "amount": self.amount,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class Transfer:
    """A movement of money between two accounts; the amount must be positive."""

    id: int
    from_account_id: int
    to_account_id: int
    amount: int
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of the transfer."""
        return {
            "id": self.id,
            "from_account_id": self.from_account_id,
            "to_account_id": self.to_account_id,
            "amount": self.amount,
            "created_at": self.created_at.isoformat(),
        }