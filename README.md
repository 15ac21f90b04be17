# paystore

A small payment ledger kept in a SQLite database, using only the Python
standard library. It tracks three kinds of record:

- **accounts**: an owner, a balance and a currency;
- **entries**: signed changes to one account's balance;
- **transfers**: an amount moved from one account to another.

A transfer runs in one database transaction. It writes the transfer record
and two entries (a debit of `-amount` and a credit of `amount`), then updates
both balances. The two balances are always updated in order of account id.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
import sqlite3

from paystore.queries import NoRowsError, create_schema
from paystore.store import Store

conn = sqlite3.connect("ledger.db")
create_schema(conn)          # creates the tables if they are missing

store = Store(conn)

alice = store.create_account("Alice Example", 500, "USD")
bob = store.create_account("Bob Example", 100, "USD")

result = store.transfer_tx(alice.id, bob.id, 50)
print(result.transfer.amount)         # 50
print(result.from_entry.amount)       # -50
print(result.to_entry.amount)         # 50
print(result.from_account.balance)    # 450
print(result.to_account.balance)      # 150

# Pages of records, ordered by id
first_page = store.list_accounts(limit=10, offset=0)
history = store.list_entries(alice.id, limit=20, offset=0)
moves = store.list_transfers(alice.id, alice.id, limit=20, offset=0)

# Lookups of missing rows raise NoRowsError ("no rows in result set")
store.delete_account(bob.id)
try:
    store.get_account(bob.id)
except NoRowsError:
    print("gone")
```

## Modules

### `paystore.queries`

- `create_schema(conn)` creates the `accounts`, `entries` and `transfers`
  tables and their indexes if they do not exist.
- `Queries(conn)` runs typed queries on one `sqlite3.Connection`:
  - accounts: `create_account(owner, balance, currency)`,
    `get_account(account_id)`, `get_account_for_update(account_id)` (the same
    lookup as `get_account`), `list_accounts(limit, offset)`,
    `update_account(account_id, balance)`,
    `add_account_balance(account_id, amount)` (returns the updated account),
    `delete_account(account_id)` (deleting a missing account is not an error);
  - entries: `create_entry(account_id, amount)`, `get_entry(entry_id)`,
    `list_entries(account_id, limit, offset)`;
  - transfers: `create_transfer(from_account_id, to_account_id, amount)`,
    `get_transfer(transfer_id)`,
    `list_transfers(from_account_id, to_account_id, limit, offset)` (rows sent
    from the first account or received by the second).
- `NoRowsError`, a `LookupError`, is raised by the single-row lookups and by
  `add_account_balance` when no row matches.

`Queries` does not commit on its own. With a plain `sqlite3` connection in
its default mode, call `conn.commit()` yourself, or use `Store`.

### `paystore.store`

`Store(conn)` offers every method of `Queries`. It puts the connection in
autocommit mode, so single queries take effect at once. Its `transaction()`
context manager begins a transaction and yields a `Queries` bound to it; the
transaction commits when the block ends normally and rolls back if the block
raises. Opening a transaction while one is already open on the connection
raises `RuntimeError`. Transactions on one `Store` are serialised by a lock.

```python
with store.transaction() as q:
    q.add_account_balance(alice.id, -10)
    q.create_entry(alice.id, -10)
```

`transfer_tx(from_account_id, to_account_id, amount)` returns a
`TransferTxResult` with `transfer`, `from_entry`, `to_entry`, `from_account`
and `to_account`, and a `to_dict()` method.

### `paystore.models`

Records come back as the frozen dataclasses `Account`, `Entry` and
`Transfer`. `created_at` is a timezone-aware UTC `datetime` set when the row
is written. Each has a `to_dict()` method giving a JSON-ready dictionary with
`created_at` as an ISO 8601 string.

### `paystore.random_data`

Helpers for test data: `generate_random_owner()` (a first name and two last
names from small built-in lists), `random_int(low, high)` (inclusive; raises
`ValueError` if `high < low`), `random_money()` (0 to 1000) and
`random_currency()` (one of `CURRENCIES`).

## What it does not do

- There is no command-line tool and no network server or API; it is a library
  to call from your own code.
- Storage is SQLite only.
- It does not check business rules: a transfer may overdraw an account, move
  money between accounts of different currencies, or use a zero or negative
  amount, and entries and transfers are not tied to existing accounts.