"""A small double-entry payment ledger of accounts, entries and transfers over SQLite."""

__version__ = "0.1.0"
__all__ = ["models", "queries", "random_data", "store"]