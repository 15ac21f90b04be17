import sqlite3
from concurrent.futures import ThreadPoolExecutor

import pytest

from paystore.queries import NoRowsError, create_schema
from paystore.random_data import generate_random_owner, random_currency, random_money
from paystore.store import Store


@pytest.fixture
def store():
    conn = sqlite3.connect(":memory:", check_same_thread=False)
    create_schema(conn)
    yield Store(conn)
    conn.close()


def create_random_account(store):
    return store.create_account(generate_random_owner(), random_money(), random_currency())


def test_transfer_tx_concurrent_back_and_forth(store):
    account1 = create_random_account(store)
    account2 = create_random_account(store)
    n = 10
    amount = 10

    def run(i):
        if i % 2 == 1:
            return store.transfer_tx(account2.id, account1.id, amount)
        return store.transfer_tx(account1.id, account2.id, amount)

    with ThreadPoolExecutor(max_workers=n) as pool:
        results = list(pool.map(run, range(n)))

    assert len(results) == n
    updated1 = store.get_account(account1.id)
    updated2 = store.get_account(account2.id)
    assert updated1.balance == account1.balance
    assert updated2.balance == account2.balance
    assert len(store.list_transfers(account1.id, account1.id, limit=100, offset=0)) == n


def test_transfer_tx_single(store):
    account1 = create_random_account(store)
    account2 = create_random_account(store)
    amount = 10
    result = store.transfer_tx(account1.id, account2.id, amount)

    transfer = result.transfer
    assert transfer.from_account_id == account1.id
    assert transfer.to_account_id == account2.id
    assert transfer.amount == amount
    assert store.get_transfer(transfer.id) == transfer

    assert result.from_entry.account_id == account1.id
    assert result.from_entry.amount == -amount
    assert store.get_entry(result.from_entry.id) == result.from_entry
    assert result.to_entry.account_id == account2.id
    assert result.to_entry.amount == amount
    assert store.get_entry(result.to_entry.id) == result.to_entry

    assert result.from_account.id == account1.id
    assert result.to_account.id == account2.id
    diff1 = account1.balance - result.from_account.balance
    diff2 = result.to_account.balance - account2.balance
    assert diff1 == diff2 == amount


def test_transfer_tx_higher_to_lower_id(store):
    account1 = create_random_account(store)
    account2 = create_random_account(store)
    result = store.transfer_tx(account2.id, account1.id, 7)
    assert result.from_account.id == account2.id
    assert result.to_account.id == account1.id
    assert result.from_account.balance == account2.balance - 7
    assert result.to_account.balance == account1.balance + 7


def test_transfer_tx_missing_account_rolls_back(store):
    account = create_random_account(store)
    with pytest.raises(NoRowsError):
        store.transfer_tx(account.id, account.id + 1000, 10)
    assert store.get_account(account.id).balance == account.balance
    assert store.list_transfers(account.id, account.id, limit=10, offset=0) == []
    assert store.list_entries(account.id, limit=10, offset=0) == []


def test_transaction_commits(store):
    with store.transaction() as q:
        created = q.create_account("Vera Weber Ueda", 50, "CAD")
    assert store.get_account(created.id) == created


def test_transaction_rolls_back_on_error(store):
    with pytest.raises(ValueError):
        with store.transaction() as q:
            created = q.create_account("Sven Larsen Rossi", 50, "GBP")
            raise ValueError("abort")
    with pytest.raises(NoRowsError):
        store.get_account(created.id)


def test_nested_transaction_rejected(store):
    with pytest.raises(RuntimeError):
        with store.transaction():
            with store.transaction():
                pass
    account = create_random_account(store)
    assert store.get_account(account.id) == account


def test_result_to_dict(store):
    account1 = create_random_account(store)
    account2 = create_random_account(store)
    data = store.transfer_tx(account1.id, account2.id, 3).to_dict()
    assert data["transfer"]["amount"] == 3
    assert data["from_entry"]["amount"] == -3
    assert data["to_account"]["id"] == account2.id