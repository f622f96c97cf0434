from dataclasses import replace

from walletledger.models import BUY, SELL, Oracle, Transaction, Wallet


def test_oracle_defaults():
    oracle = Oracle()
    assert oracle.date == ""
    assert oracle.rate == 0.0


def test_oracle_fields_are_mutable():
    oracle = Oracle("2024-01-02", 5.1)
    oracle.rate = 5.3
    oracle.date = "2024-01-03"
    assert oracle == Oracle("2024-01-03", 5.3)


def test_transaction_defaults_to_buy():
    transaction = Transaction()
    assert transaction.kind == BUY == "C"
    assert transaction.wallet_id == 0
    assert transaction.transaction_id == 0
    assert transaction.amount == 0.0


def test_transaction_holds_values():
    transaction = Transaction(1, 7, "2024-02-10", SELL, 12.5)
    assert transaction.kind == "V"
    assert (transaction.wallet_id, transaction.transaction_id) == (1, 7)
    assert transaction.date == "2024-02-10"
    assert transaction.amount == 12.5


def test_wallet_defaults_and_equality():
    assert Wallet() == Wallet(0, "", "")
    wallet = Wallet(3, "Ana", "XP")
    assert replace(wallet, broker="Rico") == Wallet(3, "Ana", "Rico")
    assert wallet.broker == "XP"