"""In-memory stores for oracles, transactions and wallets."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from .models import Oracle, Transaction, Wallet


class OracleMemoryDAO:
    """Keeps one exchange rate per date, in insertion order."""

    def __init__(self) -> None:
        self._oracles: list[Oracle] = []

    def _find(self, date: str) -> Optional[Oracle]:
        return next((o for o in self._oracles if o.date == date), None)

    def add_oracle(self, oracle: Oracle) -> bool:
        """Store a copy of the oracle; False if its date is already present."""
        if self._find(oracle.date) is not None:
            return False
        self._oracles.append(replace(oracle))
        return True

    def get_oracle_by_date(self, date: str) -> Optional[Oracle]:
        found = self._find(date)
        return replace(found) if found is not None else None

    def get_all_oracles(self) -> list[Oracle]:
        return [replace(o) for o in self._oracles]

    def update_oracle(self, oracle: Oracle) -> bool:
        """Replace the entry with the same date; False if there is none."""
        for index, existing in enumerate(self._oracles):
            if existing.date == oracle.date:
                self._oracles[index] = replace(oracle)
                return True
        return False

    def delete_oracle(self, date: str) -> bool:
        found = self._find(date)
        if found is None:
            return False
        self._oracles.remove(found)
        return True


class TransactionMemoryDAO:
    """Keeps transactions with unique transaction ids, in insertion order."""

    def __init__(self) -> None:
        self._transactions: list[Transaction] = []

    def _find(self, transaction_id: int) -> Optional[Transaction]:
        return next(
            (t for t in self._transactions if t.transaction_id == transaction_id),
            None,
        )

    def add_transaction(self, transaction: Transaction) -> bool:
        """Store a copy of the transaction; False if its id is already taken."""
        if self._find(transaction.transaction_id) is not None:
            return False
        self._transactions.append(replace(transaction))
        return True

    def get_transaction_by_id(self, transaction_id: int) -> Optional[Transaction]:
        found = self._find(transaction_id)
        return replace(found) if found is not None else None

    def get_transactions_by_wallet_id(self, wallet_id: int) -> list[Transaction]:
        return [replace(t) for t in self._transactions if t.wallet_id == wallet_id]

    def get_all_transactions(self) -> list[Transaction]:
        return [replace(t) for t in self._transactions]

    def delete_transaction(self, transaction_id: int) -> bool:
        found = self._find(transaction_id)
        if found is None:
            return False
        self._transactions.remove(found)
        return True


class WalletMemoryDAO:
    """Keeps wallets with unique ids, in insertion order."""

    def __init__(self) -> None:
        self._wallets: list[Wallet] = []

    def _find(self, wallet_id: int) -> Optional[Wallet]:
        return next((w for w in self._wallets if w.id == wallet_id), None)

    def add_wallet(self, wallet: Wallet) -> bool:
        """Store a copy of the wallet; False if its id is already taken."""
        if self._find(wallet.id) is not None:
            return False
        self._wallets.append(replace(wallet))
        return True

    def get_wallet_by_id(self, wallet_id: int) -> Optional[Wallet]:
        found = self._find(wallet_id)
        return replace(found) if found is not None else None

    def update_wallet(self, wallet: Wallet) -> bool:
        """Copy holder name and broker onto the stored wallet with the same id."""
        found = self._find(wallet.id)
        if found is None:
            return False
        found.holder_name = wallet.holder_name
        found.broker = wallet.broker
        return True

    def delete_wallet(self, wallet_id: int) -> bool:
        """Remove every wallet with this id; False if none matched."""
        kept = [w for w in self._wallets if w.id != wallet_id]
        if len(kept) == len(self._wallets):
            return False
        self._wallets = kept
        return True

    def get_all_wallets(self) -> list[Wallet]:
        return [replace(w) for w in self._wallets]