"""Plain records for wallets, transactions and daily exchange rates."""

from __future__ import annotations

from dataclasses import dataclass

BUY = "C"
SELL = "V"


@dataclass
class Oracle:
    """The exchange rate quoted for one date."""

    date: str = ""
    rate: float = 0.0


@dataclass
class Transaction:
    """A buy ('C') or sell ('V') operation recorded against a wallet."""

    wallet_id: int = 0
    transaction_id: int = 0
    date: str = ""
    kind: str = BUY
    amount: float = 0.0


@dataclass
class Wallet:
    """A wallet held by someone at a broker."""

    id: int = 0
    holder_name: str = ""
    broker: str = ""