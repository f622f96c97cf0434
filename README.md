# walletledger

Keep track of investment wallets, the buy and sell transactions made in them,
and the daily exchange rate (the "oracle") used to value them.

Records can be kept in memory, and transactions and exchange rates can also be
kept in a MariaDB/MySQL database.

## Installation

```
pip install walletledger
```

## Data model

`walletledger.models` holds three dataclasses:

- `Wallet(id=0, holder_name="", broker="")`
- `Transaction(wallet_id=0, transaction_id=0, date="", kind="C", amount=0.0)`;
  `kind` is `"C"` for a buy and `"V"` for a sell (also available as the
  constants `BUY` and `SELL`).
- `Oracle(date="", rate=0.0)`: the exchange rate for one date.

## In-memory storage

`walletledger.memory` provides `WalletMemoryDAO`, `TransactionMemoryDAO` and
`OracleMemoryDAO`. Records are kept in insertion order. The stores keep copies
of what you give them and hand out copies, so changing a returned record does
not change the stored one.

```python
from walletledger.models import Wallet, Transaction, Oracle
from walletledger.memory import WalletMemoryDAO, TransactionMemoryDAO, OracleMemoryDAO

wallets = WalletMemoryDAO()
wallets.add_wallet(Wallet(1, "Ana", "Broker X"))
wallets.get_wallet_by_id(1)
wallets.update_wallet(Wallet(1, "Ana Maria", "Broker Y"))
wallets.get_all_wallets()

transactions = TransactionMemoryDAO()
transactions.add_transaction(Transaction(1, 10, "2024-01-05", "C", 250.0))
transactions.get_transaction_by_id(10)
transactions.get_transactions_by_wallet_id(1)
transactions.delete_transaction(10)

rates = OracleMemoryDAO()
rates.add_oracle(Oracle("2024-01-05", 5.12))
rates.update_oracle(Oracle("2024-01-05", 5.20))
rates.get_oracle_by_date("2024-01-05")
```

Keys are the wallet id, the transaction id, and the oracle's date. An add
returns `False` when a record with the same key already exists. Update and
delete return `False` when nothing has that key. A lookup returns `None` when
nothing matches.

`WalletMemoryDAO.update_wallet` copies only the holder name and the broker onto
the stored wallet. `TransactionMemoryDAO` has no update method.

## Database storage

`walletledger.dbdao` provides `OracleDBDAO` and `TransactionDBDAO`, built on
PyMySQL. They work on the `Oracle` table (columns `Data`, `Taxa`) and the
`Transacao` table (columns `carteira_id`, `id`, `data`, `tipo`, `valor`); the
tables must already exist.

Both take `(uri, user, password, database)`. The URI gives the host and an
optional port (default 3306), for example `"localhost"`, `"tcp://localhost:3306"`
or `"jdbc:mariadb://localhost/"`. A failed connection raises the PyMySQL error.
An already open connection can be passed instead with the `connection=` keyword.
Each object can be used as a context manager, or closed with `close()`.

```python
from walletledger.dbdao import OracleDBDAO, TransactionDBDAO

password = "password"

with TransactionDBDAO("tcp://localhost:3306", "user", password, "wallets") as dao:
    dao.add_transaction(1, 10, "2024-01-05", "C", 250.0)
    dao.get_transaction(1, 10)        # Transaction or None
    dao.update_transaction(1, 10, "2024-01-06", "V", 100.0)
    dao.get_all_transactions(1)       # list of Transaction for wallet 1
    dao.delete_transaction(1, 10)

rates = OracleDBDAO("localhost", "user", password, "wallets")
rates.add_oracle_record("2024-01-05", 5.12)
rates.get_oracle_record_by_date("2024-01-05")   # Oracle or None
rates.get_all_oracle_records()
rates.close()
```

Database errors during these calls are not raised: they are logged through the
`walletledger.dbdao` logger, and the call returns `False`, `None` or an empty
list. Update and delete return `True` only when at least one row was affected.

## Menus

`walletledger.menu.Menu` prints a titled, numbered list of items and asks for a
choice until a valid number is entered:

```python
from walletledger.menu import Menu

menu = Menu(["Wallets", "Transactions", "Rates"])
choice = menu.get_choice()
```

The title defaults to `"Menu"`, the prompt to `"Escolha uma opcao: "` and the
rule character to `"-"`. Any number from 0 up to the number of items is
accepted; anything else prints `" Opcao Invalida!"` and shows the menu again.
Input and output default to standard input and output and can be replaced with
the `input_stream=` and `output=` keywords. `get_choice` raises `EOFError` when
the input runs out.

## What this package does not do

- There is no database store for wallets; wallets can only be kept in memory.
- There is no command or interactive application: `Menu` and the stores are
  building blocks to assemble one from.