"""Wallets, transactions and exchange rates, with in-memory and MariaDB/MySQL stores and a text menu."""

__version__ = "0.1.0"

__all__ = ["__version__"]