"""MariaDB/MySQL-backed stores for exchange rates and transactions."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence
from urllib.parse import urlsplit

import pymysql

from .models import Oracle, Transaction

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3306


def _parse_uri(uri: str) -> tuple[str, int]:
    """Extract host and port from a URI such as 'tcp://host:3306' or 'jdbc:mariadb://host/'."""
    text = uri.strip()
    if text.startswith("jdbc:"):
        text = text[len("jdbc:"):]
    if "://" not in text:
        text = f"tcp://{text}"
    parts = urlsplit(text)
    host = parts.hostname or "localhost"
    port = parts.port or DEFAULT_PORT
    return host, port


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode()
    return str(value)


def _as_kind(value: Any) -> str:
    text = _as_text(value)
    return text[0] if text else " "


class _DBDAO:
    """Owns one database connection."""

    def __init__(
        self,
        uri: str,
        user: str,
        password: str,
        database: str,
        *,
        connection: Any = None,
    ) -> None:
        if connection is not None:
            self._conn = connection
            return
        host, port = _parse_uri(uri)
        try:
            self._conn = pymysql.connect(
                host=host,
                port=port,
                user=user,
                password=password,
                database=database,
                autocommit=True,
            )
        except pymysql.MySQLError as exc:
            logger.error("Connection error: %s", exc)
            raise

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self._close_connection()

    def _close_connection(self) -> None:
        self._conn.close()

    def _execute_update(self, sql: str, params: Sequence[Any], label: str) -> Optional[int]:
        """Run a write statement; return the affected row count, or None on failure."""
        try:
            with self._conn.cursor() as cursor:
                cursor.execute(sql, tuple(params))
                affected = cursor.rowcount
            self._conn.commit()
            return affected
        except pymysql.MySQLError as exc:
            logger.error("%s error: %s", label, exc)
            try:
                self._conn.rollback()
            except pymysql.MySQLError:
                pass
            return None

    def _query(self, sql: str, params: Sequence[Any], label: str) -> Optional[list]:
        """Run a query; return all rows, or None on failure."""
        try:
            with self._conn.cursor() as cursor:
                cursor.execute(sql, tuple(params))
                return list(cursor.fetchall())
        except pymysql.MySQLError as exc:
            logger.error("%s error: %s", label, exc)
            return None


class OracleDBDAO(_DBDAO):
    """Exchange rates kept in the 'Oracle' table (columns Data, Taxa)."""

    def add_oracle_record(self, date: str, rate: float) -> bool:
        affected = self._execute_update(
            "INSERT INTO Oracle (Data, Taxa) VALUES (%s, %s)", (date, float(rate)), "Insert"
        )
        return affected is not None

    def get_oracle_record_by_date(self, date: str) -> Optional[Oracle]:
        rows = self._query("SELECT Data, Taxa FROM Oracle WHERE Data = %s", (date,), "Query")
        if not rows:
            return None
        found_date, rate = rows[0][0], rows[0][1]
        return Oracle(_as_text(found_date), float(rate))

    def update_oracle_record(self, date: str, rate: float) -> bool:
        affected = self._execute_update(
            "UPDATE Oracle SET Taxa = %s WHERE Data = %s", (float(rate), date), "Update"
        )
        return bool(affected)

    def delete_oracle_record(self, date: str) -> bool:
        affected = self._execute_update("DELETE FROM Oracle WHERE Data = %s", (date,), "Delete")
        return bool(affected)

    def get_all_oracle_records(self) -> list[Oracle]:
        rows = self._query("SELECT Data, Taxa FROM Oracle", (), "Select all")
        return [Oracle(_as_text(row[0]), float(row[1])) for row in rows or []]

    def close(self) -> None:
        """Close the underlying connection."""
        self._close_connection()


class TransactionDBDAO(_DBDAO):
    """Transactions kept in the 'Transacao' table, keyed by wallet and id."""

    _COLUMNS = "carteira_id, id, data, tipo, valor"

    @staticmethod
    def _to_transaction(row: Sequence[Any]) -> Transaction:
        wallet_id, transaction_id, date, kind, amount = row[:5]
        return Transaction(
            int(wallet_id), int(transaction_id), _as_text(date), _as_kind(kind), float(amount)
        )

    def add_transaction(
        self, wallet_id: int, transaction_id: int, date: str, kind: str, amount: float
    ) -> bool:
        affected = self._execute_update(
            f"INSERT INTO Transacao ({self._COLUMNS}) VALUES (%s, %s, %s, %s, %s)",
            (int(wallet_id), int(transaction_id), date, kind[:1], float(amount)),
            "Insert",
        )
        return affected is not None

    def get_transaction(self, wallet_id: int, transaction_id: int) -> Optional[Transaction]:
        rows = self._query(
            f"SELECT {self._COLUMNS} FROM Transacao WHERE carteira_id = %s AND id = %s",
            (int(wallet_id), int(transaction_id)),
            "Query",
        )
        if not rows:
            return None
        return self._to_transaction(rows[0])

    def update_transaction(
        self, wallet_id: int, transaction_id: int, date: str, kind: str, amount: float
    ) -> bool:
        affected = self._execute_update(
            "UPDATE Transacao SET data = %s, tipo = %s, valor = %s "
            "WHERE carteira_id = %s AND id = %s",
            (date, kind[:1], float(amount), int(wallet_id), int(transaction_id)),
            "Update",
        )
        return bool(affected)

    def delete_transaction(self, wallet_id: int, transaction_id: int) -> bool:
        affected = self._execute_update(
            "DELETE FROM Transacao WHERE carteira_id = %s AND id = %s",
            (int(wallet_id), int(transaction_id)),
            "Delete",
        )
        return bool(affected)

    def get_all_transactions(self, wallet_id: int) -> list[Transaction]:
        rows = self._query(
            f"SELECT {self._COLUMNS} FROM Transacao WHERE carteira_id = %s",
            (int(wallet_id),),
            "Select all",
        )
        return [self._to_transaction(row) for row in rows or []]

    def close(self) -> None:
        """Close the underlying connection."""
        self._close_connection()