"""
TableReader: raw single-table lookups through Django's database connection.

Implements core.protocols.StorageReader. Table and column names come from
configuration and are quoted with the backend's identifier quoting; values
are always passed as query parameters.

Database errors propagate unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.db import DEFAULT_DB_ALIAS, connections

if TYPE_CHECKING:
    from typing import Any


class TableReader:
    """
    StorageReader backed by a Django database connection.

    Usage:
        reader = TableReader()
        reader.count_rows_where("mediables", "media_id", 7)  # 0
    """

    def __init__(self, using: str = DEFAULT_DB_ALIAS) -> None:
        self.using = using

    @property
    def connection(self):
        return connections[self.using]

    def _where_clause(self, table: str, column: str) -> str:
        quote_name = self.connection.ops.quote_name
        return f"FROM {quote_name(table)} WHERE {quote_name(column)} = %s"

    def count_rows_where(self, table: str, column: str, value: Any) -> int:
        """Count rows in ``table`` where ``column`` equals ``value``."""
        sql = f"SELECT COUNT(*) {self._where_clause(table, column)}"
        with self.connection.cursor() as cursor:
            cursor.execute(sql, [value])
            row = cursor.fetchone()
        return int(row[0]) if row else 0

    def select_rows_where(
        self, table: str, column: str, value: Any
    ) -> list[dict[str, Any]]:
        """Return rows in ``table`` where ``column`` equals ``value``."""
        sql = f"SELECT * {self._where_clause(table, column)}"
        with self.connection.cursor() as cursor:
            cursor.execute(sql, [value])
            columns = [description[0] for description in cursor.description]
            return [dict(zip(columns, row)) for row in cursor.fetchall()]
