"""
Protocol definitions for generic infrastructure services.

This module defines Protocol classes that specify interfaces
for generic infrastructure concerns like tabular storage reads.

Protocols define contracts that services must fulfill, enabling:
- Duck typing with static type checking
- Dependency inversion (depend on abstractions, not concretions)
- Easy mocking in tests

Available Protocols:
    StorageReader: Single-column equality lookups against a named table

Usage:
    from core.protocols import StorageReader

    def count_links(reader: StorageReader, media_id: int) -> int:
        return reader.count_rows_where("mediables", "media_id", media_id)

    class InMemoryReader:
        def __init__(self, tables): self.tables = tables
        def count_rows_where(self, table, column, value): ...
        def select_rows_where(self, table, column, value): ...

    # InMemoryReader is a valid StorageReader
    # even without explicit inheritance (duck typing)
    reader: StorageReader = InMemoryReader({})

Note:
    - Protocols are primarily for type checking
    - @runtime_checkable allows isinstance() checks
    - For media-specific capabilities (Titled, OwnerProxy), see media.protocols
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Any


@runtime_checkable
class StorageReader(Protocol):
    """
    Protocol for read-only table lookups.

    Implementations run a single equality filter against one table.
    Connection or query failures propagate to the caller unchanged.

    Example:
        reader.count_rows_where("mediables", "media_id", 7)
        reader.select_rows_where("mediables", "media_id", 7)
    """

    def count_rows_where(self, table: str, column: str, value: Any) -> int:
        """
        Count rows where column equals value.

        Args:
            table: Table name
            column: Column to filter on
            value: Value to match

        Returns:
            Number of matching rows
        """
        ...

    def select_rows_where(
        self, table: str, column: str, value: Any
    ) -> list[dict[str, Any]]:
        """
        Fetch rows where column equals value.

        Args:
            table: Table name
            column: Column to filter on
            value: Value to match

        Returns:
            Matching rows as column -> value dicts, in storage order
        """
        ...
