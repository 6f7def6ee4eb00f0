"""
Errors raised by the data-access layer.

Store-native failures (asyncpg.PostgresError and friends) are not wrapped.
"""

from __future__ import annotations


class PersistenceIntegrityError(RuntimeError):
    """
    The store accepted a write but the row cannot be read back by its id.
    """

    def __init__(self, table: str, row_id: int | None = None) -> None:
        self.table = table
        self.row_id = row_id
        if row_id is None:
            message = f"Insert into {table} did not return an id."
        else:
            message = f"Row {row_id} in {table} could not be read back after insert."
        super().__init__(message)
