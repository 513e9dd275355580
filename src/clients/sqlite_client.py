import sqlite3
from contextlib import contextmanager
from sqlite3 import Connection
from typing import Iterator, Optional


class SqliteClient:
    """SQLite database client with connection and transaction management."""

    def __init__(self, connection_string: str):
        self.connection_string = connection_string
        # Request handlers may resolve the client and use it on different threads.
        self._connection = sqlite3.connect(self.connection_string, check_same_thread=False)

    @property
    def connection(self) -> Connection:
        """Get the database connection."""
        return self._connection

    def execute_query(self, query: str, params=None) -> list:
        """Execute a read or schema query and return all results."""
        cursor = self._connection.cursor()
        try:
            if params:
                cursor.execute(query, params)
            else:
                cursor.execute(query)
            return cursor.fetchall()
        finally:
            cursor.close()

    def execute_write(self, query: str, params=None) -> tuple[int, Optional[int]]:
        """Execute an INSERT/UPDATE statement without committing.

        Use inside ``transaction()`` so the write is committed or rolled back
        as a unit.

        Returns:
            Tuple of (affected row count, last inserted row id).
        """
        cursor = self._connection.cursor()
        try:
            if params:
                cursor.execute(query, params)
            else:
                cursor.execute(query)
            return cursor.rowcount, cursor.lastrowid
        finally:
            cursor.close()

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Commit on success, roll back if the block raises."""
        try:
            yield self._connection
        except Exception:
            self._connection.rollback()
            raise
        self._connection.commit()

    def close(self):
        """Close the database connection."""
        self._connection.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit with cleanup."""
        self.close()
        return False
