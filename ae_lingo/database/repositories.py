"""
Database Repositories
=====================
Key/value storage with a local-storage style interface.
"""
from typing import Optional

from ae_lingo.database.connection import Database, get_database
from ae_lingo.utils.logging import get_logger


class StorageRepository:
    """
    Repository for string values stored under fixed keys.

    Values are replaced wholesale on every write.
    """

    def __init__(self, database: Database = None):
        self.db = database or get_database()
        self.logger = get_logger().db_logger

    def get_item(self, key: str) -> Optional[str]:
        """Get the value stored under a key."""
        row = self.db.fetchone("SELECT value FROM storage WHERE key = ?", (key,))
        return row['value'] if row else None

    def set_item(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""
        with self.db.transaction() as conn:
            conn.execute("""
                INSERT INTO storage (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
            """, (key, value))
        self.logger.debug(f"Stored {len(value)} chars under '{key}'")


def get_storage_repository() -> StorageRepository:
    """Get storage repository instance."""
    return StorageRepository()
