"""
Database Connection
===================
SQLite file backing the key/value store that holds translation history.
"""
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Optional, Generator

from ae_lingo.config import config
from ae_lingo.utils.logging import get_logger


STORAGE_SCHEMA = """
    CREATE TABLE IF NOT EXISTS storage (
        key TEXT PRIMARY KEY,
        value TEXT NOT NULL,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
"""


class Database:
    """SQLite store with one connection per thread."""

    def __init__(self, db_path: Path = None):
        self.db_path = Path(db_path or config.paths.db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.logger = get_logger().db_logger
        self._local = threading.local()

    @property
    def connection(self) -> sqlite3.Connection:
        conn = getattr(self._local, 'connection', None)
        if conn is None:
            conn = sqlite3.connect(str(self.db_path), timeout=config.logging.db_timeout)
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA journal_mode=WAL")
            self._local.connection = conn
        return conn

    def initialize(self) -> None:
        """Create the storage table if missing."""
        with self.transaction() as conn:
            conn.execute(STORAGE_SCHEMA)
        self.logger.info(f"Storage ready: {self.db_path}")

    @contextmanager
    def transaction(self) -> Generator[sqlite3.Connection, None, None]:
        """Commit on success, roll back and re-raise on error."""
        conn = self.connection
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            self.logger.error(f"Storage write rolled back: {e}")
            raise

    def fetchone(self, query: str, params: tuple = ()) -> Optional[sqlite3.Row]:
        return self.connection.execute(query, params).fetchone()

    def close(self) -> None:
        conn = getattr(self._local, 'connection', None)
        if conn is not None:
            conn.close()
            self._local.connection = None


_database: Optional[Database] = None
_database_lock = threading.Lock()


def get_database() -> Database:
    """Get the shared database, creating its table on first use."""
    global _database
    with _database_lock:
        if _database is None:
            _database = Database()
            _database.initialize()
        return _database
