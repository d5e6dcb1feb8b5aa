# Storage - key-value stores injected into the recent-search list
# Any object with get(key) -> Optional[str] and set(key, value) works

import sqlite3
import threading
from datetime import datetime
from typing import Dict, Optional

from .errors import StorageError


class MemoryStore:
    """In-process store, mainly for tests and one-shot CLI runs"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class SQLiteStore:
    """SQLite-backed key-value store"""

    DB_PATH = "retailsearch.db"

    def __init__(self, db_path: str = None):
        self.db_path = db_path or self.DB_PATH
        self.lock = threading.Lock()
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        try:
            return sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            raise StorageError(f"Cannot open {self.db_path}: {e}") from e

    def _init_db(self):
        """Initialize database schema"""
        with self.lock:
            conn = self._connect()
            try:
                conn.execute('''
                    CREATE TABLE IF NOT EXISTS kv_store (
                        key TEXT PRIMARY KEY,
                        value TEXT,
                        updated_at TEXT
                    )
                ''')
                conn.commit()
            except sqlite3.Error as e:
                raise StorageError(f"Cannot initialize {self.db_path}: {e}") from e
            finally:
                conn.close()

    def get(self, key: str) -> Optional[str]:
        with self.lock:
            conn = self._connect()
            try:
                row = conn.execute(
                    'SELECT value FROM kv_store WHERE key = ?', (key,)
                ).fetchone()
            except sqlite3.Error as e:
                raise StorageError(f"Cannot read {key!r}: {e}") from e
            finally:
                conn.close()
            return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        with self.lock:
            conn = self._connect()
            try:
                conn.execute('''
                    INSERT OR REPLACE INTO kv_store (key, value, updated_at)
                    VALUES (?, ?, ?)
                ''', (key, value, datetime.now().isoformat()))
                conn.commit()
            except sqlite3.Error as e:
                raise StorageError(f"Cannot write {key!r}: {e}") from e
            finally:
                conn.close()
