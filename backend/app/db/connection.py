from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager

try:
    import pyodbc
except ImportError:
    pyodbc = None

from app.config import settings

logger = logging.getLogger(__name__)


class DatabasePool:
    """Hands out pyodbc connections to the SQL Server holding rate_settings."""

    def __init__(self):
        self._conn_string: str = ""
        self._initialized: bool = False

    @property
    def is_configured(self) -> bool:
        return self._initialized and bool(self._conn_string) and pyodbc is not None

    def initialize(self, conn_string: str | None = None):
        self._conn_string = conn_string if conn_string is not None else settings.SQLSERVER_CONN_STRING
        self._initialized = bool(self._conn_string)
        if self._initialized:
            logger.info("Rate database configured")
        else:
            logger.warning("No SQLSERVER_CONN_STRING configured; serving built-in rates")

    def get_connection(self, retries: int | None = None, delay: float = 1.0):
        """Open a connection, retrying transient failures."""
        if pyodbc is None:
            raise RuntimeError("pyodbc is not installed (missing ODBC driver)")
        if not self._initialized:
            raise RuntimeError("Database pool not initialized or connection string missing")

        attempts = retries if retries is not None else settings.DB_CONNECT_RETRIES
        last_error = None
        for attempt in range(1, attempts + 1):
            try:
                return pyodbc.connect(self._conn_string, timeout=settings.DB_CONNECT_TIMEOUT)
            except pyodbc.Error as e:
                last_error = e
                logger.warning("DB connection attempt %d/%d failed: %s", attempt, attempts, e)
                if attempt < attempts:
                    time.sleep(delay)

        raise RuntimeError(f"Failed to connect after {attempts} attempts: {last_error}")

    @contextmanager
    def connection(self) -> Iterator:
        conn = self.get_connection()
        try:
            yield conn
        finally:
            conn.close()

    def test_connection(self) -> dict:
        """Report connectivity and how many rate rows are stored."""
        if pyodbc is None:
            return {"status": "unavailable", "message": "pyodbc not installed"}
        if not self._initialized:
            return {"status": "not_configured", "message": "No connection string set"}
        try:
            conn = self.get_connection(retries=1)
            try:
                cursor = conn.cursor()
                cursor.execute("SELECT COUNT(*) FROM rate_settings")
                count = cursor.fetchone()[0]
            finally:
                conn.close()
            return {"status": "connected", "rate_settings": count}
        except Exception as e:
            return {"status": "error", "message": str(e)}

    def close(self):
        logger.info("Database pool closed")
        self._initialized = False


db_pool = DatabasePool()
