"""DuckDB connection management."""

from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL
from settings import DB_PATH


def db_exists(path: str = DB_PATH) -> bool:
    """Check if database file exists."""
    return path == ":memory:" or Path(path).exists()


def _tables_exist(conn: duckdb.DuckDBPyConnection) -> bool:
    """Check if the schema was already created (registry table is created last)."""
    try:
        result = conn.execute(
            "SELECT COUNT(*) FROM information_schema.tables WHERE table_name = 'data_source'"
        ).fetchone()
        return result[0] > 0
    except duckdb.Error:
        return False


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    if _tables_exist(conn):
        return

    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.info("DB tables initialized")


def get_write_connection(path: str = DB_PATH) -> duckdb.DuckDBPyConnection:
    """Get a writable connection with all tables in place (for indexing runs)."""
    if not db_exists(path):
        logger.warning("DB not found: {}. Creating empty DB.", path)
    conn = duckdb.connect(path)
    init_tables(conn)
    logger.debug("DB connected: {}", path)
    return conn


def get_read_connection(path: str = DB_PATH) -> duckdb.DuckDBPyConnection:
    """Get a read-only connection to an existing DB."""
    if not db_exists(path):
        raise FileNotFoundError(f"DB not found: {path}")
    conn = duckdb.connect(path, read_only=True)
    logger.debug("DB connected: {} (read_only=True)", path)
    return conn
