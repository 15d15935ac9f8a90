"""Base repository class."""

from typing import Any, Generic, TypeVar

import duckdb
from loguru import logger

from app.models import BaseEntity

E = TypeVar("E", bound=BaseEntity)


class BaseRepository(Generic[E]):
    """Keyed load/save/remove over one entity table.

    Subclasses set ``table`` and ``entity``. ``save`` overwrites the whole row
    for an existing id, mirroring how the projectors treat entities.
    """

    table: str
    entity: type[E]

    def __init__(self, conn: duckdb.DuckDBPyConnection):
        self._db = conn
        self._columns = self.entity.columns()
        logger.debug("{} initialized", self.__class__.__name__)

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        if params:
            return self._db.execute(query, params)
        return self._db.execute(query)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()

    def load(self, entity_id: str) -> E | None:
        """Load entity by id, None if absent."""
        row = self.fetchone(
            f"SELECT {', '.join(self._columns)} FROM {self.table} WHERE id = ?",
            [entity_id],
        )
        if row is None:
            return None
        return self.entity.from_row(dict(zip(self._columns, row)))

    def exists(self, entity_id: str) -> bool:
        return self.fetchone(f"SELECT 1 FROM {self.table} WHERE id = ?", [entity_id]) is not None

    def save(self, entity: E) -> None:
        """Insert or overwrite entity."""
        row = entity.to_row()
        placeholders = ", ".join("?" for _ in self._columns)
        self.execute(
            f"INSERT OR REPLACE INTO {self.table} ({', '.join(self._columns)}) VALUES ({placeholders})",
            [row[c] for c in self._columns],
        )
        logger.debug("Saved {} {}", self.table, entity.id)

    def remove(self, entity_id: str) -> None:
        """Delete entity by id; absent ids are a no-op."""
        self.execute(f"DELETE FROM {self.table} WHERE id = ?", [entity_id])
        logger.debug("Removed {} {}", self.table, entity_id)

    def count(self, where: str | None = None, params: list | None = None) -> int:
        query = f"SELECT COUNT(*) FROM {self.table}"
        if where:
            query += f" WHERE {where}"
        return int(self.fetchone(query, params)[0])
