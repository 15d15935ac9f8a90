"""ETL helper functions."""

import duckdb


def count_rows(conn: duckdb.DuckDBPyConnection, query: str, params: list | None = None) -> int:
    """Run a COUNT query and return the count (0 for NULL)."""
    row = conn.execute(query, params or []).fetchone()
    return int(row[0] or 0) if row else 0


def get_council_ids(conn: duckdb.DuckDBPyConnection) -> list[str]:
    """All indexed council ids, oldest first."""
    rows = conn.execute("SELECT id FROM flow_council ORDER BY created_at_block, id").fetchall()
    return [r[0] for r in rows]
