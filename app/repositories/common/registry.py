"""Data source registry - which contract instances receive event delivery."""

import duckdb
from loguru import logger

from app.models.common.ids import to_hex

FLOW_COUNCIL_TEMPLATE = "FlowCouncil"


class InstanceRegistry:
    """Address -> template mapping populated at council creation.

    The dispatcher only routes council events whose emitting address is
    registered here.
    """

    def __init__(self, conn: duckdb.DuckDBPyConnection):
        self._db = conn
        logger.debug("InstanceRegistry initialized")

    def register(
        self,
        address: str,
        block_number: int,
        block_timestamp: int,
        template: str = FLOW_COUNCIL_TEMPLATE,
    ) -> None:
        """Start tracking an instance. Re-registering keeps a single row."""
        self._db.execute(
            """
            INSERT OR REPLACE INTO data_source (address, template, created_at_block, created_at_timestamp)
            VALUES (?, ?, ?, ?)
            """,
            [to_hex(address), template, block_number, block_timestamp],
        )
        logger.info("Tracking {} instance {}", template, to_hex(address))

    def template_for(self, address: str) -> str | None:
        row = self._db.execute("SELECT template FROM data_source WHERE address = ?", [to_hex(address)]).fetchone()
        return row[0] if row else None

    def is_tracked(self, address: str, template: str = FLOW_COUNCIL_TEMPLATE) -> bool:
        return self.template_for(address) == template

    def addresses(self, template: str = FLOW_COUNCIL_TEMPLATE) -> list[str]:
        rows = self._db.execute(
            "SELECT address FROM data_source WHERE template = ? ORDER BY created_at_block, address",
            [template],
        ).fetchall()
        return [r[0] for r in rows]
