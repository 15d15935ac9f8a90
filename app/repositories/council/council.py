"""Council repository - councils and role managers."""

from app.models import Council, FlowCouncilManager
from app.repositories.base import BaseRepository


class CouncilRepository(BaseRepository[Council]):
    """Repository for FlowCouncil entities."""

    table = "flow_council"
    entity = Council


class ManagerRepository(BaseRepository[FlowCouncilManager]):
    """Repository for role grant records."""

    table = "flow_council_manager"
    entity = FlowCouncilManager

    def for_council(self, council_id: str) -> list[FlowCouncilManager]:
        rows = self.fetchall(
            f"SELECT {', '.join(self._columns)} FROM flow_council_manager WHERE flow_council = ? ORDER BY id",
            [council_id],
        )
        return [self.entity.from_row(dict(zip(self._columns, r))) for r in rows]
