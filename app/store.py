"""Entity store - all repositories over one connection."""

import duckdb

from app.repositories import (
    BallotRepository,
    CouncilRepository,
    InstanceRegistry,
    LatestVoteRepository,
    ManagerRepository,
    RecipientRepository,
    VoteRepository,
    VoterRepository,
)


class EntityStore:
    """Shared store the projectors read and write through."""

    def __init__(self, conn: duckdb.DuckDBPyConnection):
        self.conn = conn
        self.councils = CouncilRepository(conn)
        self.managers = ManagerRepository(conn)
        self.voters = VoterRepository(conn)
        self.recipients = RecipientRepository(conn)
        self.ballots = BallotRepository(conn)
        self.votes = VoteRepository(conn)
        self.latest_votes = LatestVoteRepository(conn)
        self.registry = InstanceRegistry(conn)

    def begin(self) -> None:
        self.conn.execute("BEGIN TRANSACTION")

    def commit(self) -> None:
        self.conn.execute("COMMIT")

    def rollback(self) -> None:
        self.conn.execute("ROLLBACK")
