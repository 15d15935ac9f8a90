from app.repositories.ballot.ballot import BallotRepository, LatestVoteRepository, VoteRepository

__all__ = ["BallotRepository", "VoteRepository", "LatestVoteRepository"]
