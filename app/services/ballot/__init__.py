from app.services.ballot.projector import BallotProjector

__all__ = ["BallotProjector"]
