from app.repositories.membership.membership import RecipientRepository, VoterRepository

__all__ = ["VoterRepository", "RecipientRepository"]
