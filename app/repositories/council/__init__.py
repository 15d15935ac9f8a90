from app.repositories.council.council import CouncilRepository, ManagerRepository

__all__ = ["CouncilRepository", "ManagerRepository"]
