from app.services.membership.projector import MembershipProjector

__all__ = ["MembershipProjector"]
