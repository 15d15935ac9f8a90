from app.repositories.common.registry import FLOW_COUNCIL_TEMPLATE, InstanceRegistry

__all__ = ["FLOW_COUNCIL_TEMPLATE", "InstanceRegistry"]
