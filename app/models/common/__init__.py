"""Common models - base classes, ids and shared tables."""

from app.models.common.base import BaseEntity
from app.models.common.registry import DATA_SOURCE_DDL

__all__ = [
    "BaseEntity",
    "DATA_SOURCE_DDL",
]
