"""Database persistence infrastructure.

- Base models for all tables
- Database connection pool and session management
- Repository implementations
"""

from crud_backbone.infrastructure.persistence.base import BaseModel, BaseMutableModel
from crud_backbone.infrastructure.persistence.database import Database

__all__ = [
    "BaseModel",
    "BaseMutableModel",
    "Database",
]
