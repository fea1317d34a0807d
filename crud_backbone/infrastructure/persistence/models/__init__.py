"""Database models for persistence layer.

Models Organization:
    - client.py: Client model
    - application.py: Application (API consumer) model

Note:
    Domain entities (dataclasses) live in crud_backbone/domain/entities/
    Database models live here; repositories map between the two.
"""

from crud_backbone.infrastructure.persistence.models.application import (
    Application as ApplicationModel,
)
from crud_backbone.infrastructure.persistence.models.client import Client as ClientModel

__all__ = [
    "ApplicationModel",
    "ClientModel",
]
