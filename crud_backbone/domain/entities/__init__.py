"""Domain entities."""

from crud_backbone.domain.entities.application import Application
from crud_backbone.domain.entities.client import Client

__all__ = ["Application", "Client"]
