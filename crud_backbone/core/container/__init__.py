"""Container module - Centralized dependency injection.

The container is organized into modules:
- infrastructure: Core services (database, sessions, logging, token verifier)
- repositories: Repository factories

Usage:
    from crud_backbone.core.container import get_db_session, get_client_repository
"""

from crud_backbone.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_token_verifier,
)
from crud_backbone.core.container.repositories import (
    get_application_repository,
    get_client_repository,
)

__all__ = [
    "get_database",
    "get_db_session",
    "get_logger",
    "get_token_verifier",
    "get_client_repository",
    "get_application_repository",
]
