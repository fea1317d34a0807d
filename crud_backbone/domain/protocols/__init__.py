"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols structurally, without
inheritance.

Usage:
    from crud_backbone.domain.protocols import ClientRepositoryProtocol, LoggerProtocol
"""

from crud_backbone.domain.protocols.application_repository import (
    ApplicationRepositoryProtocol,
)
from crud_backbone.domain.protocols.client_repository import ClientRepositoryProtocol
from crud_backbone.domain.protocols.logger_protocol import LoggerProtocol
from crud_backbone.domain.protocols.token_verifier_protocol import (
    TokenVerifierProtocol,
)

__all__ = [
    "ApplicationRepositoryProtocol",
    "ClientRepositoryProtocol",
    "LoggerProtocol",
    "TokenVerifierProtocol",
]
