"""Security adapters (token verification)."""

from crud_backbone.infrastructure.security.application_key_verifier import (
    ApplicationKeyVerifier,
)

__all__ = ["ApplicationKeyVerifier"]
