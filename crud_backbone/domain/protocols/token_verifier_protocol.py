"""TokenVerifierProtocol: the authentication capability used by the auth gate.

The route registry only knows whether a route is public. For non-public
routes it asks a verifier to turn the presented bearer token into an
authenticated principal.
"""

from typing import Any, Protocol

from crud_backbone.core.errors import AuthenticationError
from crud_backbone.core.result import Result


class TokenVerifierProtocol(Protocol):
    """Verify a bearer token and return the authenticated principal."""

    async def verify(self, token: str) -> Result[Any, AuthenticationError]:
        """Verify token.

        Args:
            token: Raw bearer token from the Authorization header.

        Returns:
            Success with the principal, Failure with AuthenticationError.
        """
        ...
