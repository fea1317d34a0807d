"""Application access-key verifier (adapter).

Implements TokenVerifierProtocol by looking the presented bearer token up in
the ``applications`` table. A key is valid exactly when a row carries it.

Architecture:
    - Implements TokenVerifierProtocol (no inheritance required)
    - Request-scoped: bound to the request's AsyncSession
    - Injected via dependency container (get_token_verifier)
"""

from crud_backbone.core.enums import ErrorCode
from crud_backbone.core.errors import AuthenticationError
from crud_backbone.core.result import Failure, Result, Success
from crud_backbone.domain.entities.application import Application
from crud_backbone.domain.protocols.application_repository import (
    ApplicationRepositoryProtocol,
)


class ApplicationKeyVerifier:
    """Verify bearer tokens against registered applications.

    Usage:
        verifier = ApplicationKeyVerifier(ApplicationRepository(session))
        match await verifier.verify(token):
            case Success(value=application):
                ...
            case Failure(error=error):
                ...
    """

    def __init__(self, application_repo: ApplicationRepositoryProtocol) -> None:
        self._application_repo = application_repo

    async def verify(self, token: str) -> Result[Application, AuthenticationError]:
        """Resolve an access key to its application.

        Args:
            token: Raw key from ``Authorization: Bearer <key>``.

        Returns:
            Success(Application) when the key is registered.
            Failure(AuthenticationError) for empty or unknown keys.
        """
        if not token:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.AUTHENTICATION_FAILED,
                    message="Missing access key",
                )
            )

        application = await self._application_repo.find_by_key(token)
        if application is None:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Invalid access key",
                )
            )

        return Success(value=application)
