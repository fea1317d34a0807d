"""Application authentication dependencies.

FastAPI dependency guarding every route whose AuthPolicy is not PUBLIC. The
caller presents its access key as ``Authorization: Bearer <key>``; the key
is checked through TokenVerifierProtocol (ApplicationKeyVerifier by default).

Usage:
    # Registry generator adds it automatically for AUTHENTICATED routes.
    # Handlers read the caller from request.state:
    async def handler(request: Request):
        application = request.state.application
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from crud_backbone.core.container import get_logger, get_token_verifier
from crud_backbone.core.result import Failure, Success
from crud_backbone.domain.entities.application import Application
from crud_backbone.domain.protocols.token_verifier_protocol import (
    TokenVerifierProtocol,
)

# auto_error=False: missing header is reported by us with the usual envelope
bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def require_application(
    request: Request,
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    verifier: Annotated[TokenVerifierProtocol, Depends(get_token_verifier)],
) -> Application:
    """Authenticate the calling application.

    Args:
        request: Incoming request (receives ``state.application``).
        credentials: Bearer credentials, None when the header is missing.
        verifier: Access-key verifier (injected).

    Returns:
        The authenticated Application.

    Raises:
        HTTPException 401: If the key is missing or unknown.
    """
    if credentials is None:
        raise _unauthorized("Missing access key")

    result = await verifier.verify(credentials.credentials)

    match result:
        case Success(value=application):
            request.state.application = application
            return application
        case Failure(error=error):
            get_logger().info(
                "Application authentication failed",
                path=request.url.path,
                error_code=error.code.value,
            )
            raise _unauthorized(error.message)
