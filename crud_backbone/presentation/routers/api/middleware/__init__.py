"""API middleware: request tracing and the authentication gate."""

from crud_backbone.presentation.routers.api.middleware.auth_dependencies import (
    require_application,
)
from crud_backbone.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)

__all__ = ["TraceMiddleware", "get_trace_id", "require_application"]
