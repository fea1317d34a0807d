"""Application domain entity.

An Application is an API consumer identified by a secret access key. Routes
that are not public require the caller to present the key of a registered
application.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Application:
    """Registered API consumer.

    Attributes:
        id: Identifier assigned by the storage layer.
        key: Unique access key presented as a bearer token.
        label: Unique human-readable name.
        created_at: Set once on insert.
        updated_at: Refreshed on every mutation.
    """

    id: int
    key: str
    label: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
