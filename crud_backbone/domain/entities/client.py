"""Client domain entity.

Pure data, no framework dependencies. Clients are created only through
ClientRepository.insert, changed only through ClientRepository.update and
removed only through ClientRepository.delete.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Client:
    """Client of the service.

    Attributes:
        id: Identifier assigned by the storage layer.
        name: Display name (first letter capitalised on input).
        email: Unique e-mail address.
        phone: Phone number in ``(DD) NNNNN-NNNN`` format.
        status: Active flag, ``True`` unless explicitly disabled.
        created_at: Set once on insert, never changed.
        updated_at: Refreshed on every mutation.

    Example:
        >>> client = Client(id=1, name="Ana", email="a@x.com", phone="(34) 99999-9999")
        >>> client.status
        True
    """

    id: int
    name: str
    email: str
    phone: str
    status: bool = True
    created_at: datetime | None = field(default=None)
    updated_at: datetime | None = field(default=None)
