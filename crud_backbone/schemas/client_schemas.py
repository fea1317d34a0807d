"""Client response schemas.

Pydantic schemas for client API responses. Includes:
- ClientResponse (entity -> JSON)
- Envelopes documented in OpenAPI
"""

from datetime import datetime

from pydantic import BaseModel, Field

from crud_backbone.domain.entities.client import Client
from crud_backbone.schemas.common_schemas import PageMeta


class ClientResponse(BaseModel):
    """Single client.

    Attributes:
        id: Identifier assigned on insert.
        name: Display name.
        email: Unique e-mail address.
        phone: Phone number.
        status: Active flag.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: int = Field(..., description="Client identifier")
    name: str = Field(..., description="Display name", examples=["Ana"])
    email: str = Field(..., description="E-mail address", examples=["ana@example.com"])
    phone: str = Field(..., description="Phone number", examples=["(34) 99999-9999"])
    status: bool = Field(..., description="Active flag")
    created_at: datetime | None = Field(None, description="Creation timestamp")
    updated_at: datetime | None = Field(None, description="Last update timestamp")

    @classmethod
    def from_entity(cls, client: Client) -> "ClientResponse":
        """Convert domain entity to response schema.

        Args:
            client: Client from the repository.

        Returns:
            ClientResponse for API response.
        """
        return cls(
            id=client.id,
            name=client.name,
            email=client.email,
            phone=client.phone,
            status=client.status,
            created_at=client.created_at,
            updated_at=client.updated_at,
        )


class ClientEnvelope(BaseModel):
    data: ClientResponse


class ClientPage(BaseModel):
    rows: list[ClientResponse]
    count: int = Field(..., ge=0, description="Matching rows, ignoring pagination")


class ClientListEnvelope(BaseModel):
    data: ClientPage
    meta: PageMeta
