"""Client credential models."""
from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import ManagementModel


class Credential(ManagementModel):
    """Signing credential attached to a client.

    Only ``expires_at`` can change after creation. ``pem`` and
    ``parse_expiry_from_cert`` are write-only: the server never echoes them.
    """

    id: Optional[str] = Field(None, description="The ID of the credential")
    name: Optional[str] = Field(None, description="The name of the credential")
    key_id: Optional[str] = Field(
        None, alias="kid", description="The key identifier of the credential"
    )
    credential_type: Optional[str] = Field(None, description="The type of credential")
    pem: Optional[str] = Field(
        None, description="PEM-formatted public key or X509 certificate"
    )
    algorithm: Optional[str] = Field(
        None, alias="alg", description="Algorithm used with the credential"
    )
    parse_expiry_from_cert: Optional[bool] = Field(
        None, description="Parse the expiry date from the provided PEM certificate"
    )
    created_at: Optional[datetime] = Field(
        None, description="When this credential was created"
    )
    updated_at: Optional[datetime] = Field(
        None, description="When this credential was last updated"
    )
    expires_at: Optional[datetime] = Field(
        None, description="When this credential will expire"
    )


# Fields the server echoes back after an expiry update
ECHOED_CREDENTIAL_FIELDS = (
    "id",
    "name",
    "credential_type",
    "key_id",
    "algorithm",
    "created_at",
    "updated_at",
    "expires_at",
)
