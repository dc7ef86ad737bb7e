"""Client (application) resource manager."""
from typing import TYPE_CHECKING, List

from core.logger import LoggerService
from .models import ECHOED_CREDENTIAL_FIELDS, Client, ClientList, Credential
from .options import RequestOption, apply_list_defaults

if TYPE_CHECKING:
    from .management import Management


class ClientManager:
    """Manages client applications and their credentials.

    Create and update calls merge the server echo into the record passed in,
    so the caller's object picks up server-assigned fields (client_id,
    client_secret, timestamps) without a second fetch.
    """

    def __init__(self, management: "Management", logger: LoggerService) -> None:
        self.management = management
        self.logger = logger.get_logger(__name__)

    def _list_defaults(self, options: tuple) -> RequestOption:
        return apply_list_defaults(
            options, self.management.settings.MANAGEMENT_DEFAULT_PER_PAGE
        )

    async def create(self, client: Client, *options: RequestOption) -> Client:
        """Create a new client application.

        Args:
            client: Client to create, updated in place with the server echo
            options: Request options

        Returns:
            The same client instance
        """
        data = await self.management.request(
            "POST", self.management.uri("clients"), client.encode(), options
        )
        if data:
            client.merge(Client.decode(data))

        self.logger.info("Created client", extra={"client_id": client.client_id})
        return client

    async def read(self, client_id: str, *options: RequestOption) -> Client:
        """Read a client by its ID."""
        data = await self.management.request(
            "GET", self.management.uri("clients", client_id), options=options
        )
        return Client.decode(data)

    async def list(self, *options: RequestOption) -> ClientList:
        """List client applications.

        Pages of 50 with totals are requested unless options say otherwise.
        When totals are switched off the server answers with a bare array,
        which is wrapped into a ClientList without pagination metadata.
        """
        data = await self.management.request(
            "GET",
            self.management.uri("clients"),
            options=[self._list_defaults(options)],
        )
        if isinstance(data, list):
            return ClientList.decode({"clients": data, "length": len(data)})

        clients = ClientList.decode(data)
        self.logger.debug(
            "Listed clients",
            extra={"count": len(clients.clients), "total": clients.total},
        )
        return clients

    async def update(
        self, client_id: str, client: Client, *options: RequestOption
    ) -> Client:
        """Update a client.

        Only fields set on ``client`` are sent. The server echo is merged back
        into ``client``.
        """
        data = await self.management.request(
            "PATCH",
            self.management.uri("clients", client_id),
            client.encode(),
            options,
        )
        if data:
            client.merge(Client.decode(data))
        return client

    async def rotate_secret(self, client_id: str, *options: RequestOption) -> Client:
        """Rotate a client secret and return the client carrying the new one."""
        data = await self.management.request(
            "POST",
            self.management.uri("clients", client_id, "rotate-secret"),
            options=options,
        )
        self.logger.info("Rotated client secret", extra={"client_id": client_id})
        return Client.decode(data)

    async def delete(self, client_id: str, *options: RequestOption) -> None:
        """Delete a client and all its related assets given its ID."""
        await self.management.request(
            "DELETE", self.management.uri("clients", client_id), options=options
        )
        self.logger.info("Deleted client", extra={"client_id": client_id})

    async def create_credential(
        self, client_id: str, credential: Credential, *options: RequestOption
    ) -> Credential:
        """Create a credential for a client, updated in place with the echo."""
        data = await self.management.request(
            "POST",
            self.management.uri("clients", client_id, "credentials"),
            credential.encode(),
            options,
        )
        if data:
            credential.merge(Credential.decode(data))
        return credential

    async def update_credential(
        self,
        client_id: str,
        credential_id: str,
        credential: Credential,
        *options: RequestOption,
    ) -> Credential:
        """Update the expiry of a client credential.

        Only ``expires_at`` is sent. Afterwards ``credential`` carries the
        server's id, name, type, key id, algorithm and timestamps; ``pem`` and
        ``parse_expiry_from_cert`` are never echoed and are left untouched.
        """
        patch = Credential()
        if "expires_at" in credential.model_fields_set:
            patch.expires_at = credential.expires_at

        data = await self.management.request(
            "PATCH",
            self.management.uri("clients", client_id, "credentials", credential_id),
            patch.encode(),
            options,
        )
        if data:
            credential.merge(Credential.decode(data), ECHOED_CREDENTIAL_FIELDS)
        return credential

    async def list_credentials(
        self, client_id: str, *options: RequestOption
    ) -> List[Credential]:
        """List all credentials of a client."""
        data = await self.management.request(
            "GET",
            self.management.uri("clients", client_id, "credentials"),
            options=[self._list_defaults(options)],
        )
        return [Credential.decode(item) for item in data or []]

    async def get_credential(
        self, client_id: str, credential_id: str, *options: RequestOption
    ) -> Credential:
        """Get a single credential of a client."""
        data = await self.management.request(
            "GET",
            self.management.uri("clients", client_id, "credentials", credential_id),
            options=options,
        )
        return Credential.decode(data)

    async def delete_credential(
        self, client_id: str, credential_id: str, *options: RequestOption
    ) -> None:
        """Delete a credential of a client."""
        await self.management.request(
            "DELETE",
            self.management.uri("clients", client_id, "credentials", credential_id),
            options=options,
        )
