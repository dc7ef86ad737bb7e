"""Management API transport."""
from typing import Any, Iterable, Optional
from urllib.parse import quote

import httpx

from core.logger import LoggerService
from core.settings import Settings
from .client import ClientManager
from .errors import ManagementError
from .options import RequestOption


class Management:
    """Entry point to the Management API.

    Owns the HTTP client and exposes one manager per resource collection.
    """

    def __init__(
        self,
        settings: Settings,
        logger: LoggerService,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize client.

        Args:
            settings: Application settings
            logger: Logger service
            transport: Optional transport override, used by tests
        """
        self.settings = settings
        self.base_url = settings.MANAGEMENT_BASE_URL
        self.api_token = settings.MANAGEMENT_API_TOKEN
        self.logger = logger.get_logger(__name__)
        self.client = self._create_client(transport)

        self.clients = ClientManager(self, logger)

    def _create_client(
        self, transport: Optional[httpx.AsyncBaseTransport]
    ) -> httpx.AsyncClient:
        """Create and configure HTTP client.

        Returns:
            Configured HTTP client
        """
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {self.api_token}",
                "Content-Type": "application/json",
                "User-Agent": self.settings.MANAGEMENT_USER_AGENT,
            },
            timeout=self.settings.MANAGEMENT_TIMEOUT,
            verify=self.settings.MANAGEMENT_VERIFY_SSL,
            transport=transport,
        )

    def uri(self, *segments: str) -> str:
        """Build a resource path relative to the API base URL.

        Every segment is percent-escaped, so ids containing ``/`` or ``|``
        stay a single path segment.

        Args:
            segments: Path segments, e.g. ("clients", client_id)

        Returns:
            Relative path
        """
        return "/".join(quote(segment, safe="") for segment in segments)

    async def request(
        self,
        method: str,
        endpoint: str,
        payload: Optional[Any] = None,
        options: Iterable[RequestOption] = (),
    ) -> Any:
        """Make HTTP request to API.

        Args:
            method: HTTP method
            endpoint: Path built with uri()
            payload: JSON body to send
            options: Request options applied in order

        Returns:
            Decoded JSON body, or None when the response has no body

        Raises:
            ManagementError: If the request fails or the server answers >= 400
        """
        request = self.client.build_request(method, endpoint, json=payload)
        for option in options:
            option.apply(request)

        self.logger.debug(
            f"MANAGEMENT API REQUEST: {method} {endpoint}",
            extra={
                "method": method,
                "endpoint": endpoint,
                "params": dict(request.url.params),
                "request_data": payload,
            },
        )

        try:
            response = await self.client.send(request)
        except httpx.RequestError as e:
            details = {
                "endpoint": endpoint,
                "method": method,
                "status_code": 503,
                "network_error": True,
            }
            if payload is not None:
                details["request_data"] = payload

            self.logger.error(
                f"MANAGEMENT API NETWORK ERROR: {method} {endpoint} - {e}",
                extra={"method": method, "endpoint": endpoint, "error_message": str(e)},
            )
            raise ManagementError(
                code=503,
                message=f"Management API request failed: {e}",
                details=details,
            ) from e

        response_data = self._decode_body(response)

        self.logger.debug(
            f"MANAGEMENT API RESPONSE: {response.status_code} {method} {endpoint}",
            extra={
                "method": method,
                "endpoint": endpoint,
                "status_code": response.status_code,
                "response_data": response_data,
            },
        )

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._status_error(e, method, endpoint, payload, response_data) from e

        return response_data

    def _decode_body(self, response: httpx.Response) -> Any:
        """Decode a JSON response body, tolerating empty and non-JSON bodies."""
        if response.status_code == httpx.codes.NO_CONTENT or not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            if response.is_success:
                raise ManagementError(
                    code=502,
                    message="Management API returned a non-JSON body",
                    details={"text": response.text[:500]},
                )
            return {"text": response.text[:500]}

    def _status_error(
        self,
        error: httpx.HTTPStatusError,
        method: str,
        endpoint: str,
        payload: Optional[Any],
        response_data: Any,
    ) -> ManagementError:
        """Translate an HTTP error status into a ManagementError."""
        status_code = error.response.status_code
        error_msg = str(error)
        details: dict[str, Any] = {
            "endpoint": endpoint,
            "method": method,
            "status_code": status_code,
        }

        if isinstance(response_data, dict):
            error_msg = str(
                response_data.get("message") or response_data.get("error") or error_msg
            )
            if response_data.get("errorCode"):
                details["error_code"] = response_data["errorCode"]
        if response_data:
            details["response_data"] = response_data
        if payload is not None:
            details["request_data"] = payload

        self.logger.error(
            f"MANAGEMENT API ERROR: {status_code} {method} {endpoint} - {error_msg}",
            extra={
                "method": method,
                "endpoint": endpoint,
                "status_code": status_code,
                "error_message": error_msg,
                "request_data": payload,
                "response_data": response_data,
            },
        )

        return ManagementError(code=status_code, message=error_msg, details=details)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "Management":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        await self.aclose()
