"""Error models for the Management API.

Everything raised by the client on purpose derives from ManagementError, so
callers can catch a single type. Structural validation failures of response
bodies are left as pydantic ValidationError.
"""
from typing import Any, Dict, Optional


class ManagementError(Exception):
    """Management API error with details."""

    def __init__(
        self,
        code: int,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize management error.

        Args:
            code: HTTP status code (503 for network failures)
            message: Error message
            details: Optional error details
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    @property
    def status(self) -> int:
        """HTTP status code of the failed request."""
        return self.code

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class MalformedFieldError(ManagementError):
    """A field came back from the server in a shape that cannot be decoded."""

    def __init__(self, field: str, value: Any = None) -> None:
        """Initialize malformed field error.

        Args:
            field: Wire name of the offending field
            value: Raw value that failed to decode
        """
        super().__init__(
            code=400,
            message=f"unexpected type for field {field}",
            details={"field": field, "value": value},
        )
        self.field = field
