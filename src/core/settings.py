"""Application settings."""
import json
from typing import Annotated, List, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )
    """Application settings."""

    # Project
    PROJECT_NAME: str = "management-client"
    VERSION: str = "0.1.0"

    # Management API
    MANAGEMENT_DOMAIN: str = ""  # Tenant domain, with or without scheme
    MANAGEMENT_API_TOKEN: str = ""  # Static bearer token
    MANAGEMENT_TIMEOUT: float = 30.0  # seconds
    MANAGEMENT_VERIFY_SSL: bool = True
    MANAGEMENT_USER_AGENT: str = "management-client/0.1.0"
    MANAGEMENT_DEFAULT_PER_PAGE: int = 50

    @field_validator("MANAGEMENT_DOMAIN", mode="before")
    @classmethod
    def strip_domain(cls, v: str) -> str:
        """Drop surrounding whitespace and trailing slashes."""
        if isinstance(v, str):
            return v.strip().rstrip("/")
        return v

    @property
    def MANAGEMENT_BASE_URL(self) -> str:
        """Get Management API base URL."""
        domain = self.MANAGEMENT_DOMAIN
        if not domain.startswith(("http://", "https://")):
            domain = f"https://{domain}"
        return f"{domain}/api/v2/"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # Available formats: json, text, structured
    LOG_EXTRA_FIELDS: Annotated[List[str], NoDecode] = []  # Additional fields for logs

    @field_validator("LOG_EXTRA_FIELDS", mode="before")
    @classmethod
    def parse_extra_fields(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        """Accept a comma-separated string as well as a list."""
        if isinstance(v, str) and v.startswith("["):
            return json.loads(v)
        elif isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, list):
            return v
        raise ValueError(v)
