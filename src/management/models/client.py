"""Client (application registration) models."""
import math
import re
from typing import Any, Dict, List, Optional

from pydantic import (
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)

from ..errors import MalformedFieldError
from .base import ManagementModel
from .credential import Credential

LIFETIME_IN_SECONDS = "lifetime_in_seconds"

_INTEGER_STRING = re.compile(r"[+-]?[0-9]+")


def decode_lifetime(raw: Any) -> int:
    """Decode lifetime_in_seconds, which older tenants send as a string.

    Args:
        raw: Value as found in the JSON document

    Returns:
        Lifetime in seconds

    Raises:
        MalformedFieldError: If raw is neither a number nor a base-10 integer string
    """
    # bool is an int subclass
    if isinstance(raw, bool):
        raise MalformedFieldError(LIFETIME_IN_SECONDS, raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if not math.isfinite(raw):
            raise MalformedFieldError(LIFETIME_IN_SECONDS, raw)
        return int(raw)
    if isinstance(raw, str) and _INTEGER_STRING.fullmatch(raw):
        return int(raw)
    raise MalformedFieldError(LIFETIME_IN_SECONDS, raw)


class ClientJWTConfiguration(ManagementModel):
    """JWT settings of a client."""

    lifetime_in_seconds: Optional[int] = Field(
        None, description="Seconds the JWT stays valid (affects the exp claim)"
    )
    secret_encoded: Optional[bool] = Field(
        None, description="Whether the client secret is base64 encoded"
    )
    scopes: Optional[Dict[str, str]] = None
    algorithm: Optional[str] = Field(
        None, alias="alg", description="Algorithm used to sign JWTs, HS256 or RS256"
    )

    @model_validator(mode="before")
    @classmethod
    def decode_raw_lifetime(cls, data: Any) -> Any:
        """Normalize lifetime_in_seconds before structural validation."""
        if isinstance(data, dict) and LIFETIME_IN_SECONDS in data:
            data = dict(data)
            data[LIFETIME_IN_SECONDS] = decode_lifetime(data[LIFETIME_IN_SECONDS])
        return data

    @model_serializer(mode="wrap")
    def encode_lifetime(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        """Always emit lifetime_in_seconds as a number, or not at all."""
        data = handler(self)
        if data.get(LIFETIME_IN_SECONDS) is None:
            data.pop(LIFETIME_IN_SECONDS, None)
        else:
            data[LIFETIME_IN_SECONDS] = decode_lifetime(data[LIFETIME_IN_SECONDS])
        return data


class ClientNativeSocialLoginSupportEnabled(ManagementModel):
    enabled: Optional[bool] = None


class ClientNativeSocialLogin(ManagementModel):
    """Native Social Login support per connection."""

    apple: Optional[ClientNativeSocialLoginSupportEnabled] = None
    facebook: Optional[ClientNativeSocialLoginSupportEnabled] = None


class ClientMobileAndroid(ManagementModel):
    app_package_name: Optional[str] = None
    key_hashes: Optional[List[str]] = Field(None, alias="sha256_cert_fingerprints")


class ClientMobileIOS(ManagementModel):
    team_id: Optional[str] = None
    app_id: Optional[str] = Field(None, alias="app_bundle_identifier")


class ClientMobile(ManagementModel):
    """Mobile app settings."""

    android: Optional[ClientMobileAndroid] = None
    ios: Optional[ClientMobileIOS] = None


class ClientRefreshToken(ManagementModel):
    """Refresh token settings of a client."""

    rotation_type: Optional[str] = Field(
        None, description="Either rotating or non-rotating"
    )
    expiration_type: Optional[str] = Field(
        None, description="Either expiring or non-expiring"
    )
    leeway: Optional[int] = Field(
        None,
        description="Seconds the previous token can still be exchanged without "
        "triggering breach detection",
    )
    token_lifetime: Optional[int] = Field(
        None, description="Seconds refresh tokens remain valid"
    )
    infinite_token_lifetime: Optional[bool] = None
    infinite_idle_token_lifetime: Optional[bool] = None
    idle_token_lifetime: Optional[int] = Field(
        None, description="Seconds after which inactive refresh tokens expire"
    )


class PrivateKeyJWT(ManagementModel):
    credentials: Optional[List[Credential]] = None


class ClientAuthenticationMethods(ManagementModel):
    private_key_jwt: Optional[PrivateKeyJWT] = None


class OIDCBackchannelLogout(ManagementModel):
    backchannel_logout_urls: Optional[List[str]] = None


class Client(ManagementModel):
    """An application or SSO integration registered with the tenant."""

    name: Optional[str] = Field(None, description="The name of the client")
    description: Optional[str] = Field(
        None, description="Free text description, max 140 characters"
    )
    client_id: Optional[str] = Field(None, description="The ID of the client")
    client_secret: Optional[str] = Field(
        None, description="The client secret, must not be public"
    )
    app_type: Optional[str] = Field(
        None, description="The type of application this client represents"
    )
    logo_uri: Optional[str] = Field(None, description="URL of the client logo")
    is_first_party: Optional[bool] = None
    is_token_endpoint_ip_header_trusted: Optional[bool] = Field(
        None,
        description="Trust the auth0-forwarded-for header on the token endpoint",
    )
    oidc_conformant: Optional[bool] = None

    callbacks: Optional[List[str]] = None
    allowed_origins: Optional[List[str]] = None
    web_origins: Optional[List[str]] = None
    client_aliases: Optional[List[str]] = None
    allowed_clients: Optional[List[str]] = None
    allowed_logout_urls: Optional[List[str]] = None
    jwt_configuration: Optional[ClientJWTConfiguration] = None

    signing_keys: Optional[List[Dict[str, str]]] = None
    encryption_key: Optional[Dict[str, str]] = None
    sso: Optional[bool] = None
    sso_disabled: Optional[bool] = Field(
        None, description="True to disable Single Sign On"
    )
    cross_origin_auth: Optional[bool] = Field(
        None,
        alias="cross_origin_authentication",
        description="Whether cross-origin authentication requests are allowed",
    )
    grant_types: Optional[List[str]] = None
    cross_origin_location: Optional[str] = Field(
        None,
        alias="cross_origin_loc",
        description="Where cross origin verification takes place",
    )

    custom_login_page_on: Optional[bool] = None
    custom_login_page: Optional[str] = None
    custom_login_page_preview: Optional[str] = None
    form_template: Optional[str] = None
    addons: Optional[Dict[str, Any]] = None

    token_endpoint_auth_method: Optional[str] = Field(
        None,
        description="One of none, client_secret_post or client_secret_basic",
    )
    client_metadata: Optional[Dict[str, Any]] = Field(
        None, description="String metadata; a key is removed by sending it as null"
    )
    mobile: Optional[ClientMobile] = None
    initiate_login_uri: Optional[str] = None
    native_social_login: Optional[ClientNativeSocialLogin] = None
    refresh_token: Optional[ClientRefreshToken] = None

    organization_usage: Optional[str] = None
    organization_require_behavior: Optional[str] = None
    client_authentication_methods: Optional[ClientAuthenticationMethods] = None
    require_pushed_authorization_requests: Optional[bool] = None
    oidc_backchannel_logout: Optional[OIDCBackchannelLogout] = None
