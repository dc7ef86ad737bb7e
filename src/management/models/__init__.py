"""Models for the Management API."""

from .base import ManagementModel
from .client import (
    LIFETIME_IN_SECONDS,
    Client,
    ClientAuthenticationMethods,
    ClientJWTConfiguration,
    ClientMobile,
    ClientMobileAndroid,
    ClientMobileIOS,
    ClientNativeSocialLogin,
    ClientNativeSocialLoginSupportEnabled,
    ClientRefreshToken,
    OIDCBackchannelLogout,
    PrivateKeyJWT,
    decode_lifetime,
)
from .credential import ECHOED_CREDENTIAL_FIELDS, Credential
from .pagination import ClientList, ListMeta

__all__ = [
    "ManagementModel",
    # Clients
    "Client",
    "ClientAuthenticationMethods",
    "ClientJWTConfiguration",
    "ClientMobile",
    "ClientMobileAndroid",
    "ClientMobileIOS",
    "ClientNativeSocialLogin",
    "ClientNativeSocialLoginSupportEnabled",
    "ClientRefreshToken",
    "OIDCBackchannelLogout",
    "PrivateKeyJWT",
    "LIFETIME_IN_SECONDS",
    "decode_lifetime",
    # Credentials
    "Credential",
    "ECHOED_CREDENTIAL_FIELDS",
    # Lists
    "ClientList",
    "ListMeta",
]
