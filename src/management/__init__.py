"""Management API client and models."""
from .client import ClientManager
from .errors import MalformedFieldError, ManagementError
from .management import Management
from .models import (
    Client,
    ClientAuthenticationMethods,
    ClientJWTConfiguration,
    ClientList,
    ClientMobile,
    ClientMobileAndroid,
    ClientMobileIOS,
    ClientNativeSocialLogin,
    ClientNativeSocialLoginSupportEnabled,
    ClientRefreshToken,
    Credential,
    OIDCBackchannelLogout,
    PrivateKeyJWT,
)
from .options import (
    RequestOption,
    apply_list_defaults,
    exclude_fields,
    from_,
    header,
    include_fields,
    include_totals,
    page,
    parameter,
    per_page,
    query,
    take,
)

__all__ = [
    # Client
    "Management",
    "ClientManager",
    # Errors
    "ManagementError",
    "MalformedFieldError",
    # Models
    "Client",
    "ClientAuthenticationMethods",
    "ClientJWTConfiguration",
    "ClientList",
    "ClientMobile",
    "ClientMobileAndroid",
    "ClientMobileIOS",
    "ClientNativeSocialLogin",
    "ClientNativeSocialLoginSupportEnabled",
    "ClientRefreshToken",
    "Credential",
    "OIDCBackchannelLogout",
    "PrivateKeyJWT",
    # Options
    "RequestOption",
    "apply_list_defaults",
    "exclude_fields",
    "from_",
    "header",
    "include_fields",
    "include_totals",
    "page",
    "parameter",
    "per_page",
    "query",
    "take",
]
