"""
Authorization config defaults.

Switching the auth type of a request replaces its whole config with the
new type's empty config; no field carries over between types.
"""

from typing import assert_never

from ..schemas.auth import (
    ApiKeyAuthConfig,
    AuthConfig,
    AuthType,
    AwsV4AuthConfig,
    BasicAuthConfig,
    BearerAuthConfig,
    DigestAuthConfig,
    NoAuthConfig,
    OAuth1AuthConfig,
    OAuth2AuthConfig,
)
from ..schemas.request import ExecuteRequestInput


def default_config_for_type(auth_type: AuthType) -> AuthConfig:
    """
    Return the empty config for an auth type.

    String fields are empty; api keys go in a header, OAuth 2.0 uses the
    authorization code grant and OAuth 1.0 signs with HMAC-SHA1.
    """
    match auth_type:
        case "none":
            return NoAuthConfig()
        case "bearer":
            return BearerAuthConfig(token="")
        case "basic":
            return BasicAuthConfig(username="", password="")
        case "api_key":
            return ApiKeyAuthConfig(key="", value="", location="header")
        case "oauth2":
            return OAuth2AuthConfig(grant_type="authorization_code")
        case "oauth1":
            return OAuth1AuthConfig(signature_method="HMAC-SHA1")
        case "digest":
            return DigestAuthConfig(username="", password="")
        case "aws_v4":
            return AwsV4AuthConfig(access_key="", secret_key="", region="", service="")
        case _:
            assert_never(auth_type)


def switch_auth_type(request: ExecuteRequestInput, auth_type: AuthType) -> ExecuteRequestInput:
    """Return a copy of ``request`` using ``auth_type`` with its default config."""
    return request.model_copy(
        update={
            "auth_type": auth_type,
            "auth_config": default_config_for_type(auth_type),
        }
    )
