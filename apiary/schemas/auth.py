"""
Pydantic schemas for request authorization.

Each auth type has its own config model; ``AuthConfig`` is the union of
all of them, discriminated by the ``type`` field.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


# Authorization schemes supported for requests
AuthType = Literal["none", "bearer", "basic", "api_key", "oauth2", "oauth1", "digest", "aws_v4"]

ApiKeyLocation = Literal["header", "query"]

OAuth2GrantType = Literal["authorization_code", "client_credentials", "password", "implicit"]

OAuth1SignatureMethod = Literal["HMAC-SHA1", "RSA-SHA1"]


class _AuthConfigBase(BaseModel):
    model_config = ConfigDict(frozen=True)


class NoAuthConfig(_AuthConfigBase):
    type: Literal["none"] = "none"


class BearerAuthConfig(_AuthConfigBase):
    type: Literal["bearer"] = "bearer"
    token: str = ""


class BasicAuthConfig(_AuthConfigBase):
    type: Literal["basic"] = "basic"
    username: str = ""
    password: str = ""


class ApiKeyAuthConfig(_AuthConfigBase):
    """API key sent either as a header or as a query parameter."""
    type: Literal["api_key"] = "api_key"
    key: str = ""
    value: str = ""
    location: ApiKeyLocation = "header"


class OAuth2AuthConfig(_AuthConfigBase):
    type: Literal["oauth2"] = "oauth2"
    grant_type: OAuth2GrantType = "authorization_code"
    access_token: str = ""
    token_url: str = ""
    auth_url: str = ""
    client_id: str = ""
    client_secret: str = ""
    scope: str = ""
    username: str = ""
    password: str = ""
    redirect_uri: str = ""


class OAuth1AuthConfig(_AuthConfigBase):
    type: Literal["oauth1"] = "oauth1"
    consumer_key: str = ""
    consumer_secret: str = ""
    token: str = ""
    token_secret: str = ""
    signature_method: OAuth1SignatureMethod = "HMAC-SHA1"


class DigestAuthConfig(_AuthConfigBase):
    type: Literal["digest"] = "digest"
    username: str = ""
    password: str = ""


class AwsV4AuthConfig(_AuthConfigBase):
    """AWS Signature Version 4 credentials and scope."""
    type: Literal["aws_v4"] = "aws_v4"
    access_key: str = ""
    secret_key: str = ""
    region: str = ""
    service: str = ""


AuthConfig = Annotated[
    Union[
        NoAuthConfig,
        BearerAuthConfig,
        BasicAuthConfig,
        ApiKeyAuthConfig,
        OAuth2AuthConfig,
        OAuth1AuthConfig,
        DigestAuthConfig,
        AwsV4AuthConfig,
    ],
    Field(discriminator="type"),
]
