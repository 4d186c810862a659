"""
Pydantic schemas package.

Exports the request value model and the endpoint payload schemas.
"""

from .auth import (
    AuthType,
    ApiKeyLocation,
    OAuth2GrantType,
    OAuth1SignatureMethod,
    AuthConfig,
    NoAuthConfig,
    BearerAuthConfig,
    BasicAuthConfig,
    ApiKeyAuthConfig,
    OAuth2AuthConfig,
    OAuth1AuthConfig,
    DigestAuthConfig,
    AwsV4AuthConfig,
)

from .request import (
    HttpMethod,
    BodyType,
    KeyValue,
    GraphQLContent,
    RequestSettings,
    ExecuteRequestInput,
    ExportRequestInput,
    AuthSwitchRequest,
)

from .environment import (
    EnvironmentVariable,
    ResolveRequest,
    ResolveResponse,
    VariableRefsRequest,
    VariableRefsResponse,
)

from .export import (
    ExportFormat,
    ExportCommand,
    ExportResponse,
)

from .execute import (
    ExecutionTiming,
    ExecutionResult,
)

__all__ = [
    # Auth schemas
    "AuthType",
    "ApiKeyLocation",
    "OAuth2GrantType",
    "OAuth1SignatureMethod",
    "AuthConfig",
    "NoAuthConfig",
    "BearerAuthConfig",
    "BasicAuthConfig",
    "ApiKeyAuthConfig",
    "OAuth2AuthConfig",
    "OAuth1AuthConfig",
    "DigestAuthConfig",
    "AwsV4AuthConfig",
    # Request schemas
    "HttpMethod",
    "BodyType",
    "KeyValue",
    "GraphQLContent",
    "RequestSettings",
    "ExecuteRequestInput",
    "ExportRequestInput",
    "AuthSwitchRequest",
    # Environment schemas
    "EnvironmentVariable",
    "ResolveRequest",
    "ResolveResponse",
    "VariableRefsRequest",
    "VariableRefsResponse",
    # Export schemas
    "ExportFormat",
    "ExportCommand",
    "ExportResponse",
    # Execute schemas
    "ExecutionTiming",
    "ExecutionResult",
]
