"""
Pydantic schemas for HTTP request values.

Defines the request value shared by variable resolution and export
rendering, with HTTP method and body type validation.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..config import DEFAULT_FOLLOW_REDIRECTS, DEFAULT_MAX_REDIRECTS, DEFAULT_TIMEOUT_MS
from .auth import AuthConfig, AuthType, NoAuthConfig


# HTTP methods supported by the system
HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

# Body types supported for requests
BodyType = Literal["none", "json", "text", "form_url_encoded", "multipart", "graphql"]


class KeyValue(BaseModel):
    """A header or query parameter row. Disabled rows are kept but not sent."""
    key: str
    value: str
    enabled: bool = True

    model_config = ConfigDict(frozen=True)


class GraphQLContent(BaseModel):
    """
    Structured body of a GraphQL request.

    Stored in ``body_content`` as compact JSON. ``variables`` is itself a
    JSON document kept as an opaque string. Null fields read as "".
    """
    query: str = ""
    variables: str = ""
    operation_name: str = Field("", alias="operationName")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("query", "variables", "operation_name", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        return "" if v is None else v

    def to_body(self) -> str:
        """Serialize to the compact JSON form stored in ``body_content``."""
        return self.model_dump_json(by_alias=True)


class RequestSettings(BaseModel):
    """Per-request transport settings. A timeout of 0 means no timeout."""
    timeout_ms: int = Field(DEFAULT_TIMEOUT_MS, ge=0)
    follow_redirects: bool = DEFAULT_FOLLOW_REDIRECTS
    max_redirects: int = Field(DEFAULT_MAX_REDIRECTS, ge=0)

    model_config = ConfigDict(frozen=True)


class ExecuteRequestInput(BaseModel):
    """
    Schema for a request ready for resolution and execution.

    ``auth_type`` and ``auth_config`` always describe the same variant.
    """
    method: HttpMethod
    url: str
    headers: list[KeyValue] = []
    query_params: list[KeyValue] = []
    body_type: BodyType = "none"
    body_content: str | None = None
    auth_type: AuthType = "none"
    auth_config: AuthConfig = Field(default_factory=NoAuthConfig)
    settings: RequestSettings = Field(default_factory=RequestSettings)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_auth_variant(self) -> "ExecuteRequestInput":
        if self.auth_config.type != self.auth_type:
            raise ValueError(
                f"auth_config of type '{self.auth_config.type}' "
                f"does not match auth_type '{self.auth_type}'"
            )
        return self


class ExportRequestInput(BaseModel):
    """
    Schema for a request to be rendered as a client invocation.

    A projection of ExecuteRequestInput without auth or settings. Accepts
    the camelCase field names used by the desktop client.
    """
    method: HttpMethod
    url: str
    headers: list[KeyValue] = []
    query_params: list[KeyValue] = Field([], alias="queryParams")
    body_type: BodyType = Field("none", alias="bodyType")
    body_content: str | None = Field(None, alias="bodyContent")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_execute_input(cls, request: ExecuteRequestInput) -> "ExportRequestInput":
        return cls(
            method=request.method,
            url=request.url,
            headers=request.headers,
            query_params=request.query_params,
            body_type=request.body_type,
            body_content=request.body_content,
        )


class AuthSwitchRequest(BaseModel):
    """Schema for switching the authorization scheme of a request."""
    request: ExecuteRequestInput
    auth_type: AuthType
