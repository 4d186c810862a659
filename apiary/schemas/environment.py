"""
Pydantic schemas for environment variables and variable resolution.

Defines the environment variable row and the payloads of the
resolution endpoints.
"""

from pydantic import BaseModel

from .request import ExecuteRequestInput


class EnvironmentVariable(BaseModel):
    """A variable of the active environment. Disabled variables are not resolved."""
    key: str
    value: str
    enabled: bool = True


class ResolveRequest(BaseModel):
    """Schema for resolving the variables of a request."""
    request: ExecuteRequestInput
    variables: list[EnvironmentVariable] = []


class ResolveResponse(BaseModel):
    """Schema for a resolved request, with a warning per undefined variable."""
    request: ExecuteRequestInput
    warnings: list[str] = []


class VariableRefsRequest(BaseModel):
    """Schema for listing the variables referenced by a piece of text."""
    text: str


class VariableRefsResponse(BaseModel):
    variables: list[str]
