"""
Pydantic schemas for request execution results.

The executor itself lives outside this package; these schemas describe
what it hands back so callers share one definition.
"""

from pydantic import BaseModel, ConfigDict

from .request import KeyValue


class ExecutionTiming(BaseModel):
    """Timing breakdown in milliseconds. Phases the executor cannot observe are None."""
    dns_ms: float | None = None
    connect_ms: float | None = None
    tls_ms: float | None = None
    first_byte_ms: float
    total_ms: float

    model_config = ConfigDict(frozen=True)


class ExecutionResult(BaseModel):
    """
    Schema for the result of executing a request.

    Contains the response status, headers, body and timing information,
    or an error message when the request could not be completed.
    """
    status: int
    status_text: str
    headers: list[KeyValue]
    body: str
    size_bytes: int
    timing: ExecutionTiming
    error: str | None = None

    model_config = ConfigDict(frozen=True)
