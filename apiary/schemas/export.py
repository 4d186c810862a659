"""
Pydantic schemas for request export.

Defines the supported export formats and the export endpoint payloads.
"""

from typing import Literal

from pydantic import BaseModel

from .environment import EnvironmentVariable
from .request import ExportRequestInput


# Client invocations a request can be rendered as
ExportFormat = Literal["curl", "wget", "fetch", "httpie"]


class ExportCommand(BaseModel):
    """
    Schema for exporting a request.

    When variables are given, the request is resolved against them
    before it is rendered.
    """
    request: ExportRequestInput
    format: ExportFormat
    variables: list[EnvironmentVariable] = []


class ExportResponse(BaseModel):
    format: ExportFormat
    content: str
