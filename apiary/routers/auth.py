"""
Authorization config API routes.

Provides the empty config for each auth type and switches the auth type
of a request.
"""

from fastapi import APIRouter

from ..exceptions import ErrorResponse
from ..schemas.auth import AuthType
from ..schemas.request import AuthSwitchRequest, ExecuteRequestInput
from ..services.auth_defaults import default_config_for_type, switch_auth_type


router = APIRouter(prefix="/api/auth", tags=["auth"], responses={422: {"model": ErrorResponse}})


@router.get("/defaults/{auth_type}")
def get_default_config(auth_type: AuthType):
    """
    Get the empty config for an auth type.

    Args:
        auth_type: One of the supported auth types

    Returns:
        The config the editor starts from when this type is selected
    """
    return default_config_for_type(auth_type)


@router.post("/switch", response_model=ExecuteRequestInput)
def switch_auth(payload: AuthSwitchRequest):
    """
    Switch the auth type of a request.

    The previous auth config is discarded entirely.
    """
    return switch_auth_type(payload.request, payload.auth_type)
