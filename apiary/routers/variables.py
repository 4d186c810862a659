"""
Variable resolution API routes.

Provides endpoints for previewing a request with environment variables
substituted and for listing the variables a piece of text references.
"""

from fastapi import APIRouter

from ..exceptions import ErrorResponse
from ..schemas.environment import (
    ResolveRequest,
    ResolveResponse,
    VariableRefsRequest,
    VariableRefsResponse,
)
from ..services.variable_substitution import (
    apply_variable_substitution,
    extract_variable_refs,
    variable_pairs,
)


router = APIRouter(prefix="/api/variables", tags=["variables"], responses={422: {"model": ErrorResponse}})


@router.post("/resolve", response_model=ResolveResponse)
def resolve_request(payload: ResolveRequest):
    """
    Resolve {{variable}} placeholders in a request.

    Only enabled variables are used. Placeholders without a matching
    variable are left in place and reported as warnings.

    Args:
        payload: The request and the variables of the active environment

    Returns:
        The resolved request and a warning per undefined variable
    """
    request, warnings = apply_variable_substitution(
        payload.request, variable_pairs(payload.variables)
    )
    return ResolveResponse(request=request, warnings=warnings)


@router.post("/refs", response_model=VariableRefsResponse)
def list_variable_refs(payload: VariableRefsRequest):
    """List the variable names referenced in a text, in order, duplicates included."""
    return VariableRefsResponse(variables=extract_variable_refs(payload.text))
