"""
Request export API routes.

Renders a request as a curl, wget or HTTPie command or a fetch() call
for copying to the clipboard.
"""

from fastapi import APIRouter

from ..exceptions import ErrorResponse
from ..schemas.export import ExportCommand, ExportResponse
from ..schemas.request import ExecuteRequestInput, ExportRequestInput
from ..services.export_renderer import export_request
from ..services.variable_substitution import resolve_request_variables, variable_pairs


router = APIRouter(prefix="/api/export", tags=["export"], responses={422: {"model": ErrorResponse}})


@router.post("", response_model=ExportResponse)
def export(command: ExportCommand):
    """
    Export a request in the requested format.

    If variables are supplied, the URL, headers, query parameters and
    body are resolved against them before rendering.

    Args:
        command: The request, the export format and optional variables

    Returns:
        The rendered command or snippet
    """
    request = command.request
    pairs = variable_pairs(command.variables)
    if pairs:
        resolved = resolve_request_variables(
            ExecuteRequestInput(
                method=request.method,
                url=request.url,
                headers=request.headers,
                query_params=request.query_params,
                body_type=request.body_type,
                body_content=request.body_content,
            ),
            pairs,
        )
        request = ExportRequestInput.from_execute_input(resolved)

    return ExportResponse(format=command.format, content=export_request(request, command.format))
