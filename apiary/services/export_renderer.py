"""
Export service for rendering a request as a client invocation.

Produces curl, wget and HTTPie shell commands and a JavaScript fetch()
call. Disabled or empty-keyed headers and query parameters are left out,
and a Content-Type header is added for the body type unless the request
already sets one.
"""

import json
import logging
from typing import assert_never
from urllib.parse import quote_plus, urlencode

from ..schemas.export import ExportFormat
from ..schemas.request import BodyType, ExportRequestInput, KeyValue


logger = logging.getLogger(__name__)

# Separator used when a command is split over several lines
MULTILINE_SEPARATOR = " \\\n  "

CONTENT_TYPES: dict[str, str] = {
    "json": "application/json",
    "form_url_encoded": "application/x-www-form-urlencoded",
    "text": "text/plain",
    "multipart": "multipart/form-data",
}


def shell_escape(value: str) -> str:
    """Quote a string for a POSIX shell using single quotes."""
    return "'" + value.replace("'", "'\\''") + "'"


def _quote_query(value: str, safe: str = "", encoding=None, errors=None) -> str:
    # Browser form encoding: "*" stays literal, "~" is escaped.
    return quote_plus(value, safe + "*", encoding, errors).replace("~", "%7E")


def build_url(url: str, query_params: list[KeyValue]) -> str:
    """
    Append the enabled query parameters to a URL.

    Parameters are form-encoded the way browsers do it (spaces become
    ``+``, ``*`` is kept and ``~`` is escaped) and joined with
    ``&`` when the URL already has a query string.
    """
    enabled = [(p.key, p.value) for p in query_params if p.enabled and p.key.strip()]
    if not enabled:
        return url

    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(enabled, quote_via=_quote_query)}"


def get_content_type(body_type: BodyType) -> str | None:
    """Return the Content-Type implied by a body type, if any."""
    return CONTENT_TYPES.get(body_type)


def get_effective_headers(headers: list[KeyValue], body_type: BodyType) -> list[tuple[str, str]]:
    """Return the headers to send, with an implied Content-Type appended last."""
    effective = [(h.key, h.value) for h in headers if h.enabled and h.key.strip()]

    content_type = get_content_type(body_type)
    has_content_type = any(key.lower() == "content-type" for key, _ in effective)
    if body_type != "none" and content_type and not has_content_type:
        effective.append(("Content-Type", content_type))

    return effective


def _body(request: ExportRequestInput) -> str | None:
    if request.body_content and request.body_type != "none":
        return request.body_content
    return None


def _join(parts: list[str], multiline_after: int) -> str:
    if len(parts) > multiline_after:
        return MULTILINE_SEPARATOR.join(parts)
    return " ".join(parts)


def export_as_curl(request: ExportRequestInput) -> str:
    url = build_url(request.url, request.query_params)
    parts = ["curl"]

    # GET is curl's default
    if request.method != "GET":
        parts.append(f"-X {request.method}")

    for key, value in get_effective_headers(request.headers, request.body_type):
        parts.append(f"-H {shell_escape(f'{key}: {value}')}")

    body = _body(request)
    if body is not None:
        parts.append(f"-d {shell_escape(body)}")

    parts.append(shell_escape(url))
    return _join(parts, 2)


def export_as_wget(request: ExportRequestInput) -> str:
    url = build_url(request.url, request.query_params)
    parts = ["wget", f"--method={request.method}"]

    for key, value in get_effective_headers(request.headers, request.body_type):
        parts.append(f"--header={shell_escape(f'{key}: {value}')}")

    body = _body(request)
    if body is not None:
        parts.append(f"--body-data={shell_escape(body)}")

    # Write the response to stdout instead of a file
    parts.append("-O -")
    parts.append(shell_escape(url))
    return _join(parts, 3)


def export_as_fetch(request: ExportRequestInput) -> str:
    url = build_url(request.url, request.query_params)
    headers = get_effective_headers(request.headers, request.body_type)

    options: dict[str, object] = {"method": request.method}
    if headers:
        options["headers"] = dict(headers)

    body = _body(request)
    if body is not None:
        options["body"] = body

    options_json = json.dumps(options, indent=2, ensure_ascii=False)
    return f"fetch({json.dumps(url, ensure_ascii=False)}, {options_json})"


def export_as_httpie(request: ExportRequestInput) -> str:
    url = build_url(request.url, request.query_params)
    parts = ["http", request.method, shell_escape(url)]

    for key, value in get_effective_headers(request.headers, request.body_type):
        parts.append(f"{shell_escape(key)}:{shell_escape(value)}")

    body = _body(request)
    if body is not None:
        return f"echo {shell_escape(body)} | {' '.join(parts)}"

    return _join(parts, 3)


def export_request(request: ExportRequestInput, format: ExportFormat) -> str:
    """
    Render a request in the given export format.

    Args:
        request: The request to render
        format: One of "curl", "wget", "fetch" or "httpie"

    Returns:
        The command or code snippet as a single string
    """
    match format:
        case "curl":
            content = export_as_curl(request)
        case "wget":
            content = export_as_wget(request)
        case "fetch":
            content = export_as_fetch(request)
        case "httpie":
            content = export_as_httpie(request)
        case _:
            assert_never(format)

    logger.debug("Exported %s %s as %s", request.method, request.url, format)
    return content
