"""
Variable substitution service for replacing {{variable}} placeholders.

This service handles extraction and substitution of variable placeholders
in request values (URL, headers, query params, body, auth config).
Substitution is a single pass: values inserted for a placeholder are
never scanned again.
"""

import logging
import re
from collections.abc import Callable, Iterable
from typing import List, Tuple, assert_never

from pydantic import ValidationError

from ..schemas.auth import (
    ApiKeyAuthConfig,
    AuthConfig,
    AwsV4AuthConfig,
    BasicAuthConfig,
    BearerAuthConfig,
    DigestAuthConfig,
    NoAuthConfig,
    OAuth1AuthConfig,
    OAuth2AuthConfig,
)
from ..schemas.environment import EnvironmentVariable
from ..schemas.request import ExecuteRequestInput, GraphQLContent, KeyValue


logger = logging.getLogger(__name__)

# Pattern to match {{variable_name}} placeholders; names are ASCII word characters
VARIABLE_PATTERN = re.compile(r'\{\{(\w+)\}\}', re.ASCII)


def extract_variable_refs(text: str) -> List[str]:
    """
    Extract all variable names referenced in a string, in order.

    Duplicates are kept so callers can count references.

    Example:
        >>> extract_variable_refs("{{a}} and {{a}}")
        ['a', 'a']
    """
    if not text:
        return []

    return VARIABLE_PATTERN.findall(text)


def substitute(template: str, variables: dict[str, str]) -> Tuple[str, List[str]]:
    """
    Replace variable placeholders in a template with their values.

    Args:
        template: String containing {{variable}} placeholders
        variables: Dictionary mapping variable names to their values

    Returns:
        Tuple of (substituted string, list of unmatched variable names)

    Example:
        >>> substitute("Hello {{name}}", {"name": "World"})
        ('Hello World', [])
        >>> substitute("Hello {{name}}", {})
        ('Hello {{name}}', ['name'])
    """
    if not template:
        return template, []

    unmatched: List[str] = []

    def replace_match(match: re.Match) -> str:
        var_name = match.group(1)
        if var_name in variables:
            return variables[var_name]
        else:
            unmatched.append(var_name)
            return match.group(0)  # Keep original placeholder

    result = VARIABLE_PATTERN.sub(replace_match, template)
    return result, unmatched


def resolve_string(template: str, variables: dict[str, str]) -> str:
    """Replace known placeholders in ``template``; unknown ones are left as-is."""
    return substitute(template, variables)[0]


def build_variable_table(variable_pairs: Iterable[tuple[str, str]]) -> dict[str, str]:
    """Build a lookup table from (name, value) pairs. The first pair for a name wins."""
    table: dict[str, str] = {}
    for name, value in variable_pairs:
        table.setdefault(name, value)
    return table


def variable_pairs(variables: Iterable[EnvironmentVariable]) -> list[tuple[str, str]]:
    """Return the enabled environment variables as (name, value) pairs, in order."""
    return [(var.key, var.value) for var in variables if var.enabled]


def parse_graphql_content(body: str | None) -> GraphQLContent | None:
    """
    Parse a GraphQL request body.

    Only the wire name ``operationName`` is accepted. Returns None when
    the body is not a JSON object of string (or null) fields.
    """
    if not body:
        return None
    try:
        return GraphQLContent.model_validate_json(body, by_alias=True, by_name=False)
    except ValidationError:
        return None


def _auth_template_fields(config: AuthConfig) -> tuple[str, ...]:
    """
    Names of the free-text fields of an auth config.

    Enumerated fields (api key location, grant type, signature method)
    and the ``type`` tag are never templates.
    """
    match config:
        case NoAuthConfig():
            return ()
        case BearerAuthConfig():
            return ("token",)
        case BasicAuthConfig() | DigestAuthConfig():
            return ("username", "password")
        case ApiKeyAuthConfig():
            return ("key", "value")
        case OAuth2AuthConfig():
            return (
                "access_token",
                "token_url",
                "auth_url",
                "client_id",
                "client_secret",
                "scope",
                "username",
                "password",
                "redirect_uri",
            )
        case OAuth1AuthConfig():
            return ("consumer_key", "consumer_secret", "token", "token_secret")
        case AwsV4AuthConfig():
            return ("access_key", "secret_key", "region", "service")
        case _:
            assert_never(config)


def _resolve_key_values(
    rows: list[KeyValue], resolve: Callable[[str], str]
) -> list[KeyValue]:
    return [
        KeyValue(key=resolve(row.key), value=resolve(row.value), enabled=row.enabled)
        for row in rows
    ]


def _resolve_body(
    body_type: str, body_content: str | None, resolve: Callable[[str], str]
) -> str | None:
    if not body_content:
        return body_content

    if body_type == "graphql":
        content = parse_graphql_content(body_content)
        if content is not None:
            return GraphQLContent(
                query=resolve(content.query),
                variables=resolve(content.variables),
                operation_name=resolve(content.operation_name),
            ).to_body()
        logger.debug("GraphQL body is not valid JSON; resolving it as plain text")

    return resolve(body_content)


def apply_variable_substitution(
    request: ExecuteRequestInput,
    variable_pairs: Iterable[tuple[str, str]],
) -> tuple[ExecuteRequestInput, list[str]]:
    """
    Apply variable substitution to all parts of a request.

    Args:
        request: The request to process
        variable_pairs: (name, value) pairs; the first pair for a name wins

    Returns:
        Tuple of (processed request, list of warning messages)
    """
    variables = build_variable_table(variable_pairs)
    warnings: list[str] = []

    def resolver(location: str) -> Callable[[str], str]:
        def resolve(template: str) -> str:
            result, unmatched = substitute(template, variables)
            warnings.extend(
                [f"Undefined variable in {location}: {{{{{v}}}}}" for v in unmatched]
            )
            return result
        return resolve

    url = resolver("URL")(request.url)
    headers = _resolve_key_values(request.headers, resolver("headers"))
    query_params = _resolve_key_values(request.query_params, resolver("query params"))
    body_content = _resolve_body(request.body_type, request.body_content, resolver("body"))

    resolve_auth = resolver("auth")
    auth_config = request.auth_config.model_copy(
        update={
            name: resolve_auth(getattr(request.auth_config, name))
            for name in _auth_template_fields(request.auth_config)
        }
    )

    # model_copy skips validation; method, body_type, auth_type and
    # settings are carried over untouched.
    processed = request.model_copy(
        update={
            "url": url,
            "headers": headers,
            "query_params": query_params,
            "body_content": body_content,
            "auth_config": auth_config,
        }
    )

    if warnings:
        logger.debug("Resolved request with %d undefined variable(s)", len(warnings))
    return processed, warnings


def resolve_request_variables(
    request: ExecuteRequestInput,
    variable_pairs: Iterable[tuple[str, str]],
) -> ExecuteRequestInput:
    """
    Resolve {{variable}} placeholders in every text field of a request.

    Never raises: unknown placeholders are kept, and a GraphQL body that
    is not valid JSON is resolved as plain text.
    """
    return apply_variable_substitution(request, variable_pairs)[0]
