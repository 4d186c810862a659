# Services package

from .variable_substitution import (
    apply_variable_substitution,
    build_variable_table,
    extract_variable_refs,
    parse_graphql_content,
    resolve_request_variables,
    resolve_string,
    substitute,
    variable_pairs,
)
from .export_renderer import export_request, shell_escape
from .auth_defaults import default_config_for_type, switch_auth_type

__all__ = [
    "apply_variable_substitution",
    "build_variable_table",
    "extract_variable_refs",
    "parse_graphql_content",
    "resolve_request_variables",
    "resolve_string",
    "substitute",
    "variable_pairs",
    "export_request",
    "shell_escape",
    "default_config_for_type",
    "switch_auth_type",
]
