"""
Zendesk API Client - Common Schema Types
"""

from typing import Any, Union

# Zendesk returns heterogeneous values for custom fields, satisfaction
# ratings and via sources
JSONValue = Union[bool, int, float, str, list[Any], dict[str, Any], None]


def null_as_list(value: Any) -> Any:
    """Zendesk sends null for empty collections; read it as []"""
    return [] if value is None else value


def null_as_dict(value: Any) -> Any:
    return {} if value is None else value
