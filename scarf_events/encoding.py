import json
import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from scarf_events.errors import InvalidEndpointError

logger = logging.getLogger(__name__)


def has_custom_str(value: Any) -> bool:
    """
    Tell whether a value supplies its own textual representation.

    Builtin types (int, bool, list, dict, None, ...) all define __str__ too,
    so only a __str__ coming from a non-builtin class counts: enums, Decimal,
    UUID, datetime, Path and user classes.
    """
    for klass in type(value).__mro__:
        if "__str__" in vars(klass):
            return klass.__module__ != "builtins"
    return False


def encode_value(value: Any) -> str:
    """
    Render a property value as a single query parameter value.

    Precedence:
      1. Custom textual representation (`__str__` of a non-builtin class).
      2. Plain strings, verbatim.
      3. Compact JSON, with the quotes of a JSON string scalar stripped.
      4. `str(value)` when the value is not JSON serializable.

    Args:
        value (Any): The property value.

    Returns:
        str: The encoded value.
    """
    if has_custom_str(value):
        return str(value)

    if isinstance(value, str):
        return value

    try:
        encoded = json.dumps(value, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as e:
        logger.debug("Falling back to str() for %s value: %s", type(value).__name__, e)
        return str(value)

    if len(encoded) >= 2 and encoded.startswith('"') and encoded.endswith('"'):
        encoded = encoded[1:-1]

    return encoded


def utf8_safe(text: str) -> str:
    """
    Replace what UTF-8 cannot carry, such as lone surrogates left by
    surrogateescape-decoded filenames, with backslash escapes.
    """
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


def encode_properties(properties: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """
    Encode every property value; a missing mapping is treated as empty.
    """
    if not properties:
        return {}

    return {
        utf8_safe(str(key)): utf8_safe(encode_value(value))
        for key, value in properties.items()
    }


def build_event_url(endpoint_url: str, properties: Optional[Mapping[str, Any]] = None) -> httpx.URL:
    """
    Merge the encoded properties into the endpoint's query string.

    The endpoint's own path and query are kept; a property whose name is
    already in the query replaces it.

    Args:
        endpoint_url (str): The collection endpoint.
        properties (Optional[Mapping[str, Any]]): The event properties.

    Returns:
        httpx.URL: The URL to send the event to.

    Raises:
        InvalidEndpointError: If the endpoint cannot be parsed.
    """
    try:
        url = httpx.URL(endpoint_url.strip())
    except (httpx.InvalidURL, TypeError, UnicodeError) as e:
        raise InvalidEndpointError(endpoint_url, reason=str(e)) from e

    params = encode_properties(properties)
    if not params:
        return url

    return url.copy_merge_params(params)
