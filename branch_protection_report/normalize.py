"""Normalization helpers for loosely-shaped JSON payloads."""

from typing import Any

# A JSON value: scalar, list of values, or mapping of str to value.
JSONValue = Any


def is_url(value: Any) -> bool:
    """True for strings starting with ``http`` (covers ``https``)."""
    return isinstance(value, str) and value.startswith("http")


def strip_urls(value: JSONValue) -> JSONValue:
    """
    Recursively drop URL strings from a JSON tree.

    Mapping entries whose value is a URL are removed, as are URL items of
    lists. Nested mappings and lists are rebuilt at every depth; all other
    values, including non-URL strings, are returned unchanged. A root that
    is not a mapping or list is returned as-is, even when it is a URL, since
    there is no container to drop it from. The input is never mutated, and
    ``strip_urls(strip_urls(x)) == strip_urls(x)``.
    """
    if isinstance(value, dict):
        return {
            key: strip_urls(item)
            for key, item in value.items()
            if not is_url(item)
        }
    if isinstance(value, list):
        return [strip_urls(item) for item in value if not is_url(item)]
    return value


def enabled_flag(value: JSONValue) -> bool | None:
    """
    Flatten a GitHub ``{"enabled": bool, "url": ...}`` wrapper.

    Returns the wrapper's ``enabled`` field, a bare boolean as-is, and None
    when the wrapper is absent.
    """
    if isinstance(value, dict):
        enabled = value.get("enabled")
        return bool(enabled) if enabled is not None else None
    if isinstance(value, bool):
        return value
    return None
