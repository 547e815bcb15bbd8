"""Helpers shared by the request/response dataclasses."""

from __future__ import annotations

from typing import Any


def omit_empty(payload: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None, empty, zero or False."""
    return {k: v for k, v in payload.items() if v not in (None, "", 0, False, {}, [])}


def as_list(value: Any) -> list:
    """JSON null and missing keys both mean "no items"."""
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"expected a JSON array, got {type(value).__name__}")
    return value


def as_dict(value: Any) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TypeError(f"expected a JSON object, got {type(value).__name__}")
    return value
