"""Helpers for AWS resource tag lists of {"Key": ..., "Value": ...} mappings."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def get_tag(tags: Iterable[Mapping[str, Any]] | None, key: str, missing: str) -> str:
    """Return the value of the tag named key, or missing when there is none."""
    for tag in tags or ():
        if (tag.get("Key") or "") == key:
            return tag.get("Value") or ""
    return missing


def set_tag(
    tags: Iterable[Mapping[str, Any]] | None, key: str, value: str | None
) -> list[Mapping[str, Any]]:
    """Return the tags with a new tag appended when key is absent.

    Tags whose key is already present are left as they are.
    """
    result = list(tags or ())
    if any((tag.get("Key") or "") == key for tag in result):
        return result
    result.append({"Key": key, "Value": value})
    return result