"""Presence checks shared by the folder and note services."""

from typing import Any, List, Mapping, Optional, Sequence


def is_missing(value: Any) -> bool:
    """None and blank strings count as not supplied."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def first_missing(payload: Mapping[str, Any], fields: Sequence[str]) -> Optional[str]:
    """First of ``fields`` (in the given order) that ``payload`` lacks."""
    for field in fields:
        if is_missing(payload.get(field)):
            return field
    return None


def supplied_fields(payload: Mapping[str, Any], fields: Sequence[str]) -> List[str]:
    """The subset of ``fields`` that ``payload`` actually carries."""
    return [field for field in fields if not is_missing(payload.get(field))]
