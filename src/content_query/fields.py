"""Fields selector — ``fields`` query param -> projected field names."""

from __future__ import annotations

from typing import Any

from .exceptions import InvalidFieldsError
from .schema import ID_ATTRIBUTE

WILDCARD = "*"


def convert_fields(fields: Any, depth: int = 0) -> list[str] | None:
    """Return the de-duplicated fields to select, identifier first.

    ``"*"`` at the top level means every field and returns ``None`` so
    the selector is omitted downstream.
    """
    if depth == 0 and fields == WILDCARD:
        return None

    if isinstance(fields, str):
        return unique_names([ID_ATTRIBUTE, *split_names(fields)])

    if isinstance(fields, list):
        values: list[str] = []
        for value in fields:
            values.extend(convert_fields(value, depth + 1) or ())
        return unique_names([ID_ATTRIBUTE, *values])

    raise InvalidFieldsError()


def split_names(value: str) -> list[str]:
    """Split a comma-separated list of names, dropping blanks."""
    return [name.strip() for name in value.split(",") if name.strip()]


def unique_names(values: list[str]) -> list[str]:
    """Drop duplicates, keeping first occurrences in order."""
    return list(dict.fromkeys(values))
