"""
JSON helpers: principals travel as their canonical text.
"""

import json
from typing import Any

from ..core.errors import DecodeError, PrincipalError
from .model import Principal


class PrincipalJSONEncoder(json.JSONEncoder):
    """json.JSONEncoder that renders Principal values as canonical text."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Principal):
            return o.to_text()
        return super().default(o)


def principal_from_json(value: Any) -> Principal:
    """
    Parse a JSON string value into a principal.

    Raises:
        DecodeError: If value is not a string or not a valid principal
    """
    if not isinstance(value, str):
        raise DecodeError(f"expected principal text, got {type(value).__name__}")
    try:
        return Principal.from_text(value)
    except PrincipalError as e:
        raise DecodeError(f"unable to parse value into Principal: {value!r}") from e


def dumps(obj: Any, **kwargs: Any) -> str:
    """json.dumps with PrincipalJSONEncoder."""
    kwargs.setdefault("cls", PrincipalJSONEncoder)
    return json.dumps(obj, **kwargs)
