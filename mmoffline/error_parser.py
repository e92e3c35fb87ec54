"""Detection and extraction of database errors in server responses."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

__all__ = ["ParsedError", "contains_error", "make_error"]


@dataclass(frozen=True)
class ParsedError:
    """A database error reported by the server."""

    is_error: bool
    displayable: str = ""
    full: str = ""
    trace: str = ""


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def contains_error(doc: Mapping[str, Any]) -> bool:
    """Return True when the JSON object carries an ``error`` field."""
    return "error" in doc


def make_error(doc: Mapping[str, Any]) -> ParsedError:
    """Extract the error description from a JSON object.

    Non-string fields count as empty; the error is real only when its short
    text is not empty.
    """
    displayable = _text(doc.get("error"))
    return ParsedError(
        is_error=bool(displayable),
        displayable=displayable,
        full=_text(doc.get("error_full")),
        trace=_text(doc.get("trace")),
    )