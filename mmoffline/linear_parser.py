"""Parsing of server responses that hold a flat list of JSON objects."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from .error_parser import ParsedError, contains_error, make_error
from .uniresult import UniformJsonObject

__all__ = ["ParseError", "ParseResult", "parse_items", "ERROR_MESSAGE_RESULT"]

ERROR_MESSAGE_RESULT = 10000


class ParseError(Exception):
    """Raised when a response cannot be parsed or reports a database error."""

    def __init__(self, message: str, error: Optional[ParsedError] = None) -> None:
        super().__init__(message)
        self.error = error


@dataclass
class ParseResult:
    """Objects found in a response."""

    items: list[UniformJsonObject] = field(default_factory=list)
    name: str = "itemlist"
    alternative_result: int = 0


def _root_object(obj: Union[str, bytes, Mapping[str, Any]]) -> Mapping[str, Any]:
    if isinstance(obj, (str, bytes)):
        try:
            obj = json.loads(obj)
        except ValueError as exc:
            raise ParseError(f"invalid JSON: {exc}") from exc
    if not isinstance(obj, Mapping):
        raise ParseError("response root is not a JSON object")
    return obj


def parse_items(obj: Union[str, bytes, Mapping[str, Any]]) -> ParseResult:
    """Parse the ``items`` array of a response into uniform objects.

    ``obj`` is either the response text or its parsed root object. A response
    carrying a database error, or one without ``items``, raises ParseError.
    Array elements that are not objects become empty objects.
    """
    root = _root_object(obj)
    if contains_error(root):
        error = make_error(root)
        raise ParseError(error.displayable or "database error", error)
    if "items" not in root:
        raise ParseError("response has no items")

    items = root["items"]
    if not isinstance(items, list):
        return ParseResult()
    return ParseResult(
        items=[
            UniformJsonObject.from_json(item if isinstance(item, Mapping) else {})
            for item in items
        ]
    )