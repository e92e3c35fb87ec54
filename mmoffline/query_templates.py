"""Request URL templates, their identifiers and placeholder substitution."""

from __future__ import annotations

import configparser
import re
from enum import IntEnum
from os import PathLike
from typing import Union

__all__ = [
    "QueryId",
    "TEMPLATE_NAMES",
    "DEFAULT_TEMPLATES",
    "fill_placeholder",
    "fill_template",
    "load_templates",
    "check_arg_quantity",
]


class QueryId(IntEnum):
    """Identifiers of the server queries.

    The number of extra arguments each query takes is given by
    :func:`check_arg_quantity`.
    """

    PING = 0
    GET_GROUPS = 1
    GET_TIPS = 2
    GET_DEPOZITS = 3
    GET_MEASURES = 4
    GET_OPTIONS = 5
    LOGIN = 6
    GET_CLIENTS = 7
    GET_PRODUCTS = 8
    POST_DOCUMENT = 9
    POST_ENTRY = 10


TEMPLATE_NAMES: dict[QueryId, str] = {
    QueryId.PING: "Ping",
    QueryId.GET_GROUPS: "GetGroups",
    QueryId.GET_TIPS: "GetTips",
    QueryId.GET_DEPOZITS: "GetDepozits",
    QueryId.GET_MEASURES: "GetMeasures",
    QueryId.GET_OPTIONS: "GetOptions",
    QueryId.LOGIN: "Login",
    QueryId.GET_CLIENTS: "GetClients",
    QueryId.GET_PRODUCTS: "GetProducts",
    QueryId.POST_DOCUMENT: "PostDocument",
    QueryId.POST_ENTRY: "PostEntry",
}

_REFERENCE = "pg_web_order.get_reference?p_response_id=%1&p_session_id=%2&p_type=%3"

DEFAULT_TEMPLATES: dict[QueryId, str] = {
    QueryId.PING: "ping",
    QueryId.GET_GROUPS: "pg_web_order.get_groups?p_request_id=%1&p_session_id=%2",
    QueryId.GET_TIPS: _REFERENCE,
    QueryId.GET_DEPOZITS: _REFERENCE,
    QueryId.GET_MEASURES: _REFERENCE,
    QueryId.GET_OPTIONS: _REFERENCE,
    QueryId.LOGIN: "pg_web_base.login_user?r=%1&a=orders&u=%2&p=%3&p_only_session=1",
    QueryId.GET_CLIENTS: "pg_web_order.get_clients?r=%1&s=%2&i=%3&n=%4&f=%5",
    QueryId.GET_PRODUCTS: (
        "pg_web_order.get_products_by_userid?p_responce_id=%1&p_session_id="
        "%2&p_userid=%3&p_first_rn=%4&p_last_rn=%5"
    ),
    QueryId.POST_DOCUMENT: (
        "pg_web_order.create_doc?p_session=%2&p_request_id=%1&p_doc_id=%3"
        "&p_created_date=%4&p_shipping_date=%5&p_client_id=%6&p_dep=%7&p_tip_doc=%8&p_payed=%9"
    ),
    QueryId.POST_ENTRY: (
        "pg_web_order.add_entry?p_session=%2&p_request_id=%1&p_parent_doc_id=%3"
        "&p_entry_id=%4&p_product_id=%5&p_price=%6&p_measure=%7&p_qnt=%8&"
        "p_add_info1=%9&p_add_info2=%10&p_add_info3=%11&p_comment=%12"
    ),
}

_ARG_QUANTITY: dict[QueryId, int] = {
    QueryId.PING: 0,
    QueryId.GET_GROUPS: 0,
    QueryId.GET_TIPS: 1,
    QueryId.GET_DEPOZITS: 1,
    QueryId.GET_MEASURES: 1,
    QueryId.GET_OPTIONS: 1,
    QueryId.LOGIN: 2,
    QueryId.GET_CLIENTS: 3,
    QueryId.GET_PRODUCTS: 3,
    QueryId.POST_DOCUMENT: 7,
    QueryId.POST_ENTRY: 10,
}

# A placeholder is '%', an optional 'L' flag and one or two decimal digits.
_PLACEHOLDER = re.compile(r"%L?([0-9][0-9]?)")

_SECTION = "General"

StrPath = Union[str, "PathLike[str]"]


def fill_placeholder(template: str, value: object) -> str:
    """Replace every occurrence of the lowest-numbered placeholder with ``value``.

    A template without placeholders is returned unchanged. The inserted text is
    not scanned again for placeholders.
    """
    numbers = [int(m.group(1)) for m in _PLACEHOLDER.finditer(template)]
    if not numbers:
        return template
    lowest = min(numbers)
    text = str(value)
    return _PLACEHOLDER.sub(
        lambda m: text if int(m.group(1)) == lowest else m.group(0), template
    )


def fill_template(template: str, *args: object) -> str:
    """Fill placeholders one after another with ``args``, lowest number first."""
    for arg in args:
        template = fill_placeholder(template, arg)
    return template


def load_templates(path: StrPath = "request_templates.ini") -> dict[QueryId, str]:
    """Load query templates from an INI file.

    Templates that are missing or empty are replaced by their defaults, which
    are then written back to the file, creating it when it does not exist.
    """
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str  # type: ignore[assignment]
    parser.read(path, encoding="utf-8")
    if not parser.has_section(_SECTION):
        parser.add_section(_SECTION)

    templates: dict[QueryId, str] = {}
    changed = False
    for query_id in QueryId:
        name = TEMPLATE_NAMES[query_id]
        stored = parser.get(_SECTION, name, fallback="")
        if not stored:
            stored = DEFAULT_TEMPLATES[query_id]
            parser.set(_SECTION, name, stored)
            changed = True
        templates[query_id] = stored

    if changed:
        with open(path, "w", encoding="utf-8") as handle:
            parser.write(handle)
    return templates


def check_arg_quantity(query_id: int, argc: int) -> bool:
    """Return True when ``argc`` is the number of extra arguments the query takes."""
    try:
        known = QueryId(query_id)
    except ValueError:
        return False
    return _ARG_QUANTITY[known] == argc