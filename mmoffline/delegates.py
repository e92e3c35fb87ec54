"""Layout rules of the list item views: size hints, colours and panel texts."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple, Optional

__all__ = [
    "BRIGHT_DELEGATE_COLOR",
    "DARK_DELEGATE_COLOR",
    "WHITE",
    "LIGHT_GRAY",
    "DEFAULT_SIZE",
    "Color",
    "Size",
    "FontMetrics",
    "client_size_hint",
    "document_size_hint",
    "entry_size_hint",
    "product_size_hint",
    "group_size_hint",
    "short_document_id",
    "format_entry_total",
    "format_price",
    "zebra_row_color",
]

Color = tuple[int, int, int]

BRIGHT_DELEGATE_COLOR: Color = (200, 226, 247)
DARK_DELEGATE_COLOR: Color = (153, 192, 224)
WHITE: Color = (255, 255, 255)
LIGHT_GRAY: Color = (192, 192, 192)


class Size(NamedTuple):
    """Width and height of an item in pixels."""

    width: int
    height: int


# Size used when the item holds nothing that can be drawn.
DEFAULT_SIZE = Size(100, 50)


@dataclass(frozen=True)
class FontMetrics:
    """Measurements of the font an item is drawn with."""

    height: int
    average_char_width: float


def _int_tabs(text_width: float, width: int) -> int:
    """Number of text lines needed, as a whole number."""
    if width == 0:
        return int(text_width)
    return math.ceil(text_width / width)


def client_size_hint(name: Optional[str], metrics: FontMetrics, width: int) -> Size:
    """Size of a client item: a 1.8-line header and enough lines to wrap the name."""
    if name is None:
        return DEFAULT_SIZE
    tabs = _int_tabs(metrics.average_char_width * len(name), width)
    tabs = tabs if tabs > 0 else 1
    return Size(width, int((tabs + 1.8) * (metrics.height + 2)))


def document_size_hint(client_name: Optional[str], metrics: FontMetrics, width: int) -> Size:
    """Size of a document item: two panel lines and at least two name lines."""
    if client_name is None:
        return DEFAULT_SIZE
    tabs = _int_tabs(metrics.average_char_width * len(client_name), width)
    tabs = tabs if tabs > 1 else 2
    return Size(width, int((tabs + 2) * (metrics.height + 2)))


def entry_size_hint(product_name: Optional[str], metrics: FontMetrics, width: int) -> Size:
    """Size of an entry item: one panel line and at least two name lines."""
    if product_name is None:
        return DEFAULT_SIZE
    tabs = _int_tabs(metrics.average_char_width * (len(product_name) + 8), width)
    tabs = tabs if tabs > 1 else 2
    return Size(width, int((tabs + 1) * (metrics.height + 2)))


def product_size_hint(name: Optional[str], metrics: FontMetrics, width: int) -> Size:
    """Size of a product item: a 1.1-line header and enough lines to wrap the name."""
    if name is None:
        return DEFAULT_SIZE
    text_width = metrics.average_char_width * len(name)
    tabs: float = text_width if width == 0 else math.ceil(text_width / width)
    tabs = tabs if tabs > 0 else 1
    return Size(width, int((tabs + 1.1) * metrics.height))


def group_size_hint(metrics: FontMetrics, width: int) -> Size:
    """Size of a group item: a fixed, button-like 4.1 lines."""
    return Size(width, int(4.1 * metrics.height))


def short_document_id(document_id: int) -> str:
    """Document id in lower-case hexadecimal, truncated to its last six symbols."""
    sign = "-" if document_id < 0 else ""
    return (sign + format(abs(document_id), "x"))[-6:]


def _format_g4(value: float) -> str:
    return format(float(value), ".4g")


def format_entry_total(quantity: float, price: float) -> str:
    """Total of an entry with four significant digits."""
    return _format_g4(quantity * price)


def format_price(price: float) -> str:
    """Product price with four significant digits."""
    return _format_g4(price)


def zebra_row_color(row: int) -> Color:
    """Background of a list row: light gray for odd rows, white for even ones."""
    return LIGHT_GRAY if row % 2 else WHITE