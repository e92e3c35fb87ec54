import pytest

from mmoffline.delegates import (
    DEFAULT_SIZE,
    LIGHT_GRAY,
    WHITE,
    FontMetrics,
    Size,
    client_size_hint,
    document_size_hint,
    entry_size_hint,
    format_entry_total,
    format_price,
    group_size_hint,
    product_size_hint,
    short_document_id,
    zebra_row_color,
)

METRICS = FontMetrics(height=8, average_char_width=1)
LINE = METRICS.height + 2


@pytest.mark.parametrize(
    "hint", [client_size_hint, document_size_hint, entry_size_hint, product_size_hint]
)
def test_missing_item_gets_default_size(hint):
    assert hint(None, METRICS, 300) == DEFAULT_SIZE
    assert hint(None, METRICS, 300) == (100, 50)


@pytest.mark.parametrize(
    "hint", [client_size_hint, document_size_hint, entry_size_hint, product_size_hint]
)
def test_width_is_kept(hint):
    size = hint("some name", METRICS, 123)
    assert isinstance(size, Size)
    assert size.width == 123


def test_client_empty_name_takes_one_line():
    assert client_size_hint("", METRICS, 10) == client_size_hint("a" * 10, METRICS, 10)


def test_client_extra_line_adds_line_height():
    one = client_size_hint("a" * 10, METRICS, 10)
    two = client_size_hint("a" * 11, METRICS, 10)
    assert two.height - one.height == LINE


def test_client_zero_width_uses_text_width_as_lines():
    zero = client_size_hint("abc", METRICS, 0)
    wide = client_size_hint("a" * 30, METRICS, 10)
    assert zero.height == wide.height
    assert zero.width == 0


def test_document_has_at_least_two_name_lines():
    empty = document_size_hint("", METRICS, 10)
    assert empty == document_size_hint("a" * 20, METRICS, 10)
    three = document_size_hint("a" * 21, METRICS, 10)
    assert three.height - empty.height == LINE


def test_entry_counts_eight_extra_characters():
    base = entry_size_hint("", METRICS, 10)
    assert base == entry_size_hint("a" * 12, METRICS, 10)
    more = entry_size_hint("a" * 13, METRICS, 10)
    assert more.height - base.height == LINE


def test_product_height_grows_with_name():
    short = product_size_hint("a", METRICS, 10)
    assert short == product_size_hint("", METRICS, 10)
    longer = product_size_hint("a" * 25, METRICS, 10)
    assert longer.height - short.height == 2 * METRICS.height


def test_product_zero_width_keeps_fraction():
    metrics = FontMetrics(height=10, average_char_width=1.5)
    whole = product_size_hint("a", FontMetrics(height=10, average_char_width=1), 0)
    fractional = product_size_hint("a", metrics, 0)
    assert fractional.height > whole.height


def test_group_height_fixed():
    assert group_size_hint(FontMetrics(10, 3), 200) == Size(200, 41)
    assert group_size_hint(FontMetrics(10, 3), 50).height == group_size_hint(
        FontMetrics(10, 7), 999
    ).height


def test_short_document_id_keeps_last_six_hex_symbols():
    assert short_document_id(0xABCDEF12) == "cdef12"
    assert short_document_id(255) == "ff"


@pytest.mark.parametrize("doc_id", [1, 0x123456789, 987654321, 0xFFFFFF])
def test_short_document_id_round_trip(doc_id):
    text = short_document_id(doc_id)
    assert len(text) <= 6
    assert int(text, 16) == doc_id & 0xFFFFFF


def test_format_entry_total_exact_value():
    assert float(format_entry_total(2, 3.5)) == 2 * 3.5
    assert "." not in format_entry_total(2, 3.5)


def test_format_entry_total_four_significant_digits():
    value = 12345.678
    text = format_entry_total(1, value)
    assert abs(float(text) - value) / value < 1e-3
    assert text == "1.235e+04"


def test_format_price_matches_entry_total_for_unit_quantity():
    assert format_price(19.99) == format_entry_total(1, 19.99)
    assert float(format_price(19.99)) == 19.99


def test_zebra_alternates():
    assert zebra_row_color(0) == WHITE
    assert zebra_row_color(1) == LIGHT_GRAY
    assert zebra_row_color(2) == zebra_row_color(0)
    assert zebra_row_color(3) == zebra_row_color(1)
    assert zebra_row_color(-1) == LIGHT_GRAY