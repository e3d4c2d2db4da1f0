import pytest

from ripe_country_stat.asn_set import parse_asn_set, sort_asns
from ripe_country_stat.errors import ASNSetParseError


def test_parses_routed_field():
    assert parse_asn_set("{AsnSingle(701), AsnSingle(702)}") == (["701", "702"], [])


@pytest.mark.parametrize("text", ["set()", "", None, "   ", "{}", "{ }"])
def test_empty_inputs_yield_no_asns(text):
    assert parse_asn_set(text) == ([], [])


def test_separator_without_space_and_trailing_comma():
    assert parse_asn_set("{AsnSingle(1),AsnSingle(20), }") == (["1", "20"], [])


def test_keeps_source_order_and_duplicates():
    asns, _ = parse_asn_set("{AsnSingle(9), AsnSingle(3), AsnSingle(9)}")
    assert asns == ["9", "3", "9"]


def test_leading_zeros_are_normalized():
    assert parse_asn_set("{AsnSingle(007)}") == (["7"], [])


@pytest.mark.parametrize("text,expected", [
    ("AsnSingle(1)", []),
    ("{AsnRange(1-5)}", []),
    ("{AsnSingle()}", []),
    ("{AsnSingle(12}", []),
    ("{AsnSingle(12)", ["12"]),
    ("{AsnSingle(1) AsnSingle(2)}", ["1"]),
    ("{AsnSingle(1)} trailing", ["1"]),
    ("{,}", []),
    ("[701, 702]", []),
])
def test_malformed_text_is_reported(text, expected):
    asns, errors = parse_asn_set(text)
    assert asns == expected
    assert errors
    assert all(isinstance(e, ASNSetParseError) for e in errors)


def test_bad_entry_is_skipped_and_scan_continues():
    asns, errors = parse_asn_set("{AsnSingle(701), AsnRange(1-5), AsnSingle(702)}")
    assert asns == ["701", "702"]
    assert len(errors) == 1
    assert errors[0].position == 17


def test_parse_error_is_a_value_error_with_position():
    _, errors = parse_asn_set("{AsnSingle(1), Foo(2)}")
    assert isinstance(errors[0], ValueError)
    assert errors[0].position == 15


def test_sort_is_numeric():
    assert sort_asns(["100", "9", "10", "65000"]) == ["9", "10", "100", "65000"]
