import pytest

from elitra_sdk.formatters import as_int, format_shares, normalize_hex_str, parse_amount


def test_format_shares_truncates_instead_of_rounding():
    assert format_shares(1_234_567_890_000_000_000) == "1.2345"
    assert format_shares(1_999_999_999_999_999_999) == "1.9999"


def test_format_shares_omits_zero_fraction():
    assert format_shares(10**18) == "1"
    assert format_shares(0) == "0"
    # Non-zero digits beyond the requested precision are dropped along with the suffix.
    assert format_shares(10**18 + 1) == "1"


def test_format_shares_custom_decimals_and_precision():
    assert format_shares(1_500_000, decimals=6) == "1.5000"
    assert format_shares(1_500_000, decimals=6, precision=2) == "1.50"
    assert format_shares(1_500_000, decimals=6, precision=0) == "1"
    assert format_shares(42, decimals=0) == "42"
    assert format_shares(5, decimals=6, precision=6) == "0.000005"


def test_parse_amount_pads_and_truncates_fraction():
    assert parse_amount("100.5", 6) == 100_500_000
    assert parse_amount("1") == 10**18
    assert parse_amount("0.0000001", 6) == 0
    assert parse_amount(".5", 2) == 50
    assert parse_amount("12.5", 0) == 12


@pytest.mark.parametrize("text", ["", "1.2.3", "abc", "1.x"])
def test_parse_amount_rejects_malformed_input(text):
    with pytest.raises(ValueError):
        parse_amount(text)


@pytest.mark.parametrize(
    ("amount", "decimals"),
    [
        (0, 18),
        (1, 18),
        (1_234_567_890_000_000_000, 18),
        (10**30 + 17, 18),
        (1_500_000, 6),
        (987, 0),
    ],
)
def test_parse_amount_inverts_format_shares_at_full_precision(amount, decimals):
    assert parse_amount(format_shares(amount, decimals, decimals), decimals) == amount


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, 0),
        (True, 1),
        (5, 5),
        ("  5  ", 5),
        ("0x10", 16),
    ],
)
def test_as_int(value, expected):
    assert as_int(value) == expected


def test_normalize_hex_str():
    assert normalize_hex_str(b"\x01\xab") == "0x01ab"
    assert normalize_hex_str("0XAB") == "0xAB"
    assert normalize_hex_str("ab") == "0xab"
