import pytest

from src.hours_tracker.hours_tracker.payroll.formatting import format_currency, format_hours, get_locale


@pytest.mark.parametrize(
    "hours, expected",
    [
        (8, "8,0"),
        (8.5, "8,5"),
        (7.75, "7,75"),
        (1 / 3, "0,33"),
        (2 / 3, "0,67"),
        (2.675, "2,68"),
        (0, "0,0"),
        (9.999, "10,0"),
    ],
)
def test_format_hours_keeps_one_to_two_decimals(hours, expected):
    assert format_hours(hours) == expected


def test_format_hours_groups_large_values_only_from_five_digits():
    assert format_hours(1234.5) == "1234,5"
    assert format_hours(12345.5) == "12.345,5"


def test_format_hours_en_us():
    assert format_hours(1234.25, "en-US") == "1,234.25"


@pytest.mark.parametrize(
    "amount, expected",
    [
        (160, "160,00 €"),
        (76.5, "76,50 €"),
        (0.005, "0,01 €"),
        (1234.5, "1234,50 €"),
        (12345.5, "12.345,50 €"),
    ],
)
def test_format_currency_sl(amount, expected):
    assert format_currency(amount) == expected


def test_format_currency_separates_symbol_with_plain_space():
    text = format_currency(9)
    assert text == "9,00 €"
    assert "\xa0" not in text


def test_format_currency_en_us():
    assert format_currency(1234.5, "en-US") == "€1,234.50"


def test_unknown_locale_is_rejected():
    with pytest.raises(ValueError):
        get_locale("xx-XX")
