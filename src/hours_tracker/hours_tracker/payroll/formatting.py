"""Locale-aware display strings for hours and currency amounts.

Rounding is half-up on the decimal value of the float, so 2.675 hours
display as 2.68 rather than 2.67.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from ..core.constants import DEFAULT_NUMBER_LOCALE


@dataclass(frozen=True)
class NumberLocale:
    decimal_sep: str
    group_sep: str
    # Integer part is grouped only when the leading group would have at least
    # this many digits (CLDR minimumGroupingDigits).
    min_grouping_digits: int
    currency_pattern: str


NUMBER_LOCALES: dict[str, NumberLocale] = {
    "sl-SI": NumberLocale(
        decimal_sep=",",
        group_sep=".",
        min_grouping_digits=2,
        currency_pattern="{amount} €",
    ),
    "en-US": NumberLocale(
        decimal_sep=".",
        group_sep=",",
        min_grouping_digits=1,
        currency_pattern="€{amount}",
    ),
}

LocaleArg = Union[str, NumberLocale, None]


def get_locale(locale: LocaleArg = None) -> NumberLocale:
    if isinstance(locale, NumberLocale):
        return locale
    name = locale or DEFAULT_NUMBER_LOCALE
    try:
        return NUMBER_LOCALES[name]
    except KeyError:
        raise ValueError(f"Unsupported number locale: {name!r}")


def _group(digits: str, sep: str, min_grouping_digits: int) -> str:
    if len(digits) < 3 + min_grouping_digits:
        return digits
    head = len(digits) % 3 or 3
    parts = [digits[:head]] + [digits[i : i + 3] for i in range(head, len(digits), 3)]
    return sep.join(parts)


def format_number(
    value: float,
    *,
    min_fraction: int,
    max_fraction: int,
    decimal_sep: str = ".",
    group_sep: Optional[str] = None,
    min_grouping_digits: int = 1,
) -> str:
    quantum = Decimal(1).scaleb(-max_fraction)
    d = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)

    int_part, _, frac = format(abs(d), "f").partition(".")
    frac = frac.rstrip("0").ljust(min_fraction, "0")

    if group_sep:
        int_part = _group(int_part, group_sep, min_grouping_digits)

    sign = "-" if d < 0 else ""
    return f"{sign}{int_part}{decimal_sep}{frac}" if frac else f"{sign}{int_part}"


def format_hours(hours: float, locale: LocaleArg = None) -> str:
    """Hours with 1 to 2 fractional digits, e.g. '8,5' or '7,75'."""
    loc = get_locale(locale)
    return format_number(
        hours,
        min_fraction=1,
        max_fraction=2,
        decimal_sep=loc.decimal_sep,
        group_sep=loc.group_sep,
        min_grouping_digits=loc.min_grouping_digits,
    )


def format_currency(amount: float, locale: LocaleArg = None) -> str:
    """Fixed 2-decimal currency string, e.g. '160,00 €'."""
    loc = get_locale(locale)
    number = format_number(
        amount,
        min_fraction=2,
        max_fraction=2,
        decimal_sep=loc.decimal_sep,
        group_sep=loc.group_sep,
        min_grouping_digits=loc.min_grouping_digits,
    )
    return loc.currency_pattern.format(amount=number)
