from app.models.commuted import CommutedValueResult
from app.services.formatting import (
    commuted_value_display,
    format_currency,
    format_rate_percent,
    format_weeks,
    parse_currency,
)


def test_format_currency():
    assert format_currency(1234.5) == "$1,234.50"
    assert format_currency(0) == "$0.00"
    assert format_currency(-12.5) == "-$12.50"
    assert format_currency(None) == ""
    assert format_currency(float("nan")) == ""


def test_parse_currency():
    assert parse_currency("$1,234.50") == 1234.5
    assert parse_currency("-$12.35") == -12.35
    assert parse_currency("abc") is None
    assert parse_currency(None) is None


def test_format_rate_and_weeks():
    assert format_rate_percent(0.0438) == "4.38%"
    assert format_rate_percent(0.02, decimals=4) == "2.0000%"
    assert format_weeks(500.0) == "500"
    assert format_weeks(487.25) == "487.25"


def test_commuted_value_display():
    result = CommutedValueResult(
        weeks_remaining=200,
        applicable_annual_discount_rate=0.0438,
        discounted_weeks_factor=184.1234567,
        commuted_value=92061.72835,
        commuted_value_95=87458.64193,
        commuted_value_90=82855.55552,
        ttd_paid_to_date_value=150000.0,
        used_fallback_discount_rate=False,
        max_compensation_rate=1134.43,
        used_fallback_max_rate=False,
    )
    display = commuted_value_display(result)
    assert display.weeks_remaining == "200"
    assert display.discount_rate == "4.38%"
    assert display.discounted_weeks == "184.123457"
    assert display.commuted_value == "$92,061.73"
    assert display.commuted_value_95 == "$87,458.64"
    assert display.commuted_value_90 == "$82,855.56"
    assert display.ttd_paid_to_date_value == "$150,000.00"
