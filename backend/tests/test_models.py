from datetime import date

import pytest
from pydantic import ValidationError

from app.models.commuted import CommutedValueInput, CommutedValueRequest
from app.models.rates import RateSetting, RateSnapshot, RateSource, RateType


def test_rate_setting_accepts_db_string_type():
    setting = RateSetting(year=2025, rate_type="DISCOUNT_RATE_101_PLUS", value=0.0438)
    assert setting.rate_type == RateType.discount_rate_101_plus


@pytest.mark.parametrize("year, value", [(1978, 100.0), (2025, 0.0), (2025, -1.0)])
def test_rate_setting_rejects_bad_rows(year, value):
    with pytest.raises(ValidationError):
        RateSetting(year=year, rate_type="MAX_COMPENSATION", value=value)


def test_rate_snapshot_defaults():
    snapshot = RateSnapshot(year=2025, max_compensation_rates={2025: 1134.43})
    assert snapshot.discount_rate_101_plus is None
    assert snapshot.source == RateSource.builtin


def test_rate_snapshot_is_immutable():
    snapshot = RateSnapshot(year=2025, max_compensation_rates={2025: 1134.43})
    with pytest.raises(ValidationError):
        snapshot.year = 2024


@pytest.mark.parametrize("rates", [{1900: 100.0}, {2025: 0.0}])
def test_rate_snapshot_rejects_bad_table(rates):
    with pytest.raises(ValidationError):
        RateSnapshot(year=2025, max_compensation_rates=rates)


def test_rate_snapshot_rejects_non_positive_discount():
    with pytest.raises(ValidationError):
        RateSnapshot(year=2025, max_compensation_rates={}, discount_rate_101_plus=0.0)


def test_engine_input_defaults_weeks_to_zero():
    calc_input = CommutedValueInput(year_of_injury=2020, compensation_rate=400.0)
    assert calc_input.weeks_already_paid == 0.0
    assert calc_input.other_credit_weeks == 0.0


def test_request_to_input_fills_missing_weeks():
    request = CommutedValueRequest(year_of_injury=2020, compensation_rate=400.0, weeks_already_paid=20)
    calc_input = request.to_input()
    assert calc_input.weeks_already_paid == 20
    assert calc_input.other_credit_weeks == 0.0


def test_request_rejects_total_over_500():
    with pytest.raises(ValidationError, match="cannot exceed 500"):
        CommutedValueRequest(
            year_of_injury=2020, compensation_rate=400.0,
            weeks_already_paid=300, other_credit_weeks=250,
        )


def test_request_rejects_future_year():
    with pytest.raises(ValidationError, match="Year must be between 1979"):
        CommutedValueRequest(year_of_injury=date.today().year + 1, compensation_rate=400.0)


@pytest.mark.parametrize("field, value", [
    ("year_of_injury", 1978),
    ("compensation_rate", 0),
    ("weeks_already_paid", -1),
    ("other_credit_weeks", 501),
    ("current_discount_rate", 0),
])
def test_request_field_limits(field, value):
    body = {"year_of_injury": 2020, "compensation_rate": 400.0, field: value}
    with pytest.raises(ValidationError):
        CommutedValueRequest(**body)
