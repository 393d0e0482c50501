import math

import pytest

from app.calculators import discounted_weeks_factor, npv_factor_table


def test_default_table_covers_1_to_500_weeks():
    rows = npv_factor_table(0.0438)
    assert len(rows) == 500
    assert rows[0].weeks == 1
    assert rows[-1].weeks == 500


def test_tiers_follow_engine_rules():
    rows = {r.weeks: r for r in npv_factor_table(0.0438, weeks=[100, 101])}
    assert rows[100].annual_discount_rate == 0.02
    assert rows[101].annual_discount_rate == 0.0438
    assert rows[101].factor == discounted_weeks_factor(101, 0.0438)


def test_rounded_factor_has_four_decimals():
    for row in npv_factor_table(0.0438, weeks=range(95, 106)):
        assert row.rounded_factor == round(row.factor, 4)
        assert abs(row.rounded_factor - row.factor) <= 0.00005 + 1e-12


def test_one_week_factor():
    (row,) = npv_factor_table(0.0438, weeks=[1])
    weekly = 0.02 / 52
    assert math.isclose(row.factor, 1 / (1 + weekly), rel_tol=1e-12)


def test_rejects_bad_arguments():
    with pytest.raises(ValueError):
        npv_factor_table(0.0)
    with pytest.raises(ValueError):
        npv_factor_table(0.0438, weeks=[501])
