"""
Tests for step-up SIP projections.

This module tests the yearly contribution schedule and the month-by-month
value recurrence.
"""

import pytest

from fincalc.models.results import StepUpSIPResult
from fincalc.models.sip import calculate_sip
from fincalc.models.step_up_sip import (
    calculate_step_up_sip,
    iter_step_up_months,
    step_up_contribution,
)


def _contributions(result):
    """Recover each month's contribution from the cumulative investment."""
    previous = 0.0
    amounts = []
    for point in result.monthly_data:
        amounts.append(point.investment - previous)
        previous = point.investment
    return amounts


class TestStepUpContribution:
    """Test cases for the contribution schedule."""

    def test_first_year_is_base_amount(self):
        for month in range(1, 13):
            assert step_up_contribution(5000, 10, month) == 5000

    def test_steps_once_per_year(self):
        assert step_up_contribution(5000, 10, 13) == pytest.approx(5500)
        assert step_up_contribution(5000, 10, 24) == pytest.approx(5500)
        assert step_up_contribution(5000, 10, 25) == pytest.approx(6050)

    def test_zero_step_up_is_flat(self):
        assert step_up_contribution(5000, 0, 120) == 5000


class TestCalculateStepUpSIP:
    """Test cases for calculate_step_up_sip."""

    def test_schedule_in_result(self):
        result = calculate_step_up_sip(5000, 5, 12, 10)
        amounts = _contributions(result)

        assert isinstance(result, StepUpSIPResult)
        assert result.step_up_percent == 10
        assert amounts[12] == pytest.approx(amounts[0] * 1.10)
        for year in range(5):
            block = amounts[year * 12 : (year + 1) * 12]
            assert all(amount == pytest.approx(block[0]) for amount in block)

    def test_total_investment_sums_stepped_contributions(self):
        result = calculate_step_up_sip(1000, 3, 10, 20)
        expected = 12 * (1000 + 1200 + 1440)

        assert result.total_investment == pytest.approx(expected)
        assert result.monthly_data[-1].investment == pytest.approx(expected)

    def test_value_recurrence(self):
        rate = 12 / 1200
        value = 0.0
        for point in calculate_step_up_sip(2000, 2, 12, 15).monthly_data:
            contribution = step_up_contribution(2000, 15, point.month)
            value = value * (1 + rate) + contribution * (1 + rate)
            assert point.value == pytest.approx(value)

    def test_zero_step_up_matches_plain_sip(self):
        step_up = calculate_step_up_sip(5000, 10, 12, 0)
        plain = calculate_sip(5000, 10, 12)

        assert step_up.total_investment == pytest.approx(plain.total_investment)
        assert step_up.total_value == pytest.approx(plain.total_value, rel=1e-9)

    def test_step_up_beats_flat_sip(self):
        step_up = calculate_step_up_sip(5000, 10, 12, 10)
        plain = calculate_sip(5000, 10, 12)

        assert step_up.total_value > plain.total_value
        assert step_up.total_investment > plain.total_investment

    def test_zero_rate_value_equals_investment(self):
        result = calculate_step_up_sip(1000, 2, 0, 10)
        assert result.total_value == pytest.approx(result.total_investment)
        assert result.expected_returns == pytest.approx(0.0)

    def test_series_length(self):
        assert len(calculate_step_up_sip(1000, 7, 9, 5).monthly_data) == 84
        assert len(list(iter_step_up_months(1000, 0, 9, 5))) == 1
