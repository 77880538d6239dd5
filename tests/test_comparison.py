"""Tests for the SIP versus lumpsum comparison."""

import math

import pytest

from fincalc.models.comparison import (
    calculate_lumpsum,
    calculate_sip_vs_lumpsum,
    iter_lumpsum_months,
)
from fincalc.models.results import SIPvsLumpsumResult
from fincalc.models.sip import calculate_sip


class TestCalculateLumpsum:
    """Test cases for lumpsum growth."""

    def test_compounds_monthly(self):
        result = calculate_lumpsum(100000, 10, 12)

        assert result.initial_amount == 100000
        assert len(result.monthly_data) == 120
        assert result.monthly_data[0].value == pytest.approx(101000)
        assert result.total_value == pytest.approx(100000 * 1.01**120)

    def test_zero_rate_keeps_value(self):
        result = calculate_lumpsum(50000, 3, 0)
        assert all(point.value == 50000 for point in result.monthly_data)

    def test_iterator_is_ordered(self):
        months = [point.month for point in iter_lumpsum_months(1000, 2, 8)]
        assert months == list(range(1, 25))


class TestCalculateSIPvsLumpsum:
    """Test cases for calculate_sip_vs_lumpsum."""

    def test_default_lumpsum_equals_sip_outlay(self):
        result = calculate_sip_vs_lumpsum(5000, 10, 12)

        assert isinstance(result, SIPvsLumpsumResult)
        assert result.lumpsum.initial_amount == 5000 * 10 * 12
        assert result.lumpsum.initial_amount == result.sip.total_investment

    @pytest.mark.parametrize("lumpsum", [0, -100, None])
    def test_non_positive_lumpsum_uses_default(self, lumpsum):
        result = calculate_sip_vs_lumpsum(2000, 5, 10, lumpsum)
        assert result.lumpsum.initial_amount == 2000 * 60

    def test_explicit_lumpsum(self):
        result = calculate_sip_vs_lumpsum(5000, 10, 12, 250000)

        assert result.lumpsum.initial_amount == 250000
        assert result.lumpsum.total_value == pytest.approx(250000 * 1.01**120)

    def test_sip_side_matches_calculate_sip(self):
        result = calculate_sip_vs_lumpsum(5000, 10, 12)
        assert result.sip == calculate_sip(5000, 10, 12)

    def test_same_horizon_on_both_sides(self):
        result = calculate_sip_vs_lumpsum(3000, 7, 11)
        assert len(result.sip.monthly_data) == len(result.lumpsum.monthly_data) == 84

    def test_equal_outlay_lumpsum_grows_more(self):
        """Money invested up front compounds longer than monthly contributions."""
        result = calculate_sip_vs_lumpsum(5000, 10, 12)
        assert result.lumpsum.total_value > result.sip.total_value

    def test_serializes_nested_shapes(self):
        data = calculate_sip_vs_lumpsum(1000, 1, 12).model_dump(by_alias=True)

        assert set(data) == {"sip", "lumpsum"}
        assert set(data["lumpsum"]) == {"initialAmount", "totalValue", "monthlyData"}
        assert set(data["lumpsum"]["monthlyData"][0]) == {"month", "value"}
        assert not math.isnan(data["lumpsum"]["totalValue"])
