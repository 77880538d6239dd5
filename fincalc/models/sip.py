"""
Systematic Investment Plan (SIP) projection.

Contributions are made at the start of every month and compound through the
end of the month (annuity-due). Each month's value is computed from the closed
form rather than from the previous month, so the series carries no
accumulated rounding drift.
"""

import logging
from typing import Any, Dict, Iterator, List

from .rates import annuity_due_factor, monthly_rate, total_months
from .results import MonthlyPoint, SIPResult

logger = logging.getLogger(__name__)


def iter_sip_months(
    monthly_investment: float, years: float, expected_return: float
) -> Iterator[MonthlyPoint]:
    """
    Yield the SIP projection one month at a time.

    Args:
        monthly_investment: Amount contributed at the start of every month
        years: Investment horizon in years
        expected_return: Expected annual return in percent

    Yields:
        MonthlyPoint for months 1 through ``total_months(years)``
    """
    rate = monthly_rate(expected_return)
    for month in range(1, total_months(years) + 1):
        yield MonthlyPoint(
            month=month,
            investment=monthly_investment * month,
            value=monthly_investment * annuity_due_factor(rate, month),
        )


def summarize_sip(monthly_data: List[MonthlyPoint]) -> Dict[str, Any]:
    """Build SIP summary totals from a materialized monthly series."""
    last = monthly_data[-1]
    return {
        "total_investment": last.investment,
        "expected_returns": last.value - last.investment,
        "total_value": last.value,
        "monthly_data": monthly_data,
    }


def calculate_sip(
    monthly_investment: float, years: float, expected_return: float
) -> SIPResult:
    """
    Project a fixed monthly SIP.

    Inputs are trusted: range checks belong to the caller, and zero or
    negative values give degenerate but valid results.

    Args:
        monthly_investment: Amount contributed at the start of every month
        years: Investment horizon in years
        expected_return: Expected annual return in percent

    Returns:
        SIPResult with totals and one point per month
    """
    logger.debug(
        f"Calculating SIP: monthly={monthly_investment}, years={years}, "
        f"return={expected_return}%"
    )
    monthly_data = list(iter_sip_months(monthly_investment, years, expected_return))
    return SIPResult(**summarize_sip(monthly_data))
