"""
SIP versus lumpsum comparison.

Both sides share the horizon and the expected return. When no lumpsum is
given, the lumpsum defaults to the total the SIP contributes, so the two
strategies put the same money to work.
"""

import logging
from typing import Iterator, Optional

from .rates import monthly_rate, total_months
from .results import LumpsumMonthlyPoint, LumpsumResult, SIPvsLumpsumResult
from .sip import calculate_sip

logger = logging.getLogger(__name__)


def iter_lumpsum_months(
    initial_amount: float, years: float, expected_return: float
) -> Iterator[LumpsumMonthlyPoint]:
    """Yield the value of a single investment compounded monthly."""
    rate = monthly_rate(expected_return)
    value = initial_amount
    for month in range(1, total_months(years) + 1):
        value *= 1 + rate
        yield LumpsumMonthlyPoint(month=month, value=value)


def calculate_lumpsum(
    initial_amount: float, years: float, expected_return: float
) -> LumpsumResult:
    """Project a lumpsum invested at month 0."""
    monthly_data = list(iter_lumpsum_months(initial_amount, years, expected_return))
    return LumpsumResult(
        initial_amount=initial_amount,
        total_value=monthly_data[-1].value,
        monthly_data=monthly_data,
    )


def calculate_sip_vs_lumpsum(
    monthly_investment: float,
    years: float,
    expected_return: float,
    lumpsum_amount: Optional[float] = None,
) -> SIPvsLumpsumResult:
    """
    Compare a monthly SIP with a one-time investment.

    Args:
        monthly_investment: SIP contribution per month
        years: Horizon in years
        expected_return: Expected annual return in percent
        lumpsum_amount: Up-front investment; missing or non-positive values
            default to ``monthly_investment * total_months(years)``

    Returns:
        SIPvsLumpsumResult with both projections
    """
    if lumpsum_amount is None or lumpsum_amount <= 0:
        lumpsum_amount = monthly_investment * total_months(years)
    logger.debug(
        f"Comparing SIP of {monthly_investment}/month with lumpsum of "
        f"{lumpsum_amount} over {years} years at {expected_return}%"
    )
    return SIPvsLumpsumResult(
        sip=calculate_sip(monthly_investment, years, expected_return),
        lumpsum=calculate_lumpsum(lumpsum_amount, years, expected_return),
    )
