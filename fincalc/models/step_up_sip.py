"""
Step-up SIP projection.

The monthly contribution grows by ``step_up_percent`` once every twelve
months. No closed form is available once the contribution changes, so the
portfolio value is carried forward month by month: the previous balance and
this month's contribution both compound for one month.
"""

import logging
from typing import Iterator

from .rates import monthly_rate, total_months
from .results import MonthlyPoint, StepUpSIPResult
from .sip import summarize_sip

logger = logging.getLogger(__name__)


def step_up_contribution(
    monthly_investment: float, step_up_percent: float, month: int
) -> float:
    """
    Contribution made in ``month`` (1-based).

    The amount is constant within each 12-month block and is multiplied by
    ``1 + step_up_percent / 100`` at the start of every new block.
    """
    completed_years = (month - 1) // 12
    return monthly_investment * (1 + step_up_percent / 100) ** completed_years


def iter_step_up_months(
    monthly_investment: float,
    years: float,
    expected_return: float,
    step_up_percent: float,
) -> Iterator[MonthlyPoint]:
    """Yield the step-up projection one month at a time, in month order."""
    rate = monthly_rate(expected_return)
    invested = 0.0
    value = 0.0
    for month in range(1, total_months(years) + 1):
        contribution = step_up_contribution(monthly_investment, step_up_percent, month)
        invested += contribution
        value = value * (1 + rate) + contribution * (1 + rate)
        yield MonthlyPoint(month=month, investment=invested, value=value)


def calculate_step_up_sip(
    monthly_investment: float,
    years: float,
    expected_return: float,
    step_up_percent: float,
) -> StepUpSIPResult:
    """
    Project an SIP whose contribution increases every year.

    Args:
        monthly_investment: Contribution during the first year
        years: Investment horizon in years
        expected_return: Expected annual return in percent
        step_up_percent: Yearly increase of the contribution in percent

    Returns:
        StepUpSIPResult; total_investment is the sum of the stepped contributions
    """
    logger.debug(
        f"Calculating step-up SIP: monthly={monthly_investment}, years={years}, "
        f"return={expected_return}%, step_up={step_up_percent}%"
    )
    monthly_data = list(
        iter_step_up_months(monthly_investment, years, expected_return, step_up_percent)
    )
    return StepUpSIPResult(step_up_percent=step_up_percent, **summarize_sip(monthly_data))
