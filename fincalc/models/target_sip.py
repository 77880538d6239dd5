"""Solve for the monthly SIP contribution that reaches a target corpus."""

import logging

from .rates import annuity_due_factor, monthly_rate, total_months
from .results import TargetSIPResult
from .sip import iter_sip_months, summarize_sip

logger = logging.getLogger(__name__)


def required_monthly_investment(
    target_amount: float, years: float, expected_return: float
) -> float:
    """
    Invert the annuity-due formula for the monthly contribution.

    At a zero rate the factor degrades to the month count, so the
    contribution is simply ``target_amount / months``.
    """
    factor = annuity_due_factor(monthly_rate(expected_return), total_months(years))
    return target_amount / factor


def calculate_target_sip(
    target_amount: float, years: float, expected_return: float
) -> TargetSIPResult:
    """
    Find the SIP that lands on ``target_amount`` and project it.

    Args:
        target_amount: Corpus wanted at the end of the horizon
        years: Investment horizon in years
        expected_return: Expected annual return in percent

    Returns:
        TargetSIPResult whose total_value equals the target up to rounding
    """
    monthly_investment = required_monthly_investment(
        target_amount, years, expected_return
    )
    logger.debug(
        f"Target SIP of {target_amount} over {years} years at {expected_return}% "
        f"requires {monthly_investment:.2f} per month"
    )
    monthly_data = list(iter_sip_months(monthly_investment, years, expected_return))
    return TargetSIPResult(
        required_monthly_investment=monthly_investment,
        **summarize_sip(monthly_data),
    )
