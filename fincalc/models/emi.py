"""
Equated Monthly Installment (EMI) loan amortization.

The installment comes from the standard amortization formula and stays fixed.
The schedule is a forward recurrence: each month's interest is charged on the
balance left by the previous month, so months must be processed in order.
"""

import logging
from typing import Iterator, List

from .rates import is_zero_rate, monthly_rate, total_months
from .results import EMIMonthlyPoint, EMIResult, EMIYearlyBreakdown

logger = logging.getLogger(__name__)


def calculate_installment(principal_amount: float, rate: float, months: int) -> float:
    """
    Calculate the fixed monthly installment.

    Args:
        principal_amount: Loan principal
        rate: Monthly decimal rate
        months: Number of installments

    Returns:
        ``P * r * (1 + r)^N / ((1 + r)^N - 1)``, or ``P / N`` at a zero rate
    """
    if is_zero_rate(rate):
        return principal_amount / months
    growth = (1 + rate) ** months
    return principal_amount * rate * growth / (growth - 1)


def iter_emi_months(
    principal_amount: float, interest_rate: float, tenure_in_years: float
) -> Iterator[EMIMonthlyPoint]:
    """
    Yield the amortization schedule one installment at a time.

    The reported balance is clamped at zero so that floating-point residue
    never shows up as a negative balance.
    """
    rate = monthly_rate(interest_rate)
    months = total_months(tenure_in_years)
    emi = calculate_installment(principal_amount, rate, months)

    remaining_loan = principal_amount
    for month in range(1, months + 1):
        interest = remaining_loan * rate
        principal = emi - interest
        remaining_loan -= principal
        yield EMIMonthlyPoint(
            month=month,
            emi=emi,
            principal=principal,
            interest=interest,
            remaining_loan=max(0.0, remaining_loan),
        )


def calculate_emi(
    principal_amount: float, interest_rate: float, tenure_in_years: float
) -> EMIResult:
    """
    Calculate the EMI and the full amortization schedule of a loan.

    Args:
        principal_amount: Loan principal
        interest_rate: Annual interest rate in percent
        tenure_in_years: Loan tenure in years

    Returns:
        EMIResult; total_payment is ``emi * months`` by construction
    """
    logger.debug(
        f"Calculating EMI: principal={principal_amount}, rate={interest_rate}%, "
        f"tenure={tenure_in_years} years"
    )
    monthly_data = list(
        iter_emi_months(principal_amount, interest_rate, tenure_in_years)
    )
    months = len(monthly_data)
    emi = monthly_data[0].emi

    total_interest = 0.0
    for point in monthly_data:
        total_interest += point.interest

    return EMIResult(
        emi=emi,
        total_interest=total_interest,
        total_payment=emi * months,
        monthly_data=monthly_data,
    )


def yearly_breakdown(result: EMIResult) -> List[EMIYearlyBreakdown]:
    """
    Aggregate an amortization schedule into loan years.

    Months 1-12 form year 1, months 13-24 year 2, and so on; a trailing
    partial year gets its own entry.
    """
    years: List[EMIYearlyBreakdown] = []
    for start in range(0, len(result.monthly_data), 12):
        block = result.monthly_data[start : start + 12]
        years.append(
            EMIYearlyBreakdown(
                year=start // 12 + 1,
                principal=sum(point.principal for point in block),
                interest=sum(point.interest for point in block),
                remaining_loan=block[-1].remaining_loan,
            )
        )
    return years
