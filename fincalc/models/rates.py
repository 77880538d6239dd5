"""
Periodic rate helpers shared by the calculators.

Annual rates arrive as percentages (12 means 12% a year) and are converted to
monthly decimal rates. All projections size their horizon with
``total_months`` so every series has the same length for the same ``years``.
"""

import math

# Rates closer to zero than this are treated as exactly zero.
ZERO_RATE_EPSILON = 1e-12


def monthly_rate(annual_percent: float) -> float:
    """Convert an annual percentage rate into a monthly decimal rate."""
    return annual_percent / (12 * 100)


def total_months(years: float) -> int:
    """
    Number of monthly periods in a horizon of ``years``.

    Fractional years are rounded to the nearest month and the horizon is never
    shorter than a single month. NaN and infinite horizons collapse to that
    single month.
    """
    months = years * 12
    if not math.isfinite(months):
        return 1
    return max(1, int(round(months)))


def is_zero_rate(rate: float) -> bool:
    """Check whether a periodic rate should take the no-growth branch."""
    return abs(rate) < ZERO_RATE_EPSILON


def annuity_due_factor(rate: float, months: int) -> float:
    """
    Future value of 1 paid at the start of each month for ``months`` months.

    Args:
        rate: Monthly decimal rate
        months: Number of contributions

    Returns:
        ``((1 + r)^m - 1) / r * (1 + r)``, or ``m`` when the rate is zero
    """
    if is_zero_rate(rate):
        return float(months)
    growth = (1 + rate) ** months
    return (growth - 1) / rate * (1 + rate)
