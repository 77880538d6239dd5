"""
Result structures returned by the calculation engine.

Every result is an immutable value created fresh for a single calculation.
Attributes are snake_case in Python and serialize with camelCase aliases
(``model_dump(by_alias=True)``), which is the shape the chart layer consumes.
Fields deliberately carry no range constraints: degenerate inputs must still
produce a result.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ResultModel(BaseModel):
    """Base class for frozen, camelCase-serialized result values."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class MonthlyPoint(ResultModel):
    """One month of an SIP-style projection."""

    month: int = Field(..., description="Month index (1-based)")
    investment: float = Field(..., description="Cumulative amount contributed so far")
    value: float = Field(..., description="Projected portfolio value at this month")


class SIPResult(ResultModel):
    """Summary totals and monthly series of an SIP projection."""

    total_investment: float = Field(..., description="Total amount contributed")
    expected_returns: float = Field(
        ..., description="Gain over contributions (total_value - total_investment)"
    )
    total_value: float = Field(..., description="Portfolio value at the final month")
    monthly_data: List[MonthlyPoint] = Field(
        ..., description="Month-by-month projection in ascending month order"
    )


class TargetSIPResult(SIPResult):
    """SIP projection sized to reach a target corpus."""

    required_monthly_investment: float = Field(
        ..., description="Monthly contribution that lands on the target"
    )


class StepUpSIPResult(SIPResult):
    """SIP projection whose contribution grows once per year."""

    step_up_percent: float = Field(
        ..., description="Annual growth of the monthly contribution, in percent"
    )


class EMIMonthlyPoint(ResultModel):
    """One installment of a loan amortization schedule."""

    month: int = Field(..., description="Installment number (1-based)")
    emi: float = Field(..., description="Fixed monthly installment")
    principal: float = Field(..., description="Principal repaid this month")
    interest: float = Field(..., description="Interest charged this month")
    remaining_loan: float = Field(
        ..., description="Outstanding balance after this month, never below zero"
    )


class EMIResult(ResultModel):
    """Installment, totals and schedule of an amortizing loan."""

    emi: float = Field(..., description="Fixed monthly installment")
    total_interest: float = Field(..., description="Sum of all monthly interest")
    total_payment: float = Field(..., description="emi multiplied by the month count")
    monthly_data: List[EMIMonthlyPoint] = Field(
        ..., description="Amortization schedule in ascending month order"
    )


class EMIYearlyBreakdown(ResultModel):
    """Principal and interest paid during one year of a loan."""

    year: int = Field(..., description="Loan year (1-based)")
    principal: float = Field(..., description="Principal repaid during the year")
    interest: float = Field(..., description="Interest paid during the year")
    remaining_loan: float = Field(..., description="Balance at the end of the year")


class LumpsumMonthlyPoint(ResultModel):
    """One month of a lumpsum projection."""

    month: int = Field(..., description="Month index (1-based)")
    value: float = Field(..., description="Value of the lumpsum at this month")


class LumpsumResult(ResultModel):
    """Growth of a single up-front investment."""

    initial_amount: float = Field(..., description="Amount invested at month 0")
    total_value: float = Field(..., description="Value at the final month")
    monthly_data: List[LumpsumMonthlyPoint] = Field(
        ..., description="Month-by-month values in ascending month order"
    )


class SIPvsLumpsumResult(ResultModel):
    """Side-by-side SIP and lumpsum projections over the same horizon."""

    sip: SIPResult = Field(..., description="Monthly contribution projection")
    lumpsum: LumpsumResult = Field(..., description="Single investment projection")
