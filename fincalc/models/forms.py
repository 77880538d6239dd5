"""
Input forms for the calculators.

The engine trusts its inputs; these models are the layer in front of it that
enforces the ranges a user may enter. Keys are accepted in camelCase (as sent
by the web forms) or snake_case. NaN and infinite numbers are rejected.
"""

import math
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# (minimum, maximum) accepted by the bounded forms
SIP_BOUNDS: Dict[str, Tuple[float, float]] = {
    "monthly_investment": (500, 10_000_000),
    "years": (1, 30),
    "expected_return": (1, 30),
}

EMI_BOUNDS: Dict[str, Tuple[float, float]] = {
    "loan_amount": (10_000, 100_000_000),
    "interest_rate": (1, 30),
    "tenure_in_years": (1, 30),
}


class CalculatorForm(BaseModel):
    """Base class for calculator input forms."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
        extra="ignore",
    )


class SIPForm(CalculatorForm):
    """Inputs of the SIP calculator."""

    monthly_investment: float = Field(
        ...,
        ge=SIP_BOUNDS["monthly_investment"][0],
        le=SIP_BOUNDS["monthly_investment"][1],
        description="Monthly contribution",
    )
    years: float = Field(
        ...,
        ge=SIP_BOUNDS["years"][0],
        le=SIP_BOUNDS["years"][1],
        description="Investment period in years",
    )
    expected_return: float = Field(
        ...,
        ge=SIP_BOUNDS["expected_return"][0],
        le=SIP_BOUNDS["expected_return"][1],
        description="Expected annual return (%)",
    )


class StepUpSIPForm(SIPForm):
    """Inputs of the step-up SIP calculator."""

    step_up_percent: float = Field(
        ..., ge=0, description="Yearly increase of the contribution (%)"
    )


class EMIForm(CalculatorForm):
    """Inputs of the EMI calculator."""

    loan_amount: float = Field(
        ...,
        ge=EMI_BOUNDS["loan_amount"][0],
        le=EMI_BOUNDS["loan_amount"][1],
        description="Loan principal",
    )
    interest_rate: float = Field(
        ...,
        ge=EMI_BOUNDS["interest_rate"][0],
        le=EMI_BOUNDS["interest_rate"][1],
        description="Annual interest rate (%)",
    )
    tenure_in_years: float = Field(
        ...,
        ge=EMI_BOUNDS["tenure_in_years"][0],
        le=EMI_BOUNDS["tenure_in_years"][1],
        description="Loan tenure in years",
    )


class TargetSIPForm(CalculatorForm):
    """Inputs of the target-based SIP calculator."""

    target_amount: float = Field(..., gt=0, description="Corpus to reach")
    years: float = Field(..., gt=0, description="Years to reach the target")
    expected_return: float = Field(..., gt=0, description="Expected annual return (%)")


class SIPvsLumpsumForm(CalculatorForm):
    """Inputs of the SIP versus lumpsum comparison."""

    monthly_investment: float = Field(..., gt=0, description="Monthly contribution")
    years: float = Field(..., gt=0, description="Investment period in years")
    expected_return: float = Field(..., gt=0, description="Expected annual return (%)")
    lumpsum_amount: Optional[float] = Field(
        default=None, description="One-time investment, defaults to the SIP total"
    )

    @field_validator("lumpsum_amount", mode="before")
    @classmethod
    def normalize_lumpsum(cls, v: Any) -> Any:
        """Treat NaN and infinite amounts as not provided."""
        if isinstance(v, float) and not math.isfinite(v):
            return None
        return v
