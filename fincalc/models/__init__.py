"""Financial calculation engine and its input forms."""

from .comparison import calculate_lumpsum, calculate_sip_vs_lumpsum
from .emi import calculate_emi, calculate_installment, yearly_breakdown
from .forms import (
    EMIForm,
    SIPForm,
    SIPvsLumpsumForm,
    StepUpSIPForm,
    TargetSIPForm,
)
from .results import (
    EMIMonthlyPoint,
    EMIResult,
    EMIYearlyBreakdown,
    LumpsumMonthlyPoint,
    LumpsumResult,
    MonthlyPoint,
    SIPResult,
    SIPvsLumpsumResult,
    StepUpSIPResult,
    TargetSIPResult,
)
from .sip import calculate_sip
from .step_up_sip import calculate_step_up_sip, step_up_contribution
from .target_sip import calculate_target_sip, required_monthly_investment

__all__ = [
    "calculate_sip",
    "calculate_emi",
    "calculate_installment",
    "yearly_breakdown",
    "calculate_target_sip",
    "required_monthly_investment",
    "calculate_step_up_sip",
    "step_up_contribution",
    "calculate_lumpsum",
    "calculate_sip_vs_lumpsum",
    "MonthlyPoint",
    "SIPResult",
    "TargetSIPResult",
    "StepUpSIPResult",
    "EMIMonthlyPoint",
    "EMIResult",
    "EMIYearlyBreakdown",
    "LumpsumMonthlyPoint",
    "LumpsumResult",
    "SIPvsLumpsumResult",
    "SIPForm",
    "StepUpSIPForm",
    "EMIForm",
    "TargetSIPForm",
    "SIPvsLumpsumForm",
]
