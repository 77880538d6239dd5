"""
Calculator blueprint.

Exposes each calculator as a JSON endpoint. Request bodies are validated by
the matching form before the engine is called; responses use the camelCase
result shapes the charts consume.
"""

from typing import Any, Callable, Dict, List, Tuple, Type

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_camel

from fincalc.models import (
    EMIForm,
    SIPForm,
    SIPvsLumpsumForm,
    StepUpSIPForm,
    TargetSIPForm,
    calculate_emi,
    calculate_sip,
    calculate_sip_vs_lumpsum,
    calculate_step_up_sip,
    calculate_target_sip,
    yearly_breakdown,
)
from fincalc.models.forms import EMI_BOUNDS, SIP_BOUNDS
from fincalc.models.rates import total_months

calculators_bp = Blueprint("calculators", __name__, url_prefix="/api/calculators")


def _run_sip(form: SIPForm) -> Dict[str, Any]:
    result = calculate_sip(form.monthly_investment, form.years, form.expected_return)
    return result.model_dump(by_alias=True)


def _run_emi(form: EMIForm) -> Dict[str, Any]:
    result = calculate_emi(form.loan_amount, form.interest_rate, form.tenure_in_years)
    data = result.model_dump(by_alias=True)
    data["totalMonths"] = total_months(form.tenure_in_years)
    data["yearlyBreakdown"] = [
        year.model_dump(by_alias=True) for year in yearly_breakdown(result)
    ]
    return data


def _run_target_sip(form: TargetSIPForm) -> Dict[str, Any]:
    result = calculate_target_sip(form.target_amount, form.years, form.expected_return)
    return result.model_dump(by_alias=True)


def _run_step_up_sip(form: StepUpSIPForm) -> Dict[str, Any]:
    result = calculate_step_up_sip(
        form.monthly_investment,
        form.years,
        form.expected_return,
        form.step_up_percent,
    )
    return result.model_dump(by_alias=True)


def _run_sip_vs_lumpsum(form: SIPvsLumpsumForm) -> Dict[str, Any]:
    result = calculate_sip_vs_lumpsum(
        form.monthly_investment,
        form.years,
        form.expected_return,
        form.lumpsum_amount,
    )
    return result.model_dump(by_alias=True)


# name -> (form, runner, input bounds)
CALCULATORS: Dict[
    str,
    Tuple[Type[BaseModel], Callable[[Any], Dict[str, Any]], Dict[str, Tuple[float, float]]],
] = {
    "sip": (SIPForm, _run_sip, SIP_BOUNDS),
    "emi": (EMIForm, _run_emi, EMI_BOUNDS),
    "target-sip": (TargetSIPForm, _run_target_sip, {}),
    "step-up-sip": (StepUpSIPForm, _run_step_up_sip, SIP_BOUNDS),
    "sip-vs-lumpsum": (SIPvsLumpsumForm, _run_sip_vs_lumpsum, {}),
}


def _format_errors(error: ValidationError) -> List[Dict[str, str]]:
    """Flatten a pydantic error into field/message pairs."""
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
        }
        for err in error.errors()
    ]


@calculators_bp.route("", methods=["GET"])
def list_calculators() -> Any:
    """List the available calculators and the bounds of their inputs.

    Returns:
        JSON response with one entry per calculator
    """
    calculators = []
    for name, (form_cls, _, bounds) in CALCULATORS.items():
        schema = form_cls.model_json_schema(by_alias=True)
        calculators.append(
            {
                "name": name,
                "url": f"{calculators_bp.url_prefix}/{name}",
                "fields": list(schema["properties"].keys()),
                "required": schema.get("required", []),
                "bounds": {
                    to_camel(field): {
                        "min": low,
                        "max": high,
                    }
                    for field, (low, high) in bounds.items()
                },
            }
        )
    return jsonify({"calculators": calculators}), 200


@calculators_bp.route("/<string:name>", methods=["POST"])
def run_calculator(name: str) -> Any:
    """Validate the request body and run a calculator.

    Args:
        name: Calculator name, e.g. ``sip`` or ``emi``

    Returns:
        JSON response with the calculation result
    """
    if name not in CALCULATORS:
        return jsonify({"error": "Calculator not found"}), 404

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON body"}), 400

    form_cls, runner, _ = CALCULATORS[name]
    try:
        form = form_cls.model_validate(data)
    except ValidationError as e:
        return jsonify({"error": "Validation failed", "details": _format_errors(e)}), 400

    try:
        return jsonify(runner(form)), 200
    except Exception as e:
        current_app.logger.error(f"Error running {name} calculator: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500
