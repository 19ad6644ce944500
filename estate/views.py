from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Any, Dict, List

from django.http import JsonResponse
from django.shortcuts import render
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods, require_POST

from arvskifte.calc import calculate
from arvskifte.errors import CalculationError
from arvskifte.io_store import case_from_dict
from arvskifte.models import CalculationResult

from .forms import CaseForm

logger = logging.getLogger(__name__)


# -------------------------------
# Helpers
# -------------------------------


def _result_payload(result: CalculationResult) -> Dict[str, Any]:
    return {
        "totalAssetsValue": result.total_assets_value,
        "distributableAmount": result.distributable_amount,
        "allocatedAssetValue": result.allocated_asset_value,
        "allocatedByBeneficiary": result.allocated_by_beneficiary,
        "perBeneficiary": result.per_beneficiary,
        "isValid": result.is_valid,
        "totalPercentage": result.distribution.total_percentage,
    }


def _summary_rows(result: CalculationResult) -> List[Dict[str, Any]]:
    rows = []
    for r in result.distribution.rows:
        rows.append(
            {
                "name": r.name or r.beneficiary_id,
                "percentage": r.percentage,
                "amount": r.amount,
                "allocated": result.allocated_by_beneficiary.get(r.beneficiary_id, Decimal("0")),
            }
        )
    return rows


# -------------------------------
# API
# -------------------------------


@csrf_exempt
@require_POST
def calculate_api(request):
    try:
        data = json.loads(request.body.decode("utf-8") or "{}")
        result = calculate(case_from_dict(data))
    except (ValueError, ArithmeticError, CalculationError) as exc:
        logger.info("Beräkning avvisad: %s", exc)
        return JsonResponse({"error": str(exc)}, status=400)
    return JsonResponse(_result_payload(result))


# -------------------------------
# Sammanställning
# -------------------------------


@require_http_methods(["GET", "POST"])
def summary(request):
    result = None
    if request.method == "POST":
        form = CaseForm(request.POST)
        if form.is_valid():
            result = calculate(form.cleaned_data["case"])
    else:
        form = CaseForm()

    context = {
        "form": form,
        "result": result,
        "rows": _summary_rows(result) if result else [],
    }
    return render(request, "estate/summary.html", context)
