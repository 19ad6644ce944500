"""Beräkningsmotor för arvskifte: värdering, låsta belopp, specifika tilldelningar och procentfördelning."""

from .allocations import AllocationBook
from .calc import (
    calculate,
    compute_distributable,
    compute_distribution,
    compute_valuation,
    distribution_for,
    validate_shares,
)
from .errors import CalculationError, StructuralInputError
from .models import (
    AllocationRecord,
    AssetRecord,
    BeneficiaryShare,
    CalculationResult,
    EstateCase,
)

__all__ = [
    "AllocationBook",
    "AllocationRecord",
    "AssetRecord",
    "BeneficiaryShare",
    "CalculationError",
    "CalculationResult",
    "EstateCase",
    "StructuralInputError",
    "calculate",
    "compute_distributable",
    "compute_distribution",
    "compute_valuation",
    "distribution_for",
    "validate_shares",
]
