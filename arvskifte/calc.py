from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, Iterable, List

from .allocations import AllocationBook, allocated_by_beneficiary
from .models import (
    HUNDRED,
    AssetRecord,
    BeneficiaryShare,
    CalculationResult,
    Distributable,
    DistributionResult,
    EstateCase,
    ResultRow,
    Valuation,
    to_decimal,
)
from .valuation import distributable_amount, total_estate_value

logger = logging.getLogger(__name__)


def total_percentage(shares: Iterable[BeneficiaryShare]) -> Decimal:
    return sum((s.percentage for s in shares), Decimal("0"))


def validate_shares(shares: Iterable[BeneficiaryShare]) -> bool:
    # Exakt 100, ingen tolerans: 99,9 och 100,1 är båda ogiltiga.
    return total_percentage(shares) == HUNDRED


def distribution_for(share: BeneficiaryShare, distributable: Decimal) -> Decimal:
    return distributable * share.percentage / HUNDRED


def compute_valuation(assets: Iterable[AssetRecord]) -> Valuation:
    return Valuation(total_assets_value=total_estate_value(assets))


def compute_distributable(assets: Iterable[AssetRecord], allocations=None) -> Distributable:
    assets = list(assets)
    book = AllocationBook.coerce(allocations)
    by_beneficiary = allocated_by_beneficiary(assets, book)
    result = Distributable(
        distributable_amount=distributable_amount(assets, book),
        allocated_asset_value=sum(by_beneficiary.values(), Decimal("0")),
        allocated_by_beneficiary=by_beneficiary,
    )
    logger.debug(
        "Fördelningsbart belopp %s, specifikt tilldelat %s",
        result.distributable_amount,
        result.allocated_asset_value,
    )
    return result


def compute_distribution(distributable, shares: Iterable[BeneficiaryShare]) -> DistributionResult:
    """
    Fördelar det fördelningsbara beloppet enligt procentandelarna.

    Ogiltig andelssumma är inget undantag: resultatet markeras is_valid=False
    och inga belopp beräknas.
    """
    distributable = to_decimal(distributable, "distributableAmount")
    shares = list(shares)
    total_pct = total_percentage(shares)

    if total_pct != HUNDRED:
        logger.info("Andelarna summerar till %s %%, inte 100 %%.", total_pct)
        return DistributionResult(per_beneficiary={}, is_valid=False, total_percentage=total_pct, rows=[])

    per_beneficiary: Dict[str, Decimal] = {}
    rows: List[ResultRow] = []
    for share in shares:
        amount = distribution_for(share, distributable)
        per_beneficiary[share.id] = per_beneficiary.get(share.id, Decimal("0")) + amount
        rows.append(ResultRow(beneficiary_id=share.id, name=share.name, percentage=share.percentage, amount=amount))

    return DistributionResult(per_beneficiary=per_beneficiary, is_valid=True, total_percentage=total_pct, rows=rows)


def calculate(case: EstateCase) -> CalculationResult:
    valuation = compute_valuation(case.assets)
    pool = compute_distributable(case.assets, case.allocations)
    distribution = compute_distribution(pool.distributable_amount, case.shares)
    return CalculationResult(
        total_assets_value=valuation.total_assets_value,
        allocated_asset_value=pool.allocated_asset_value,
        distributable_amount=pool.distributable_amount,
        allocated_by_beneficiary=pool.allocated_by_beneficiary,
        distribution=distribution,
    )
