from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from .allocations import AllocationBook
from .models import AssetRecord
from .rules import is_debt

ZERO = Decimal("0")


def signed_value(asset: AssetRecord) -> Decimal:
    return -asset.amount if is_debt(asset.asset_type) else asset.amount


def total_estate_value(assets: Iterable[AssetRecord]) -> Decimal:
    """Bruttototal utan hänsyn till låsta eller tilldelade belopp."""
    return sum((signed_value(a) for a in assets), ZERO)


def distributable_contribution(asset: AssetRecord, allocations=None) -> Decimal:
    value = signed_value(asset)

    if asset.to_remain:
        if asset.amount_to_remain is None:
            return ZERO
        if is_debt(asset.asset_type):
            portion = ZERO if asset.amount_to_remain >= asset.amount else value + asset.amount_to_remain
        else:
            portion = value - asset.amount_to_remain
        return max(ZERO, portion)

    if asset.id in AllocationBook.coerce(allocations):
        return ZERO

    return value


def distributable_amount(assets: Iterable[AssetRecord], allocations=None) -> Decimal:
    book = AllocationBook.coerce(allocations)
    total = sum((distributable_contribution(a, book) for a in assets), ZERO)
    return max(ZERO, total)
