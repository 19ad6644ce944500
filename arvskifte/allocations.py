from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .models import AllocationRecord, AssetRecord

logger = logging.getLogger(__name__)


class AllocationBook:
    """
    Specifika tilldelningar nycklade på tillgångens id.

    Högst en tilldelning per tillgång: en ny tilldelning för samma tillgång
    ersätter den tidigare, den läggs aldrig ihop med den.
    """

    def __init__(self, records: Iterable[AllocationRecord] = ()) -> None:
        self._by_asset: Dict[str, AllocationRecord] = {}
        for record in records:
            self.assign(record)

    @classmethod
    def coerce(cls, allocations: Union["AllocationBook", Iterable[AllocationRecord], None]) -> "AllocationBook":
        if isinstance(allocations, AllocationBook):
            return allocations
        return cls(allocations or ())

    def assign(self, record: AllocationRecord) -> None:
        # Ta bort först så att den nya hamnar sist, som i inmatningsordningen.
        self._by_asset.pop(record.asset_id, None)
        self._by_asset[record.asset_id] = record

    def remove(self, asset_id: str) -> None:
        self._by_asset.pop(asset_id, None)

    def get(self, asset_id: str) -> Optional[AllocationRecord]:
        return self._by_asset.get(asset_id)

    def records(self) -> List[AllocationRecord]:
        return list(self._by_asset.values())

    def __contains__(self, asset_id: object) -> bool:
        return asset_id in self._by_asset

    def __iter__(self) -> Iterator[AllocationRecord]:
        return iter(list(self._by_asset.values()))

    def __len__(self) -> int:
        return len(self._by_asset)


def _resolved(
    assets: Iterable[AssetRecord], allocations
) -> Iterator[Tuple[AllocationRecord, Decimal]]:
    book = AllocationBook.coerce(allocations)
    by_id = {a.id: a for a in assets}
    for record in book:
        asset = by_id.get(record.asset_id)
        if asset is None:
            logger.warning("Tilldelning pekar på okänd tillgång %s; ignoreras.", record.asset_id)
            continue
        if asset.to_remain:
            continue
        yield record, record.amount if record.amount is not None else asset.amount


def allocated_asset_value(assets: Iterable[AssetRecord], allocations) -> Decimal:
    """Summa specifikt tilldelat belopp. Endast information; dras inte av en gång till."""
    return sum((amount for _, amount in _resolved(assets, allocations)), Decimal("0"))


def allocated_by_beneficiary(assets: Iterable[AssetRecord], allocations) -> Dict[str, Decimal]:
    totals: Dict[str, Decimal] = {}
    for record, amount in _resolved(assets, allocations):
        totals[record.beneficiary_id] = totals.get(record.beneficiary_id, Decimal("0")) + amount
    return totals
