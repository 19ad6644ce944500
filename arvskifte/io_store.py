from __future__ import annotations

import json
import os
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional

from .errors import StructuralInputError
from .models import AllocationRecord, AssetRecord, BeneficiaryShare, EstateCase

CASE_FILE = Path(os.getenv("ARVSKIFTE_CASE_FILE", "arvskifte.json"))


def _require(item: Dict[str, Any], key: str, where: str) -> Any:
    if not isinstance(item, dict):
        raise StructuralInputError(where, "måste vara ett objekt")
    if item.get(key) in (None, ""):
        raise StructuralInputError(f"{where}.{key}", "värde saknas")
    return item[key]


def _list(data: Dict[str, Any], key: str) -> List[Any]:
    raw = data.get(key, [])
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise StructuralInputError(key, "måste vara en lista")
    return raw


def _str_or_none(value: Optional[Decimal]) -> Optional[str]:
    return None if value is None else str(value)


def _flag(value: Any, where: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise StructuralInputError(where, "måste vara true eller false")
    return value


def asset_from_dict(item: Dict[str, Any], index: int = 0) -> AssetRecord:
    where = f"assets[{index}]"
    return AssetRecord(
        id=str(_require(item, "id", where)),
        bank=str(item.get("bank", "")),
        asset_type=str(_require(item, "assetType", where)),
        amount=_require(item, "amount", where),
        to_remain=_flag(item.get("toRemain"), f"{where}.toRemain"),
        amount_to_remain=item.get("amountToRemain"),
        where=where,
    )


def allocation_from_dict(item: Dict[str, Any], index: int = 0) -> AllocationRecord:
    where = f"allocations[{index}]"
    return AllocationRecord(
        asset_id=str(_require(item, "assetId", where)),
        beneficiary_id=str(_require(item, "beneficiaryId", where)),
        amount=item.get("amount"),
        where=where,
    )


def share_from_dict(item: Dict[str, Any], index: int = 0) -> BeneficiaryShare:
    where = f"shares[{index}]"
    return BeneficiaryShare(
        id=str(_require(item, "id", where)),
        name=str(item.get("name", "")),
        percentage=_require(item, "percentage", where),
        where=where,
    )


def case_from_dict(data: Dict[str, Any]) -> EstateCase:
    if not isinstance(data, dict):
        raise StructuralInputError("case", "måste vara ett objekt")
    return EstateCase(
        assets=[asset_from_dict(item, i) for i, item in enumerate(_list(data, "assets"))],
        allocations=[allocation_from_dict(item, i) for i, item in enumerate(_list(data, "allocations"))],
        shares=[share_from_dict(item, i) for i, item in enumerate(_list(data, "shares"))],
    )


def case_to_dict(case: EstateCase) -> Dict[str, Any]:
    return {
        "assets": [
            {
                "id": a.id,
                "bank": a.bank,
                "assetType": a.asset_type,
                "amount": str(a.amount),
                "toRemain": a.to_remain,
                "amountToRemain": _str_or_none(a.amount_to_remain),
            }
            for a in case.assets
        ],
        "allocations": [
            {"assetId": r.asset_id, "beneficiaryId": r.beneficiary_id, "amount": _str_or_none(r.amount)}
            for r in case.allocations
        ],
        "shares": [{"id": s.id, "name": s.name, "percentage": str(s.percentage)} for s in case.shares],
    }


def load_case(path: Optional[Path] = None) -> EstateCase:
    path = Path(path or CASE_FILE)
    if not path.exists():
        raise FileNotFoundError(f"{path} hittades inte.")
    return case_from_dict(json.loads(path.read_text(encoding="utf-8")))


def save_case(case: EstateCase, path: Optional[Path] = None) -> Path:
    path = Path(path or CASE_FILE)
    path.write_text(json.dumps(case_to_dict(case), indent=2, ensure_ascii=False), encoding="utf-8")
    return path
