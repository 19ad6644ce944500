from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Optional

from .errors import StructuralInputError

HUNDRED = Decimal("100")
# Samma tak per post som inmatningsformulären.
MAX_AMOUNT = Decimal("999999999")
# Yttre gräns för alla tal; håller summor och avrundning inom Decimal-kontextens precision.
MAX_MAGNITUDE = Decimal("1e15")


def to_decimal(value, field_name: str) -> Decimal:
    """Tolkar ett belopp eller en procentsats som Decimal, utan tyst NaN-spridning."""
    if value is None:
        raise StructuralInputError(field_name, "värde saknas")
    if isinstance(value, bool):
        raise StructuralInputError(field_name, "måste vara ett tal")
    if isinstance(value, Decimal):
        dec = value
    elif isinstance(value, (int, float, str)):
        try:
            dec = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise StructuralInputError(field_name, f"ogiltigt tal {value!r}") from exc
    else:
        raise StructuralInputError(field_name, f"ogiltig typ {type(value).__name__}")
    if not dec.is_finite():
        raise StructuralInputError(field_name, f"ogiltigt tal {value!r}")
    if abs(dec) > MAX_MAGNITUDE:
        raise StructuralInputError(field_name, f"talet är för stort ({value!r})")
    return dec


def _amount(value, field_name: str) -> Decimal:
    dec = to_decimal(value, field_name)
    if dec < 0:
        raise StructuralInputError(field_name, "får inte vara negativt")
    if dec > MAX_AMOUNT:
        raise StructuralInputError(field_name, f"får vara högst {MAX_AMOUNT}")
    return dec


@dataclass
class AssetRecord:
    """Konto, värdepapper eller lån i dödsboet. Beloppet lagras alltid som belopp utan tecken."""

    id: str
    bank: str
    asset_type: str
    amount: Decimal
    to_remain: bool = False
    amount_to_remain: Optional[Decimal] = None
    where: InitVar[Optional[str]] = None

    def __post_init__(self, where: Optional[str]) -> None:
        where = where or f"assets[{self.id}]"
        self.amount = _amount(self.amount, f"{where}.amount")
        self.to_remain = bool(self.to_remain)
        if self.amount_to_remain is not None:
            name = f"{where}.amountToRemain"
            self.amount_to_remain = to_decimal(self.amount_to_remain, name)
            if not Decimal("0") <= self.amount_to_remain <= self.amount:
                raise StructuralInputError(name, "måste ligga mellan 0 och beloppet")


@dataclass
class AllocationRecord:
    """Specifik tilldelning av en tillgång till en namngiven mottagare, utanför procentfördelningen."""

    asset_id: str
    beneficiary_id: str
    amount: Optional[Decimal] = None
    where: InitVar[Optional[str]] = None

    def __post_init__(self, where: Optional[str]) -> None:
        if self.amount is not None:
            self.amount = _amount(self.amount, f"{where or f'allocations[{self.asset_id}]'}.amount")


@dataclass
class BeneficiaryShare:
    id: str
    name: str
    percentage: Decimal  # 0-100
    where: InitVar[Optional[str]] = None

    def __post_init__(self, where: Optional[str]) -> None:
        name = f"{where or f'shares[{self.id}]'}.percentage"
        self.percentage = to_decimal(self.percentage, name)
        if not Decimal("0") <= self.percentage <= HUNDRED:
            raise StructuralInputError(name, "måste ligga mellan 0 och 100")


@dataclass
class EstateCase:
    assets: List[AssetRecord] = field(default_factory=list)
    allocations: List[AllocationRecord] = field(default_factory=list)
    shares: List[BeneficiaryShare] = field(default_factory=list)


@dataclass
class Valuation:
    total_assets_value: Decimal


@dataclass
class Distributable:
    distributable_amount: Decimal
    allocated_asset_value: Decimal
    allocated_by_beneficiary: Dict[str, Decimal]


@dataclass
class ResultRow:
    beneficiary_id: str
    name: str
    percentage: Decimal
    amount: Decimal


@dataclass
class DistributionResult:
    per_beneficiary: Dict[str, Decimal]
    is_valid: bool
    total_percentage: Decimal
    rows: List[ResultRow]

    @property
    def remaining_percentage(self) -> Decimal:
        return HUNDRED - self.total_percentage


@dataclass
class CalculationResult:
    total_assets_value: Decimal
    allocated_asset_value: Decimal
    distributable_amount: Decimal
    allocated_by_beneficiary: Dict[str, Decimal]
    distribution: DistributionResult

    @property
    def per_beneficiary(self) -> Dict[str, Decimal]:
        return self.distribution.per_beneficiary

    @property
    def is_valid(self) -> bool:
        return self.distribution.is_valid
