from decimal import Decimal

import pytest

from arvskifte.errors import CalculationError, StructuralInputError
from arvskifte.models import AllocationRecord, AssetRecord, BeneficiaryShare, to_decimal


class TestToDecimal:
    @pytest.mark.parametrize(
        "value,expected",
        [(100, "100"), (0.1, "0.1"), ("450000", "450000"), (" 12.5 ", "12.5"), (Decimal("7"), "7")],
    )
    def test_accepted_values(self, value, expected):
        assert to_decimal(value, "amount") == Decimal(expected)

    @pytest.mark.parametrize("value", [None, True, False, "", "tolv", float("nan"), float("inf"), "NaN", [1]])
    def test_rejected_values(self, value):
        with pytest.raises(StructuralInputError) as exc:
            to_decimal(value, "assets[1].amount")
        assert exc.value.field == "assets[1].amount"
        assert "assets[1].amount" in str(exc.value)

    def test_structural_error_is_calculation_error(self):
        assert issubclass(StructuralInputError, CalculationError)


class TestRecordInvariants:
    def test_asset_coerces_amounts(self):
        asset = AssetRecord("1", "SEB", "Aktier", 1000, to_remain=True, amount_to_remain="250")
        assert asset.amount == Decimal("1000")
        assert asset.amount_to_remain == Decimal("250")

    def test_negative_amount(self):
        with pytest.raises(StructuralInputError):
            AssetRecord("1", "SEB", "Bolån", Decimal("-125000"))

    @pytest.mark.parametrize("locked", ["-1", "1000.01"])
    def test_amount_to_remain_out_of_range(self, locked):
        with pytest.raises(StructuralInputError):
            AssetRecord("1", "SEB", "Aktier", Decimal("1000"), to_remain=True, amount_to_remain=Decimal(locked))

    def test_missing_amount(self):
        with pytest.raises(StructuralInputError):
            AssetRecord("1", "SEB", "Aktier", None)

    def test_allocation_amount(self):
        assert AllocationRecord("1", "anna").amount is None
        assert AllocationRecord("1", "anna", "0").amount == Decimal("0")
        with pytest.raises(StructuralInputError):
            AllocationRecord("1", "anna", "-5")

    @pytest.mark.parametrize("pct", ["-0.01", "100.01", "abc"])
    def test_percentage_range(self, pct):
        with pytest.raises(StructuralInputError):
            BeneficiaryShare("a", "Anna", pct)

    def test_share_over_hundred(self):
        with pytest.raises(StructuralInputError) as exc:
            BeneficiaryShare("erik", "Erik", "101")
        assert exc.value.field == "shares[erik].percentage"


class TestMagnitudeBounds:
    """Orimligt stora tal avvisas innan de når beräkning eller formatering"""

    @pytest.mark.parametrize("value", ["1e999999999", "1e30", Decimal("-1e16"), 10**20])
    def test_to_decimal_rejects_huge_values(self, value):
        with pytest.raises(StructuralInputError) as exc:
            to_decimal(value, "assets[0].amount")
        assert exc.value.field == "assets[0].amount"

    def test_largest_accepted_amount(self):
        assert AssetRecord("1", "SEB", "Aktier", "999999999").amount == Decimal("999999999")
        assert AllocationRecord("1", "anna", "999999999.00").amount == Decimal("999999999")

    @pytest.mark.parametrize("amount", ["1000000000", "999999999.01", "1e12"])
    def test_amount_cap(self, amount):
        with pytest.raises(StructuralInputError):
            AssetRecord("1", "SEB", "Aktier", amount)
        with pytest.raises(StructuralInputError):
            AllocationRecord("1", "anna", amount)


class TestLocators:
    def test_defaults_to_record_id(self):
        with pytest.raises(StructuralInputError) as exc:
            AssetRecord("konto-7", "SEB", "Aktier", "x")
        assert exc.value.field == "assets[konto-7].amount"

    def test_explicit_location(self):
        with pytest.raises(StructuralInputError) as exc:
            AssetRecord("7", "SEB", "Aktier", "1", to_remain=True, amount_to_remain="2", where="assets[0]")
        assert exc.value.field == "assets[0].amountToRemain"
        with pytest.raises(StructuralInputError) as exc:
            AllocationRecord("7", "anna", "-1", where="allocations[3]")
        assert exc.value.field == "allocations[3].amount"

    def test_location_is_not_stored(self):
        asset = AssetRecord("7", "SEB", "Aktier", "1", where="assets[0]")
        assert asset == AssetRecord("7", "SEB", "Aktier", "1")
        assert "where" not in vars(asset)
