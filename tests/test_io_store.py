import json
from decimal import Decimal

import pytest

from arvskifte.errors import StructuralInputError
from arvskifte.io_store import case_from_dict, case_to_dict, load_case, save_case


def _payload():
    return {
        "assets": [
            {"id": "1", "bank": "Swedbank", "assetType": "Bankinsättning", "amount": 450000},
            {"id": "2", "bank": "Avanza", "assetType": "Aktier", "amount": "280000"},
            {"id": "3", "bank": "SBAB", "assetType": "Bolån", "amount": 125000, "toRemain": True, "amountToRemain": 125000},
        ],
        "allocations": [
            {"assetId": "2", "beneficiaryId": "anna"},
            {"assetId": "2", "beneficiaryId": "erik", "amount": 100000},
        ],
        "shares": [
            {"id": "anna", "name": "Anna Andersson", "percentage": 50},
            {"id": "erik", "name": "Erik Eriksson", "percentage": 50.0},
        ],
    }


class TestCaseFromDict:
    def test_parses_camel_case_payload(self):
        case = case_from_dict(_payload())
        assert [a.asset_type for a in case.assets] == ["Bankinsättning", "Aktier", "Bolån"]
        assert case.assets[1].amount == Decimal("280000")
        assert case.assets[2].to_remain is True
        assert case.assets[2].amount_to_remain == Decimal("125000")
        assert case.assets[0].to_remain is False
        assert case.assets[0].amount_to_remain is None
        assert len(case.allocations) == 2
        assert case.shares[1].percentage == Decimal("50.0")

    def test_missing_sections_are_empty(self):
        case = case_from_dict({"assets": None})
        assert case.assets == [] and case.allocations == [] and case.shares == []

    @pytest.mark.parametrize(
        "mutate,field",
        [
            (lambda d: d["assets"][0].pop("amount"), "assets[0].amount"),
            (lambda d: d["assets"][1].update(amount="mycket"), "assets[1].amount"),
            (lambda d: d["assets"][0].update(amount="1e999999999"), "assets[0].amount"),
            (lambda d: d["assets"][2].update(amountToRemain=200000), "assets[2].amountToRemain"),
            (lambda d: d["allocations"][1].update(amount="-1"), "allocations[1].amount"),
            (lambda d: d["shares"][1].update(percentage="101"), "shares[1].percentage"),
            (lambda d: d["assets"][0].pop("assetType"), "assets[0].assetType"),
            (lambda d: d["assets"][0].update(toRemain="ja"), "assets[0].toRemain"),
            (lambda d: d["allocations"][0].pop("beneficiaryId"), "allocations[0].beneficiaryId"),
            (lambda d: d["shares"][0].update(percentage=None), "shares[0].percentage"),
            (lambda d: d.update(shares={"id": "x"}), "shares"),
        ],
    )
    def test_structural_errors(self, mutate, field):
        data = _payload()
        mutate(data)
        with pytest.raises(StructuralInputError) as exc:
            case_from_dict(data)
        assert exc.value.field == field

    def test_rejects_non_object(self):
        with pytest.raises(StructuralInputError):
            case_from_dict([1, 2, 3])
        with pytest.raises(StructuralInputError):
            case_from_dict({"assets": ["inte ett objekt"]})


class TestFileStore:
    def test_save_and_load(self, tmp_path):
        path = tmp_path / "arvskifte.json"
        case = case_from_dict(_payload())
        assert save_case(case, path) == path

        raw = json.loads(path.read_text(encoding="utf-8"))
        assert raw["assets"][0]["amount"] == "450000"
        assert raw["assets"][2]["amountToRemain"] == "125000"
        assert raw["allocations"][0]["amount"] is None
        assert "Bankinsättning" in path.read_text(encoding="utf-8")

        assert load_case(path) == case
        assert case_to_dict(load_case(path)) == raw

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_case(tmp_path / "saknas.json")
