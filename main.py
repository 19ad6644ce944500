from __future__ import annotations

import argparse
import logging
import os
from decimal import Decimal
from pathlib import Path
from typing import List, Optional

from arvskifte.allocations import AllocationBook
from arvskifte.calc import calculate
from arvskifte.errors import CalculationError
from arvskifte.formatting import format_percent, format_sek
from arvskifte.io_store import CASE_FILE, load_case, save_case
from arvskifte.models import AllocationRecord, AssetRecord, BeneficiaryShare, CalculationResult, EstateCase


def print_table(result: CalculationResult) -> None:
    print(f"Totalt värde i dödsboet: {format_sek(result.total_assets_value)}")
    print(f"Specifikt tilldelat: {format_sek(result.allocated_asset_value)}")
    print(f"Att fördela: {format_sek(result.distributable_amount)}")
    print()

    distribution = result.distribution
    if not distribution.is_valid:
        print(
            f"Andelarna summerar till {format_percent(distribution.total_percentage)}, måste vara exakt 100%. "
            f"Kvar att fördela: {format_percent(distribution.remaining_percentage)}"
        )
        return

    headers = ["Arvinge", "Andel", "Belopp", "Specifikt tilldelat"]
    rows = []
    for r in distribution.rows:
        rows.append(
            [
                r.name or r.beneficiary_id,
                format_percent(r.percentage),
                format_sek(r.amount),
                format_sek(result.allocated_by_beneficiary.get(r.beneficiary_id, Decimal("0"))),
            ]
        )
    widths = [max(len(str(x)) for x in col) for col in zip(headers, *rows)]
    line = " | ".join(h.ljust(w) for h, w in zip(headers, widths))
    print(line)
    print("-" * len(line))
    for row in rows:
        print(" | ".join(str(x).ljust(w) for x, w in zip(row, widths)))
    print("-" * len(line))


def cmd_calculate(path: Path) -> int:
    try:
        case = load_case(path)
        result = calculate(case)
    except (CalculationError, FileNotFoundError, ValueError, ArithmeticError) as exc:
        print(f"Fel: {exc}")
        return 1

    print_table(result)
    return 0 if result.is_valid else 1


def example_case() -> EstateCase:
    return EstateCase(
        assets=[
            AssetRecord("1", "Swedbank", "Bankinsättning", Decimal("450000")),
            AssetRecord("2", "Avanza", "Aktier", Decimal("280000")),
            AssetRecord("3", "SBAB", "Bolån", Decimal("125000")),
        ],
        shares=[
            BeneficiaryShare("anna", "Anna Andersson", Decimal("50")),
            BeneficiaryShare("erik", "Erik Eriksson", Decimal("50")),
        ],
    )


def cmd_init_example(path: Path) -> int:
    saved = save_case(example_case(), path)
    print(f"Exempelfil skapad: {saved}")
    return 0


def _parse_input_decimal(raw: str) -> Decimal:
    # "1 250,50" -> 1250.50
    return Decimal(raw.strip().replace(" ", "").replace(",", ".") or "0")


def _ask_decimal(prompt: str) -> Decimal:
    return _parse_input_decimal(input(prompt))


def _pick(items, raw: str):
    index = int(raw.strip())
    if not 1 <= index <= len(items):
        raise IndexError(f"välj ett nummer mellan 1 och {len(items)}")
    return items[index - 1]


def _ask_allocations(assets: List[AssetRecord], shares: List[BeneficiaryShare]) -> AllocationBook:
    book = AllocationBook()
    if not assets or not shares:
        return book
    print("Specifika tilldelningar (tomt nummer avslutar):")
    for i, a in enumerate(assets, 1):
        print(f"  {i}. {a.bank} {a.asset_type} {format_sek(a.amount)}")
    while True:
        raw = input("  Tillgång nr: ").strip()
        if not raw:
            break
        try:
            asset = _pick(assets, raw)
            for i, s in enumerate(shares, 1):
                print(f"    {i}. {s.name}")
            share = _pick(shares, input("    Arvinge nr: "))
            override = input("    Belopp (tomt = hela värdet): ").strip()
            amount = _parse_input_decimal(override) if override else None
            book.assign(AllocationRecord(asset.id, share.id, amount))
        except (IndexError, ValueError, CalculationError, ArithmeticError) as exc:
            print(f"  Fel: {exc}")
    return book


def cmd_interactive(path: Path) -> int:
    assets: List[AssetRecord] = []
    print("Tillgångar och skulder (tom bank avslutar):")
    while True:
        bank = input("  Bank: ").strip()
        if not bank:
            break
        asset_type = input("  Typ (t.ex. Bankinsättning, Aktier, Bolån): ").strip()
        try:
            amount = _ask_decimal("  Belopp: ")
            to_remain = input("  Ska ligga kvar i dödsboet? (j/n): ").strip().lower() == "j"
            amount_to_remain = None
            if to_remain:
                raw = input("  Belopp som ligger kvar (tomt = hela): ").strip()
                amount_to_remain = _parse_input_decimal(raw) if raw else None
            assets.append(AssetRecord(str(len(assets) + 1), bank, asset_type, amount, to_remain, amount_to_remain))
        except (CalculationError, ArithmeticError) as exc:
            print(f"  Fel: {exc}")

    shares: List[BeneficiaryShare] = []
    print("Arvingar (tomt namn avslutar):")
    while True:
        name = input("  Namn: ").strip()
        if not name:
            break
        try:
            percentage = _ask_decimal("  Andel (%): ")
            shares.append(BeneficiaryShare(str(len(shares) + 1), name, percentage))
        except (CalculationError, ArithmeticError) as exc:
            print(f"  Fel: {exc}")

    allocations = _ask_allocations(assets, shares)
    saved = save_case(EstateCase(assets=assets, allocations=allocations.records(), shares=shares), path)
    print(f"Ärendet sparat i {saved}, beräknar...\n")
    return cmd_calculate(saved)


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=os.getenv("ARVSKIFTE_LOG_LEVEL", "INFO").upper())
    parser = argparse.ArgumentParser(description="Beräkning av arvskifte")
    parser.add_argument("--file", type=Path, default=CASE_FILE, help="Ärendefil (JSON)")
    sub = parser.add_subparsers(dest="cmd")

    sub.add_parser("init-example", help="Skapa en exempelfil")
    sub.add_parser("calculate", help="Beräkna fördelningen för ärendet")
    sub.add_parser("interactive", help="Mata in ärendet interaktivt (input)")

    args = parser.parse_args(argv)
    if args.cmd == "init-example":
        return cmd_init_example(args.file)
    if args.cmd == "calculate":
        return cmd_calculate(args.file)
    if args.cmd == "interactive":
        return cmd_interactive(args.file)
    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
