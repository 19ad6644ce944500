from __future__ import annotations

from typing import FrozenSet

DEBT = "debt"
ASSET = "asset"

# Enda källan för skuldtyper; etiketterna jämförs exakt, skiftlägeskänsligt.
DEBT_TYPES: FrozenSet[str] = frozenset(
    {
        "Bolån",
        "Privatlån",
        "Kreditkort",
        "Blancolån",
        "Billån",
        "Företagslån",
    }
)


def classify(asset_type: str) -> str:
    return DEBT if asset_type in DEBT_TYPES else ASSET


def is_debt(asset_type: str) -> bool:
    return classify(asset_type) == DEBT
