from __future__ import annotations


class CalculationError(Exception):
    pass


class StructuralInputError(CalculationError):
    """A required numeric field is missing, non-numeric or out of range."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
