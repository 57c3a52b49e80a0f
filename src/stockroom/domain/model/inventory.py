"""Stock-carrying record types.

All of them are frozen: a quantity change is always made by the owning
repository, which stores a replacement copy.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from stockroom.domain.model.record import check_quantity


@dataclass(frozen=True)
class ElectronicItem:
    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int

    def __post_init__(self) -> None:
        check_quantity(self.quantity)


@dataclass(frozen=True)
class GroceryItem:
    id: int
    name: str
    quantity: int
    expiry_date: date

    def __post_init__(self) -> None:
        check_quantity(self.quantity)


@dataclass(frozen=True)
class InventoryItem:
    """An entry in the persisted inventory log."""

    id: int
    name: str
    quantity: int
    date_added: datetime

    def __post_init__(self) -> None:
        check_quantity(self.quantity)
