"""Sample data for the demo commands.

Dates are computed relative to ``now`` so tests can pin them.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Protocol

from stockroom.domain.model.health import Patient, Prescription
from stockroom.domain.model.inventory import ElectronicItem, GroceryItem, InventoryItem
from stockroom.domain.repository.repository import Repository


def seed_warehouse(
    electronics: Repository[ElectronicItem],
    groceries: Repository[GroceryItem],
    now: datetime,
) -> None:
    electronics.add(ElectronicItem(1, "Laptop", 10, "Dell", 24))
    electronics.add(ElectronicItem(2, "Smartphone", 20, "Samsung", 12))
    electronics.add(ElectronicItem(3, "Headphones", 15, "Sony", 18))

    today = now.date()
    groceries.add(GroceryItem(1, "Milk", 30, today + timedelta(days=7)))
    groceries.add(GroceryItem(2, "Bread", 25, today + timedelta(days=3)))
    groceries.add(GroceryItem(3, "Eggs", 40, today + timedelta(days=10)))


def seed_health(
    patients: Repository[Patient],
    prescriptions: Repository[Prescription],
    now: datetime,
) -> None:
    patients.add(Patient(1, "Alice Smith", 30, "Female"))
    patients.add(Patient(2, "Bob Johnson", 45, "Male"))
    patients.add(Patient(3, "Carol Lee", 28, "Female"))

    prescriptions.add(Prescription(1, 1, "Amoxicillin", now - timedelta(days=10)))
    prescriptions.add(Prescription(2, 1, "Ibuprofen", now - timedelta(days=5)))
    prescriptions.add(Prescription(3, 2, "Paracetamol", now - timedelta(days=2)))
    prescriptions.add(Prescription(4, 3, "Cetirizine", now - timedelta(days=1)))
    prescriptions.add(Prescription(5, 2, "Metformin", now))


class _Appendable(Protocol):
    def add(self, item: InventoryItem) -> None: ...


def seed_inventory_log(log: _Appendable, now: datetime) -> None:
    for item_id, name, quantity in [
        (1, "Laptop", 10),
        (2, "Desk Chair", 25),
        (3, "Monitor", 15),
        (4, "Keyboard", 30),
        (5, "Mouse", 50),
    ]:
        log.add(InventoryItem(item_id, name, quantity, now))
