"""Application service: Show Inventory Log use case (query)."""

from __future__ import annotations

from typing import Protocol

from stockroom.application.dto import LoggedItemDTO
from stockroom.domain.model.inventory import InventoryItem


class InventorySource(Protocol):
    def get_all(self) -> list[InventoryItem]: ...


class ShowInventoryLogHandler:

    def __init__(self, log: InventorySource) -> None:
        self._log = log

    def handle(self) -> list[LoggedItemDTO]:
        return [
            LoggedItemDTO(
                id=item.id,
                name=item.name,
                quantity=item.quantity,
                date_added=item.date_added.strftime("%Y-%m-%d"),
            )
            for item in self._log.get_all()
        ]
