"""Application service: Show Items use case (query)."""

from __future__ import annotations

from typing import Protocol

from stockroom.application.dto import ItemLineDTO
from stockroom.domain.model.record import Stocked


class StockedSource(Protocol):
    def get_all(self) -> list[Stocked]: ...


class ShowItemsHandler:
    """Lists id, name and quantity for any Repository or PersistentLog."""

    def __init__(self, source: StockedSource) -> None:
        self._source = source

    def handle(self) -> list[ItemLineDTO]:
        return [
            ItemLineDTO(id=item.id, name=item.name, quantity=item.quantity)
            for item in self._source.get_all()
        ]
