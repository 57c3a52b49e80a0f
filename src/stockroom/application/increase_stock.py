"""Application service: Increase Stock use case."""

from __future__ import annotations

from stockroom.domain.repository.repository import Repository


class IncreaseStockHandler:

    def __init__(self, repo: Repository) -> None:
        self._repo = repo

    def handle(self, item_id: int, amount: int) -> int:
        """Add ``amount`` to an item's quantity and return the stored result.

        Raises EntityNotFoundError for an unknown id and InvalidQuantityError
        if the resulting quantity would be negative.
        """
        current = self._repo.get_by_id(item_id)
        self._repo.update_quantity(item_id, current.quantity + amount)
        # ``current`` is the pre-update snapshot.
        return self._repo.get_by_id(item_id).quantity
