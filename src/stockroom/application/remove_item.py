"""Application service: Remove Item use case."""

from __future__ import annotations

from stockroom.domain.repository.repository import Repository


class RemoveItemHandler:

    def __init__(self, repo: Repository) -> None:
        self._repo = repo

    def handle(self, item_id: int) -> None:
        """Raises EntityNotFoundError if no item has ``item_id``."""
        self._repo.remove(item_id)
