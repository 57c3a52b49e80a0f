"""Repository: a Store keyed by a unique integer ``id``.

Adds the three guarded operations the plain Store lacks:

- ``add`` rejects a second record with an id already present,
- ``get_by_id`` / ``remove`` signal a missing id instead of returning None,
- ``update_quantity`` refuses negative quantities before touching anything.

Records are immutable, so an update stores a replacement copy at the same
position. References obtained before the update keep the old value; read
the record again to see the new one.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Generic, TypeVar

from stockroom.domain.exceptions import (
    DuplicateKeyError,
    EntityNotFoundError,
    InvalidQuantityError,
    ValidationError,
)
from stockroom.domain.model.record import Identifiable
from stockroom.domain.repository.store import Store

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Identifiable)


class Repository(Generic[T]):

    def __init__(self, store: Store[T] | None = None) -> None:
        self._store: Store[T] = store if store is not None else Store()

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, item_id: object) -> bool:
        return self._store.find_first(lambda item: item.id == item_id) is not None

    # --- Repository interface -------------------------------------------------

    def add(self, item: T) -> None:
        if item.id in self:
            raise DuplicateKeyError(f"Item with ID {item.id} already exists.")
        self._store.add(item)
        logger.debug("Added %s #%s", type(item).__name__, item.id)

    def get_by_id(self, item_id: int) -> T:
        item = self._store.find_first(lambda i: i.id == item_id)
        if item is None:
            raise EntityNotFoundError(f"Item with ID {item_id} not found.")
        return item

    def remove(self, item_id: int) -> None:
        if not self._store.remove_first(lambda i: i.id == item_id):
            raise EntityNotFoundError(f"Item with ID {item_id} not found.")
        logger.debug("Removed item #%s", item_id)

    def get_all(self) -> list[T]:
        return self._store.get_all()

    def update_quantity(self, item_id: int, new_quantity: int) -> T:
        """Set the quantity of one record and return the stored replacement.

        Raises InvalidQuantityError for a negative quantity (checked first),
        then EntityNotFoundError if the id is absent, then ValidationError if
        the record type carries no ``quantity``.
        """
        if new_quantity < 0:
            raise InvalidQuantityError("Quantity cannot be negative.")
        current = self.get_by_id(item_id)
        if not hasattr(current, "quantity"):
            raise ValidationError(
                f"{type(current).__name__} records have no quantity to update."
            )
        updated = dataclasses.replace(current, quantity=new_quantity)
        self._store.replace_first(lambda i: i.id == item_id, updated)
        logger.debug(
            "Quantity of item #%s changed %s -> %s",
            item_id, current.quantity, new_quantity,
        )
        return updated
