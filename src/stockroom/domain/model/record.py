"""Capability contracts shared by every record type."""

from __future__ import annotations

from typing import Protocol

from stockroom.domain.exceptions import InvalidQuantityError


class Identifiable(Protocol):
    """Anything with a stable integer identity."""

    @property
    def id(self) -> int: ...


class Stocked(Identifiable, Protocol):
    """A named, identifiable record that tracks a non-negative quantity."""

    @property
    def name(self) -> str: ...

    @property
    def quantity(self) -> int: ...


def check_quantity(quantity: int) -> None:
    """Raise InvalidQuantityError unless ``quantity`` is a non-negative int."""
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise InvalidQuantityError(
            f"Quantity must be an integer, got {type(quantity).__name__}"
        )
    if quantity < 0:
        raise InvalidQuantityError("Quantity cannot be negative.")
