"""Integration tests for the stock-changing use cases."""

import pytest

from stockroom.application.increase_stock import IncreaseStockHandler
from stockroom.application.remove_item import RemoveItemHandler
from stockroom.domain.exceptions import EntityNotFoundError, InvalidQuantityError
from stockroom.domain.repository.repository import Repository
from tests.factories import grocery


def _setup():
    repo = Repository()
    repo.add(grocery(1, "Milk", 30))
    repo.add(grocery(2, "Bread", 25))
    return repo


class TestIncreaseStock:

    def test_returns_stored_quantity(self):
        repo = _setup()
        assert IncreaseStockHandler(repo).handle(1, 5) == 35
        assert repo.get_by_id(1).quantity == 35
        assert repo.get_by_id(2).quantity == 25

    def test_decrease_below_zero_rejected(self):
        repo = _setup()
        with pytest.raises(InvalidQuantityError):
            IncreaseStockHandler(repo).handle(2, -26)
        assert repo.get_by_id(2).quantity == 25

    def test_unknown_item_rejected(self):
        with pytest.raises(EntityNotFoundError, match="not found"):
            IncreaseStockHandler(_setup()).handle(99, 1)


class TestRemoveItem:

    def test_remove(self):
        repo = _setup()
        RemoveItemHandler(repo).handle(1)
        assert [i.id for i in repo.get_all()] == [2]

    def test_remove_unknown_rejected(self):
        with pytest.raises(EntityNotFoundError):
            RemoveItemHandler(_setup()).handle(99)
