"""Unit tests for the identity-keyed Repository."""

import pytest

from stockroom.domain.exceptions import (
    DuplicateKeyError,
    EntityNotFoundError,
    ErrorKind,
    InvalidQuantityError,
    ValidationError,
)
from stockroom.domain.model.health import Patient
from stockroom.domain.repository.repository import Repository
from stockroom.domain.repository.store import Store
from tests.factories import electronic, grocery


def _repo():
    repo = Repository()
    repo.add(grocery(1, "Milk", 30))
    repo.add(grocery(2, "Bread", 25))
    repo.add(grocery(3, "Eggs", 40))
    return repo


class TestRepositoryAdd:

    def test_add_then_get_by_id_returns_equal_record(self):
        repo = Repository()
        item = electronic(7, "Monitor", 3)
        repo.add(item)
        assert repo.get_by_id(7) == item

    def test_duplicate_id_rejected(self):
        repo = Repository()
        repo.add(grocery(1, "Milk"))
        with pytest.raises(DuplicateKeyError, match="Item with ID 1 already exists"):
            repo.add(grocery(1, "Milk Duplicate", 10))

        assert len(repo) == 1
        assert repo.get_by_id(1).name == "Milk"

    def test_duplicate_error_kind(self):
        repo = _repo()
        with pytest.raises(DuplicateKeyError) as info:
            repo.add(grocery(2))
        assert info.value.kind is ErrorKind.DUPLICATE_KEY

    def test_wraps_given_store(self):
        store = Store()
        repo = Repository(store)
        repo.add(grocery(1))
        assert len(store) == 1


class TestRepositoryLookup:

    def test_get_missing_id(self):
        repo = _repo()
        with pytest.raises(EntityNotFoundError, match="Item with ID 99 not found"):
            repo.get_by_id(99)

    def test_contains(self):
        repo = _repo()
        assert 2 in repo
        assert 99 not in repo

    def test_get_all_in_insertion_order(self):
        assert [i.name for i in _repo().get_all()] == ["Milk", "Bread", "Eggs"]


class TestRepositoryRemove:

    def test_remove_deletes_only_that_record(self):
        repo = _repo()
        repo.remove(2)
        assert [i.id for i in repo.get_all()] == [1, 3]

    def test_remove_missing_id_leaves_store_unchanged(self):
        repo = _repo()
        before = repo.get_all()
        with pytest.raises(EntityNotFoundError):
            repo.remove(99)
        assert repo.get_all() == before

    def test_remove_twice_rejected(self):
        repo = _repo()
        repo.remove(1)
        with pytest.raises(EntityNotFoundError):
            repo.remove(1)


class TestRepositoryUpdateQuantity:

    def test_update_changes_only_that_quantity(self):
        repo = _repo()
        before = repo.get_all()

        updated = repo.update_quantity(2, 99)

        assert updated.quantity == 99
        after = repo.get_all()
        assert after[1] == grocery(2, "Bread", 99)
        assert after[0] == before[0]
        assert after[2] == before[2]

    def test_update_to_zero_allowed(self):
        repo = _repo()
        repo.update_quantity(1, 0)
        assert repo.get_by_id(1).quantity == 0

    def test_negative_quantity_rejected(self):
        repo = _repo()
        with pytest.raises(InvalidQuantityError, match="cannot be negative"):
            repo.update_quantity(2, -5)
        assert repo.get_by_id(2).quantity == 25

    def test_negative_checked_before_lookup(self):
        repo = _repo()
        with pytest.raises(InvalidQuantityError):
            repo.update_quantity(99, -1)

    def test_missing_id_rejected(self):
        repo = _repo()
        before = repo.get_all()
        with pytest.raises(EntityNotFoundError):
            repo.update_quantity(99, 5)
        assert repo.get_all() == before

    def test_record_without_quantity_rejected(self):
        repo = Repository()
        repo.add(Patient(1, "Alice Smith", 30, "Female"))
        with pytest.raises(ValidationError, match="Patient records have no quantity"):
            repo.update_quantity(1, 5)
        assert repo.get_by_id(1) == Patient(1, "Alice Smith", 30, "Female")

    def test_earlier_reference_keeps_old_value(self):
        repo = _repo()
        snapshot = repo.get_by_id(1)
        repo.update_quantity(1, 5)
        assert snapshot.quantity == 30
        assert repo.get_by_id(1).quantity == 5
