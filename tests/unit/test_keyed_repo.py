"""Unit tests for KeyedRepository: duplicate, not-found and invalid-value paths."""

import pytest

from models.errors import DuplicateKeyError, ErrorKind, InvalidValueError, NotFoundError
from models.inventory import ElectronicItem
from repositories.keyed_repo import KeyedRepository, non_negative


@pytest.fixture
def repo():
    r = KeyedRepository("ElectronicItem")
    r.add(1, ElectronicItem(1, "Laptop", 10, "Dell", 24))
    return r


class TestAdd:
    def test_add_then_get_returns_same_object(self):
        repo = KeyedRepository()
        item = ElectronicItem(7, "Tablet", 3, "Apple", 12)

        assert repo.add(7, item).success
        assert repo.get_by_id(7).value is item

    def test_duplicate_key_fails_and_keeps_original(self, repo):
        original = repo.get_by_id(1).value

        result = repo.add(1, ElectronicItem(1, "Duplicate Laptop", 5, "HP", 12))

        assert not result.success
        assert result.error is ErrorKind.DUPLICATE_KEY
        assert "already exists" in result.message
        assert repo.get_by_id(1).value is original
        assert original.name == "Laptop"
        assert len(repo) == 1

    def test_unwrap_raises_typed_error(self, repo):
        with pytest.raises(DuplicateKeyError):
            repo.add(1, ElectronicItem(1, "Again", 1, "HP", 1)).unwrap()


class TestLookupAndRemove:
    @pytest.mark.parametrize("missing", [0, 2, 999, -1])
    def test_missing_key_is_not_found(self, repo, missing):
        assert repo.get_by_id(missing).error is ErrorKind.NOT_FOUND
        assert repo.remove(missing).error is ErrorKind.NOT_FOUND
        assert repo.update_quantity(missing, 5).error is ErrorKind.NOT_FOUND

    def test_remove_deletes(self, repo):
        result = repo.remove(1)

        assert result.success
        assert result.value.name == "Laptop"
        assert 1 not in repo
        assert repo.get_by_id(1).error is ErrorKind.NOT_FOUND

    def test_remove_missing_unwrap_raises(self, repo):
        with pytest.raises(NotFoundError, match="999"):
            repo.remove(999).unwrap()

    def test_mutation_through_handle_is_visible(self, repo):
        repo.get_by_id(1).value.quantity = 42
        assert repo.get_by_id(1).value.quantity == 42

    def test_list_all_is_insertion_ordered_snapshot(self, repo):
        repo.add(5, ElectronicItem(5, "Mouse", 1, "Logitech", 6))
        repo.add(3, ElectronicItem(3, "Headphones", 25, "Sony", 6))

        items = repo.list_all()
        items.clear()

        assert [i.id for i in repo.list_all()] == [1, 5, 3]


class TestUpdate:
    def test_update_quantity(self, repo):
        result = repo.update_quantity(1, 0)

        assert result.success
        assert repo.get_by_id(1).value.quantity == 0

    def test_negative_quantity_is_invalid_and_unchanged(self, repo):
        result = repo.update_quantity(1, -5)

        assert result.error is ErrorKind.INVALID_VALUE
        assert result.message == "Quantity cannot be negative"
        assert repo.get_by_id(1).value.quantity == 10

    def test_validation_runs_before_lookup(self, repo):
        assert repo.update_quantity(999, -1).error is ErrorKind.INVALID_VALUE

    def test_invalid_unwrap_raises(self, repo):
        with pytest.raises(InvalidValueError):
            repo.update_quantity(1, -5).unwrap()

    def test_update_field_with_custom_validator(self, repo):
        def short_name(value):
            return "Name too long" if len(value) > 10 else None

        assert repo.update_field(1, "name", "A very long name", short_name).error is ErrorKind.INVALID_VALUE
        assert repo.update_field(1, "name", "Notebook", short_name).success
        assert repo.get_by_id(1).value.name == "Notebook"


def test_non_negative_validator():
    assert non_negative(0) is None
    assert non_negative(-1) == "Quantity cannot be negative"
