"""Unit tests for GroupingIndex build/lookup."""

from datetime import date

import pytest

from models.healthcare import Prescription
from repositories.grouping_index import GroupingIndex
from repositories.linear_repo import LinearRepository

D = date(2024, 1, 1)


def _source():
    repo = LinearRepository()
    for rx in (
        Prescription(1, 1, "Ibuprofen", D),
        Prescription(2, 2, "Paracetamol", D),
        Prescription(3, 1, "Amoxicillin", D),
        Prescription(4, 3, "Antihistamine", D),
        Prescription(5, 1, "Vitamin C", D),
    ):
        repo.add(rx)
    return repo


class TestGroupingIndex:
    def test_lookup_returns_matching_subsequence_in_order(self):
        source = _source()
        index = GroupingIndex()
        index.build(source, lambda p: p.patient_id)

        for key in (1, 2, 3):
            expected = [p for p in source if p.patient_id == key]
            assert index.lookup(key) == expected
        assert [p.id for p in index.lookup(1)] == [1, 3, 5]

    def test_missing_key_is_empty(self):
        index = GroupingIndex()
        index.build(_source(), lambda p: p.patient_id)
        assert index.lookup(42) == []

    def test_unbuilt_index_is_empty(self):
        index = GroupingIndex()
        assert not index.is_built
        assert index.lookup(1) == []
        assert len(index) == 0

    def test_not_synchronised_until_rebuilt(self):
        source = _source()
        index = GroupingIndex()
        index.build(source, lambda p: p.patient_id)

        source.add(Prescription(6, 2, "Vitamin D", D))
        assert [p.id for p in index.lookup(2)] == [2]

        index.build(source, lambda p: p.patient_id)
        assert [p.id for p in index.lookup(2)] == [2, 6]

    def test_rebuild_replaces_previous_groups(self):
        index = GroupingIndex()
        index.build(_source(), lambda p: p.patient_id)
        index.build([Prescription(9, 7, "Insulin", D)], lambda p: p.patient_id)

        assert index.keys() == [7]
        assert index.lookup(1) == []

    def test_lookup_result_does_not_alias_index(self):
        index = GroupingIndex()
        index.build(_source(), lambda p: p.patient_id)
        index.lookup(1).clear()
        assert len(index.lookup(1)) == 3

    def test_failed_rebuild_keeps_previous_groups(self):
        index = GroupingIndex()
        index.build(_source(), lambda p: p.patient_id)

        def key_of(p):
            if p.id == 3:
                raise ValueError("bad record")
            return p.patient_id + 100

        with pytest.raises(ValueError):
            index.build(_source(), key_of)

        assert index.is_built
        assert [p.id for p in index.lookup(1)] == [1, 3, 5]
        assert index.lookup(101) == []
        assert sorted(index.keys()) == [1, 2, 3]

    def test_failed_first_build_leaves_index_unbuilt(self):
        index = GroupingIndex()

        with pytest.raises(KeyError):
            index.build(_source(), lambda p: {}[p.id])

        assert not index.is_built
        assert len(index) == 0
