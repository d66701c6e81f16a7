"""Tests for the vehicle repositories.

Tests taking the ``repo`` fixture run against both the SQLAlchemy and the
in-memory implementation.
"""
from __future__ import annotations

from cardealer.mappers import VEHICLE_FIELDS
from cardealer.models import Vehicle


def _blank(**values) -> Vehicle:
    """A vehicle with every domain field explicitly set."""
    fields = {field: None for field in VEHICLE_FIELDS}
    fields.update(values)
    return Vehicle(**fields)


def test_save_assigns_sequential_ids(repo):
    first = repo.save(_blank(make="Ford"))
    second = repo.save(_blank(make="Vauxhall"))

    assert first.id is not None
    assert second.id is not None
    assert first.id != second.id


def test_find_by_id(repo):
    saved = repo.save(_blank(make="Ford", model="Fiesta"))

    found = repo.find_by_id(saved.id)

    assert found is not None
    assert found.make == "Ford"
    assert found.model == "Fiesta"
    assert repo.find_by_id(saved.id + 100) is None


def test_find_all_empty(repo):
    assert repo.find_all() == []


def test_find_all_returns_every_vehicle(repo):
    for make in ("Ford", "BMW", "Honda"):
        repo.save(_blank(make=make))

    assert sorted(v.make for v in repo.find_all()) == ["BMW", "Ford", "Honda"]


def test_exists_by_id(repo):
    saved = repo.save(_blank(make="Ford"))

    assert repo.exists_by_id(saved.id)
    assert not repo.exists_by_id(saved.id + 1)


def test_save_with_id_replaces_the_stored_row(repo):
    saved = repo.save(_blank(make="Ford", model="Focus", colour="Blue"))

    repo.save(_blank(id=saved.id, make="Ford", model="Puma"))

    found = repo.find_by_id(saved.id)
    assert found.model == "Puma"
    assert found.colour is None
    assert len(repo.find_all()) == 1


def test_delete_by_id(repo):
    saved = repo.save(_blank(make="Ford"))

    repo.delete_by_id(saved.id)

    assert not repo.exists_by_id(saved.id)
    assert repo.find_by_id(saved.id) is None


def test_delete_by_id_of_missing_vehicle_is_a_no_op(repo):
    repo.save(_blank(make="Ford"))

    repo.delete_by_id(999)

    assert len(repo.find_all()) == 1


def test_memory_repo_hands_out_copies(memory_repo):
    saved = memory_repo.save(_blank(make="Ford"))
    saved.make = "Changed"
    memory_repo.find_by_id(saved.id).make = "Changed again"

    assert memory_repo.find_by_id(saved.id).make == "Ford"


def test_memory_repo_does_not_reuse_ids_after_delete(memory_repo):
    first = memory_repo.save(_blank(make="Ford"))
    memory_repo.delete_by_id(first.id)

    second = memory_repo.save(_blank(make="BMW"))

    assert second.id != first.id
