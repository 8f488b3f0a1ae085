"""Unit tests for the identity-keyed record collection and delete action."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from core.tables.collection import RecordCollection, delete_from

pytestmark = pytest.mark.unit


@dataclass
class Person:
    name: str


def test_remove_deletes_by_identity_not_equality() -> None:
    """Only the exact object is removed, even when an equal copy exists."""

    original = Person("Ada")
    twin = Person("Ada")
    collection = RecordCollection([original, twin])

    assert original == twin
    assert collection.remove(twin) is True
    assert list(collection) == [original]
    assert list(collection)[0] is original


def test_remove_missing_record_is_a_no_op() -> None:
    """Removing an absent record leaves the collection unchanged."""

    people = [Person("Ada"), Person("Grace")]
    collection = RecordCollection(people)

    assert collection.remove(Person("Ada")) is False
    assert list(collection) == people
    assert len(collection) == 2


def test_remove_preserves_relative_order() -> None:
    """Deleting a middle record keeps the others in their original order."""

    people = [Person(name) for name in ("A", "B", "C", "D")]
    collection = RecordCollection(people)

    collection.remove(people[1])
    assert [person.name for person in collection] == ["A", "C", "D"]


def test_keys_are_stable_across_deletes() -> None:
    """Row keys never shift when earlier records are removed."""

    people = [Person(name) for name in ("A", "B", "C")]
    collection = RecordCollection(people)

    assert collection.key_for(people[2]) == 3
    collection.remove(people[0])
    assert collection.key_for(people[2]) == 3
    assert collection.find(3) is people[2]
    assert collection.find(1) is None
    assert collection.add(Person("D")) == 4


def test_contains_uses_identity() -> None:
    """Membership checks compare identity rather than equality."""

    ada = Person("Ada")
    collection = RecordCollection([ada])
    assert ada in collection
    assert Person("Ada") not in collection


def test_delete_from_builds_on_delete_callback() -> None:
    """The standard delete callback removes records and ignores unknown ones."""

    people = [Person("A"), Person("B")]
    collection = RecordCollection(people)
    on_delete = delete_from(collection)

    on_delete(people[0])
    on_delete(Person("Z"))
    assert list(collection) == [people[1]]
