import pytest

from owohaptics.candidates import ConnectionCandidates


@pytest.fixture
def collection():
    return ConnectionCandidates()


def test_starts_empty(collection):
    assert collection.candidates() == []
    assert len(collection) == 0


def test_store_and_contains(collection):
    collection.store("10.0.0.2")
    assert collection.contains("10.0.0.2")
    assert "10.0.0.2" in collection
    assert not collection.contains("10.0.0.3")


@pytest.mark.parametrize(
    "stored, expected",
    [
        ([""], []),
        (["10.0.0.2", "10.0.0.2"], ["10.0.0.2"]),
        (["10.0.0.9", "10.0.0.1", "10.0.0.5"], ["10.0.0.1", "10.0.0.5", "10.0.0.9"]),
    ],
)
def test_stored_candidates(collection, stored, expected):
    for address in stored:
        collection.store(address)
    assert collection.candidates() == expected


def test_clear_removes_everything(collection):
    collection.store("10.0.0.2")
    collection.clear()
    assert collection.candidates() == []
    assert not collection.contains("10.0.0.2")


def test_returned_list_is_a_copy(collection):
    collection.store("10.0.0.2")
    collection.candidates().append("10.0.0.3")
    assert collection.candidates() == ["10.0.0.2"]