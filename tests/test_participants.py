import pytest

from workshophub.participants import Participant, ParticipantList
from workshophub.workshops import Workshop


def workshop(number):
    return Workshop(number, f"Workshop {number}", 2, 10, 20.0)


def test_add_and_get_participant():
    people = ParticipantList()
    people.add(Participant(101, "Ada", "Lovelace"))
    found = people.get(101)
    assert found.first_name == "Ada"
    assert found.last_name == "Lovelace"


def test_duplicate_id_keeps_first():
    people = ParticipantList()
    people.add(Participant(1, "Ada", "Lovelace"))
    people.add(Participant(1, "Alan", "Turing"))
    assert len(people) == 1
    assert people.get(1).first_name == "Ada"


def test_new_participant_has_no_workshops():
    people = ParticipantList()
    people.add(Participant(1, "Ada", "Lovelace"))
    assert people.workshops(1) == []


def test_add_workshop_records_it():
    people = ParticipantList()
    ada = Participant(1, "Ada", "Lovelace")
    people.add(ada)
    people.add_workshop(ada, workshop(4))
    people.add_workshop(ada, workshop(2))
    assert [w.number for w in people.workshops(1)] == [4, 2]


def test_add_workshop_adds_unknown_participant():
    people = ParticipantList()
    grace = Participant(9, "Grace", "Hopper")
    people.add_workshop(grace, workshop(3))
    assert people.get(9).last_name == "Hopper"
    assert [w.number for w in people.workshops(9)] == [3]


def test_workshops_returns_copy():
    people = ParticipantList()
    ada = Participant(1, "Ada", "Lovelace")
    people.add_workshop(ada, workshop(3))
    people.workshops(1).clear()
    assert [w.number for w in people.workshops(1)] == [3]


def test_cancel_workshop_removes_only_that_number():
    people = ParticipantList()
    ada = Participant(1, "Ada", "Lovelace")
    for number in (1, 2, 3):
        people.add_workshop(ada, workshop(number))
    people.cancel_workshop(1, 2)
    assert [w.number for w in people.workshops(1)] == [1, 3]


def test_unknown_participant_raises_key_error():
    people = ParticipantList()
    with pytest.raises(KeyError):
        people.get(5)
    with pytest.raises(KeyError):
        people.workshops(5)
    with pytest.raises(KeyError):
        people.cancel_workshop(5, 1)


def test_iteration_ordered_by_id_and_clear():
    people = ParticipantList()
    for pid in (30, 10, 20):
        people.add(Participant(pid, "First", "Last"))
    assert [p.id for p in people] == [10, 20, 30]
    people.clear()
    assert len(people) == 0


def test_participants_compare_by_id_only():
    assert Participant(1, "A", "B") == Participant(1, "C", "D")
    assert Participant(1, "Z", "Z") < Participant(2, "A", "A")