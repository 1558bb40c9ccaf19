import pytest

from workshophub.loader import load_participants, load_registration, load_workshops
from workshophub.participants import Participant, ParticipantList
from workshophub.registration import RegistrationManager
from workshophub.workshops import Workshop, WorkshopList


def test_load_workshops_reads_fields(tmp_path):
    path = tmp_path / "workshops.txt"
    path.write_text("2|Watercolor Basics|3|15|49.99\n1|Pottery|4|8|75\n")
    workshops = WorkshopList()
    load_workshops(workshops, path)
    assert [w.number for w in workshops] == [1, 2]
    watercolor = workshops.get(2)
    assert watercolor.title == "Watercolor Basics"
    assert watercolor.hours == 3
    assert watercolor.capacity == 15
    assert watercolor.price == 49.99


def test_load_workshops_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_workshops(WorkshopList(), tmp_path / "absent.txt")


def test_load_workshops_bad_number(tmp_path):
    path = tmp_path / "workshops.txt"
    path.write_text("x|Pottery|4|8|75\n")
    with pytest.raises(ValueError):
        load_workshops(WorkshopList(), path)


def test_load_workshops_too_few_fields(tmp_path):
    path = tmp_path / "workshops.txt"
    path.write_text("1|Pottery|4\n")
    with pytest.raises(ValueError):
        load_workshops(WorkshopList(), path)


def test_load_participants(tmp_path):
    path = tmp_path / "participants.txt"
    path.write_text("101|Ada|Lovelace\n102|Alan|Turing\n")
    people = ParticipantList()
    load_participants(people, path)
    assert [p.id for p in people] == [101, 102]
    assert people.get(102).first_name == "Alan"
    assert people.get(101).last_name == "Lovelace"


def test_load_participants_handles_crlf(tmp_path):
    path = tmp_path / "participants.txt"
    path.write_bytes(b"7|Grace|Hopper\r\n")
    people = ParticipantList()
    load_participants(people, path)
    assert people.get(7).last_name == "Hopper"


def test_load_participants_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_participants(ParticipantList(), tmp_path / "absent.txt")


def make_manager():
    workshops = WorkshopList()
    workshops.add(Workshop(1, "Pottery", 4, 2, 75.0))
    workshops.add(Workshop(2, "Painting", 3, 5, 40.0))
    workshops.add(Workshop(3, "Weaving", 3, 5, 40.0))
    people = ParticipantList()
    for pid in (10, 11, 12):
        people.add(Participant(pid, "First", "Last"))
    return RegistrationManager(workshops, people), people


def test_load_registration(tmp_path):
    path = tmp_path / "registration.txt"
    path.write_text("1|10|11\n\n2|12||\n3\n")
    manager, people = make_manager()
    load_registration(manager, path)
    assert manager.registered(1) == frozenset({10, 11})
    assert manager.registered(2) == frozenset({12})
    assert manager.registered(3) == frozenset()
    assert manager.open_workshops() == (2, 3)
    assert [w.number for w in people.workshops(12)] == [2]


def test_load_registration_bad_id(tmp_path):
    path = tmp_path / "registration.txt"
    path.write_text("1|abc\n")
    manager, _ = make_manager()
    with pytest.raises(ValueError):
        load_registration(manager, path)


def test_load_registration_missing_file(tmp_path):
    manager, _ = make_manager()
    with pytest.raises(FileNotFoundError):
        load_registration(manager, tmp_path / "absent.txt")