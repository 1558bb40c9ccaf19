"""Loading workshops, participants and registrations from pipe-separated files."""

from __future__ import annotations

import os
from typing import Callable, Iterator, TypeVar

from workshophub.participants import Participant, ParticipantList
from workshophub.registration import RegistrationManager
from workshophub.workshops import Workshop, WorkshopList

_T = TypeVar("_T")
_Path = "str | os.PathLike[str]"


def _lines(path: str | os.PathLike[str]) -> Iterator[tuple[int, str]]:
    with open(path, encoding="utf-8") as file:
        for lineno, line in enumerate(file, start=1):
            yield lineno, line.rstrip("\n")


def _convert(
    convert: Callable[[str], _T], text: str, path: str | os.PathLike[str], lineno: int
) -> _T:
    try:
        return convert(text)
    except ValueError:
        raise ValueError(f"{os.fspath(path)}:{lineno}: invalid number {text!r}") from None


def _fields(
    line: str, count: int, path: str | os.PathLike[str], lineno: int
) -> list[str]:
    parts = line.split("|")
    if len(parts) < count:
        raise ValueError(
            f"{os.fspath(path)}:{lineno}: expected {count} fields, got {len(parts)}"
        )
    return parts[:count]


def load_workshops(workshop_list: WorkshopList, path: str | os.PathLike[str]) -> None:
    """Read lines of number|title|hours|capacity|price into a workshop list."""
    for lineno, line in _lines(path):
        number, title, hours, capacity, price = _fields(line, 5, path, lineno)
        workshop_list.add(
            Workshop(
                _convert(int, number, path, lineno),
                title,
                _convert(int, hours, path, lineno),
                _convert(int, capacity, path, lineno),
                _convert(float, price, path, lineno),
            )
        )


def load_participants(
    participant_list: ParticipantList, path: str | os.PathLike[str]
) -> None:
    """Read lines of id|first name|last name into a participant list."""
    for lineno, line in _lines(path):
        parts = line.split("|")
        participant_id = _convert(int, parts[0], path, lineno)
        first_name = parts[1] if len(parts) > 1 else ""
        last_name = parts[2] if len(parts) > 2 else ""
        participant_list.add(Participant(participant_id, first_name, last_name))


def load_registration(
    manager: RegistrationManager, path: str | os.PathLike[str]
) -> None:
    """Read lines of workshop|id|id|... opening each workshop and registering ids."""
    for lineno, line in _lines(path):
        if not line:
            continue
        first, *rest = line.split("|")
        workshop_number = _convert(int, first, path, lineno)
        manager.add_open_workshop(workshop_number)
        for token in rest:
            if token:
                manager.register(workshop_number, _convert(int, token, path, lineno))