"""Tracking who is registered for which workshop, and which are open."""

from __future__ import annotations

from workshophub.participants import ParticipantList
from workshophub.workshops import WorkshopList


class RegistrationManager:
    """Registers participants for workshops and opens or closes workshops by capacity."""

    def __init__(self, workshops: WorkshopList, participants: ParticipantList) -> None:
        self._workshops = workshops
        self._participants = participants
        self._registration: dict[int, set[int]] = {}
        self._open: set[int] = set()

    def register(self, workshop_number: int, participant_id: int) -> None:
        """Register a participant; the workshop closes once it reaches capacity."""
        workshop = self._workshops.get(workshop_number)
        participant = self._participants.get(participant_id)
        enrolled = self._registration.setdefault(workshop_number, set())
        enrolled.add(participant_id)
        self._participants.add_workshop(participant, workshop)
        if len(enrolled) >= workshop.capacity:
            self.close_workshop(workshop_number)

    def unregister(self, workshop_number: int, participant_id: int) -> None:
        """Remove a registration; the workshop reopens while below capacity."""
        workshop = self._workshops.get(workshop_number)
        self._participants.get(participant_id)
        enrolled = self._registration.setdefault(workshop_number, set())
        enrolled.discard(participant_id)
        if len(enrolled) < workshop.capacity:
            self.reopen_workshop(workshop_number)
        self._participants.cancel_workshop(participant_id, workshop_number)

    def add_open_workshop(self, workshop_number: int) -> None:
        """Mark a workshop open and start tracking its registrations."""
        self._open.add(workshop_number)
        self._registration.setdefault(workshop_number, set())

    def close_workshop(self, workshop_number: int) -> None:
        """Mark a workshop closed."""
        self._open.discard(workshop_number)

    def reopen_workshop(self, workshop_number: int) -> None:
        """Mark a workshop open again."""
        self._open.add(workshop_number)

    def is_open(self, workshop_number: int) -> bool:
        """Tell whether a workshop is open."""
        return workshop_number in self._open

    def open_workshops(self) -> tuple[int, ...]:
        """Return the numbers of the open workshops in ascending order."""
        return tuple(sorted(self._open))

    def registered(self, workshop_number: int) -> frozenset[int]:
        """Return the ids of the participants registered for a workshop."""
        return frozenset(self._registration.get(workshop_number, ()))