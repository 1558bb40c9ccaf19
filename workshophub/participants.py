"""Participants and the workshops each has signed up for."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from workshophub.workshops import Workshop


@dataclass(frozen=True, order=True)
class Participant:
    """A participant. Participants compare and hash by id alone."""

    id: int
    first_name: str = field(compare=False)
    last_name: str = field(compare=False)


class ParticipantList:
    """Participants keyed by id, each with the workshops they attend."""

    def __init__(self) -> None:
        self._participants: dict[int, Participant] = {}
        self._workshops: dict[int, list[Workshop]] = {}

    def add(self, participant: Participant) -> None:
        """Add a participant; one whose id is already present is ignored."""
        if participant.id not in self._participants:
            self._participants[participant.id] = participant
            self._workshops[participant.id] = []

    def add_workshop(self, participant: Participant, workshop: Workshop) -> None:
        """Record a workshop for a participant, adding the participant if new."""
        self.add(participant)
        self._workshops[participant.id].append(workshop)

    def get(self, participant_id: int) -> Participant:
        """Return the participant with the given id."""
        try:
            return self._participants[participant_id]
        except KeyError:
            raise KeyError(f"no participant with id {participant_id}") from None

    def workshops(self, participant_id: int) -> list[Workshop]:
        """Return a copy of the workshops recorded for a participant."""
        self.get(participant_id)
        return list(self._workshops[participant_id])

    def cancel_workshop(self, participant_id: int, workshop_number: int) -> None:
        """Drop the workshop with the given number from a participant's list."""
        self.get(participant_id)
        self._workshops[participant_id] = [
            workshop
            for workshop in self._workshops[participant_id]
            if workshop.number != workshop_number
        ]

    def clear(self) -> None:
        """Remove every participant."""
        self._participants.clear()
        self._workshops.clear()

    def __iter__(self) -> Iterator[Participant]:
        return iter(sorted(self._participants.values()))

    def __len__(self) -> int:
        return len(self._participants)