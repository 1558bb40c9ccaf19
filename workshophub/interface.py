"""The interactive menu for browsing workshops and managing registrations."""

from __future__ import annotations

import sys
from collections import deque
from typing import Optional, TextIO

from workshophub import formatter
from workshophub.participants import ParticipantList
from workshophub.registration import RegistrationManager
from workshophub.workshops import WorkshopList

_MISMATCH = "The ID number does not match the name provided."
_INVALID = "Invalid selection. Please try again."
_EXIT_CHOICE = 7


class _InputClosed(Exception):
    """Raised when the input stream runs out."""


class _Tokens:
    """Whitespace-separated tokens read a line at a time from a stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    def _readline(self) -> str:
        line = self._stream.readline()
        if not line:
            raise _InputClosed
        return line

    def next(self) -> str:
        while not self._pending:
            self._pending.extend(self._readline().split())
        return self._pending.popleft()

    def next_int(self) -> Optional[int]:
        try:
            return int(self.next())
        except ValueError:
            return None

    def wait_for_enter(self) -> None:
        self._pending.clear()
        self._readline()


def verify_identification(
    participants: ParticipantList,
    participant_id: Optional[int],
    first_name: str,
    last_name: str,
) -> bool:
    """Tell whether the id belongs to a participant with exactly this name."""
    if participant_id is None:
        return False
    try:
        participant = participants.get(participant_id)
    except KeyError:
        return False
    return (
        participant.id == participant_id
        and participant.first_name == first_name
        and participant.last_name == last_name
    )


def parse_price(text: str) -> float:
    """Parse a price, allowing a leading dollar sign."""
    return float(text.removeprefix("$"))


class WorkshopHub:
    """The menu-driven session over a catalogue, participants and registrations."""

    def __init__(
        self,
        workshops: WorkshopList,
        participants: ParticipantList,
        registration: RegistrationManager,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> None:
        self._workshops = workshops
        self._participants = participants
        self._registration = registration
        self._input = _Tokens(stdin if stdin is not None else sys.stdin)
        self._stdout = stdout if stdout is not None else sys.stdout
        self._stderr = stderr if stderr is not None else sys.stderr

    def _out(self, text: str) -> None:
        self._stdout.write(text)

    def _err(self, text: str) -> None:
        self._stderr.write(text)

    def run(self) -> None:
        """Show the menu and handle selections until the user exits or input ends."""
        actions = {
            1: self.view_all_workshops,
            2: self.view_open_workshops,
            3: self.view_workshops_by_price,
            4: self.register_for_workshop,
            5: self.view_participant_workshops,
            6: self.cancel_registration,
        }
        try:
            while True:
                self._out(formatter.menu_text())
                self._out("Please make a selection: ")
                choice = self._input.next_int()
                self._out("\n")
                if choice == _EXIT_CHOICE:
                    self._out("Thank you for visiting!")
                    return
                action = actions.get(choice) if choice is not None else None
                if action is None:
                    self._err(f"{_INVALID}\n")
                else:
                    action()
                self.pause()
        except _InputClosed:
            return

    def read_identification(self) -> tuple[Optional[int], str, str]:
        """Prompt for an id, first name and last name; a non-numeric id reads as None."""
        self._out("Enter your ID: ")
        participant_id = self._input.next_int()
        self._out("Enter your first name: ")
        first_name = self._input.next()
        self._out("Enter your last name: ")
        last_name = self._input.next()
        self._out("\n")
        return participant_id, first_name, last_name

    def view_all_workshops(self) -> None:
        """Show every workshop."""
        self._out(formatter.all_workshops_text(self._workshops))

    def view_open_workshops(self) -> None:
        """Show the workshops open for registration."""
        self._out(formatter.open_workshops_text(self._workshops, self._registration))

    def view_workshops_by_price(self) -> None:
        """Ask for a maximum price and show the workshops within it."""
        self._out("Enter max price: $")
        text = self._input.next()
        try:
            max_price = parse_price(text)
        except ValueError:
            self._err(f"Invalid price: {text}\n")
            return
        self._out(formatter.workshops_by_price_text(self._workshops, max_price))

    def view_participant_workshops(self) -> None:
        """Identify the user and show the workshops they are registered for."""
        participant_id, first_name, last_name = self.read_identification()
        if verify_identification(self._participants, participant_id, first_name, last_name):
            self._out(
                formatter.participant_workshops_text(self._participants, participant_id)
            )
        else:
            self._err(f"{_MISMATCH}\n\n")

    def register_for_workshop(self) -> None:
        """Register the user for a workshop of their choice."""
        self._out("\tLet's register you for a workshop!\n\n")
        self.view_open_workshops()
        self._out("Enter the workshop number or '0' to cancel: ")
        number = self._input.next_int()
        self._out("\n")
        if number == 0:
            return
        if number is None:
            self._err(f"{_INVALID}\n")
            return
        participant_id, first_name, last_name = self.read_identification()
        if not verify_identification(
            self._participants, participant_id, first_name, last_name
        ):
            self._err(f"{_MISMATCH}\n")
            return
        if number not in self._workshops:
            self._err(f"There is no workshop numbered {number}.\n")
            return
        workshop = self._workshops.get(number)
        self._registration.register(number, participant_id)
        self._out("You are registered for the following workshop:\n")
        self._out(formatter.workshop_text(workshop))
        self._out(
            "A confirmation email with payment details has been sent to you.\n\n"
        )

    def cancel_registration(self) -> None:
        """Cancel one of the user's registrations."""
        participant_id, first_name, last_name = self.read_identification()
        if not verify_identification(
            self._participants, participant_id, first_name, last_name
        ):
            self._err(f"{_MISMATCH}\n")
            return
        self._out(formatter.participant_workshops_text(self._participants, participant_id))
        self._out("Which workshop would you like to cancel? ")
        number = self._input.next_int()
        if number is None or number not in self._workshops:
            self._err(f"{_INVALID}\n")
            return
        self._out("\nYour registration for the following workshop has been cancelled:\n")
        self._out(formatter.workshop_text(self._workshops.get(number)))
        self._registration.unregister(number, participant_id)
        self._out("A confirmation email with refund details has been sent to you.\n\n")

    def pause(self) -> None:
        """Wait for the user to press Enter."""
        self._out("Press 'Enter' to return to the menu...")
        self._input.wait_for_enter()