"""Text shown to the user: the menu and the workshop listings."""

from __future__ import annotations

from workshophub.participants import ParticipantList
from workshophub.registration import RegistrationManager
from workshophub.workshops import Workshop, WorkshopList

_UNAVAILABLE = "Workshop list is temporarily unavailable. Please try again later."


def _entry(workshop: Workshop) -> str:
    return f"\t({workshop.number}) {workshop.title}\n"


def menu_text() -> str:
    """Return the main menu."""
    return (
        "\n*********************************************\n"
        "\t\tWORKSHOP HUB\n"
        "*********************************************\n"
        "\t1. View all workshops\n"
        "\t2. View open workshops\n"
        "\t3. View workshops by price\n"
        "\t4. Register for a workshop\n"
        "\t5. List all your workshops\n"
        "\t6. Cancel registration\n"
        "\t7. Exit\n"
        "\n"
    )


def all_workshops_text(workshops: WorkshopList) -> str:
    """Return the listing of every workshop in the catalogue."""
    if not len(workshops):
        return f"{_UNAVAILABLE}\n\n"
    header = (
        "\tALL WORKSHOPS\n"
        "\t(Workshop #) Workshop Name\n"
        "\t-----------------------------\n"
    )
    return header + "".join(_entry(workshop) for workshop in workshops) + "\n"


def open_workshops_text(
    workshops: WorkshopList, registration: RegistrationManager
) -> str:
    """Return the listing of the workshops that are open for registration."""
    if not registration.open_workshops():
        return "\n\tThere are no open workshops.\n"
    header = (
        "\tOPEN WORKSHOPS\n"
        "\t(Workshop #) Workshop Name\n"
        "\t--------------------------\n"
    )
    body = "".join(
        _entry(workshop) for workshop in workshops if registration.is_open(workshop.number)
    )
    return header + body + "\n"


def workshops_by_price_text(workshops: WorkshopList, max_price: float) -> str:
    """Return the listing of workshops priced at or below ``max_price``."""
    if not len(workshops):
        return f"\n\t{_UNAVAILABLE}\n"
    header = (
        "\n\tWORKSHOPS BY PRICE\n"
        "\t(Workshop #) $Price Workshop Name\n"
        "\t---------------------------------\n"
    )
    body = "".join(
        f"\t({workshop.number}) ${workshop.price:.2f} {workshop.title}\n"
        for workshop in workshops
        if workshop.price <= max_price
    )
    return header + body + "\n"


def participant_workshops_text(
    participants: ParticipantList, participant_id: int
) -> str:
    """Return the listing of the workshops a participant is registered for."""
    registered = participants.workshops(participant_id)
    if not registered:
        return "\nYou are not currently registered for any workshops.\n\n"
    header = (
        "\tYOUR WORKSHOPS\n"
        "\t(Workshop #) Workshop Name\n"
        "\t--------------------------\n"
    )
    return header + "".join(_entry(workshop) for workshop in registered) + "\n"


def workshop_text(workshop: Workshop) -> str:
    """Return the details of a single workshop."""
    return (
        f"\n\t{workshop.title}\n"
        f"\tNumber: {workshop.number}\n"
        f"\tHours: {workshop.hours}\n"
        f"\tPrice: ${workshop.price:.2f}\n\n"
    )