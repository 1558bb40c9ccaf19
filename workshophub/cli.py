"""Command-line entry point: load the databases and start the menu."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence, TypeVar

from workshophub.interface import WorkshopHub
from workshophub.loader import load_participants, load_registration, load_workshops
from workshophub.participants import ParticipantList
from workshophub.registration import RegistrationManager
from workshophub.workshops import WorkshopList

PARTICIPANT_FILE = "participant_database.txt"
WORKSHOP_FILE = "workshop_database.txt"
REGISTRATION_FILE = "registration_database.txt"

_T = TypeVar("_T")


def _load(load: Callable[[_T, Path], None], target: _T, path: Path) -> None:
    try:
        load(target, path)
    except OSError:
        sys.stderr.write(f"Could not open {os.fspath(path)}\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the workshop, participant and registration files and run the menu."""
    parser = argparse.ArgumentParser(
        prog="workshophub", description="Browse workshops and manage registrations."
    )
    parser.add_argument(
        "--data-dir",
        default=".",
        help="directory holding the database files (default: current directory)",
    )
    args = parser.parse_args(argv)
    base = Path(args.data_dir)

    participants = ParticipantList()
    _load(load_participants, participants, base / PARTICIPANT_FILE)

    workshops = WorkshopList()
    _load(load_workshops, workshops, base / WORKSHOP_FILE)

    manager = RegistrationManager(workshops, participants)
    _load(load_registration, manager, base / REGISTRATION_FILE)

    WorkshopHub(workshops, participants, manager, sys.stdin, sys.stdout, sys.stderr).run()
    sys.stdout.write("\n\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())