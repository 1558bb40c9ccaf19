# workshophub

A small console application for a workshop catalogue. Participants can
browse the available workshops, filter them by price, register for a
workshop, list their registrations and cancel them.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

The program reads three pipe-separated text files:

- `workshop_database.txt`: one workshop per line,
  `number|title|hours|capacity|price`
- `participant_database.txt`: one participant per line,
  `id|first name|last name`
- `registration_database.txt`: one open workshop per line, followed by the
  IDs of the participants already registered,
  `workshop number|id|id|...`

By default the files are looked for in the current directory. Use
`--data-dir` to read them from somewhere else:

```
workshophub
workshophub --data-dir path/to/data
```

A file that cannot be opened is reported as `Could not open <path>` and
the program carries on without it. A line with a missing field or a value
that is not a number stops the program with a `ValueError` naming the file
and line.

Only the workshops listed in `registration_database.txt` are open. A
workshop closes once its registrations reach its capacity, and reopens when
a cancellation takes it below capacity again.

The menu offers:

1. View all workshops
2. View open workshops
3. View workshops by price (a leading `$` on the price is accepted)
4. Register for a workshop
5. List all your workshops
6. Cancel registration
7. Exit

Registering, listing and cancelling ask for your ID, first name and last
name, and the name must match the ID on file. After each action the menu
waits for Enter. The session ends on choice 7 or when input runs out.

## Using it as a library

```python
from workshophub.workshops import Workshop, WorkshopList
from workshophub.participants import Participant, ParticipantList
from workshophub.registration import RegistrationManager

workshops = WorkshopList()
workshops.add(Workshop(101, "Intro to Pottery", 3, 2, 45.0))

participants = ParticipantList()
participants.add(Participant(1, "Ada", "Lovelace"))

registration = RegistrationManager(workshops, participants)
registration.add_open_workshop(101)
registration.register(101, 1)

print(registration.is_open(101))            # True: 1 of 2 places taken
print(registration.registered(101))         # frozenset({1})
print([w.title for w in participants.workshops(1)])
```

`WorkshopList` and `ParticipantList` iterate in number and id order, and
`get` raises `KeyError` for an unknown number or id.

- `workshophub.loader` has `load_workshops`, `load_participants` and
  `load_registration`, which fill these structures from the database files.
- `workshophub.formatter` builds the text the menu shows (`menu_text`,
  `all_workshops_text`, `open_workshops_text`, `workshops_by_price_text`,
  `participant_workshops_text`, `workshop_text`).
- `workshophub.interface.WorkshopHub` runs the menu over any input and
  output streams. `verify_identification` and `parse_price` are available
  on their own.

## What it does not do

- Changes made in a session are kept in memory only. Registrations and
  cancellations are never written back to the database files.
- No e-mail is sent. The confirmation messages after registering or
  cancelling are only printed.