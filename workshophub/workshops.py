"""Workshops and the catalogue that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True, order=True)
class Workshop:
    """A workshop offering. Workshops compare and hash by number alone."""

    number: int
    title: str = field(compare=False)
    hours: int = field(compare=False)
    capacity: int = field(compare=False)
    price: float = field(compare=False)


class WorkshopList:
    """A catalogue of workshops keyed by number, iterated in number order."""

    def __init__(self) -> None:
        self._workshops: dict[int, Workshop] = {}

    def add(self, workshop: Workshop) -> None:
        """Add a workshop; one whose number is already present is ignored."""
        self._workshops.setdefault(workshop.number, workshop)

    def get(self, number: int) -> Workshop:
        """Return the workshop with the given number."""
        try:
            return self._workshops[number]
        except KeyError:
            raise KeyError(f"no workshop numbered {number}") from None

    def clear(self) -> None:
        """Remove every workshop."""
        self._workshops.clear()

    def __iter__(self) -> Iterator[Workshop]:
        return iter(sorted(self._workshops.values()))

    def __len__(self) -> int:
        return len(self._workshops)

    def __contains__(self, number: object) -> bool:
        return number in self._workshops