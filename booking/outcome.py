"""Ergebnis einer Reservierung: Zimmer gebunden oder in die Warteliste gestellt."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from models.reservation import QUEUED_ROOM_NUMBER, Reservation

if TYPE_CHECKING:
    from models.room import Room


@dataclass(frozen=True)
class CallerContext:
    """Angemeldeter Benutzer, unter dem eine Reservierung versucht wird.

    Wird bei jedem Aufruf explizit durch die Kette gereicht.
    """

    user: str

    def __str__(self) -> str:
        return self.user


@dataclass(frozen=True)
class ReservationOutcome:
    """Erfolgreiches Ergebnis der Reservierungs-Operation.

    room is None  → kein Zimmer frei, Anfrage steht in der Warteliste
    room gesetzt  → Zimmer für die Woche gebucht
    """

    week: int
    name: str
    room: Optional["Room"] = None

    @classmethod
    def bound(cls, room: "Room", week: int, name: str) -> "ReservationOutcome":
        return cls(week=week, name=name, room=room)

    @classmethod
    def queued(cls, week: int, name: str) -> "ReservationOutcome":
        return cls(week=week, name=name, room=None)

    @property
    def is_queued(self) -> bool:
        return self.room is None

    @property
    def room_number(self) -> int:
        """Zimmernummer oder -1 für die Warteliste."""
        return QUEUED_ROOM_NUMBER if self.room is None else self.room.number

    def to_reservation(self) -> Reservation:
        return Reservation(week=self.week, name=self.name,
                           room_number=self.room_number)
