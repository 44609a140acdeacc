"""Datenmodell für ein Hotelzimmer mit wochenweiser Belegung."""

from typing import Optional

from config.defaults import ROOM_FARE, WEEKS_IN_YEAR
from models.errors import AlreadyBookedError
from models.reservation import Reservation


class Room:
    """Ein Zimmer merkt sich pro Woche, wer es gebucht hat.

    `None` im Belegungs-Array heißt: in dieser Woche frei.
    Pro Zimmer und Woche gibt es höchstens einen Gast.
    """

    def __init__(self, number: int, weeks_in_year: int = WEEKS_IN_YEAR,
                 fare: int = ROOM_FARE) -> None:
        if number < 0:
            raise ValueError(f"Zimmernummer muss >= 0 sein, nicht {number}")
        if weeks_in_year <= 0:
            raise ValueError(f"weeks_in_year muss > 0 sein, nicht {weeks_in_year}")
        self._number = number
        self._fare = fare
        self._occupants: list[Optional[str]] = [None] * weeks_in_year

    @property
    def number(self) -> int:
        return self._number

    @property
    def fare(self) -> int:
        """Zimmerpreis pro Woche (nur informativ)."""
        return self._fare

    @property
    def weeks_in_year(self) -> int:
        return len(self._occupants)

    def _check_week(self, week: int) -> None:
        # Negative Indizes würden sonst still von hinten zählen
        if not 0 <= week < len(self._occupants):
            raise IndexError(
                f"Woche {week} außerhalb von [0, {len(self._occupants)})"
            )

    def is_free(self, week: int) -> bool:
        """True wenn für diese Woche noch niemand eingetragen ist."""
        self._check_week(week)
        return self._occupants[week] is None

    def occupant(self, week: int) -> Optional[str]:
        """Name des Gastes in dieser Woche oder None."""
        self._check_week(week)
        return self._occupants[week]

    def book(self, week: int, name: str) -> "Room":
        """Reserviert das Zimmer für eine Woche und gibt sich selbst zurück.

        Raises:
            AlreadyBookedError: wenn die Woche schon belegt ist. Der
                bestehende Eintrag bleibt dabei unverändert.
        """
        if not self.is_free(week):
            raise AlreadyBookedError(self._number, week, self._occupants[week])
        self._occupants[week] = name
        return self

    def list_reservations(self) -> list[Reservation]:
        """Alle belegten Wochen dieses Zimmers, aufsteigend nach Woche."""
        return [
            Reservation(week=week, name=name, room_number=self._number)
            for week, name in enumerate(self._occupants)
            if name is not None
        ]

    def __repr__(self) -> str:
        booked = sum(1 for n in self._occupants if n is not None)
        return f"Room({self._number}, {booked}/{len(self._occupants)} Wochen belegt)"
