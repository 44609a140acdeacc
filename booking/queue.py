"""Warteliste für Anfragen, für die kein Zimmer mehr frei war.

Ohne Stornierung ist sie eher ein Merkzettel: Einträge kommen nur hinzu,
in Ankunftsreihenfolge, und werden nie entfernt.
"""

import logging

from booking.chain import Interceptor
from booking.outcome import CallerContext, ReservationOutcome
from models.errors import NoRoomAvailableError
from models.reservation import QUEUED_ROOM_NUMBER, Reservation

logger = logging.getLogger(__name__)


class WaitingList:
    """Append-only Liste wartender Reservierungen (room_number = -1)."""

    def __init__(self) -> None:
        self._waiting: list[Reservation] = []

    def add(self, week: int, name: str) -> Reservation:
        reservation = Reservation(week=week, name=name,
                                  room_number=QUEUED_ROOM_NUMBER)
        self._waiting.append(reservation)
        return reservation

    @property
    def waiting(self) -> list[Reservation]:
        """Kopie der Warteliste in Ankunftsreihenfolge."""
        return list(self._waiting)

    def for_week(self, week: int) -> list[Reservation]:
        return [r for r in self._waiting if r.week == week]

    def __len__(self) -> int:
        return len(self._waiting)

    def __repr__(self) -> str:
        return f"WaitingList({len(self._waiting)} wartend)"


class OverflowQueue(Interceptor):
    """Fängt NoRoomAvailableError ab und stellt die Anfrage in die Warteliste.

    Alles andere (Erfolg oder andere Fehler) läuft unverändert durch.
    """

    wraps = ()

    def __init__(self, waiting_list: WaitingList) -> None:
        super().__init__()
        self._waiting_list = waiting_list

    @property
    def waiting_list(self) -> WaitingList:
        return self._waiting_list

    def handle(self, context: CallerContext, week: int,
               name: str) -> ReservationOutcome:
        try:
            return self.next.handle(context, week, name)
        except NoRoomAvailableError:
            self._waiting_list.add(week, name)
            logger.info(
                f"Woche {week}: kein Zimmer frei, {name} auf Warteliste "
                f"(Position {len(self._waiting_list)})"
            )
            return ReservationOutcome.queued(week, name)
