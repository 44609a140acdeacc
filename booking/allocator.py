"""RoomAllocator – der Kern: freie Zimmer finden und buchen.

Weiß nichts von Rechten, Warteliste oder Protokoll; diese Belange liegen
als Interceptoren in booking/ und werden über die Kette herumgelegt.
"""

import logging
from typing import Optional

from booking.outcome import CallerContext, ReservationOutcome
from config.defaults import NUMBER_OF_ROOMS, ROOM_FARE, WEEKS_IN_YEAR
from config.schema import HotelConfig
from models.errors import NoRoomAvailableError
from models.reservation import Reservation
from models.room import Room

logger = logging.getLogger(__name__)


class RoomAllocator:
    """Feste Menge von Zimmern; Index in der Liste == Zimmernummer."""

    def __init__(self, number_of_rooms: int = NUMBER_OF_ROOMS,
                 weeks_in_year: int = WEEKS_IN_YEAR,
                 room_fare: int = ROOM_FARE) -> None:
        if number_of_rooms <= 0:
            raise ValueError(f"number_of_rooms muss > 0 sein, nicht {number_of_rooms}")
        self._weeks_in_year = weeks_in_year
        self._rooms: tuple[Room, ...] = tuple(
            Room(number, weeks_in_year=weeks_in_year, fare=room_fare)
            for number in range(number_of_rooms)
        )

    @classmethod
    def from_config(cls, config: HotelConfig) -> "RoomAllocator":
        rc = config.rooms
        return cls(rc.number_of_rooms, rc.weeks_in_year, rc.room_fare)

    @property
    def rooms(self) -> tuple[Room, ...]:
        return self._rooms

    @property
    def number_of_rooms(self) -> int:
        return len(self._rooms)

    @property
    def weeks_in_year(self) -> int:
        return self._weeks_in_year

    def get_room(self, number: int) -> Room:
        return self._rooms[number]

    def find_free_room(self, week: int) -> Optional[Room]:
        """Erstes freies Zimmer für die Woche (niedrigste Nummer) oder None."""
        for room in self._rooms:
            if room.is_free(week):
                return room
        return None

    def allocate(self, week: int, name: str) -> Room:
        """Bucht IRGENDEIN freies Zimmer für die Woche, z.B. "Schmidt für Woche 5".

        Raises:
            NoRoomAvailableError: wenn in dieser Woche alle Zimmer belegt sind.
        """
        room = self.find_free_room(week)
        if room is None:
            logger.debug(f"Woche {week}: kein Zimmer frei für {name}")
            raise NoRoomAvailableError(week, name)
        room.book(week, name)
        logger.debug(f"Zimmer {room.number} für Woche {week} gebucht ({name})")
        return room

    def all_reservations(self) -> list[Reservation]:
        """Alle Reservierungen: Zimmer aufsteigend, innerhalb eines Zimmers Woche aufsteigend."""
        return [r for room in self._rooms for r in room.list_reservations()]

    def free_rooms(self, week: int) -> int:
        """Anzahl freier Zimmer in dieser Woche."""
        return sum(1 for room in self._rooms if room.is_free(week))

    # ─── Kettenschnittstelle ───

    def handle(self, context: CallerContext, week: int,
               name: str) -> ReservationOutcome:
        """Innerstes Kettenglied: reine Buchung, der Benutzer spielt keine Rolle."""
        return ReservationOutcome.bound(self.allocate(week, name), week, name)

    def __repr__(self) -> str:
        return (f"RoomAllocator({len(self._rooms)} Zimmer, "
                f"{self._weeks_in_year} Wochen)")
