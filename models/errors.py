"""Fachliche Fehler der Hotel-Reservierung.

Nur NotAuthorizedError verlässt die zusammengesetzte Reservierungs-Operation.
NoRoomAvailableError wird von der Warteliste abgefangen, AlreadyBookedError
darf bei korrektem Verhalten des Allokators gar nicht auftreten.
"""

from typing import Optional


class HotelError(Exception):
    """Basisklasse aller fachlichen Fehler."""


class AlreadyBookedError(HotelError):
    """Zimmer ist in dieser Woche schon belegt (Programmierfehler)."""

    def __init__(self, room_number: int, week: int,
                 occupant: Optional[str] = None) -> None:
        self.room_number = room_number
        self.week = week
        self.occupant = occupant
        super().__init__(
            f"Zimmer {room_number} ist in Woche {week} bereits belegt"
            + (f" ({occupant})" if occupant else "")
        )


class NoRoomAvailableError(HotelError):
    """Kein freies Zimmer mehr in der gewünschten Woche."""

    def __init__(self, week: int, name: str) -> None:
        self.week = week
        self.name = name
        super().__init__(f"Kein freies Zimmer in Woche {week} für {name}")


class NotAuthorizedError(HotelError):
    """Der angemeldete Benutzer darf keine Reservierungen anlegen."""

    def __init__(self, user: str, week: Optional[int] = None,
                 name: Optional[str] = None) -> None:
        self.user = user
        self.week = week
        self.name = name
        super().__init__(f"Benutzer {user} darf keine Reservierungen anlegen")


class AuthenticationError(HotelError):
    """Login fehlgeschlagen (unbekannter Benutzer oder falsches Passwort)."""


class UnknownUserError(AuthenticationError):
    def __init__(self, user: str) -> None:
        self.user = user
        super().__init__(f"Unbekannter Benutzer: {user}")


class WrongPasswordError(AuthenticationError):
    def __init__(self, user: str) -> None:
        self.user = user
        super().__init__("Falsches Passwort")
