"""Datenmodell für eine Reservierung (Pydantic v2, unveränderlich)."""

from pydantic import BaseModel, ConfigDict

# Zimmernummer einer Reservierung, die noch in der Warteliste steht
QUEUED_ROOM_NUMBER = -1


class Reservation(BaseModel):
    """Momentaufnahme einer Reservierung. Reine Daten, kein Verhalten."""

    model_config = ConfigDict(frozen=True)

    week: int          # 0-basiert
    name: str          # Name des Gastes
    room_number: int   # -1 = in der Warteliste, noch kein Zimmer

    @property
    def is_queued(self) -> bool:
        """True wenn die Reservierung noch keinem Zimmer zugeordnet ist."""
        return self.room_number == QUEUED_ROOM_NUMBER

    def __str__(self) -> str:
        if self.is_queued:
            return f"Woche {self.week}: {self.name} (Warteliste)"
        return f"Zimmer {self.room_number}, Woche {self.week}: {self.name}"
