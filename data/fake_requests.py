"""Testdaten-Generator für Reservierungsanfragen.

Erzeugt reproduzierbare (seed) Anfragen mit Gastnamen und Wochen.
Mit mehr Anfragen als Zimmer-Wochen läuft die Warteliste garantiert voll.
"""

import random
from typing import Optional

from pydantic import BaseModel

from config.schema import HotelConfig

# ─── Namens-Listen ────────────────────────────────────────────────────────────

_GUEST_NAMES = [
    "disco-fred", "afro-bob", "carl", "dora", "eve", "Müller", "Schmidt",
    "Schneider", "Fischer", "Weber", "Meyer", "Wagner", "Becker", "Schulz",
    "Hoffmann", "Koch", "Bauer", "Richter", "Klein", "Wolf", "Neumann",
    "Zimmermann", "Braun", "Hartmann", "Lange", "Krause", "Lehmann",
]


class ReservationRequest(BaseModel):
    """Eine einzelne Anfrage "Name X möchte Woche Y"."""

    week: int
    name: str   # ein Token, ohne Leerzeichen (wie im Dialog)


class FakeRequestGenerator:
    """Erzeugt zufällige, aber reproduzierbare Reservierungsanfragen."""

    def __init__(self, config: HotelConfig, seed: Optional[int] = 42) -> None:
        self.config = config
        self.rng = random.Random(seed)

    def generate(self, count: int) -> list[ReservationRequest]:
        if count < 0:
            raise ValueError(f"count muss >= 0 sein, nicht {count}")
        weeks = self.config.rooms.weeks_in_year
        return [
            ReservationRequest(
                week=self.rng.randrange(weeks),
                name=self.rng.choice(_GUEST_NAMES).replace(" ", "-"),
            )
            for _ in range(count)
        ]

    def overbooking(self, extra_per_week: int = 1) -> list[ReservationRequest]:
        """Füllt jede Woche komplett und hängt `extra_per_week` Überläufer an."""
        rc = self.config.rooms
        requests: list[ReservationRequest] = []
        for week in range(rc.weeks_in_year):
            for _ in range(rc.number_of_rooms + extra_per_week):
                requests.append(ReservationRequest(
                    week=week, name=self.rng.choice(_GUEST_NAMES),
                ))
        return requests
