"""Belegungsbericht: wie voll ist das Hotel pro Woche?

Reine Auswertung über ReservationDesk-Abfragen, verändert nichts.
"""

from pydantic import BaseModel

from booking.desk import ReservationDesk


# ─── Metriken-Modelle ─────────────────────────────────────────────────────────

class WeekOccupancy(BaseModel):
    """Belegung einer einzelnen Woche."""

    week: int
    booked: int
    free: int
    queued: int

    @property
    def utilisation(self) -> float:
        total = self.booked + self.free
        return self.booked / total if total else 0.0


class OccupancyReport(BaseModel):
    """Belegung über alle Wochen."""

    hotel_name: str
    number_of_rooms: int
    weeks: list[WeekOccupancy]

    @property
    def total_booked(self) -> int:
        return sum(w.booked for w in self.weeks)

    @property
    def total_queued(self) -> int:
        return sum(w.queued for w in self.weeks)

    @property
    def utilisation(self) -> float:
        """Gesamtauslastung 0.0–1.0 über alle Zimmer-Wochen."""
        capacity = self.number_of_rooms * len(self.weeks)
        return self.total_booked / capacity if capacity else 0.0

    def print_rich(self) -> None:
        """Gibt den Bericht formatiert über Rich aus."""
        from rich.console import Console
        from rich.panel import Panel
        from rich.table import Table
        from rich import box

        console = Console()
        console.print(Panel(
            f"[bold]{self.hotel_name}[/bold]  |  {self.number_of_rooms} Zimmer  |  "
            f"Auslastung {self.utilisation:.0%}  |  "
            f"Warteliste: {self.total_queued}",
            title="Belegung",
            border_style="cyan",
        ))

        table = Table(box=box.ROUNDED)
        table.add_column("Woche", justify="right")
        table.add_column("Belegt", justify="right")
        table.add_column("Frei", justify="right")
        table.add_column("Warteliste", justify="right")
        table.add_column("Auslastung", justify="right")
        for w in self.weeks:
            color = "red" if w.free == 0 else "green"
            table.add_row(
                str(w.week),
                str(w.booked),
                f"[{color}]{w.free}[/{color}]",
                str(w.queued),
                f"{w.utilisation:.0%}",
            )
        console.print(table)


# ─── Analyzer ─────────────────────────────────────────────────────────────────

class OccupancyAnalyzer:
    """Berechnet den Belegungsbericht für eine Rezeption."""

    def analyze(self, desk: ReservationDesk,
                hotel_name: str = "") -> OccupancyReport:
        reservations = desk.all_reservations()
        waiting = desk.waiting()
        n_rooms = desk.number_of_rooms

        booked_per_week = [0] * desk.weeks_in_year
        for r in reservations:
            booked_per_week[r.week] += 1
        queued_per_week = [0] * desk.weeks_in_year
        for r in waiting:
            queued_per_week[r.week] += 1

        weeks = [
            WeekOccupancy(
                week=week,
                booked=booked,
                free=n_rooms - booked,
                queued=queued_per_week[week],
            )
            for week, booked in enumerate(booked_per_week)
        ]
        return OccupancyReport(hotel_name=hotel_name,
                               number_of_rooms=n_rooms, weeks=weeks)
