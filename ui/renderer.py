"""Rich-Tabellen für Reservierungen und Warteliste.

Wird vom Dialog (ui/dispatcher.py) und von `main.py simulate` verwendet.
"""

from rich import box
from rich.table import Table

from models.reservation import Reservation


def reservation_rows(reservations: list[Reservation]) -> list[list[str]]:
    """Tabellenzeilen [Zimmer, Woche, Name], in der gelieferten Reihenfolge."""
    return [
        [f"{r.room_number:04d}", f"{r.week:02d}", r.name]
        for r in reservations
    ]


def queue_rows(waiting: list[Reservation]) -> list[list[str]]:
    """Tabellenzeilen [Woche, Name] in Ankunftsreihenfolge."""
    return [[f"{r.week:02d}", r.name] for r in waiting]


def reservations_table(reservations: list[Reservation]) -> Table:
    table = Table(title="Reservierungen", box=box.ROUNDED)
    table.add_column("Zimmer", justify="right")
    table.add_column("Woche", justify="right")
    table.add_column("Name")
    for row in reservation_rows(reservations):
        table.add_row(*row)
    if not reservations:
        table.caption = "Keine Reservierungen."
    return table


def queue_table(waiting: list[Reservation]) -> Table:
    table = Table(title="Warteliste", box=box.ROUNDED)
    table.add_column("Woche", justify="right")
    table.add_column("Name")
    for row in queue_rows(waiting):
        table.add_row(*row)
    if not waiting:
        table.caption = "Warteliste ist leer."
    return table


HELP_TEXT = (
    "\n[bold]Befehle:[/bold]\n"
    "  [cyan]r[/cyan] <woche> <name>  Reservierung\n"
    "  [cyan]l[/cyan]                 Reservierungen auflisten\n"
    "  [cyan]q[/cyan]                 Warteliste anzeigen\n"
    "  [cyan]?[/cyan]                 Diese Hilfe\n"
    "  [cyan].[/cyan]                 Beenden\n"
)
