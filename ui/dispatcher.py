"""Zeilenorientierter Dialog für die Rezeption.

Jede Eingabezeile wird per regulärem Ausdruck einem Befehl zugeordnet.
Fehlerhafte Eingaben werden gemeldet und erreichen den Kern nie.
"""

import logging
import re
from typing import Optional

from rich.console import Console

from booking.desk import ReservationDesk
from booking.outcome import CallerContext
from models.errors import NotAuthorizedError
from ui.renderer import HELP_TEXT, queue_table, reservations_table

logger = logging.getLogger(__name__)

_RESERVATION_RE = re.compile(r"^[ \t]*r[ \t]+(?P<week>\d+)[ \t]+(?P<name>\S+)[ \t]*$")
_BOGUS_RESERVATION_RE = re.compile(r"^[ \t]*r\b")
_LIST_RE = re.compile(r"^[ \t]*l[ \t]*$")
_QUEUE_RE = re.compile(r"^[ \t]*q[ \t]*$")
_HELP_RE = re.compile(r"^[ \t]*\?[ \t]*$")
_QUIT_RE = re.compile(r"^[ \t]*\.[ \t]*$")


class CommandDispatcher:
    """Verarbeitet Eingabezeilen für einen angemeldeten Benutzer."""

    def __init__(self, desk: ReservationDesk, context: CallerContext,
                 console: Optional[Console] = None) -> None:
        self._desk = desk
        self._context = context
        self._console = console or Console()

    @property
    def console(self) -> Console:
        return self._console

    def show_options(self) -> None:
        self._console.print(HELP_TEXT)

    def dispatch(self, line: str) -> bool:
        """Verarbeitet eine Zeile. Gibt False zurück, wenn die Sitzung enden soll."""
        if not line or not line.strip():
            return True

        match = _RESERVATION_RE.match(line)
        if match:
            self._reserve(int(match.group("week")), match.group("name"))
            return True
        if _BOGUS_RESERVATION_RE.match(line):
            self._console.print(
                "[yellow]Reservierungen brauchen zwei Parameter: eine Woche "
                "(ganze Zahl, beginnend bei 0) und einen Namen.[/yellow]"
            )
            return True
        if _LIST_RE.match(line):
            self._console.print(reservations_table(self._desk.all_reservations()))
            return True
        if _QUEUE_RE.match(line):
            self._console.print(queue_table(self._desk.waiting()))
            return True
        if _HELP_RE.match(line):
            self.show_options()
            return True
        if _QUIT_RE.match(line):
            return False

        self._console.print(f"[red]Ungültige Eingabe:[/red] {line.strip()}")
        return True

    def _reserve(self, week: int, name: str) -> None:
        weeks = self._desk.weeks_in_year
        if week >= weeks:
            self._console.print(
                f"[yellow]Es gibt nur {weeks} Wochen im Jahr "
                f"(erste Woche: 0).[/yellow]"
            )
            return

        try:
            outcome = self._desk.reserve(self._context, week, name)
        except NotAuthorizedError:
            self._console.print(
                f"[red bold]*** Benutzer {self._context.user} darf keine "
                f"Reservierungen anlegen. ***[/red bold]"
            )
            return

        if outcome.is_queued:
            self._console.print(
                f"[yellow]Keine Zimmer mehr frei in Woche {week}! "
                f"Reservierung kommt auf die Warteliste.[/yellow]"
            )
        else:
            self._console.print(
                f"[green]✓[/green] Zimmer {outcome.room_number} für Woche "
                f"{week} reserviert ({name})."
            )

    def run(self) -> None:
        """Eingabeschleife bis '.' oder Dateiende."""
        self.show_options()
        while True:
            try:
                line = self._console.input("> ")
            except EOFError:
                break
            if not self.dispatch(line):
                break
        logger.info(f"Sitzung von {self._context.user} beendet")
