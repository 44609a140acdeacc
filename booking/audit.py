"""Revisions-Protokoll: jeder Reservierungsversuch wird angehängt.

AuditLogger ist das äußerste Kettenglied und sieht deshalb sowohl
abgelehnte Versuche (NotAuthorizedError) als auch das Endergebnis nach
der Warteliste. Der Eintrag wird geschrieben, bevor das Ergebnis an den
Aufrufer zurückgeht.
"""

import logging
from pathlib import Path
from typing import Protocol, Union

from booking.authorization import AuthorizationGuard
from booking.chain import Interceptor
from booking.outcome import CallerContext, ReservationOutcome
from models.errors import NotAuthorizedError

logger = logging.getLogger(__name__)


class AuditSink(Protocol):
    """Append-only Ziel für Protokolleinträge; wird vom Kern nie gelesen."""

    def append(self, text: str) -> None:
        ...


class FileAuditSink:
    """Hängt jeden Eintrag als eigene Zeile an eine Textdatei an."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def ensure_exists(self) -> None:
        """Legt die Datei (und fehlende Verzeichnisse) an, falls nötig."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.touch(exist_ok=True)

    def append(self, text: str) -> None:
        self.ensure_exists()
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(text.rstrip("\n") + "\n")

    def read_lines(self) -> list[str]:
        """Für die Anzeige (`main.py log`), nicht für den Kern."""
        if not self.path.exists():
            return []
        with open(self.path, "r", encoding="utf-8") as f:
            return [line.rstrip("\n") for line in f]

    def __repr__(self) -> str:
        return f"FileAuditSink({self.path})"


class MemoryAuditSink:
    """Protokoll im Speicher (Tests, Simulation)."""

    def __init__(self) -> None:
        self.records: list[str] = []

    def append(self, text: str) -> None:
        self.records.append(text)

    def __len__(self) -> int:
        return len(self.records)


def format_rejected(user: str, week: int, name: str) -> str:
    return (f"*** User {user} attempted to reserve a room without sufficient "
            f"privileges (week {week}, name {name}) ***")


def format_queued(user: str, week: int, name: str) -> str:
    return f"Reservation for week {week}, name {name} failed (User {user})"


def format_booked(user: str, room_number: int, week: int, name: str) -> str:
    return (f"Reservation: room={room_number}, week={week}, name={name} "
            f"(User {user})")


class AuditLogger(Interceptor):
    """Schreibt genau einen Eintrag pro Aufruf: abgelehnt, Warteliste oder gebucht."""

    wraps = (AuthorizationGuard,)

    def __init__(self, sink: AuditSink, echo_to_logger: bool = False) -> None:
        super().__init__()
        self._sink = sink
        self._echo = echo_to_logger

    def _write(self, text: str) -> None:
        self._sink.append(text)
        if self._echo:
            logger.info(f"Audit: {text}")

    def handle(self, context: CallerContext, week: int,
               name: str) -> ReservationOutcome:
        try:
            outcome = self.next.handle(context, week, name)
        except NotAuthorizedError:
            self._write(format_rejected(context.user, week, name))
            raise

        if outcome.is_queued:
            self._write(format_queued(context.user, week, name))
        else:
            self._write(format_booked(context.user, outcome.room_number,
                                      week, name))
        return outcome
