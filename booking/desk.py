"""ReservationDesk – die Rezeption: Kern + Interceptor-Kette + Sperre.

Die nach außen sichtbare Operation ist

    AuditLogger(AuthorizationGuard(OverflowQueue(RoomAllocator.allocate)))

Ein Lock serialisiert jeden Aufruf der Kette. Damit bleiben "höchstens ein
Gast pro Zimmer und Woche" und "genau ein Wartelisten-Eintrag pro
Überlauf" auch bei gleichzeitigen Aufrufern erhalten.
"""

import logging
import threading
from typing import Optional

from booking.allocator import RoomAllocator
from booking.audit import AuditLogger, AuditSink, FileAuditSink
from booking.authorization import AuthorizationGuard
from booking.chain import InterceptionChain, Interceptor, ReservationHandler
from booking.outcome import CallerContext, ReservationOutcome
from booking.queue import OverflowQueue, WaitingList
from booking.security import IdentityProvider, SecurityManager
from config.schema import HotelConfig
from models.reservation import Reservation
from models.room import Room

logger = logging.getLogger(__name__)


class ReservationDesk:
    """Einziger Einstiegspunkt für Reservierungen und Abfragen."""

    def __init__(
        self,
        allocator: RoomAllocator,
        identity: IdentityProvider,
        audit_sink: AuditSink,
        waiting_list: Optional[WaitingList] = None,
        echo_audit: bool = False,
        extra_layers: Optional[list[Interceptor]] = None,
    ) -> None:
        self._allocator = allocator
        self._identity = identity
        self._audit_sink = audit_sink
        self._waiting_list = waiting_list if waiting_list is not None else WaitingList()
        self._lock = threading.Lock()

        chain = InterceptionChain(allocator)
        chain.register(AuditLogger(audit_sink, echo_to_logger=echo_audit))
        chain.register(AuthorizationGuard(identity))
        chain.register(OverflowQueue(self._waiting_list))
        for layer in extra_layers or []:
            chain.register(layer)
        self._layers = chain.order()
        self._handler: ReservationHandler = chain.build()

    @classmethod
    def from_config(cls, config: HotelConfig,
                    audit_sink: Optional[AuditSink] = None) -> "ReservationDesk":
        """Baut die Rezeption aus der Konfiguration.

        Ohne explizites Ziel wird in die konfigurierte Protokolldatei geschrieben.
        """
        if audit_sink is None:
            audit_sink = FileAuditSink(config.audit.log_file)
        return cls(
            allocator=RoomAllocator.from_config(config),
            identity=SecurityManager(config.security),
            audit_sink=audit_sink,
            echo_audit=config.audit.echo_to_logger,
        )

    # ─── Eigenschaften ───

    @property
    def allocator(self) -> RoomAllocator:
        return self._allocator

    @property
    def audit_sink(self) -> AuditSink:
        return self._audit_sink

    @property
    def weeks_in_year(self) -> int:
        return self._allocator.weeks_in_year

    @property
    def number_of_rooms(self) -> int:
        return self._allocator.number_of_rooms

    @property
    def layer_names(self) -> list[str]:
        """Kettenglieder von außen nach innen."""
        return [type(l).__name__ for l in reversed(self._layers)]

    # ─── Reservieren ───

    def reserve(self, context: CallerContext, week: int,
                name: str) -> ReservationOutcome:
        """Reserviert ein Zimmer über die komplette Kette.

        Returns:
            ReservationOutcome mit Zimmer oder als Wartelisten-Eintrag.

        Raises:
            NotAuthorizedError: Benutzer darf nicht reservieren (protokolliert).
        """
        with self._lock:
            return self._handler.handle(context, week, name)

    # ─── Abfragen ───

    def find_free_room(self, week: int) -> Optional[Room]:
        with self._lock:
            return self._allocator.find_free_room(week)

    def all_reservations(self) -> list[Reservation]:
        with self._lock:
            return self._allocator.all_reservations()

    def waiting(self) -> list[Reservation]:
        with self._lock:
            return self._waiting_list.waiting

    def __repr__(self) -> str:
        return (f"ReservationDesk({self._allocator!r}, "
                f"Kette: {' → '.join(self.layer_names)})")
