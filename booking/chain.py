"""Interceptor-Kette um die Reservierungs-Operation.

Jeder Interceptor umhüllt den nächsten Handler der Kette. Er kann die
Eingaben prüfen, abbrechen, delegieren und auf Ergebnis oder Fehler des
Delegaten reagieren. Die Reihenfolge ergibt sich aus den deklarierten
Abhängigkeiten (`wraps`), NICHT aus der Registrierungsreihenfolge:

    wraps = (OverflowQueue,)  →  dieser Interceptor liegt außen um OverflowQueue

Für die drei Standard-Interceptoren ergibt das:

    AuditLogger(AuthorizationGuard(OverflowQueue(RoomAllocator.allocate)))
"""

import logging
from typing import Optional, Protocol

from booking.outcome import CallerContext, ReservationOutcome

logger = logging.getLogger(__name__)


class ChainConfigurationError(Exception):
    """Kette lässt sich nicht aufbauen (fehlende Abhängigkeit, Zyklus, Duplikat)."""


class ReservationHandler(Protocol):
    """Gemeinsame Schnittstelle aller Kettenglieder und des Kerns."""

    def handle(self, context: CallerContext, week: int,
               name: str) -> ReservationOutcome:
        ...


class Interceptor:
    """Basisklasse für ein Kettenglied.

    Unterklassen setzen `wraps` auf die Interceptor-Klassen, die sie von
    außen umhüllen müssen, und implementieren `handle()`.
    """

    wraps: tuple[type["Interceptor"], ...] = ()

    def __init__(self) -> None:
        self._next: Optional[ReservationHandler] = None

    def bind(self, next_handler: ReservationHandler) -> "Interceptor":
        """Verbindet diesen Interceptor mit dem nächsten Handler."""
        self._next = next_handler
        return self

    @property
    def next(self) -> ReservationHandler:
        if self._next is None:
            raise ChainConfigurationError(
                f"{type(self).__name__} ist mit keinem Handler verbunden"
            )
        return self._next

    def handle(self, context: CallerContext, week: int,
               name: str) -> ReservationOutcome:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class InterceptionChain:
    """Setzt registrierte Interceptoren in deklarierter Reihenfolge um einen Kern."""

    def __init__(self, core: ReservationHandler) -> None:
        self._core = core
        self._layers: list[Interceptor] = []

    def register(self, layer: Interceptor) -> "InterceptionChain":
        """Registriert einen Interceptor. Reihenfolge der Aufrufe ist egal."""
        if any(type(l) is type(layer) for l in self._layers):
            raise ChainConfigurationError(
                f"{type(layer).__name__} ist bereits registriert"
            )
        self._layers.append(layer)
        return self

    def order(self) -> list[Interceptor]:
        """Interceptoren von innen (nahe am Kern) nach außen.

        Topologische Sortierung über `wraps`; bei gleichrangigen Gliedern
        entscheidet die Registrierungsreihenfolge.
        """
        by_type = {type(l): l for l in self._layers}
        for layer in self._layers:
            for dep in layer.wraps:
                if dep not in by_type:
                    raise ChainConfigurationError(
                        f"{type(layer).__name__} umhüllt {dep.__name__}, "
                        f"das aber nicht registriert ist"
                    )

        ordered: list[Interceptor] = []
        placed: set[type] = set()
        remaining = list(self._layers)
        while remaining:
            ready = next(
                (l for l in remaining if all(d in placed for d in l.wraps)),
                None,
            )
            if ready is None:
                names = ", ".join(type(l).__name__ for l in remaining)
                raise ChainConfigurationError(f"Zyklische Abhängigkeit: {names}")
            ordered.append(ready)
            placed.add(type(ready))
            remaining.remove(ready)
        return ordered

    def build(self) -> ReservationHandler:
        """Verbindet alle Glieder und gibt den äußersten Handler zurück."""
        handler: ReservationHandler = self._core
        layers = self.order()
        for layer in layers:
            handler = layer.bind(handler)
        names = " → ".join(type(l).__name__ for l in reversed(layers))
        logger.debug(f"Interceptor-Kette: {names or '(leer)'}")
        return handler
