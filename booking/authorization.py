"""AuthorizationGuard – nur berechtigte Benutzer dürfen reservieren."""

import logging

from booking.chain import Interceptor
from booking.outcome import CallerContext, ReservationOutcome
from booking.queue import OverflowQueue
from booking.security import IdentityProvider
from models.errors import NotAuthorizedError

logger = logging.getLogger(__name__)


class AuthorizationGuard(Interceptor):
    """Lehnt Aufrufe ohne Reservierungsrecht ab, BEVOR der Kern berührt wird.

    Liegt außen um die Warteliste: ein unberechtigter Aufruf verändert
    weder Zimmer noch Warteliste.
    """

    wraps = (OverflowQueue,)

    def __init__(self, identity: IdentityProvider) -> None:
        super().__init__()
        self._identity = identity

    def handle(self, context: CallerContext, week: int,
               name: str) -> ReservationOutcome:
        if not self._identity.may_book(context.user):
            logger.warning(
                f"Benutzer {context.user} ohne Reservierungsrecht "
                f"(Woche {week}, {name})"
            )
            raise NotAuthorizedError(context.user, week, name)
        return self.next.handle(context, week, name)
