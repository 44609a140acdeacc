"""SecurityManager – Spielzeug-Authentifizierung und Rechteprüfung.

Die Benutzerliste kommt aus der Konfiguration. Es gibt keinen globalen
"aktuellen Benutzer": login() liefert einen CallerContext, der bei jedem
Reservierungsaufruf mitgegeben wird.
"""

import logging
import secrets
from typing import Protocol

from booking.outcome import CallerContext
from config.schema import SecurityConfig, UserDefinition
from models.errors import UnknownUserError, WrongPasswordError

logger = logging.getLogger(__name__)


class IdentityProvider(Protocol):
    """Das, was der AuthorizationGuard über Benutzer wissen muss."""

    def may_book(self, user: str) -> bool:
        ...


class SecurityManager:
    """Prüft Passwörter und das Recht, Reservierungen anzulegen."""

    def __init__(self, security: SecurityConfig) -> None:
        self._users: dict[str, UserDefinition] = {u.name: u for u in security.users}

    @property
    def user_names(self) -> list[str]:
        return sorted(self._users)

    def users(self) -> list[UserDefinition]:
        return [self._users[n] for n in self.user_names]

    def login(self, user: str, password: str) -> CallerContext:
        """Prüft die Zugangsdaten und gibt den Aufrufer-Kontext zurück.

        Raises:
            UnknownUserError: Benutzer existiert nicht.
            WrongPasswordError: Passwort falsch.
        """
        definition = self._users.get(user)
        if definition is None:
            logger.warning(f"Login fehlgeschlagen: unbekannter Benutzer {user!r}")
            raise UnknownUserError(user)
        if not secrets.compare_digest(password.encode("utf-8"),
                                      definition.password.encode("utf-8")):
            logger.warning(f"Login fehlgeschlagen: falsches Passwort für {user!r}")
            raise WrongPasswordError(user)
        logger.info(f"Benutzer {user} angemeldet")
        return CallerContext(user=user)

    def may_book(self, user: str) -> bool:
        """True wenn der Benutzer Reservierungen anlegen darf. Unbekannt → False."""
        definition = self._users.get(user)
        return definition is not None and definition.may_make_reservations
