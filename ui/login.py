"""Interaktiver Login: fragt so lange nach, bis Benutzer und Passwort passen."""

from typing import Optional

from rich.console import Console
from rich.prompt import Prompt

from booking.outcome import CallerContext
from booking.security import SecurityManager
from models.errors import UnknownUserError, WrongPasswordError


def interactive_login(security: SecurityManager,
                      console: Optional[Console] = None,
                      max_attempts: Optional[int] = None) -> Optional[CallerContext]:
    """Login-Schleife. Gibt None zurück, wenn max_attempts erschöpft ist."""
    console = console or Console()
    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        user = Prompt.ask("   Login", console=console)
        password = Prompt.ask("Passwort", password=True, console=console)
        try:
            return security.login(user, password)
        except UnknownUserError:
            console.print(f"[red]Unbekannter Benutzer: {user}[/red]")
        except WrongPasswordError:
            console.print("[red]Falsches Passwort[/red]")
    return None
