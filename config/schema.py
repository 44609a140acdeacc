from pydantic import BaseModel, Field, model_validator
from typing import Literal


# ─── ZIMMER + WOCHEN ───

class RoomConfig(BaseModel):
    """Zimmer-Konfiguration.

    Es gibt nur einen Zimmertyp. Gebucht wird immer wochenweise,
    ein Jahr hat `weeks_in_year` Wochen (Woche 0 ist die erste).
    """
    # Anzahl Zimmer im Hotel (Zimmernummern 0 .. number_of_rooms-1)
    number_of_rooms: int = Field(2, ge=1, le=500,
        description="Anzahl Zimmer")
    # Anzahl buchbarer Wochen pro Jahr
    weeks_in_year: int = Field(2, ge=1, le=53,
        description="Buchbare Wochen pro Jahr")
    # Zimmerpreis pro Woche (nur informativ, wird nicht abgerechnet)
    room_fare: int = Field(500, ge=0,
        description="Zimmerpreis pro Woche")


# ─── BENUTZER + RECHTE ───

class UserDefinition(BaseModel):
    """Ein Concierge-Konto."""
    # Login-Name, z.B. "manu"
    name: str = Field(min_length=1)
    # Passwort im Klartext (Spielzeug-Sicherheit!)
    password: str
    # Darf dieser Benutzer Reservierungen anlegen?
    may_make_reservations: bool = False


class SecurityConfig(BaseModel):
    """Benutzerliste für Login und Berechtigungsprüfung."""
    users: list[UserDefinition] = Field(
        default_factory=list,
        description="Alle Concierge-Konten")

    @model_validator(mode='after')
    def validate_unique_names(self):
        """Prüfe dass jeder Login-Name nur einmal vorkommt."""
        seen: set[str] = set()
        for user in self.users:
            if user.name in seen:
                raise ValueError(f"Benutzer '{user.name}' ist doppelt definiert")
            seen.add(user.name)
        return self

    def get_user(self, name: str):
        """Gibt die Benutzerdefinition zurück oder None."""
        for user in self.users:
            if user.name == name:
                return user
        return None


# ─── PROTOKOLL ───

class AuditConfig(BaseModel):
    """Revisions-Protokoll (append-only Textdatei)."""
    # Pfad der Protokolldatei
    log_file: str = Field("Hotel.log",
        description="Protokolldatei für Reservierungsversuche")
    # Protokolleinträge zusätzlich über logging ausgeben
    echo_to_logger: bool = Field(False,
        description="Einträge zusätzlich ins Anwendungs-Log schreiben")


class LoggingConfig(BaseModel):
    """Anwendungs-Logging (Python logging)."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("WARNING",
        description="Log-Level")


# ─── GESAMT-CONFIG ───

class HotelConfig(BaseModel):
    """Gesamtkonfiguration des Hotels."""
    # Name des Hotels
    hotel_name: str = Field("Hotel Zur Post",
        description="Name des Hotels")
    # Zimmer und Wochenraster
    rooms: RoomConfig = Field(default_factory=RoomConfig)
    # Benutzer und Rechte
    security: SecurityConfig = Field(default_factory=SecurityConfig)
    # Revisions-Protokoll
    audit: AuditConfig = Field(default_factory=AuditConfig)
    # Anwendungs-Logging
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
