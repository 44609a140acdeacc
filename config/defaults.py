"""Standardwerte für die Hotel-Konfiguration."""

from config.schema import (
    AuditConfig,
    HotelConfig,
    LoggingConfig,
    RoomConfig,
    SecurityConfig,
    UserDefinition,
)

# 2 Zimmer und 2 Wochen sind für Probeläufe schnell ausgeschöpft.
# Realistischer wären 12 Zimmer und 52 Wochen.
NUMBER_OF_ROOMS = 2
WEEKS_IN_YEAR = 2

# Nur der Vollständigkeit halber, wird nirgends abgerechnet
ROOM_FARE = 500

DEFAULT_LOG_FILE = "Hotel.log"


def default_rooms() -> RoomConfig:
    """Standard-Zimmerkonfiguration (2 Zimmer × 2 Wochen)."""
    return RoomConfig(
        number_of_rooms=NUMBER_OF_ROOMS,
        weeks_in_year=WEEKS_IN_YEAR,
        room_fare=ROOM_FARE,
    )


def default_security() -> SecurityConfig:
    """Die beiden Concierges des Hotels.

    babs  – Auszubildende, darf KEINE Reservierungen anlegen
    manu  – Managerin, darf Reservierungen anlegen

    Passwörter im Klartext: Spielzeug, nicht nachmachen.
    """
    return SecurityConfig(users=[
        UserDefinition(name="babs", password="sbab", may_make_reservations=False),
        UserDefinition(name="manu", password="1234", may_make_reservations=True),
    ])


def default_hotel_config() -> HotelConfig:
    """Vollständige Standard-Konfiguration."""
    return HotelConfig(
        hotel_name="Hotel Zur Post",
        rooms=default_rooms(),
        security=default_security(),
        audit=AuditConfig(log_file=DEFAULT_LOG_FILE),
        logging=LoggingConfig(level="WARNING"),
    )
