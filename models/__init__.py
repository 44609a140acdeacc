from models.errors import (
    HotelError,
    AlreadyBookedError,
    NoRoomAvailableError,
    NotAuthorizedError,
    AuthenticationError,
    UnknownUserError,
    WrongPasswordError,
)
from models.reservation import Reservation, QUEUED_ROOM_NUMBER
from models.room import Room

__all__ = [
    "HotelError",
    "AlreadyBookedError",
    "NoRoomAvailableError",
    "NotAuthorizedError",
    "AuthenticationError",
    "UnknownUserError",
    "WrongPasswordError",
    "Reservation",
    "QUEUED_ROOM_NUMBER",
    "Room",
]
