"""Reservierungs-Modul: Zimmer-Allokator und Interceptor-Kette."""

from .outcome import CallerContext, ReservationOutcome
from .chain import ChainConfigurationError, InterceptionChain, Interceptor
from .allocator import RoomAllocator
from .security import SecurityManager
from .queue import OverflowQueue, WaitingList
from .authorization import AuthorizationGuard
from .audit import AuditLogger, FileAuditSink, MemoryAuditSink
from .desk import ReservationDesk

__all__ = [
    "CallerContext",
    "ReservationOutcome",
    "ChainConfigurationError",
    "InterceptionChain",
    "Interceptor",
    "RoomAllocator",
    "SecurityManager",
    "OverflowQueue",
    "WaitingList",
    "AuthorizationGuard",
    "AuditLogger",
    "FileAuditSink",
    "MemoryAuditSink",
    "ReservationDesk",
]
