"""Tests für die Interceptor-Kette: Reihenfolge, Einzel-Interceptoren, Rezeption."""

import itertools
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from booking.allocator import RoomAllocator
from booking.audit import AuditLogger, FileAuditSink, MemoryAuditSink
from booking.authorization import AuthorizationGuard
from booking.chain import ChainConfigurationError, InterceptionChain, Interceptor
from booking.desk import ReservationDesk
from booking.outcome import CallerContext, ReservationOutcome
from booking.queue import OverflowQueue, WaitingList
from booking.security import SecurityManager
from config.defaults import default_security
from models.errors import AlreadyBookedError, NoRoomAvailableError, NotAuthorizedError
from models.room import Room


MANU = CallerContext(user="manu")   # darf reservieren
BABS = CallerContext(user="babs")   # darf nicht


# ─── Hilfsfunktionen ──────────────────────────────────────────────────────────

class StubHandler:
    """Nächster Handler mit festem Ergebnis oder Fehler; zählt Aufrufe."""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def handle(self, context, week, name):
        self.calls.append((context, week, name))
        if self.error is not None:
            raise self.error
        return self.result


class FixedIdentity:
    def __init__(self, allowed: bool):
        self.allowed = allowed
        self.asked = []

    def may_book(self, user):
        self.asked.append(user)
        return self.allowed


def _make_desk(rooms: int = 2, weeks: int = 2, **kwargs) -> ReservationDesk:
    return ReservationDesk(
        allocator=RoomAllocator(number_of_rooms=rooms, weeks_in_year=weeks),
        identity=SecurityManager(default_security()),
        audit_sink=MemoryAuditSink(),
        **kwargs,
    )


def _bound(room_number: int = 0, week: int = 0, name: str = "fred"):
    return ReservationOutcome.bound(Room(room_number), week, name)


# ─── KETTEN-REIHENFOLGE ───────────────────────────────────────────────────────

class TestInterceptionChain:
    @pytest.mark.parametrize("order", list(itertools.permutations(range(3))))
    def test_order_independent_of_registration(self, order):
        """Egal in welcher Reihenfolge registriert wird: Audit außen, Queue innen."""
        layers = [
            AuditLogger(MemoryAuditSink()),
            AuthorizationGuard(FixedIdentity(True)),
            OverflowQueue(WaitingList()),
        ]
        chain = InterceptionChain(StubHandler(result=_bound()))
        for i in order:
            chain.register(layers[i])
        types = [type(l) for l in chain.order()]
        assert types == [OverflowQueue, AuthorizationGuard, AuditLogger]

    def test_build_returns_outermost(self):
        audit = AuditLogger(MemoryAuditSink())
        chain = InterceptionChain(StubHandler(result=_bound()))
        chain.register(OverflowQueue(WaitingList()))
        chain.register(audit)
        chain.register(AuthorizationGuard(FixedIdentity(True)))
        assert chain.build() is audit

    def test_empty_chain_is_core(self):
        core = StubHandler(result=_bound())
        assert InterceptionChain(core).build() is core

    def test_missing_dependency_raises(self):
        """AuditLogger ohne AuthorizationGuard lässt sich nicht einordnen."""
        chain = InterceptionChain(StubHandler())
        chain.register(AuditLogger(MemoryAuditSink()))
        with pytest.raises(ChainConfigurationError):
            chain.build()

    def test_duplicate_registration_raises(self):
        chain = InterceptionChain(StubHandler())
        chain.register(OverflowQueue(WaitingList()))
        with pytest.raises(ChainConfigurationError):
            chain.register(OverflowQueue(WaitingList()))

    def test_cycle_raises(self):
        class First(Interceptor):
            pass

        class Second(Interceptor):
            wraps = (First,)

        First.wraps = (Second,)

        chain = InterceptionChain(StubHandler())
        chain.register(First())
        chain.register(Second())
        with pytest.raises(ChainConfigurationError, match="Zyklisch"):
            chain.order()

    def test_unbound_interceptor_raises(self):
        """Ein Interceptor ohne nächsten Handler ist ein Konfigurationsfehler."""
        queue = OverflowQueue(WaitingList())
        with pytest.raises(ChainConfigurationError):
            queue.handle(MANU, 0, "fred")


# ─── AUTHORIZATION GUARD ──────────────────────────────────────────────────────

class TestAuthorizationGuard:
    def test_unauthorized_never_delegates(self):
        nxt = StubHandler(result=_bound())
        guard = AuthorizationGuard(FixedIdentity(False)).bind(nxt)
        with pytest.raises(NotAuthorizedError) as exc_info:
            guard.handle(BABS, 0, "eve")
        assert nxt.calls == []
        assert exc_info.value.user == "babs"
        assert exc_info.value.name == "eve"

    def test_authorized_delegates_verbatim(self):
        outcome = _bound()
        nxt = StubHandler(result=outcome)
        identity = FixedIdentity(True)
        guard = AuthorizationGuard(identity).bind(nxt)
        assert guard.handle(MANU, 1, "fred") is outcome
        assert nxt.calls == [(MANU, 1, "fred")]
        assert identity.asked == ["manu"]

    def test_failure_of_next_propagates(self):
        guard = AuthorizationGuard(FixedIdentity(True)).bind(
            StubHandler(error=NoRoomAvailableError(0, "fred"))
        )
        with pytest.raises(NoRoomAvailableError):
            guard.handle(MANU, 0, "fred")


# ─── OVERFLOW QUEUE ───────────────────────────────────────────────────────────

class TestOverflowQueue:
    def test_no_room_is_queued(self):
        """NoRoomAvailableError → Ergebnis 'Warteliste', genau ein Eintrag."""
        waiting = WaitingList()
        queue = OverflowQueue(waiting).bind(
            StubHandler(error=NoRoomAvailableError(1, "carl"))
        )
        outcome = queue.handle(MANU, 1, "carl")
        assert outcome.is_queued
        assert outcome.room_number == -1
        assert len(waiting) == 1
        entry = waiting.waiting[0]
        assert (entry.week, entry.name, entry.room_number) == (1, "carl", -1)

    def test_success_passes_through(self):
        waiting = WaitingList()
        outcome = _bound()
        queue = OverflowQueue(waiting).bind(StubHandler(result=outcome))
        assert queue.handle(MANU, 0, "fred") is outcome
        assert len(waiting) == 0

    def test_other_errors_pass_through(self):
        waiting = WaitingList()
        queue = OverflowQueue(waiting).bind(
            StubHandler(error=NotAuthorizedError("babs"))
        )
        with pytest.raises(NotAuthorizedError):
            queue.handle(BABS, 0, "eve")
        assert len(waiting) == 0

    def test_waiting_list_keeps_arrival_order(self):
        waiting = WaitingList()
        queue = OverflowQueue(waiting).bind(
            StubHandler(error=NoRoomAvailableError(0, "x"))
        )
        for name in ["a", "b", "c"]:
            queue.handle(MANU, 0, name)
        assert [r.name for r in waiting.waiting] == ["a", "b", "c"]
        assert len(waiting.for_week(0)) == 3
        assert waiting.for_week(1) == []


# ─── AUDIT LOGGER ─────────────────────────────────────────────────────────────

class TestAuditLogger:
    def test_success_writes_one_record(self):
        sink = MemoryAuditSink()
        audit = AuditLogger(sink).bind(StubHandler(result=_bound(1, 0, "bob")))
        audit.handle(MANU, 0, "bob")
        assert sink.records == ["Reservation: room=1, week=0, name=bob (User manu)"]

    def test_queued_writes_failed_record(self):
        sink = MemoryAuditSink()
        audit = AuditLogger(sink).bind(
            StubHandler(result=ReservationOutcome.queued(0, "carl"))
        )
        outcome = audit.handle(MANU, 0, "carl")
        assert outcome.is_queued
        assert sink.records == ["Reservation for week 0, name carl failed (User manu)"]

    def test_rejection_is_recorded_and_reraised(self):
        sink = MemoryAuditSink()
        error = NotAuthorizedError("babs", 0, "eve")
        audit = AuditLogger(sink).bind(StubHandler(error=error))
        with pytest.raises(NotAuthorizedError) as exc_info:
            audit.handle(BABS, 0, "eve")
        assert exc_info.value is error
        assert len(sink) == 1
        assert "babs" in sink.records[0]
        assert "eve" in sink.records[0]
        assert "without sufficient privileges" in sink.records[0]

    def test_record_written_before_return(self):
        """Während der Delegation ist das Protokoll noch leer, danach genau ein Eintrag."""
        sink = MemoryAuditSink()
        seen_during_call = []

        class Probe:
            def handle(self, context, week, name):
                seen_during_call.append(len(sink))
                return _bound()

        AuditLogger(sink).bind(Probe()).handle(MANU, 0, "fred")
        assert seen_during_call == [0]
        assert len(sink) == 1

    def test_unexpected_errors_not_recorded(self):
        """AlreadyBookedError ist ein Defekt und läuft ungeloggt durch."""
        sink = MemoryAuditSink()
        audit = AuditLogger(sink).bind(StubHandler(error=AlreadyBookedError(0, 0)))
        with pytest.raises(AlreadyBookedError):
            audit.handle(MANU, 0, "fred")
        assert len(sink) == 0

    def test_file_sink_appends_lines(self, tmp_path):
        sink = FileAuditSink(tmp_path / "logs" / "Hotel.log")
        sink.append("erste Zeile")
        sink.append("zweite Zeile\n")
        assert sink.read_lines() == ["erste Zeile", "zweite Zeile"]

    def test_file_sink_missing_file_reads_empty(self, tmp_path):
        assert FileAuditSink(tmp_path / "fehlt.log").read_lines() == []


# ─── REZEPTION (komplette Kette) ──────────────────────────────────────────────

class TestReservationDesk:
    def test_layer_order(self):
        assert _make_desk().layer_names == [
            "AuditLogger", "AuthorizationGuard", "OverflowQueue",
        ]

    def test_two_rooms_two_weeks_scenario(self):
        """fred → 0, bob → 1, carl → Warteliste, dora (Woche 1) → 0."""
        desk = _make_desk()
        assert desk.reserve(MANU, 0, "fred").room_number == 0
        assert desk.reserve(MANU, 0, "bob").room_number == 1

        before = desk.all_reservations()
        carl = desk.reserve(MANU, 0, "carl")
        assert carl.is_queued
        assert len(desk.waiting()) == 1
        assert desk.all_reservations() == before

        assert desk.reserve(MANU, 1, "dora").room_number == 0

    def test_unauthorized_caller_changes_nothing(self):
        """eve über babs: NotAuthorized, kein Zimmer, keine Warteliste, ein Protokolleintrag."""
        desk = _make_desk()
        with pytest.raises(NotAuthorizedError):
            desk.reserve(BABS, 0, "eve")
        assert desk.all_reservations() == []
        assert desk.waiting() == []
        records = desk.audit_sink.records
        assert len(records) == 1
        assert "eve" in records[0]
        assert "privileges" in records[0]

    def test_unauthorized_when_full_does_not_queue(self):
        desk = _make_desk(rooms=1, weeks=1)
        desk.reserve(MANU, 0, "fred")
        with pytest.raises(NotAuthorizedError):
            desk.reserve(BABS, 0, "eve")
        assert desk.waiting() == []

    def test_unknown_user_is_not_authorized(self):
        desk = _make_desk()
        with pytest.raises(NotAuthorizedError):
            desk.reserve(CallerContext(user="mallory"), 0, "x")

    def test_exhaust_then_overflow(self):
        """N Buchungen füllen die Woche, die N+1-te landet genau einmal in der Warteliste."""
        n = 4
        desk = _make_desk(rooms=n, weeks=3)
        rooms = [desk.reserve(MANU, 2, f"gast{i}").room_number for i in range(n)]
        assert rooms == [0, 1, 2, 3]

        outcome = desk.reserve(MANU, 2, "zuviel")
        assert outcome.is_queued
        assert len(desk.waiting()) == 1
        assert len(desk.all_reservations()) == n

    def test_every_attempt_audited_once(self):
        desk = _make_desk(rooms=1, weeks=1)
        desk.reserve(MANU, 0, "fred")
        desk.reserve(MANU, 0, "bob")
        with pytest.raises(NotAuthorizedError):
            desk.reserve(BABS, 0, "eve")
        assert len(desk.audit_sink.records) == 3

    def test_reservation_count_matches_successes(self):
        """k erfolgreiche Buchungen → k Reservierungen, keine Duplikate, passende Paare."""
        desk = _make_desk(rooms=3, weeks=4)
        created = []
        for i, week in enumerate([0, 1, 1, 3, 0, 2, 1]):
            outcome = desk.reserve(MANU, week, f"g{i}")
            assert not outcome.is_queued
            created.append((outcome.room_number, week, f"g{i}"))
        listed = [(r.room_number, r.week, r.name) for r in desk.all_reservations()]
        assert sorted(listed) == sorted(created)
        assert len({(room, week) for room, week, _ in listed}) == len(listed)

    def test_reads_idempotent(self):
        desk = _make_desk()
        desk.reserve(MANU, 0, "fred")
        assert desk.find_free_room(0) is desk.find_free_room(0)
        assert desk.all_reservations() == desk.all_reservations()
        assert desk.waiting() == desk.waiting()

    def test_already_booked_never_surfaces(self):
        """Über die Kette tritt AlreadyBookedError nie auf."""
        desk = _make_desk(rooms=2, weeks=2)
        for i in range(10):
            outcome = desk.reserve(MANU, i % 2, f"g{i}")
            assert isinstance(outcome, ReservationOutcome)
        assert len(desk.all_reservations()) == 4
        assert len(desk.waiting()) == 6

    def test_extra_layer_is_placed_by_declaration(self):
        """Ein zusätzlicher Interceptor, der AuditLogger umhüllt, liegt ganz außen."""
        calls = []

        class Recorder(Interceptor):
            wraps = (AuditLogger,)

            def handle(self, context, week, name):
                calls.append(name)
                return self.next.handle(context, week, name)

        desk = _make_desk(extra_layers=[Recorder()])
        assert desk.layer_names[0] == "Recorder"
        desk.reserve(MANU, 0, "fred")
        assert calls == ["fred"]

    def test_concurrent_reservations_serialized(self):
        """Parallele Aufrufer: nie zwei Gäste im selben Zimmer, jeder Überlauf genau einmal."""
        rooms, requests = 5, 60
        desk = _make_desk(rooms=rooms, weeks=1)
        barrier = threading.Barrier(8)

        def worker(i):
            if i < 8:
                barrier.wait()
            return desk.reserve(MANU, 0, f"g{i}")

        with ThreadPoolExecutor(max_workers=8) as pool:
            outcomes = list(pool.map(worker, range(requests)))

        bound = [o.room_number for o in outcomes if not o.is_queued]
        assert sorted(bound) == list(range(rooms))
        assert len(desk.waiting()) == requests - rooms
        assert len(desk.audit_sink.records) == requests

    def test_from_config_uses_file_sink(self, tmp_path):
        from config.defaults import default_hotel_config
        from config.schema import AuditConfig

        config = default_hotel_config().model_copy(
            update={"audit": AuditConfig(log_file=str(tmp_path / "Hotel.log"))}
        )
        desk = ReservationDesk.from_config(config)
        desk.reserve(MANU, 0, "fred")
        lines = (tmp_path / "Hotel.log").read_text(encoding="utf-8").splitlines()
        assert lines == ["Reservation: room=0, week=0, name=fred (User manu)"]
