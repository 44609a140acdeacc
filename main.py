"""Hotel-Reservierung — Haupt-CLI.

Verwendung:
  python main.py config init              Standard-Konfiguration anlegen
  python main.py config show              Konfiguration anzeigen
  python main.py users                    Benutzer und Rechte anzeigen
  python main.py session                  Login + Rezeptions-Dialog
  python main.py simulate                 Zufällige Anfragen durch die Kette schicken
  python main.py log                      Revisions-Protokoll anzeigen
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

console = Console()


def _load_config():
    """Lädt die Konfiguration (Standardwerte ohne Datei) oder bricht ab."""
    from config.manager import ConfigManager
    mgr = ConfigManager()
    try:
        return mgr, mgr.load_or_default()
    except ValueError as e:
        console.print(f"[red bold]Konfiguration ungültig:[/red bold]\n{e}")
        sys.exit(1)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anlegen oder anzeigen."""


@cmd_config.command("init")
@click.option("--force", is_flag=True, default=False,
              help="Bestehende Konfiguration überschreiben.")
def config_init(force: bool):
    """Schreibt die Standard-Konfiguration als YAML."""
    from config.defaults import default_hotel_config
    from config.manager import ConfigManager

    mgr = ConfigManager()
    if not mgr.first_run_check() and not force:
        console.print(
            f"[yellow]Konfiguration existiert bereits: {mgr.DEFAULT_CONFIG}[/yellow]\n"
            "Mit [bold]--force[/bold] überschreiben."
        )
        return
    mgr.save(default_hotel_config())


@cmd_config.command("show")
def config_show():
    """Zeigt die aktuelle Konfiguration an."""
    mgr, config = _load_config()
    source = "Standardwerte" if mgr.first_run_check() else str(mgr.DEFAULT_CONFIG)

    rc = config.rooms
    console.print(Panel(
        f"[bold]{config.hotel_name}[/bold]  |  "
        f"{rc.number_of_rooms} Zimmer  |  {rc.weeks_in_year} Wochen  |  "
        f"{rc.room_fare} pro Woche",
        title=f"Hotelkonfiguration ({source})",
        border_style="cyan",
    ))
    console.print(
        f"[bold]Protokoll:[/bold] {config.audit.log_file}  |  "
        f"[bold]Log-Level:[/bold] {config.logging.level}"
    )


# ─── USERS ────────────────────────────────────────────────────────────────────

@click.command("users")
def cmd_users():
    """Listet alle Benutzer und ihr Reservierungsrecht auf."""
    _, config = _load_config()
    table = Table(title="Benutzer", box=box.ROUNDED)
    table.add_column("Login", style="bold")
    table.add_column("Darf reservieren")
    for u in config.security.users:
        table.add_row(u.name, "[green]ja[/green]" if u.may_make_reservations
                      else "[red]nein[/red]")
    console.print(table)


# ─── SESSION ──────────────────────────────────────────────────────────────────

@click.command("session")
@click.option("--user", "-u", default=None, help="Login-Name (sonst Abfrage).")
@click.option("--password", "-p", default=None, help="Passwort (sonst Abfrage).")
def cmd_session(user: Optional[str], password: Optional[str]):
    """Login und interaktiver Rezeptions-Dialog (r, l, q, ?, .)."""
    from booking.audit import FileAuditSink
    from booking.desk import ReservationDesk
    from booking.security import SecurityManager
    from models.errors import AuthenticationError
    from ui.dispatcher import CommandDispatcher
    from ui.login import interactive_login

    _, config = _load_config()
    _setup_logging(config.logging.level)

    sink = FileAuditSink(config.audit.log_file)
    sink.ensure_exists()
    desk = ReservationDesk.from_config(config, audit_sink=sink)
    security = SecurityManager(config.security)

    if user is not None and password is not None:
        try:
            context = security.login(user, password)
        except AuthenticationError as e:
            console.print(f"[red bold]Login fehlgeschlagen:[/red bold] {e}")
            sys.exit(1)
    else:
        context = interactive_login(security, console)

    console.print(Panel(
        f"[bold]{config.hotel_name}[/bold] – angemeldet als [bold]{context.user}[/bold]",
        border_style="cyan",
    ))
    CommandDispatcher(desk, context, console).run()


# ─── SIMULATE ─────────────────────────────────────────────────────────────────

@click.command("simulate")
@click.option("--seed", default=42, help="Zufalls-Seed für reproduzierbare Anfragen.")
@click.option("--requests", "count", default=6, help="Anzahl Anfragen.")
@click.option("--user", "-u", default="manu", help="Benutzer, unter dem gebucht wird.")
@click.option("--export", "export_path", default=None,
              type=click.Path(dir_okay=False, path_type=Path),
              help="Ergebnis als Excel speichern.")
@click.option("--audit-file", is_flag=True, default=False,
              help="In die konfigurierte Protokolldatei schreiben (sonst nur im Speicher).")
def cmd_simulate(seed: int, count: int, user: str,
                 export_path: Optional[Path], audit_file: bool):
    """Schickt zufällige Anfragen durch die komplette Kette."""
    from analysis.occupancy_report import OccupancyAnalyzer
    from booking.audit import MemoryAuditSink
    from booking.desk import ReservationDesk
    from booking.outcome import CallerContext
    from data.fake_requests import FakeRequestGenerator
    from models.errors import NotAuthorizedError
    from ui.renderer import queue_table, reservations_table

    _, config = _load_config()
    _setup_logging(config.logging.level)

    sink = None if audit_file else MemoryAuditSink()
    desk = ReservationDesk.from_config(config, audit_sink=sink)
    context = CallerContext(user=user)

    requests = FakeRequestGenerator(config, seed=seed).generate(count)
    console.print(f"[bold]{len(requests)} Anfragen als {user}[/bold] "
                  f"[dim]({' → '.join(desk.layer_names)})[/dim]")

    rejected = 0
    for req in requests:
        try:
            outcome = desk.reserve(context, req.week, req.name)
        except NotAuthorizedError:
            rejected += 1
            continue
        if outcome.is_queued:
            console.print(f"  Woche {req.week:2d}  {req.name:15s} [yellow]→ Warteliste[/yellow]")
        else:
            console.print(f"  Woche {req.week:2d}  {req.name:15s} "
                          f"[green]→ Zimmer {outcome.room_number}[/green]")
    if rejected:
        console.print(f"[red]{rejected} Anfragen abgelehnt: {user} darf nicht reservieren.[/red]")

    console.print(reservations_table(desk.all_reservations()))
    console.print(queue_table(desk.waiting()))

    report = OccupancyAnalyzer().analyze(desk, hotel_name=config.hotel_name)
    report.print_rich()

    if export_path is not None:
        from export.excel_export import ExcelExporter
        ExcelExporter(desk.all_reservations(), desk.waiting(), report).export(export_path)
        console.print(f"[green]✓[/green] Excel gespeichert: {export_path}")


# ─── LOG ──────────────────────────────────────────────────────────────────────

@click.command("log")
@click.option("--tail", "-n", default=20, help="Nur die letzten N Einträge.")
def cmd_log(tail: int):
    """Zeigt das Revisions-Protokoll an."""
    from booking.audit import FileAuditSink

    _, config = _load_config()
    sink = FileAuditSink(config.audit.log_file)
    lines = sink.read_lines()
    if not lines:
        console.print(f"[dim]Protokoll leer oder nicht vorhanden: {sink.path}[/dim]")
        return
    for line in (lines[-tail:] if tail > 0 else lines):
        style = "red" if line.startswith("***") else None
        console.print(line, style=style, markup=False, highlight=False)


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
def cli():
    """Hotel-Reservierung mit Berechtigungen, Warteliste und Protokoll.

    Starten Sie mit: python main.py session
    """


def main():
    """Einstiegspunkt. Ohne Argumente wird direkt die Sitzung gestartet."""
    if len(sys.argv) == 1:
        sys.argv.append("session")
    cli()


# Befehle registrieren
cli.add_command(cmd_config)
cli.add_command(cmd_users)
cli.add_command(cmd_session)
cli.add_command(cmd_simulate)
cli.add_command(cmd_log)


if __name__ == "__main__":
    main()
