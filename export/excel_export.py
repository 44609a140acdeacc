"""Excel-Export für Reservierungen, Warteliste und Belegung (openpyxl)."""

from datetime import date
from pathlib import Path

from analysis.occupancy_report import OccupancyReport
from models.reservation import Reservation

COLORS: dict[str, str] = {
    "header": "4472C4",
    "full":   "FFCCCC",
    "queued": "FFFFB3",
}


def today_str() -> str:
    """Gibt das heutige Datum als DD.MM.YYYY zurück."""
    return date.today().strftime("%d.%m.%Y")


class ExcelExporter:
    """Exportiert den aktuellen Stand der Rezeption in eine Excel-Datei mit 3 Sheets."""

    COL_W = 14

    def __init__(self, reservations: list[Reservation],
                 waiting: list[Reservation], report: OccupancyReport):
        self.reservations = reservations
        self.waiting = waiting
        self.report = report

    # ─── Öffentliche API ──────────────────────────────────────────────────────

    def export(self, output_path: Path) -> None:
        """Erstellt die Excel-Datei mit allen Sheets."""
        from openpyxl import Workbook
        wb = Workbook()
        wb.remove(wb.active)   # Leeres Standard-Sheet entfernen

        self._sheet_reservierungen(wb)
        self._sheet_warteliste(wb)
        self._sheet_belegung(wb)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb.save(output_path)

    # ─── Styling-Hilfen ───────────────────────────────────────────────────────

    def _fill(self, hex_color: str):
        from openpyxl.styles import PatternFill
        return PatternFill(start_color=hex_color, end_color=hex_color, fill_type="solid")

    def _thin_border(self):
        from openpyxl.styles import Border, Side
        s = Side(border_style="thin", color="BBBBBB")
        return Border(left=s, right=s, top=s, bottom=s)

    def _header(self, ws, row: int, headers: list[str]) -> None:
        from openpyxl.styles import Font
        from openpyxl.utils import get_column_letter
        fill_h = self._fill(COLORS["header"])
        border = self._thin_border()
        for col, h in enumerate(headers, 1):
            c = ws.cell(row=row, column=col, value=h)
            c.fill = fill_h
            c.font = Font(bold=True, color="FFFFFF")
            c.border = border
            ws.column_dimensions[get_column_letter(col)].width = self.COL_W

    # ─── Sheets ───────────────────────────────────────────────────────────────

    def _sheet_reservierungen(self, wb) -> None:
        from openpyxl.styles import Font
        ws = wb.create_sheet(title="Reservierungen")
        ws.cell(row=1, column=1, value=self.report.hotel_name).font = Font(bold=True, size=14)
        ws.cell(row=2, column=1, value=f"Erstellt: {today_str()}")

        self._header(ws, 4, ["Zimmer", "Woche", "Name"])
        border = self._thin_border()
        for i, r in enumerate(self.reservations, start=5):
            ws.cell(row=i, column=1, value=r.room_number).border = border
            ws.cell(row=i, column=2, value=r.week).border = border
            ws.cell(row=i, column=3, value=r.name).border = border

    def _sheet_warteliste(self, wb) -> None:
        ws = wb.create_sheet(title="Warteliste")
        self._header(ws, 1, ["Position", "Woche", "Name"])
        border = self._thin_border()
        fill_q = self._fill(COLORS["queued"])
        for pos, r in enumerate(self.waiting, start=1):
            row = pos + 1
            for col, value in enumerate((pos, r.week, r.name), 1):
                c = ws.cell(row=row, column=col, value=value)
                c.border = border
                c.fill = fill_q

    def _sheet_belegung(self, wb) -> None:
        ws = wb.create_sheet(title="Belegung")
        self._header(ws, 1, ["Woche", "Belegt", "Frei", "Warteliste", "Auslastung"])
        border = self._thin_border()
        fill_full = self._fill(COLORS["full"])
        for i, w in enumerate(self.report.weeks, start=2):
            values = (w.week, w.booked, w.free, w.queued, round(w.utilisation, 3))
            for col, value in enumerate(values, 1):
                c = ws.cell(row=i, column=col, value=value)
                c.border = border
                if w.free == 0:
                    c.fill = fill_full
            ws.cell(row=i, column=5).number_format = "0%"
