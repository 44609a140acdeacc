"""Export-Modul: Excel (openpyxl) für Reservierungen, Warteliste und Belegung."""

from export.excel_export import ExcelExporter

__all__ = ["ExcelExporter"]
