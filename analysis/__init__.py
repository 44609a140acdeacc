"""Auswertungen über den Reservierungsstand."""
