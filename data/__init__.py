"""Testdaten: reproduzierbare Reservierungsanfragen."""
