"""Rezeptions-Dialog: Login, Befehlsverarbeitung und Rich-Tabellen."""
