"""Prozessweiter Zähler aller jemals erzeugten Datensätze."""

import threading


class RecordStatistics:
    """Zählt erfolgreich erzeugte Datensätze. Kein Reset, kein Dekrement."""

    def __init__(self) -> None:
        self._total = 0
        self._lock = threading.Lock()

    def increment_total(self) -> None:
        with self._lock:
            self._total += 1

    @property
    def total_entities(self) -> int:
        return self._total


# Einzige Instanz pro Prozess
_STATISTICS = RecordStatistics()


def increment_total() -> None:
    """Erhöht den Zähler um genau 1 (einmal pro erfolgreicher Erzeugung)."""
    _STATISTICS.increment_total()


def total_entities() -> int:
    """Aktueller Stand des Zählers."""
    return _STATISTICS.total_entities
