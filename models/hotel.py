"""Hotel-Register: geordnete Sammlung aller Datensätze plus Alarm-Sammelstelle."""

import logging
from typing import Iterator, Optional

from rich.console import Console

from export.console_output import emit_line, get_console
from models.record import Record

logger = logging.getLogger(__name__)


class Hotel:
    """Hält Datensätze in Einfügereihenfolge und gibt deren Alarme aus.

    Es gibt keine Duplikatprüfung: wird dieselbe Referenz zweimal eingefügt,
    abonniert das Register sie auch zweimal und jeder Alarm erscheint doppelt.
    Das zu vermeiden ist Sache des Aufrufers.
    """

    RECORDS_HEADING = "=== Hotel Records ==="
    ACTIONS_HEADING = "=== Performing Hotel Actions ==="

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = get_console(console)
        self._entities: list[Record] = []

    @property
    def entities(self) -> tuple[Record, ...]:
        return tuple(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._entities)

    def add_entity(self, record: Record) -> None:
        """Hängt ``record`` an und abonniert dessen Alarm-Kanal."""
        self._entities.append(record)
        record.subscribe(self.handle_alert)
        logger.info(f"Datensatz aufgenommen: {record.KIND} {record.name} (ID {record.id})")

    def handle_alert(self, message: str) -> None:
        """Gibt einen Alarm unverändert aus (keine Filterung, kein Routing)."""
        emit_line(self.console, message)

    def show_all(self) -> None:
        """Anzeige aller Datensätze, jeweils gefolgt von einer Leerzeile."""
        emit_line(self.console)
        emit_line(self.console, self.RECORDS_HEADING)
        for record in self._entities:
            record.display_info(self.console)
            emit_line(self.console)

    def perform_all_actions(self) -> None:
        """Führt alle Aktionen aus; Alarme erscheinen direkt nach ihrer Aktion."""
        emit_line(self.console)
        emit_line(self.console, self.ACTIONS_HEADING)
        for record in self._entities:
            record.perform_action(self.console)
