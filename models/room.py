"""Datenmodell für ein Hotelzimmer (Pydantic v2)."""

from typing import ClassVar, Optional

from pydantic import Field
from rich.console import Console

from export.console_output import emit_line
from models.record import Record


class Room(Record):
    """Zimmer mit Belegungsstatus; ein freies Zimmer meldet sich per Alarm."""

    KIND: ClassVar[str] = "room"
    AVAILABLE_ALERT: ClassVar[str] = "Room is available for booking."

    is_occupied: bool = Field(frozen=True)

    def __init__(self, name: str, id: int, is_occupied: bool) -> None:
        super().__init__(name=name, id=id, is_occupied=is_occupied)

    @property
    def status(self) -> str:
        return "occupied" if self.is_occupied else "available"

    def info_lines(self) -> list[str]:
        return super().info_lines() + [f"Occupied: {self.is_occupied}"]

    def perform_action(self, console: Optional[Console] = None) -> None:
        emit_line(console, f"Room {self.name} (ID: {self.id}) is currently {self.status}.")
        if not self.is_occupied:
            self._trigger_alert(self.AVAILABLE_ALERT)
